"""
Output adapters for CLI.

Provides different output formats: terminal, JSON.
"""

from textrange.cli.output.base import OutputAdapter, OutputFormat, get_output_adapter
from textrange.cli.output.json import JsonOutput
from textrange.cli.output.terminal import TerminalOutput

__all__ = [
    "JsonOutput",
    "OutputAdapter",
    "OutputFormat",
    "TerminalOutput",
    "get_output_adapter",
]
