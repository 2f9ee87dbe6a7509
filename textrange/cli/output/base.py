"""
Output adapter base classes.

Defines the interface for output adapters.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from pathlib import Path

    from textrange.core.encoding.labels import EncodingLabel
    from textrange.core.encoding.models import ByteStats, ByteWindow, DecodeResult


class OutputFormat(Enum):
    """Supported output formats."""

    TERMINAL = "terminal"
    JSON = "json"


class OutputAdapter(ABC):
    """Base class for output adapters."""

    format: OutputFormat

    def __init__(self, stream: TextIO | None = None, color: bool = True):
        self.stream = stream or sys.stdout
        self.color = color

    @abstractmethod
    def render_detection(
        self,
        path: Path,
        label: EncodingLabel,
        stats: ByteStats | None = None,
    ) -> str:
        """Render a detected encoding, optionally with sample statistics."""
        pass

    @abstractmethod
    def render_decode(self, result: DecodeResult) -> str:
        """Render a decoded window."""
        pass

    @abstractmethod
    def render_score(self, path: Path, label: EncodingLabel, score: float) -> str:
        """Render the quality score of a sample."""
        pass

    @abstractmethod
    def render_window(self, window: ByteWindow, file_size: int) -> str:
        """Render a planned byte window."""
        pass

    def write(self, content: str) -> None:
        """Write content to stream."""
        self.stream.write(content)
        if not content.endswith("\n"):
            self.stream.write("\n")
        self.stream.flush()


def get_output_adapter(
    format: OutputFormat | str,
    stream: TextIO | None = None,
    color: bool = True,
) -> OutputAdapter:
    """Get an output adapter by format."""
    if isinstance(format, str):
        format = OutputFormat(format)

    if format == OutputFormat.TERMINAL:
        from textrange.cli.output.terminal import TerminalOutput

        return TerminalOutput(stream=stream, color=color)
    elif format == OutputFormat.JSON:
        from textrange.cli.output.json import JsonOutput

        return JsonOutput(stream=stream, color=color)
    else:
        raise ValueError(f"Unknown output format: {format}")
