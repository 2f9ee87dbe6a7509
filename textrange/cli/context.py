"""
CLI context and configuration.

Manages CLI state, exit codes, and logging setup.
"""

from __future__ import annotations

import logging
from enum import IntEnum

from pydantic import BaseModel, Field

from textrange.core.encoding.settings import DEFAULT_SETTINGS, EngineSettings


class ExitCode(IntEnum):
    """CLI exit codes following Unix conventions."""

    SUCCESS = 0  # Decoded normally
    DEGRADED = 1  # Nothing decoded, output is a hex dump
    FATAL = 2  # I/O failure
    USAGE = 64  # Command line usage error
    CONFIG = 78  # Configuration error


class CliContext(BaseModel):
    """Shared context for CLI commands."""

    format: str = Field(default="terminal")
    color: bool = Field(default=True)
    verbose: bool = Field(default=False)
    settings: EngineSettings = Field(default=DEFAULT_SETTINGS)

    model_config = {"frozen": False}


def configure_logging(verbose: bool = False) -> None:
    """
    Show engine debug logging on stderr.

    Without --verbose nothing is configured and warnings reach stderr
    through logging's last-resort handler.
    """
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def exit_code_for(degraded: bool) -> ExitCode:
    """Exit code for a completed read."""
    return ExitCode.DEGRADED if degraded else ExitCode.SUCCESS
