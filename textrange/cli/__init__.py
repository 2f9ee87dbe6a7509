"""
CLI for textrange.

Command-line interface for detecting encodings and reading byte windows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from textrange.cli.context import CliContext, ExitCode

if TYPE_CHECKING:
    from typer import Typer

    app: Typer


def __getattr__(name: str) -> Any:
    if name == "app":
        from textrange.cli.main import app as _app

        return _app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "CliContext",
    "ExitCode",
    "app",
]
