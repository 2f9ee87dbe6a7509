"""
Terminal output adapter.

Renders engine results for humans, with ANSI colors on a TTY.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from textrange.cli.output.base import OutputAdapter, OutputFormat

if TYPE_CHECKING:
    from pathlib import Path

    from textrange.core.encoding.labels import EncodingLabel
    from textrange.core.encoding.models import ByteStats, ByteWindow, DecodeResult


# Check if Unicode is supported
def _supports_unicode() -> bool:
    """Check if terminal supports Unicode."""
    try:
        "\u26a0".encode(sys.stdout.encoding or "utf-8")
        return True
    except (UnicodeEncodeError, LookupError):
        return False


WARN_SYMBOL_UNICODE = "\u26a0"
WARN_SYMBOL_ASCII = "!"

GARBLED_NOTICE = "content may be garbled: no encoding decoded this range, showing raw hex"


class TerminalOutput(OutputAdapter):
    """Terminal output with ANSI colors."""

    format = OutputFormat.TERMINAL

    def __init__(self, stream: TextIO | None = None, color: bool = True):
        super().__init__(stream=stream, color=color)
        self._use_color = color and self._is_tty()
        self._warn_symbol = WARN_SYMBOL_UNICODE if _supports_unicode() else WARN_SYMBOL_ASCII

    def _is_tty(self) -> bool:
        """Check if output is a TTY."""
        return hasattr(self.stream, "isatty") and self.stream.isatty()

    def render_detection(
        self,
        path: "Path",
        label: "EncodingLabel",
        stats: "ByteStats | None" = None,
    ) -> str:
        """Render detected encoding."""
        lines = [f"{path}: {self._style(label.value, 'bold')}"]

        if stats is not None:
            lines.append(f"  sample bytes:    {stats.total_bytes}")
            lines.append(f"  high bytes:      {stats.high_bytes} ({stats.high_byte_ratio:.1%})")
            lines.append(f"  GBK pairs:       {stats.gbk_pairs} ({stats.pair_ratio:.1%})")

        return "\n".join(lines)

    def render_decode(self, result: "DecodeResult") -> str:
        """Render decoded text; the text itself is printed unstyled."""
        return result.text

    def render_decode_header(self, result: "DecodeResult") -> str:
        """Render the one-line summary shown on stderr before the text."""
        window = f"{result.window} " if result.window is not None else ""
        header = f"{window}{result.encoding_used.value} (quality {result.score:.2f})"

        if result.is_degraded:
            return self._style(f"{self._warn_symbol} {header}: {GARBLED_NOTICE}", "yellow")
        return self._style(header, "dim")

    def render_score(self, path: "Path", label: "EncodingLabel", score: float) -> str:
        """Render a quality score."""
        color = "green" if score > 0.5 else "red"
        return f"{path} as {label.value}: {self._style(f'{score:.3f}', color)}"

    def render_window(self, window: "ByteWindow", file_size: int) -> str:
        """Render a planned window."""
        return f"{window.path}: bytes {window.start}-{window.end} of {file_size} ({window.length} bytes)"

    def _style(self, text: str, style: str) -> str:
        """Apply style to text if colors are enabled."""
        if not self._use_color:
            return text

        # ANSI color codes
        codes = {
            "bold": "\033[1m",
            "dim": "\033[2m",
            "red": "\033[31m",
            "green": "\033[32m",
            "yellow": "\033[33m",
        }
        reset = "\033[0m"

        code = codes.get(style, "")
        if code:
            return f"{code}{text}{reset}"
        return text
