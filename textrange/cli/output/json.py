"""
JSON output adapter.

Renders engine results as JSON for machine processing.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, TextIO

from textrange.cli.output.base import OutputAdapter, OutputFormat

if TYPE_CHECKING:
    from pathlib import Path

    from textrange.core.encoding.labels import EncodingLabel
    from textrange.core.encoding.models import ByteStats, ByteWindow, DecodeResult


class JsonOutput(OutputAdapter):
    """JSON output adapter."""

    format = OutputFormat.JSON

    def __init__(self, stream: TextIO | None = None, color: bool = False, indent: int = 2):
        super().__init__(stream=stream, color=False)  # Never colorize JSON
        self.indent = indent

    def render_detection(
        self,
        path: "Path",
        label: "EncodingLabel",
        stats: "ByteStats | None" = None,
    ) -> str:
        """Render detection as JSON."""
        output: dict[str, Any] = {
            "file": str(path),
            "encoding": label.value,
        }

        if stats is not None:
            output["stats"] = self._stats_to_dict(stats)

        return self._dump(output)

    def render_decode(self, result: "DecodeResult") -> str:
        """Render a decoded window as JSON."""
        output: dict[str, Any] = {
            "encoding_used": result.encoding_used.value,
            "score": round(result.score, 4),
            "degraded": result.is_degraded,
            "text": result.text,
        }

        if result.window is not None:
            output["window"] = self._window_to_dict(result.window)

        return self._dump(output)

    def render_score(self, path: "Path", label: "EncodingLabel", score: float) -> str:
        """Render a quality score as JSON."""
        return self._dump(
            {
                "file": str(path),
                "encoding": label.value,
                "score": round(score, 4),
            }
        )

    def render_window(self, window: "ByteWindow", file_size: int) -> str:
        """Render a planned window as JSON."""
        output = self._window_to_dict(window)
        output["file_size"] = file_size
        return self._dump(output)

    def _dump(self, output: dict[str, Any]) -> str:
        # Keep non-ASCII text readable
        return json.dumps(output, indent=self.indent, ensure_ascii=False)

    def _window_to_dict(self, window: "ByteWindow") -> dict[str, Any]:
        """Convert window to dictionary."""
        return {
            "file": str(window.path),
            "start": window.start,
            "end": window.end,
            "length": window.length,
        }

    def _stats_to_dict(self, stats: "ByteStats") -> dict[str, Any]:
        """Convert sample statistics to dictionary."""
        return {
            "total_bytes": stats.total_bytes,
            "high_bytes": stats.high_bytes,
            "gbk_pairs": stats.gbk_pairs,
            "high_byte_ratio": round(stats.high_byte_ratio, 4),
            "pair_ratio": round(stats.pair_ratio, 4),
        }
