"""
Encoding engine data models.

All models are frozen: a window or a result is produced once per call and
handed to the caller without any state kept behind.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from .labels import EncodingLabel


class ByteWindow(BaseModel, frozen=True):
    """
    A [start, end) byte range of a file.

    Only references the file by path. The upper bound against the file size
    is checked when the window is read, not when it is built.
    """

    path: Path
    start: int = Field(ge=0, description="First byte offset (inclusive)")
    end: int = Field(ge=0, description="Last byte offset (exclusive)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_order(self) -> ByteWindow:
        if self.end < self.start:
            raise ValueError(f"window end {self.end} is before start {self.start}")
        return self

    @property
    def length(self) -> int:
        """Number of bytes in the window."""
        return self.end - self.start

    def __str__(self) -> str:
        return f"{self.path}[{self.start}:{self.end}]"


class ByteStats(BaseModel, frozen=True):
    """Byte distribution statistics of a detection sample."""

    total_bytes: int = Field(ge=0)
    high_bytes: int = Field(ge=0, description="Bytes >= 0x80")
    gbk_pairs: int = Field(ge=0, description="Adjacent GBK lead/trail pairs")

    model_config = {"frozen": True}

    @property
    def high_byte_ratio(self) -> float:
        """Share of bytes with the high bit set."""
        if self.total_bytes == 0:
            return 0.0
        return self.high_bytes / self.total_bytes

    @property
    def pair_ratio(self) -> float:
        """Matched GBK pairs per possible pair."""
        return self.gbk_pairs / max(1, self.total_bytes // 2)


class DecodeResult(BaseModel, frozen=True):
    """Decoded text of a byte window and the encoding actually used."""

    text: str
    encoding_used: EncodingLabel
    score: float = Field(ge=0, le=1, description="Quality score of the returned text")
    window: ByteWindow | None = None

    model_config = {"frozen": True}

    @property
    def is_degraded(self) -> bool:
        """True when nothing decoded and the text is a hex dump."""
        return self.encoding_used is EncodingLabel.HEX
