"""
Encoding labels.

The closed set of encodings the engine knows how to decode, the aliases
callers may pass in, and the decode routine behind each label.

Labels are the plain strings a caller persists (e.g. next to a bookmark),
so their values must stay stable.
"""

from __future__ import annotations

from enum import Enum


class EncodingLabel(Enum):
    """Supported encodings."""

    UTF8 = "utf8"
    UTF16LE = "utf16le"
    UTF16BE = "utf16be"
    GB2312 = "gb2312"
    GBK = "gbk"
    GB18030 = "gb18030"
    LATIN1 = "latin1"
    ASCII = "ascii"
    HEX = "hex"  # Raw bytes as hex digits, used only when nothing decodes

    @property
    def codec(self) -> str | None:
        """Python codec name, or None for the raw hex rendering."""
        return _CODECS[self]

    @property
    def is_gb_family(self) -> bool:
        """True for the Chinese GB encodings, treated as one outcome."""
        return self in GB_FAMILY

    @property
    def is_text(self) -> bool:
        """True for labels that decode to text rather than a byte dump."""
        return self is not EncodingLabel.HEX

    @classmethod
    def parse(cls, value: str | EncodingLabel | None) -> EncodingLabel | None:
        """
        Resolve a label or alias.

        Args:
            value: Label, alias such as "UTF-8" or "iso-8859-1", or None

        Returns:
            The canonical label, or None if the value is not supported
        """
        if value is None:
            return None
        if isinstance(value, EncodingLabel):
            return value

        key = value.strip().lower().replace("_", "-")
        return _ALIASES.get(key)


_CODECS: dict[EncodingLabel, str | None] = {
    EncodingLabel.UTF8: "utf-8",
    EncodingLabel.UTF16LE: "utf-16-le",
    EncodingLabel.UTF16BE: "utf-16-be",
    EncodingLabel.GB2312: "gb2312",
    EncodingLabel.GBK: "gbk",
    EncodingLabel.GB18030: "gb18030",
    EncodingLabel.LATIN1: "latin-1",
    EncodingLabel.ASCII: "ascii",
    EncodingLabel.HEX: None,
}

_ALIASES: dict[str, EncodingLabel] = {
    # Canonical values
    **{label.value: label for label in EncodingLabel},
    # Common spellings
    "utf-8": EncodingLabel.UTF8,
    "utf-8-sig": EncodingLabel.UTF8,
    "utf8mb4": EncodingLabel.UTF8,
    "utf-16le": EncodingLabel.UTF16LE,
    "utf-16-le": EncodingLabel.UTF16LE,
    "ucs2": EncodingLabel.UTF16LE,
    "ucs-2": EncodingLabel.UTF16LE,
    "utf-16be": EncodingLabel.UTF16BE,
    "utf-16-be": EncodingLabel.UTF16BE,
    "cp936": EncodingLabel.GBK,
    "windows-936": EncodingLabel.GBK,
    "euc-cn": EncodingLabel.GB2312,
    "latin-1": EncodingLabel.LATIN1,
    "iso-8859-1": EncodingLabel.LATIN1,
    "iso8859-1": EncodingLabel.LATIN1,
    "binary": EncodingLabel.LATIN1,
    "us-ascii": EncodingLabel.ASCII,
}

GB_FAMILY = frozenset({EncodingLabel.GB2312, EncodingLabel.GBK, EncodingLabel.GB18030})

# Order matters: earlier candidates win score ties.
FALLBACK_CANDIDATES: tuple[EncodingLabel, ...] = (
    EncodingLabel.GB2312,
    EncodingLabel.GBK,
    EncodingLabel.GB18030,
    EncodingLabel.UTF8,
    EncodingLabel.UTF16LE,
    EncodingLabel.UTF16BE,
    EncodingLabel.LATIN1,
    EncodingLabel.ASCII,
)

# Candidates for the detector's trial decode. UTF8 first, it is the default.
TRIAL_CANDIDATES: tuple[EncodingLabel, ...] = (
    EncodingLabel.UTF8,
    EncodingLabel.GBK,
    EncodingLabel.GB18030,
)


def decode_bytes(data: bytes, label: EncodingLabel) -> str:
    """
    Decode bytes under a label, replacing invalid sequences.

    Never raises for a supported label: undecodable input becomes U+FFFD
    replacement characters, and HEX renders the bytes as hex digits.
    """
    codec = label.codec
    if codec is None:
        return data.hex()
    return data.decode(codec, errors="replace")
