"""
Encoding engine.

Public API for detecting the encoding of a text file and decoding byte
windows of it.

Usage:
    from textrange.core.encoding import detect_encoding, read_range

    label = detect_encoding("book.txt")
    result = read_range("book.txt", 0, 51200, label)
    print(result.encoding_used.value, result.text[:80])

API Functions:
    detect_encoding(path) -> EncodingLabel
    read_range(path, start, end, hint) -> DecodeResult
    read_file_with_encoding(path, start, end, encoding) -> str
    score_text(text) -> float
    load_settings(path) -> EngineSettings
"""

from __future__ import annotations

from .config import find_config_file, load_settings
from .decoder import decode_window, read_file_with_encoding, read_range, search_candidates
from .detector import analyze_sample, detect_bom, detect_encoding, detect_encoding_bytes
from .errors import (
    ERROR_CODES,
    ConfigError,
    InvalidWindowError,
    RangeReadError,
    WindowOutOfRangeError,
    format_error,
    get_error_description,
)
from .labels import FALLBACK_CANDIDATES, GB_FAMILY, EncodingLabel, decode_bytes
from .models import ByteStats, ByteWindow, DecodeResult
from .quality import score_text
from .settings import DEFAULT_SETTINGS, EngineSettings, Thresholds

# =============================================================================
# Public API Exports
# =============================================================================

__all__ = [
    "DEFAULT_SETTINGS",
    "ERROR_CODES",
    "FALLBACK_CANDIDATES",
    "GB_FAMILY",
    # Models
    "ByteStats",
    "ByteWindow",
    # Errors
    "ConfigError",
    "DecodeResult",
    # Enums
    "EncodingLabel",
    "EngineSettings",
    "InvalidWindowError",
    "RangeReadError",
    "Thresholds",
    "WindowOutOfRangeError",
    "analyze_sample",
    "decode_bytes",
    "decode_window",
    "detect_bom",
    # Main functions
    "detect_encoding",
    "detect_encoding_bytes",
    "find_config_file",
    "format_error",
    "get_error_description",
    "load_settings",
    "read_file_with_encoding",
    "read_range",
    "score_text",
    "search_candidates",
]
