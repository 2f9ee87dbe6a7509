"""
Encoding detection for text files.

Classifies the dominant encoding of a file from its opening bytes only.

Detection priority (first match wins):
1. BOM (UTF-8, UTF-16 LE, UTF-16 BE)
2. GBK byte statistics over the sample
3. Scored trial decode of the sample
4. Fallback to UTF-8

Detection is advisory: any I/O failure yields UTF-8 instead of an error.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .labels import TRIAL_CANDIDATES, EncodingLabel, decode_bytes
from .models import ByteStats
from .quality import score_text
from .settings import DEFAULT_SETTINGS, EngineSettings

logger = logging.getLogger(__name__)

BOMS: tuple[tuple[bytes, EncodingLabel], ...] = (
    (b"\xef\xbb\xbf", EncodingLabel.UTF8),
    (b"\xff\xfe", EncodingLabel.UTF16LE),
    (b"\xfe\xff", EncodingLabel.UTF16BE),
)

# GBK lead and trail byte ranges
GBK_LEAD = range(0x81, 0xFF)
GBK_TRAIL = range(0x40, 0xFF)


def detect_bom(data: bytes) -> EncodingLabel | None:
    """Return the encoding announced by a leading BOM, if any."""
    for bom, label in BOMS:
        if data.startswith(bom):
            return label
    return None


def analyze_sample(data: bytes) -> ByteStats:
    """
    Count high bytes and GBK lead/trail pairs.

    A matched pair consumes both of its bytes, so the trail byte is neither
    counted again as a high byte nor as the lead of another pair.

    Args:
        data: Detection sample

    Returns:
        ByteStats for the sample
    """
    high_bytes = 0
    pairs = 0
    total = len(data)

    i = 0
    while i < total:
        byte = data[i]
        if byte >= 0x80:
            high_bytes += 1
            if i + 1 < total and byte in GBK_LEAD and data[i + 1] in GBK_TRAIL:
                pairs += 1
                i += 1  # Skip the trail byte
        i += 1

    return ByteStats(total_bytes=total, high_bytes=high_bytes, gbk_pairs=pairs)


def detect_encoding_bytes(
    data: bytes,
    *,
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> EncodingLabel:
    """
    Detect the encoding of an in-memory sample.

    Args:
        data: Opening bytes of a file (only the first sample_size are used)
        settings: Engine settings

    Returns:
        Best-guess encoding label
    """
    bom_label = detect_bom(data)
    if bom_label is not None:
        logger.debug("BOM found: %s", bom_label.value)
        return bom_label

    sample = data[: settings.sample_size]
    if not sample:
        return EncodingLabel.UTF8

    thresholds = settings.thresholds
    stats = analyze_sample(sample)

    if stats.high_byte_ratio > thresholds.high_byte_ratio and stats.pair_ratio > thresholds.pair_ratio:
        logger.debug(
            "GBK statistics matched (high=%.3f, pairs=%.3f)",
            stats.high_byte_ratio,
            stats.pair_ratio,
        )
        return EncodingLabel.GBK

    if stats.high_byte_ratio > thresholds.high_byte_only:
        logger.debug("High byte ratio %.3f, assuming GBK", stats.high_byte_ratio)
        return EncodingLabel.GBK

    best_label, best_score = _trial_decode(sample)
    if best_label is not EncodingLabel.UTF8 and best_score > thresholds.trial_score:
        logger.debug("Trial decode picked %s (score %.3f)", best_label.value, best_score)
        return best_label

    return EncodingLabel.UTF8


def _trial_decode(sample: bytes) -> tuple[EncodingLabel, float]:
    """Score the sample under each trial candidate; UTF-8 wins ties."""
    best_label = EncodingLabel.UTF8
    best_score = 0.0

    for label in TRIAL_CANDIDATES:
        score = score_text(decode_bytes(sample, label))
        if score > best_score:
            best_label = label
            best_score = score

    return best_label, best_score


def read_sample(path: Path | str, size: int = DEFAULT_SETTINGS.sample_size) -> bytes:
    """
    Read the first bytes of a file.

    Raises:
        OSError: If the file cannot be opened or read
    """
    with Path(path).open("rb") as f:
        return f.read(size)


def detect_encoding(
    path: Path | str,
    *,
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> EncodingLabel:
    """
    Detect the encoding of a file.

    Never raises: on any I/O error it logs a warning and returns UTF-8.

    Args:
        path: Path to the file
        settings: Engine settings

    Returns:
        Best-guess encoding label
    """
    try:
        data = read_sample(path, settings.sample_size)
    except OSError as e:
        logger.warning("Failed to detect encoding of %s: %s", path, e)
        return EncodingLabel.UTF8

    return detect_encoding_bytes(data, settings=settings)
