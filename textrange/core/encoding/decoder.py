"""
Range decoder.

Reads exactly one byte window of a file and decodes it under the best
available encoding. Used both for the first chunk of a book and for every
"load more" request afterwards.

Decoding never raises. When the hint decodes poorly, a fixed candidate list
is searched; when nothing decodes at all, the bytes are returned as hex
digits under the `hex` label so the caller can still show something.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import InvalidWindowError, WindowOutOfRangeError
from .labels import FALLBACK_CANDIDATES, EncodingLabel, decode_bytes
from .models import ByteWindow, DecodeResult
from .quality import score_text
from .settings import DEFAULT_SETTINGS, EngineSettings

logger = logging.getLogger(__name__)

_BOM_CHAR = "\ufeff"

# Labels whose decoders leave a leading BOM in the text
_BOM_LABELS = frozenset({EncodingLabel.UTF8, EncodingLabel.UTF16LE, EncodingLabel.UTF16BE})


def read_window(window: ByteWindow) -> bytes:
    """
    Read the bytes of a window with a single positioned read.

    Raises:
        OSError: If the file cannot be opened or read
        WindowOutOfRangeError: If the window extends past the end of the file
    """
    with window.path.open("rb") as f:
        file_size = os.fstat(f.fileno()).st_size
        if window.end > file_size:
            raise WindowOutOfRangeError(window.path, window.start, window.end, file_size)

        f.seek(window.start)
        data = f.read(window.length)

    if len(data) != window.length:
        # File shrank between stat and read
        raise WindowOutOfRangeError(window.path, window.start, window.end, window.start + len(data))

    return data


def _decode_scored(data: bytes, label: EncodingLabel, at_file_start: bool) -> tuple[str, float]:
    text = decode_bytes(data, label)
    if at_file_start and label in _BOM_LABELS:
        text = text.removeprefix(_BOM_CHAR)
    return text, score_text(text)


def search_candidates(
    data: bytes,
    skip: EncodingLabel | None = None,
    *,
    at_file_start: bool = False,
) -> tuple[EncodingLabel, str, float]:
    """
    Decode under every fallback candidate and keep the best.

    Candidates are tried in priority order (GB family first). A later
    candidate only wins with a strictly higher score, so list order breaks
    ties. If no candidate scores above zero, the bytes are rendered as hex.

    Args:
        data: Bytes to decode
        skip: Label already tried by the caller
        at_file_start: The bytes start at offset 0, so a leading BOM is
            dropped before scoring

    Returns:
        (label, text, score) of the winner
    """
    best_label = EncodingLabel.HEX
    best_text: str | None = None
    best_score = 0.0

    for label in FALLBACK_CANDIDATES:
        if label is skip:
            continue

        text, score = _decode_scored(data, label, at_file_start)
        if score > best_score:
            best_label = label
            best_text = text
            best_score = score

    if best_text is None:
        logger.warning("No encoding decoded %d bytes acceptably, returning hex", len(data))
        return EncodingLabel.HEX, decode_bytes(data, EncodingLabel.HEX), 0.0

    logger.info("Decoded with %s (quality: %.3f)", best_label.value, best_score)
    return best_label, best_text, best_score


def decode_window(
    data: bytes,
    hint: EncodingLabel | str | None,
    *,
    at_file_start: bool = False,
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> tuple[EncodingLabel, str, float]:
    """
    Decode bytes, preferring the hint encoding.

    Args:
        data: Bytes of one window
        hint: Previously detected label (or alias); unknown values and `hex`
            go straight to the candidate search
        at_file_start: The bytes start at offset 0; a leading BOM is not
            part of the text and is not scored
        settings: Engine settings

    Returns:
        (label, text, score) of the decoding used
    """
    label = EncodingLabel.parse(hint)

    if not data:
        # Nothing to judge; keep the hint so callers do not persist `hex`
        return (label if label is not None and label.is_text else EncodingLabel.UTF8), "", 0.0

    if label is None or not label.is_text:
        logger.debug("Unsupported hint %r, searching candidates", hint)
        return search_candidates(data, skip=None, at_file_start=at_file_start)

    text, score = _decode_scored(data, label, at_file_start)
    if score > settings.thresholds.accept_score:
        return label, text, score
    if not text:
        # Window held only a BOM
        return label, "", 0.0

    logger.debug("Low decoding quality with %s (%.3f), trying other encodings", label.value, score)
    return search_candidates(data, skip=label, at_file_start=at_file_start)


def read_range(
    path: Path | str,
    start: int,
    end: int,
    hint: EncodingLabel | str | None = EncodingLabel.UTF8,
    *,
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> DecodeResult:
    """
    Read and decode the byte range [start, end) of a file.

    The caller is responsible for keeping the window inside the file; the
    engine does not clip.

    Args:
        path: Path to the file
        start: First byte offset (inclusive)
        end: Last byte offset (exclusive)
        hint: Encoding label to try first, usually the detected one
        settings: Engine settings

    Returns:
        DecodeResult with the text and the encoding actually used

    Raises:
        OSError: If the file cannot be opened or read
        InvalidWindowError: If start is negative or end is before start
        WindowOutOfRangeError: If end is past the end of the file
    """
    if start < 0 or end < start:
        raise InvalidWindowError("window must satisfy 0 <= start <= end", path, start, end)

    window = ByteWindow(path=Path(path), start=start, end=end)
    data = read_window(window)

    label, text, score = decode_window(data, hint, at_file_start=start == 0, settings=settings)
    return DecodeResult(text=text, encoding_used=label, score=score, window=window)


def read_file_with_encoding(
    path: Path | str,
    start: int,
    end: int,
    encoding: EncodingLabel | str | None = EncodingLabel.UTF8,
) -> str:
    """Read and decode [start, end) of a file, returning only the text."""
    return read_range(path, start, end, encoding).text
