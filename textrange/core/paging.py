"""
Byte window planning for incremental reading.

A reader shows a window of a book around the saved position and grows it one
chunk at a time as the user scrolls. Every window produced here is clamped
to the file size, so it can be passed straight to `read_range`.
"""

from __future__ import annotations

import math
from enum import Enum
from pathlib import Path

from textrange.core.encoding.models import ByteWindow
from textrange.core.encoding.settings import DEFAULT_CHUNK_SIZE


class Direction(Enum):
    """Direction of a "load more" request."""

    UP = "up"  # Towards the file start
    DOWN = "down"  # Towards the file end


def get_file_size(path: Path | str) -> int:
    """
    Get the size of a file in bytes.

    Raises:
        OSError: If the file cannot be stat'ed
    """
    return Path(path).stat().st_size


def offset_for_progress(progress: float, file_size: int) -> int:
    """Byte offset of a reading position given in percent."""
    progress = max(0.0, min(100.0, progress))
    return math.floor(progress / 100 * file_size)


def progress_for_offset(offset: int, file_size: int) -> float:
    """Reading position in percent of a byte offset (0 for empty files)."""
    if file_size <= 0:
        return 0.0
    offset = max(0, min(offset, file_size))
    return offset / file_size * 100


def initial_window(
    path: Path | str,
    progress: float = 0.0,
    *,
    file_size: int | None = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> ByteWindow:
    """
    Plan the first window to show for a book.

    The window starts one chunk before the reading position and ends two
    chunks after it.

    Args:
        path: Path to the file
        progress: Saved reading position in percent
        file_size: File size, looked up if None
        chunk_size: Chunk size in bytes

    Returns:
        ByteWindow inside [0, file_size]
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    size = get_file_size(path) if file_size is None else file_size
    position = offset_for_progress(progress, size)

    start = max(0, position - chunk_size)
    end = min(size, position + chunk_size * 2)

    return ByteWindow(path=Path(path), start=start, end=end)


def extend_window(
    window: ByteWindow,
    direction: Direction | str,
    file_size: int,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> ByteWindow | None:
    """
    Grow a window by one chunk.

    Args:
        window: Currently loaded window
        direction: UP moves the start back, DOWN moves the end forward
        file_size: Size of the file
        chunk_size: Chunk size in bytes

    Returns:
        The grown window, or None if the window already touches that end
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    direction = Direction(direction)

    if direction is Direction.UP:
        if window.start <= 0:
            return None
        return window.model_copy(update={"start": max(0, window.start - chunk_size)})

    if window.end >= file_size:
        return None
    return window.model_copy(update={"end": min(file_size, window.end + chunk_size)})
