"""
Pytest configuration and fixtures for textrange tests.

Provides fixtures for:
- Sample text files in various encodings
- Undecodable and large files
- Common test utilities
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

# =============================================================================
# Sample Text
# =============================================================================

ENGLISH_TEXT = (
    "It was the best of times, it was the worst of times, it was the age of wisdom,\n"
    "it was the age of foolishness, it was the epoch of belief.\n"
)

CHINESE_TEXT = (
    "第一章 山雨欲来\n"
    "天色渐渐暗了下来，城外的官道上行人稀少，只有几辆马车缓缓驶过。\n"
    "他站在城门口，望着远处的群山，心中思绪万千。\n"
)


@pytest.fixture
def english_text() -> str:
    """Return a short English paragraph."""
    return ENGLISH_TEXT


@pytest.fixture
def chinese_text() -> str:
    """Return a short Chinese paragraph."""
    return CHINESE_TEXT


# Control bytes that are not tab, LF or CR: junk under every candidate encoding
CONTROL_BYTES = bytes(b for b in range(1, 32) if b not in (9, 10, 13))


# =============================================================================
# File Fixtures
# =============================================================================


@pytest.fixture
def utf8_file(tmp_path: Path) -> Path:
    """UTF-8 file without BOM, mixing English and Chinese."""
    path = tmp_path / "utf8.txt"
    path.write_bytes((ENGLISH_TEXT + CHINESE_TEXT).encode("utf-8"))
    return path


@pytest.fixture
def ascii_file(tmp_path: Path) -> Path:
    """Plain ASCII file."""
    path = tmp_path / "ascii.txt"
    path.write_bytes(ENGLISH_TEXT.encode("ascii"))
    return path


@pytest.fixture
def single_line_file(tmp_path: Path) -> Path:
    """Printable ASCII with no line breaks."""
    path = tmp_path / "single_line.txt"
    path.write_bytes(ENGLISH_TEXT.replace("\n", " ").encode("ascii"))
    return path


@pytest.fixture
def utf8_bom_file(tmp_path: Path) -> Path:
    """UTF-8 file with BOM."""
    path = tmp_path / "utf8_bom.txt"
    path.write_bytes(b"\xef\xbb\xbf" + ENGLISH_TEXT.encode("utf-8"))
    return path


@pytest.fixture
def utf16le_file(tmp_path: Path) -> Path:
    """UTF-16 LE file with BOM."""
    path = tmp_path / "utf16le.txt"
    path.write_bytes(b"\xff\xfe" + ENGLISH_TEXT.encode("utf-16-le"))
    return path


@pytest.fixture
def utf16be_file(tmp_path: Path) -> Path:
    """UTF-16 BE file with BOM."""
    path = tmp_path / "utf16be.txt"
    path.write_bytes(b"\xfe\xff" + ENGLISH_TEXT.encode("utf-16-be"))
    return path


@pytest.fixture
def gbk_file(tmp_path: Path) -> Path:
    """GBK encoded Chinese text without BOM."""
    path = tmp_path / "gbk.txt"
    path.write_bytes(CHINESE_TEXT.encode("gbk"))
    return path


@pytest.fixture
def control_file(tmp_path: Path) -> Path:
    """Bytes that no candidate encoding decodes acceptably."""
    path = tmp_path / "control.bin"
    path.write_bytes(CONTROL_BYTES * 8)
    return path


@pytest.fixture
def empty_file(tmp_path: Path) -> Path:
    """Zero-byte file."""
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    return path


@pytest.fixture
def large_gbk_file(tmp_path: Path) -> Path:
    """GBK book spanning several chunks."""
    path = tmp_path / "large_gbk.txt"
    path.write_bytes((CHINESE_TEXT * 2000).encode("gbk"))
    return path
