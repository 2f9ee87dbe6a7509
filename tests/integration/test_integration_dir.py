"""Optional integration tests against a real book collection.

These tests are skipped by default and only run when `TEXTRANGE_INTEGRATION_DIR`
is set to a directory containing `.txt` files.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from typer.testing import CliRunner

from textrange.cli.main import app
from textrange.core.encoding import detect_encoding, read_range
from textrange.core.paging import Direction, extend_window, get_file_size, initial_window

runner = CliRunner()


def _get_integration_dir() -> Path:
    value = os.environ.get("TEXTRANGE_INTEGRATION_DIR")
    if not value:
        pytest.skip("Set TEXTRANGE_INTEGRATION_DIR to run integration tests.")

    path = Path(value)
    if not path.exists() or not path.is_dir():
        pytest.skip(f"TEXTRANGE_INTEGRATION_DIR is not a directory: {path}")

    return path


def _get_limit() -> int:
    raw = os.environ.get("TEXTRANGE_INTEGRATION_LIMIT", "10").strip()
    if not raw:
        return 10
    try:
        value = int(raw)
    except ValueError:
        pytest.skip("TEXTRANGE_INTEGRATION_LIMIT must be an integer.")
    return value


def _get_books() -> list[Path]:
    integration_dir = _get_integration_dir()
    limit = _get_limit()

    files = sorted(
        p for p in integration_dir.rglob("*.txt") if p.is_file() and not p.name.startswith(".")
    )
    if not files:
        pytest.skip(f"No .txt files found under: {integration_dir}")

    return files if limit <= 0 else files[:limit]


def test_detect_real_books_as_json() -> None:
    for file_path in _get_books():
        result = runner.invoke(app, ["detect", str(file_path), "--explain", "--format", "json"])

        assert result.exit_code == 0, (file_path, result.exit_code, result.stdout)


def test_page_through_real_books() -> None:
    for file_path in _get_books():
        label = detect_encoding(file_path)
        size = get_file_size(file_path)

        window = initial_window(file_path, 50, file_size=size, chunk_size=256 * 1024)
        while window is not None:
            result = read_range(file_path, window.start, window.end, label)
            assert not result.is_degraded, (file_path, window)
            window = extend_window(window, Direction.DOWN, size, chunk_size=256 * 1024)
