"""Tests for encoding detection."""

from pathlib import Path

import pytest

from textrange.core.encoding import (
    EncodingLabel,
    EngineSettings,
    Thresholds,
    analyze_sample,
    decode_bytes,
    detect_bom,
    detect_encoding,
    detect_encoding_bytes,
    score_text,
)


class TestDetectBom:
    """Tests for detect_bom function."""

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            (b"\xef\xbb\xbfabc", EncodingLabel.UTF8),
            (b"\xff\xfea\x00", EncodingLabel.UTF16LE),
            (b"\xfe\xff\x00a", EncodingLabel.UTF16BE),
        ],
    )
    def test_known_boms(self, data: bytes, expected: EncodingLabel) -> None:
        """Test each supported BOM."""
        assert detect_bom(data) is expected

    def test_no_bom(self) -> None:
        """Test plain data has no BOM."""
        assert detect_bom(b"hello") is None
        assert detect_bom(b"") is None


class TestAnalyzeSample:
    """Tests for analyze_sample function."""

    def test_ascii_has_no_high_bytes(self) -> None:
        """Test ASCII statistics."""
        stats = analyze_sample(b"plain text")
        assert stats.high_bytes == 0
        assert stats.gbk_pairs == 0
        assert stats.high_byte_ratio == 0.0

    def test_pair_consumes_trail_byte(self) -> None:
        """Test a matched pair is counted once."""
        stats = analyze_sample("啊啊".encode("gbk"))  # B0 A1 B0 A1
        assert stats.total_bytes == 4
        assert stats.high_bytes == 2
        assert stats.gbk_pairs == 2
        assert stats.high_byte_ratio == pytest.approx(0.5)
        assert stats.pair_ratio == pytest.approx(1.0)

    def test_high_byte_without_valid_trail(self) -> None:
        """Test a lead byte followed by ASCII control is not a pair."""
        stats = analyze_sample(b"\xb0\x20\xff\xff")
        # B0 20: trail out of range; FF is not a lead byte
        assert stats.gbk_pairs == 0
        assert stats.high_bytes == 3

    def test_lone_trailing_lead_byte(self) -> None:
        """Test a lead byte at the end of the sample."""
        stats = analyze_sample(b"ab\xb0")
        assert stats.high_bytes == 1
        assert stats.gbk_pairs == 0

    def test_empty_sample(self) -> None:
        """Test empty statistics do not divide by zero."""
        stats = analyze_sample(b"")
        assert stats.high_byte_ratio == 0.0
        assert stats.pair_ratio == 0.0


class TestDetectEncodingBytes:
    """Tests for detect_encoding_bytes function."""

    def test_plain_ascii_is_utf8(self, english_text: str) -> None:
        """Test ASCII defaults to UTF-8."""
        assert detect_encoding_bytes(english_text.encode("ascii")) is EncodingLabel.UTF8

    def test_empty_is_utf8(self) -> None:
        """Test empty data falls back to UTF-8."""
        assert detect_encoding_bytes(b"") is EncodingLabel.UTF8

    def test_gbk_text(self, chinese_text: str) -> None:
        """Test GBK Chinese text is detected as the GB family."""
        assert detect_encoding_bytes(chinese_text.encode("gbk")).is_gb_family

    def test_bom_dominates_gbk_bytes(self, chinese_text: str) -> None:
        """Test a UTF-8 BOM wins over GBK-looking content."""
        data = b"\xef\xbb\xbf" + chinese_text.encode("gbk") * 10
        assert detect_encoding_bytes(data) is EncodingLabel.UTF8

    def test_utf16_bom(self) -> None:
        """Test UTF-16 BOMs short-circuit the statistics."""
        assert detect_encoding_bytes(b"\xff\xfe" + "中文".encode("utf-16-le")) is EncodingLabel.UTF16LE
        assert detect_encoding_bytes(b"\xfe\xff" + "中文".encode("utf-16-be")) is EncodingLabel.UTF16BE

    def test_high_byte_ratio_alone(self) -> None:
        """Test a high byte ratio above 0.25 is enough for GBK."""
        # High bytes with no valid GBK trail: FF is never a lead byte
        data = b"\xff" * 30 + b"a" * 70
        stats = analyze_sample(data)
        assert stats.gbk_pairs == 0
        assert stats.high_byte_ratio > 0.25
        assert detect_encoding_bytes(data) is EncodingLabel.GBK

    def test_sparse_gbk_found_by_trial_decode(self) -> None:
        """Test a few GBK characters in ASCII text are found by scoring."""
        data = b"hello world, " * 10 + "中文".encode("gbk")
        stats = analyze_sample(data)
        assert stats.high_byte_ratio < 0.15

        assert detect_encoding_bytes(data) is EncodingLabel.GBK

    def test_only_sample_is_analyzed(self, english_text: str, chinese_text: str) -> None:
        """Test bytes past the sample size are ignored."""
        data = english_text.encode("ascii") * 40 + chinese_text.encode("gbk") * 40
        settings = EngineSettings(sample_size=len(english_text) * 40)
        assert detect_encoding_bytes(data, settings=settings) is EncodingLabel.UTF8

    def test_thresholds_are_tunable(self) -> None:
        """Test raised thresholds disable the statistical rules."""
        data = b"\xff" * 30 + b"a" * 70
        settings = EngineSettings(
            thresholds=Thresholds(high_byte_ratio=1.0, high_byte_only=1.0, trial_score=1.0),
        )
        assert detect_encoding_bytes(data, settings=settings) is EncodingLabel.UTF8


class TestDetectEncoding:
    """Tests for detect_encoding function."""

    def test_ascii_file(self, ascii_file: Path) -> None:
        """Test detection of a plain ASCII file."""
        assert detect_encoding(ascii_file) is EncodingLabel.UTF8

    def test_utf8_bom_file(self, utf8_bom_file: Path) -> None:
        """Test detection of UTF-8 with BOM."""
        assert detect_encoding(utf8_bom_file) is EncodingLabel.UTF8

    def test_utf16_files(self, utf16le_file: Path, utf16be_file: Path) -> None:
        """Test detection of UTF-16 with BOM."""
        assert detect_encoding(utf16le_file) is EncodingLabel.UTF16LE
        assert detect_encoding(utf16be_file) is EncodingLabel.UTF16BE

    def test_gbk_file(self, gbk_file: Path) -> None:
        """Test GBK detection and the quality of decoding under it."""
        label = detect_encoding(gbk_file)
        assert label.is_gb_family

        text = decode_bytes(gbk_file.read_bytes(), label)
        assert score_text(text) > 0.5

    def test_empty_file(self, empty_file: Path) -> None:
        """Test empty file defaults to UTF-8."""
        assert detect_encoding(empty_file) is EncodingLabel.UTF8

    def test_missing_file_fails_soft(self, tmp_path: Path) -> None:
        """Test I/O errors return UTF-8 instead of raising."""
        assert detect_encoding(tmp_path / "missing.txt") is EncodingLabel.UTF8

    def test_directory_fails_soft(self, tmp_path: Path) -> None:
        """Test unreadable paths return UTF-8."""
        assert detect_encoding(tmp_path) is EncodingLabel.UTF8

    def test_failure_is_logged(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Test the fail-soft path leaves a warning."""
        with caplog.at_level("WARNING", logger="textrange.core.encoding.detector"):
            detect_encoding(tmp_path / "missing.txt")
        assert "Failed to detect encoding" in caplog.text

    def test_string_path(self, gbk_file: Path) -> None:
        """Test paths may be passed as strings."""
        assert detect_encoding(str(gbk_file)).is_gb_family
