"""
Engine constants and settings.

The heuristic thresholds are empirical. Their values are kept stable so that
files detect and decode the same way across versions; changing one is a
behaviour change for every caller that persisted a label.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# Bytes read from the file start for statistics and trial decoding
DETECTION_SAMPLE_SIZE = 2048

# Window size used by the paging helpers (50 KiB)
DEFAULT_CHUNK_SIZE = 50 * 1024

# Detector: GBK statistics
HIGH_BYTE_RATIO_THRESHOLD = 0.15
PAIR_RATIO_THRESHOLD = 0.08
HIGH_BYTE_ONLY_THRESHOLD = 0.25  # Catches GB18030 4-byte runs the pair count misses

# Detector: minimum score for a non-utf8 trial decode to win
TRIAL_SCORE_THRESHOLD = 0.3

# Range decoder: hint decodes scoring above this are accepted as-is
ACCEPT_SCORE_THRESHOLD = 0.5

# Quality scorer coefficients
CHINESE_BONUS = 0.5
CONTROL_PENALTY = 0.8


class Thresholds(BaseModel, frozen=True):
    """Heuristic thresholds, defaulting to the module constants."""

    high_byte_ratio: float = Field(default=HIGH_BYTE_RATIO_THRESHOLD, ge=0, le=1)
    pair_ratio: float = Field(default=PAIR_RATIO_THRESHOLD, ge=0, le=1)
    high_byte_only: float = Field(default=HIGH_BYTE_ONLY_THRESHOLD, ge=0, le=1)
    trial_score: float = Field(default=TRIAL_SCORE_THRESHOLD, ge=0, le=1)
    accept_score: float = Field(default=ACCEPT_SCORE_THRESHOLD, ge=0, le=1)

    model_config = {"frozen": True, "extra": "forbid"}


class EngineSettings(BaseModel, frozen=True):
    """Tunable engine settings."""

    sample_size: int = Field(
        default=DETECTION_SAMPLE_SIZE,
        gt=0,
        description="Bytes sampled from the file start for detection",
    )
    chunk_size: int = Field(
        default=DEFAULT_CHUNK_SIZE,
        gt=0,
        description="Bytes added per 'load more' step",
    )
    thresholds: Thresholds = Field(default_factory=Thresholds)

    model_config = {"frozen": True, "extra": "forbid"}


DEFAULT_SETTINGS = EngineSettings()
