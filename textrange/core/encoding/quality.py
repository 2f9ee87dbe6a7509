"""
Decoding quality scorer.

Estimates how likely a decoded string is a correct decoding rather than
mojibake. Pure function, shared by the detector and the range decoder.
"""

from __future__ import annotations

from .settings import CHINESE_BONUS, CONTROL_PENALTY

# Whitespace control characters that are normal in text
_ALLOWED_CONTROLS = frozenset({9, 10, 13})

CJK_FIRST = 0x4E00
CJK_LAST = 0x9FFF


def score_text(text: str) -> float:
    """
    Score decoded text.

    Each character is classified as:
    - NUL: ignored (neither valid nor control)
    - control below 32 other than tab/LF/CR: control
    - CJK Unified Ideograph: valid and Chinese
    - printable ASCII or Latin-1 supplement: valid
    - anything else: not counted

    Score = valid + 0.5 * chinese - 0.8 * control (each as a ratio of all
    characters), clamped to [0, 1].

    Args:
        text: Decoded string

    Returns:
        Quality score in [0, 1], 0 for empty input
    """
    if not text:
        return 0.0

    valid = 0
    chinese = 0
    control = 0

    for char in text:
        code = ord(char)

        if code == 0:
            continue
        if code < 32 and code not in _ALLOWED_CONTROLS:
            control += 1
        elif CJK_FIRST <= code <= CJK_LAST:
            chinese += 1
            valid += 1
        elif 32 <= code <= 126 or 128 <= code <= 255:
            valid += 1

    total = len(text)
    score = valid / total + CHINESE_BONUS * (chinese / total) - CONTROL_PENALTY * (control / total)

    return max(0.0, min(1.0, score))
