"""
Range read errors.

Only reading can fail. Decoding never raises: ambiguous bytes end up as a
`hex` result instead of an exception. Plain I/O failures (missing file,
permission denied) propagate as the usual `OSError` subclasses; the errors
below cover windows the caller should not have asked for.

Error codes use the TXR-XXX-NNN taxonomy:
- TXR-IO-*: reading errors
- TXR-CFG-*: configuration errors
"""

from __future__ import annotations

from pathlib import Path


class RangeReadError(Exception):
    """Base class for byte window errors."""

    code = "TXR-IO-000"

    def __init__(self, message: str, path: Path | str, start: int, end: int) -> None:
        self.message = message
        self.path = Path(path)
        self.start = start
        self.end = end
        super().__init__(f"{self.path} [{start}:{end}]: {message}")


class InvalidWindowError(RangeReadError, ValueError):
    """Raised for negative offsets or an end before the start."""

    code = "TXR-IO-002"


class WindowOutOfRangeError(RangeReadError):
    """Raised when a window extends past the end of the file."""

    code = "TXR-IO-003"

    def __init__(self, path: Path | str, start: int, end: int, file_size: int) -> None:
        self.file_size = file_size
        super().__init__(
            f"window exceeds file size of {file_size} bytes",
            path,
            start,
            end,
        )


class ConfigError(Exception):
    """Raised for unreadable or invalid settings files."""

    code = "TXR-CFG-001"

    def __init__(self, message: str, path: Path | None = None, *, code: str | None = None) -> None:
        self.message = message
        self.path = path
        if code is not None:
            self.code = code
        prefix = f"{path}: " if path else ""
        super().__init__(f"{prefix}{message}")


# =============================================================================
# Error Codes Registry
# =============================================================================

ERROR_CODES: dict[str, str] = {
    "TXR-IO-001": "File missing or unreadable",
    "TXR-IO-002": "Invalid byte window",
    "TXR-IO-003": "Byte window past end of file",
    "TXR-CFG-001": "Invalid settings file",
    "TXR-CFG-002": "Invalid environment override",
}


def get_error_description(code: str) -> str | None:
    """Get the description for an error code."""
    return ERROR_CODES.get(code)


def format_error(code: str, detail: object) -> str:
    """Render an error as `CODE description: detail`."""
    description = get_error_description(code)
    if description is None:
        return f"{code}: {detail}"
    return f"{code} {description}: {detail}"
