"""
Settings loading from filesystem.

Searches for a YAML settings file in standard locations and applies
environment overrides on top.

YAML format:
```yaml
sample_size: 2048
chunk_size: 51200
thresholds:
  accept_score: 0.5
```
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import ConfigError
from .settings import EngineSettings

# Settings file names to search for
CONFIG_FILE_NAMES = [
    ".textrange.yaml",
    ".textrange.yml",
]

CONFIG_ENV_VAR = "TEXTRANGE_CONFIG"

# Environment variable -> settings field
ENV_OVERRIDES = {
    "TEXTRANGE_SAMPLE_SIZE": "sample_size",
    "TEXTRANGE_CHUNK_SIZE": "chunk_size",
}


def get_config_search_paths() -> list[Path]:
    """
    Get candidate settings file paths.

    Returns:
        Files to try (in priority order)
    """
    paths = [Path.cwd() / name for name in CONFIG_FILE_NAMES]
    paths.append(Path.home() / ".config" / "textrange" / "config.yaml")
    return paths


def find_config_file() -> Path | None:
    """
    Find a settings file in standard locations.

    Returns:
        Path to the settings file, or None if not found
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        if path.exists():
            return path

    for candidate in get_config_search_paths():
        if candidate.exists():
            return candidate

    return None


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"cannot read settings file: {e}", path) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML: {e}", path) from e

    if not isinstance(data, dict):
        raise ConfigError("settings file must contain a mapping", path)

    return data


def _env_overrides() -> dict[str, int]:
    overrides: dict[str, int] = {}
    for env_name, field in ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if raw is None or not raw.strip():
            continue
        try:
            overrides[field] = int(raw)
        except ValueError:
            raise ConfigError(f"{env_name} must be an integer, got {raw!r}", code="TXR-CFG-002") from None
    return overrides


def load_settings(path: Path | None = None, *, use_env: bool = True) -> EngineSettings:
    """
    Load engine settings.

    Args:
        path: Explicit settings file; searched for if None
        use_env: Apply TEXTRANGE_* environment overrides

    Returns:
        EngineSettings (defaults when no file is found)

    Raises:
        ConfigError: If the file is unreadable or contains invalid values
    """
    if path is not None and not path.exists():
        raise ConfigError("settings file not found", path)

    config_path = path or find_config_file()
    data: dict[str, Any] = _read_yaml(config_path) if config_path is not None else {}

    if use_env:
        data.update(_env_overrides())

    try:
        return EngineSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"invalid settings: {e}", config_path) from e
