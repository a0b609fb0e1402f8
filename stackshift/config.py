"""Configuration loading for stackshift (.stackshift.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".stackshift.yml"

DEFAULT_BATCH_SIZE = 50
DEFAULT_MAX_ENTRY_BYTES = 1_000_000
DEFAULT_MAX_CONTENT_CHARS = 5000
DEFAULT_MANIFEST_NAMES = ("package.json",)


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class AnalysisConfig:
    """Limits and filters applied while walking an uploaded archive."""

    batch_size: int = DEFAULT_BATCH_SIZE
    max_entry_bytes: int = DEFAULT_MAX_ENTRY_BYTES
    max_content_chars: int = DEFAULT_MAX_CONTENT_CHARS
    manifest_names: List[str] = field(default_factory=lambda: list(DEFAULT_MANIFEST_NAMES))
    exclude_paths: List[str] = field(default_factory=list)


@dataclass
class StackShiftConfig:
    """Represents the settings defined in .stackshift.yml."""

    root: Path
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)


def load_config(config_path: Path) -> StackShiftConfig:
    """Load configuration from disk, returning defaults when no file exists."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        return StackShiftConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    analysis_data = _as_dict(data.get("analysis"))
    analysis = AnalysisConfig()
    if analysis_data:
        analysis.batch_size = _as_positive_int(
            analysis_data.get("batch_size"), DEFAULT_BATCH_SIZE
        )
        analysis.max_entry_bytes = _as_positive_int(
            analysis_data.get("max_entry_bytes"), DEFAULT_MAX_ENTRY_BYTES
        )
        analysis.max_content_chars = _as_positive_int(
            analysis_data.get("max_content_chars"), DEFAULT_MAX_CONTENT_CHARS
        )
        manifest_names = _as_str_list(analysis_data.get("manifest_names"))
        if manifest_names:
            analysis.manifest_names = manifest_names
        analysis.exclude_paths = _as_str_list(analysis_data.get("exclude_paths"))

    return StackShiftConfig(root=root, analysis=analysis)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_positive_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    parsed: Optional[int] = None
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = int(value.replace("_", ""))
        except ValueError:
            parsed = None
    if parsed is None or parsed <= 0:
        return default
    return parsed


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "AnalysisConfig",
    "CONFIG_FILENAME",
    "ConfigError",
    "StackShiftConfig",
    "load_config",
]
