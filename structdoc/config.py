"""Configuration loading for structdoc (.structdoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".structdoc.yml"
DEFAULT_FILE_NAME = "project-structure.md"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class OutputConfig:
    """Where the generated document is written, relative to the workspace root."""

    path: str = ""
    file_name: str = DEFAULT_FILE_NAME


@dataclass
class StructureConfig:
    """Represents the settings defined in .structdoc.yml."""

    root: Path
    output: OutputConfig = field(default_factory=OutputConfig)
    exclude_paths: List[str] = field(default_factory=list)

    def output_file(self) -> Path:
        """Return the absolute path the document should be written to."""
        return self.root / self.output.path / self.output.file_name


def load_config(config_path: Path) -> StructureConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        return StructureConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    output = OutputConfig()
    output_data = _as_dict(data.get("output"))
    if output_data:
        output.path = _as_str(output_data.get("path")) or ""
        output.file_name = _as_str(output_data.get("file_name")) or DEFAULT_FILE_NAME

    return StructureConfig(
        root=root,
        output=output,
        exclude_paths=_as_str_list(data.get("exclude_paths")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
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


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_FILE_NAME",
    "OutputConfig",
    "StructureConfig",
    "load_config",
]
