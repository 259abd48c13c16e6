"""Configuration loading for extdoc (.extdoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .constants import (
    DEFAULT_OUTPUT_SUBDIR,
    DEFAULT_PROPERTIES_RESOURCE,
    DEFAULT_PROPERTIES_SEARCH_PATHS,
)

CONFIG_FILE_NAME = ".extdoc.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class OutputConfig:
    """Where generated artifacts are written."""

    build_root: Optional[Path] = None
    directory: str = DEFAULT_OUTPUT_SUBDIR


@dataclass
class PropertiesConfig:
    """Configuration resource turned into configuration.adoc."""

    resource: str = DEFAULT_PROPERTIES_RESOURCE
    search_paths: List[Path] = field(default_factory=list)


@dataclass
class ModelConfig:
    """Which discovery collaborator supplies the application model."""

    file: Optional[Path] = None
    package: Optional[str] = None


@dataclass
class ExtDocConfig:
    """Represents the settings defined in .extdoc.yml."""

    root: Path
    application_name: Optional[str] = None
    output: OutputConfig = field(default_factory=OutputConfig)
    properties: PropertiesConfig = field(default_factory=PropertiesConfig)
    model: ModelConfig = field(default_factory=ModelConfig)
    destination: Optional[Path] = None

    def __post_init__(self) -> None:
        if not self.properties.search_paths:
            self.properties.search_paths = [
                self.root / entry for entry in DEFAULT_PROPERTIES_SEARCH_PATHS
            ]


def load_config(config_path: Path) -> ExtDocConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ExtDocConfig(root=root)

    data = _read_config(config_file)

    application_data = _as_dict(data.get("application"))
    application_name = _as_str(application_data.get("name")) if application_data else None

    output = OutputConfig()
    output_data = _as_dict(data.get("output"))
    if output_data:
        build_root = _as_str(output_data.get("build_root"))
        output.build_root = root / build_root if build_root else None
        output.directory = _as_str(output_data.get("directory")) or DEFAULT_OUTPUT_SUBDIR

    properties = PropertiesConfig()
    properties_data = _as_dict(data.get("properties"))
    if properties_data:
        properties.resource = (
            _as_str(properties_data.get("resource")) or DEFAULT_PROPERTIES_RESOURCE
        )
        properties.search_paths = [
            root / entry for entry in _as_str_list(properties_data.get("search_paths"))
        ]

    model = ModelConfig()
    model_data = _as_dict(data.get("model"))
    if model_data:
        model_file = _as_str(model_data.get("file"))
        model.file = root / model_file if model_file else None
        model.package = _as_str(model_data.get("package"))
        if model.file is not None and model.package is not None:
            raise ConfigError("model.file and model.package are mutually exclusive")

    publish_data = _as_dict(data.get("publish"))
    destination = _as_str(publish_data.get("destination")) if publish_data else None

    return ExtDocConfig(
        root=root,
        application_name=application_name,
        output=output,
        properties=properties,
        model=model,
        destination=root / destination if destination else None,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILE_NAME).resolve()
    if config_path.name != CONFIG_FILE_NAME:
        return (config_path.parent / CONFIG_FILE_NAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{CONFIG_FILE_NAME} must contain a mapping at the root")
    return loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "ExtDocConfig",
    "ModelConfig",
    "OutputConfig",
    "PropertiesConfig",
    "load_config",
]
