"""Loads an application model from a YAML description."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..models import Component, ComponentType, Module, Operation, Visibility, display_name_for
from .base import ModelSource, SourceError


def load_model_file(path: Path | str) -> ModelSource:
    """Parse a model file such as::

        application: Shop
        modules:
          - name: orders
            display_name: Orders
            documentation: "== Orders\\n\\n"
            components:
              - name: OrderService
                documentation: "=== OrderService\\n\\n"
                operations:
                  - name: place
                    visibility: public
                    documentation: "==== place\\n\\n"
        artifacts:
          components.puml: diagrams/components.puml

    Artifact paths are resolved relative to the model file.
    """
    model_path = Path(path).expanduser().resolve()
    try:
        text = model_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SourceError(f"Unable to read model file {model_path}: {exc}") from exc

    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise SourceError(f"Failed to parse {model_path.name}: {exc}") from exc
    if not isinstance(data, dict):
        raise SourceError(f"{model_path.name} must contain a mapping at the root")

    raw_modules = data.get("modules") or []
    if not isinstance(raw_modules, list):
        raise SourceError("'modules' must be a list")
    modules = [_parse_module(entry, index) for index, entry in enumerate(raw_modules)]

    artifacts: Dict[str, Path] = {}
    raw_artifacts = data.get("artifacts") or {}
    if not isinstance(raw_artifacts, dict):
        raise SourceError("'artifacts' must be a mapping of file name to path")
    for name, location in raw_artifacts.items():
        artifacts[str(name)] = model_path.parent / str(location)

    return ModelSource(
        modules,
        application_name=_optional_str(data.get("application"), "application"),
        artifacts=artifacts,
    )


def _parse_module(entry: Any, index: int) -> Module:
    data = _require_mapping(entry, f"modules[{index}]")
    name = _require_name(data, f"modules[{index}]")
    components = [
        _parse_component(item, f"{name}.components[{position}]")
        for position, item in enumerate(_as_list(data.get("components"), f"{name}.components"))
    ]
    return Module(
        name=name,
        display_name=_optional_str(data.get("display_name"), f"{name}.display_name")
        or display_name_for(name),
        components=tuple(components),
        documentation=_optional_str(data.get("documentation"), f"{name}.documentation"),
    )


def _parse_component(entry: Any, where: str) -> Component:
    data = _require_mapping(entry, where)
    name = _require_name(data, where)
    operations = [
        _parse_operation(item, f"{where}.operations[{position}]")
        for position, item in enumerate(_as_list(data.get("operations"), f"{where}.operations"))
    ]
    component_type = ComponentType(
        name=_optional_str(data.get("type"), f"{where}.type") or name,
        operations=tuple(operations),
        documentation=_optional_str(data.get("documentation"), f"{where}.documentation"),
    )
    return Component(name=name, type=component_type)


def _parse_operation(entry: Any, where: str) -> Operation:
    data = _require_mapping(entry, where)
    name = _require_name(data, where)
    raw_visibility = data.get("visibility", Visibility.PUBLIC.value)
    try:
        visibility = Visibility(str(raw_visibility).lower())
    except ValueError as exc:
        raise SourceError(f"{where}: unknown visibility '{raw_visibility}'") from exc
    return Operation(
        name=name,
        visibility=visibility,
        documentation=_optional_str(data.get("documentation"), f"{where}.documentation"),
    )


def _require_mapping(value: Any, where: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise SourceError(f"{where} must be a mapping")
    return value


def _require_name(data: Dict[str, Any], where: str) -> str:
    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        raise SourceError(f"{where} requires a non-empty 'name'")
    return name.strip()


def _as_list(value: Any, where: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise SourceError(f"{where} must be a list")
    return value


def _optional_str(value: Any, where: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise SourceError(f"{where} must be a string")
    return value


__all__ = ["load_model_file"]
