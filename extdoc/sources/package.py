"""Discovers modules, components and operations from an importable package."""

from __future__ import annotations

import importlib
import inspect
import pkgutil
from types import ModuleType
from typing import Iterator, List

from ..annotations import documentation_of
from ..logging import get_logger
from ..models import Component, ComponentType, Module, Operation, Visibility, display_name_for
from .base import ModelSource, SourceError

logger = get_logger("sources.package")


def scan_package(package_name: str, *, application_name: str | None = None) -> ModelSource:
    """Build a model where every direct subpackage of ``package_name`` is a module.

    Classes defined inside a module's package become its components, ordered
    by submodule name and then by definition order. Functions defined on a
    class become operations; a leading underscore makes them private.
    """
    root = _import(package_name)
    if not hasattr(root, "__path__"):
        raise SourceError(f"{package_name} is a module, not a package")

    modules: List[Module] = []
    for info in pkgutil.iter_modules(root.__path__, prefix=f"{package_name}."):
        if not info.ispkg:
            continue
        package = _import(info.name)
        short_name = info.name.rsplit(".", 1)[-1]
        components = tuple(_components_of(package))
        logger.debug("Module %s: %d components", short_name, len(components))
        modules.append(
            Module(
                name=short_name,
                display_name=display_name_for(short_name),
                components=components,
                documentation=documentation_of(package),
            )
        )

    if application_name is None:
        application_name = display_name_for(package_name.rsplit(".", 1)[-1])
    return ModelSource(modules, application_name=application_name)


def _import(name: str) -> ModuleType:
    try:
        return importlib.import_module(name)
    except ImportError as exc:
        raise SourceError(f"Unable to import {name}: {exc}") from exc


def _walk(package: ModuleType) -> Iterator[ModuleType]:
    yield package
    for info in sorted(
        pkgutil.walk_packages(package.__path__, prefix=f"{package.__name__}."),
        key=lambda item: item.name,
    ):
        yield _import(info.name)


def _components_of(package: ModuleType) -> Iterator[Component]:
    for module in _walk(package):
        for obj in vars(module).values():
            if not inspect.isclass(obj) or obj.__module__ != module.__name__:
                continue
            component_type = ComponentType(
                name=obj.__qualname__,
                operations=tuple(_operations_of(obj)),
                documentation=documentation_of(obj),
            )
            yield Component(name=obj.__name__, type=component_type)


def _operations_of(cls: type) -> Iterator[Operation]:
    for name, member in vars(cls).items():
        if isinstance(member, (staticmethod, classmethod)):
            member = member.__func__
        elif isinstance(member, property):
            member = member.fget
        if not inspect.isfunction(member):
            continue
        visibility = Visibility.PRIVATE if name.startswith("_") else Visibility.PUBLIC
        yield Operation(name=name, visibility=visibility, documentation=documentation_of(member))


__all__ = ["scan_package"]
