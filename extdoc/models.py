"""Core data models describing a modular application and its documentation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class Visibility(str, Enum):
    """Access level of an operation; only public operations are documented."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PACKAGE = "package"
    PRIVATE = "private"


@dataclass(frozen=True)
class Operation:
    """A callable entry point declared on a component type."""

    name: str
    visibility: Visibility = Visibility.PUBLIC
    documentation: Optional[str] = None

    @property
    def is_public(self) -> bool:
        return self.visibility is Visibility.PUBLIC


@dataclass(frozen=True)
class ComponentType:
    """Type descriptor of a component, owning its operations."""

    name: str
    operations: Tuple[Operation, ...] = ()
    documentation: Optional[str] = None


@dataclass(frozen=True)
class Component:
    """A service unit registered in exactly one module."""

    name: str
    type: ComponentType


@dataclass(frozen=True)
class Module:
    """Top-level organisational unit of the application."""

    name: str
    display_name: str
    components: Tuple[Component, ...] = ()
    documentation: Optional[str] = None


@dataclass(frozen=True)
class ModuleFragment:
    """Documentation text destined for a module's output file."""

    module: Module
    text: str


Documentable = Union[Module, ComponentType, Operation]


def display_name_for(name: str) -> str:
    """Derive a human readable module name from its identifier."""
    words = name.replace("-", " ").replace("_", " ").split()
    return " ".join(word.capitalize() for word in words) or name


__all__ = [
    "Component",
    "ComponentType",
    "Documentable",
    "Module",
    "ModuleFragment",
    "Operation",
    "Visibility",
    "display_name_for",
]
