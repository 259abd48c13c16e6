"""Aggregates documentation fragments of a modular application into AsciiDoc."""

from .annotations import extended_documentation
from .documenter import ExtendedDocumenter
from .files import FileLifecycleManager, IOFailure
from .models import Component, ComponentType, Module, Operation, Visibility
from .sources import ModelSource, SourceError, load_model_file, scan_package

__all__ = [
    "Component",
    "ComponentType",
    "ExtendedDocumenter",
    "FileLifecycleManager",
    "IOFailure",
    "Module",
    "ModelSource",
    "Operation",
    "SourceError",
    "Visibility",
    "extended_documentation",
    "load_model_file",
    "scan_package",
]
