"""Discovery collaborators that supply the application model."""

from .base import DocumentationSource, ModelSource, SourceError
from .model_file import load_model_file
from .package import scan_package

__all__ = [
    "DocumentationSource",
    "ModelSource",
    "SourceError",
    "load_model_file",
    "scan_package",
]
