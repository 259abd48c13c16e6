"""Copies generated artifacts into a publishing directory."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from .constants import (
    API_SCHEMA_FILE,
    APPLICATION_DOC_FILE,
    COMPONENTS_DIAGRAM_FILE,
    CONFIGURATION_DOC_FILE,
    module_doc_file,
)
from .files import FileLifecycleManager
from .logging import get_logger
from .models import Module


class Relocator:
    """Gathers the fixed artifact manifest and copies it to a destination."""

    def __init__(self, files: FileLifecycleManager) -> None:
        self.files = files
        self.logger = get_logger("relocator")

    def manifest(self, modules: Sequence[Module]) -> List[Path]:
        """Return source paths in copy order.

        The API schema is produced by the build tool next to the output
        directory, so it is read from the build root.
        """
        paths = [
            self.files.path_for(CONFIGURATION_DOC_FILE),
            self.files.path_for(COMPONENTS_DIAGRAM_FILE),
            self.files.path_for(APPLICATION_DOC_FILE),
            self.files.build_root / API_SCHEMA_FILE,
        ]
        paths.extend(self.files.path_for(module_doc_file(module.name)) for module in modules)
        return paths

    def relocate(self, destination: Path | str, modules: Sequence[Module]) -> List[Path]:
        destination_dir = Path(destination)
        copied: List[Path] = []
        # No rollback: copies completed before a failure stay in place.
        for source in self.manifest(modules):
            copied.append(self.files.copy_file(source, destination_dir))
        self.logger.info("Copied %d artifacts to %s", len(copied), destination_dir)
        return copied


__all__ = ["Relocator"]
