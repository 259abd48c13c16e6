"""Appends collected fragments to per-module AsciiDoc files."""

from __future__ import annotations

from typing import Iterable

from .constants import module_doc_file
from .files import FileLifecycleManager
from .logging import get_logger
from .models import Module, ModuleFragment


class ModuleDocWriter:
    """Writes each fragment to its module's file as soon as it is received."""

    def __init__(self, files: FileLifecycleManager) -> None:
        self.files = files
        self.logger = get_logger("writer")

    def reset(self, modules: Iterable[Module]) -> None:
        """Remove module files left behind by a previous run."""
        for module in modules:
            self.files.remove_file(module_doc_file(module.name))

    def write(self, fragment: ModuleFragment) -> None:
        self.files.append_file(module_doc_file(fragment.module.name), fragment.text)

    def write_all(self, fragments: Iterable[ModuleFragment]) -> int:
        count = 0
        for fragment in fragments:
            self.write(fragment)
            count += 1
        self.logger.debug("Wrote %d module fragments", count)
        return count


__all__ = ["ModuleDocWriter"]
