"""Application-level index document."""

from __future__ import annotations

from typing import List, Sequence

from .constants import (
    API_SCHEMA_FILE,
    APPLICATION_DOC_FILE,
    COMPONENTS_DIAGRAM_FILE,
    CONFIGURATION_DOC_FILE,
    module_doc_file,
)
from .files import FileLifecycleManager
from .models import Module


class IndexBuilder:
    """Builds ``application.adoc`` cross-referencing every generated artifact."""

    def __init__(self, files: FileLifecycleManager) -> None:
        self.files = files

    def render(self, application_name: str, modules: Sequence[Module]) -> str:
        lines: List[str] = [
            f"== {application_name}",
            "=== Reference documentation:",
            f"xref:{API_SCHEMA_FILE}#[Rest API]",
            f"xref:{COMPONENTS_DIAGRAM_FILE}#[Components]",
        ]
        for module in modules:
            lines.append(f"<<{module_doc_file(module.name)}#,{module.display_name} Module>>")
        # Emitted even when the configuration document was skipped.
        lines.append(f"<<{CONFIGURATION_DOC_FILE}#,Configuration>>")
        return "".join(f"{line}\n\n" for line in lines)

    def write(self, application_name: str, modules: Sequence[Module]) -> None:
        content = self.render(application_name, modules)
        with self.files.recreate_file(APPLICATION_DOC_FILE) as handle:
            handle.write(content)


__all__ = ["IndexBuilder"]
