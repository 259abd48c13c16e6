"""Capability interface between the documenter and module discovery."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Protocol, Sequence

from ..constants import API_SCHEMA_FILE
from ..files import IOFailure
from ..logging import get_logger
from ..models import Documentable, Module


class SourceError(RuntimeError):
    """Raised when an application model cannot be loaded."""


class DocumentationSource(Protocol):
    """What the documenter needs from whoever discovers the application."""

    def modules(self) -> Sequence[Module]:
        """Return modules in presentation order."""

    def fragment_for(self, entity: Documentable) -> Optional[str]:
        """Return the fragment attached to ``entity``, if any."""

    def write_primary_artifacts(self, output_directory: Path, build_root: Path) -> List[Path]:
        """Produce diagram and schema artifacts before fragments are written.

        The diagram belongs in ``output_directory``; the API schema belongs in
        ``build_root``, where the build tool writes it.
        """


class ModelSource:
    """In-memory application model with optional pass-through artifacts.

    ``artifacts`` maps an artifact name (``components.puml``) to an existing
    file which is copied verbatim into the output directory. ``openapi.json``
    goes to the build root instead, next to where the build tool puts it.
    """

    def __init__(
        self,
        modules: Iterable[Module],
        *,
        application_name: str | None = None,
        artifacts: Mapping[str, Path] | None = None,
    ) -> None:
        self._modules = list(modules)
        names = [module.name for module in self._modules]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise SourceError(f"Duplicate module names: {', '.join(duplicates)}")
        self.application_name = application_name
        self.artifacts: Dict[str, Path] = dict(artifacts or {})
        self.logger = get_logger("sources")

    def modules(self) -> Sequence[Module]:
        return tuple(self._modules)

    def fragment_for(self, entity: Documentable) -> Optional[str]:
        return entity.documentation

    def write_primary_artifacts(self, output_directory: Path, build_root: Path) -> List[Path]:
        written: List[Path] = []
        if not self.artifacts:
            return written
        try:
            for name, source in self.artifacts.items():
                directory = build_root if name == API_SCHEMA_FILE else output_directory
                directory.mkdir(parents=True, exist_ok=True)
                target = directory / name
                shutil.copyfile(source, target)
                written.append(target)
        except OSError as exc:
            raise IOFailure(f"Unable to pass through primary artifacts: {exc}") from exc
        self.logger.debug("Passed through %d primary artifacts", len(written))
        return written


__all__ = ["DocumentationSource", "ModelSource", "SourceError"]
