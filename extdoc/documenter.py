"""Runs the documentation pipeline: module docs, configuration, index, relocation."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from .collector import FragmentCollector
from .config import ExtDocConfig
from .constants import CONFIGURATION_DOC_FILE, DEFAULT_PROPERTIES_SEARCH_PATHS
from .files import FileLifecycleManager
from .index import IndexBuilder
from .logging import get_logger
from .properties import ConfigFormatter, PropertiesLocator, read_lines
from .relocator import Relocator
from .sources import DocumentationSource, SourceError, load_model_file, scan_package
from .writer import ModuleDocWriter


class ExtendedDocumenter:
    """Coordinates fragment aggregation and artifact lifecycle for one application.

    ``write_documentation`` first lets the source produce its primary
    artifacts, then writes module files, the configuration reference and the
    application index, in that order. Every I/O failure is fatal and leaves
    already written files as they are.
    """

    def __init__(
        self,
        application_name: str,
        source: DocumentationSource,
        *,
        files: FileLifecycleManager | None = None,
        locator: PropertiesLocator | None = None,
        formatter: ConfigFormatter | None = None,
        collector: FragmentCollector | None = None,
        writer: ModuleDocWriter | None = None,
        index_builder: IndexBuilder | None = None,
        relocator: Relocator | None = None,
    ) -> None:
        self.application_name = application_name
        self.source = source
        self.files = files or FileLifecycleManager()
        self.locator = locator or PropertiesLocator(
            [Path.cwd() / entry for entry in DEFAULT_PROPERTIES_SEARCH_PATHS]
        )
        self.formatter = formatter or ConfigFormatter()
        self.collector = collector or FragmentCollector(source)
        self.writer = writer or ModuleDocWriter(self.files)
        self.index_builder = index_builder or IndexBuilder(self.files)
        self.relocator = relocator or Relocator(self.files)
        self.logger = get_logger("documenter")

    @classmethod
    def from_config(
        cls,
        config: ExtDocConfig,
        *,
        source: DocumentationSource | None = None,
        application_name: str | None = None,
    ) -> "ExtendedDocumenter":
        """Build a documenter from ``.extdoc.yml`` settings."""
        if source is None:
            source = _load_source(config)
        name = (
            application_name
            or config.application_name
            or getattr(source, "application_name", None)
            or config.root.name
            or "Application"
        )
        files = FileLifecycleManager(
            config.output.build_root,
            base_dir=config.root,
            subdir=config.output.directory,
        )
        locator = PropertiesLocator(
            config.properties.search_paths, resource=config.properties.resource
        )
        return cls(name, source, files=files, locator=locator)

    @property
    def output_directory(self) -> Path:
        return self.files.output_directory

    def write_documentation(self) -> "ExtendedDocumenter":
        modules = self.source.modules()
        self.logger.info(
            "Writing documentation for %s (%d modules) to %s",
            self.application_name,
            len(modules),
            self.files.output_directory,
        )
        self.source.write_primary_artifacts(
            self.files.output_directory, self.files.build_root
        )

        self.writer.reset(modules)
        self.writer.write_all(self.collector.collect(modules))

        if not self.write_configuration_documentation():
            self.logger.warning(
                "%s was not generated; the application index still links to it",
                CONFIGURATION_DOC_FILE,
            )

        self.index_builder.write(self.application_name, modules)
        return self

    def write_configuration_documentation(self) -> Optional[Path]:
        """Format the configuration resource; return None when it is absent."""
        resource = self.locator.locate()
        if resource is None:
            return None
        text = self.formatter.render(read_lines(resource))
        with self.files.recreate_file(CONFIGURATION_DOC_FILE) as handle:
            handle.write(text)
        return self.files.path_for(CONFIGURATION_DOC_FILE)

    def move_to_folder(self, destination: Path | str) -> List[Path]:
        return self.relocator.relocate(destination, self.source.modules())


def _load_source(config: ExtDocConfig) -> DocumentationSource:
    if config.model.file is not None:
        return load_model_file(config.model.file)
    if config.model.package is not None:
        return scan_package(config.model.package)
    raise SourceError(
        "No application model configured; set model.file or model.package in .extdoc.yml"
    )


__all__ = ["ExtendedDocumenter"]
