"""Tests for artifact relocation."""

from __future__ import annotations

from pathlib import Path

import pytest

from extdoc.files import FileLifecycleManager, IOFailure
from extdoc.models import Module
from extdoc.relocator import Relocator


def _seed_artifacts(files: FileLifecycleManager, modules: list[Module]) -> None:
    files.append_file("configuration.adoc", "_Config_")
    files.append_file("components.puml", "@startuml\n@enduml\n")
    files.append_file("application.adoc", "== Shop\n\n")
    (files.build_root / "openapi.json").write_bytes(b'{"openapi": "3.0.1"}')
    for module in modules:
        files.append_file(f"module-{module.name}.adoc", f"== {module.display_name}\r\n")


def test_manifest_reads_api_schema_from_build_root(
    files: FileLifecycleManager, sample_modules: list[Module]
) -> None:
    manifest = Relocator(files).manifest(sample_modules)
    assert [path.name for path in manifest] == [
        "configuration.adoc",
        "components.puml",
        "application.adoc",
        "openapi.json",
        "module-orders.adoc",
        "module-inventory.adoc",
    ]
    assert manifest[3].parent == files.build_root


def test_relocate_copies_n_plus_four_identical_files(
    files: FileLifecycleManager, sample_modules: list[Module], tmp_path: Path
) -> None:
    _seed_artifacts(files, sample_modules)
    destination = tmp_path / "published"

    copied = Relocator(files).relocate(destination, sample_modules)

    assert len(copied) == len(sample_modules) + 4
    assert sorted(path.name for path in destination.iterdir()) == sorted(
        path.name for path in copied
    )
    for source in Relocator(files).manifest(sample_modules):
        assert (destination / source.name).read_bytes() == source.read_bytes()


def test_relocate_stops_at_first_missing_artifact(
    files: FileLifecycleManager, sample_modules: list[Module], tmp_path: Path
) -> None:
    _seed_artifacts(files, sample_modules)
    files.path_for("application.adoc").unlink()
    destination = tmp_path / "published"

    with pytest.raises(IOFailure, match="application.adoc"):
        Relocator(files).relocate(destination, sample_modules)

    # Copies made before the failure are kept.
    assert sorted(path.name for path in destination.iterdir()) == [
        "components.puml",
        "configuration.adoc",
    ]
