"""Tests for module file writing and the application index."""

from __future__ import annotations

from extdoc.collector import FragmentCollector
from extdoc.files import FileLifecycleManager
from extdoc.index import IndexBuilder
from extdoc.models import Module, ModuleFragment
from extdoc.writer import ModuleDocWriter


def test_writer_appends_fragments_per_module(
    files: FileLifecycleManager, sample_modules: list[Module]
) -> None:
    writer = ModuleDocWriter(files)
    count = writer.write_all(FragmentCollector().collect(sample_modules))

    assert count == 6
    orders = files.path_for("module-orders.adoc").read_text(encoding="utf-8")
    assert orders == (
        "== Orders\n\nOrder handling.\n\n"
        "=== Order service\n\n"
        "==== place\n\nPlaces an order.\n\n"
        "==== track\n\n"
        "==== save\n\n"
    )
    assert files.path_for("module-inventory.adoc").read_text(encoding="utf-8") == (
        "=== Stock service\n\n"
    )


def test_module_fragment_is_first_write(
    files: FileLifecycleManager, sample_modules: list[Module]
) -> None:
    ModuleDocWriter(files).write_all(FragmentCollector().collect(sample_modules))
    orders = files.path_for("module-orders.adoc").read_text(encoding="utf-8")
    assert orders.startswith(sample_modules[0].documentation)


def test_module_without_fragments_gets_no_file(files: FileLifecycleManager) -> None:
    module = Module(name="quiet", display_name="Quiet")
    ModuleDocWriter(files).write_all(FragmentCollector().collect([module]))
    assert not files.path_for("module-quiet.adoc").exists()


def test_reset_removes_previous_module_files(
    files: FileLifecycleManager, sample_modules: list[Module]
) -> None:
    writer = ModuleDocWriter(files)
    writer.write(ModuleFragment(sample_modules[0], "stale"))
    writer.reset(sample_modules)
    assert not files.path_for("module-orders.adoc").exists()


def test_index_render_matches_expected_layout(sample_modules: list[Module]) -> None:
    builder = IndexBuilder(FileLifecycleManager("build"))
    assert builder.render("Shop", sample_modules) == (
        "== Shop\n\n"
        "=== Reference documentation:\n\n"
        "xref:openapi.json#[Rest API]\n\n"
        "xref:components.puml#[Components]\n\n"
        "<<module-orders.adoc#,Orders Module>>\n\n"
        "<<module-inventory.adoc#,Inventory Module>>\n\n"
        "<<configuration.adoc#,Configuration>>\n\n"
    )


def test_index_lists_modules_in_presented_order(sample_modules: list[Module]) -> None:
    builder = IndexBuilder(FileLifecycleManager("build"))
    text = builder.render("Shop", list(reversed(sample_modules)))
    assert text.index("Inventory Module") < text.index("Orders Module")


def test_index_write_truncates_previous_index(
    files: FileLifecycleManager, sample_modules: list[Module]
) -> None:
    builder = IndexBuilder(files)
    builder.write("Old name with a much longer heading", sample_modules)
    builder.write("Shop", sample_modules[:1])
    content = files.path_for("application.adoc").read_text(encoding="utf-8")
    assert content.startswith("== Shop\n\n")
    assert "Old name" not in content
    assert "Inventory" not in content
