from __future__ import annotations

from pathlib import Path

import pytest

from extdoc.files import FileLifecycleManager
from extdoc.models import Component, ComponentType, Module, Operation, Visibility
from extdoc.sources import ModelSource
from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture
def project_builder(tmp_path: Path) -> ProjectBuilder:
    """Provide a reusable project builder rooted at the pytest tmp_path."""
    return ProjectBuilder(tmp_path)


@pytest.fixture
def files(tmp_path: Path) -> FileLifecycleManager:
    return FileLifecycleManager("build", base_dir=tmp_path)


@pytest.fixture
def sample_modules() -> list[Module]:
    """Two modules covering every fragment level, private and unannotated operations."""
    order_service = ComponentType(
        name="OrderService",
        documentation="=== Order service\n\n",
        operations=(
            Operation("place", Visibility.PUBLIC, "==== place\n\nPlaces an order.\n\n"),
            Operation("audit", Visibility.PRIVATE, "SECRET audit notes\n\n"),
            Operation("cancel", Visibility.PUBLIC, None),
            Operation("track", Visibility.PUBLIC, "==== track\n\n"),
        ),
    )
    order_repository = ComponentType(
        name="OrderRepository",
        documentation=None,
        operations=(Operation("save", Visibility.PUBLIC, "==== save\n\n"),),
    )
    inventory_service = ComponentType(
        name="StockService",
        documentation="=== Stock service\n\n",
        operations=(Operation("reserve", Visibility.PROTECTED, "PROTECTED reserve\n\n"),),
    )
    return [
        Module(
            name="orders",
            display_name="Orders",
            documentation="== Orders\n\nOrder handling.\n\n",
            components=(
                Component("orderService", order_service),
                Component("orderRepository", order_repository),
            ),
        ),
        Module(
            name="inventory",
            display_name="Inventory",
            components=(Component("stockService", inventory_service),),
        ),
    ]


@pytest.fixture
def sample_source(sample_modules: list[Module]) -> ModelSource:
    return ModelSource(sample_modules, application_name="Shop")
