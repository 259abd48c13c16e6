"""Tests for the FastAPI service mode."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from extdoc.documenter import ExtendedDocumenter
from extdoc.files import FileLifecycleManager
from extdoc.properties import PropertiesLocator
from extdoc.service import create_app
from extdoc.service.app import ProjectRequest
from extdoc.sources import ModelSource, SourceError


class _RecordingFactory:
    def __init__(self, source: ModelSource, tmp_path: Path) -> None:
        self.source = source
        self.tmp_path = tmp_path
        self.calls: list[tuple[str, Optional[str]]] = []
        self.threads: list[str] = []

    def __call__(
        self, payload: ProjectRequest, application_name: Optional[str]
    ) -> ExtendedDocumenter:
        self.calls.append((payload.path, application_name))
        self.threads.append(threading.current_thread().name)
        if payload.package == "broken":
            raise SourceError("Unable to import broken")
        return ExtendedDocumenter(
            application_name or "Shop",
            self.source,
            files=FileLifecycleManager(base_dir=self.tmp_path),
            locator=PropertiesLocator([self.tmp_path / "resources"]),
        )


@pytest.fixture
def factory(sample_source: ModelSource, tmp_path: Path) -> _RecordingFactory:
    return _RecordingFactory(sample_source, tmp_path)


@pytest.fixture
def client(factory: _RecordingFactory) -> TestClient:
    return TestClient(create_app(factory))


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_generate_endpoint(
    client: TestClient, factory: _RecordingFactory, tmp_path: Path
) -> None:
    response = client.post("/generate", json={"path": "project", "application_name": "Shop"})

    assert response.status_code == 200
    data = response.json()
    output = tmp_path / "build" / "spring-modulith-docs"
    assert data == {"output_directory": str(output), "copied": []}
    assert (output / "application.adoc").exists()
    assert factory.calls == [("project", "Shop")]


def test_move_endpoint_reports_missing_artifacts(client: TestClient, tmp_path: Path) -> None:
    client.post("/generate", json={})

    response = client.post("/move", json={"destination": str(tmp_path / "docs")})

    assert response.status_code == 500
    assert "Artifact not found" in response.json()["detail"]


def test_source_errors_map_to_bad_request(client: TestClient) -> None:
    response = client.post("/generate", json={"package": "broken"})
    assert response.status_code == 400
    assert response.json() == {"detail": "Unable to import broken"}


def test_generation_runs_in_loop_executor(client: TestClient, factory: _RecordingFactory) -> None:
    response = client.post("/generate", json={})
    assert response.status_code == 200
    # asyncio names its default executor threads with this prefix.
    assert factory.threads[0].startswith("asyncio")
