"""FastAPI application entrypoint for extdoc service mode."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import ConfigError, load_config
from ..documenter import ExtendedDocumenter
from ..files import IOFailure
from ..sources import SourceError


class ProjectRequest(BaseModel):
    path: str = "."
    model: Optional[str] = None
    package: Optional[str] = None
    output_root: Optional[str] = None


class GenerateRequest(ProjectRequest):
    application_name: Optional[str] = None
    destination: Optional[str] = None


class GenerateResponse(BaseModel):
    output_directory: str
    copied: List[str] = []


class MoveRequest(ProjectRequest):
    destination: str


class MoveResponse(BaseModel):
    copied: List[str]


class HealthResponse(BaseModel):
    status: str


DocumenterFactory = Callable[[ProjectRequest, Optional[str]], ExtendedDocumenter]


def _default_documenter(
    payload: ProjectRequest, application_name: Optional[str] = None
) -> ExtendedDocumenter:
    config = load_config(Path(payload.path))
    if payload.model:
        config.model.file = config.root / payload.model
        config.model.package = None
    elif payload.package:
        config.model.package = payload.package
        config.model.file = None
    if payload.output_root:
        config.output.build_root = config.root / payload.output_root
    return ExtendedDocumenter.from_config(config, application_name=application_name)


async def _in_executor(func: Callable[[], Any]) -> Any:
    return await asyncio.get_running_loop().run_in_executor(None, func)


def create_app(documenter_factory: DocumenterFactory = _default_documenter) -> FastAPI:
    """Create the FastAPI application exposing extdoc operations."""

    app = FastAPI(title="extdoc Service", version="1.0.0")

    async def get_factory() -> DocumenterFactory:
        return documenter_factory

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/generate", response_model=GenerateResponse)
    async def generate(
        payload: GenerateRequest,
        factory: DocumenterFactory = Depends(get_factory),
    ) -> GenerateResponse:
        def _run() -> GenerateResponse:
            documenter = factory(payload, payload.application_name)
            documenter.write_documentation()
            copied: List[Path] = []
            if payload.destination:
                copied = documenter.move_to_folder(payload.destination)
            return GenerateResponse(
                output_directory=str(documenter.output_directory),
                copied=[str(path) for path in copied],
            )

        return await _in_executor(_run)

    @app.post("/move", response_model=MoveResponse)
    async def move(
        payload: MoveRequest,
        factory: DocumenterFactory = Depends(get_factory),
    ) -> MoveResponse:
        def _run() -> MoveResponse:
            documenter = factory(payload, None)
            copied = documenter.move_to_folder(payload.destination)
            return MoveResponse(copied=[str(path) for path in copied])

        return await _in_executor(_run)

    @app.exception_handler(ConfigError)
    @app.exception_handler(SourceError)
    async def bad_request_handler(_: Any, exc: RuntimeError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(IOFailure)
    async def io_failure_handler(_: Any, exc: IOFailure) -> JSONResponse:
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(create_app(), host=host, port=port)
