"""FastAPI application exposing inject-docs as a service."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import ConfigError
from ..errors import InjectDocsError
from ..models import FileResult, InjectOptions, InjectOutcome
from ..orchestrator import Orchestrator


class InjectRequest(BaseModel):
    path: str
    files: Optional[str] = None
    language: Optional[str] = None
    dry_run: bool = True


class BlockPayload(BaseModel):
    type: str
    name: str
    line: int
    text: str


class FilePayload(BaseModel):
    file: str
    language: str
    blocks: List[BlockPayload]


class InjectResponse(BaseModel):
    status: str
    files: List[FilePayload]
    unsaved_files: List[str] = []
    written: List[str] = []
    preview: Optional[str] = None


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def _file_payload(result: FileResult) -> FilePayload:
    return FilePayload(
        file=result.file,
        language=result.language,
        blocks=[
            BlockPayload(
                type=block.element.type,
                name=block.element.name,
                line=block.element.line,
                text=block.text,
            )
            for block in result.documentation
        ],
    )


def _response(outcome: InjectOutcome) -> InjectResponse:
    return InjectResponse(
        status=outcome.status,
        files=[_file_payload(result) for result in outcome.results],
        unsaved_files=outcome.unsaved_files,
        written=outcome.written,
        preview=outcome.preview,
    )


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing inject-docs operations."""
    app = FastAPI(title="Handoff Documentation Service", version="1.0.0")

    async def get_orchestrator() -> Orchestrator:
        # A fresh orchestrator per request keeps runs independent.
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/inject", response_model=InjectResponse)
    async def inject(
        payload: InjectRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> InjectResponse:
        options = InjectOptions(
            files=payload.files,
            language=payload.language,
            dry_run=payload.dry_run,
        )
        loop = asyncio.get_running_loop()
        outcome = await loop.run_in_executor(
            None, lambda: orchestrator.run_inject(payload.path, options)
        )
        return _response(outcome)

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(_: Any, exc: FileNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(InjectDocsError)
    async def inject_error_handler(_: Any, exc: InjectDocsError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc), "error": type(exc).__name__},
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc), "error": type(exc).__name__},
        )

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(create_app(), host=host, port=port)


__all__ = ["create_app", "run_service"]
