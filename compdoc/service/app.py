"""FastAPI application entrypoint for compdoc service mode."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..errors import CompDocError, ComponentNotFoundError
from ..logging import get_logger
from ..models import BatchReport
from ..pipeline import Pipeline

logger = get_logger("service")


class FileResult(BaseModel):
    path: str
    success: bool
    component: Optional[str] = None
    doc_path: Optional[str] = None
    message: str = ""
    error: Optional[str] = None


class BatchResponse(BaseModel):
    success: bool
    processed: int
    message: str = ""
    index_path: Optional[str] = None
    index_error: Optional[str] = None
    results: List[FileResult] = []

    @classmethod
    def from_report(cls, report: BatchReport) -> "BatchResponse":
        return cls(**report.to_dict())


class ComponentRequest(BaseModel):
    component_name: str
    stage: Optional[bool] = None


class AllRequest(BaseModel):
    stage: Optional[bool] = None


class StagedRequest(BaseModel):
    stage: bool = True


class ToolDescriptor(BaseModel):
    name: str
    description: str
    method: str
    path: str
    parameters: Dict[str, Any]


class HealthResponse(BaseModel):
    status: str


TOOLS: List[ToolDescriptor] = [
    ToolDescriptor(
        name="generate_all_component_docs",
        description="Generate documentation for every component.",
        method="POST",
        path="/docs/all",
        parameters={"type": "object", "properties": {"stage": {"type": "boolean"}}, "required": []},
    ),
    ToolDescriptor(
        name="generate_component_doc",
        description="Generate documentation for one component.",
        method="POST",
        path="/docs/component",
        parameters={
            "type": "object",
            "properties": {
                "component_name": {
                    "type": "string",
                    "description": "Component name without the file extension.",
                },
                "stage": {"type": "boolean"},
            },
            "required": ["component_name"],
        },
    ),
    ToolDescriptor(
        name="generate_staged_component_docs",
        description="Generate documentation for components staged in git.",
        method="POST",
        path="/docs/staged",
        parameters={"type": "object", "properties": {"stage": {"type": "boolean"}}, "required": []},
    ),
]


def create_app(
    pipeline_factory: Callable[[], Pipeline] | None = None,
    *,
    root: Path | str = ".",
) -> FastAPI:
    """Create the FastAPI application exposing compdoc operations."""

    factory = pipeline_factory or (lambda: Pipeline.from_path(root))
    app = FastAPI(title="CompDoc Service", version="0.1.0")

    async def get_pipeline() -> Pipeline:
        # A fresh pipeline per request picks up configuration edits.
        return factory()

    async def _in_executor(call: Callable[[], BatchReport]) -> BatchReport:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, call)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/tools", response_model=List[ToolDescriptor])
    async def tools() -> List[ToolDescriptor]:
        return TOOLS

    @app.post("/docs/all", response_model=BatchResponse)
    async def generate_all(
        payload: Optional[AllRequest] = None,
        pipeline: Pipeline = Depends(get_pipeline),
    ) -> BatchResponse:
        stage = payload.stage if payload else None
        report = await _in_executor(lambda: pipeline.run_all(stage=stage))
        return BatchResponse.from_report(report)

    @app.post("/docs/component", response_model=BatchResponse)
    async def generate_component(
        payload: ComponentRequest,
        pipeline: Pipeline = Depends(get_pipeline),
    ) -> BatchResponse:
        report = await _in_executor(
            lambda: pipeline.run_component(payload.component_name, stage=payload.stage)
        )
        return BatchResponse.from_report(report)

    @app.post("/docs/staged", response_model=BatchResponse)
    async def generate_staged(
        payload: Optional[StagedRequest] = None,
        pipeline: Pipeline = Depends(get_pipeline),
    ) -> BatchResponse:
        stage = payload.stage if payload else True
        report = await _in_executor(lambda: pipeline.run_staged(stage=stage))
        return BatchResponse.from_report(report)

    @app.exception_handler(ComponentNotFoundError)
    async def component_not_found_handler(
        _: Any, exc: ComponentNotFoundError
    ) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(CompDocError)
    async def compdoc_error_handler(_: Any, exc: CompDocError) -> JSONResponse:
        logger.error("Request failed: %s", exc)
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 3333, *, root: Path | str = "."
) -> None:  # pragma: no cover - integration path
    app = create_app(root=root)
    logger.info("Serving compdoc on http://%s:%s", host, port)
    # log_config=None keeps the handlers installed by configure_logging.
    uvicorn.run(app, host=host, port=port, log_config=None)
