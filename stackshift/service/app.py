"""FastAPI application exposing archive analysis and UIR generation."""

from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI, File, UploadFile
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..analysis import ProjectAnalyzer
from ..archive import ArchiveError
from ..config import load_config
from ..logging import get_logger
from ..uir import ASTError, UIRGenerator, load_ast


class LanguageStatsModel(BaseModel):
    files: int
    lines: int
    bytes: int
    percentage: float


class FileRecordModel(BaseModel):
    file_name: str
    extension: str
    language: str
    size: int
    lines: int
    path: str
    content: Optional[str] = None


class AnalysisResponse(BaseModel):
    total_files: int
    total_size: int
    total_lines: int
    languages: Dict[str, LanguageStatsModel]
    files: List[FileRecordModel]
    detected_framework: str
    project_type: str
    tech_stack: List[str]


class UIRRequest(BaseModel):
    ast: Dict[str, Any]
    file: str
    framework: str = "React"


class UIRResponse(BaseModel):
    nodes: List[Dict[str, Any]]


class HealthResponse(BaseModel):
    status: str


def create_app(
    analyzer_factory: Optional[Callable[[], ProjectAnalyzer]] = None,
) -> FastAPI:
    """Create the FastAPI application.

    Without an explicit factory, ``.stackshift.yml`` is read once from the
    working directory and every request gets a fresh analyzer built from it.
    """
    if analyzer_factory is None:
        analyzer_factory = partial(ProjectAnalyzer, load_config(Path.cwd()).analysis)

    logger = get_logger("service")
    app = FastAPI(title="StackShift Service", version="0.1.0")

    async def get_analyzer() -> ProjectAnalyzer:
        return analyzer_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/analyze", response_model=AnalysisResponse, response_model_exclude_none=True)
    async def analyze_archive(
        archive: UploadFile = File(...),
        include_content: bool = False,
        analyzer: ProjectAnalyzer = Depends(get_analyzer),
    ) -> AnalysisResponse:
        data = await archive.read()
        logger.info("Received archive %s (%d bytes)", archive.filename, len(data))
        analysis = await analyzer.analyze_async(data)
        return AnalysisResponse(**analysis.to_dict(include_content=include_content))

    @app.post("/uir", response_model=UIRResponse)
    async def generate_uir(payload: UIRRequest) -> UIRResponse:
        ast = load_ast(payload.ast)
        nodes = UIRGenerator().generate(ast, payload.file, payload.framework)
        return UIRResponse(nodes=[node.to_dict() for node in nodes])

    @app.exception_handler(ArchiveError)
    async def archive_error_handler(_: Any, exc: ArchiveError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ASTError)
    async def ast_error_handler(_: Any, exc: ASTError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    return app


def run_service(host: str = "0.0.0.0", port: int = 8000) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(create_app(), host=host, port=port)
