"""FastAPI application entrypoint for structdoc service mode."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..assembler import StructureGenerator
from ..config import ConfigError, load_config
from ..writer import write_structure


class GenerateRequest(BaseModel):
    path: str
    write: bool = False
    output_dir: Optional[str] = None
    file_name: Optional[str] = None


class GenerateResponse(BaseModel):
    document: str
    output_path: Optional[str] = None


class HealthResponse(BaseModel):
    status: str


def _default_generator() -> StructureGenerator:
    return StructureGenerator()


def create_app(
    generator_factory: Callable[[], StructureGenerator] = _default_generator,
) -> FastAPI:
    """Create the FastAPI application exposing structure generation."""

    app = FastAPI(title="structdoc service", version="0.1.0")

    async def get_generator() -> StructureGenerator:
        return generator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/generate", response_model=GenerateResponse)
    async def generate(
        payload: GenerateRequest,
        generator: StructureGenerator = Depends(get_generator),
    ) -> GenerateResponse:
        def _run() -> GenerateResponse:
            root = Path(payload.path).expanduser()
            document = generator.generate(root)
            if not payload.write:
                return GenerateResponse(document=document)

            config = load_config(root.resolve())
            if payload.output_dir is not None:
                config.output.path = payload.output_dir
            if payload.file_name:
                config.output.file_name = payload.file_name
            output_file = write_structure(document, config)
            return GenerateResponse(document=document, output_path=str(output_file))

        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, _run)

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(_: Any, exc: FileNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(NotADirectoryError)
    async def not_a_directory_handler(_: Any, exc: NotADirectoryError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(PermissionError)
    async def permission_error_handler(_: Any, exc: PermissionError) -> JSONResponse:
        return JSONResponse(status_code=403, content={"detail": str(exc)})

    @app.exception_handler(OSError)
    async def os_error_handler(_: Any, exc: OSError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(create_app(), host=host, port=port)
