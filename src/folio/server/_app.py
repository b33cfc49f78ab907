# pyright: reportAny=false
import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING

import orjson
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from folio.config import Config, safe_load_config
from folio.exceptions import ProjectDataError
from folio.utils import create_server_logger

from ._api import router as api_router
from ._pages import router as pages_router
from ._schemas import ErrorResponse

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

STATIC_MOUNT = "/static"

# Read by `create_app()` when uvicorn builds the app in a reload worker
CONFIG_FILE_ENV_VAR = "FOLIO_SERVE_CONFIG"
PROJECT_ROOT_ENV_VAR = "FOLIO_SERVE_PROJECT_ROOT"
OVERRIDES_ENV_VAR = "FOLIO_SERVE_OVERRIDES"


def launch_environment(
    *,
    config_path: Path | None = None,
    project_root: Path | None = None,
    cli_overrides: dict[str, object] | None = None,
) -> dict[str, str]:
    """Encode CLI configuration options as environment variables.

    Only options that were given are included. `create_app` reads them back
    when it is called without a configuration.
    """
    env: dict[str, str] = {}
    if config_path is not None:
        env[CONFIG_FILE_ENV_VAR] = str(config_path.resolve())
    if project_root is not None:
        env[PROJECT_ROOT_ENV_VAR] = str(project_root.resolve())
    if cli_overrides:
        env[OVERRIDES_ENV_VAR] = orjson.dumps(cli_overrides).decode()
    return env


def _config_from_environment() -> tuple[Config, str | None]:
    config_file = os.environ.get(CONFIG_FILE_ENV_VAR)
    project_root = os.environ.get(PROJECT_ROOT_ENV_VAR)
    overrides = os.environ.get(OVERRIDES_ENV_VAR)
    return safe_load_config(
        config_path=Path(config_file) if config_file else None,
        project_root=Path(project_root) if project_root else None,
        cli_overrides=orjson.loads(overrides) if overrides else None,
    )


def create_app(config: Config | None = None) -> FastAPI:
    """Create the folio web application.

    Args:
        config: Loaded configuration. When None, it is loaded from the
            options `launch_environment` encoded, or discovered from the
            working directory and environment.

    Returns:
        A FastAPI application serving the projects page and JSON API.
    """
    if config is None:
        config, _ = _config_from_environment()

    logger = create_server_logger(
        level=config.logging.level.value,
        log_format=config.logging.format.value,  # type: ignore[arg-type]
        log_file=config.logging.file,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> "AsyncGenerator[None]":  # noqa: UP037
        logger.info("server_started", root=str(config.root) if config.root else None)
        yield
        logger.info("server_stopped")

    app = FastAPI(docs_url=None, redoc_url="/api-docs", lifespan=lifespan)
    app.state.config = config
    app.state.logger = logger
    app.include_router(router=api_router)
    app.include_router(router=pages_router)

    static_dir = config.resolve_path(config.site.static_dir)
    if static_dir is not None and static_dir.is_dir():
        app.mount(STATIC_MOUNT, StaticFiles(directory=static_dir), name="static")

    @app.exception_handler(ProjectDataError)
    async def _project_data_error(  # pyright: ignore[reportUnusedFunction]
        request: Request, exc: ProjectDataError
    ) -> JSONResponse:
        logger.error(
            "project_data_error",
            path=request.url.path,
            file=str(exc.path) if exc.path else None,
            index=exc.index,
            error=str(exc),
        )
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(detail=str(exc)).model_dump(),
        )

    @app.exception_handler(FileNotFoundError)
    async def _missing_file(  # pyright: ignore[reportUnusedFunction]
        request: Request, exc: FileNotFoundError
    ) -> JSONResponse:
        logger.error("project_file_missing", path=request.url.path, error=str(exc))
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                detail=f"Projects file not found: {exc.filename}"
            ).model_dump(),
        )

    @app.exception_handler(OSError)
    async def _unreadable_file(  # pyright: ignore[reportUnusedFunction]
        request: Request, exc: OSError
    ) -> JSONResponse:
        logger.error("project_file_unreadable", path=request.url.path, error=str(exc))
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(detail=f"Failed to read projects file: {exc}").model_dump(),
        )

    return app
