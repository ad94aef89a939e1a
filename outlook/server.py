"""HTTP surface: static front end plus the analysis endpoint."""

import logging
from pathlib import Path
from typing import Any

from fastapi import Body, FastAPI, Request
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from outlook.config.loader import config_hash
from outlook.config.schema import OutlookConfig
from outlook.errors import OutlookError
from outlook.ingest.dataset_fetcher import build_fetcher
from outlook.models.common import utc_now_iso
from outlook.service import OutlookService
from outlook.storage.dataset_cache import FileDatasetCache

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent


def resolve_path(path_str: str) -> Path:
    path = Path(path_str)
    return path if path.is_absolute() else PROJECT_ROOT / path


def build_service(config: OutlookConfig) -> OutlookService:
    cache = FileDatasetCache(resolve_path(config.cache.directory))
    return OutlookService(config, build_fetcher(config, cache))


def create_app(
    config: OutlookConfig | None = None, service: OutlookService | None = None
) -> FastAPI:
    config = config or OutlookConfig()
    service = service or build_service(config)
    static_dir = resolve_path(config.server.static_dir)
    index_html = static_dir / "index.html"

    app = FastAPI(title="Climate Outlook", version="0.1.0")

    @app.exception_handler(OutlookError)
    async def _outlook_error(request: Request, exc: OutlookError):
        if exc.status_code >= 500:
            logger.error("%s: %s", type(exc).__name__, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def _unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error during analysis")
        return JSONResponse(
            status_code=500,
            content={"error": "An error occurred while analysing the data."},
        )

    @app.get("/")
    def serve_index():
        if index_html.exists():
            return FileResponse(index_html, media_type="text/html")
        return HTMLResponse("<h1>Front end not found</h1>", status_code=404)

    @app.get("/api/health")
    def health():
        return {
            "status": "ok",
            "period_start": config.api.start_year,
            "period_end": config.api.end_year,
            "config_hash": config_hash(config),
            "timestamp": utc_now_iso(),
        }

    @app.post("/analyze-weather")
    def analyze_weather(payload: dict[str, Any] | None = Body(default=None)):
        return service.analyze(payload)

    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")

    return app
