"""
FastAPI application factory for the Kickstarter Graveyard.

Usage:
    python -m api.app                                  # Dev server on port 8000
    APP_DATA_PATH=/data/graveyard.json python -m api.app

OpenAPI docs available at http://localhost:8000/docs after starting.

The dataset is read once, in the lifespan startup hook.  Until that resolves
every view reports ``loading``; if it fails the page still renders its header
and controls and the results area shows the load error.

Structured JSON logging when APP_LOG_FORMAT=json.
CORS middleware with configurable origins via APP_CORS_ORIGINS.
"""

import json
import logging
import time
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool

from api.routes import aggregations, projects, reference
from api.routes import frontend as frontend_routes
from graveyard import DatasetLoader, LoadState
from graveyard.view import ViewBuilder
from utils.config import AppConfig
from utils.formatting import (
    category_leaf,
    format_currency,
    format_number,
    source_name,
    tag_style,
)

# ── Configuration ─────────────────────────────────────────────────────────────
_cfg = AppConfig.from_env()

# ── Structured JSON logging ───────────────────────────────────────────────────


class _JsonFormatter(logging.Formatter):
    """Emit log records as newline-delimited JSON."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Merge extra fields added via logger.info("...", extra={...})
        for key in ("method", "path", "status", "duration_ms", "request_id"):
            if hasattr(record, key):
                data[key] = getattr(record, key)
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data)


_logger = logging.getLogger("graveyard_api")
_handler = logging.StreamHandler()
if _cfg.log_format == "json":
    _handler.setFormatter(_JsonFormatter())
else:
    _handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    )
logging.basicConfig(handlers=[_handler], level=logging.INFO, force=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Read the dataset once on startup."""
    loader: DatasetLoader = app.state.view_builder.loader
    await run_in_threadpool(loader.load)
    if loader.state == LoadState.FAILED:
        _logger.warning("Serving without data: %s", loader.error)
    yield


def create_app(
    data_path: str | Path | None = None,
    loader: DatasetLoader | None = None,
    config: AppConfig | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        data_path: Override the dataset location (useful for testing).
        loader: Use this loader instead of building one from the config;
            a loader that has already resolved is not read again.
        config: Override the environment configuration.

    Returns:
        Configured FastAPI application instance.
    """
    cfg = config or _cfg
    if loader is None:
        source = data_path if data_path is not None else cfg.data_source
        loader = DatasetLoader(source, timeout=cfg.fetch_timeout)

    app = FastAPI(
        title="Kickstarter Graveyard",
        summary="A database of failed Kickstarter hardware projects.",
        description=(
            "## Kickstarter Graveyard API\n\n"
            "Search, filter and sort a fixed dataset of failed crowdfunded "
            "hardware projects.\n\n"
            "### Filter parameters\n"
            "- `q`: case-insensitive match on name, failure reason or category\n"
            "- `category`: exact category path (e.g. `Hardware/Wearables`)\n"
            "- `tag`: exact failure tag\n"
            "- `sort`: `amount`, `date` or `backers`\n"
            "- `dir`: `1` ascending, `-1` descending (default)\n\n"
            "Aggregate stats always cover the whole dataset, never the "
            "filtered view."
        ),
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=[
            {"name": "projects", "description": "Filtered, sorted project lists and the full view-model."},
            {"name": "reference", "description": "Distinct categories and failure tags."},
            {"name": "aggregations", "description": "Totals over the whole graveyard."},
            {"name": "meta", "description": "Health check."},
        ],
    )
    app.state.view_builder = ViewBuilder(loader, cache_size=cfg.view_cache_size)

    # ── CORS middleware ───────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "HEAD", "OPTIONS"],
        allow_headers=["*"],
    )

    # ── Request logging middleware ────────────────────────────────────────────

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log each request with its duration and a short request id."""
        request_id = str(uuid.uuid4())[:8]
        start = time.monotonic()
        path = request.url.path

        response = await call_next(request)
        duration_ms = (time.monotonic() - start) * 1000
        response.headers["X-Request-ID"] = request_id

        if cfg.log_format == "json":
            _logger.info(
                "request",
                extra={
                    "method": request.method,
                    "path": path,
                    "status": response.status_code,
                    "duration_ms": round(duration_ms, 1),
                    "request_id": request_id,
                },
            )
        else:
            _logger.info(
                "method=%s path=%s status=%d duration_ms=%.1f rid=%s",
                request.method, path, response.status_code, duration_ms, request_id,
            )
        return response

    # ── Content Security Policy + security headers ────────────────────────────

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        """Add Content-Security-Policy, X-Content-Type-Options, and X-Frame-Options."""
        response = await call_next(request)
        # Swagger UI at /docs loads its own CDN assets; leave it alone.
        if not request.url.path.startswith(("/docs", "/redoc")):
            response.headers["Content-Security-Policy"] = (
                "default-src 'self'; "
                "script-src 'self' unpkg.com cdn.tailwindcss.com 'unsafe-inline'; "
                "style-src 'self' 'unsafe-inline'; "
                "img-src 'self' data: https:; "
                "connect-src 'self';"
            )
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        return response

    # ── Error handling ────────────────────────────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        """Catch unhandled exceptions and return JSON instead of HTML traceback."""
        _logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "detail": str(exc),
                "status_code": 500,
            },
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        return JSONResponse(
            status_code=400,
            content={"error": "Bad request", "detail": str(exc), "status_code": 400},
        )

    # ── Health check ──────────────────────────────────────────────────────────

    @app.get("/health", tags=["meta"], summary="Health check")
    def health(request: Request):
        """Return 200 once the dataset is loaded, 503 while loading or after a failure."""
        builder: ViewBuilder = request.app.state.view_builder
        current = builder.loader
        if current.state == LoadState.READY:
            return {
                "status": "ok",
                "dataset": str(current.source),
                "projects": len(current.projects),
                "view_cache": builder.cache.stats(),
            }
        return JSONResponse(
            status_code=503,
            content={
                "status": current.state.value,
                "dataset": str(current.source),
                "error": current.error,
            },
        )

    # ── Register routers ──────────────────────────────────────────────────────

    prefix = "/api/v1"
    app.include_router(projects.router,     prefix=prefix)
    app.include_router(reference.router,    prefix=prefix)
    app.include_router(aggregations.router, prefix=prefix)

    # ── Jinja2 templates ──────────────────────────────────────────────────────
    templates_dir = Path(__file__).parent.parent / "templates"

    if templates_dir.exists():
        templates = Jinja2Templates(directory=str(templates_dir))
        templates.env.filters["fmt_number"] = format_number
        templates.env.filters["fmt_currency"] = format_currency
        templates.env.filters["source_name"] = source_name
        templates.env.filters["tag_style"] = tag_style
        templates.env.filters["category_leaf"] = category_leaf

        # Wire templates into the frontend router
        frontend_routes.set_templates(templates)
        app.include_router(frontend_routes.router)

    frontend_routes.register_error_handlers(app)

    return app


# Singleton instance for uvicorn
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.app:app",
        host=_cfg.api_host,
        port=_cfg.api_port,
        reload=True,
        log_level="info",
    )
