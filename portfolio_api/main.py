"""ASGI application for the portfolio API.

create_app() reads settings when called, so tests can prepare the environment
before the module-level ``app`` is built. Startup and shutdown live in
portfolio_api.core.lifespan; error envelopes in portfolio_api.core.exception_handlers.
"""

from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from portfolio_api.api import api_router
from portfolio_api.core.config import Settings, get_settings
from portfolio_api.core.exception_handlers import register_exception_handlers
from portfolio_api.core.lifespan import create_lifespan
from portfolio_api.core.limiter import limiter
from portfolio_api.infrastructure.external.storage.local_storage import PUBLIC_PATH
from portfolio_api.middleware import (
    RequestIDMiddleware,
    RequestSizeLimitMiddleware,
    SecurityHeadersMiddleware,
)
from portfolio_api.pages import render_root_page

# Reads its own multipart body with the upload limit.
UPLOAD_PATH = "/api/upload"


def _add_middleware(app: FastAPI, settings: Settings) -> None:
    # Added innermost first: size limit, security headers, request ID, CORS.
    app.add_middleware(
        RequestSizeLimitMiddleware,
        max_bytes=settings.max_request_size,
        exempt_paths=(UPLOAD_PATH,),
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _mount_local_uploads(app: FastAPI, settings: Settings) -> None:
    uploads = Path(settings.storage_root).resolve()
    uploads.mkdir(parents=True, exist_ok=True)
    app.mount(PUBLIC_PATH, StaticFiles(directory=uploads), name="uploads")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    limiter.enabled = settings.rate_limit_enabled
    app.state.limiter = limiter

    register_exception_handlers(app)
    _add_middleware(app, settings)
    app.include_router(api_router, prefix="/api")
    if settings.storage_backend == "local":
        _mount_local_uploads(app, settings)

    landing = render_root_page(settings.app_name, settings.app_version)

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    def root() -> HTMLResponse:
        return HTMLResponse(content=landing)

    return app


app = create_app()
