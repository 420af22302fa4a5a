"""FastAPI application entry point."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.routes import cities, contact, crimes, health, search, seo
from .config import Settings, settings as default_settings
from .errors import ServiceError
from .services.crimes import CrimeQueryService
from .services.police import DatesCache, PoliceAPIClient

logger = logging.getLogger(__name__)


def _error_body(error: str, details: str | None, app_settings: Settings) -> dict:
    body: dict = {"success": False, "error": error}
    if details and not app_settings.is_production:
        body["details"] = details
    return body


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.message, exc.details, request.app.state.settings),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body("Invalid request", str(exc.errors()), request.app.state.settings),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("Internal server error", str(exc), request.app.state.settings),
        )


def create_app(
    app_settings: Settings | None = None,
    police_client: PoliceAPIClient | None = None,
    clock: Callable[[], float] | None = None,
) -> FastAPI:
    app_settings = app_settings or default_settings
    client = police_client or PoliceAPIClient(
        base_url=app_settings.police_api_base_url,
        user_agent=app_settings.police_api_user_agent,
        dates_timeout=app_settings.dates_timeout_seconds,
        forces_timeout=app_settings.forces_timeout_seconds,
        crimes_timeout=app_settings.crimes_timeout_seconds,
    )
    dates_cache = DatesCache(
        client,
        ttl=app_settings.dates_cache_ttl_seconds,
        fallback_date=app_settings.fallback_date,
        clock=clock or time.monotonic,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("%s starting (environment: %s)", app_settings.app_name, app_settings.environment)
        if app_settings.warm_dates_cache:
            try:
                latest = await run_in_threadpool(dates_cache.resolve_latest_date)
                logger.info("Initial dates cache loaded: %s", latest)
            except Exception as exc:
                logger.warning("Could not load initial dates cache: %s", exc)
        yield

    app = FastAPI(title=app_settings.app_name, version=app_settings.version, lifespan=lifespan)
    app.state.settings = app_settings
    app.state.police_client = client
    app.state.dates_cache = dates_cache
    app.state.crime_service = CrimeQueryService(client, dates_cache)

    if app_settings.frontend_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(app_settings.frontend_allowed_origins),
            allow_methods=["*"],
            allow_headers=["*"],
        )
    _install_error_handlers(app)

    # Root endpoint for diagnostics
    @app.get("/")
    def root() -> dict:
        return {
            "service": app_settings.app_name,
            "status": "running",
            "recent_date": dates_cache.resolve_latest_date(),
            "api_prefix": app_settings.api_prefix,
            "health": "/health",
            "docs": "/docs",
        }

    app.include_router(health.router)
    app.include_router(seo.router)
    app.include_router(cities.pages_router)
    app.include_router(crimes.router, prefix=app_settings.api_prefix)
    app.include_router(search.router, prefix=app_settings.api_prefix)
    app.include_router(contact.router, prefix=app_settings.api_prefix)
    app.include_router(cities.router, prefix=app_settings.api_prefix)
    return app


logging.basicConfig(
    level=default_settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app()
