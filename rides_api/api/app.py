"""
FastAPI application factory.

* Opens the database on startup and closes it on shutdown (lifespan).
* Registers the health and ride routes.
* Applies per-client rate limiting to the ride routes (slowapi).
* Renders ride errors as HTTP 200 ``{"error_code", "message"}`` bodies.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from rides_api.api.middleware import configure_limiter
from rides_api.api.routes import health, rides
from rides_api.api.schemas import ErrorResponse
from rides_api.config import Settings, settings as default_settings
from rides_api.domain.entities import RideError
from rides_api.domain.enums import ErrorCode
from rides_api.infrastructure.database import Database
from rides_api.infrastructure.repositories import RideRepository

logger = logging.getLogger(__name__)


def _error_body(error_code: ErrorCode, message: str) -> JSONResponse:
    body = ErrorResponse(error_code=error_code, message=message)
    return JSONResponse(status_code=200, content=body.model_dump(mode="json"))


async def ride_error_handler(request: Request, exc: RideError) -> JSONResponse:
    return _error_body(exc.error_code, exc.message)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"Invalid request: {location}: {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    logger.info("Rejected request to %s: %s", request.url.path, message)
    return _error_body(ErrorCode.VALIDATION_ERROR, message)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the database on startup; close it on shutdown."""
        database = Database(settings.database_url, echo=settings.database_echo)
        await database.connect()
        app.state.database = database
        app.state.ride_store = RideRepository(database)
        logger.info("App started and listening on port %d", settings.app_port)
        try:
            yield
        finally:
            await database.disconnect()
            logger.info("Database connection closed")

    app = FastAPI(
        title="Rides Management API",
        description="A REST API service that allows user to manage rides",
        version="1.0.0",
        license_info={"name": "MIT", "url": "https://spdx.org/licenses/MIT.html"},
        lifespan=lifespan,
    )

    # Rate limiter
    limiter = configure_limiter(settings)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Error bodies
    app.add_exception_handler(RideError, ride_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(rides.router)

    return app
