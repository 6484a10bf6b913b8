"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from fitness_point.api.calories import router as calories_router
from fitness_point.api.fitness import router as fitness_router
from fitness_point.api.users import router as users_router
from fitness_point.app_logging import configure_logging
from fitness_point.containers import AppContainer
from fitness_point.errors import (
    ComputationError,
    FitnessPointError,
    NotFoundError,
    ValidationError,
)

_ERROR_STATUS: dict[type[FitnessPointError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ComputationError: 422,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            foods = app.state.container.catalog_service.list_foods()
            logger.info("Food catalog loaded: %s items", len(foods))
        except Exception:
            logger.exception("Failed to load the food catalog")
        yield

    app = FastAPI(title="FitnessPoint API", lifespan=lifespan)
    app.state.container = container

    app.include_router(calories_router)
    app.include_router(fitness_router)
    app.include_router(users_router)

    @app.exception_handler(FitnessPointError)
    async def handle_service_error(
        request: Request, exc: FitnessPointError
    ) -> JSONResponse:
        status_code = _status_for(exc)
        logger.info(
            "%s %s rejected (%s): %s",
            request.method,
            request.url.path,
            status_code,
            exc,
        )
        return JSONResponse(status_code=status_code, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _format_request_errors(exc)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception(
            "Unhandled error",
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": _format_internal_error(container, exc)},
        )

    @app.get("/api/health")
    async def health(request: Request) -> dict[str, object]:
        """Simple health check endpoint."""
        state_container: AppContainer = request.app.state.container
        return {
            "status": "ok",
            "message": "FitnessPoint API is running",
            "foods": len(state_container.catalog_service.list_foods()),
        }

    return app


def _status_for(exc: FitnessPointError) -> int:
    for error_type, status_code in _ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _format_request_errors(exc: RequestValidationError) -> str:
    """Summarize pydantic request errors as a single message."""
    parts = []
    for error in exc.errors():
        location = ".".join(
            str(part) for part in error.get("loc", ()) if part != "body"
        )
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


def _format_internal_error(container: AppContainer, exc: Exception) -> str:
    """Return the public 500 message, with debug info in local environments."""
    fallback = "Internal server error"
    if container.settings.environment == "local":
        detail = f"{type(exc).__name__}: {exc}".strip()
        if detail:
            return f"{fallback} (debug: {detail})"
    return fallback
