"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware and error
handlers, and configures lifespan.

Dependencies: fastapi, uvicorn, counsel_api.api, counsel_api.observability, counsel_api.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from counsel_api.api import api_router
from counsel_api.api.deps import get_service_cache
from counsel_api.configs import get_settings
from counsel_api.core.exceptions import ValidationError
from counsel_api.observability.logger import configure_logging
from counsel_api.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging on startup and releases pooled database
    connections on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Application startup: environment={settings.environment}")

    yield

    await get_service_cache().dispose()
    logger.info("Application shutdown")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as {"error": detail}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Render rejected client input as 400 with the route's message."""
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc.message} {exc.details}")
    return JSONResponse(status_code=400, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render malformed requests (e.g. non-JSON bodies) as 400."""
    errors = exc.errors()
    message = errors[0].get("msg", "invalid request") if errors else "invalid request"
    return JSONResponse(status_code=400, content={"error": message})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render anything that escaped a router as 500."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": str(exc) or "internal error"})


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title="Counseling Chat API",
        description="Session and message persistence with model-generated counselor replies",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn on the configured host and PORT."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "counsel_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
