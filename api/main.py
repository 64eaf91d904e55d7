"""FastAPI application factory and main entrypoint."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from api.config import APP_NAME, APP_VERSION, get_settings
from api.exceptions import NexusError
from api.logging import setup_logging
from api.metrics import MetricsMiddleware, get_metrics, get_metrics_content_type
from api.middleware import LoggingMiddleware, RequestIDMiddleware
from api.sentry import init_sentry

setup_logging()
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown events."""
    settings = get_settings()
    logger.info(
        "app_starting",
        env=settings.env,
        debug=settings.debug,
        version=APP_VERSION,
    )
    init_sentry()

    yield

    logger.info("app_shutdown")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=APP_NAME,
        description="Single-page structural analysis with insights, actions and a health score",
        version=APP_VERSION,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )

    # Middleware (order matters - first added = last executed)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    if settings.metrics_enabled:
        app.add_middleware(MetricsMiddleware)

    # CORS added last so it runs first
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    from api.routers import analyze, health, v1

    app.include_router(health.router, prefix="/api")
    app.include_router(v1.router, prefix="/v1")
    # Unversioned alias called by the browser dashboard
    app.include_router(analyze.router, include_in_schema=False)

    if settings.metrics_enabled:

        @app.get("/metrics", include_in_schema=False)
        async def metrics() -> Response:
            return Response(content=get_metrics(), media_type=get_metrics_content_type())

    return app


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers that render every failure as {error, details?}."""

    @app.exception_handler(NexusError)
    async def nexus_error_handler(request: Request, exc: NexusError) -> ORJSONResponse:
        logger.warning(
            "application_error",
            error_code=exc.code,
            message=exc.message,
            details=exc.details,
            path=request.url.path,
        )
        return ORJSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> ORJSONResponse:
        errors = exc.errors()
        first_error = errors[0] if errors else {"msg": "Validation error"}
        field = ".".join(str(loc) for loc in first_error.get("loc", [])[1:])

        logger.warning("validation_error", path=request.url.path, errors=errors)
        return ORJSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "error": first_error.get("msg", "Validation error"),
                **({"details": f"Invalid field: {field}"} if field else {}),
            },
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
        logger.error(
            "unhandled_exception",
            exc_info=exc,
            path=request.url.path,
            method=request.method,
        )
        return ORJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
        )


app = create_app()
