"""
FastAPI application entry point.

Uses structured logging from core.logging module.
"""

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.db import db
from core.logging import RequestLoggingMiddleware, configure_logging, get_logger

from .config import get_settings
from .error_handlers import register_exception_handlers
from .middleware.request_id import RequestIDMiddleware
from .routers import attributes as attributes_router
from .routers import category_attributes as category_attributes_router

# Configure structured logging
settings = get_settings()
configure_logging(level="DEBUG" if settings.debug else settings.log_level)
logger = get_logger("api")


def validate_config_on_startup() -> None:
    """Log configuration warnings and refuse to start on configuration errors."""
    errors, warnings = settings.validate_production_config()
    for warning in warnings:
        logger.warning("config_warning", message=warning)
    if errors:
        for error in errors:
            logger.error("config_error", error=error)
        raise RuntimeError("Invalid configuration: " + "; ".join(errors))


def create_app() -> FastAPI:
    # API version prefix
    api_prefix = f"{settings.api_prefix}/v1"

    app = FastAPI(title=settings.app_name, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

    # Structured request logging middleware
    app.add_middleware(RequestLoggingMiddleware)

    # Request ID middleware (for tracing). Added last so it is outermost and
    # the ID is bound before anything below it logs.
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    @app.on_event("startup")
    async def startup_event():
        """Initialize the database on startup."""
        logger.info("app_startup", app_name=settings.app_name)

        validate_config_on_startup()

        db.initialize(settings.database_url)
        db.create_all_tables()
        logger.info("database_initialized")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("app_shutdown")

    @app.get("/health", tags=["health"])
    def health_check():
        """Liveness probe. Returns no infrastructure details."""
        return {"status": "ok"}

    @app.get("/health/ready", tags=["health"])
    def readiness_check():
        """
        Readiness check endpoint.

        Returns 200 when the database answers, 503 otherwise.
        """
        result = db.health_check()
        checks = {"database": result["healthy"]}

        if not result["healthy"]:
            logger.warning("readiness_check_failed", error=result["error"])
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "not_ready", "checks": checks},
            )

        return {"status": "ready", "checks": checks}

    # Register routers with versioned API prefix
    app.include_router(attributes_router.router, prefix=api_prefix)
    app.include_router(category_attributes_router.router, prefix=api_prefix)

    return app


app = create_app()
