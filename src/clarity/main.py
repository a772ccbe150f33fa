import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import IntegrityError

from clarity.api.middleware.error_handler import (
    handle_clarity_error,
    handle_generic_error,
    handle_integrity_error,
    handle_validation_error,
)
from clarity.api.middleware.logging import RequestLoggingMiddleware
from clarity.api.v1 import router as v1_router
from clarity.api.v1.health import router as health_router
from clarity.config import settings
from clarity.core.exceptions import ClarityError
from clarity.core.logger import setup_logging
from clarity.db.session import async_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"Starting Clarity API ({settings.app_env})")
    yield
    # Shutdown
    await async_engine.dispose()


def create_app() -> FastAPI:
    setup_logging(settings.log_level, json_format=settings.log_json)

    app = FastAPI(
        title="Clarity Finance API",
        description="Personal finance tracking, categorization and period analytics",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Add request logging middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register exception handlers (order matters - most specific first)
    app.add_exception_handler(ClarityError, handle_clarity_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(Exception, handle_generic_error)

    # Register routers
    app.include_router(health_router)
    app.include_router(v1_router)

    return app


app = create_app()
