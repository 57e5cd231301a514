"""
ASGI entry point for the Pawnder taxonomy service.

Run with ``python main.py`` for local development or point uvicorn at
``main:app``.
"""

import logging
from contextlib import asynccontextmanager

import anyio
import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.exceptions import ServiceError
from api import middleware
from api.routes import attributes, characteristics, health, options, preferences
from domain.models import init_database

logging.basicConfig(level=settings.log_level.upper(), format=settings.log_format)
logger = logging.getLogger("pawnder.main")

ROUTERS = (attributes, options, preferences, characteristics, health)

EXCEPTION_HANDLERS = (
    (RequestValidationError, middleware.validation_exception_handler),
    (StarletteHTTPException, middleware.http_exception_handler),
    (ServiceError, middleware.service_exception_handler),
    (Exception, middleware.general_exception_handler),
)


async def _init_database_with_retry() -> None:
    """Create the schema, waiting for the database container if it is still starting"""
    attempts = settings.db_init_attempts
    for attempt in range(1, attempts + 1):
        try:
            await anyio.to_thread.run_sync(init_database)
        except Exception as exc:
            if attempt == attempts:
                logger.error(f"db_init_giving_up attempts={attempts} error={exc!r}")
                raise
            logger.warning(f"db_init_retry attempt={attempt}/{attempts} error={exc!r}")
            await anyio.sleep(settings.db_init_delay_sec)
        else:
            logger.info(f"db_init_ok attempt={attempt}")
            return


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"startup app={settings.app_name} env={settings.environment.value}")
    await _init_database_with_retry()
    try:
        yield
    finally:
        logger.info(f"shutdown app={settings.app_name}")


def create_app() -> FastAPI:
    # OpenAPI pages are hidden in production
    docs_prefix = None if settings.is_production() else settings.api_prefix
    application = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
        openapi_url=None if docs_prefix is None else f"{docs_prefix}/openapi.json",
        docs_url=None if docs_prefix is None else f"{docs_prefix}/docs",
        redoc_url=None if docs_prefix is None else f"{docs_prefix}/redoc",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    application.add_middleware(middleware.RequestLoggingMiddleware)

    for exc_class, handler in EXCEPTION_HANDLERS:
        application.add_exception_handler(exc_class, handler)
    for module in ROUTERS:
        application.include_router(module.router, prefix=settings.api_prefix)

    return application


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
