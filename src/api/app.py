"""FastAPI application factory"""

import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from src.api.error import ClientError, client_error_handler
from src.api.routes import analytics, clients, gigs, invoices, webhooks
from src.depends import create_tables

logger = logging.getLogger(__name__)


def configure_logging(level: str):
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def create_app(config) -> FastAPI:
    """
    Build the API application

    Args:
        config: ApplicationConfig (class attributes are read)

    Returns:
        Configured FastAPI app
    """
    configure_logging(config.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.DB_CREATE_TABLES:
            await create_tables()
        logger.info("GigÉire API started")
        yield
        logger.info("GigÉire API stopped")

    app = FastAPI(
        lifespan=lifespan,
        title="GigÉire API",
        version="1.0.0",
        description="Gig tracking, invoicing and analytics for freelance musicians",
    )

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=config.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms"
            )
            return response

    app.add_exception_handler(ClientError, client_error_handler)

    for module in (gigs, invoices, clients, analytics, webhooks):
        app.include_router(module.router, prefix=config.API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app
