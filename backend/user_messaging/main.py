"""User Messaging API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MessagingError → {"error": ...} JSON responses
    - Store opened and tables created on startup via lifespan, before any request
    - Swagger UI served at /api-docs

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from user_messaging.api.error_handlers import register_error_handlers
from user_messaging.api.routes import health, messages, users
from user_messaging.config import get_settings
from user_messaging.infrastructure.database import init_db
from user_messaging.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        sqlite_foreign_keys=settings.sqlite_foreign_keys,
    )
    await manager.create_all()
    logger.info(f"Server listening on port {settings.port}")
    yield
    await manager.dispose()
    logger.info("User Messaging API shutting down")


settings = get_settings()
app = FastAPI(
    title="User Messaging API",
    version="1.0.0",
    description="API for managing users and sending messages",
    servers=[{"url": settings.public_url, "description": "Development server"}],
    docs_url="/api-docs",
    openapi_url="/api-docs/openapi.json",
    redoc_url=None,
    lifespan=lifespan,
)

app.include_router(users.router)
app.include_router(messages.router)
app.include_router(health.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app on the configured host/port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
