"""FastAPI application factory."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from careconnect.api.errors import register_exception_handlers
from careconnect.api.routes import router
from careconnect.config import Settings, get_settings
from careconnect.database.base import Database
from careconnect.database.factories import create_sqlite_database

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan - startup and shutdown."""
    logger.info("Starting CareConnect API", database=getattr(app.state.db, "database_url", None))
    yield
    logger.info("Shutting down CareConnect API")
    app.state.db.disconnect()


def create_app(db: Optional[Database] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the HTTP application around a store handle.

    Args:
        db: Database to serve. If None, a SQLite database is created from settings.
        settings: Settings to use. If None, loaded from the environment.
    """
    settings = settings or get_settings()
    if db is None:
        db = create_sqlite_database(database_path=settings.db_path)
        db.connect()
        db.initialize_schema()

    app = FastAPI(
        title="CareConnect API",
        description="Account registration and medicine donation ledger",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.db = db

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(router)
    return app
