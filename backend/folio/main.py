"""Folio API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map FolioError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and catalogue initialized on startup via lifespan context manager
    - Catalogue restored from its tables; settings seed it only on first boot

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Three error handler layers: FolioError (domain), RequestValidationError
      (Pydantic), Exception (catch-all) — never leaks internal details
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from folio.api.error_handlers import register_error_handlers
from folio.api.routes import (
    administrator, balances, books, codec, events, health, metadata,
)
from folio.config import get_settings
from folio.infrastructure.catalogue_repository import SqlCatalogueStore
from folio.infrastructure.database import init_db
from folio.infrastructure.observability import setup_logging
from folio.services.catalogue_state import init_catalogue

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
    )
    if settings.database_create_tables:
        await manager.create_all()
    async with manager.session() as db:
        await init_catalogue(
            SqlCatalogueStore(db), settings.base_uri, settings.administrator,
        )
    logger.info("Folio API started")
    yield
    await manager.dispose()
    logger.info("Folio API shutting down")


app = FastAPI(
    title="Folio API", version="1.0.0", lifespan=lifespan,
)

# CORS from settings
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(codec.router)
app.include_router(metadata.router)
app.include_router(books.router)
app.include_router(balances.router)
app.include_router(administrator.router)
app.include_router(events.router)

register_error_handlers(app)
