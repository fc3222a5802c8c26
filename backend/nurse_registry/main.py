"""Nurse Registry API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map NurseRegistryError → structured JSON responses
    - Database initialized, schema created, and sample data seeded on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py, registered once here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from nurse_registry.api.error_handlers import register_error_handlers
from nurse_registry.api.routes import health, nurses
from nurse_registry.config import get_settings
from nurse_registry.infrastructure.database import init_db
from nurse_registry.infrastructure.observability import setup_logging
from nurse_registry.services.nurse_store import NurseStore, seed_sample_nurses

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
    await manager.create_schema()
    if settings.seed_sample_data:
        async with manager.session() as db:
            await seed_sample_nurses(NurseStore(db))
    logger.info("Nurse Registry API started")
    yield
    logger.info("Nurse Registry API shutting down")
    await manager.dispose()


app = FastAPI(
    title="Nurse Registry API", version="1.0.0", lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(nurses.router)

register_error_handlers(app)
