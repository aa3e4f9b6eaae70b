"""Master Data API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers translate every error through one translator
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - "/" redirects to the HTML administration screens
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from masterdata.api.error_handlers import register_error_handlers
from masterdata.api.routes import health, persons, reference_data, ui_fragments, users
from masterdata.config import get_settings
from masterdata.infrastructure import database
from masterdata.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if database.db_manager is None:
        database.init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
    logger.info("Master Data API started")
    yield
    logger.info("Master Data API shutting down")
    if database.db_manager is not None:
        await database.db_manager.dispose()


app = FastAPI(title="Master Data API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(reference_data.countries)
app.include_router(reference_data.genders)
app.include_router(reference_data.titles)
app.include_router(reference_data.id_types)
app.include_router(persons.router)
app.include_router(users.router)
app.include_router(ui_fragments.router)

register_error_handlers(app)


@app.get("/", include_in_schema=False)
async def root():
    return RedirectResponse(url="/ui/")
