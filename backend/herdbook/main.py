"""Herdbook API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly, one router per register
    - Global error handlers map HerdbookError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py; this module only wires
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import herdbook.infrastructure.database as database
from herdbook.api.error_handlers import register_error_handlers
from herdbook.api.routes import (
    animals,
    calf_feed_register,
    calf_feeding,
    employees,
    feed_inspections,
    health,
    milk_rejections,
    purchase_approvals,
    record_categories,
    repair_logs,
    vaccinations,
    yield_records,
)
from herdbook.config import get_settings
from herdbook.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Herdbook API started")
    yield
    logger.info("Herdbook API shutting down")
    await manager.dispose()


app = FastAPI(title="Herdbook API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)

app.include_router(health.router)
app.include_router(animals.router)
app.include_router(employees.router)
app.include_router(purchase_approvals.router)
app.include_router(feed_inspections.router)
app.include_router(milk_rejections.router)
app.include_router(yield_records.router)
app.include_router(record_categories.router)
app.include_router(repair_logs.router)
app.include_router(vaccinations.router)
app.include_router(calf_feeding.router)
app.include_router(calf_feed_register.router)

register_error_handlers(app)
