"""Bazaar Moderation API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BazaarError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py (register_error_handlers)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import bazaar.infrastructure.database as database
from bazaar.api.error_handlers import register_error_handlers
from bazaar.api.routes import health, moderation, rejections
from bazaar.config import get_settings
from bazaar.infrastructure.observability import setup_logging
from bazaar.infrastructure.rate_limit import limiter

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(settings)
    logger.info("Bazaar moderation API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("Bazaar moderation API shutting down")


app = FastAPI(
    title="Bazaar Moderation API", version=health.SERVICE_VERSION, lifespan=lifespan,
)

# CORS: configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(moderation.router)
app.include_router(rejections.router)

# Rate limiting: slowapi reads the limiter from app state
app.state.limiter = limiter

register_error_handlers(app)
