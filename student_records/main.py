"""Student Records API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map StudentRecordsError → structured JSON responses
    - The RecordStore is created on startup and torn down on shutdown by the lifespan
    - CORS configured from settings (not hardcoded)

Design Decisions:
    - Lifespan over @app.on_event: explicit store construction and teardown
    - Three error handler layers registered via api/error_handlers.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from student_records import __version__
from student_records.api.error_handlers import register_error_handlers
from student_records.api.routes import health, records
from student_records.config import get_settings
from student_records.core.record_store import RecordStore
from student_records.infrastructure.observability import log_requests, setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle — owns the RecordStore."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    store = RecordStore.seeded() if settings.seed_on_startup else RecordStore()
    app.state.record_store = store
    logger.info(
        f"Student Records API started ({settings.environment}) "
        f"with {len(store)} records",
    )
    yield
    store.clear()
    app.state.record_store = None
    logger.info("Student Records API shutting down")


app = FastAPI(
    title="Student Records API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log_requests)

app.include_router(health.router)
app.include_router(records.router)

register_error_handlers(app)
