# /app/main.py

import logging
import os
from datetime import datetime, timezone

# --- Core FastAPI Imports ---
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

# --- Application-specific Imports ---
from .config import get_settings
from .db import base  # noqa: F401  registers every model on Base.metadata
from .db.base_class import Base
from .db.database import engine, get_db
from .exceptions import add_error_handlers
from .middleware import RequestLoggingMiddleware
from .routers import (
    subjects_router,
    groups_router,
    students_router,
    test_results_router,
    achievements_router,
    graduates_router,
)

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # This code runs ONCE when the application starts up.
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    Base.metadata.create_all(bind=engine)
    logger.info("%s %s started", settings.APP_TITLE, settings.APP_VERSION)
    yield
    # This code runs ONCE when the application shuts down.
    engine.dispose()


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

# --- Middleware Configuration ---
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

add_error_handlers(app)

# --- API Router Inclusion ---
app.include_router(subjects_router.router, prefix="/api/subjects", tags=["Subjects"])
app.include_router(groups_router.router, prefix="/api/groups", tags=["Groups"])
app.include_router(students_router.router, prefix="/api/students", tags=["Students"])
app.include_router(test_results_router.router, prefix="/api/test-results", tags=["Test Results"])
app.include_router(achievements_router.router, prefix="/api/achievements", tags=["Achievements"])
app.include_router(graduates_router.router, prefix="/api/graduates", tags=["Graduates"])

# Uploaded images are served as-is. The directory is created at startup.
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False), name="uploads")


# --- Health Check Endpoint ---
@app.get("/api/health", tags=["Health Check"])
def health_check(db: Session = Depends(get_db)):
    """Confirms the API is online and reports whether the database answers."""
    try:
        db.execute(text("SELECT 1"))
        database = "connected"
    except SQLAlchemyError as e:
        logger.warning("Health check could not reach the database: %s", e)
        database = "disconnected"
    return {
        "status": "OK",
        "version": app.version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": database,
    }
