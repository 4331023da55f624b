"""
FastAPI server for the LightBnB data layer.

This module handles application setup, lifespan management, and middleware configuration.
Route handlers are organized in the routers/ package.

The PostgreSQL pool is created once at startup, shared by every request
through ``app.state.db``, and closed at shutdown.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from api.routers import properties_router, reservations_router, users_router
from config.settings import get_settings
from dotenv import load_dotenv
from entities.shared.pg_client import PostgresClient
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

settings = get_settings()

# Configure logging - use force=True to prevent duplicate handlers
logger = logging.getLogger(__name__)
logging.basicConfig(level=settings.log_level.upper(), force=True)

# asyncpg logs every pool connection at INFO
logging.getLogger("asyncpg").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan handler.

    Opens the connection pool on startup and closes it on shutdown.
    """
    logger.info("LightBnB API starting")

    db = PostgresClient()
    await db.connect()
    application.state.db = db

    try:
        yield
    finally:
        application.state.db = None
        await db.close()
        logger.info("Application shutdown complete")


# Create FastAPI application
app = FastAPI(title="LightBnB", lifespan=lifespan)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(users_router)
app.include_router(properties_router)
app.include_router(reservations_router)


@app.get("/health")
async def health_check() -> dict[str, object]:
    """Health check endpoint."""
    db = getattr(app.state, "db", None)
    return {"status": "healthy", "database_ready": db is not None and db.is_connected}


if __name__ == "__main__":
    uvicorn.run("api.main:app", host="0.0.0.0", port=8000, reload=True)  # noqa: S104
