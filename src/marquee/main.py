"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marquee.api.routes import health, shows
from marquee.config import settings
from marquee.database import engine
from marquee.utils.request_logging import RequestIdMiddleware, setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level.upper())
    logger.info("Show directory API starting")

    yield

    # Shutdown: release pooled connections
    await engine.dispose()
    logger.info("Database engine disposed")


# Create FastAPI app
app = FastAPI(
    title="Marquee API",
    description="Scheduled movie screenings joined with their movies and theaters",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestIdMiddleware)

# Include routers
app.include_router(health.router)
app.include_router(shows.router, prefix="/api", tags=["shows"])


def run() -> None:
    """Serve the app with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run("marquee.main:app", host=settings.api_host, port=settings.api_port)
