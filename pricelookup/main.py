# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from pricelookup import __version__
from pricelookup.api.v1.router import api_router
from pricelookup.config import get_settings
from pricelookup.schemas.common import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    logger.info(f"Starting price lookup with {settings.cache_backend} cache")

    yield

    logger.info("Shutting down price lookup...")


app = FastAPI(
    title="Price Lookup",
    description="MNB exchange rates and crypto prices for spreadsheets",
    version=__version__,
    lifespan=lifespan,
)


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


app.include_router(api_router, prefix="/api/v1")
