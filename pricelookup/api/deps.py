# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

from collections.abc import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from pricelookup.config import Settings, get_settings
from pricelookup.database import SessionLocal
from pricelookup.services.price_service import PriceService, build_price_service
from pricelookup.services.quote_cache import (
    DatabaseQuoteCache,
    InMemoryQuoteCache,
    QuoteCache,
)

# Shared by all requests when CACHE_BACKEND=memory
_memory_cache = InMemoryQuoteCache()


def get_db() -> Generator[Session]:
    """Get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_quote_cache(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> QuoteCache:
    """Get the configured price cache."""
    if settings.cache_backend == "database":
        return DatabaseQuoteCache(db)
    return _memory_cache


def get_price_service(
    cache: QuoteCache = Depends(get_quote_cache),
    settings: Settings = Depends(get_settings),
) -> Generator[PriceService]:
    """Get a price service for the duration of a request."""
    service = build_price_service(settings, cache)
    try:
        yield service
    finally:
        service.close()
