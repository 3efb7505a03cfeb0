# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Expiring key-value cache for looked up prices."""

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import date, datetime, timedelta, timezone

from sqlalchemy.orm import Session

from pricelookup.models.enums import Currency
from pricelookup.models.quote_cache import QuoteCacheEntry
from pricelookup.services.rate_dates import render_rate_date

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    """Current UTC time as a naive datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def exchange_rate_cache_key(currency: Currency, requested_date: date) -> str:
    """Cache key of an exchange rate, based on the date the caller asked for."""
    return f"{currency.value}:{render_rate_date(requested_date)}"


class QuoteCache(ABC):
    """Interface for price caches with per-entry expiry."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the cached value, or None if missing or expired."""
        ...

    @abstractmethod
    def put(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store value under key for ttl_seconds."""
        ...


class InMemoryQuoteCache(QuoteCache):
    """Process local cache, safe to share between request threads."""

    def __init__(self, clock: Clock = utcnow) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[str, tuple[str, datetime]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str) -> str | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if self._clock() >= expires_at:
                self._entries.pop(key, None)
                return None
            return value

    def put(self, key: str, value: str, ttl_seconds: int) -> None:
        with self._lock:
            now = self._clock()
            expired = [
                k for k, (_, expires_at) in self._entries.items() if now >= expires_at
            ]
            for expired_key in expired:
                del self._entries[expired_key]
            self._entries[key] = (value, now + timedelta(seconds=ttl_seconds))


class DatabaseQuoteCache(QuoteCache):
    """Cache stored in the quote_cache table, shared between processes."""

    def __init__(self, db: Session, clock: Clock = utcnow) -> None:
        """Initialize the cache.

        Args:
            db: Database session holding the cache table.
            clock: Source of the current UTC time.
        """
        self.db = db
        self._clock = clock

    def get(self, key: str) -> str | None:
        entry = self.db.get(QuoteCacheEntry, key)
        if entry is None or self._clock() >= entry.expires_at:
            return None
        return entry.value

    def put(self, key: str, value: str, ttl_seconds: int) -> None:
        now = self._clock()
        removed = (
            self.db.query(QuoteCacheEntry)
            .filter(QuoteCacheEntry.expires_at <= now, QuoteCacheEntry.key != key)
            .delete(synchronize_session=False)
        )
        if removed:
            logger.debug(f"Dropped {removed} expired cache entries")

        expires_at = now + timedelta(seconds=ttl_seconds)
        existing = self.db.get(QuoteCacheEntry, key)
        if existing:
            existing.value = value
            existing.expires_at = expires_at
        else:
            self.db.add(QuoteCacheEntry(key=key, value=value, expires_at=expires_at))
        self.db.commit()


def build_quote_cache(backend: str, db: Session | None = None) -> QuoteCache:
    """Create the cache selected by the CACHE_BACKEND setting."""
    match backend:
        case "memory":
            return InMemoryQuoteCache()
        case "database":
            if db is None:
                raise ValueError("The database cache backend needs a session")
            return DatabaseQuoteCache(db)
        case _:
            raise ValueError(f"Unknown cache backend: {backend!r}")
