# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os
from collections.abc import Callable
from datetime import date, datetime, timedelta

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set test environment before importing the package
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["CACHE_BACKEND"] = "memory"

from pricelookup.config import Settings
from pricelookup.exceptions import TransportError
from pricelookup.integrations.base import PageFetcher
from pricelookup.models.base import Base
from pricelookup.services.price_service import PriceService
from pricelookup.services.quote_cache import InMemoryQuoteCache

# Test database setup
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# A Wednesday
TEST_TODAY = date(2023, 2, 15)


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2023, 2, 15, 12, 0, 0)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


class FakeFetcher(PageFetcher):
    """Page fetcher returning queued pages and recording requested URLs."""

    def __init__(self, pages: list[str | Exception] | None = None) -> None:
        self.pages = list(pages or [])
        self.urls: list[str] = []
        self.closed = False

    def fetch(self, url: str) -> str:
        self.urls.append(url)
        page = self.pages.pop(0)
        if isinstance(page, Exception):
            raise page
        return page

    def close(self) -> None:
        self.closed = True


def build_mnb_page(rates: dict[int, str]) -> str:
    """MNB daily table with rate text in the given 1-based columns."""
    cells = "".join(f"<td>{rates.get(column, '')}</td>" for column in range(1, 80))
    return (
        '<html><body><div id="main"><div><div><table>'
        "<thead><tr><th>Dátum</th></tr></thead>"
        f"<tbody><tr>{cells}</tr></tbody>"
        "</table></div></div></div></body></html>"
    )


def build_crypto_page(price_text: str) -> str:
    """CoinMarketCap asset page with the given price text."""
    return (
        '<html><body><div class="priceSection"><div class="priceTitle">'
        f'<div class="priceValue"><span>{price_text}</span></div>'
        "</div></div></body></html>"
    )


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock) -> InMemoryQuoteCache:
    return InMemoryQuoteCache(clock=clock)


@pytest.fixture
def settings() -> Settings:
    return Settings(max_rate_lookback_days=10, cache_ttl_seconds=300)


@pytest.fixture
def mnb_page() -> Callable[[dict[int, str]], str]:
    return build_mnb_page


@pytest.fixture
def crypto_page() -> Callable[[str], str]:
    return build_crypto_page


@pytest.fixture
def make_service(cache, settings) -> Callable[[FakeFetcher], PriceService]:
    """Build a PriceService around a fake fetcher with a fixed today."""

    def _make(fetcher: FakeFetcher) -> PriceService:
        return PriceService(fetcher, cache, settings=settings, today=lambda: TEST_TODAY)

    return _make


@pytest.fixture
def transport_error() -> TransportError:
    return TransportError("Connection refused")


@pytest.fixture
def make_fetcher() -> type[FakeFetcher]:
    return FakeFetcher
