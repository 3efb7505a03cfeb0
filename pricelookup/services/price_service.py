# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Public exchange rate and crypto price lookups."""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from zoneinfo import ZoneInfo

from sqlalchemy.orm import Session

from pricelookup.config import Settings, get_settings
from pricelookup.exceptions import (
    ExtractionEmptyError,
    InvalidAssetError,
    UnsupportedCurrencyError,
)
from pricelookup.integrations.base import PageFetcher
from pricelookup.integrations.http_fetcher import HttpPageFetcher
from pricelookup.models.enums import Currency
from pricelookup.services.number_normalizer import DEFAULT_LOCALE, normalize
from pricelookup.services.price_extractor import extract_crypto_text
from pricelookup.services.quote_cache import QuoteCache, build_quote_cache
from pricelookup.services.rate_dates import parse_rate_date
from pricelookup.services.rate_resolver import RateResolver

logger = logging.getLogger(__name__)

COINMARKETCAP_URL = "https://coinmarketcap.com/currencies/{slug}"

DEFAULT_CURRENCY = Currency.GBP
DEFAULT_ASSET = "bitcoin"

_WHITESPACE = re.compile(r"\s")


@dataclass
class ExchangeRateQuote:
    """Result of an exchange rate lookup."""

    currency: Currency
    requested_date: date
    rate: Decimal


@dataclass
class CryptoQuote:
    """Result of a crypto price lookup."""

    asset: str
    slug: str
    price: Decimal


def crypto_slug(asset_name: str) -> str:
    """Turn an asset name like 'Medieval Empires' into 'medieval-empires'."""
    return _WHITESPACE.sub("-", asset_name.strip()).lower()


def crypto_url(slug: str) -> str:
    """URL of the CoinMarketCap page of an asset."""
    return COINMARKETCAP_URL.format(slug=slug)


def format_price(value: Decimal) -> str:
    """Render a price in plain positional notation, never as 1.5E-9."""
    return format(value, "f")


def parse_currency(value: Currency | str) -> Currency:
    """Accept a Currency or its code in any case."""
    if isinstance(value, Currency):
        return value
    try:
        return Currency(value.strip().upper())
    except ValueError as e:
        supported = ", ".join(c.value for c in Currency)
        raise UnsupportedCurrencyError(
            f"Unsupported currency {value!r}, expected one of {supported}"
        ) from e


class PriceService:
    """Entry points for the exchange rate and crypto price lookups."""

    def __init__(
        self,
        fetcher: PageFetcher,
        cache: QuoteCache,
        settings: Settings | None = None,
        today: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            fetcher: Source of the HTML pages.
            cache: Cache shared by both lookups.
            settings: Runtime configuration, defaults to the environment.
            today: Source of the default date, defaults to today in the
                exchange's timezone.
        """
        settings = settings or get_settings()
        self.fetcher = fetcher
        self.cache = cache
        self.cache_ttl_seconds = settings.cache_ttl_seconds
        self.resolver = RateResolver(
            fetcher,
            cache,
            max_lookback_days=settings.max_rate_lookback_days,
            cache_ttl_seconds=settings.cache_ttl_seconds,
        )
        if today is None:
            exchange_tz = ZoneInfo(settings.exchange_timezone)

            def today() -> date:
                return datetime.now(exchange_tz).date()

        self._today = today

    def close(self) -> None:
        """Release the page fetcher."""
        self.fetcher.close()

    def lookup_exchange_rate(
        self,
        currency: Currency | str = DEFAULT_CURRENCY,
        rate_date: str | date | None = None,
    ) -> ExchangeRateQuote:
        """Look up an MNB rate with the date the rate was requested for.

        Args:
            currency: GBP, USD or EUR.
            rate_date: 'YYYY.MM.DD.', ISO date string or date. Today if omitted.

        Raises:
            UnsupportedCurrencyError: If the currency is not supported.
            InvalidDateError: If the date cannot be parsed.
            RateNotFoundError: If no rate found within the look-back window.
            TransportError: If a page could not be fetched.
        """
        currency = parse_currency(currency)
        requested = self._today() if rate_date is None else parse_rate_date(rate_date)
        rate = self.resolver.resolve(currency, requested)
        return ExchangeRateQuote(currency=currency, requested_date=requested, rate=rate)

    def exchange_rate(
        self,
        currency: Currency | str = DEFAULT_CURRENCY,
        rate_date: str | date | None = None,
    ) -> Decimal:
        """MNB rate of a currency in HUF on or before a date."""
        return self.lookup_exchange_rate(currency, rate_date).rate

    def lookup_crypto_price(self, asset_name: str = DEFAULT_ASSET) -> CryptoQuote:
        """Look up the current CoinMarketCap price of an asset.

        Raises:
            InvalidAssetError: If the name is empty or only whitespace.
            ExtractionEmptyError: If the page has no price at the known position.
            TransportError: If the page could not be fetched.
        """
        slug = crypto_slug(asset_name)
        if not slug:
            raise InvalidAssetError("Asset name must not be empty")
        cached = self.cache.get(slug)
        if cached is not None:
            logger.debug(f"Cache hit for {slug}")
            return CryptoQuote(asset=asset_name, slug=slug, price=Decimal(cached))

        markup = self.fetcher.fetch(crypto_url(slug))
        price = normalize(extract_crypto_text(markup), DEFAULT_LOCALE)
        if price == 0:
            raise ExtractionEmptyError(f"No price found on the page of {slug!r}")

        logger.info(f"Resolved {slug}: {price}")
        self.cache.put(slug, format_price(price), self.cache_ttl_seconds)
        return CryptoQuote(asset=asset_name, slug=slug, price=price)

    def crypto_price(self, asset_name: str = DEFAULT_ASSET) -> Decimal:
        """Current price of a crypto asset."""
        return self.lookup_crypto_price(asset_name).price


def build_price_service(settings: Settings, cache: QuoteCache) -> PriceService:
    """Create a service fetching over HTTP with the configured client options."""
    fetcher = HttpPageFetcher(
        timeout=settings.fetch_timeout_seconds,
        user_agent=settings.user_agent,
    )
    return PriceService(fetcher, cache, settings=settings)


_default_service: PriceService | None = None
_default_session: Session | None = None


def get_default_service() -> PriceService:
    """Process-wide service used by the module level lookups."""
    global _default_service, _default_session
    if _default_service is None:
        settings = get_settings()
        if settings.cache_backend == "database":
            from pricelookup.database import SessionLocal

            _default_session = SessionLocal()
        cache = build_quote_cache(settings.cache_backend, _default_session)
        _default_service = build_price_service(settings, cache)
    return _default_service


def close_default_service() -> None:
    """Close the process-wide service and its database session, if any."""
    global _default_service, _default_session
    if _default_service is not None:
        _default_service.close()
        _default_service = None
    if _default_session is not None:
        _default_session.close()
        _default_session = None


def exchange_rate(
    currency: Currency | str = DEFAULT_CURRENCY,
    rate_date: str | date | None = None,
) -> Decimal:
    """MNB rate of a currency in HUF, today unless a date is given."""
    return get_default_service().exchange_rate(currency, rate_date)


def crypto_price(asset_name: str = DEFAULT_ASSET) -> Decimal:
    """Current price of a crypto asset, bitcoin unless named."""
    return get_default_service().crypto_price(asset_name)
