# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Resolution of MNB exchange rates with business-day back-off."""

import logging
from datetime import date
from decimal import Decimal

from pricelookup.config import (
    DEFAULT_CACHE_TTL_SECONDS,
    DEFAULT_MAX_RATE_LOOKBACK_DAYS,
)
from pricelookup.exceptions import RateNotFoundError
from pricelookup.integrations.base import PageFetcher
from pricelookup.models.enums import Currency
from pricelookup.services.number_normalizer import EXCHANGE_LOCALE, normalize
from pricelookup.services.price_extractor import extract_rate_text
from pricelookup.services.quote_cache import QuoteCache, exchange_rate_cache_key
from pricelookup.services.rate_dates import (
    previous_day,
    render_rate_date,
    roll_back_weekend,
)

logger = logging.getLogger(__name__)

MNB_DAILY_URL = "https://www.mnb.hu/arfolyam-tablazat?query=daily,{date}"


def mnb_daily_url(rate_date: date) -> str:
    """URL of the MNB daily rate table for a date."""
    return MNB_DAILY_URL.format(date=render_rate_date(rate_date))


class RateResolver:
    """Finds the most recent published MNB rate for a requested date."""

    def __init__(
        self,
        fetcher: PageFetcher,
        cache: QuoteCache,
        max_lookback_days: int = DEFAULT_MAX_RATE_LOOKBACK_DAYS,
        cache_ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS,
    ) -> None:
        """Initialize the resolver.

        Args:
            fetcher: Source of the MNB pages.
            cache: Cache for resolved rates.
            max_lookback_days: Days to step back from the first business date
                before giving up.
            cache_ttl_seconds: Lifetime of a cached rate.
        """
        if max_lookback_days < 0:
            raise ValueError("max_lookback_days must not be negative")
        self.fetcher = fetcher
        self.cache = cache
        self.max_lookback_days = max_lookback_days
        self.cache_ttl_seconds = cache_ttl_seconds

    def resolve(self, currency: Currency, requested_date: date) -> Decimal:
        """Get the rate of a currency in HUF on or before a date.

        Weekends start from the preceding Friday. A zero rate means the day
        was a holiday, in which case earlier days are tried one by one.

        Raises:
            RateNotFoundError: If no rate found within the look-back window.
            TransportError: If a page could not be fetched.
        """
        cache_key = exchange_rate_cache_key(currency, requested_date)
        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Cache hit for {cache_key}")
            return Decimal(cached)

        rate, rate_date = self._find_published_rate(
            currency, roll_back_weekend(requested_date)
        )
        logger.info(
            f"Resolved {currency.value} for {render_rate_date(requested_date)}: "
            f"{rate} (published {render_rate_date(rate_date)})"
        )
        self.cache.put(cache_key, format(rate, "f"), self.cache_ttl_seconds)
        return rate

    def _find_published_rate(
        self, currency: Currency, business_date: date
    ) -> tuple[Decimal, date]:
        candidate = business_date
        for _ in range(self.max_lookback_days + 1):
            rate = self.fetch_rate(currency, candidate)
            if rate != 0:
                return rate, candidate
            logger.debug(
                f"No {currency.value} rate on {render_rate_date(candidate)}, "
                "trying the previous day"
            )
            candidate = previous_day(candidate)

        raise RateNotFoundError(
            f"No {currency.value} rate published within {self.max_lookback_days} "
            f"days before {render_rate_date(business_date)}"
        )

    def fetch_rate(self, currency: Currency, rate_date: date) -> Decimal:
        """Fetch and parse the rate published on exactly this date (0 if none)."""
        markup = self.fetcher.fetch(mnb_daily_url(rate_date))
        return normalize(extract_rate_text(markup, currency), EXCHANGE_LOCALE)
