# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for rate_resolver."""

from datetime import date
from decimal import Decimal

import pytest

from pricelookup.exceptions import RateNotFoundError, TransportError
from pricelookup.models.enums import Currency
from pricelookup.services.rate_resolver import RateResolver, mnb_daily_url

GBP_COLUMN = 24
MNB_URL = "https://www.mnb.hu/arfolyam-tablazat?query=daily,"


@pytest.fixture
def holiday_page(mnb_page):
    return mnb_page({})


@pytest.fixture
def gbp_page(mnb_page):
    def _page(rate_text: str) -> str:
        return mnb_page({GBP_COLUMN: rate_text})

    return _page


def test_mnb_daily_url():
    assert mnb_daily_url(date(2023, 2, 14)) == MNB_URL + "2023.02.14."


class TestResolve:
    """Tests for RateResolver.resolve."""

    def test_weekday_fetches_requested_date(self, make_fetcher, cache, gbp_page):
        fetcher = make_fetcher([gbp_page("437,83")])
        resolver = RateResolver(fetcher, cache)

        rate = resolver.resolve(Currency.GBP, date(2023, 2, 14))

        assert rate == Decimal("437.83")
        assert fetcher.urls == [MNB_URL + "2023.02.14."]

    def test_saturday_rolls_back_to_friday(self, make_fetcher, cache, gbp_page):
        fetcher = make_fetcher([gbp_page("437,83")])
        resolver = RateResolver(fetcher, cache)

        resolver.resolve(Currency.GBP, date(2023, 2, 18))

        assert fetcher.urls == [MNB_URL + "2023.02.17."]

    def test_sunday_rolls_back_two_days(self, make_fetcher, cache, gbp_page):
        fetcher = make_fetcher([gbp_page("437,83")])
        resolver = RateResolver(fetcher, cache)

        resolver.resolve(Currency.GBP, date(2023, 2, 19))

        assert fetcher.urls == [MNB_URL + "2023.02.17."]

    def test_backs_off_over_holidays(self, make_fetcher, cache, holiday_page, gbp_page):
        """Zero rates step back one calendar day each until a rate is found."""
        fetcher = make_fetcher([holiday_page, holiday_page, gbp_page("1 234,5")])
        resolver = RateResolver(fetcher, cache)

        rate = resolver.resolve(Currency.GBP, date(2023, 3, 15))

        assert rate == Decimal("1234.5")
        assert fetcher.urls == [
            MNB_URL + "2023.03.15.",
            MNB_URL + "2023.03.14.",
            MNB_URL + "2023.03.13.",
        ]

    def test_back_off_is_not_weekday_aware(
        self, make_fetcher, cache, holiday_page, gbp_page
    ):
        # Monday holiday steps back into Sunday
        fetcher = make_fetcher([holiday_page, gbp_page("437,83")])
        resolver = RateResolver(fetcher, cache)

        resolver.resolve(Currency.GBP, date(2023, 4, 10))

        assert fetcher.urls[1] == MNB_URL + "2023.04.09."

    def test_zero_text_counts_as_holiday(self, make_fetcher, cache, gbp_page):
        fetcher = make_fetcher([gbp_page("0,00"), gbp_page("437,83")])
        resolver = RateResolver(fetcher, cache)

        assert resolver.resolve(Currency.GBP, date(2023, 2, 14)) == Decimal("437.83")
        assert len(fetcher.urls) == 2

    def test_look_back_is_bounded(self, make_fetcher, cache, holiday_page):
        fetcher = make_fetcher([holiday_page] * 20)
        resolver = RateResolver(fetcher, cache, max_lookback_days=10)

        with pytest.raises(RateNotFoundError):
            resolver.resolve(Currency.GBP, date(2023, 2, 14))

        assert len(fetcher.urls) == 11
        assert fetcher.urls[-1] == MNB_URL + "2023.02.04."

    def test_not_found_is_not_cached(self, make_fetcher, cache, holiday_page):
        fetcher = make_fetcher([holiday_page])
        resolver = RateResolver(fetcher, cache, max_lookback_days=0)

        with pytest.raises(RateNotFoundError):
            resolver.resolve(Currency.GBP, date(2023, 2, 14))

        assert cache.get("GBP:2023.02.14.") is None

    def test_negative_look_back_rejected(self, make_fetcher, cache):
        with pytest.raises(ValueError):
            RateResolver(make_fetcher(), cache, max_lookback_days=-1)

    def test_transport_error_is_not_retried(
        self, make_fetcher, cache, gbp_page, transport_error
    ):
        fetcher = make_fetcher([transport_error, gbp_page("437,83")])
        resolver = RateResolver(fetcher, cache)

        with pytest.raises(TransportError):
            resolver.resolve(Currency.GBP, date(2023, 2, 14))

        assert len(fetcher.urls) == 1


class TestResolveCaching:
    """Tests for the cache behaviour of RateResolver.resolve."""

    def test_second_call_within_ttl_does_not_fetch(
        self, make_fetcher, cache, gbp_page
    ):
        fetcher = make_fetcher([gbp_page("437,83")])
        resolver = RateResolver(fetcher, cache)

        first = resolver.resolve(Currency.GBP, date(2023, 2, 14))
        second = resolver.resolve(Currency.GBP, date(2023, 2, 14))

        assert first == second == Decimal("437.83")
        assert len(fetcher.urls) == 1

    def test_cache_key_uses_requested_date(self, make_fetcher, cache, gbp_page):
        fetcher = make_fetcher([gbp_page("437,83")])
        resolver = RateResolver(fetcher, cache)

        resolver.resolve(Currency.GBP, date(2023, 2, 18))

        assert cache.get("GBP:2023.02.18.") == "437.83"
        assert cache.get("GBP:2023.02.17.") is None

    def test_expired_entry_refetches(self, make_fetcher, cache, clock, gbp_page):
        fetcher = make_fetcher([gbp_page("437,83"), gbp_page("438,01")])
        resolver = RateResolver(fetcher, cache, cache_ttl_seconds=300)

        resolver.resolve(Currency.GBP, date(2023, 2, 14))
        clock.advance(minutes=5)
        rate = resolver.resolve(Currency.GBP, date(2023, 2, 14))

        assert rate == Decimal("438.01")
        assert len(fetcher.urls) == 2

    def test_currencies_are_cached_separately(self, make_fetcher, cache, mnb_page):
        page = mnb_page({21: "385,27", 24: "437,83"})
        fetcher = make_fetcher([page, page])
        resolver = RateResolver(fetcher, cache)

        assert resolver.resolve(Currency.GBP, date(2023, 2, 14)) == Decimal("437.83")
        assert resolver.resolve(Currency.EUR, date(2023, 2, 14)) == Decimal("385.27")
        assert len(fetcher.urls) == 2
