# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for price_extractor."""

import pytest

from pricelookup.exceptions import UnsupportedCurrencyError
from pricelookup.models.enums import Currency
from pricelookup.services.price_extractor import (
    assert_unreachable,
    currency_column,
    extract_crypto_text,
    extract_rate_text,
    rate_selector,
)


class TestCurrencyColumn:
    """Tests for currency_column."""

    def test_fixed_columns(self):
        assert currency_column(Currency.GBP) == 24
        assert currency_column(Currency.USD) == 71
        assert currency_column(Currency.EUR) == 21

    def test_every_currency_has_a_distinct_column(self):
        columns = [currency_column(currency) for currency in Currency]
        assert len(set(columns)) == len(Currency)

    def test_selector_uses_column(self):
        assert rate_selector(Currency.USD) == (
            "#main > div > div > table > tbody > tr > td:nth-child(71)"
        )

    def test_unreachable_value_fails_loudly(self):
        with pytest.raises(UnsupportedCurrencyError):
            assert_unreachable("CHF")  # type: ignore[arg-type]


class TestExtractRateText:
    """Tests for extract_rate_text."""

    def test_reads_currency_column(self, mnb_page):
        page = mnb_page({21: "385,27", 24: "437,83", 71: "360,12"})

        assert extract_rate_text(page, Currency.EUR) == "385,27"
        assert extract_rate_text(page, Currency.GBP) == "437,83"
        assert extract_rate_text(page, Currency.USD) == "360,12"

    def test_empty_cell(self, mnb_page):
        assert extract_rate_text(mnb_page({}), Currency.GBP) == ""

    def test_changed_markup_returns_empty(self):
        assert extract_rate_text("<p>Karbantartás</p>", Currency.GBP) == ""


class TestExtractCryptoText:
    """Tests for extract_crypto_text."""

    def test_reads_price_value(self, crypto_page):
        assert extract_crypto_text(crypto_page("$27,123.45")) == "$27,123.45"

    def test_missing_price_section_returns_empty(self):
        assert extract_crypto_text("<div class='priceValue'><span>1</span></div>") == ""
