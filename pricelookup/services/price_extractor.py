# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Price text extraction from fixed positions of the source pages."""

from typing import Never

from pricelookup.exceptions import UnsupportedCurrencyError
from pricelookup.integrations.html_selector import select_text
from pricelookup.models.enums import Currency

MNB_RATE_SELECTOR = "#main > div > div > table > tbody > tr > td:nth-child({column})"

CRYPTO_PRICE_SELECTOR = ".priceSection > .priceTitle > .priceValue > span"


def assert_unreachable(value: Never) -> Never:
    """Fail loudly for a value a type checker proved impossible."""
    raise UnsupportedCurrencyError(f"Unsupported currency: {value!r}")


def currency_column(currency: Currency) -> int:
    """1-based column of a currency in the MNB daily table row."""
    match currency:
        case Currency.GBP:
            return 24
        case Currency.USD:
            return 71
        case Currency.EUR:
            return 21
        case _:
            assert_unreachable(currency)


def rate_selector(currency: Currency) -> str:
    """CSS selector of a currency's cell in the MNB daily table."""
    return MNB_RATE_SELECTOR.format(column=currency_column(currency))


def extract_rate_text(markup: str, currency: Currency) -> str:
    """Raw rate text of a currency, or '' if the table was not found."""
    return select_text(markup, rate_selector(currency))


def extract_crypto_text(markup: str) -> str:
    """Raw price text of a crypto asset page, or '' if not found."""
    return select_text(markup, CRYPTO_PRICE_SELECTOR)
