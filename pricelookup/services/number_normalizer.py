# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Locale aware conversion of scraped price text into decimals.

The decimal separator of a locale is taken from how that locale formats the
reference value 0.1, so no separator is ever hardcoded. Everything that is not
a digit or that separator (thousands separators, currency symbols, regular and
non-breaking spaces) is dropped before parsing.
"""

import re
from decimal import Decimal, InvalidOperation

from babel import UnknownLocaleError
from babel.numbers import format_decimal

from pricelookup.exceptions import LocaleFormatError, NumberFormatError

# Locale of the MNB daily table (comma decimal separator)
EXCHANGE_LOCALE = "hu_HU"

# Locale of the crypto price pages (period decimal separator)
DEFAULT_LOCALE = "en_US"

_REFERENCE_VALUE = Decimal("0.1")
_REFERENCE_PATTERN = re.compile(r"^0(.)1$")


def decimal_separator(locale: str) -> str:
    """Return the decimal separator character of a locale.

    Raises:
        LocaleFormatError: If the locale is unknown or does not format 0.1
            as '0<separator>1'.
    """
    try:
        formatted = format_decimal(_REFERENCE_VALUE, locale=locale.replace("-", "_"))
    except (UnknownLocaleError, ValueError) as e:
        raise LocaleFormatError(f"Unsupported locale {locale!r}: {e}") from e

    match = _REFERENCE_PATTERN.match(formatted)
    if not match:
        raise LocaleFormatError(
            f"Locale {locale!r} formats 0.1 as {formatted!r}, "
            "cannot determine the decimal separator"
        )
    return match.group(1)


def normalize(raw_text: str, locale: str) -> Decimal:
    """Convert locale formatted price text into a Decimal.

    Text without any digits normalizes to zero, which callers treat as
    "no price published".

    Raises:
        LocaleFormatError: If the locale is not supported.
        NumberFormatError: If the cleaned text is not a single number.
    """
    separator = decimal_separator(locale)
    cleaned = re.sub(f"[^0-9{re.escape(separator)}]", "", raw_text)
    if not cleaned:
        return Decimal(0)
    if cleaned.count(separator) > 1:
        raise NumberFormatError(f"Cannot parse {raw_text!r} as a number")

    try:
        return Decimal(cleaned.replace(separator, "."))
    except InvalidOperation as e:
        raise NumberFormatError(f"Cannot parse {raw_text!r} as a number") from e
