# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Exceptions raised by the price lookups."""


class PriceLookupError(Exception):
    """Base exception for price lookup errors."""


class UnsupportedCurrencyError(PriceLookupError):
    """Currency is not one of the supported codes."""


class InvalidDateError(PriceLookupError, ValueError):
    """Date string could not be parsed."""


class LocaleFormatError(PriceLookupError):
    """Locale does not format 0.1 as '0<separator>1'."""


class NumberFormatError(PriceLookupError, ValueError):
    """Price text could not be parsed as a number."""


class TransportError(PriceLookupError):
    """Page could not be fetched."""


class ExtractionEmptyError(PriceLookupError):
    """Nothing was found at the expected position of the page."""


class RateNotFoundError(PriceLookupError):
    """No published rate found within the look-back window."""


class InvalidAssetError(PriceLookupError, ValueError):
    """Asset name is empty after trimming."""
