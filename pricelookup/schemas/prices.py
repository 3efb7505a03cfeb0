# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Price lookup schemas.

Prices are JSON numbers, so they carry float precision. Request
``format=text`` for the exact decimal digits.
"""
from pydantic import BaseModel, Field

from pricelookup.models.enums import Currency


class ExchangeRateResponse(BaseModel):
    """MNB exchange rate response."""

    currency: Currency
    requested_date: str = Field(description="Requested date as YYYY.MM.DD.")
    rate: float = Field(
        description="HUF per one unit of the currency, as a float. "
        "Use format=text for the exact value."
    )


class CryptoPriceResponse(BaseModel):
    """Crypto price response."""

    asset: str
    slug: str
    price: float = Field(
        description="Current price, as a float. Use format=text for the exact value."
    )
