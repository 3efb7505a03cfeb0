# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pydantic schemas."""
from pricelookup.schemas.common import HealthResponse
from pricelookup.schemas.prices import CryptoPriceResponse, ExchangeRateResponse

__all__ = ["HealthResponse", "ExchangeRateResponse", "CryptoPriceResponse"]
