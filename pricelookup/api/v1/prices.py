# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Price lookup API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse

from pricelookup.api.deps import get_price_service
from pricelookup.exceptions import (
    ExtractionEmptyError,
    InvalidAssetError,
    InvalidDateError,
    LocaleFormatError,
    NumberFormatError,
    RateNotFoundError,
    TransportError,
    UnsupportedCurrencyError,
)
from pricelookup.schemas.common import ResponseFormat
from pricelookup.schemas.prices import CryptoPriceResponse, ExchangeRateResponse
from pricelookup.services.price_service import (
    DEFAULT_ASSET,
    DEFAULT_CURRENCY,
    PriceService,
    format_price,
)
from pricelookup.services.rate_dates import render_rate_date

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/exchange-rate", response_model=ExchangeRateResponse)
def get_exchange_rate(
    currency: str = Query(DEFAULT_CURRENCY.value, min_length=3, max_length=3),
    rate_date: str | None = Query(None, alias="date"),
    response_format: ResponseFormat = Query("json", alias="format"),
    service: PriceService = Depends(get_price_service),
) -> ExchangeRateResponse | PlainTextResponse:
    """Get the MNB rate of a currency in HUF.

    Weekend and holiday dates return the most recent earlier rate.
    """
    try:
        quote = service.lookup_exchange_rate(currency, rate_date)
    except (UnsupportedCurrencyError, InvalidDateError) as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e
    except RateNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except (TransportError, NumberFormatError) as e:
        logger.error(f"Exchange rate lookup failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Rate source unavailable: {e}",
        ) from e
    except LocaleFormatError as e:
        logger.error(f"Exchange rate lookup failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        ) from e

    if response_format == "text":
        return PlainTextResponse(format_price(quote.rate))
    return ExchangeRateResponse(
        currency=quote.currency,
        requested_date=render_rate_date(quote.requested_date),
        rate=float(quote.rate),
    )


@router.get("/crypto", response_model=CryptoPriceResponse)
def get_crypto_price(
    asset: str = Query(DEFAULT_ASSET, min_length=1),
    response_format: ResponseFormat = Query("json", alias="format"),
    service: PriceService = Depends(get_price_service),
) -> CryptoPriceResponse | PlainTextResponse:
    """Get the current price of a crypto asset by its long name."""
    try:
        quote = service.lookup_crypto_price(asset)
    except InvalidAssetError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e
    except (TransportError, ExtractionEmptyError, NumberFormatError) as e:
        logger.error(f"Crypto price lookup failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Price source unavailable: {e}",
        ) from e
    except LocaleFormatError as e:
        logger.error(f"Crypto price lookup failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        ) from e

    if response_format == "text":
        return PlainTextResponse(format_price(quote.price))
    return CryptoPriceResponse(
        asset=quote.asset,
        slug=quote.slug,
        price=float(quote.price),
    )
