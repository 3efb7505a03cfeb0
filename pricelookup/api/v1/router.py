# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from pricelookup.api.v1 import prices

api_router = APIRouter()

# Price routes
api_router.include_router(prices.router, prefix="/prices", tags=["prices"])
