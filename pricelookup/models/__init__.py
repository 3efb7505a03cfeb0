# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Models package."""
from pricelookup.models.base import Base
from pricelookup.models.enums import Currency
from pricelookup.models.quote_cache import QuoteCacheEntry

__all__ = ["Base", "Currency", "QuoteCacheEntry"]
