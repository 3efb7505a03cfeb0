# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types."""

from enum import Enum


class Currency(str, Enum):
    """Currencies quoted in the MNB daily rate table."""

    GBP = "GBP"
    USD = "USD"
    EUR = "EUR"
