# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Exchange rate and crypto price lookups for spreadsheets."""

__version__ = "0.1.0"
