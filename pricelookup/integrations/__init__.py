# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integrations package."""
from pricelookup.integrations.base import PageFetcher
from pricelookup.integrations.html_selector import select_text
from pricelookup.integrations.http_fetcher import HttpPageFetcher

__all__ = [
    "PageFetcher",
    "HttpPageFetcher",
    "select_text",
]
