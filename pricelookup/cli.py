# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Command line access to the price lookups."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from pricelookup.config import get_settings
from pricelookup.exceptions import PriceLookupError
from pricelookup.models.enums import Currency
from pricelookup.services.price_service import (
    DEFAULT_ASSET,
    DEFAULT_CURRENCY,
    PriceService,
    close_default_service,
    format_price,
    get_default_service,
)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pricelookup",
        description="Look up MNB exchange rates and crypto prices.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log cache and back-off decisions.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    rate_parser = subparsers.add_parser(
        "exchange-rate",
        help="MNB rate of a currency in HUF.",
    )
    rate_parser.add_argument(
        "currency",
        nargs="?",
        default=DEFAULT_CURRENCY.value,
        type=str.upper,
        choices=[c.value for c in Currency],
    )
    rate_parser.add_argument(
        "--date",
        dest="rate_date",
        help="Date as YYYY.MM.DD. or YYYY-MM-DD (default: today).",
    )

    crypto_parser = subparsers.add_parser(
        "crypto",
        help="Current price of a crypto asset.",
    )
    crypto_parser.add_argument(
        "asset",
        nargs="*",
        default=[DEFAULT_ASSET],
        help="Long name of the asset, e.g. Medieval Empires.",
    )
    return parser


def run(args: argparse.Namespace, service: PriceService) -> str:
    """Execute a parsed command and return the text to print."""
    if args.command == "exchange-rate":
        return format_price(service.exchange_rate(args.currency, args.rate_date))
    return format_price(service.crypto_price(" ".join(args.asset)))


def main(argv: Sequence[str] | None = None, service: PriceService | None = None) -> int:
    """Entry point of the pricelookup console script.

    A service passed in stays open; the default one is closed on exit.
    """
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else get_settings().log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    owns_service = service is None
    if service is None:
        service = get_default_service()
    try:
        print(run(args, service))
    except PriceLookupError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        if owns_service:
            close_default_service()
    return 0


if __name__ == "__main__":
    sys.exit(main())
