# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Calendar date helpers for the MNB daily rate table."""

import re
from datetime import date, datetime, timedelta

from pricelookup.exceptions import InvalidDateError

# Format used by the MNB daily table query, e.g. 2023.02.14.
RATE_DATE_FORMAT = "%Y.%m.%d."

# Hungarian short dates may carry spaces after the dots ("2023. 02. 14.")
_DOTTED_DATE = re.compile(r"^(\d{4})\.\s*(\d{1,2})\.\s*(\d{1,2})\.?$")

SATURDAY = 5
SUNDAY = 6


def render_rate_date(value: date) -> str:
    """Render a date the way the MNB query string expects it."""
    return value.strftime(RATE_DATE_FORMAT)


def parse_rate_date(value: str | date) -> date:
    """Parse 'YYYY.MM.DD.' or ISO 'YYYY-MM-DD' into a date.

    Raises:
        InvalidDateError: If the value is not a recognizable date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = value.strip()
    try:
        match = _DOTTED_DATE.match(text)
        if match:
            year, month, day = (int(part) for part in match.groups())
            return date(year, month, day)
        return date.fromisoformat(text)
    except ValueError as e:
        raise InvalidDateError(f"Invalid date {value!r}: {e}") from e


def roll_back_weekend(value: date) -> date:
    """Move Saturday and Sunday back to the preceding Friday."""
    weekday = value.weekday()
    if weekday == SATURDAY:
        return value - timedelta(days=1)
    if weekday == SUNDAY:
        return value - timedelta(days=2)
    return value


def previous_day(value: date) -> date:
    """Return the calendar day before value."""
    return value - timedelta(days=1)
