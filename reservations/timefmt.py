"""
Date/time parsing for reservation slots.

Slots travel as an ISO date (``YYYY-MM-DD``) and a 24-hour wall-clock time
(``HH:MM``). The richer booking form submits display times such as
``"5:30 PM"``; :func:`to_24_hour` converts those before they reach the
services, and refuses anything it cannot read so a guest is never booked
at a time they did not pick.
"""
from __future__ import annotations

import re
from datetime import date, datetime, time

from .exceptions import InvalidInput

TWELVE_HOUR_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*(AM|PM)\s*$", re.IGNORECASE)
TWENTY_FOUR_HOUR_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")
ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def to_24_hour(value: str) -> str:
    """'5:30 PM' -> '17:30', '12:05 AM' -> '00:05'."""
    match = TWELVE_HOUR_RE.match(value or "")
    if not match:
        raise InvalidInput(f"Invalid time format: {value!r} (expected H:MM AM/PM)")

    hour, minute, period = int(match.group(1)), int(match.group(2)), match.group(3).upper()
    if not 1 <= hour <= 12 or minute > 59:
        raise InvalidInput(f"Invalid time format: {value!r} (expected H:MM AM/PM)")

    if period == "PM" and hour != 12:
        hour += 12
    elif period == "AM" and hour == 12:
        hour = 0
    return f"{hour:02d}:{minute:02d}"


def normalize_time(value: str) -> str:
    """Accept ``HH:MM`` or a 12-hour display time; return ``HH:MM``."""
    value = (value or "").strip()
    if TWENTY_FOUR_HOUR_RE.match(value):
        return value
    return to_24_hour(value)


def parse_date(value) -> date:
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not ISO_DATE_RE.match(text):
        raise InvalidInput(f"Invalid date: {value!r} (expected YYYY-MM-DD)")
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise InvalidInput(f"Invalid date: {value!r} (expected YYYY-MM-DD)")


def parse_time(value) -> time:
    if isinstance(value, time):
        return value
    text = str(value).strip()
    if not TWENTY_FOUR_HOUR_RE.match(text):
        raise InvalidInput(f"Invalid time: {value!r} (expected HH:MM)")
    return datetime.strptime(text, "%H:%M").time()
