# tree_intelligence/date_utils.py
from __future__ import annotations

import logging
from datetime import date as _date, datetime as _datetime
from typing import Any, Optional

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365.25


def parse_date(value: Any) -> Optional[_date]:
    """
    Convert a birth date value from the host system to datetime.date.

    Accepts date and datetime objects as well as ISO 8601 strings, with or
    without a time part (e.g. '2000-01-01' or '2000-01-01T00:00:00.000Z').
    Time of day is discarded.

    Args:
        value: Date-like value or None

    Returns:
        datetime.date if conversion successful, None otherwise
    """
    if value is None:
        return None
    if isinstance(value, _datetime):
        return value.date()
    if isinstance(value, _date):
        return value
    if not isinstance(value, str):
        logger.debug(f"Unsupported date value {value!r}")
        return None

    text = value.strip()
    if not text:
        return None
    # fromisoformat does not accept a trailing 'Z' before Python 3.11
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return _datetime.fromisoformat(text).date()
    except ValueError:
        pass
    try:
        return _date.fromisoformat(text[:10])
    except ValueError:
        logger.debug(f"Could not parse date {value!r}")
        return None


def years_between(earlier: _date, later: _date, days_per_year: float = DAYS_PER_YEAR) -> float:
    """
    Signed number of years from earlier to later.

    Negative when 'later' is actually before 'earlier'.

    Args:
        earlier: Start date
        later: End date
        days_per_year: Length of a year in days

    Returns:
        Fractional year count
    """
    return (later - earlier).days / days_per_year


def round_half_up(value: float) -> int:
    """Round to the nearest whole number, halves rounding up."""
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)
