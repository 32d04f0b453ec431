"""Date normalization and duration arithmetic for profile entries.

Profile dates are loose month/year strings ("Jan 2020", "2018") or the
``PRESENT`` sentinel for ongoing entries.  They are normalized to
timezone-aware datetimes at midnight on the first day of the month.
"""

from __future__ import annotations

import warnings
from datetime import datetime, tzinfo

from dateutil import parser, tz

PRESENT = "Present"

# Missing components (day, and month for year-only input) come from these.
# They differ only in year, so text without a year parses differently.
_DEFAULT_DATES = (datetime(2000, 1, 1), datetime(2004, 1, 1))


def reference_timezone(name: str | None = None) -> tzinfo:
    """Return the named IANA zone, or the local zone when *name* is empty."""
    if not name:
        return tz.tzlocal()
    zone = tz.gettz(name)
    if zone is None:
        raise ValueError(f"Unknown timezone: {name!r}")
    return zone


def normalize_date(text: str | None, tzinfo: tzinfo | None = None) -> datetime | None:
    """Parse month/year *text* into the first day of that month.

    ``PRESENT`` resolves to the current time at call time.  Empty or
    unparseable text yields ``None``; this never raises on bad input.
    """
    if not text or not text.strip():
        return None

    zone = tzinfo or tz.tzlocal()
    text = text.strip()

    if text == PRESENT:
        return datetime.now(zone)

    parsed = _parse_month_year(text)
    if parsed is None:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(zone).replace(tzinfo=None)

    return parsed.replace(
        day=1, hour=0, minute=0, second=0, microsecond=0, tzinfo=zone
    )


def _parse_month_year(text: str) -> datetime | None:
    with warnings.catch_warnings():
        warnings.simplefilter("error", parser.UnknownTimezoneWarning)
        try:
            first, second = (parser.parse(text, default=d) for d in _DEFAULT_DATES)
        except (ValueError, OverflowError, parser.UnknownTimezoneWarning):
            return None
    if first != second:
        return None
    return first


def _as_datetime(value: datetime | str | None) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    try:
        return parser.isoparse(value)
    except ValueError:
        return None


def duration_in_days(
    start: datetime | str | None,
    end: datetime | str | None,
) -> int | None:
    """Return the inclusive number of days from *start* to *end*.

    Both endpoints count, so a span starting and ending on the same day is
    1 day long.  Returns ``None`` when either endpoint is missing or when
    *end* lies before *start*.
    """
    start_dt = _as_datetime(start)
    end_dt = _as_datetime(end)
    if start_dt is None or end_dt is None:
        return None

    # Compare wall-clock times so DST shifts don't eat a day
    if start_dt.tzinfo is not None and end_dt.tzinfo is not None:
        end_dt = end_dt.astimezone(start_dt.tzinfo)
    start_dt = start_dt.replace(tzinfo=None)
    end_dt = end_dt.replace(tzinfo=None)

    days = (end_dt - start_dt).days
    if days < 0:
        return None
    return days + 1
