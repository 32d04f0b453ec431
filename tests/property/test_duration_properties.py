"""Property tests for date normalization and durations."""

from __future__ import annotations

from datetime import datetime, timedelta

from dateutil import tz
from hypothesis import given, settings
from hypothesis import strategies as st

from profile_scraper.dates import duration_in_days, normalize_date

UTC = tz.UTC
AMSTERDAM = tz.gettz("Europe/Amsterdam")

# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

month_names = st.sampled_from([
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
])
years = st.integers(min_value=1970, max_value=2030)
month_year_text = st.tuples(month_names, years).map(lambda t: f"{t[0]} {t[1]}")
zones = st.sampled_from([UTC, AMSTERDAM, tz.gettz("America/Los_Angeles")])
dates = st.datetimes(
    min_value=datetime(1970, 1, 1), max_value=datetime(2035, 12, 31)
).map(lambda d: d.replace(tzinfo=UTC))


@settings(max_examples=200)
@given(text=month_year_text, zone=zones)
def test_normalized_to_start_of_month(text: str, zone) -> None:
    result = normalize_date(text, zone)
    assert result is not None
    assert (result.day, result.hour, result.minute, result.second, result.microsecond) == (1, 0, 0, 0, 0)
    assert result.tzinfo is zone
    assert str(result.year) == text.split()[1]


@settings(max_examples=200)
@given(start=dates, offset=st.integers(min_value=0, max_value=20000))
def test_duration_is_inclusive(start: datetime, offset: int) -> None:
    assert duration_in_days(start, start + timedelta(days=offset)) == offset + 1


@settings(max_examples=200)
@given(start=dates, offset=st.integers(min_value=1, max_value=20000))
def test_reversed_span_has_no_duration(start: datetime, offset: int) -> None:
    assert duration_in_days(start + timedelta(days=offset), start) is None


@settings(max_examples=200)
@given(a=month_year_text, b=month_year_text, zone=zones)
def test_duration_sign_follows_date_order(a: str, b: str, zone) -> None:
    start = normalize_date(a, zone)
    end = normalize_date(b, zone)
    duration = duration_in_days(start, end)
    if end < start:
        assert duration is None
    else:
        assert duration is not None and duration >= 1


@settings(max_examples=100)
@given(a=month_year_text, b=month_year_text)
def test_duration_matches_calendar_days(a: str, b: str) -> None:
    """In a DST zone the count equals the plain calendar difference."""
    start = normalize_date(a, AMSTERDAM)
    end = normalize_date(b, AMSTERDAM)
    if end < start:
        return
    calendar_days = (end.date() - start.date()).days
    assert duration_in_days(start, end) == calendar_days + 1
