from __future__ import annotations

import calendar
from datetime import date, datetime, time

_TIME_FORMATS = ("%H:%M", "%H:%M:%S")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def coerce_date(value: date | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(str(value))


def time_to_minutes(value: str | time) -> int:
    """Minutes since midnight for ``"HH:MM"`` or ``"HH:MM:SS"`` (seconds are ignored).

    Raises ValueError for anything that is not a valid time of day.
    """
    if isinstance(value, time):
        return value.hour * 60 + value.minute
    if not isinstance(value, str):
        raise ValueError(f"not a time string: {value!r}")
    v = value.strip()
    for fmt in _TIME_FORMATS:
        try:
            t = datetime.strptime(v, fmt).time()
        except ValueError:
            continue
        return t.hour * 60 + t.minute
    raise ValueError(f"not a time of day: {value!r}")


def parse_time_of_day(value: str | time) -> time:
    minutes = time_to_minutes(value)
    return time(minutes // 60, minutes % 60)


def weekday_index(d: date) -> int:
    """Day of week with 0 = Sunday ... 6 = Saturday.

    Stored weekend configuration uses this numbering.
    """
    return (d.weekday() + 1) % 7


def month_dates(year: int, month: int) -> list[date]:
    _, days = calendar.monthrange(year, month)
    return [date(year, month, day) for day in range(1, days + 1)]
