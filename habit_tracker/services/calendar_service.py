"""Date-key arithmetic.

Every place that turns a ``YYYY-MM-DD`` string into a calendar date goes
through this module, so parsing rules live in one spot.

Out-of-range month or day values are accepted and roll over into the
neighbouring month or year (``2024-01-32`` is ``2024-02-01``, ``2024-13-01``
is ``2025-01-01``, day ``0`` is the last day of the previous month). Only a
key that does not split into three numeric parts is rejected.
"""

from __future__ import annotations

import datetime
import re
from typing import NamedTuple, Tuple
from zoneinfo import ZoneInfo

from habit_tracker.core.config import DEFAULT_TIMEZONE
from habit_tracker.core.errors import InvalidDateKey

DEFAULT_START_TIME = "09:00"
DEFAULT_END_TIME = "10:00"

_TIME_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{2})")
_STRICT_DATE_KEY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class WeekRange(NamedTuple):
    week_start: str
    week_end: str

    def to_dict(self) -> dict:
        return {"weekStart": self.week_start, "weekEnd": self.week_end}


def format_date_key(value: datetime.date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def current_date_key(timezone: str | None = None, now: datetime.datetime | None = None) -> str:
    """Today's date-key in the anchor timezone, not UTC and not the client's clock."""
    zone = ZoneInfo(timezone or DEFAULT_TIMEZONE)
    moment = now.astimezone(zone) if now is not None else datetime.datetime.now(zone)
    return format_date_key(moment.date())


def is_strict_date_key(value) -> bool:
    return isinstance(value, str) and bool(_STRICT_DATE_KEY_PATTERN.match(value))


def parse_date_key(date_key: str) -> Tuple[int, int, int]:
    parts = date_key.split("-") if isinstance(date_key, str) else []
    if len(parts) != 3 or not all(part.isascii() and part.isdigit() for part in parts):
        raise InvalidDateKey(f"Invalid date key: {date_key!r} (expected YYYY-MM-DD)")
    year, month, day = (int(part) for part in parts)
    return year, month, day


def to_date(date_key: str) -> datetime.date:
    year, month, day = parse_date_key(date_key)
    # 日本語: 範囲外の月/日は隣の月・年へ繰り越す / English: Out-of-range month/day roll into the adjacent month/year
    carry_years, month_index = divmod(month - 1, 12)
    try:
        first_of_month = datetime.date(year + carry_years, month_index + 1, 1)
        return first_of_month + datetime.timedelta(days=day - 1)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateKey(f"Date key out of range: {date_key!r}") from exc


def week_start(date_key: str) -> str:
    """Monday on or before ``date_key``."""
    value = to_date(date_key)
    # 日本語: 日曜=0 ... 土曜=6 の曜日から直前の月曜までの日数 / English: Days since the preceding Monday from a Sunday=0 index
    day = value.isoweekday() % 7
    offset = (day + 6) % 7
    return format_date_key(value - datetime.timedelta(days=offset))


def week_range(date_key: str) -> WeekRange:
    start = week_start(date_key)
    try:
        end = to_date(start) + datetime.timedelta(days=6)
    except OverflowError as exc:
        raise InvalidDateKey(f"Week of {date_key!r} ends past the last representable date") from exc
    return WeekRange(start, format_date_key(end))


def clamp_time_of_day(raw, default: str = DEFAULT_START_TIME) -> str:
    """Normalize ``H:MM``/``HH:MM`` into ``HH:MM`` within 00:00-23:59.

    Absent or non-matching input yields ``default``; this never raises.
    """
    if not raw or not isinstance(raw, str):
        return default
    match = _TIME_PATTERN.fullmatch(raw)
    if not match:
        return default
    hour = min(23, max(0, int(match.group(1))))
    minute = min(59, max(0, int(match.group(2))))
    return f"{hour:02d}:{minute:02d}"


__all__ = [
    "DEFAULT_START_TIME",
    "DEFAULT_END_TIME",
    "WeekRange",
    "format_date_key",
    "current_date_key",
    "is_strict_date_key",
    "parse_date_key",
    "to_date",
    "week_start",
    "week_range",
    "clamp_time_of_day",
]
