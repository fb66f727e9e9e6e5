from __future__ import annotations

from datetime import date, datetime, timezone

from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE_NAME = "Asia/Kolkata"
DEFAULT_TZ = ZoneInfo(DEFAULT_TIMEZONE_NAME)


def to_local_day(value: date | datetime | str, tz: ZoneInfo = DEFAULT_TZ) -> date:
    """Reduce a date, datetime or ISO string to a calendar day in `tz`.

    Plain dates ('2024-01-10') are taken as-is. Aware datetimes are converted
    to `tz` first; naive datetimes are assumed to already be local.
    Accepts a trailing 'Z' on ISO datetimes.
    """
    if isinstance(value, str):
        s = value.strip()
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        if "T" not in s and " " not in s:
            return date.fromisoformat(s)
        value = datetime.fromisoformat(s)
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date()
    return value


def today(tz: ZoneInfo = DEFAULT_TZ) -> date:
    return datetime.now(timezone.utc).astimezone(tz).date()
