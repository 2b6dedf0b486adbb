from __future__ import annotations

from datetime import date, datetime, time, timezone, tzinfo as TzInfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .config import DAY, WIB

UTC = timezone.utc


def require_aware(dt: datetime, name: str = "dt") -> datetime:
    """
    Ensure a datetime is timezone-aware.

    Parameters
    ----------
    dt:
        datetime to validate.
    name:
        Parameter name for error messages.

    Returns
    -------
    datetime
        The same datetime if valid (no conversion is applied; the caller's
        wall clock is kept because the weekday is read from it).

    Raises
    ------
    ValueError
        If dt is naive or its tzinfo yields no utcoffset.
    """
    if dt.tzinfo is None:
        raise ValueError(f"{name} must be timezone-aware datetime (got naive datetime)")
    if dt.utcoffset() is None:
        raise ValueError(f"{name} has invalid tzinfo (utcoffset is None): {dt.tzinfo!r}")
    return dt


def js_weekday(dt: datetime) -> int:
    """
    Weekday on the datetime's own wall clock, 0=Sunday .. 6=Saturday.
    """
    return (dt.weekday() + 1) % 7


def elapsed_days(dt: datetime, epoch_utc: datetime) -> int:
    """
    floor((dt - epoch) / 1 day). Negative for instants before the epoch.
    """
    dt = require_aware(dt, "dt")
    return (dt - epoch_utc) // DAY


def civil_midnight(d: date, tzinfo: TzInfo = WIB) -> datetime:
    return datetime.combine(d, time(0, 0), tzinfo=tzinfo)


def resolve_tzinfo(tz: str) -> TzInfo:
    """
    "WIB" (fixed +07:00), "UTC" or an IANA zone name.

    Raises
    ------
    ValueError
        If the name is not a known zone.
    """
    name = (tz or "").strip()
    if name.upper() == "WIB":
        return WIB
    if name.upper() == "UTC":
        return UTC
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise ValueError(f"Unknown timezone: {tz}") from e
