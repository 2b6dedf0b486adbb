from __future__ import annotations

import logging
import time
from datetime import date, datetime, timedelta, tzinfo as TzInfo
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field

from jwcal.core.config import EPOCH_UTC, EPOCH_YEAR, JavaneseCalendarConfig
from jwcal.core.timeutil import resolve_tzinfo
from jwcal.core.year_rule import days_in_month, days_in_year, is_leap_year
from jwcal.features.converter import (
    JavaneseDate,
    javanese_dates_between,
    javanese_for_date,
    to_javanese,
)

router = APIRouter(prefix="/api/v1", tags=["public"])

log = logging.getLogger("jwcal.api.public")

DEFAULT_DAY_TZ = "WIB"
DEFAULT_INSTANT_TZ = "UTC"


# ============================================================
# Response Models
# ============================================================
class CycleEntry(BaseModel):
    day: int
    name: str


class JavaneseDateModel(BaseModel):
    year: int
    month: int
    day: int
    month_name: str = Field(alias="monthName")
    day_name: str = Field(alias="dayName")
    pasaran: CycleEntry
    wuku: CycleEntry
    leap_year: bool = Field(alias="leapYear", description="true if the Javanese year has 355 days")
    days_in_month: int = Field(alias="daysInMonth")

    model_config = ConfigDict(populate_by_name=True)


class DayResponse(BaseModel):
    date: date
    tz: str
    javanese: JavaneseDateModel
    label: str


class RangeResponse(BaseModel):
    start: date
    end: date
    tz: str
    days: List[DayResponse]


class InstantResponse(BaseModel):
    at: datetime
    tz: str
    javanese: JavaneseDateModel
    label: str


# =========================================================
# Public entry point
# =========================================================
def generate_javanese_timestamp(dt: datetime) -> JavaneseDate:
    """
    Convert a Gregorian datetime to a JavaneseDate (see to_javanese).
    """
    return to_javanese(dt)


# =========================================================
# Public JSON API (function-style, HTTP-ready)
# =========================================================
def _parse_date_any(x: str | date) -> date:
    if isinstance(x, datetime):
        return x.date()
    if isinstance(x, date):
        return x
    return _parse_iso_date(str(x))


def _javanese_payload(jd: JavaneseDate) -> Dict[str, Any]:
    out = jd.to_dict()
    out["leapYear"] = is_leap_year(jd.year)
    # pre-epoch results keep month=1, which is always a valid month
    out["daysInMonth"] = days_in_month(jd.year, jd.month)
    return out


def _meta(tz: str) -> Dict[str, Any]:
    return {
        "tz": tz,
        "epoch_utc": EPOCH_UTC.isoformat(),
        "epoch_year": EPOCH_YEAR,
    }


def get_javanese_day(
    date_: str | date,
    *,
    tz: str = DEFAULT_DAY_TZ,
    config: Optional[JavaneseCalendarConfig] = None,
) -> dict:
    d = _parse_date_any(date_)
    tzinfo = _get_tzinfo(tz)
    jd = javanese_for_date(d, tzinfo=tzinfo, config=config)
    return {
        "meta": _meta(tz),
        "date": d.isoformat(),
        "javanese": _javanese_payload(jd),
        "label": jd.label,
        "year_length": days_in_year(jd.year),
    }


def get_javanese_range(
    start: str | date,
    end: str | date,
    *,
    tz: str = DEFAULT_DAY_TZ,
    config: Optional[JavaneseCalendarConfig] = None,
) -> dict:
    s = _parse_date_any(start)
    e = _parse_date_any(end)
    if e < s:
        raise ValueError("end must be >= start")

    tzinfo = _get_tzinfo(tz)

    days: List[dict] = []
    for d, jd in javanese_dates_between(s, e + timedelta(days=1), tzinfo=tzinfo, config=config):
        days.append(
            {
                "date": d.isoformat(),
                "javanese": _javanese_payload(jd),
                "label": jd.label,
            }
        )

    return {
        "meta": _meta(tz),
        "range": {"start": s.isoformat(), "end": e.isoformat()},
        "days": days,
    }


def get_javanese_instant(
    at: str | datetime,
    *,
    tz: str = DEFAULT_INSTANT_TZ,
    config: Optional[JavaneseCalendarConfig] = None,
) -> dict:
    tzinfo = _get_tzinfo(tz)
    dt = _parse_instant(at, tzinfo)
    jd = to_javanese(dt, config=config)
    return {
        "meta": _meta(tz),
        "at": dt.isoformat(),
        "javanese": _javanese_payload(jd),
        "label": jd.label,
    }


# ============================================================
# Helpers: parsing & tz
# ============================================================
def _parse_iso_date(s: str) -> date:
    try:
        return date.fromisoformat(s)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Invalid date format: {s} (expected YYYY-MM-DD)") from e


def _parse_instant(x: str | datetime, tzinfo: TzInfo) -> datetime:
    """
    ISO-8601 instant. A naive value is read as wall-clock time in tzinfo;
    an aware value is converted to tzinfo so the weekday follows tz.
    """
    if isinstance(x, datetime):
        dt = x
    else:
        try:
            dt = datetime.fromisoformat(str(x).strip())
        except (ValueError, OverflowError) as e:
            raise HTTPException(status_code=422, detail=f"Invalid datetime format: {x} (expected ISO-8601)") from e
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tzinfo)
    try:
        return dt.astimezone(tzinfo)
    except (ValueError, OverflowError) as e:
        raise HTTPException(status_code=422, detail=f"datetime out of range after conversion to {tzinfo}: {x}") from e


def _get_tzinfo(tz: str) -> TzInfo:
    try:
        return resolve_tzinfo(tz)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


def _day_response(d: date, tz: str, payload: Dict[str, Any], label: str) -> DayResponse:
    return DayResponse(
        date=d,
        tz=tz,
        javanese=JavaneseDateModel.model_validate(payload),
        label=label,
    )


# ============================================================
# Endpoints
# ============================================================
@router.get("/javanese/day", response_model=DayResponse, response_model_by_alias=True)
def get_day(
    date_str: str = Query(..., alias="date", description="YYYY-MM-DD"),
    tz: str = Query(DEFAULT_DAY_TZ, description="civil-day basis (WIB, UTC or IANA name)"),
    timing: bool = Query(False, description="log timing (diagnostics)"),
) -> DayResponse:
    d = _parse_iso_date(date_str)
    tzinfo = _get_tzinfo(tz)

    t0 = time.perf_counter()
    jd = javanese_for_date(d, tzinfo=tzinfo)
    t1 = time.perf_counter()

    if timing:
        log.warning("timing /javanese/day date=%s tz=%s convert=%.6fs", d, tz, t1 - t0)

    return _day_response(d, tz, _javanese_payload(jd), jd.label)


@router.get("/javanese/range", response_model=RangeResponse, response_model_by_alias=True)
def get_range(
    start_str: str = Query(..., alias="start", description="YYYY-MM-DD"),
    end_str: str = Query(..., alias="end", description="YYYY-MM-DD"),
    tz: str = Query(DEFAULT_DAY_TZ, description="civil-day basis (WIB, UTC or IANA name)"),
    limit_days: int = Query(370, ge=1, le=2000, description="max days per request"),
    timing: bool = Query(False, description="log timing (diagnostics)"),
) -> RangeResponse:
    start = _parse_iso_date(start_str)
    end = _parse_iso_date(end_str)
    if end < start:
        raise HTTPException(status_code=422, detail="end must be >= start")

    days_count = (end - start).days + 1
    if days_count > limit_days:
        raise HTTPException(status_code=422, detail=f"range too large: {days_count} days (limit_days={limit_days})")

    tzinfo = _get_tzinfo(tz)

    t0 = time.perf_counter()
    days: List[DayResponse] = [
        _day_response(d, tz, _javanese_payload(jd), jd.label)
        for d, jd in javanese_dates_between(start, end + timedelta(days=1), tzinfo=tzinfo)
    ]
    t1 = time.perf_counter()

    if timing:
        log.warning(
            "timing /javanese/range start=%s end=%s tz=%s days=%d total=%.6fs",
            start, end, tz, days_count, t1 - t0,
        )

    return RangeResponse(start=start, end=end, tz=tz, days=days)


@router.get("/javanese/instant", response_model=InstantResponse, response_model_by_alias=True)
def get_instant(
    at: str = Query(..., description="ISO-8601 datetime; naive values are read in tz"),
    tz: str = Query(DEFAULT_INSTANT_TZ, description="WIB, UTC or IANA name"),
) -> InstantResponse:
    tzinfo = _get_tzinfo(tz)
    dt = _parse_instant(at, tzinfo)
    jd = to_javanese(dt)
    return InstantResponse(
        at=dt,
        tz=tz,
        javanese=JavaneseDateModel.model_validate(_javanese_payload(jd)),
        label=jd.label,
    )
