# src/jwcal/features/converter.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo as TzInfo
from typing import Any, Dict, Iterator, Optional, Tuple

from jwcal.core.config import WIB, JavaneseCalendarConfig
from jwcal.core.resolve import resolve
from jwcal.core.timeutil import civil_midnight, elapsed_days, js_weekday, require_aware
from jwcal.features.config import day_name_from_weekday, month_name_from_month_no
from jwcal.features.pasaran import Pasaran, pasaran_from_weekday
from jwcal.features.wuku import Wuku, wuku_from_offset

log = logging.getLogger("jwcal.features.converter")


@dataclass(frozen=True)
class JavaneseDate:
    """
    Javanese (Sultan Agung) date for one Gregorian instant.

    - year/month/day: month 1..12, day 1..30 for supported input
      (day <= 0 for instants before the epoch)
    - month_name: WULAN spelling
    - day_name: weekday name (Ahad .. Sabtu)
    """
    year: int
    month: int
    day: int
    month_name: str
    day_name: str
    pasaran: Pasaran
    wuku: Wuku

    @property
    def label(self) -> str:
        return f"{self.day_name} {self.pasaran.name}, {self.day} {self.month_name} {self.year}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "monthName": self.month_name,
            "dayName": self.day_name,
            "pasaran": {"day": self.pasaran.day, "name": self.pasaran.name},
            "wuku": {"day": self.wuku.day, "name": self.wuku.name},
        }


def to_javanese(dt: datetime, *, config: Optional[JavaneseCalendarConfig] = None) -> JavaneseDate:
    """
    Convert an aware Gregorian datetime to a JavaneseDate.

    The elapsed-day count is measured against the epoch instant, so the
    timezone of dt only matters for the weekday (read from dt's own wall
    clock). Pass datetimes in the civil zone you want days counted in.
    """
    cfg = config or JavaneseCalendarConfig()
    dt = require_aware(dt, "dt")

    n = elapsed_days(dt, cfg.epoch_utc)
    if n < 0:
        log.warning("instant precedes the epoch anchor (unsupported): dt=%s epoch=%s", dt.isoformat(), cfg.epoch_utc.isoformat())

    r = resolve(n, strategy=cfg.resolve_strategy, epoch_year=cfg.epoch_year)
    weekday = js_weekday(dt)

    return JavaneseDate(
        year=r.year,
        month=r.month,
        day=r.day,
        month_name=month_name_from_month_no(r.month),
        day_name=day_name_from_weekday(weekday),
        pasaran=pasaran_from_weekday(weekday),
        wuku=wuku_from_offset(r.offset),
    )


def javanese_for_date(
    d: date,
    *,
    tzinfo: TzInfo = WIB,
    config: Optional[JavaneseCalendarConfig] = None,
) -> JavaneseDate:
    """
    Civil date => JavaneseDate, evaluated at 00:00 of d in tzinfo.
    """
    return to_javanese(civil_midnight(d, tzinfo), config=config)


def javanese_dates_between(
    start: date,
    end: date,
    *,
    tzinfo: TzInfo = WIB,
    config: Optional[JavaneseCalendarConfig] = None,
) -> Iterator[Tuple[date, JavaneseDate]]:
    """
    Yield (date, JavaneseDate) for each civil date in [start, end).
    """
    if end < start:
        raise ValueError("end must be >= start")
    cfg = config or JavaneseCalendarConfig()
    cur = start
    while cur < end:
        yield cur, javanese_for_date(cur, tzinfo=tzinfo, config=cfg)
        cur = cur + timedelta(days=1)
