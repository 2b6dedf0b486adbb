# src/jwcal/core/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Literal

ResolveStrategy = Literal["greedy", "cycle"]

RESOLVE_STRATEGIES: tuple[str, ...] = ("greedy", "cycle")
RESOLVE_STRATEGY_ENV = "JWCAL_RESOLVE_STRATEGY"

log = logging.getLogger("jwcal.core.config")

# 1 Sura 1795 starts at 1867-03-05 00:00 WIB (= 1867-03-04 17:00 UTC)
EPOCH_UTC = datetime(1867, 3, 4, 17, 0, 0, tzinfo=timezone.utc)
EPOCH_YEAR = 1795

DAY = timedelta(days=1)

# Fixed +07:00. zoneinfo's Asia/Jakarta carries LMT/+07:20/+07:30 offsets
# before 1964, which would move civil midnight off the epoch boundary.
WIB = timezone(timedelta(hours=7), "WIB")

CYCLE_YEARS = 8
CYCLE_DAYS = 8 * 354 + 3


def default_resolve_strategy() -> ResolveStrategy:
    """
    Strategy from JWCAL_RESOLVE_STRATEGY, falling back to "cycle".

    An unknown value is logged and ignored.
    """
    v = os.environ.get(RESOLVE_STRATEGY_ENV, "").strip().lower()
    if not v:
        return "cycle"
    if v not in RESOLVE_STRATEGIES:
        log.warning("ignoring %s=%r (expected one of %s); using \"cycle\"", RESOLVE_STRATEGY_ENV, v, RESOLVE_STRATEGIES)
        return "cycle"
    return v  # type: ignore[return-value]


@dataclass(frozen=True)
class JavaneseCalendarConfig:
    """
    Conversion settings.

    - epoch_utc: instant that is day 0 of the elapsed-day count
    - epoch_year: Javanese year starting at epoch_utc
    - resolve_strategy: "greedy" walks year by year, "cycle" jumps whole
      8-year windows first (same output)
    """
    epoch_utc: datetime = EPOCH_UTC
    epoch_year: int = EPOCH_YEAR
    resolve_strategy: ResolveStrategy = field(default_factory=default_resolve_strategy)
