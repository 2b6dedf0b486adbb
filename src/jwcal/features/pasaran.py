from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from jwcal.core.timeutil import js_weekday, require_aware
from jwcal.features.config import PASARAN, pasaran_name_from_index

# calibrates the weekday index against the 5-day market week
PASARAN_WEEKDAY_OFFSET = 1


@dataclass(frozen=True)
class Pasaran:
    """
    Five-day market cycle.

    - day: index 0..4 into PASARAN
    - name: Kliwon/Legi/Pahing/Pon/Wage
    """
    day: int
    name: str

    def __str__(self) -> str:
        return self.name


def pasaran_index_from_weekday(weekday: int) -> int:
    """
    (weekday + 1) % 5, weekday being 0=Sunday .. 6=Saturday.
    """
    w = int(weekday)
    if not (0 <= w <= 6):
        raise ValueError(f"weekday out of range: {w}")
    return (w + PASARAN_WEEKDAY_OFFSET) % len(PASARAN)


def pasaran_from_weekday(weekday: int) -> Pasaran:
    i = pasaran_index_from_weekday(weekday)
    return Pasaran(day=i, name=pasaran_name_from_index(i))


def pasaran_for_datetime(dt: datetime) -> Pasaran:
    """
    Pasaran for the weekday on dt's own wall clock.
    """
    return pasaran_from_weekday(js_weekday(require_aware(dt, "dt")))
