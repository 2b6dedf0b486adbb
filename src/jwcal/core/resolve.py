# src/jwcal/core/resolve.py
from __future__ import annotations

from dataclasses import dataclass

from .config import CYCLE_DAYS, CYCLE_YEARS, EPOCH_YEAR, ResolveStrategy
from .year_rule import days_in_month, days_in_year


@dataclass(frozen=True)
class ResolvedDay:
    """
    Result of walking an elapsed-day count forward from the epoch.

    - offset: zero-based residual day inside the final month (day - 1).
      The wuku cycle is read from this value.
    """
    year: int
    month: int
    day: int
    offset: int


def _fill_months(year: int, rest: int) -> ResolvedDay:
    month = 1
    n = days_in_month(year, month)
    while rest >= n:
        rest -= n
        month += 1
        n = days_in_month(year, month)
    return ResolvedDay(year=year, month=month, day=rest + 1, offset=rest)


def resolve_greedy(elapsed: int, epoch_year: int = EPOCH_YEAR) -> ResolvedDay:
    """
    Subtract whole years, then whole months, from the elapsed-day count.

    Pre-epoch (elapsed < 0): neither loop runs, so the result is
    (epoch_year, 1, elapsed + 1) with day <= 0.
    """
    rest = int(elapsed)
    year = int(epoch_year)
    n = days_in_year(year)
    while rest >= n:
        rest -= n
        year += 1
        n = days_in_year(year)
    return _fill_months(year, rest)


def resolve_cycle(elapsed: int, epoch_year: int = EPOCH_YEAR) -> ResolvedDay:
    """
    Same result as resolve_greedy, but skips whole 8-year windows first.

    Any 8 consecutive years hold exactly 3 leap years (2835 days), so the
    jump lands on the same (year, rest) pair the year loop would reach.
    """
    rest = int(elapsed)
    year = int(epoch_year)
    if rest >= CYCLE_DAYS:
        cycles, rest = divmod(rest, CYCLE_DAYS)
        year += cycles * CYCLE_YEARS
    return resolve_greedy(rest, year)


def resolve(
    elapsed: int,
    *,
    strategy: ResolveStrategy = "cycle",
    epoch_year: int = EPOCH_YEAR,
) -> ResolvedDay:
    if strategy == "cycle":
        return resolve_cycle(elapsed, epoch_year)
    if strategy == "greedy":
        return resolve_greedy(elapsed, epoch_year)
    raise ValueError(f"unknown resolve strategy: {strategy!r}")
