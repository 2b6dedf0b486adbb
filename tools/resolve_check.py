from __future__ import annotations

"""
Resolve consistency check.

- greedy vs cycle resolution over an elapsed-day range
- month lengths sum to year length over a year range
"""

import argparse

from jwcal.core.config import EPOCH_YEAR
from jwcal.core.resolve import resolve_cycle, resolve_greedy
from jwcal.core.year_rule import days_in_year, month_lengths

from tools.common import dump_json, fail


def main() -> None:
    parser = argparse.ArgumentParser(description="Resolve strategy consistency check")
    parser.add_argument("--days", type=int, default=100_000, help="check elapsed days 0..days-1")
    parser.add_argument("--years", type=int, default=400, help="check years from epoch year")
    parser.add_argument("--json", action="store_true")
    args = parser.parse_args()

    mismatches = []
    for n in range(args.days):
        a = resolve_greedy(n)
        b = resolve_cycle(n)
        if a != b:
            mismatches.append({"elapsed": n, "greedy": repr(a), "cycle": repr(b)})

    bad_years = [
        y for y in range(EPOCH_YEAR, EPOCH_YEAR + args.years)
        if sum(month_lengths(y)) != days_in_year(y)
    ]

    if args.json:
        dump_json({"days": args.days, "years": args.years, "mismatches": mismatches[:20], "bad_years": bad_years})
    else:
        print(f"elapsed 0..{args.days - 1}: mismatches={len(mismatches)}")
        print(f"years {EPOCH_YEAR}..{EPOCH_YEAR + args.years - 1}: bad_years={len(bad_years)}")

    if mismatches or bad_years:
        fail(f"mismatches={len(mismatches)} bad_years={len(bad_years)}")


if __name__ == "__main__":
    main()
