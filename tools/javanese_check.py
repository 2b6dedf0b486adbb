from __future__ import annotations

"""
Javanese date check script.

Uses:
- jwcal.features.converter.javanese_for_date
- jwcal.core.timeutil.resolve_tzinfo (WIB / UTC / IANA names)
"""

import argparse

from jwcal.core.config import JavaneseCalendarConfig
from jwcal.core.timeutil import resolve_tzinfo
from jwcal.features.converter import javanese_for_date

from tools.common import add_common_args, dump_json, iter_dates, resolve_date_range


def main() -> None:
    parser = argparse.ArgumentParser(description="Javanese calendar (Sultan Agung) check")
    add_common_args(parser)
    args = parser.parse_args()

    try:
        start, end = resolve_date_range(args)
    except ValueError as e:
        parser.error(f"invalid date: {e}")
    if start is None or end is None:
        parser.error("--date or --start/--end required")
    if end < start:
        parser.error("--end must be >= --start")

    try:
        tzinfo = resolve_tzinfo(args.tz)
    except ValueError as e:
        parser.error(str(e))
    cfg = JavaneseCalendarConfig(resolve_strategy=args.strategy)

    rows = []
    for cur in iter_dates(start, end):
        jd = javanese_for_date(cur, tzinfo=tzinfo, config=cfg)

        if args.json:
            rows.append({"date": cur.isoformat(), "javanese": jd.to_dict()})
        elif args.verbose:
            print(
                f"{cur.isoformat()}  J={jd.year}/{jd.month:02d}/{jd.day:02d}  "
                f"{jd.day_name} {jd.pasaran.name}  month={jd.month_name}  "
                f"wuku={jd.wuku.day}:{jd.wuku.name}"
            )
        else:
            print(f"{cur.isoformat()}  {jd.label}")

    if args.json:
        dump_json({"tz": args.tz, "rows": rows})


if __name__ == "__main__":
    main()
