# inspect_db.py
from __future__ import annotations

import argparse
from datetime import date as _date, datetime as _dt
from typing import Optional

from config import Settings
from crud import list_appointments
from database import db_session, make_session_factory


def parse_date(s: Optional[str]) -> Optional[_date]:
    if not s:
        return None
    # Accept YYYY-MM-DD, DD/MM/YYYY, DD/MM
    for fmt in ("%Y-%m-%d", "%d/%m/%Y", "%d/%m"):
        try:
            dt = _dt.strptime(s, fmt)
            # If year missing, assume current year
            year = _date.today().year if fmt == "%d/%m" else dt.year
            return _date(year, dt.month, dt.day)
        except ValueError:
            continue
    raise argparse.ArgumentTypeError(f"Invalid date: {s}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Print stored appointments with optional date range."
    )
    parser.add_argument("--from", dest="start", type=parse_date, help="Start date (YYYY-MM-DD or DD/MM/YYYY)")
    parser.add_argument("--to", dest="end", type=parse_date, help="End date (YYYY-MM-DD or DD/MM/YYYY)")
    parser.add_argument("--limit", type=int, default=200, help="Max rows (default 200)")
    parser.add_argument("--database-url", default=None, help="Override DATABASE_URL")
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    factory = make_session_factory(args.database_url or settings.database_url)

    with db_session(factory) as db:
        rows = list_appointments(db, args.start, args.end, limit=args.limit)

    if not rows:
        rng = ""
        if args.start or args.end:
            rng = f" in range [{args.start or '-∞'} .. {args.end or '+∞'}]"
        print(f"No appointments found{rng}.")
        return 0

    print(f"{'ID':>3}  {'WHEN':<16}  {'STATUS':<8}  {'TITLE'}")
    print("-" * 70)
    for a in rows:
        when = a.date_time.strftime("%d/%m/%Y %H:%M")
        print(f"{a.id:>3}  {when:<16}  {a.status:<8}  {a.title}")
    print("-" * 70)
    print(f"{len(rows)} row(s).")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
