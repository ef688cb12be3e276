# scripts/try_message.py
"""
Dry-run a scheduling message: print the title, date-time and confirmation
the API would produce, without storing anything.

    python scripts/try_message.py "marque reunião dia 24 às 15h"
    python scripts/try_message.py --now 2024-03-10T09:00 --estrito "anota dentista amanhã às 9"
"""

import argparse
import os
import sys
from datetime import datetime as _dt

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from agenda import AgendaError, AppointmentInterpreter, FixedClock, Strictness  # noqa: E402
from config import Settings  # noqa: E402
from logger import setup_logging  # noqa: E402


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Resolve a pt-BR scheduling message without saving it.")
    parser.add_argument("mensagem", help="Message text, e.g. 'marque reunião amanhã às 10h'")
    parser.add_argument("--now", help="Reference instant (ISO, local zone), default: current time")
    parser.add_argument("--tz", help="IANA zone, default: TIMEZONE setting")
    parser.add_argument("--estrito", action="store_true", help="Strict validation")
    parser.add_argument("--debug", action="store_true", help="Log which rule fired")
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    setup_logging("DEBUG" if args.debug else settings.log_level)
    tz = args.tz or settings.timezone

    clock = FixedClock(_dt.fromisoformat(args.now), tz) if args.now else None
    mode = Strictness.STRICT if args.estrito else settings.parse_mode
    interpreter = AppointmentInterpreter(tz, mode, clock=clock)

    try:
        draft = interpreter.interpret(args.mensagem)
    except AgendaError as e:
        print(f"[{e.kind.value}] {e.message}", file=sys.stderr)
        return 1

    print(f"title:     {draft.title!r}")
    print(f"date_time: {draft.date_time.isoformat()}")
    print(f"rule:      {draft.date_rule}")
    print(interpreter.confirmation(draft))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
