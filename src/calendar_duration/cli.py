"""
Командная строка: календарная длительность между двумя ISO датами.

Usage:
    calendar-duration 2020-04-08 1988-06-16
    calendar-duration 2000-08-31 2000-06-30 --no-direction
    calendar-duration 2025-03-15 2024-12-29 --json
"""

import argparse
import json
import logging
import sys
from datetime import date
from typing import List, Optional

from calendar_duration.core.calendar import calendar_duration_between, calendar_duration_from

logger = logging.getLogger(__name__)


def _iso_date(text: str) -> date:
    try:
        return date.fromisoformat(text.strip())
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO date (YYYY-MM-DD): {text!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calendar-duration",
        description="Whole years, months and days between two dates.",
    )
    parser.add_argument("first", type=_iso_date, help="date to describe (YYYY-MM-DD)")
    parser.add_argument("second", type=_iso_date, help="reference date (YYYY-MM-DD)")
    parser.add_argument(
        "--no-direction",
        action="store_true",
        help="omit the 'ago' / 'to go' suffix",
    )
    parser.add_argument("--json", action="store_true", help="print the JSON contract")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    if args.no_direction:
        duration = calendar_duration_between(args.first, args.second)
    else:
        duration = calendar_duration_from(args.first, args.second)

    logger.debug("duration for %s vs %s: %r", args.first, args.second, duration)

    if args.json:
        print(json.dumps(duration.to_contract(), ensure_ascii=False))
    else:
        print(duration)
    return 0


if __name__ == "__main__":
    sys.exit(main())
