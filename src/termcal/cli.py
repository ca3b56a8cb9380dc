from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from datetime import date
from typing import Optional, Tuple

from termcal.core.errors import UsageError
from termcal.core.types import CalOptions
from termcal.layout import print_calendar

logger = logging.getLogger(__name__)


def _parse_year_month(s: str) -> Tuple[int, int]:
    """Split 'yyyy-mm' on the first '-'."""
    head, sep, tail = s.partition("-")
    if not sep:
        raise UsageError("Invalid -d format, expected yyyy-mm")
    try:
        return int(head), int(tail)
    except ValueError:
        raise UsageError("Invalid -d format, expected yyyy-mm") from None


class _InOrder(argparse.Action):
    """Record (flag, value) pairs in command-line order so a later -d or -m wins."""

    def __call__(self, parser, namespace, values, option_string=None):
        seen = list(getattr(namespace, self.dest) or [])
        seen.append((option_string, values))
        setattr(namespace, self.dest, seen)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="termcal", description="Display a calendar.")
    p.add_argument("-A", dest="after", type=int, default=0, metavar="N", help="months to show after the anchor month")
    p.add_argument("-B", dest="before", type=int, default=0, metavar="N", help="months to show before the anchor month")
    p.add_argument("-d", dest="anchor", action=_InOrder, default=[], metavar="yyyy-mm", help="year and month to display")
    p.add_argument("-r", dest="row_num", type=int, default=3, metavar="N", help="months per row (default: 3)")
    p.add_argument("-m", dest="anchor", action=_InOrder, type=int, default=[], metavar="MONTH", help="month number 1-12")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    p.add_argument("year", nargs="?", type=int, help="show the whole year")
    return p


def options_from_args(args: argparse.Namespace, *, today: Optional[date] = None) -> CalOptions:
    """
    Resolve parsed flags into CalOptions.

    A positional year selects the whole year. With no usable year the current
    year is taken, and the current month too unless one was given.
    """
    year, month = 0, 0
    for flag, value in args.anchor:
        if flag == "-d":
            year, month = _parse_year_month(value)
        else:
            month = value
    if args.year is not None:
        year, month = args.year, 0

    if year <= 0:
        today = today or date.today()
        year = today.year
        if month == 0:
            month = today.month

    if not 0 <= month <= 12:
        raise UsageError("Month must be in [1, 12]")

    opts = CalOptions(
        year=year,
        month=month,
        before=max(0, args.before),
        after=max(0, args.after),
        row_num=max(1, args.row_num),
    )
    if opts.whole_year:
        # whole year has no anchor month to widen
        opts = replace(opts, before=0, after=0)
    return opts


def parse_options(argv: list[str], *, today: Optional[date] = None) -> CalOptions:
    return options_from_args(build_parser().parse_args(argv), today=today)


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    try:
        opts = options_from_args(args)
    except UsageError as e:
        print(f"termcal: {e}", file=sys.stderr)
        return 1

    logger.debug("options: %s", opts)
    print_calendar(opts)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
