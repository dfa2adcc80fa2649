"""CLI entry point: list Norwegian public holidays or check specific dates."""

import argparse
from datetime import date
from pathlib import Path

from .config import load_config
from .holidays import gen_holidays_for_year, is_holiday, is_weekend_day


def format_day(d: date, output: dict) -> str:
    text = d.strftime(output["date_format"])
    if output["show_weekday"]:
        text += f"  {d:%A}"
    return text


def describe_day(d: date) -> str:
    """Return 'holiday', 'weekend', 'holiday, weekend' or 'regular day'."""
    kinds = []
    if is_holiday(d):
        kinds.append("holiday")
    if is_weekend_day(d):
        kinds.append("weekend")
    return ", ".join(kinds) or "regular day"


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="List Norwegian public holidays")
    parser.add_argument(
        "--year", type=int, default=None,
        help="Year to list holidays for (default: current year)",
    )
    parser.add_argument(
        "--check", type=date.fromisoformat, nargs="+", default=None, metavar="DATE",
        help="Dates to check (YYYY-MM-DD) instead of listing a year",
    )
    parser.add_argument(
        "--config", type=Path, default=None,
        help="Path to config.yaml (default: bundled config)",
    )
    args = parser.parse_args(argv)

    cfg = load_config(args.config)
    output = cfg["output"]

    if args.check:
        for d in args.check:
            print(f"{format_day(d, output)}: {describe_day(d)}")
        return

    year = args.year if args.year is not None else date.today().year
    try:
        holidays = gen_holidays_for_year(year)
    except ValueError as e:
        parser.error(str(e))

    print(f"Public holidays in Norway, {year}:")
    for d in holidays:
        print(f"  {format_day(d, output)}")


if __name__ == "__main__":
    main()
