"""Norwegian public holidays. Pure computation, no external dependencies."""

import operator
from datetime import MAXYEAR, MINYEAR, date, timedelta

# Holidays in enumeration order: (month, day) for fixed dates, int for Easter offsets.
HOLIDAY_RULES: tuple[tuple[int, int] | int, ...] = (
    (1, 1),     # New Year's Day
    -7,         # Palm Sunday
    -3,         # Maundy Thursday
    -2,         # Good Friday
    0,          # Easter Sunday
    1,          # Easter Monday
    (5, 1),     # Labour Day
    39,         # Ascension Day
    (5, 17),    # Constitution Day
    49,         # Whit Sunday
    50,         # Whit Monday
    (12, 25),   # Christmas Day
    (12, 26),   # Second Christmas Day
)


def _check_year(year) -> int:
    if isinstance(year, bool):
        raise TypeError(f"year must be an integer, got {year!r}")
    try:
        year = operator.index(year)
    except TypeError:
        raise TypeError(f"year must be an integer, got {type(year).__name__}") from None
    if not MINYEAR <= year <= MAXYEAR:
        raise ValueError(f"year {year} is outside the supported range {MINYEAR}..{MAXYEAR}")
    return year


def easter_sunday(year: int) -> date:
    """Compute Easter Sunday using the anonymous Gregorian algorithm.

    All divisions are floor divisions; the result is always a Sunday.
    """
    year = _check_year(year)
    c = year // 100
    n = year - 19 * (year // 19)
    k = (c - 17) // 25
    i = c - c // 4 - (c - k) // 3 + 19 * n + 15
    i = i - 30 * (i // 30)
    i = i - (i // 28) * (1 - (i // 28) * (29 // (i + 1)) * ((21 - n) // 11))
    j = year + year // 4 + i + 2 - c + c // 4
    j = j - 7 * (j // 7)
    l = i - j
    month = 3 + (l + 40) // 44
    day = l + 28 - 31 * (month // 4)
    return date(year, month, day)


def gen_holidays_for_year(year: int) -> list[date]:
    """Return all 13 Norwegian public holidays for a given year.

    Dates come in rule order and are neither sorted nor deduplicated, so a year
    where Ascension Day falls on 17 May lists that date twice.
    """
    year = _check_year(year)
    easter = easter_sunday(year)
    holidays = []
    for rule in HOLIDAY_RULES:
        if isinstance(rule, tuple):
            holidays.append(date(year, *rule))
        else:
            holidays.append(easter + timedelta(days=rule))
    return holidays


def is_holiday(d: date) -> bool:
    """Check if a date is a Norwegian public holiday."""
    if not isinstance(d, date):
        raise TypeError(f"expected a date, got {type(d).__name__}")
    day = (d.year, d.month, d.day)
    return any((h.year, h.month, h.day) == day for h in gen_holidays_for_year(d.year))


def is_weekend_day(d: date) -> bool:
    """Check if a date falls on a Saturday or Sunday."""
    if not isinstance(d, date):
        raise TypeError(f"expected a date, got {type(d).__name__}")
    return d.weekday() in (5, 6)
