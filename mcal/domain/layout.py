"""Pure functions for laying out a month as calendar weeks.

This module contains the functional core for month layout:
- No I/O operations
- No side effects
- Deterministic for a given Month

Weeks run Sunday to Saturday. Padding of short rows is left to the
renderer; the layout only decides which days share a row.
"""

from datetime import date

from mcal.domain.errors import CalendarError, InvalidMonth, InvalidYear
from mcal.domain.models import DAYS_PER_WEEK, MAX_YEAR, MIN_YEAR, MONTHS_PER_YEAR, Month, Weekday, WeekRow

# Days per month in a common year, indexed by zero-based month ordinal
_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def validate(year: int, month_number: int) -> tuple[Month | None, CalendarError | None]:
    """Build a Month from untrusted input.

    Args:
        year: Calendar year, expected in 1..9999.
        month_number: Month number, expected in 1..12.

    Returns:
        Tuple of (month, error). Exactly one of them is None.
    """
    if not MIN_YEAR <= year <= MAX_YEAR:
        return None, InvalidYear(year)
    if not 1 <= month_number <= MONTHS_PER_YEAR:
        return None, InvalidMonth(month_number)
    return Month(year, month_number), None


def is_leap_year(year: int) -> bool:
    """Gregorian leap year: divisible by 4, except centuries not divisible by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def day_count(month: Month) -> int:
    """Number of days in the month (28, 29, 30 or 31)."""
    if month.month_number == 2 and is_leap_year(month.year):
        return 29
    return _DAYS_IN_MONTH[month.month_number - 1]


def first_weekday(month: Month) -> Weekday:
    """Day of the week on which the 1st of the month falls.

    ``date`` uses the proleptic Gregorian calendar over the same 1..9999
    range as Month, so it agrees with ``is_leap_year``.
    """
    # date.weekday() counts from Monday == 0
    return Weekday((date(month.year, month.month_number, 1).weekday() + 1) % DAYS_PER_WEEK)


def layout_weeks(month: Month) -> list[WeekRow]:
    """Partition the days of a month into Sunday-first display rows.

    The first row ends on the first Saturday, every following row holds
    seven days, and the last row holds whatever remains.

    Args:
        month: Month to lay out.

    Returns:
        Rows in chronological order (between 4 and 6 of them).
    """
    last_day = day_count(month)
    first_row_end = DAYS_PER_WEEK - first_weekday(month).days_from_sunday()

    rows = [WeekRow(1, first_row_end)]
    start = first_row_end + 1
    while start <= last_day:
        rows.append(WeekRow(start, min(start + DAYS_PER_WEEK - 1, last_day)))
        start += DAYS_PER_WEEK

    return rows
