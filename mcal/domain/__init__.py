"""Domain models and pure functions for mcal.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Calendar logic separated from the command line
"""

from mcal.domain.errors import CalendarError, InvalidMonth, InvalidYear, MonthBoundaryError
from mcal.domain.layout import day_count, first_weekday, is_leap_year, layout_weeks, validate
from mcal.domain.models import Month, Weekday, WeekRow
from mcal.domain.render import format_week, month_header, render, render_months
from mcal.domain.sequence import MonthSequence, advance, backward, months_around, skip_back

__all__ = [
    # Models
    "Month",
    "Weekday",
    "WeekRow",
    # Errors
    "CalendarError",
    "InvalidMonth",
    "InvalidYear",
    "MonthBoundaryError",
    # Layout
    "day_count",
    "first_weekday",
    "is_leap_year",
    "layout_weeks",
    "validate",
    # Rendering
    "format_week",
    "month_header",
    "render",
    "render_months",
    # Sequence
    "MonthSequence",
    "advance",
    "backward",
    "months_around",
    "skip_back",
]
