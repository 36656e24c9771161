"""Date utilities for mcal.

The only place that reads the system clock.
"""

from datetime import date, datetime

from mcal.domain.models import Month


def today() -> date:
    """Current local date."""
    return datetime.now().date()


def current_month(on: date | None = None) -> Month:
    """Month containing ``on``.

    Args:
        on: Date to use. If None, uses today's date.

    Returns:
        Month for the given date.
    """
    if on is None:
        on = today()
    return Month(on.year, on.month)
