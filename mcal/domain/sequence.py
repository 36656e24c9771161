"""Stepping through consecutive months.

``advance`` and ``backward`` move one month at a time and raise
MonthBoundaryError rather than leave the 1..9999 year range.
MonthSequence is a lazy, restartable run of months from a start month
forward; each iteration owns its own MonthIterator.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import islice

from mcal.domain.errors import MonthBoundaryError
from mcal.domain.models import MAX_YEAR, MIN_YEAR, MONTHS_PER_YEAR, Month

FIRST_MONTH = Month(MIN_YEAR, 1)
LAST_MONTH = Month(MAX_YEAR, MONTHS_PER_YEAR)


def advance(month: Month) -> Month:
    """Return the month after ``month``.

    Raises:
        MonthBoundaryError: If ``month`` is December 9999.
    """
    if month == LAST_MONTH:
        raise MonthBoundaryError(f"no month after {month}")
    if month.month_number == MONTHS_PER_YEAR:
        return Month(month.year + 1, 1)
    return Month(month.year, month.month_number + 1)


def backward(month: Month) -> Month:
    """Return the month before ``month``.

    Raises:
        MonthBoundaryError: If ``month`` is January of year 1.
    """
    if month == FIRST_MONTH:
        raise MonthBoundaryError(f"no month before {month}")
    if month.month_number == 1:
        return Month(month.year - 1, MONTHS_PER_YEAR)
    return Month(month.year, month.month_number - 1)


def skip_back(month: Month, count: int) -> Month:
    """Step ``count`` months backward, as calling ``backward`` that many times.

    Args:
        month: Starting month.
        count: Number of months to go back (non-negative).

    Returns:
        The month ``count`` months before ``month``.

    Raises:
        ValueError: If ``count`` is negative.
        MonthBoundaryError: If the result would be before January of year 1.
    """
    if count < 0:
        raise ValueError(f"cannot skip back a negative number of months: {count}")
    for _ in range(count):
        month = backward(month)
    return month


@dataclass(frozen=True)
class Active:
    """Iterator state: ``month`` is the next one to produce."""

    month: Month


@dataclass(frozen=True)
class Exhausted:
    """Iterator state: the last representable month has been produced."""


IteratorState = Active | Exhausted


class MonthIterator:
    """Single-owner iterator over consecutive months."""

    def __init__(self, start: Month) -> None:
        self.state: IteratorState = Active(start)

    def __iter__(self) -> "MonthIterator":
        return self

    def __next__(self) -> Month:
        if isinstance(self.state, Exhausted):
            raise StopIteration

        month = self.state.month
        self.state = Exhausted() if month == LAST_MONTH else Active(advance(month))
        return month


class MonthSequence:
    """Consecutive months starting ``months_before`` months ahead of ``start``.

    Iterating twice starts over from the beginning. The run is unbounded
    up to December 9999; bound it with ``take`` or ``itertools.islice``.
    """

    def __init__(self, start: Month, months_before: int = 0) -> None:
        self.anchor = start
        self.start = skip_back(start, months_before)

    def __iter__(self) -> MonthIterator:
        return MonthIterator(self.start)

    def take(self, count: int) -> list[Month]:
        """First ``count`` months of the sequence (fewer if it runs out)."""
        return list(islice(self, count))


def months_around(anchor: Month, months_before: int = 0, months_after: int = 0) -> list[Month]:
    """List the months from ``months_before`` before to ``months_after`` after ``anchor``.

    Args:
        anchor: Month in the middle of the range.
        months_before: Months to include before the anchor.
        months_after: Months to include after the anchor.

    Returns:
        ``months_before + 1 + months_after`` months in chronological order.

    Raises:
        ValueError: If either count is negative.
        MonthBoundaryError: If the range would leave years 1..9999.
    """
    if months_after < 0:
        raise ValueError(f"cannot show a negative number of months after: {months_after}")

    sequence = MonthSequence(anchor, months_before)
    count = months_before + 1 + months_after
    months = sequence.take(count)
    if len(months) < count:
        raise MonthBoundaryError(f"no month {months_after} months after {anchor}")
    return months
