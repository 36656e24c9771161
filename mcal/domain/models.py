"""Domain type definitions for mcal.

- Month: a validated (year, month number) pair
- WeekRow: an inclusive range of days shown on one calendar line
- Weekday: day of week, Sunday first
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum

MIN_YEAR = 1
MAX_YEAR = 9999

MONTHS_PER_YEAR = 12
DAYS_PER_WEEK = 7

# Indexed by zero-based month ordinal
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class Weekday(IntEnum):
    """Day of the week, numbered from Sunday."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    def days_from_sunday(self) -> int:
        return int(self)

    @property
    def abbreviation(self) -> str:
        """Two-letter name used in the weekday header, e.g. "Su"."""
        return self.name[:2].title()


@dataclass(frozen=True, order=True)
class Month:
    """Immutable calendar month associated with a specific year.

    Field order makes comparisons chronological: year first, then month.
    Use ``mcal.domain.layout.validate`` for untrusted input; constructing
    an out-of-range Month directly raises ValueError.
    """

    year: int
    month_number: int

    def __post_init__(self) -> None:
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise ValueError(f"year {self.year} is not in range {MIN_YEAR}..{MAX_YEAR}")
        if not 1 <= self.month_number <= MONTHS_PER_YEAR:
            raise ValueError(f"{self.month_number} is not a month number (1..{MONTHS_PER_YEAR})")

    @property
    def name(self) -> str:
        """Full English month name, e.g. "September"."""
        return MONTH_NAMES[self.month_number - 1]

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month_number:02d}"


@dataclass(frozen=True)
class WeekRow:
    """Days ``first`` through ``last`` (inclusive) on one display row."""

    first: int
    last: int

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.first, self.last + 1))

    def __len__(self) -> int:
        return self.last - self.first + 1
