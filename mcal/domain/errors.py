"""Error values for month validation.

Validation failures are returned, not raised: ``validate`` hands back one
of these alongside ``None`` so callers handle both paths explicitly.
"""

from dataclasses import dataclass

from mcal.domain.models import MAX_YEAR, MIN_YEAR, MONTHS_PER_YEAR


@dataclass(frozen=True)
class InvalidYear:
    """Year outside the supported range."""

    value: int

    def __str__(self) -> str:
        return f"year `{self.value}' is not in range {MIN_YEAR}..{MAX_YEAR}"


@dataclass(frozen=True)
class InvalidMonth:
    """Month number outside 1..12."""

    value: int

    def __str__(self) -> str:
        return f"{self.value} is not a month number (1..{MONTHS_PER_YEAR})"


CalendarError = InvalidYear | InvalidMonth


class MonthBoundaryError(ValueError):
    """Raised when stepping a month past year 9999 or before year 1."""
