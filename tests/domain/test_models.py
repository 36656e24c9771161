"""Tests for mcal.domain.models."""

import pytest

from mcal.domain.models import MONTH_NAMES, Month, Weekday, WeekRow


class TestMonth:
    """Tests for Month."""

    def test_equality(self) -> None:
        """Should compare equal on year and month number."""
        assert Month(2019, 3) == Month(2019, 3)
        assert Month(2019, 3) != Month(2018, 3)

    def test_chronological_ordering(self) -> None:
        """Should order by year first, then month."""
        assert Month(2018, 12) < Month(2019, 1) < Month(2019, 2)
        assert sorted([Month(2019, 2), Month(2018, 11), Month(2019, 1)]) == [
            Month(2018, 11),
            Month(2019, 1),
            Month(2019, 2),
        ]

    def test_hashable(self) -> None:
        """Should be usable as a set member."""
        assert len({Month(2019, 3), Month(2019, 3), Month(2019, 4)}) == 2

    def test_immutable(self) -> None:
        """Should not allow changing fields."""
        month = Month(2019, 3)
        with pytest.raises(AttributeError):
            month.year = 2020  # type: ignore[misc]

    @pytest.mark.parametrize(("year", "month_number"), [(0, 1), (10000, 1), (2019, 0), (2019, 13)])
    def test_direct_construction_rejects_invalid(self, year: int, month_number: int) -> None:
        """Should refuse to build an out-of-range Month."""
        with pytest.raises(ValueError):
            Month(year, month_number)

    def test_name(self) -> None:
        """Should give the full English name."""
        assert Month(2019, 9).name == "September"
        assert [Month(2019, m).name for m in range(1, 13)] == list(MONTH_NAMES)

    def test_str(self) -> None:
        """Should format as YYYY-MM."""
        assert str(Month(7, 3)) == "0007-03"


class TestWeekday:
    """Tests for Weekday."""

    def test_abbreviations(self) -> None:
        """Should give two-letter names from Sunday to Saturday."""
        assert [day.abbreviation for day in Weekday] == ["Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"]


class TestWeekRow:
    """Tests for WeekRow."""

    def test_iterates_inclusive_range(self) -> None:
        """Should include both ends."""
        assert list(WeekRow(3, 9)) == [3, 4, 5, 6, 7, 8, 9]

    def test_len(self) -> None:
        """Should count the days in the row."""
        assert len(WeekRow(31, 31)) == 1
        assert len(WeekRow(1, 7)) == 7
