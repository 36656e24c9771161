"""Pure functions turning a Month into the text block ``cal`` prints.

Every line is 20 columns wide (seven 2-character day fields and six
separating spaces) followed by two trailing spaces, matching the column
layout of the traditional ``cal`` tool byte for byte.
"""

from collections.abc import Iterable

from mcal.domain.layout import layout_weeks
from mcal.domain.models import Month, Weekday, WeekRow

LINE_WIDTH = 20
TRAILING_SPACE = "  "
DAY_OF_WEEK_HEADER = " ".join(day.abbreviation for day in Weekday)


def month_header(month: Month) -> str:
    """Month name and year, e.g. "March 2019"."""
    return f"{month.name} {month.year}"


def format_week(row: WeekRow) -> str:
    """Render a week row as right-aligned 2-character day fields.

    Args:
        row: Days to render.

    Returns:
        Fields joined by single spaces, e.g. " 3  4  5  6  7  8  9".
    """
    return " ".join(f"{day:2}" for day in row)


def _format_rows(rows: list[WeekRow]) -> list[str]:
    # Interior rows always hold 7 days and already fill the line; only the
    # first and last rows can be short.
    last_index = len(rows) - 1
    lines = []
    for i, row in enumerate(rows):
        text = format_week(row)
        if i == 0:
            text = f"{text:>{LINE_WIDTH}}"
        elif i == last_index:
            text = f"{text:<{LINE_WIDTH}}"
        lines.append(text)
    return lines


def render(month: Month) -> str:
    """Render a month as header, weekday header and one line per week.

    Args:
        month: Month to render.

    Returns:
        Text block where every line ends with two spaces and a newline.
    """
    lines = [
        f"{month_header(month):^{LINE_WIDTH}}",
        DAY_OF_WEEK_HEADER,
        *_format_rows(layout_weeks(month)),
    ]
    return "".join(f"{line}{TRAILING_SPACE}\n" for line in lines)


def render_months(months: Iterable[Month]) -> str:
    """Render consecutive months one below the other.

    Each block keeps its own final newline and blocks are separated by a
    single extra newline.
    """
    return "\n".join(render(month) for month in months)
