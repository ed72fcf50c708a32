"""TimeAxis — display columns for the month, year and range timeline views."""

from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import date, timedelta

from auditline.domain.entities.timeline import Column
from auditline.domain.value_objects.enums import ViewMode

logger = logging.getLogger(__name__)

DEFAULT_COLUMN_WIDTH = 40
DEFAULT_MINIMUM_WIDTH = 1000
DEFAULT_RANGE_CAP = 1000

# id-ID short month names, as shown in the dashboard header
MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "Mei", "Jun", "Jul", "Agu", "Sep", "Okt", "Nov", "Des")

# Year view: four fixed buckets per month, the last absorbs the remainder
WEEK_BUCKETS = (("M1", 1, 7), ("M2", 8, 14), ("M3", 15, 21), ("M4", 22, None))


@dataclass(frozen=True)
class AxisRequest:
    """View parameters coming from the UI."""

    mode: ViewMode
    year: int | None = None
    month: int | None = None
    range_start: str | None = None
    range_end: str | None = None


def month_days(year: int, month: int) -> list[date]:
    days = calendar.monthrange(year, month)[1]
    return [date(year, month, d) for d in range(1, days + 1)]


def parse_day(value: str | None) -> date | None:
    """Parse a 'YYYY-MM-DD' bound; None when missing or malformed."""
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip()[:10])
    except (ValueError, TypeError):
        return None


def range_days(start: date, end: date, cap: int = DEFAULT_RANGE_CAP) -> list[date]:
    """Every day from *start* to *end* inclusive, at most *cap* of them."""
    days = []
    current = start
    while current <= end:
        if len(days) >= cap:
            logger.warning("Range %s..%s truncated to %d columns", start, end, cap)
            break
        days.append(current)
        if current == end:
            break
        current += timedelta(days=1)
    return days


def daily_columns(days: list[date], width: int = DEFAULT_COLUMN_WIDTH) -> list[Column]:
    columns = []
    for i, day in enumerate(days):
        first = day.day == 1 or i == 0
        columns.append(
            Column(
                id=day.isoformat(),
                label=str(day.day),
                sub_label=MONTH_ABBR[day.month - 1] if first else None,
                start=day,
                end=day,
                width=width,
                is_weekend=day.weekday() >= 5,
                is_first_of_period=first,
            )
        )
    return columns


def year_columns(year: int, width: int = DEFAULT_COLUMN_WIDTH) -> list[Column]:
    """48 columns: M1..M4 for each month of *year*."""
    columns = []
    for month in range(1, 13):
        last_day = calendar.monthrange(year, month)[1]
        for label, first, last in WEEK_BUCKETS:
            columns.append(
                Column(
                    id=f"{year}-{month:02d}-{label}",
                    label=label,
                    sub_label=MONTH_ABBR[month - 1],
                    start=date(year, month, first),
                    end=date(year, month, last or last_day),
                    width=width,
                    is_first_of_period=first == 1,
                )
            )
    return columns


def build_columns(
    request: AxisRequest,
    today: date,
    column_width: int = DEFAULT_COLUMN_WIDTH,
    range_cap: int = DEFAULT_RANGE_CAP,
) -> list[Column]:
    """Ordered, contiguous columns for the requested view.

    Never raises: a bad year or month falls back to the current one, and a range
    with missing, malformed or inverted bounds falls back to the current
    month's days.
    """
    year = request.year or today.year
    if not date.min.year <= year <= date.max.year:
        logger.warning("Invalid year %r, falling back to current year", year)
        year = today.year

    if request.mode == ViewMode.YEAR:
        return year_columns(year, column_width)

    if request.mode == ViewMode.RANGE:
        start = parse_day(request.range_start)
        end = parse_day(request.range_end)
        if start is None or end is None or start > end:
            logger.info(
                "Invalid range %r..%r, falling back to current month",
                request.range_start, request.range_end,
            )
            return daily_columns(month_days(today.year, today.month), column_width)
        return daily_columns(range_days(start, end, range_cap), column_width)

    month = request.month or today.month
    if not 1 <= month <= 12:
        logger.warning("Invalid month %r, falling back to current month", month)
        year, month = today.year, today.month
    return daily_columns(month_days(year, month), column_width)


def timeline_width(
    columns: list[Column],
    column_width: int = DEFAULT_COLUMN_WIDTH,
    minimum_width: int = DEFAULT_MINIMUM_WIDTH,
) -> int:
    return max(minimum_width, len(columns) * column_width)
