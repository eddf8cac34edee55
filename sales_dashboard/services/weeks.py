from __future__ import annotations

from datetime import date, timedelta

"""Week calendar helpers for the week selector and chart labels.

Week numbering follows the dashboard's own convention, not ISO 8601:
- current week = whole 7-day spans elapsed since January 1, plus one
- week 1 starts on the first Monday of the year
"""

__all__ = [
    "WEEKS_PER_YEAR",
    "current_week",
    "week_dates",
    "week_label",
    "week_options",
]

WEEKS_PER_YEAR = 52
DATE_FMT = "%d.%m.%Y"


def current_week(today: date | None = None) -> int:
    today = today or date.today()
    elapsed = today - date(today.year, 1, 1)
    return elapsed.days // 7 + 1


def week_dates(week: int, year: int | None = None) -> tuple[date, date]:
    """(Monday, Sunday) of ``week`` in ``year`` (default: current year)."""
    year = year or date.today().year
    first_day = date(year, 1, 1)
    first_monday = first_day + timedelta(days=(7 - first_day.weekday()) % 7)
    start = first_monday + timedelta(weeks=week - 1)
    return start, start + timedelta(days=6)


def week_label(week: int) -> str:
    """Chart axis label for a week number."""
    return f"Week {week}"


def week_options(year: int | None = None, count: int = WEEKS_PER_YEAR) -> list[tuple[int, str]]:
    """Selector entries ``(week, "Неделя N (start - end)")`` for weeks 1..count."""
    options = []
    for week in range(1, count + 1):
        start, end = week_dates(week, year)
        options.append((week, f"Неделя {week} ({start.strftime(DATE_FMT)} - {end.strftime(DATE_FMT)})"))
    return options
