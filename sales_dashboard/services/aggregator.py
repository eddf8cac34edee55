from __future__ import annotations

import logging
from collections.abc import Iterable

from ..models.dashboard_data import WeekPoint
from ..models.sales_record import SalesRecord
from .weeks import week_label

"""Weekly revenue aggregation for the dashboard line chart.

Records without a week are skipped. Revenue is summed per (week, group) and
the result is one point per week, ascending by week number:

    [{"week": "Week 1", "North": 1500.0, "South": 700.0}, ...]
"""

logger = logging.getLogger(__name__)

LABEL_KEY = "week"

__all__ = [
    "aggregate",
    "group_week_series",
]


def group_week_series(records: Iterable[SalesRecord]) -> dict[int, dict[str | None, float]]:
    """week -> group name -> summed revenue (records with week None excluded)."""
    series: dict[int, dict[str | None, float]] = {}
    for record in records:
        if record.week is None:
            continue
        groups = series.setdefault(record.week, {})
        if record.group_name in groups:
            groups[record.group_name] += record.revenue
        else:
            groups[record.group_name] = record.revenue
    return series


def aggregate(records: Iterable[SalesRecord]) -> list[WeekPoint]:
    """Week-ordered chart points with the summed revenue of every group."""
    series = group_week_series(records)
    points: list[WeekPoint] = []
    for week in sorted(series):
        point: WeekPoint = {LABEL_KEY: week_label(week)}
        for name, revenue in series[week].items():
            if name == LABEL_KEY:
                # group name would overwrite the axis label
                logger.debug(f"dropping group {name!r} from chart point {week}: name clashes with the label key")
                continue
            point[name] = revenue
        points.append(point)
    return points
