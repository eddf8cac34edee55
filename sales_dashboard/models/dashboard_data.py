from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .sales_record import SalesRecord

"""Load pipeline output consumed by the presentation layer."""

__all__ = [
    "DashboardData",
    "WeekPoint",
]

# {"week": "Week N", <group name>: summed revenue, ...}
WeekPoint = dict[str | None, Any]


@dataclass(frozen=True)
class DashboardData:
    """Everything the dashboard view renders for one load.

    ``records`` is filtered by ``week`` (all records when week is None);
    ``chart`` and ``colors`` always cover the whole dataset.
    """
    source: str
    week: int | None
    total_rows: int  # Raw data rows read from the sheet
    records: list[SalesRecord]
    chart: list[WeekPoint]
    colors: dict[str | None, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "week": self.week,
            "records": [r.to_dict() for r in self.records],
            "chart": self.chart,
            "colors": self.colors,
        }
