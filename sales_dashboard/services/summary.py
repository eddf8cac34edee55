from __future__ import annotations

from ..models.dashboard_data import DashboardData

"""SUMMARY line rendering for a dashboard load."""


def render_summary_line(data: DashboardData) -> str:
    """Render the SUMMARY line for one load.

    Format:
    SUMMARY rows={raw rows} records={shown records} week={week|all}
    groups={distinct groups} weeks={chart points}

    Examples:
        >>> data = DashboardData(source="x.xlsx", week=None, total_rows=0, records=[], chart=[])
        >>> render_summary_line(data)
        'SUMMARY rows=0 records=0 week=all groups=0 weeks=0'
    """
    week = "all" if data.week is None else str(data.week)
    return (
        f"SUMMARY rows={data.total_rows} "
        f"records={len(data.records)} "
        f"week={week} "
        f"groups={len(data.colors)} "
        f"weeks={len(data.chart)}"
    )
