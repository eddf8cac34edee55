from __future__ import annotations

from sales_dashboard.models.dashboard_data import DashboardData
from sales_dashboard.models.sales_record import SalesRecord
from sales_dashboard.services.summary import render_summary_line


def test_render_summary_all_weeks_empty():
    data = DashboardData(source="x.xlsx", week=None, total_rows=0, records=[], chart=[])
    assert render_summary_line(data) == "SUMMARY rows=0 records=0 week=all groups=0 weeks=0"


def test_render_summary_with_week():
    data = DashboardData(
        source="x.xlsx",
        week=3,
        total_rows=5,
        records=[SalesRecord(group_name="A", manager=None, week=3)],
        chart=[{"week": "Week 3", "A": 1.0}, {"week": "Week 4", "B": 2.0}],
        colors={"A": "hsl(0, 70%, 50%)", "B": "hsl(180, 70%, 50%)"},
    )
    assert render_summary_line(data) == "SUMMARY rows=5 records=1 week=3 groups=2 weeks=2"
