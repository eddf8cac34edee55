from __future__ import annotations

import pytest

from sales_dashboard.models.sales_record import Rank, SalesRecord
from sales_dashboard.services.ratios import (
    MISSING,
    drr_pct,
    format_number,
    format_pct,
    format_revenue,
    record_row,
    revenue_growth_pct,
    round_half_up,
)


def test_revenue_growth_pct():
    rec = SalesRecord(group_name="Север", manager="Иванов", revenue=1000, prev_revenue=800)
    assert revenue_growth_pct(rec) == pytest.approx(25.0)
    assert format_pct(revenue_growth_pct(rec)) == "25.0%"


def test_revenue_growth_guarded_when_previous_revenue_zero():
    rec = SalesRecord(group_name="A", manager=None, revenue=1000, prev_revenue=0)
    assert revenue_growth_pct(rec) is None
    assert format_pct(revenue_growth_pct(rec)) == MISSING


def test_drr_pct_and_zero_revenue_guard():
    assert drr_pct(SalesRecord(group_name="A", manager=None, revenue=200, drr=30)) == pytest.approx(15.0)
    assert drr_pct(SalesRecord(group_name="A", manager=None, revenue=0, drr=30)) is None


@pytest.mark.parametrize(
    "value, signed, expected",
    [
        (4.56, True, "+4.6%"),
        (0.0, True, "+0.0%"),
        (-1.25, True, "-1.2%"),
        (12.345, False, "12.3%"),
        (None, False, MISSING),
        (float("inf"), False, MISSING),
        (float("nan"), True, MISSING),
    ],
)
def test_format_pct(value, signed, expected):
    assert format_pct(value, signed=signed) == expected


def test_format_number_and_revenue():
    assert format_number(41.26) == "41.3"
    assert format_number(None) == MISSING
    assert format_revenue(1250000.4) == "1 250 000 ₽"
    assert format_revenue(999.5) == "1 000 ₽"


def test_record_row_renders_missing_values_with_dash():
    rec = SalesRecord(group_name=None, manager=None, rank=Rank.SILVER)
    row = record_row(rec)
    assert list(row) == [
        "rank", "group", "manager", "revenue", "growth", "drr", "clean_margin",
        "margin_growth", "turnover", "turnover_change", "cr", "ctr",
    ]
    assert row["rank"] == "Серебряный"
    assert row["group"] == MISSING
    assert row["growth"] == MISSING
    assert row["drr"] == MISSING
    assert row["margin_growth"] == "+0.0%"


@pytest.mark.parametrize("value, expected", [(2.5, 3), (3.5, 4), (2.4999, 2), (-2.5, -2), (0.0, 0)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_format_revenue_rounds_half_up():
    assert format_revenue(2.5) == "3 ₽"
    assert format_revenue(1000.5) == "1 001 ₽"
