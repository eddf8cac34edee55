from __future__ import annotations

import math

from ..models.sales_record import SalesRecord

"""Derived display ratios.

Both ratios divide by a field that can legitimately be 0. In that case the
ratio is None and the formatters render a dash instead of ``inf%`` / ``nan%``.
"""

__all__ = [
    "MISSING",
    "drr_pct",
    "format_number",
    "format_pct",
    "format_revenue",
    "record_row",
    "revenue_growth_pct",
    "round_half_up",
]

MISSING = "—"


def round_half_up(value: float) -> int:
    """Nearest integer, .5 always rounded up (towards +inf), unlike round()."""
    return math.floor(value + 0.5)


def revenue_growth_pct(record: SalesRecord) -> float | None:
    """(revenue - prevRevenue) / prevRevenue * 100, None when prevRevenue is 0."""
    if record.prev_revenue == 0:
        return None
    return (record.revenue - record.prev_revenue) / record.prev_revenue * 100


def drr_pct(record: SalesRecord) -> float | None:
    """drr / revenue * 100, None when revenue is 0."""
    if record.revenue == 0:
        return None
    return record.drr / record.revenue * 100


def format_number(value: float | None) -> str:
    if value is None or not math.isfinite(value):
        return MISSING
    return f"{value:.1f}"


def format_pct(value: float | None, signed: bool = False) -> str:
    """One decimal + ``%``; dash for None / non-finite values."""
    if value is None or not math.isfinite(value):
        return MISSING
    sign = "+" if signed and value >= 0 else ""
    return f"{sign}{value:.1f}%"


def format_revenue(value: float) -> str:
    """Rounded revenue with space-grouped thousands, e.g. ``1 250 000 ₽``."""
    return f"{round_half_up(value):,} ₽".replace(",", " ")


def record_row(record: SalesRecord) -> dict[str, str]:
    """Display columns of the detail table, in table order."""
    return {
        "rank": record.rank.label,
        "group": record.group_name or MISSING,
        "manager": record.manager or MISSING,
        "revenue": format_revenue(record.revenue),
        "growth": format_pct(revenue_growth_pct(record)),
        "drr": format_pct(drr_pct(record)),
        "clean_margin": format_pct(record.clean_margin),
        "margin_growth": format_pct(record.margin_growth, signed=True),
        "turnover": format_number(record.turnover),
        "turnover_change": format_pct(record.turnover_change),
        "cr": format_pct(record.cr),
        "ctr": format_pct(record.ctr),
    }
