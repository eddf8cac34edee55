from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from ..models.sales_record import SalesRecord
from .ratios import round_half_up

"""Per-group chart colors: hues spaced evenly around the wheel in first-seen order."""

__all__ = [
    "SATURATION",
    "LIGHTNESS",
    "apply_colors",
    "assign_colors",
    "distinct_groups",
]

SATURATION = 70
LIGHTNESS = 50


def distinct_groups(records: Iterable[SalesRecord]) -> list[str | None]:
    """Group names in order of first appearance, deduplicated."""
    seen: dict[str | None, None] = {}
    for record in records:
        seen.setdefault(record.group_name, None)
    return list(seen)


def assign_colors(records: Iterable[SalesRecord]) -> dict[str | None, str]:
    """group name -> ``hsl(H, 70%, 50%)``; empty mapping for no records."""
    groups = distinct_groups(records)
    count = len(groups)
    return {
        name: f"hsl({round_half_up(360 * index / count)}, {SATURATION}%, {LIGHTNESS}%)"
        for index, name in enumerate(groups)
    }


def apply_colors(records: Iterable[SalesRecord], colors: dict[str | None, str]) -> list[SalesRecord]:
    """Copies of ``records`` carrying their group's color (row color kept when unmapped)."""
    return [
        replace(record, color=colors[record.group_name]) if record.group_name in colors else record
        for record in records
    ]
