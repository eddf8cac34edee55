from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from ..models.sales_record import Rank, SalesRecord

"""Row normalizer: loosely-typed spreadsheet row -> SalesRecord.

Column lookup goes through a static alias table (canonical field -> accepted
source column names, English first). Parsing never raises: numbers fall back to
0.0, week falls back to None, names fall back to None.
"""

logger = logging.getLogger(__name__)

__all__ = [
    "FIELD_ALIASES",
    "build_alias_table",
    "compute_rank",
    "normalize",
    "normalize_rows",
    "parse_number",
    "parse_week",
]

DIAMOND_THRESHOLD = 4
GOLD_THRESHOLD = 3
SILVER_THRESHOLD = 2

FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "group_name": ("Group", "Группа"),
    "manager": ("Manager", "Менеджер"),
    "revenue": ("Revenue", "Оборот"),
    "prev_revenue": ("PrevRevenue", "ПредыдущийОборот"),
    "clean_margin": ("CleanMargin", "ОчищеннаяМаржа"),
    "margin_growth": ("MarginGrowth", "ПриростМаржи"),
    "drr": ("DRR", "ДРР"),
    "turnover": ("Turnover", "Оборачиваемость"),
    "turnover_change": ("TurnoverChange", "ИзменениеОборачиваемости"),
    "cr": ("CR",),
    "ctr": ("CTR",),
    "week": ("Week",),
    "rank": ("Rank", "Ранг"),
    "color": ("Color",),
}

NUMERIC_FIELDS = (
    "revenue",
    "prev_revenue",
    "clean_margin",
    "margin_growth",
    "drr",
    "turnover",
    "turnover_change",
    "cr",
    "ctr",
)

AliasTable = Mapping[str, Sequence[str]]


def build_alias_table(extra: Mapping[str, Iterable[str]] | None = None) -> dict[str, tuple[str, ...]]:
    """Return FIELD_ALIASES with ``extra`` column names appended per field.

    Raises:
        KeyError: if ``extra`` names a field that does not exist
    """
    table = dict(FIELD_ALIASES)
    for field_name, names in (extra or {}).items():
        if field_name not in table:
            raise KeyError(f"unknown field for alias: {field_name}")
        known = table[field_name]
        table[field_name] = known + tuple(n for n in names if n not in known)
    return table


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def _lookup(row: Mapping[str, Any], aliases: Sequence[str]) -> Any:
    for key in aliases:
        value = row.get(key)
        if _is_present(value):
            return value
    return None


def parse_number(value: Any) -> float:
    """Parse a cell as float; absent / unparseable / non-finite -> 0.0."""
    number = _to_float(value)
    return 0.0 if number is None else number


def parse_week(value: Any) -> int | None:
    """Parse a week number; absent or non-numeric -> None (0 stays 0)."""
    number = _to_float(value)
    return None if number is None else int(number)


def _to_float(value: Any) -> float | None:
    if not _is_present(value):
        return None
    if isinstance(value, str):
        # "1 234,5" / "12%" のような表記も受け付ける
        value = value.strip().replace(" ", "").replace("\u00a0", "").removesuffix("%").replace(",", ".")
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _parse_text(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def compute_rank(margin_growth: float) -> Rank:
    """Tier from margin growth; first matching threshold wins."""
    if margin_growth > DIAMOND_THRESHOLD:
        return Rank.DIAMOND
    if margin_growth > GOLD_THRESHOLD:
        return Rank.GOLD
    if margin_growth > SILVER_THRESHOLD:
        return Rank.SILVER
    return Rank.NONE


def normalize(row: Mapping[str, Any], aliases: AliasTable | None = None) -> SalesRecord:
    """Map one RawRow to a SalesRecord. Pure; never raises on bad cells."""
    table = FIELD_ALIASES if aliases is None else aliases
    numbers = {name: parse_number(_lookup(row, table[name])) for name in NUMERIC_FIELDS}

    explicit_rank = _lookup(row, table["rank"])
    rank = Rank.parse(explicit_rank)
    if rank is None:
        if explicit_rank is not None:
            logger.debug(f"ignoring unknown rank value {explicit_rank!r}; computing from margin growth")
        rank = compute_rank(numbers["margin_growth"])

    color = _lookup(row, table["color"])
    return SalesRecord(
        group_name=_parse_text(_lookup(row, table["group_name"])),
        manager=_parse_text(_lookup(row, table["manager"])),
        week=parse_week(_lookup(row, table["week"])),
        rank=rank,
        color=str(color) if color is not None else "",
        **numbers,
    )


def normalize_rows(rows: Iterable[Mapping[str, Any]], aliases: AliasTable | None = None) -> list[SalesRecord]:
    """Normalize a row sequence, preserving order."""
    return [normalize(row, aliases) for row in rows]
