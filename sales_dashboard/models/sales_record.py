from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

"""SalesRecord model and Rank tier enum.

SalesRecord is the canonical, immutable representation of one spreadsheet row
after normalization. Numeric fields are always real numbers (0.0 when the
source cell was absent or unparseable); ``week`` keeps ``None`` distinct from 0.
"""

__all__ = [
    "Rank",
    "SalesRecord",
    "award_legend",
]


class Rank(str, Enum):
    """Badge tier awarded from margin growth.

    - DIAMOND: margin growth above 4
    - GOLD: above 3 up to 4
    - SILVER: above 2 up to 3
    - NONE: everything else
    """
    DIAMOND = "diamond"
    GOLD = "gold"
    SILVER = "silver"
    NONE = "none"

    @property
    def label(self) -> str:
        return _RANK_LABELS[self]

    @property
    def award(self) -> str | None:
        return _RANK_AWARDS.get(self)

    @property
    def criteria(self) -> str | None:
        return _RANK_CRITERIA.get(self)

    @classmethod
    def parse(cls, value: object) -> Rank | None:
        """Return the tier named by ``value`` (case/whitespace-insensitive) or None."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


_RANK_LABELS = {
    Rank.DIAMOND: "Бриллиантовый",
    Rank.GOLD: "Золотой",
    Rank.SILVER: "Серебряный",
    Rank.NONE: "Стандартный",
}

_RANK_AWARDS = {
    Rank.DIAMOND: "Бриллиантовый кубок",
    Rank.GOLD: "Золотой кубок",
    Rank.SILVER: "Серебряный кубок",
}

_RANK_CRITERIA = {
    Rank.DIAMOND: "Прирост маржи более 4%",
    Rank.GOLD: "Прирост маржи 3-4%",
    Rank.SILVER: "Прирост маржи 2-3%",
}


def award_legend() -> list[Rank]:
    """Awarded tiers in display order (best first)."""
    return [Rank.DIAMOND, Rank.GOLD, Rank.SILVER]


@dataclass(frozen=True)
class SalesRecord:
    """Canonical sales metrics for one reporting group (one spreadsheet row).

    ``group_name`` / ``manager`` may be None when the source row lacks them;
    consumers render that case themselves.
    """
    group_name: str | None
    manager: str | None
    revenue: float = 0.0
    prev_revenue: float = 0.0
    clean_margin: float = 0.0
    margin_growth: float = 0.0
    drr: float = 0.0
    turnover: float = 0.0
    turnover_change: float = 0.0
    cr: float = 0.0
    ctr: float = 0.0
    week: int | None = None  # None = row had no usable week (0 is a real week)
    rank: Rank = Rank.NONE
    color: str = ""  # CSS color; assigned per group by the load pipeline

    def to_dict(self) -> dict[str, object]:
        """Serialize with the camelCase keys the presentation layer consumes."""
        return {
            "groupName": self.group_name,
            "manager": self.manager,
            "revenue": self.revenue,
            "prevRevenue": self.prev_revenue,
            "cleanMargin": self.clean_margin,
            "marginGrowth": self.margin_growth,
            "drr": self.drr,
            "turnover": self.turnover,
            "turnoverChange": self.turnover_change,
            "cr": self.cr,
            "ctr": self.ctr,
            "week": self.week,
            "rank": self.rank.value,
            "color": self.color,
        }
