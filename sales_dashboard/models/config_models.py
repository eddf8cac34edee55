from __future__ import annotations

from dataclasses import dataclass, field

"""Config dataclass for the sales dashboard.

Separate from the loader implementation in sales_dashboard/config/loader.py;
this module only carries the typed, validated result.
"""


@dataclass(frozen=True)
class DashboardConfig:
    """Root configuration for loading the dashboard dataset.

    ``source`` may be a filesystem path or an http(s) URL. ``header_row`` is
    1-based (1 = first row of the sheet holds column names).
    """
    source: str  # Workbook path or URL
    sheet: str | None = None  # None = first sheet of the workbook
    header_row: int = 1
    default_week: int | None = None  # None = current calendar week
    keep_na_strings: list[str] | None = None  # pandas 既定 NA 変換から除外する文字列
    aliases: dict[str, list[str]] = field(default_factory=dict)  # Canonical field -> extra column names
