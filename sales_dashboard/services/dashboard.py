from __future__ import annotations

import logging

from ..excel.reader import read_sales_rows
from ..models.config_models import DashboardConfig
from ..models.dashboard_data import DashboardData
from ..models.load_error import LoadErrorKind
from .aggregator import aggregate
from .colors import apply_colors, assign_colors
from .normalizer import build_alias_table, normalize_rows

"""Dashboard load pipeline.

read sheet -> normalize every row -> (chart, colors over all rows)
                                  -> records filtered by the selected week

Every call recomputes everything from the source; nothing is cached. Any
failure while reading is raised as DashboardLoadError carrying a classified
LoadErrorKind. Loads are never retried here.
"""

logger = logging.getLogger(__name__)

__all__ = [
    "DashboardLoadError",
    "classify_load_error",
    "load_dashboard",
]

# Checked in order; first kind with a matching substring wins. Parse markers go
# first since pandas reports a missing sheet as "Worksheet named ... not found".
_KIND_MARKERS: list[tuple[LoadErrorKind, tuple[str, ...]]] = [
    (
        LoadErrorKind.PARSE_FAILURE,
        (
            "Failed to parse",
            "BadZipFile",
            "not a zip file",
            "Excel file format cannot be determined",
            "Worksheet",
            "SheetHeaderError",
        ),
    ),
    (LoadErrorKind.NOT_FOUND, ("404", "No such file", "not found", "FileNotFoundError")),
]


class DashboardLoadError(Exception):
    """Raised when the source dataset cannot be loaded."""

    def __init__(self, kind: LoadErrorKind, source: str, detail: str) -> None:
        super().__init__(f"{kind.message}: {source}")
        self.kind = kind
        self.source = source
        self.detail = detail


def classify_load_error(exc: BaseException) -> LoadErrorKind:
    """Best-effort classification from the exception's type name and message."""
    description = f"{type(exc).__name__}: {exc}"
    for kind, markers in _KIND_MARKERS:
        if any(marker in description for marker in markers):
            return kind
    return LoadErrorKind.GENERIC


def load_dashboard(config: DashboardConfig, week: int | None = None) -> DashboardData:
    """Load the configured workbook and build the dashboard view data.

    Args:
        config: Validated dashboard configuration
        week: Week filter for ``records`` (None = every record)

    Raises:
        DashboardLoadError: when the workbook cannot be fetched or read
    """
    try:
        sheet = read_sales_rows(
            config.source,
            sheet=config.sheet,
            header_row=config.header_row,
            keep_na_strings=config.keep_na_strings,
        )
    except Exception as e:
        kind = classify_load_error(e)
        logger.debug(f"load failed kind={kind.value} source={config.source}: {e!r}")
        raise DashboardLoadError(kind, config.source, f"{type(e).__name__}: {e}") from e

    logger.debug(f"sheet={sheet.sheet_name} columns={sheet.columns} rows={len(sheet.rows)}")

    aliases = build_alias_table(config.aliases)
    all_records = normalize_rows(sheet.rows, aliases)
    colors = assign_colors(all_records)
    chart = aggregate(all_records)

    selected = all_records if week is None else [r for r in all_records if r.week == week]
    return DashboardData(
        source=config.source,
        week=week,
        total_rows=len(sheet.rows),
        records=apply_colors(selected, colors),
        chart=chart,
        colors=colors,
    )
