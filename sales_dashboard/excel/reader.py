from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pandas as pd

"""Spreadsheet ingestion for the sales dashboard.

Reads exactly one sheet (named, or the first one) from a workbook path or URL
and turns its data rows into plain ``RawRow`` dicts (column name -> cell value).
Empty cells become None; fully empty rows are dropped.
"""

__all__ = [
    "RawRow",
    "SheetData",
    "SheetHeaderError",
    "read_sales_rows",
    "rows_from_frame",
]

RawRow = dict[str, Any]


class SheetHeaderError(Exception):
    """Raised when the configured header row is missing from the sheet."""


@dataclass
class SheetData:
    sheet_name: str
    columns: list[str]
    rows: list[RawRow]


def _na_options(keep_na_strings: list[str] | None) -> dict[str, Any]:
    # pandas の既定 NA 文字列から keep_na_strings を除外
    if not keep_na_strings:
        return {"keep_default_na": True, "na_values": None}
    import pandas._libs.parsers as parsers

    custom_na = parsers.STR_NA_VALUES - set(keep_na_strings)
    return {"keep_default_na": False, "na_values": list(custom_na)}


def read_sales_rows(
    source: str,
    sheet: str | None = None,
    header_row: int = 1,
    keep_na_strings: list[str] | None = None,
) -> SheetData:
    """Read one sheet of ``source`` into raw rows.

    Parameters
    ----------
    source: workbook path or http(s) URL
    sheet: sheet name (None = first sheet)
    header_row: 1-based row holding the column names
    keep_na_strings: strings that must stay strings (e.g. ['NA'])
    """
    with pd.ExcelFile(source) as xls:
        sheet_name = str(xls.sheet_names[0]) if sheet is None else sheet
        # ヘッダなしで生読み (後で header_row を適用)
        df = xls.parse(sheet_name, header=None, **_na_options(keep_na_strings))
    return rows_from_frame(df, sheet_name, header_row=header_row)


def rows_from_frame(df: pd.DataFrame, sheet_name: str, header_row: int = 1) -> SheetData:
    """Apply ``header_row`` to a headerless frame and collect data rows.

    Steps:
    1. Validate the header row exists
    2. Column names = stripped string of each header cell
    3. Rows below the header become RawRow dicts; all-empty rows are skipped
    """
    header_idx = header_row - 1
    if header_idx < 0 or df.shape[0] <= header_idx:
        raise SheetHeaderError(f"sheet '{sheet_name}' lacks header row {header_row}")
    columns = [str(c).strip() for c in df.iloc[header_idx].tolist()]
    rows: list[RawRow] = []
    for _, raw in df.iloc[header_idx + 1:].iterrows():
        if raw.isna().all():
            continue
        row: RawRow = {}
        for col, val in zip(columns, raw.tolist(), strict=False):
            row[col] = None if pd.isna(val) else val
        rows.append(row)
    return SheetData(sheet_name=sheet_name, columns=columns, rows=rows)
