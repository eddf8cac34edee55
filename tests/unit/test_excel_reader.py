from __future__ import annotations
import pandas as pd
import pytest
from pathlib import Path
from sales_dashboard.excel.reader import SheetHeaderError, read_sales_rows, rows_from_frame


def test_read_first_sheet_by_default(temp_workdir: Path, make_workbook):
    excel = make_workbook(
        temp_workdir / "data" / "two_sheets.xlsx",
        {
            "First": [["Group", "Revenue"], ["A", 10], ["B", 20]],
            "Second": [["Group", "Revenue"], ["Z", 99]],
        },
    )
    sheet = read_sales_rows(str(excel))
    assert sheet.sheet_name == "First"
    assert sheet.columns == ["Group", "Revenue"]
    assert sheet.rows == [{"Group": "A", "Revenue": 10}, {"Group": "B", "Revenue": 20}]


def test_read_named_sheet(temp_workdir: Path, make_workbook):
    excel = make_workbook(
        temp_workdir / "data" / "two_sheets.xlsx",
        {"First": [["Group"], ["A"]], "Second": [["Group"], ["Z"]]},
    )
    sheet = read_sales_rows(str(excel), sheet="Second")
    assert sheet.rows == [{"Group": "Z"}]


def test_missing_named_sheet_raises(temp_workdir: Path, make_workbook):
    excel = make_workbook(temp_workdir / "data" / "one.xlsx", {"First": [["Group"], ["A"]]})
    with pytest.raises(ValueError, match="Worksheet"):
        read_sales_rows(str(excel), sheet="Nope")


def test_header_row_offset(temp_workdir: Path, make_workbook):
    excel = make_workbook(
        temp_workdir / "data" / "title.xlsx",
        {"S": [["Отчет по продажам"], ["Группа", "Оборот"], ["Север", 1000]]},
    )
    sheet = read_sales_rows(str(excel), header_row=2)
    assert sheet.columns == ["Группа", "Оборот"]
    assert sheet.rows == [{"Группа": "Север", "Оборот": 1000}]


def test_empty_rows_skipped_and_empty_cells_none(temp_workdir: Path, make_workbook):
    excel = make_workbook(
        temp_workdir / "data" / "gaps.xlsx",
        {"S": [["Group", "Week"], ["A", None], [None, None], ["B", 2]]},
    )
    sheet = read_sales_rows(str(excel))
    # 空行 (全 NaN) はスキップされる
    assert len(sheet.rows) == 2
    assert sheet.rows[0] == {"Group": "A", "Week": None}
    assert sheet.rows[1]["Group"] == "B"


def test_keep_na_strings(temp_workdir: Path, make_workbook):
    excel = make_workbook(temp_workdir / "data" / "na.xlsx", {"S": [["Group"], ["NA"]]})
    # 既定では "NA" が欠損扱いになり、全欠損行としてスキップされる
    assert read_sales_rows(str(excel)).rows == []
    kept = read_sales_rows(str(excel), keep_na_strings=["NA"])
    assert kept.rows == [{"Group": "NA"}]


def test_missing_file_raises_file_not_found(temp_workdir: Path):
    with pytest.raises(FileNotFoundError):
        read_sales_rows(str(temp_workdir / "data" / "absent.xlsx"))


def test_rows_from_frame_without_header_row():
    with pytest.raises(SheetHeaderError):
        rows_from_frame(pd.DataFrame([]), "Empty")
    with pytest.raises(SheetHeaderError):
        rows_from_frame(pd.DataFrame([["only"]]), "S", header_row=2)
