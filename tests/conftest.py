# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path
from typing import Callable

import pandas as pd
import pytest

from sales_dashboard.logging.init import reset_logging


SALES_HEADER = ["Группа", "Менеджер", "Оборот", "ПредыдущийОборот", "ОчищеннаяМаржа", "ПриростМаржи", "ДРР", "Week"]

SALES_ROWS = [
    ["Север", "Иванов", 1000, 800, 12.5, 4.5, 100, 3],
    ["Юг", "Петров", 500, 0, 10.0, 3.5, 50, 3],
    ["Север", "Иванов", 1200, 1000, 13.0, 2.5, 90, 4],
    ["Запад", "Сидоров", 300, 300, 8.0, 1.0, 0, None],
]


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("SALES_DATA_SOURCE", raising=False)
        reset_logging()
        yield p
        reset_logging()


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source: ./data/sales_data.xlsx
sheet: null
header_row: 1
default_week: 3
keep_na_strings: [NA]
aliases:
  group_name: [Отдел]
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "dashboard.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def make_workbook() -> Callable[..., Path]:
    """Build an .xlsx from ``{sheet: [header, *rows]}`` (no pandas header/index)."""
    def _make(path: Path, sheets: dict[str, list[list[object]]]) -> Path:
        with pd.ExcelWriter(path, engine="openpyxl") as writer:
            for sheet, rows in sheets.items():
                pd.DataFrame(rows).to_excel(writer, sheet_name=sheet, header=False, index=False)
        return path
    return _make


@pytest.fixture()
def sales_workbook(temp_workdir: Path, make_workbook) -> Path:
    return make_workbook(
        temp_workdir / "data" / "sales_data.xlsx",
        {"Продажи": [SALES_HEADER, *SALES_ROWS]},
    )
