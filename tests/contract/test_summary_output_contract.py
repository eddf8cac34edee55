from __future__ import annotations

import re
from pathlib import Path

from sales_dashboard.cli import main as cli_main

"""SUMMARY 行フォーマット契約テスト."""

SUMMARY_PATTERN = re.compile(
    r"^SUMMARY\s+rows=([0-9]+)\s+records=([0-9]+)\s+week=([0-9]+|all)\s+"
    r"groups=([0-9]+)\s+weeks=([0-9]+)$"
)


def test_summary_pattern_example_line():
    assert SUMMARY_PATTERN.match("SUMMARY rows=12 records=5 week=7 groups=5 weeks=10")
    assert SUMMARY_PATTERN.match("SUMMARY rows=0 records=0 week=all groups=0 weeks=0")


def test_cli_summary_line_matches_contract(write_config, sales_workbook: Path, capsys):
    cli_main([])
    lines = [l for l in capsys.readouterr().out.splitlines() if l.startswith("SUMMARY")]
    assert len(lines) == 1
    assert SUMMARY_PATTERN.match(lines[0])
