#!/usr/bin/env python3
"""Sample dataset generation for the sales dashboard.

Generates a synthetic sales workbook with one row per (group, week):
- Row 1: Header row (English or Russian column names)
- Row 2+: Data rows

The output can be loaded directly with ``sales-dashboard`` (header_row: 1).
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd

DEFAULT_GROUPS = ["Север", "Юг", "Запад", "Восток", "Центр"]
DEFAULT_MANAGERS = ["Иванов", "Петров", "Сидоров", "Кузнецов", "Смирнов"]

COLUMNS_EN = [
    "Group", "Manager", "Revenue", "PrevRevenue", "CleanMargin", "MarginGrowth",
    "DRR", "Turnover", "TurnoverChange", "CR", "CTR", "Week",
]
COLUMNS_RU = [
    "Группа", "Менеджер", "Оборот", "ПредыдущийОборот", "ОчищеннаяМаржа", "ПриростМаржи",
    "ДРР", "Оборачиваемость", "ИзменениеОборачиваемости", "CR", "CTR", "Week",
]


def generate_sales_data(groups: list[str], weeks: int, seed: int = 42, russian: bool = True) -> pd.DataFrame:
    """Synthetic sales metrics, one row per group and week (weeks 1..weeks).

    Revenue follows a per-group random walk so that PrevRevenue of week N
    equals Revenue of week N-1.
    """
    np.random.seed(seed)
    rows = []
    for i, group in enumerate(groups):
        manager = DEFAULT_MANAGERS[i % len(DEFAULT_MANAGERS)]
        prev_revenue = float(np.round(np.random.uniform(500_000, 2_000_000), -3))
        for week in range(1, weeks + 1):
            revenue = float(np.round(prev_revenue * np.random.uniform(0.85, 1.25), -3))
            rows.append([
                group,
                manager,
                revenue,
                prev_revenue,
                round(float(np.random.uniform(5, 25)), 1),   # clean margin %
                round(float(np.random.uniform(0, 6)), 2),    # margin growth (drives rank)
                float(np.round(revenue * np.random.uniform(0.02, 0.15), -2)),  # ad spend
                round(float(np.random.uniform(20, 90)), 1),  # turnover, days
                round(float(np.random.uniform(-10, 10)), 1),
                round(float(np.random.uniform(0.5, 5)), 2),
                round(float(np.random.uniform(0.2, 3)), 2),
                week,
            ])
            prev_revenue = revenue
    return pd.DataFrame(rows, columns=COLUMNS_RU if russian else COLUMNS_EN)


def create_excel_file(
    output_path: Path,
    groups: list[str],
    weeks: int,
    sheet: str = "Продажи",
    seed: int = 42,
    russian: bool = True,
) -> pd.DataFrame:
    """Write the generated data (header in row 1) and return it."""
    df = generate_sales_data(groups, weeks, seed=seed, russian=russian)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=sheet, index=False)

    print(f"Created Excel file: {output_path}")
    print(f"  Sheet: {sheet}")
    print(f"  Groups: {len(groups)} ({', '.join(groups)})")
    print(f"  Weeks: 1..{weeks}")
    print(f"  Rows: {len(df)}")
    return df


def main(argv: list[str] | None = None) -> int:
    """Main CLI interface for dataset generation."""
    parser = argparse.ArgumentParser(
        description="Generate a synthetic sales workbook for the dashboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 5 default groups, 10 weeks, Russian headers
  %(prog)s data/sales_data.xlsx

  # English headers, custom groups
  %(prog)s sales_en.xlsx --english --groups North South West --weeks 20
        """,
    )
    parser.add_argument("output", type=Path, help="Output Excel file path")
    parser.add_argument("--groups", nargs="+", default=DEFAULT_GROUPS, help="Group names")
    parser.add_argument("--weeks", type=int, default=10, help="Number of weeks (default: 10)")
    parser.add_argument("--sheet", default="Продажи", help="Sheet name (default: Продажи)")
    parser.add_argument("--english", action="store_true", help="Use English column names")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args(argv)

    if args.weeks <= 0:
        print("Error: --weeks must be positive", file=sys.stderr)
        return 1

    try:
        create_excel_file(
            args.output,
            args.groups,
            args.weeks,
            sheet=args.sheet,
            seed=args.seed,
            russian=not args.english,
        )
    except OSError as e:
        print(f"Error generating dataset: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
