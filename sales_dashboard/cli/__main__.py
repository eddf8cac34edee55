from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from ..logging.error_log import ErrorLogBuffer
from ..logging.init import log_summary, set_debug, setup_logging
from ..models.load_error import LoadErrorRecord
from ..services.dashboard import DashboardLoadError, load_dashboard
from ..services.ratios import record_row
from ..services.summary import render_summary_line
from ..services.weeks import current_week

"""CLI entrypoint.

Flow:
- Load .env (overrides existing environment) and the YAML config
- Read + normalize the workbook for the selected week
- Log the detail table and the weekly chart series, then one SUMMARY line
- Optionally export the view data as JSON
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env using python-dotenv (its values win over the process environment)."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="sales-dashboard", description="Sales performance dashboard data")
    p.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="YAML config path")
    weeks = p.add_mutually_exclusive_group()
    weeks.add_argument("--week", type=int, help="Week to show in the detail table (default: config / current week)")
    weeks.add_argument("--all-weeks", action="store_true", help="Show records of every week")
    p.add_argument("--export", type=Path, help="Write records, chart and colors as JSON to this path")
    p.add_argument("--inspect-data", action="store_true", help="Print sheet columns & first rows then exit")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _selected_week(args: argparse.Namespace, default_week: int | None) -> int | None:
    if args.all_weeks:
        return None
    if args.week is not None:
        return args.week
    if default_week is not None:
        return default_week
    return current_week()


def _inspect_data(cfg) -> int:
    from ..excel.reader import read_sales_rows

    try:
        sheet = read_sales_rows(
            cfg.source, sheet=cfg.sheet, header_row=cfg.header_row, keep_na_strings=cfg.keep_na_strings
        )
    except Exception as e:
        print(f"inspect: read_error: {e}")
        return EXIT_FATAL
    print(f"SHEET: {sheet.sheet_name} cols={sheet.columns}")
    # datetime 含む場合 JSON 化できないため isoformat へ
    safe_rows = [
        {k: (v.isoformat() if hasattr(v, "isoformat") else v) for k, v in r.items()}
        for r in sheet.rows[:3]
    ]
    print("  sample_rows=", safe_rows)
    return EXIT_SUCCESS


def _export(path: Path, payload: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None のときのみシステム引数を読む ([] はそのまま空引数として扱う)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"), override=True)

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    if args.inspect_data:
        return _inspect_data(cfg)

    week = _selected_week(args, cfg.default_week)
    logger.info(f"Loading sales data from: {cfg.source}")
    try:
        data = load_dashboard(cfg, week=week)
    except DashboardLoadError as e:
        logger.error(f"load: {e}")
        buffer = ErrorLogBuffer()
        buffer.append(LoadErrorRecord.create(e.source, e.kind, e.detail))
        logger.info(f"error log: {buffer.flush()}")
        return EXIT_FATAL

    for record in data.records:
        row = record_row(record)
        logger.info("record " + " ".join(f"{k}={v}" for k, v in row.items()))
    for point in data.chart:
        values = ", ".join(f"{k}={v:g}" for k, v in point.items() if k != "week")
        logger.info(f"chart {point['week']}: {values}")

    if args.export is not None:
        _export(args.export, data.to_dict())
        logger.info(f"exported: {args.export}")

    # log_summary が "SUMMARY " を付与するので先頭ラベルを除去
    summary_line = render_summary_line(data)
    log_summary(summary_line.removeprefix("SUMMARY "))
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
