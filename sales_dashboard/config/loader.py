from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import DashboardConfig

"""Config loader.

Responsibilities:
- Load YAML config (default config/dashboard.yml)
- Validate against the bundled JSON schema (unknown keys rejected)
- Apply defaults (first sheet, header row 1, current week)
- Let SALES_DATA_SOURCE override the workbook location
"""

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ConfigError",
    "load_config",
]

DEFAULT_CONFIG_PATH = Path("config/dashboard.yml")
SCHEMA_PATH = Path(__file__).with_name("dashboard_schema.json")
SOURCE_ENV = "SALES_DATA_SOURCE"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: if the schema file is missing / not valid JSON, or the
            config data violates the schema
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")
    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> DashboardConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config validation failed: top level must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    return DashboardConfig(
        source=os.getenv(SOURCE_ENV) or data["source"],
        sheet=data.get("sheet"),
        header_row=data.get("header_row", 1),
        default_week=data.get("default_week"),
        keep_na_strings=data.get("keep_na_strings"),
        aliases=data.get("aliases") or {},
    )
