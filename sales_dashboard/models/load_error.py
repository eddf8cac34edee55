from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from enum import Enum

"""Load failure classification and the structured error log record.

A failed dataset load is reported to the consumer as one of three kinds. The
kind also decides the ``error_type`` written to the JSON Lines error log.
"""

__all__ = [
    "LoadErrorKind",
    "LoadErrorRecord",
]


class LoadErrorKind(Enum):
    """Classified reason a dataset load failed.

    - NOT_FOUND: workbook missing (file absent / HTTP 404)
    - PARSE_FAILURE: workbook exists but could not be read as a sheet
    - GENERIC: anything else
    """
    NOT_FOUND = "NOT_FOUND"
    PARSE_FAILURE = "PARSE_FAILURE"
    GENERIC = "LOAD_FAILURE"

    @property
    def message(self) -> str:
        return _KIND_MESSAGES[self]


_KIND_MESSAGES = {
    LoadErrorKind.NOT_FOUND: "sales data file not found",
    LoadErrorKind.PARSE_FAILURE: "failed to parse Excel file, check the file format",
    LoadErrorKind.GENERIC: "failed to load sales data",
}


@dataclass(frozen=True)
class LoadErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        source: Workbook path or URL that failed to load
        error_type: LoadErrorKind value (UPPER_SNAKE)
        message: Underlying exception description
    """
    timestamp: str  # ISO8601 UTC
    source: str
    error_type: str  # UPPER_SNAKE
    message: str

    @staticmethod
    def create(source: str, kind: LoadErrorKind, message: str) -> LoadErrorRecord:
        """Create a new record stamped with the current UTC time."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return LoadErrorRecord(
            timestamp=ts,
            source=source,
            error_type=kind.value,
            message=message,
        )

    def to_json_line(self) -> str:
        """Serialize to one JSON line (fixed key set)."""
        return json.dumps(asdict(self), ensure_ascii=False)
