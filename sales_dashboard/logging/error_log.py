from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from ..models.load_error import LoadErrorRecord

"""Load-failure error log (JSON Lines).

- Fixed schema per line: timestamp, source, error_type, message
- One file per run: ``logs/errors-YYYYMMDD-HHMMSS.log`` (UTC), created on first flush
- Records are buffered and appended on flush()
"""

__all__ = [
    "ErrorLogBuffer",
]

LOGS_DIR = Path("./logs")
TIMESTAMP_FMT = "%Y%m%d-%H%M%S"


class ErrorLogBuffer:
    """In-memory buffer of LoadErrorRecord; flush() appends JSON Lines."""

    def __init__(self, logs_dir: Path = LOGS_DIR) -> None:
        self._records: list[LoadErrorRecord] = []
        self._logs_dir = logs_dir
        self._file_path: Path | None = None

    @property
    def file_path(self) -> Path:
        if self._file_path is None:
            stamp = datetime.now(UTC).strftime(TIMESTAMP_FMT)
            self._file_path = self._logs_dir / f"errors-{stamp}.log"
        return self._file_path

    def append(self, record: LoadErrorRecord) -> None:
        self._records.append(record)

    def __len__(self) -> int:  # pragma: no cover (trivial)
        return len(self._records)

    def flush(self) -> Path | None:
        """Write buffered records; returns the file written, None when empty."""
        if not self._records:
            return None
        fp = self.file_path
        fp.parent.mkdir(parents=True, exist_ok=True)
        with fp.open("a", encoding="utf-8") as f:
            for r in self._records:
                f.write(r.to_json_line() + "\n")
        self._records.clear()
        return fp
