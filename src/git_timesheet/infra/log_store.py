from __future__ import annotations

from collections import deque
from pathlib import Path

from .logging.logger import LOG_FILE_NAME


class LogStore:
    """Reads the JSONL log written by TimesheetLogger."""

    def __init__(self, *, logs_dir: Path) -> None:
        self._log_file = Path(logs_dir) / LOG_FILE_NAME

    @property
    def log_file(self) -> Path:
        return self._log_file

    def tail(self, lines: int) -> list[str]:
        """Return the last ``lines`` log entries, oldest first.

        Raises:
            FileNotFoundError: If nothing has been logged yet
        """
        if not self._log_file.exists():
            raise FileNotFoundError(f"Log file not found: {self._log_file}")
        with open(self._log_file, encoding="utf-8") as fh:
            return [line.rstrip("\n") for line in deque(fh, maxlen=lines)]
