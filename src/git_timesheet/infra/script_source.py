from __future__ import annotations

import logging
from pathlib import Path

from ..core.domain.exceptions import ScriptUnavailableError

logger = logging.getLogger(__name__)


class FileScriptSource:
    """Reads the analysis script from a file on disk."""

    def __init__(self, *, script_path: Path | None) -> None:
        self._script_path = Path(script_path) if script_path is not None else None

    @property
    def script_path(self) -> Path | None:
        return self._script_path

    def load(self) -> str:
        if self._script_path is None:
            raise ScriptUnavailableError(
                None,
                "No timesheet script configured. "
                "Pass --script or set GIT_TIMESHEET_SCRIPT__PATH.",
            )
        try:
            # newline="" keeps the bytes identical to the file on disk
            with open(self._script_path, encoding="utf-8", newline="") as fh:
                source = fh.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(
                "script_unavailable",
                extra={"script_path": str(self._script_path), "detail": str(e)},
            )
            raise ScriptUnavailableError(self._script_path) from e

        if not source:
            raise ScriptUnavailableError(
                self._script_path,
                f"Timesheet script at {self._script_path} is empty.",
            )
        return source
