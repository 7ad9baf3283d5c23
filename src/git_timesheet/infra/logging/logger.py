from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable

from dependency_injector.resources import Resource

from .handlers import build_json_file_handler, build_human_console_handler

LOG_FILE_NAME = "timesheet.jsonl"

# Handlers attached to a named logger are shared by every live TimesheetLogger
# for that name and detached when the last one shuts down.
_shared_lock = threading.Lock()
_shared_handlers: dict[tuple[str, str], list] = {}


def _acquire(logger: logging.Logger, key: tuple[str, str], factory: Callable[[], logging.Handler], level: int) -> None:
    with _shared_lock:
        entry = _shared_handlers.get(key)
        if entry is None:
            handler = factory()
            logger.addHandler(handler)
            _shared_handlers[key] = [handler, 1]
            return
        handler = entry[0]
        handler.setLevel(min(handler.level, level))
        entry[1] += 1


def _release(logger: logging.Logger, key: tuple[str, str]) -> None:
    with _shared_lock:
        entry = _shared_handlers.get(key)
        if entry is None:
            return
        handler = entry[0]
        handler.flush()
        entry[1] -= 1
        if entry[1] == 0:
            del _shared_handlers[key]
            logger.removeHandler(handler)
            handler.close()


class TimesheetLogger(Resource):
    """Structured logger for report invocations.

    Configures the package logger, so module-level ``logging.getLogger(__name__)``
    loggers inside git_timesheet share the same handlers. Several instances may
    be live at once (overlapping invocations); they share handlers instead of
    replacing each other's.
    """

    def init(
        self,
        *,
        logs_dir: Path | None = None,
        logger_name: str = "git_timesheet",
        json_log: bool = True,
        console_output: bool = False,
        level: str = "INFO",
    ) -> "TimesheetLogger":
        """Attach handlers.

        Args:
            logs_dir: Directory for the JSONL log file (required when json_log is set)
            logger_name: Logger name
            json_log: Whether to append JSON lines to ``logs_dir/timesheet.jsonl``
            console_output: Whether to also log human-readable lines to stderr
            level: Logging level (DEBUG, INFO, WARNING, ERROR)

        Returns:
            Self for dependency_injector Resource pattern
        """
        numeric_level = getattr(logging, level.upper())
        self._logger = logging.getLogger(logger_name)
        self._logger.setLevel(numeric_level)
        self._logger.propagate = False
        self._keys: list[tuple[str, str]] = []

        if json_log and logs_dir is not None:
            log_file = (Path(logs_dir) / LOG_FILE_NAME).resolve()
            self._attach(
                (logger_name, f"file:{log_file}"),
                lambda: build_json_file_handler(log_file, level=numeric_level),
                numeric_level,
            )

        if console_output:
            self._attach(
                (logger_name, "console"),
                lambda: build_human_console_handler(level=numeric_level),
                numeric_level,
            )

        if not self._keys:
            self._attach((logger_name, "null"), logging.NullHandler, numeric_level)

        return self

    def shutdown(self, resource: "TimesheetLogger") -> None:
        """Release this instance's handlers; the last user flushes and closes them."""
        for key in self._keys:
            _release(self._logger, key)
        self._keys = []

    def _attach(self, key: tuple[str, str], factory: Callable[[], logging.Handler], level: int) -> None:
        _acquire(self._logger, key, factory, level)
        self._keys.append(key)

    def debug(self, message: str, **kwargs) -> None:
        if kwargs:
            self._logger.debug(message, extra=kwargs)
        else:
            self._logger.debug(message)

    def info(self, message: str, **kwargs) -> None:
        if kwargs:
            self._logger.info(message, extra=kwargs)
        else:
            self._logger.info(message)

    def warning(self, message: str, **kwargs) -> None:
        if kwargs:
            self._logger.warning(message, extra=kwargs)
        else:
            self._logger.warning(message)

    def error(self, message: str, exc_info: bool = False, **kwargs) -> None:
        if kwargs:
            self._logger.error(message, extra=kwargs, exc_info=exc_info)
        else:
            self._logger.error(message, exc_info=exc_info)

    def exception(self, message: str, **kwargs) -> None:
        if kwargs:
            self._logger.exception(message, extra=kwargs)
        else:
            self._logger.exception(message)
