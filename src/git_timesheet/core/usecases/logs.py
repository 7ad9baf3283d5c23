from __future__ import annotations

from ..ports import LogStorePort


class LogsUseCase:
    def __init__(self, *, log_store: LogStorePort) -> None:
        self._log_store = log_store

    def execute(self, lines: int = 20) -> list[str]:
        if lines <= 0:
            return []
        return self._log_store.tail(lines)
