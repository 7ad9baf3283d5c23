"""Hand-written fakes for the core ports."""
from __future__ import annotations

import itertools
from pathlib import Path

from git_timesheet.core.domain.exceptions import CleanupWarning, StagingFailedError
from git_timesheet.core.domain.models import StagedScript


class FakeStager:
    def __init__(
        self,
        *,
        base: Path = Path("/tmp/staging"),
        fail_with_path: Path | None = None,
        fail_staging: bool = False,
        fail_discard: bool = False,
    ) -> None:
        self._base = base
        self._counter = itertools.count(1)
        self._fail_with_path = fail_with_path
        self._fail_staging = fail_staging
        self._fail_discard = fail_discard
        self.staged: list[str] = []
        self.discarded: list[Path] = []

    def stage(self, script_source: str) -> StagedScript:
        if self._fail_staging:
            raise StagingFailedError(self._fail_with_path, "disk full")
        self.staged.append(script_source)
        return StagedScript(path=self._base / f"git_commits_{next(self._counter)}.sh")

    def discard(self, path: Path) -> None:
        self.discarded.append(path)
        if self._fail_discard:
            raise CleanupWarning(path, "permission denied")


class FakeRunner:
    def __init__(self, output: str = "report\n", error: Exception | None = None) -> None:
        self._output = output
        self._error = error
        self.commands: list[str] = []

    def run(self, command: str) -> str:
        self.commands.append(command)
        if self._error is not None:
            raise self._error
        return self._output


class FakeLogger:
    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict]] = []

    def _log(self, level: str, message: str, fields: dict) -> None:
        self.records.append((level, message, fields))

    def debug(self, message: str, **fields) -> None:
        self._log("debug", message, fields)

    def info(self, message: str, **fields) -> None:
        self._log("info", message, fields)

    def warning(self, message: str, **fields) -> None:
        self._log("warning", message, fields)

    def error(self, message: str, exc_info: bool = False, **fields) -> None:
        self._log("error", message, fields)

    def exception(self, message: str, **fields) -> None:
        self._log("error", message, fields)

    def states(self) -> list[str]:
        return [f["state"] for _, msg, f in self.records if msg == "invocation_state"]

    def messages(self, level: str | None = None) -> list[str]:
        return [msg for lvl, msg, _ in self.records if level is None or lvl == level]


class SequenceTokenGen:
    def __init__(self, tokens: list[str] | None = None) -> None:
        self._tokens = iter(tokens) if tokens is not None else (str(i) for i in itertools.count(1))

    def generate(self) -> str:
        return next(self._tokens)
