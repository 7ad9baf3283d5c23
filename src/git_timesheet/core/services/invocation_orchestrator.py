from __future__ import annotations

import asyncio
import time
from pathlib import Path

from ..domain.command import PlatformKind, build_command, normalize_for_shell
from ..domain.exceptions import CleanupWarning, StagingFailedError, TimesheetError
from ..domain.models import InvocationRequest, InvocationResult
from ..ports import CommandRunnerPort, LoggerPort, ScriptStagerPort


class InvocationOrchestrator:
    """Runs the analysis script once per request.

    Each invocation walks through
    ``staging -> staged -> executing -> captured|failed -> cleaning_up -> done``
    and the staged script is discarded on every path, including failures
    during staging itself.
    """

    def __init__(
        self,
        *,
        stager: ScriptStagerPort,
        runner: CommandRunnerPort,
        logger: LoggerPort,
        shell: str = "bash",
        platform_kind: PlatformKind | None = None,
    ) -> None:
        self._stager = stager
        self._runner = runner
        self._logger = logger
        self._shell = shell
        self._platform_kind = platform_kind or PlatformKind.current()

    def run(self, request: InvocationRequest) -> InvocationResult:
        """Stage, execute and clean up. Blocks until the script finishes.

        Args:
            request: Invocation parameters

        Returns:
            Captured report with diagnostics about the run

        Raises:
            StagingFailedError: If the script could not be written
            InvalidRequestError: If the command line cannot be built safely
            ScriptExecutionFailedError: If the script exits non-zero
            OutputTooLargeError: If stdout reaches the byte limit
        """
        script_path: Path | None = None
        self._state("staging")

        try:
            try:
                staged = self._stager.stage(request.script_source)
            except StagingFailedError as e:
                script_path = e.path
                self._state("failed", script_path=script_path, error=str(e))
                raise

            script_path = staged.path
            self._state("staged", script_path=script_path)

            command = build_command(
                self._shell,
                normalize_for_shell(str(script_path), self._platform_kind),
                request,
            )
            self._logger.info(
                "command_built",
                command=command,
                day_offset=request.day_offset,
                force_fetch=request.force_fetch,
            )

            self._state("executing", script_path=script_path)
            started = time.monotonic()
            try:
                report = self._runner.run(command)
            except TimesheetError as e:
                self._logger.error(
                    "script_failed",
                    error_type=type(e).__name__,
                    detail=str(e),
                )
                self._state("failed", script_path=script_path, error=str(e))
                raise

            duration = time.monotonic() - started
            self._state("captured", script_path=script_path)
            self._logger.info(
                "report_captured",
                report_chars=len(report),
                duration_sec=round(duration, 3),
            )
            return InvocationResult(
                report=report,
                script_path=script_path,
                command=command,
                duration_sec=duration,
            )

        finally:
            self._state("cleaning_up", script_path=script_path)
            if script_path is not None:
                try:
                    self._stager.discard(script_path)
                except CleanupWarning as w:
                    self._logger.warning("cleanup_failed", script_path=str(w.path), detail=w.reason)
            self._state("done", script_path=script_path)

    async def run_async(self, request: InvocationRequest) -> InvocationResult:
        """Same as :meth:`run`, executed on a worker thread."""
        return await asyncio.to_thread(self.run, request)

    def _state(self, state: str, *, script_path: Path | None = None, **fields: object) -> None:
        self._logger.debug(
            "invocation_state",
            state=state,
            script_path=str(script_path) if script_path else None,
            **fields,
        )
