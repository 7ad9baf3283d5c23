from __future__ import annotations

from pathlib import Path

from ..domain.exceptions import InvalidRequestError
from ..domain.models import InvocationRequest, InvocationResult
from ..services import InvocationOrchestrator


class GenerateReportUseCase:
    """Use case for producing one day's timesheet.

    Validates the caller's inputs, then delegates to InvocationOrchestrator.
    """

    def __init__(self, *, orchestrator: InvocationOrchestrator) -> None:
        self._orchestrator = orchestrator

    def execute(
        self,
        *,
        repository_path: str | Path,
        day_offset: int,
        script_source: str,
        force_fetch: bool = False,
    ) -> InvocationResult:
        request = self._build_request(repository_path, day_offset, script_source, force_fetch)
        return self._orchestrator.run(request)

    async def execute_async(
        self,
        *,
        repository_path: str | Path,
        day_offset: int,
        script_source: str,
        force_fetch: bool = False,
    ) -> InvocationResult:
        request = self._build_request(repository_path, day_offset, script_source, force_fetch)
        return await self._orchestrator.run_async(request)

    @staticmethod
    def _build_request(
        repository_path: str | Path,
        day_offset: int,
        script_source: str,
        force_fetch: bool,
    ) -> InvocationRequest:
        # bool is an int subclass; reject it explicitly
        if isinstance(day_offset, bool) or not isinstance(day_offset, int):
            raise InvalidRequestError(f"Day offset must be an integer, got {day_offset!r}")
        if not script_source:
            raise InvalidRequestError("Script source is empty")

        repo = Path(repository_path).expanduser().resolve()
        if not repo.is_dir():
            raise InvalidRequestError(f"Repository path is not a directory: {repo}")

        return InvocationRequest(
            repository_path=repo,
            day_offset=day_offset,
            script_source=script_source,
            force_fetch=bool(force_fetch),
        )
