from __future__ import annotations

from pathlib import Path

from .config import AppConfig
from .container import Container
from ..infra.script_source import FileScriptSource


def _create_container(config: AppConfig | None = None) -> Container:
    """Create and initialize a container.

    Args:
        config: Optional config. If None, loads from environment variables.

    Returns:
        Initialized container instance
    """
    container = Container()

    if config is None:
        # Load from environment variables (BaseSettings default behavior)
        config = AppConfig()

    container.config.from_pydantic(config)
    container.init_resources()

    return container


def load_script_source(script_path: str | Path) -> str:
    """Read the analysis script text.

    Raises:
        ScriptUnavailableError: If the file is missing, unreadable or empty
    """
    return FileScriptSource(script_path=Path(script_path)).load()


def generate_report(
    repository_path: str | Path,
    day_offset: int,
    script_source: str,
    force_fetch: bool = False,
    *,
    config: AppConfig | None = None,
) -> str:
    """Generate the timesheet report for one day.

    Args:
        repository_path: Git working directory to analyze
        day_offset: Day relative to today (0 = today, -1 = yesterday, ...)
        script_source: Text of the external analysis script
        force_fetch: Ask the script to refresh remote data first
        config: Optional config for testing. If None, loads from env vars.

    Returns:
        The script's stdout, unmodified

    Raises:
        TimesheetError: Any classified failure (see core.domain.exceptions)
    """
    container = _create_container(config)
    try:
        uc = container.generate_report_uc()
        result = uc.execute(
            repository_path=repository_path,
            day_offset=day_offset,
            script_source=script_source,
            force_fetch=force_fetch,
        )
        return result.report
    finally:
        container.shutdown_resources()


async def generate_report_async(
    repository_path: str | Path,
    day_offset: int,
    script_source: str,
    force_fetch: bool = False,
    *,
    config: AppConfig | None = None,
) -> str:
    """Awaitable variant of :func:`generate_report`.

    The script runs on a worker thread so the event loop keeps going.
    """
    container = _create_container(config)
    try:
        uc = container.generate_report_uc()
        result = await uc.execute_async(
            repository_path=repository_path,
            day_offset=day_offset,
            script_source=script_source,
            force_fetch=force_fetch,
        )
        return result.report
    finally:
        container.shutdown_resources()


def logs(lines: int = 20, config: AppConfig | None = None) -> list[str]:
    """Return the most recent invocation log lines.

    Args:
        lines: How many lines to return
        config: Optional config for testing. If None, loads from env vars.
    """
    container = _create_container(config)
    try:
        return container.logs_uc().execute(lines)
    finally:
        container.shutdown_resources()
