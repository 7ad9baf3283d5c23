from __future__ import annotations

import logging
import re
from pathlib import Path

import typer
from dotenv import load_dotenv

from .config import AppConfig
from .container import Container
from ..core.domain.exceptions import ClipboardError, ScriptUnavailableError, TimesheetError

load_dotenv()

app = typer.Typer(add_completion=False, no_args_is_help=True)

_DAY_OFFSET = re.compile(r"^-?\d+$")
DAY_PROMPT = "Enter date offset (0 for today, -1 for yesterday, etc.)"


def _parse_day_offset(value: str) -> int:
    value = value.strip()
    if not _DAY_OFFSET.match(value):
        raise typer.BadParameter("Please enter a valid integer", param_hint="'--day'")
    return int(value)


def _container(config: AppConfig) -> Container:
    container = Container()
    container.config.from_pydantic(config)
    container.init_resources()
    return container


@app.command()
def generate(
    repo: Path | None = typer.Argument(None, help="Repository working directory (defaults to the current directory)"),
    day: str | None = typer.Option(None, "--day", "-d", help="Day offset: 0 for today, -1 for yesterday, ..."),
    force_fetch: bool = typer.Option(False, "--force-fetch", "-f", help="Refresh remote data before analysis"),
    script: Path | None = typer.Option(None, "--script", "-s", help="Analysis script (overrides GIT_TIMESHEET_SCRIPT__PATH)"),
    copy: bool = typer.Option(True, "--copy/--no-copy", help="Copy the report to the clipboard"),
    log_level: str = typer.Option("INFO", "--log-level", help="Log level", case_sensitive=False),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Also log to stderr"),
):
    """Generate the timesheet for one day of the repository's commit history."""
    level = log_level.upper()
    if level not in logging._nameToLevel:
        raise typer.BadParameter(f"Unknown log level: {log_level}", param_hint="'--log-level'")

    config = AppConfig()
    config = config.model_copy(
        update={"logging": config.logging.model_copy(update={"level": level, "console_output": verbose})}
    )

    repo_path = repo if repo is not None else Path.cwd()
    if day is not None:
        day_offset = _parse_day_offset(day)
    else:
        # Invalid input is reported and asked again
        day_offset = typer.prompt(DAY_PROMPT, default="0", value_proc=_parse_day_offset)

    container = _container(config)
    try:
        script_source = container.script_source(script_path=script) if script else container.script_source()
        source = script_source.load()

        uc = container.generate_report_uc()
        result = uc.execute(
            repository_path=repo_path,
            day_offset=day_offset,
            script_source=source,
            force_fetch=force_fetch,
        )

        typer.echo(result.report, nl=False)

        if copy:
            try:
                container.clipboard().copy(result.report)
                typer.echo("Timesheet generated and copied to clipboard!", err=True)
            except ClipboardError as e:
                typer.echo(f"Warning: could not copy to clipboard: {e}", err=True)

    except ScriptUnavailableError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)
    except TimesheetError as e:
        typer.echo(f"Error generating timesheet: {e}", err=True)
        raise typer.Exit(code=1)
    finally:
        # Always shutdown resources to close file handles
        container.shutdown_resources()


@app.command()
def logs(
    lines: int = typer.Option(20, "--tail", "-n", help="Number of log lines to show"),
):
    """Show the most recent invocation log lines."""
    config = AppConfig()
    container = _container(config)
    try:
        for line in container.logs_uc().execute(lines):
            typer.echo(line)
    except FileNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    finally:
        container.shutdown_resources()


if __name__ == "__main__":
    app()
