from __future__ import annotations

from pathlib import Path

from platformdirs import PlatformDirs
from pydantic import BaseModel, Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


APP_NAME = "git_timesheet"
DEFAULT_MAX_OUTPUT_BYTES = 5 * 1024 * 1024


def _default_home() -> Path:
    """Get default home directory using platformdirs."""
    return Path(PlatformDirs(appname=APP_NAME, appauthor=False).user_cache_dir)


class DirectoryConfig(BaseModel):
    """Directory configuration with computed paths."""

    home: Path = Field(
        default_factory=_default_home,
        description="Base directory for all git_timesheet data",
    )

    temp_dir: Path | None = Field(
        default=None,
        description="Where staged scripts are written (None = system temp dir)",
    )

    @computed_field
    @property
    def logs_dir(self) -> Path:
        """Logs directory for invocation logs."""
        path = self.home / "logs"
        path.mkdir(parents=True, exist_ok=True)
        return path


class ScriptConfig(BaseModel):
    """Analysis script invocation settings."""

    path: Path | None = Field(
        default=None,
        description="Default analysis script used when --script is not given",
    )

    shell: str = Field(
        default="bash",
        description="POSIX shell interpreter that runs the staged script",
    )

    max_output_bytes: int = Field(
        default=DEFAULT_MAX_OUTPUT_BYTES,
        gt=0,
        description="Captured stdout limit; reaching it fails the invocation",
    )

    timeout_sec: float | None = Field(
        default=None,
        gt=0,
        description="Kill the script after this many seconds (None = no limit)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    logger_name: str = Field(default=APP_NAME)
    level: str = Field(default="INFO", description="DEBUG, INFO, WARNING or ERROR")
    json_log: bool = Field(default=True, description="Append JSON lines to logs_dir/timesheet.jsonl")
    console_output: bool = Field(default=False, description="Also log human-readable lines to stderr")


class AppConfig(BaseSettings):
    """Root application configuration.

    All configuration is loaded from environment variables with GIT_TIMESHEET_ prefix.
    Use double underscore for nested config: GIT_TIMESHEET_SCRIPT__SHELL

    Example env vars:
        export GIT_TIMESHEET_SCRIPT__PATH=~/tools/git-commits.sh
        export GIT_TIMESHEET_SCRIPT__SHELL=bash
        export GIT_TIMESHEET_SCRIPT__TIMEOUT_SEC=120
        export GIT_TIMESHEET_DIRECTORIES__HOME=/custom/path
        export GIT_TIMESHEET_LOGGING__LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="GIT_TIMESHEET_",
        env_nested_delimiter="__",
        frozen=True,
        extra="forbid",
    )

    directories: DirectoryConfig = Field(default_factory=DirectoryConfig)
    script: ScriptConfig = Field(default_factory=ScriptConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
