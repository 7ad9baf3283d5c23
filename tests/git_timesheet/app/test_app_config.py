"""Tests for Pydantic BaseSettings configuration."""
from pathlib import Path

import pytest
from pydantic import ValidationError

from git_timesheet.app.config import (
    AppConfig,
    DirectoryConfig,
    LoggingConfig,
    ScriptConfig,
)


def test_directory_config_computed_logs_dir(tmp_path):
    config = DirectoryConfig(home=tmp_path)

    assert config.logs_dir == tmp_path / "logs"
    assert config.logs_dir.exists()
    assert config.temp_dir is None


def test_script_config_defaults():
    config = ScriptConfig()

    assert config.path is None
    assert config.shell == "bash"
    assert config.max_output_bytes == 5 * 1024 * 1024
    assert config.timeout_sec is None


def test_script_config_rejects_non_positive_limit():
    with pytest.raises(ValidationError):
        ScriptConfig(max_output_bytes=0)


def test_logging_config_defaults():
    config = LoggingConfig()

    assert config.logger_name == "git_timesheet"
    assert config.level == "INFO"
    assert config.json_log is True
    assert config.console_output is False


def test_app_config_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("GIT_TIMESHEET_SCRIPT__PATH", str(tmp_path / "git-commits.sh"))
    monkeypatch.setenv("GIT_TIMESHEET_SCRIPT__SHELL", "sh")
    monkeypatch.setenv("GIT_TIMESHEET_SCRIPT__TIMEOUT_SEC", "90")
    monkeypatch.setenv("GIT_TIMESHEET_DIRECTORIES__HOME", str(tmp_path / "home"))
    monkeypatch.setenv("GIT_TIMESHEET_LOGGING__LEVEL", "DEBUG")

    config = AppConfig()

    assert config.script.path == tmp_path / "git-commits.sh"
    assert config.script.shell == "sh"
    assert config.script.timeout_sec == 90
    assert config.directories.home == tmp_path / "home"
    assert config.logging.level == "DEBUG"


def test_unrelated_env_vars_do_not_leak(monkeypatch):
    # nested models must not pick up PATH/SHELL/HOME from the environment
    monkeypatch.setenv("SHELL", "/bin/zsh")
    monkeypatch.setenv("PATH", "/usr/bin")

    config = AppConfig()

    assert config.script.shell == "bash"
    assert config.script.path is None


def test_app_config_is_frozen(tmp_path):
    config = AppConfig(directories=DirectoryConfig(home=tmp_path))

    with pytest.raises(ValidationError):
        config.script = ScriptConfig(shell="zsh")  # type: ignore[misc]


def test_app_config_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        AppConfig(unknown=True)  # type: ignore[call-arg]
