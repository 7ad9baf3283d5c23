from pathlib import Path

import pytest
from helpers import mark_by_dir

from git_timesheet.app.config import AppConfig, DirectoryConfig, LoggingConfig, ScriptConfig


TESTS = Path(__file__).parent



def pytest_collection_modifyitems(config, items):
    # Mark tests by directory structure
    mark_by_dir(items, TESTS / "git_timesheet" / "core", pytest.mark.unit)
    mark_by_dir(items, TESTS / "git_timesheet" / "infra", pytest.mark.integration)
    mark_by_dir(items, TESTS / "git_timesheet" / "app", pytest.mark.e2e)


@pytest.fixture
def staging_dir(tmp_path) -> Path:
    path = tmp_path / "staging"
    path.mkdir()
    return path


@pytest.fixture
def app_config(tmp_path, staging_dir) -> AppConfig:
    """Config isolated under tmp_path, running scripts with plain sh."""
    return AppConfig(
        directories=DirectoryConfig(home=tmp_path / "home", temp_dir=staging_dir),
        script=ScriptConfig(shell="sh"),
        logging=LoggingConfig(level="DEBUG"),
    )


@pytest.fixture
def repo_dir(tmp_path) -> Path:
    path = tmp_path / "repo"
    path.mkdir()
    return path
