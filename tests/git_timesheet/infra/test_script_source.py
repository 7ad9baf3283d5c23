"""Tests for FileScriptSource."""
import pytest

from git_timesheet.core.domain.exceptions import ScriptUnavailableError
from git_timesheet.infra.script_source import FileScriptSource


def test_load_returns_exact_text(tmp_path):
    path = tmp_path / "git-commits.sh"
    path.write_bytes(b"#!/bin/bash\r\necho hi\n")

    assert FileScriptSource(script_path=path).load() == "#!/bin/bash\r\necho hi\n"


def test_missing_file_is_unavailable(tmp_path):
    path = tmp_path / "git-commits.sh"

    with pytest.raises(ScriptUnavailableError) as excinfo:
        FileScriptSource(script_path=path).load()

    assert excinfo.value.script_path == path
    assert "git-commits.sh" in str(excinfo.value)


def test_empty_file_is_unavailable(tmp_path):
    path = tmp_path / "git-commits.sh"
    path.write_text("", encoding="utf-8")

    with pytest.raises(ScriptUnavailableError, match="empty"):
        FileScriptSource(script_path=path).load()


def test_unconfigured_path_is_unavailable():
    with pytest.raises(ScriptUnavailableError, match="GIT_TIMESHEET_SCRIPT__PATH"):
        FileScriptSource(script_path=None).load()
