"""Provider wiring of the DI container."""
from git_timesheet.app.config import AppConfig, ScriptConfig
from git_timesheet.app.container import Container
from git_timesheet.infra.script_source import FileScriptSource


def _container(config: AppConfig) -> Container:
    container = Container()
    container.config.from_pydantic(config)
    return container


def test_script_source_uses_configured_path(app_config, tmp_path):
    script = tmp_path / "git-commits.sh"
    config = AppConfig(
        directories=app_config.directories,
        script=ScriptConfig(path=script, shell="sh"),
        logging=app_config.logging,
    )

    source = _container(config).script_source()

    assert isinstance(source, FileScriptSource)
    assert source.script_path == script


def test_script_source_path_can_be_overridden(app_config, tmp_path):
    override = tmp_path / "other.sh"
    override.write_text("#!/bin/sh\necho hi\n", encoding="utf-8")

    source = _container(app_config).script_source(script_path=override)

    assert source.script_path == override
    assert source.load() == "#!/bin/sh\necho hi\n"


def test_script_source_without_path(app_config):
    assert _container(app_config).script_source().script_path is None
