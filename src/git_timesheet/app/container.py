from __future__ import annotations

from dependency_injector import containers, providers

from ..core.ports import DefaultTokenGenerator
from ..core.services import InvocationOrchestrator
from ..core.usecases.generate_report import GenerateReportUseCase
from ..core.usecases.logs import LogsUseCase
from ..infra.clipboard import SystemClipboard
from ..infra.log_store import LogStore
from ..infra.logging import TimesheetLogger
from ..infra.script_source import FileScriptSource
from ..infra.script_stager import TempScriptStager
from ..infra.shell_runner import ShellCommandRunner


class Container(containers.DeclarativeContainer):
    """DI container fed from AppConfig via ``config.from_pydantic``."""

    config = providers.Configuration()

    # Logger (Resource: manages lifecycle with init/shutdown)
    logger = providers.Resource(
        TimesheetLogger,
        logs_dir=config.directories.logs_dir,
        logger_name=config.logging.logger_name,
        json_log=config.logging.json_log,
        console_output=config.logging.console_output,
        level=config.logging.level,
    )

    token_gen = providers.Singleton(DefaultTokenGenerator)

    stager = providers.Singleton(
        TempScriptStager,
        temp_dir=config.directories.temp_dir,
        token_gen=token_gen,
    )

    runner = providers.Singleton(
        ShellCommandRunner,
        max_output_bytes=config.script.max_output_bytes,
        timeout_sec=config.script.timeout_sec,
    )

    script_source = providers.Factory(
        FileScriptSource,
        script_path=config.script.path,
    )

    log_store = providers.Singleton(
        LogStore,
        logs_dir=config.directories.logs_dir,
    )

    clipboard = providers.Singleton(SystemClipboard)

    # Domain services
    orchestrator = providers.Factory(
        InvocationOrchestrator,
        stager=stager,
        runner=runner,
        logger=logger,
        shell=config.script.shell,
    )

    # Use cases
    generate_report_uc = providers.Factory(
        GenerateReportUseCase,
        orchestrator=orchestrator,
    )

    logs_uc = providers.Factory(
        LogsUseCase,
        log_store=log_store,
    )
