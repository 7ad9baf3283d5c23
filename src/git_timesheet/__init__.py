from .app.main import generate_report, generate_report_async, load_script_source, logs
from .core.domain.exceptions import (
    OutputTooLargeError,
    ScriptExecutionFailedError,
    ScriptUnavailableError,
    StagingFailedError,
    TimesheetError,
)

__all__ = [
    "generate_report",
    "generate_report_async",
    "load_script_source",
    "logs",
    "TimesheetError",
    "ScriptUnavailableError",
    "StagingFailedError",
    "ScriptExecutionFailedError",
    "OutputTooLargeError",
]

# stdlib logging defaults: attach NullHandler to prevent 'No handler' warnings
import logging
_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
