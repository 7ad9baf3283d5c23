"""Domain exceptions for git_timesheet."""

from __future__ import annotations

from pathlib import Path


class TimesheetError(Exception):
    """Base class for every classified timesheet failure."""


class ScriptUnavailableError(TimesheetError):
    """Raised when the analysis script source cannot be obtained.

    This is surfaced by the caller before any staging is attempted.
    """

    def __init__(self, script_path: Path | None, message: str | None = None) -> None:
        self.script_path = script_path
        if message is None:
            message = (
                f"Could not load the timesheet script. "
                f"Please ensure it exists at {script_path}."
            )
        super().__init__(message)


class InvalidRequestError(TimesheetError):
    """Raised when an invocation request cannot be executed safely."""


class StagingFailedError(TimesheetError):
    """Raised when the temporary script file cannot be written.

    ``path`` is the location that was allocated (possibly holding a partial
    file) so the caller can still attempt removal.
    """

    def __init__(self, path: Path | None, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to stage script at {path}: {reason}")


class ScriptExecutionFailedError(TimesheetError):
    """Raised when the script exits with a non-zero status."""

    def __init__(self, exit_code: int | None, stderr: str = "", message: str | None = None) -> None:
        self.exit_code = exit_code
        self.stderr = stderr
        if message is None:
            detail = stderr.strip()
            message = f"Script exited with status {exit_code}"
            if detail:
                message = f"{message}: {detail}"
        super().__init__(message)


class ScriptTimeoutError(ScriptExecutionFailedError):
    """Raised when the script runs longer than the configured timeout."""

    def __init__(self, timeout_sec: float, stderr: str = "") -> None:
        self.timeout_sec = timeout_sec
        super().__init__(
            exit_code=None,
            stderr=stderr,
            message=f"Script did not finish within {timeout_sec:g} seconds",
        )


class OutputTooLargeError(TimesheetError):
    """Raised when captured stdout reaches the configured byte limit."""

    def __init__(self, limit_bytes: int) -> None:
        self.limit_bytes = limit_bytes
        super().__init__(f"Script output exceeded the {limit_bytes} byte limit")


class CleanupWarning(TimesheetError):
    """Raised by the stager when a staged script cannot be deleted.

    Never propagated past the orchestrator: it is logged and the primary
    outcome of the invocation is kept.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to delete temporary script file {path}: {reason}")


class ClipboardError(TimesheetError):
    """Raised when the report could not be copied to the clipboard."""
