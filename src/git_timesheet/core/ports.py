from __future__ import annotations

import secrets
import time
from pathlib import Path
from typing import Protocol

from .domain.models import StagedScript


class ScriptSourcePort(Protocol):
    """Port for obtaining the analysis script text."""

    def load(self) -> str:
        """Return the script source.

        Raises:
            ScriptUnavailableError: If the script cannot be read or is empty
        """
        ...


class ScriptStagerPort(Protocol):
    """Port owning the temporary files that hold staged scripts."""

    def stage(self, script_source: str) -> StagedScript:
        """Write the script to a fresh executable temp file.

        Raises:
            StagingFailedError: If the file cannot be written
        """
        ...

    def discard(self, path: Path) -> None:
        """Delete a staged script. Missing files are ignored.

        Raises:
            CleanupWarning: If the file exists but cannot be deleted
        """
        ...


class CommandRunnerPort(Protocol):
    """Port for running a shell command line and capturing its stdout."""

    def run(self, command: str) -> str:
        """Run the command to completion and return stdout as text.

        Raises:
            ScriptExecutionFailedError: On a non-zero exit status
            OutputTooLargeError: If stdout reaches the byte limit
        """
        ...


class LogStorePort(Protocol):
    """Port for reading invocation logs."""

    def tail(self, lines: int) -> list[str]:
        ...


class TokenGeneratorPort(Protocol):
    def generate(self) -> str:
        ...


class LoggerPort(Protocol):
    """Port for structured logging.

    Extra keyword arguments are emitted as structured fields.
    """

    def debug(self, message: str, **fields: object) -> None:
        ...

    def info(self, message: str, **fields: object) -> None:
        ...

    def warning(self, message: str, **fields: object) -> None:
        ...

    def error(self, message: str, exc_info: bool = False, **fields: object) -> None:
        ...

    def exception(self, message: str, **fields: object) -> None:
        ...


class DefaultTokenGenerator:
    """Millisecond timestamp plus a random nonce.

    The nonce keeps two invocations started in the same millisecond apart.
    """

    def generate(self) -> str:
        return f"{int(time.time() * 1000)}_{secrets.token_hex(4)}"
