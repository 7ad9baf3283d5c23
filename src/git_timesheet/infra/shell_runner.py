from __future__ import annotations

import logging
import os
import signal
import subprocess
import threading
from typing import IO

from ..core.domain.exceptions import (
    OutputTooLargeError,
    ScriptExecutionFailedError,
    ScriptTimeoutError,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_OUTPUT_BYTES = 5 * 1024 * 1024
DEFAULT_MAX_STDERR_BYTES = 64 * 1024
_CHUNK_SIZE = 64 * 1024
_POSIX = os.name != "nt"


class ShellCommandRunner:
    """Runs a command line through the host shell with bounded stdout capture.

    stdout is read incrementally; the process group is killed as soon as the
    captured size reaches ``max_output_bytes``. stderr is drained on a
    background thread, kept for diagnostics and never mixed into the result.
    """

    def __init__(
        self,
        *,
        max_output_bytes: int = DEFAULT_MAX_OUTPUT_BYTES,
        timeout_sec: float | None = None,
        max_stderr_bytes: int = DEFAULT_MAX_STDERR_BYTES,
        encoding: str = "utf-8",
    ) -> None:
        self.max_output_bytes = max_output_bytes
        self.timeout_sec = timeout_sec
        self.max_stderr_bytes = max_stderr_bytes
        self.encoding = encoding

    def run(self, command: str) -> str:
        try:
            proc = subprocess.Popen(
                command,
                shell=True,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                start_new_session=_POSIX,
            )
        except OSError as e:
            raise ScriptExecutionFailedError(exit_code=None, stderr=str(e)) from e

        stderr_buf = bytearray()
        stderr_reader = threading.Thread(
            target=self._drain,
            args=(proc.stderr, stderr_buf),
            name="timesheet-stderr",
            daemon=True,
        )
        stderr_reader.start()

        timed_out = threading.Event()
        timer: threading.Timer | None = None
        if self.timeout_sec is not None:
            timer = threading.Timer(self.timeout_sec, self._expire, args=(proc, timed_out))
            timer.daemon = True
            timer.start()

        stdout_buf = bytearray()
        overflow = False
        try:
            assert proc.stdout is not None
            while True:
                chunk = proc.stdout.read1(_CHUNK_SIZE)
                if not chunk:
                    break
                stdout_buf += chunk
                if len(stdout_buf) >= self.max_output_bytes:
                    overflow = True
                    self._kill(proc)
                    break
            exit_code = proc.wait()
        finally:
            if timer is not None:
                timer.cancel()
            if proc.stdout is not None:
                proc.stdout.close()
            if proc.poll() is None:
                self._kill(proc)
                proc.wait()
            stderr_reader.join()
            if proc.stderr is not None:
                proc.stderr.close()

        stderr_text = stderr_buf.decode(self.encoding, errors="replace")

        if overflow:
            logger.warning("output_too_large", extra={"limit_bytes": self.max_output_bytes})
            raise OutputTooLargeError(self.max_output_bytes)
        if timed_out.is_set():
            raise ScriptTimeoutError(self.timeout_sec or 0.0, stderr=stderr_text)
        if exit_code != 0:
            raise ScriptExecutionFailedError(exit_code=exit_code, stderr=stderr_text)

        return stdout_buf.decode(self.encoding, errors="replace")

    def _drain(self, stream: IO[bytes] | None, buf: bytearray) -> None:
        if stream is None:
            return
        for chunk in iter(lambda: stream.read1(_CHUNK_SIZE), b""):
            room = self.max_stderr_bytes - len(buf)
            if room > 0:
                buf += chunk[:room]

    def _expire(self, proc: subprocess.Popen, timed_out: threading.Event) -> None:
        if proc.poll() is None:
            timed_out.set()
            self._kill(proc)

    @staticmethod
    def _kill(proc: subprocess.Popen) -> None:
        try:
            if _POSIX:
                os.killpg(proc.pid, signal.SIGKILL)
            else:
                proc.kill()
        except ProcessLookupError:
            pass
