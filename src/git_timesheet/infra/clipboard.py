from __future__ import annotations

import platform
import subprocess

from ..core.domain.exceptions import ClipboardError


class SystemClipboard:
    """Copies text using the platform's clipboard command.

    macOS uses ``pbcopy``, Windows ``clip`` and everything else ``xclip``.
    """

    def _command(self) -> tuple[list[str], str]:
        system = platform.system()
        if system == "Windows":
            return ["clip"], "utf-16-le"
        if system == "Darwin":
            return ["pbcopy"], "utf-8"
        return ["xclip", "-selection", "clipboard"], "utf-8"

    def copy(self, text: str) -> None:
        cmd, encoding = self._command()
        try:
            subprocess.run(
                cmd,
                input=text.encode(encoding),
                check=True,
                capture_output=True,
            )
        except FileNotFoundError as e:
            raise ClipboardError(f"Clipboard tool not found: {cmd[0]}") from e
        except subprocess.CalledProcessError as e:
            message = f"{cmd[0]} exited with status {e.returncode}"
            detail = e.stderr.decode("utf-8", errors="replace").strip() if e.stderr else ""
            if detail:
                message = f"{message}: {detail}"
            raise ClipboardError(message) from e
