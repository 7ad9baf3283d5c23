from __future__ import annotations

import os
import re
from enum import Enum

from .exceptions import InvalidRequestError
from .models import InvocationRequest


_DRIVE_PREFIX = re.compile(r"^([A-Za-z]):")
# Characters a POSIX shell still interprets inside double quotes.
_DQUOTE_SPECIAL = re.compile(r"([\\$`])")


class PlatformKind(str, Enum):
    """Path syntax of the host filesystem."""

    POSIX = "posix"
    WINDOWS = "windows"

    @classmethod
    def current(cls) -> "PlatformKind":
        return cls.WINDOWS if os.name == "nt" else cls.POSIX


def normalize_for_shell(native_path: str, platform_kind: PlatformKind) -> str:
    """Convert a native path into the form a POSIX shell expects.

    On Windows hosts ``C:\\Users\\me\\x.sh`` becomes ``/c/Users/me/x.sh``.
    POSIX paths are returned unchanged.
    """
    if platform_kind is PlatformKind.POSIX:
        return native_path

    path = native_path.replace("\\", "/")
    match = _DRIVE_PREFIX.match(path)
    if match:
        path = f"/{match.group(1).lower()}{path[match.end():]}"
    return path


def _quote(value: str, what: str) -> str:
    """Double-quote ``value`` so the shell passes it through literally."""
    if '"' in value:
        raise InvalidRequestError(f"{what} must not contain a double quote: {value}")
    return '"' + _DQUOTE_SPECIAL.sub(r"\\\1", value) + '"'


def build_command(shell: str, script_path: str, request: InvocationRequest) -> str:
    """Build the single command line that runs the staged script.

    Args:
        shell: POSIX shell interpreter (e.g. ``bash``)
        script_path: Shell-normalized path of the staged script
        request: Invocation parameters

    Returns:
        ``<shell> "<script>" -r "<repo>" -d <offset>`` with a trailing ``-f``
        when a force fetch was requested. ``$``, backquote and backslash in
        the quoted paths are backslash-escaped.

    Raises:
        InvalidRequestError: If a quoted value contains a double quote
    """
    parts = [
        shell,
        _quote(script_path, "Script path"),
        "-r",
        _quote(str(request.repository_path), "Repository path"),
        "-d",
        str(int(request.day_offset)),
    ]
    if request.force_fetch:
        parts.append("-f")
    return " ".join(parts)
