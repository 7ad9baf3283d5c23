import os
from pathlib import Path

import pytest


requires_posix_shell = pytest.mark.skipif(os.name == "nt", reason="needs a POSIX sh")


def mark_by_dir(items, base_dir, marker):
    base = Path(base_dir).resolve()
    for item in items:
        # pytest 7/8: item.path (Path) on newer versions, item.fspath on older ones
        p = getattr(item, "path", None)
        p = Path(p) if p is not None else Path(str(getattr(item, "fspath")))
        try:
            p.resolve().relative_to(base)
        except ValueError:
            continue
        item.add_marker(marker)


def write_script(path: Path, body: str) -> Path:
    """Write a POSIX shell stub used in place of the real analysis script."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\n" + body, encoding="utf-8", newline="\n")
    return path


# Echoes the parsed arguments back, one line.
ECHO_ARGS_SCRIPT = """\
repo=""
day=""
fetch=no
while [ $# -gt 0 ]; do
  case "$1" in
    -r) repo="$2"; shift 2 ;;
    -d) day="$2"; shift 2 ;;
    -f) fetch=yes; shift ;;
    *) shift ;;
  esac
done
printf 'repo=%s day=%s fetch=%s\\n' "$repo" "$day" "$fetch"
"""

REPORT_SCRIPT = "printf '3 commits, 2h15m\\n'\n"

FAILING_SCRIPT = "echo 'repo not found' >&2\nexit 1\n"
