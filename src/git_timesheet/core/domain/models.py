from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class InvocationRequest:
    """Everything needed to run the analysis script once.

    ``day_offset`` selects the calendar day relative to today (0 = today,
    negative = past days). ``script_source`` is the full text of the external
    analysis script; where it came from is the caller's concern.
    """
    repository_path: Path
    day_offset: int
    script_source: str
    force_fetch: bool = False


@dataclass(frozen=True)
class StagedScript:
    """Executable temp copy of the script, owned by a single invocation."""
    path: Path
    mode: int = 0o755


@dataclass(frozen=True)
class InvocationResult:
    report: str  # raw stdout, not trimmed
    script_path: Path
    command: str
    duration_sec: float
