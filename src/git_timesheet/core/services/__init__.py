from __future__ import annotations

from .invocation_orchestrator import InvocationOrchestrator

__all__ = [
    "InvocationOrchestrator",
]
