# src/ortooverlap/ports/reporter.py
from __future__ import annotations

from typing import Protocol, runtime_checkable

@runtime_checkable
class ReporterPort(Protocol):
    """Canal de diagnóstico legible (consola, log, memoria en tests)."""
    def report(self, message: str) -> None: ...
    def ok(self, message: str) -> None: ...
    def warn(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...

__all__ = ["ReporterPort"]
