# src/ortooverlap/adapters/console_reporter.py
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import List, TextIO, Tuple

from ..ports.reporter import ReporterPort


@dataclass
class ConsoleReporter(ReporterPort):
    """Líneas etiquetadas [INFO]/[OK]/[WARN] a stdout y [ERROR] a stderr."""
    out: TextIO = field(default_factory=lambda: sys.stdout)
    err: TextIO = field(default_factory=lambda: sys.stderr)
    quiet: bool = False

    def _emit(self, tag: str, message: str, stream: TextIO) -> None:
        print(f"[{tag}] {message}", file=stream)

    def report(self, message: str) -> None:
        if not self.quiet:
            self._emit("INFO", message, self.out)

    def ok(self, message: str) -> None:
        if not self.quiet:
            self._emit("OK", message, self.out)

    def warn(self, message: str) -> None:
        self._emit("WARN", message, self.out)

    def error(self, message: str) -> None:
        self._emit("ERROR", message, self.err)


@dataclass
class MemoryReporter(ReporterPort):
    """Acumula (nivel, mensaje) en memoria; útil para tests y para embebido."""
    records: List[Tuple[str, str]] = field(default_factory=list)

    def report(self, message: str) -> None:
        self.records.append(("INFO", message))

    def ok(self, message: str) -> None:
        self.records.append(("OK", message))

    def warn(self, message: str) -> None:
        self.records.append(("WARN", message))

    def error(self, message: str) -> None:
        self.records.append(("ERROR", message))

    def messages(self, level: str | None = None) -> List[str]:
        return [m for lv, m in self.records if level is None or lv == level]


__all__ = ["ConsoleReporter", "MemoryReporter"]
