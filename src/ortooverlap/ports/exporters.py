# src/ortooverlap/ports/exporters.py
from __future__ import annotations

from typing import Protocol, runtime_checkable

URI = str

@runtime_checkable
class DocumentWriterPort(Protocol):
    """
    Escribe el documento serializado (texto UTF-8) en destino.
    Devuelve la URI efectivamente escrita.
    """
    def write(self, uri: URI, text: str) -> URI: ...

__all__ = ["DocumentWriterPort", "URI"]
