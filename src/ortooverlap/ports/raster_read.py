# src/ortooverlap/ports/raster_read.py
from __future__ import annotations

from typing import Protocol, runtime_checkable
from ..contracts.geo import RasterHandle

URI = str

@runtime_checkable
class RasterReaderPort(Protocol):
    """
    Lector de raster con máscara de validez (GeoTIFF/COG, etc.).
    Reglas:
      - open() devuelve SIEMPRE un RasterHandle con máscara uint8 (height, width).
      - Fallos de apertura -> RasterLoadFailure; sin alfa -> MissingAlphaChannelFailure.
    """
    def open(self, uri: URI) -> RasterHandle: ...
    def exists(self, uri: URI) -> bool: ...

__all__ = ["RasterReaderPort", "URI"]
