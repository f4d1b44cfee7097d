# src/ortooverlap/ports/geometry.py
from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence, Tuple, runtime_checkable

from ..contracts.geo import Bounds, Point

Geometry = Any

@runtime_checkable
class GeometryEnginePort(Protocol):
    """
    Motor de geometría computacional (GEOS u otro).
    Ciclo de vida: initialize()/shutdown() los llama SOLO el driver del pipeline.
    `available` se resuelve una vez al importar el adaptador.
    """
    @property
    def available(self) -> bool: ...
    def initialize(self) -> None: ...
    def shutdown(self) -> None: ...
    def polygon(self, ring: Sequence[Point]) -> Geometry: ...
    def intersection(self, a: Geometry, b: Geometry) -> Optional[Geometry]: ...
    def envelope(self, g: Geometry) -> Bounds: ...
    def is_empty(self, g: Optional[Geometry]) -> bool: ...

__all__ = ["GeometryEnginePort", "Geometry"]
