# src/ortooverlap/adapters/shapely_geometry.py
from __future__ import annotations

from typing import Optional, Sequence

try:  # GEOS via shapely
    import shapely
    from shapely.errors import GEOSException
    from shapely.geometry import Polygon
    _HAS_SHAPELY = True
except Exception:  # pragma: no cover
    _HAS_SHAPELY = False

from ..contracts.errors import GeometryComputationFailure, GeometryUnavailable
from ..contracts.geo import Bounds, Point
from ..ports.geometry import Geometry, GeometryEnginePort


class ShapelyGeometryEngine(GeometryEnginePort):
    """Motor geométrico sobre shapely (GEOS).

    `available` se resuelve una vez al importar el módulo. El ciclo de vida
    initialize()/shutdown() lo controla el driver; fuera de él las operaciones
    fallan en vez de crear geometrías huérfanas.
    """

    def __init__(self, enabled: bool = True):
        self._available = bool(enabled) and _HAS_SHAPELY
        self._active = False

    @property
    def available(self) -> bool:
        return self._available

    @property
    def active(self) -> bool:
        return self._active

    def initialize(self) -> None:
        if not self._available:
            raise GeometryUnavailable("shapely/GEOS no disponible")
        self._active = True

    def shutdown(self) -> None:
        self._active = False

    def _require(self) -> None:
        if not self._available:
            raise GeometryUnavailable("shapely/GEOS no disponible")
        if not self._active:
            raise RuntimeError("Motor geométrico no inicializado (llama initialize())")

    # --------------- GeometryEnginePort ---------------
    def polygon(self, ring: Sequence[Point]) -> Geometry:
        self._require()
        return Polygon([(float(x), float(y)) for x, y in ring])

    def intersection(self, a: Geometry, b: Geometry) -> Optional[Geometry]:
        self._require()
        try:
            return shapely.intersection(a, b)
        except GEOSException as e:
            raise GeometryComputationFailure(str(e)) from e

    def envelope(self, g: Geometry) -> Bounds:
        self._require()
        minx, miny, maxx, maxy = g.envelope.bounds
        return Bounds(minx, miny, maxx, maxy)

    def is_empty(self, g: Optional[Geometry]) -> bool:
        return g is None or bool(g.is_empty)


__all__ = ["ShapelyGeometryEngine"]
