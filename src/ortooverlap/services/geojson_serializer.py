# src/ortooverlap/services/geojson_serializer.py
from __future__ import annotations

from dataclasses import dataclass

from ..contracts.core import OverlapResult
from ..contracts.geo import Bounds, Ring
from ..contracts.products import (
    INTERSECTION_NAME, Feature, FeatureCollection, PolygonGeometry,
)
from ..ports.geometry import GeometryEnginePort

"""
Serialización GeoJSON del resultado de solape.

Limitación conocida: se exporta el ENVELOPE (rectángulo alineado a ejes) de la
intersección, no su contorno exacto. El cálculo del envelope está aislado en
`envelope_ring()` para que un cambio futuro sólo toque este paso.
"""


def ring_from_bounds(b: Bounds) -> Ring:
    minx, miny, maxx, maxy = (float(v) for v in b)
    return (
        (minx, miny),
        (maxx, miny),
        (maxx, maxy),
        (minx, maxy),
        (minx, miny),
    )


@dataclass(frozen=True)
class GeoJSONSerializer:
    engine: GeometryEnginePort
    feature_name: str = INTERSECTION_NAME
    indent: int = 4

    def envelope_ring(self, result: OverlapResult) -> Ring:
        return ring_from_bounds(self.engine.envelope(result.geometry))

    def to_collection(self, result: OverlapResult) -> FeatureCollection:
        if result.is_empty:
            return FeatureCollection()
        feature = Feature(
            properties={"name": self.feature_name},
            geometry=PolygonGeometry(coordinates=(self.envelope_ring(result),)),
        )
        return FeatureCollection(features=[feature])

    def serialize(self, result: OverlapResult) -> str:
        return self.to_collection(result).model_dump_json(indent=self.indent)


__all__ = ["GeoJSONSerializer", "ring_from_bounds"]
