# src/ortooverlap/services/overlap_service.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..contracts.core import EmptyReason, OverlapResult
from ..contracts.errors import GeometryComputationFailure
from ..ports.geometry import Geometry, GeometryEnginePort


@dataclass(frozen=True)
class OverlapService:
    """
    Intersección de dos polígonos de extensión vía el motor geométrico.
    Función pura y determinista: sin reintentos.
    """
    engine: GeometryEnginePort

    def overlap(self, poly_a: Optional[Geometry], poly_b: Optional[Geometry]) -> OverlapResult:
        if poly_a is None and poly_b is None:
            return OverlapResult.empty(EmptyReason.MISSING_BOTH)
        if poly_a is None:
            return OverlapResult.empty(EmptyReason.MISSING_A)
        if poly_b is None:
            return OverlapResult.empty(EmptyReason.MISSING_B)

        try:
            inter = self.engine.intersection(poly_a, poly_b)
        except GeometryComputationFailure:
            return OverlapResult.empty(EmptyReason.GEOMETRY_ERROR)
        if inter is None:
            return OverlapResult.empty(EmptyReason.GEOMETRY_ERROR)
        if self.engine.is_empty(inter):
            return OverlapResult.empty(EmptyReason.DISJOINT)
        return OverlapResult.of(inter)


__all__ = ["OverlapService"]
