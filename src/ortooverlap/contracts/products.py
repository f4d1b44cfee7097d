from __future__ import annotations

from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .geo import GeoTransform, pretty_transform

INTERSECTION_NAME = "Intersection Area"

Position = Tuple[float, float]


# -------------------------
# Documento GeoJSON de salida
# -------------------------
class PolygonGeometry(BaseModel):
    """Polygon GeoJSON de un solo anillo exterior (siempre 5 posiciones, cerrado)."""
    model_config = ConfigDict(frozen=True)
    type: Literal["Polygon"] = "Polygon"
    coordinates: Tuple[Tuple[Position, ...], ...]

    @field_validator("coordinates")
    @classmethod
    def _closed_rings(cls, v: Tuple[Tuple[Position, ...], ...]) -> Tuple[Tuple[Position, ...], ...]:
        for ring in v:
            if len(ring) < 4:
                raise ValueError("anillo con menos de 4 posiciones")
            if ring[0] != ring[-1]:
                raise ValueError("anillo no cerrado (primer punto != último)")
        return v


class Feature(BaseModel):
    model_config = ConfigDict(frozen=True)
    type: Literal["Feature"] = "Feature"
    properties: Dict[str, str] = Field(default_factory=dict)
    geometry: PolygonGeometry


class FeatureCollection(BaseModel):
    """
    Orden de claves estable: `type, features` / `type, properties, geometry`
    (sigue el orden de declaración de los campos).
    """
    model_config = ConfigDict(frozen=True)
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: List[Feature] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.features


# -------------------------
# Resumen de raster (diagnóstico)
# -------------------------
class RasterSummary(BaseModel):
    model_config = ConfigDict(frozen=True)
    uri: str
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    band_count: int = Field(ge=0)
    color_interps: Tuple[str, ...] = ()
    alpha_band: Optional[int] = None
    opaque_count: int = Field(ge=0)
    transform: Optional[GeoTransform] = None

    @property
    def opaque_percent(self) -> float:
        return self.opaque_count * 100.0 / float(self.width * self.height)

    def lines(self) -> List[str]:
        out = [
            f"Raster: {self.uri}",
            f"Size: {self.width}x{self.height}",
            f"Bands: {self.band_count}",
        ]
        for i, name in enumerate(self.color_interps, start=1):
            tag = " (mask)" if self.alpha_band == i else ""
            out.append(f"  Band {i}: {name}{tag}")
        out.append(f"Opaque pixels: {self.opaque_count} ({self.opaque_percent:.2f}%)")
        if self.transform is not None:
            out.append(f"GeoTransform: {pretty_transform(self.transform)}")
        else:
            out.append("GeoTransform: not found (pixel coordinates, Y flipped)")
        return out


__all__ = [
    "INTERSECTION_NAME", "Position", "PolygonGeometry", "Feature",
    "FeatureCollection", "RasterSummary",
]
