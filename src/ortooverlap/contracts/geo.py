# src/ortooverlap/contracts/geo.py

from __future__ import annotations
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

import numpy as np
import numpy.typing as npt

GeoTransform = Tuple[float, float, float, float, float, float]
Point = Tuple[float, float]
Ring = Tuple[Point, Point, Point, Point, Point]

VALID_MASK_VALUE = 255

class Bounds(NamedTuple):
    minx: float; miny: float; maxx: float; maxy: float

# ---------- Cajas en espacio pixel / geográfico ----------
@dataclass(frozen=True)
class PixelBox:
    """
    Caja mínima de píxeles válidos. Los cuatro límites son INCLUSIVOS:
    `maxx`/`maxy` indexan la última columna/fila válida.
    """
    minx: int
    miny: int
    maxx: int
    maxy: int

    def __post_init__(self):
        if self.minx > self.maxx or self.miny > self.maxy:
            raise ValueError(f"PixelBox invertida: {self}")

    @property
    def width(self) -> int:
        return self.maxx - self.minx + 1

    @property
    def height(self) -> int:
        return self.maxy - self.miny + 1

    def contains(self, x: int, y: int) -> bool:
        return self.minx <= x <= self.maxx and self.miny <= y <= self.maxy

@dataclass(frozen=True)
class GeoBox:
    """
    Esquinas proyectadas (ul = (minx, miny) pixel, lr = (maxx+1, maxy+1) pixel).
    No se reordenan: con pixelH negativo `lry < uly`.
    """
    ulx: float
    uly: float
    lrx: float
    lry: float

    def as_bounds(self) -> Bounds:
        return Bounds(min(self.ulx, self.lrx), min(self.uly, self.lry),
                      max(self.ulx, self.lrx), max(self.uly, self.lry))

# ---------- Raster con máscara (puro dominio, sin GDAL) ----------
@dataclass(frozen=True)
class RasterHandle:
    """
    Raster ya decodificado por el adaptador de I/O.
    `mask` es uint8 (height, width): 255 = válido, resto = inválido.
    `transform` es None cuando el dataset no trae georreferencia.
    """
    uri: str
    width: int
    height: int
    mask: "npt.NDArray[np.uint8]"  # type: ignore[valid-type]
    transform: Optional[GeoTransform] = None
    band_count: int = 1
    color_interps: Tuple[str, ...] = ()
    alpha_band: Optional[int] = None

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Dimensiones inválidas: {self.width}x{self.height}")
        if self.mask.size != self.width * self.height:
            raise ValueError(
                f"Máscara de {self.mask.size} píxeles no coincide con {self.width}x{self.height}"
            )
        if self.transform is not None and len(self.transform) != 6:
            raise ValueError("GeoTransform debe tener 6 coeficientes")
        # Bloquea mutaciones accidentales sobre la máscara
        if hasattr(self.mask, "setflags"):
            try:
                self.mask.setflags(write=False)
            except ValueError:
                pass

    @property
    def has_transform(self) -> bool:
        return self.transform is not None

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

# ---------- GeoTransform helpers (afines a GDAL pero sin dependencia) ----------
def pixel_to_world(col: float, row: float, gt: GeoTransform) -> Tuple[float, float]:
    x0, px, rx, y0, ry, py = gt
    x = x0 + col * px + row * rx
    y = y0 + col * ry + row * py
    return x, y

def is_identity_transform(gt: GeoTransform) -> bool:
    return tuple(float(v) for v in gt) == (0.0, 1.0, 0.0, 0.0, 0.0, 1.0)

def pretty_bounds(b: Bounds, ndigits: int = 3) -> str:
    return (f"Bounds(minx={b.minx:.{ndigits}f}, miny={b.miny:.{ndigits}f}, "
            f"maxx={b.maxx:.{ndigits}f}, maxy={b.maxy:.{ndigits}f})")

def pretty_transform(gt: GeoTransform) -> str:
    return "[" + ", ".join(f"{float(v):g}" for v in gt) + "]"

__all__ = [
    "GeoTransform","Point","Ring","VALID_MASK_VALUE","Bounds","PixelBox","GeoBox",
    "RasterHandle","pixel_to_world","is_identity_transform",
    "pretty_bounds","pretty_transform",
]
