# src/ortooverlap/services/extent.py
from __future__ import annotations

from typing import Optional, Tuple

from ..contracts.geo import GeoBox, GeoTransform, PixelBox, Ring
from .projection import project

"""
Polígono de extensión a partir de la caja de píxeles válidos.

Simplificación asumida: se deriva SIEMPRE un único rectángulo por raster (la
caja envolvente de los píxeles válidos), no el contorno real de la zona válida.
El anillo es rectangular en la grilla pixel de origen; si el GeoTransform trae
términos de rotación (rx, ry != 0) el anillo NO se corrige y queda como
aproximación conocida.
"""


def project_box(box: PixelBox, height: int, transform: Optional[GeoTransform]) -> GeoBox:
    # esquina inferior-derecha exclusiva: última columna/fila válida + 1
    ulx, uly = project(box.minx, box.miny, transform, height)
    lrx, lry = project(box.maxx + 1, box.maxy + 1, transform, height)
    return GeoBox(ulx=ulx, uly=uly, lrx=lrx, lry=lry)


def ring_from_geobox(g: GeoBox) -> Ring:
    return (
        (g.ulx, g.uly),
        (g.lrx, g.uly),
        (g.lrx, g.lry),
        (g.ulx, g.lry),
        (g.ulx, g.uly),
    )


def build_with_box(box: PixelBox, width: int, height: int,
                   transform: Optional[GeoTransform] = None) -> Tuple[Ring, GeoBox]:
    if box.maxx >= width or box.maxy >= height:
        raise ValueError(f"PixelBox {box} fuera de un raster {width}x{height}")
    gbox = project_box(box, height, transform)
    return ring_from_geobox(gbox), gbox


def build(box: PixelBox, width: int, height: int, transform: Optional[GeoTransform] = None) -> Ring:
    """Anillo cerrado de 5 vértices: ul -> (lrx,uly) -> lr -> (ulx,lry) -> ul."""
    return build_with_box(box, width, height, transform)[0]


__all__ = ["build", "build_with_box", "project_box", "ring_from_geobox"]
