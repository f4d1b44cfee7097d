# src/ortooverlap/services/projection.py
from __future__ import annotations

from typing import Optional, Tuple

from ..contracts.geo import GeoTransform, pixel_to_world


def project(x: float, y: float, transform: Optional[GeoTransform], height: int) -> Tuple[float, float]:
    """
    Pixel -> coordenadas geográficas.

    Con transform: afín estándar de 6 parámetros (origen en esquina sup-izq).
    Sin transform: `(x, height - y)`, es decir coordenadas pixel con el eje Y
    invertido usando la altura de la imagen. No son coordenadas geográficas
    reales, pero mantienen un espacio usable para rasters sin georreferencia.
    """
    if transform is not None:
        return pixel_to_world(x, y, transform)
    return float(x), float(height - y)


__all__ = ["project"]
