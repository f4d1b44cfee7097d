# src/ortooverlap/services/mask_scanner.py
from __future__ import annotations

from typing import Optional

import numpy as np
import numpy.typing as npt

from ..contracts.errors import NoValidDataFailure
from ..contracts.geo import PixelBox, VALID_MASK_VALUE

"""
Escaneo de máscara de validez.
Barrido completo del frame (sin muestreo): la validez no tiene localidad espacial asumida.
"""


def _as_grid(mask: "npt.ArrayLike", width: int, height: int) -> np.ndarray:
    arr = np.asarray(mask)
    if arr.size != width * height:
        raise ValueError(f"Máscara de {arr.size} píxeles no coincide con {width}x{height}")
    # acepta buffer plano (row-major) o 2D
    return arr.reshape(height, width)


def valid_pixels(mask: "npt.ArrayLike", width: int, height: int) -> np.ndarray:
    """Matriz booleana (height, width): True donde mask == 255."""
    return _as_grid(mask, width, height) == VALID_MASK_VALUE


def count_valid(mask: "npt.ArrayLike", width: int, height: int) -> int:
    return int(np.count_nonzero(valid_pixels(mask, width, height)))


def scan(mask: "npt.ArrayLike", width: int, height: int) -> Optional[PixelBox]:
    """
    Caja mínima (inclusiva) que contiene todos los píxeles == 255.
    Devuelve None si no hay ningún píxel válido (NoData); no es un error.
    """
    valid = valid_pixels(mask, width, height)
    rows = np.flatnonzero(valid.any(axis=1))
    if rows.size == 0:
        return None
    cols = np.flatnonzero(valid.any(axis=0))
    return PixelBox(
        minx=int(cols[0]),
        miny=int(rows[0]),
        maxx=int(cols[-1]),
        maxy=int(rows[-1]),
    )


def scan_or_raise(mask: "npt.ArrayLike", width: int, height: int, *, uri: str = "") -> PixelBox:
    box = scan(mask, width, height)
    if box is None:
        raise NoValidDataFailure(uri)
    return box


__all__ = ["scan", "scan_or_raise", "count_valid", "valid_pixels"]
