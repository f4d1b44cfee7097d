from pathlib import Path

import numpy as np
import pytest

rasterio = pytest.importorskip("rasterio")
from rasterio.enums import ColorInterp
from rasterio.transform import Affine


def write_rgba(path: Path, alpha: np.ndarray, gt=None, crs="EPSG:32719", tag_alpha=True, bands=4) -> Path:
    """GeoTIFF uint8 de `bands` bandas; la última es la máscara `alpha`."""
    h, w = alpha.shape
    profile = dict(driver="GTiff", width=w, height=h, count=bands, dtype="uint8")
    if gt is not None:
        x0, px, rx, y0, ry, py = gt
        profile["transform"] = Affine(px, rx, x0, ry, py, y0)
        profile["crs"] = crs
    data = np.full((bands, h, w), 100, dtype=np.uint8)
    data[-1] = alpha
    with rasterio.open(path, "w", **profile) as dst:
        dst.write(data)
        if tag_alpha and bands >= 2:
            base = [ColorInterp.red, ColorInterp.green, ColorInterp.blue][: bands - 1]
            base += [ColorInterp.undefined] * (bands - 1 - len(base))
            dst.colorinterp = base + [ColorInterp.alpha]
    return path
