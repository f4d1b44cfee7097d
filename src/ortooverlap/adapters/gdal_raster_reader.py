# src/ortooverlap/adapters/gdal_raster_reader.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import os
import numpy as np

# Try rasterio first; fallback to GDAL; last resort tifffile
try:  # rasterio path
    import rasterio
    from rasterio.errors import RasterioIOError
    from rasterio.transform import Affine
    _HAS_RASTERIO = True
except Exception:  # pragma: no cover
    _HAS_RASTERIO = False

try:  # GDAL path
    from osgeo import gdal  # type: ignore
    _HAS_GDAL = True
except Exception:  # pragma: no cover
    _HAS_GDAL = False

try:  # tifffile minimal path (no georeferencing)
    import tifffile as tiff  # type: ignore
    _HAS_TIFFILE = True
except Exception:  # pragma: no cover
    _HAS_TIFFILE = False

from ..contracts.errors import MissingAlphaChannelFailure, RasterLoadFailure
from ..contracts.geo import GeoTransform, RasterHandle, is_identity_transform
from ..ports.raster_read import RasterReaderPort

ALPHA = "Alpha"


def find_alpha_band(color_interps: Sequence[str], band_count: int) -> Optional[int]:
    """
    Índice 1-based de la banda de máscara:
      1) primera banda con interpretación de color Alpha;
      2) si no hay, la última banda cuando hay >= 4 (RGBA sin etiquetar);
      3) si no, None.
    """
    for i, name in enumerate(color_interps, start=1):
        if name.lower() == ALPHA.lower():
            return i
    if band_count >= 4:
        return band_count
    return None


def to_byte_mask(arr: np.ndarray) -> np.ndarray:
    """Convierte a uint8 saturando a [0, 255] (semántica RasterIO GDT_Byte)."""
    if arr.dtype == np.uint8:
        return arr
    a = np.nan_to_num(arr.astype(np.float64, copy=False), nan=0.0)
    return np.clip(np.rint(a), 0, 255).astype(np.uint8)


def _affine_to_gt(a: "Affine") -> GeoTransform:
    return (a.c, a.a, a.b, a.f, a.d, a.e)


@dataclass(frozen=True)
class GdalMaskReader(RasterReaderPort):
    """Lector de raster + máscara alfa. Prefiere rasterio; si no, GDAL; último recurso, tifffile.

    Regla: `open()` devuelve un **RasterHandle** con la banda alfa como máscara uint8.
    """

    # --------------- rasterio ---------------
    def _open_with_rasterio(self, uri: str) -> RasterHandle:
        assert _HAS_RASTERIO
        try:
            ds_ctx = rasterio.open(uri)
        except RasterioIOError as e:
            raise RasterLoadFailure(uri, str(e)) from e
        with ds_ctx as ds:
            interps = tuple(ci.name.capitalize() for ci in ds.colorinterp)
            alpha = find_alpha_band(interps, ds.count)
            if alpha is None:
                raise MissingAlphaChannelFailure(uri, ds.count)
            mask = to_byte_mask(ds.read(alpha))
            gt: Optional[GeoTransform] = _affine_to_gt(ds.transform)
            gcps, _ = ds.gcps
            # rasterio devuelve identidad cuando no hay geotransform
            if ds.crs is None and not gcps and is_identity_transform(gt):
                gt = None
            return RasterHandle(
                uri=uri, width=ds.width, height=ds.height, mask=mask,
                transform=gt, band_count=ds.count, color_interps=interps, alpha_band=alpha,
            )

    # --------------- GDAL ---------------
    def _open_with_gdal(self, uri: str) -> RasterHandle:
        assert _HAS_GDAL
        try:
            ds = gdal.Open(uri, gdal.GA_ReadOnly)
        except RuntimeError as e:
            raise RasterLoadFailure(uri, str(e)) from e
        if ds is None:
            raise RasterLoadFailure(uri)
        try:
            count = ds.RasterCount
            interps = tuple(
                gdal.GetColorInterpretationName(ds.GetRasterBand(i).GetColorInterpretation())
                for i in range(1, count + 1)
            )
            alpha = find_alpha_band(interps, count)
            if alpha is None:
                raise MissingAlphaChannelFailure(uri, count)
            arr = ds.GetRasterBand(alpha).ReadAsArray(buf_type=gdal.GDT_Byte)
            if arr is None:
                raise RasterLoadFailure(uri, f"no se pudo leer la banda {alpha}")
            gt = ds.GetGeoTransform(can_return_null=True)
            return RasterHandle(
                uri=uri, width=ds.RasterXSize, height=ds.RasterYSize, mask=to_byte_mask(arr),
                transform=tuple(float(v) for v in gt) if gt is not None else None,  # type: ignore[arg-type]
                band_count=count, color_interps=interps, alpha_band=alpha,
            )
        finally:
            ds = None  # cierre explícito

    # --------------- tifffile ---------------
    def _open_with_tifffile(self, uri: str) -> RasterHandle:
        assert _HAS_TIFFILE
        try:
            tf = tiff.TiffFile(uri)
        except (OSError, tiff.TiffFileError) as e:
            raise RasterLoadFailure(uri, str(e)) from e
        with tf:
            page = tf.pages[0]
            arr = page.asarray()
            interps = _tifffile_interps(page)
            count = len(interps)
            alpha = find_alpha_band(interps, count)
            if alpha is None:
                raise MissingAlphaChannelFailure(uri, count)
            if arr.ndim == 2:
                band = arr
            elif page.planarconfig == tiff.PLANARCONFIG.SEPARATE:
                band = arr[alpha - 1]
            else:
                band = arr[..., alpha - 1]
            h, w = band.shape
            return RasterHandle(
                uri=uri, width=w, height=h, mask=to_byte_mask(band),
                transform=None,  # sin georreferencia
                band_count=count, color_interps=interps, alpha_band=alpha,
            )

    # --------------- RasterReaderPort ---------------
    def open(self, uri: str) -> RasterHandle:
        uri = str(uri)
        if not self.exists(uri):
            raise RasterLoadFailure(uri, "archivo no encontrado")
        if _HAS_RASTERIO:
            return self._open_with_rasterio(uri)
        if _HAS_GDAL:
            return self._open_with_gdal(uri)
        if _HAS_TIFFILE:
            return self._open_with_tifffile(uri)
        raise RuntimeError("No hay backend para leer rasters (instala rasterio o GDAL)")

    def exists(self, uri: str) -> bool:
        return os.path.exists(uri)


def _tifffile_interps(page) -> Tuple[str, ...]:
    spp = int(page.samplesperpixel)
    if page.photometric == tiff.PHOTOMETRIC.RGB:
        base = ["Red", "Green", "Blue"]
    else:
        base = ["Gray"]
    extras = [
        ALPHA if int(e) in (1, 2) else "Undefined"  # EXTRASAMPLE ASSOCALPHA / UNASSALPHA
        for e in (page.extrasamples or ())
    ]
    names = (base + extras)[:spp]
    names += ["Undefined"] * (spp - len(names))
    return tuple(names)


__all__ = ["GdalMaskReader", "find_alpha_band", "to_byte_mask"]
