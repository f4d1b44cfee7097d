# src/ortooverlap/services/raster_info.py
from __future__ import annotations

from ..contracts.geo import RasterHandle
from ..contracts.products import RasterSummary
from .mask_scanner import count_valid


def summarize(raster: RasterHandle) -> RasterSummary:
    return RasterSummary(
        uri=raster.uri,
        width=raster.width,
        height=raster.height,
        band_count=raster.band_count,
        color_interps=raster.color_interps,
        alpha_band=raster.alpha_band,
        opaque_count=count_valid(raster.mask, raster.width, raster.height),
        transform=raster.transform,
    )


__all__ = ["summarize"]
