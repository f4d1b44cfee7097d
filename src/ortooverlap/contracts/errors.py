# src/ortooverlap/contracts/errors.py
from __future__ import annotations

from typing import Optional


class OverlapError(Exception):
    """Raíz de los errores del pipeline de solape."""


class RasterLoadFailure(OverlapError):
    """El raster no existe, no se puede abrir o no se puede decodificar. Fatal para la ejecución."""

    def __init__(self, uri: str, detail: Optional[str] = None):
        self.uri = str(uri)
        self.detail = detail
        msg = f"No se pudo abrir el raster: {self.uri}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class MissingAlphaChannelFailure(RasterLoadFailure):
    """Sin banda alfa y con menos de 4 bandas: no hay máscara de validez usable."""

    def __init__(self, uri: str, band_count: int):
        self.band_count = int(band_count)
        super().__init__(uri, f"canal alfa no encontrado ({band_count} bandas)")


class NoValidDataFailure(OverlapError):
    """La máscara no tiene ningún píxel == 255. Recuperable: el polígono queda ausente."""

    def __init__(self, uri: str = ""):
        self.uri = uri
        super().__init__(f"Sin datos opacos en {uri}" if uri else "Sin datos opacos")


class GeometryComputationFailure(OverlapError):
    """El motor geométrico falló o devolvió null. Se trata como solape vacío."""


class GeometryUnavailable(OverlapError):
    """El motor geométrico no está disponible en este entorno."""


__all__ = [
    "OverlapError", "RasterLoadFailure", "MissingAlphaChannelFailure",
    "NoValidDataFailure", "GeometryComputationFailure", "GeometryUnavailable",
]
