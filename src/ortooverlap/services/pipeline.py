# src/ortooverlap/services/pipeline.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..contracts.core import (
    EmptyReason, PipelineResult, RasterLabel, RunError, RunStatus, Stage,
)
from ..contracts.errors import NoValidDataFailure
from ..contracts.geo import RasterHandle, Ring, pretty_bounds
from ..contracts.products import INTERSECTION_NAME
from ..ports.exporters import DocumentWriterPort
from ..ports.geometry import GeometryEnginePort
from ..ports.raster_read import RasterReaderPort
from ..ports.reporter import ReporterPort
from . import extent, mask_scanner
from .geojson_serializer import GeoJSONSerializer
from .overlap_service import OverlapService
from .raster_info import summarize

"""
Driver del pipeline de solape, contracts-first.
Flujo determinista por raster:
  carga -> SCAN (máscara) -> anillo ; luego OVERLAP -> escritura

Un raster sin datos válidos deja su polígono ausente pero NO aborta el otro;
el resultado degrada a FeatureCollection vacía. Sólo los fallos de carga
(RasterLoadFailure) abortan la ejecución.
"""


@dataclass
class OverlapPipeline:
    engine: GeometryEnginePort
    reporter: ReporterPort
    reader: Optional[RasterReaderPort] = None
    writer: Optional[DocumentWriterPort] = None
    feature_name: str = INTERSECTION_NAME
    indent: int = 4

    # ----------------------
    # Pasos
    # ----------------------
    def _extent(self, label: RasterLabel, raster: RasterHandle) -> Optional[Ring]:
        try:
            box = mask_scanner.scan_or_raise(raster.mask, raster.width, raster.height, uri=raster.uri)
        except NoValidDataFailure:
            self.reporter.warn(f"Raster {label}: no opaque data found ({raster.uri})")
            return None
        self.reporter.report(
            f"Raster {label}: data bounds [{box.minx},{box.miny}] - [{box.maxx},{box.maxy}]"
        )
        ring, gbox = extent.build_with_box(box, raster.width, raster.height, raster.transform)
        self.reporter.report(f"Raster {label}: geographic bounds {pretty_bounds(gbox.as_bounds())}")
        return ring

    def _missing(self, ring_a: Optional[Ring], ring_b: Optional[Ring]) -> Tuple[RasterLabel, ...]:
        out: List[RasterLabel] = []
        if ring_a is None:
            out.append("A")
        if ring_b is None:
            out.append("B")
        return tuple(out)

    def _overlap_document(self, ring_a: Optional[Ring], ring_b: Optional[Ring],
                          missing: Tuple[RasterLabel, ...]) -> PipelineResult:
        self.reporter.report("Computing intersection...")
        poly_a = self.engine.polygon(ring_a) if ring_a is not None else None
        poly_b = self.engine.polygon(ring_b) if ring_b is not None else None

        errors: List[RunError] = []
        if missing:
            self.reporter.error("Could not create geometries")
            for label in missing:
                self.reporter.error(f"  - geometry {label} not created (no valid data)")
                errors.append(RunError(stage=Stage.SCAN, message=f"raster {label} has no valid data"))
        else:
            self.reporter.report("Geometries created")

        result = OverlapService(self.engine).overlap(poly_a, poly_b)
        if result.is_empty:
            if result.reason is EmptyReason.GEOMETRY_ERROR:
                errors.append(RunError(stage=Stage.OVERLAP, message="intersection failed"))
            self.reporter.report("Intersection not found or empty")
        else:
            self.reporter.ok("Intersection found")

        serializer = GeoJSONSerializer(self.engine, feature_name=self.feature_name, indent=self.indent)
        return PipelineResult(
            status=RunStatus.EMPTY if result.is_empty else RunStatus.WRITTEN,
            document=serializer.serialize(result),
            missing=missing,
            errors=tuple(errors),
        )

    # ----------------------
    # API
    # ----------------------
    def run(self, raster_a: RasterHandle, raster_b: RasterHandle) -> PipelineResult:
        ring_a = self._extent("A", raster_a)
        ring_b = self._extent("B", raster_b)
        missing = self._missing(ring_a, ring_b)

        if not self.engine.available:
            self.reporter.warn("Geometry engine not available: overlap skipped, no document written")
            return PipelineResult(status=RunStatus.UNAVAILABLE, missing=missing)

        self.engine.initialize()
        try:
            return self._overlap_document(ring_a, ring_b, missing)
        finally:
            self.engine.shutdown()

    def load(self, uri: str) -> RasterHandle:
        if self.reader is None:
            raise RuntimeError("OverlapPipeline sin reader configurado")
        raster = self.reader.open(uri)
        self.reporter.ok(f"Loaded: {uri} ({raster.width}x{raster.height})")
        for line in summarize(raster).lines():
            self.reporter.report(line)
        return raster

    def run_uris(self, uri_a: str, uri_b: str, out_uri: Optional[str] = None) -> PipelineResult:
        """Carga ambos rasters (fallos de carga se propagan), ejecuta y escribe el documento."""
        raster_a = self.load(uri_a)
        raster_b = self.load(uri_b)
        result = self.run(raster_a, raster_b)

        if result.document is None or out_uri is None:
            return result
        if self.writer is None:
            raise RuntimeError("OverlapPipeline sin writer configurado")
        written = self.writer.write(out_uri, result.document)
        self.reporter.ok(f"File {written} created")
        return result.with_output(written)


__all__ = ["OverlapPipeline"]
