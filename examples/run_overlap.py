# =============================
# FILE: examples/run_overlap.py
# =============================
"""
Uso mínimo: pipeline de solape detrás de los ports, sin CLI.
Los rasters deben compartir CRS (no se reproyecta).
"""
from pathlib import Path

from ortooverlap.adapters.console_reporter import MemoryReporter
from ortooverlap.composition.di import build_pipeline, build_settings


if __name__ == "__main__":
    root = Path("/ruta/al/proyecto").resolve()
    settings = build_settings(root)
    reporter = MemoryReporter()
    pipeline = build_pipeline(settings, reporter=reporter)

    result = pipeline.run_uris(str(settings.input_a), str(settings.input_b), str(settings.output))

    print("Estado:", result.status.value)
    print("Sin datos:", ", ".join(result.missing) or "-")
    for level, msg in reporter.records:
        print(f" [{level}] {msg}")
