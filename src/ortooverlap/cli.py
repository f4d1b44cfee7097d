# src/ortooverlap/cli.py
from __future__ import annotations

"""
CLI del analizador de solape entre ortofotos (contracts-first, minimal).

Comandos:
  - run: calcula la zona común con datos válidos (alfa == 255) de dos rasters
         y escribe un GeoJSON FeatureCollection (vacío si no hay solape).
  - info: imprime el resumen de un raster (bandas, máscara, geotransform).

Ejemplos rápidos:
  python -m ortooverlap.cli run
  python -m ortooverlap.cli --root ./data run --a orto1.tif --b orto2.tif --out out.geojson
  python -m ortooverlap.cli info ./orto1.tif
"""

import argparse
import sys
from pathlib import Path

from .adapters.console_reporter import ConsoleReporter
from .adapters.gdal_raster_reader import GdalMaskReader
from .composition.di import build_pipeline, build_settings
from .config import Settings, get_settings
from .contracts.errors import RasterLoadFailure
from .services.raster_info import summarize


# ----------------------
# Utilidades locales
# ----------------------

def _settings_from_args(args: argparse.Namespace) -> Settings:
    overrides = {
        "input_a": getattr(args, "a", None),
        "input_b": getattr(args, "b", None),
        "output": getattr(args, "out", None),
        "indent": getattr(args, "indent", None),
        "quiet": True if getattr(args, "quiet", False) else None,
    }
    if args.root or args.config or any(v is not None for v in overrides.values()):
        root = Path(args.root) if args.root else None
        return build_settings(root, Path(args.config) if args.config else None, **overrides)
    return get_settings()


# ----------------------
# Comandos
# ----------------------

def cmd_run(args: argparse.Namespace) -> int:
    s = _settings_from_args(args)
    reporter = ConsoleReporter(quiet=s.quiet)
    pipeline = build_pipeline(s, reporter=reporter)

    reporter.report("=== Raster overlap analyzer ===")
    try:
        pipeline.run_uris(str(s.input_a), str(s.input_b), str(s.output))
    except RasterLoadFailure as ex:
        reporter.error(f"Failed to load {ex.uri}: {ex}")
        return 1

    reporter.report("Done")
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    reporter = ConsoleReporter()
    try:
        raster = GdalMaskReader().open(args.path)
    except RasterLoadFailure as ex:
        reporter.error(str(ex))
        return 1
    for line in summarize(raster).lines():
        reporter.report(line)
    return 0


# ----------------------
# Parser
# ----------------------

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ortooverlap", description="Zona común válida entre dos rasters con alfa")
    p.add_argument("--root", help="project_root (sobre-escribe Settings.project_root)")
    p.add_argument("--config", help="settings.yaml explícito")
    sub = p.add_subparsers(dest="cmd", required=True)

    pr = sub.add_parser("run", help="calcula la intersección y escribe GeoJSON")
    pr.add_argument("--a", help="primer raster (por defecto orto1.tif)")
    pr.add_argument("--b", help="segundo raster (por defecto orto2.tif)")
    pr.add_argument("--out", help="GeoJSON de salida (por defecto intersection_obchaja_2.geojson)")
    pr.add_argument("--indent", type=int, help="indentación del JSON (por defecto 4)")
    pr.add_argument("-q", "--quiet", action="store_true", help="sólo avisos y errores")
    pr.set_defaults(func=cmd_run)

    pi = sub.add_parser("info", help="resumen de un raster")
    pi.add_argument("path", help="ruta al raster")
    pi.set_defaults(func=cmd_info)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except KeyboardInterrupt:
        return 130
    except Exception as ex:
        print(f"[ERROR] {ex}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
