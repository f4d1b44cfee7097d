from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..adapters.console_reporter import ConsoleReporter
from ..adapters.gdal_raster_reader import GdalMaskReader
from ..adapters.geojson_file_writer import GeoJSONFileWriter
from ..adapters.shapely_geometry import ShapelyGeometryEngine
from ..config import Settings
from ..ports.reporter import ReporterPort
from ..services.pipeline import OverlapPipeline

SETTINGS_FILE = "settings.yaml"

def load_settings_from_yaml(path: Path, **overrides: Any) -> Settings:
    data: Dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)

def build_settings(project_root: Optional[Path] = None, config: Optional[Path] = None, **overrides: Any) -> Settings:
    """
    Settings para un project_root. Si se pasa `config` se carga (debe existir);
    si no, se usa `settings.yaml` de la raíz cuando existe.
    Prioridad de project_root: argumento explícito > YAML > cwd.
    Los overrides no-None tienen prioridad sobre el YAML.
    """
    root = Path(project_root).expanduser().resolve() if project_root is not None else None
    if config is not None:
        cfg: Optional[Path] = Path(config)
        if not cfg.exists():
            raise FileNotFoundError(f"config no encontrado: {cfg}")
    else:
        cfg = (root or Path.cwd().resolve()) / SETTINGS_FILE
        if not cfg.exists():
            cfg = None
    if root is not None:
        overrides["project_root"] = str(root)
    if cfg is not None:
        return load_settings_from_yaml(cfg, **overrides)
    data = {k: v for k, v in overrides.items() if v is not None}
    return Settings(**data)

def build_pipeline(settings: Settings, reporter: Optional[ReporterPort] = None) -> OverlapPipeline:
    return OverlapPipeline(
        engine=ShapelyGeometryEngine(enabled=settings.geometry_enabled),
        reporter=reporter or ConsoleReporter(quiet=settings.quiet),
        reader=GdalMaskReader(),
        writer=GeoJSONFileWriter(),
        feature_name=settings.feature_name,
        indent=settings.indent,
    )
