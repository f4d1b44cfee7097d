# src/ortooverlap/config.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .contracts.products import INTERSECTION_NAME


class Settings(BaseSettings):
    """
    Config unificada del proyecto. No toca disco.
    Debe ser construida y provista por composition/di.py (CLI/UI/adapters).
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ORTO_",
        extra="forbid",
        frozen=True,
        validate_default=True,  # resuelve rutas por defecto contra project_root
    )

    project_root: Path = Field(default_factory=Path.cwd)

    # --- entradas / salida (relativas a project_root) ---
    input_a: Path = Path("orto1.tif")
    input_b: Path = Path("orto2.tif")
    output: Path = Path("intersection_obchaja_2.geojson")

    # --- documento ---
    feature_name: str = INTERSECTION_NAME
    indent: int = Field(4, ge=0, le=16)

    # --- motor geométrico ---
    geometry_enabled: bool = True
    quiet: bool = False

    # ----------------------------
    # Normalizadores / validadores
    # ----------------------------
    @field_validator("project_root", mode="before")
    @classmethod
    def _abs_root(cls, v: Path | str) -> Path:
        return Path(v).expanduser().resolve()

    @field_validator("feature_name")
    @classmethod
    def _non_empty(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("feature_name no puede ser vacío")
        return v2

    @field_validator("input_a", "input_b", "output", mode="after")
    @classmethod
    def _rel_to_root(cls, p: Path, info) -> Path:
        root: Path | None = info.data.get("project_root")
        if p.is_absolute() or root is None:
            return p
        return root / p


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Instancia cacheada. Úsala SOLO desde composition/di.py o CLI.
    Prohibido usarla en services/ (dominio). Para tests, recuerda limpiar:
        get_settings.cache_clear()
    """
    return Settings()
