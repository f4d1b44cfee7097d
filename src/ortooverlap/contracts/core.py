# src/ortooverlap/contracts/core.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

RasterLabel = Literal["A", "B"]

# -------------------------
# Resultado del solape
# -------------------------
class OverlapStatus(str, Enum):
    EMPTY = "empty"
    GEOMETRY = "geometry"

class EmptyReason(str, Enum):
    MISSING_A = "missing_a"
    MISSING_B = "missing_b"
    MISSING_BOTH = "missing_both"
    DISJOINT = "disjoint"
    GEOMETRY_ERROR = "geometry_error"

@dataclass(frozen=True)
class OverlapResult:
    """
    `geometry` es un handle opaco del motor geométrico; el núcleo sólo
    pregunta si está vacío y su envelope.
    """
    status: OverlapStatus
    geometry: Any = None
    reason: Optional[EmptyReason] = None

    @staticmethod
    def empty(reason: EmptyReason) -> "OverlapResult":
        return OverlapResult(OverlapStatus.EMPTY, None, reason)

    @staticmethod
    def of(geometry: Any) -> "OverlapResult":
        return OverlapResult(OverlapStatus.GEOMETRY, geometry, None)

    @property
    def is_empty(self) -> bool:
        return self.status is OverlapStatus.EMPTY

# -------------------------
# Ejecuciones / auditoría
# -------------------------
class Stage(str, Enum):
    SCAN = "scan"
    OVERLAP = "overlap"

class RunStatus(str, Enum):
    WRITTEN = "written"          # documento con 1 feature
    EMPTY = "empty"              # documento con features: []
    UNAVAILABLE = "unavailable"  # motor geométrico ausente, sin documento

class RunError(BaseModel):
    model_config = ConfigDict(frozen=True)
    stage: Stage
    message: str
    detail: str | None = None

class PipelineResult(BaseModel):
    model_config = ConfigDict(frozen=True)
    started_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: RunStatus
    document: str | None = None
    missing: Tuple[RasterLabel, ...] = ()
    output: str | None = None
    errors: Tuple[RunError, ...] = ()

    @field_validator("missing")
    @classmethod
    def _sorted_unique(cls, v: Tuple[RasterLabel, ...]) -> Tuple[RasterLabel, ...]:
        return tuple(sorted(set(v)))

    def with_output(self, uri: str) -> "PipelineResult":
        return self.model_copy(update={"output": str(uri)})

    @property
    def has_feature(self) -> bool:
        return self.status is RunStatus.WRITTEN
