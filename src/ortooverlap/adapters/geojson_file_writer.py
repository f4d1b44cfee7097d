# src/ortooverlap/adapters/geojson_file_writer.py
from __future__ import annotations

import os

from ..ports.exporters import DocumentWriterPort


def _ensure_dir(path: str) -> None:
    d = os.path.dirname(path)
    if d and not os.path.exists(d):
        os.makedirs(d, exist_ok=True)


class GeoJSONFileWriter(DocumentWriterPort):
    def write(self, uri: str, text: str) -> str:
        uri = str(uri)
        _ensure_dir(uri)
        with open(uri, "w", encoding="utf-8") as f:
            f.write(text)
        return uri


__all__ = ["GeoJSONFileWriter"]
