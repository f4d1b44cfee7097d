import json
import pytest
from pydantic import ValidationError
from ortooverlap.contracts.products import (
    Feature, FeatureCollection, PolygonGeometry, RasterSummary,
)

RING = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0))

def test_polygon_requires_closed_ring():
    with pytest.raises(ValidationError):
        PolygonGeometry(coordinates=(RING[:-1] + ((5.0, 5.0),),))

def test_feature_collection_key_order():
    fc = FeatureCollection(features=[Feature(properties={"name": "n"}, geometry=PolygonGeometry(coordinates=(RING,)))])
    doc = json.loads(fc.model_dump_json())
    assert list(doc) == ["type", "features"]
    assert list(doc["features"][0]) == ["type", "properties", "geometry"]
    assert list(doc["features"][0]["geometry"]) == ["type", "coordinates"]

def test_int_coordinates_become_floats():
    g = PolygonGeometry(coordinates=(((0, 0), (2, 0), (2, 2), (0, 2), (0, 0)),))
    assert all(isinstance(v, float) for pt in g.coordinates[0] for v in pt)

def test_raster_summary_lines():
    s = RasterSummary(uri="a.tif", width=10, height=4, band_count=4,
                      color_interps=("Red", "Green", "Blue", "Alpha"), alpha_band=4,
                      opaque_count=10, transform=None)
    lines = s.lines()
    assert s.opaque_percent == pytest.approx(25.0)
    assert "Size: 10x4" in lines
    assert "  Band 4: Alpha (mask)" in lines
    assert "Opaque pixels: 10 (25.00%)" in lines
    assert lines[-1].startswith("GeoTransform: not found")

def test_raster_summary_with_transform():
    s = RasterSummary(uri="a.tif", width=1, height=1, band_count=1, opaque_count=1,
                      transform=(0.0, 1.0, 0.0, 0.0, 0.0, -1.0))
    assert s.lines()[-1] == "GeoTransform: [0, 1, 0, 0, 0, -1]"
