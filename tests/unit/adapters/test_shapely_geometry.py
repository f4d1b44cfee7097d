import pytest
from ortooverlap.contracts.errors import GeometryUnavailable

shapely_geometry = pytest.importorskip("ortooverlap.adapters.shapely_geometry")
pytest.importorskip("shapely")

SQ = ((0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0), (0.0, 0.0))

def test_requires_initialize():
    eng = shapely_geometry.ShapelyGeometryEngine()
    assert eng.available and not eng.active
    with pytest.raises(RuntimeError):
        eng.polygon(SQ)
    eng.initialize()
    assert eng.active
    eng.shutdown()
    assert not eng.active

def test_disabled_engine_is_unavailable():
    eng = shapely_geometry.ShapelyGeometryEngine(enabled=False)
    assert not eng.available
    with pytest.raises(GeometryUnavailable):
        eng.initialize()

def test_polygon_envelope_and_empty(engine):
    p = engine.polygon(SQ)
    assert tuple(engine.envelope(p)) == (0.0, 0.0, 2.0, 2.0)
    assert not engine.is_empty(p)
    assert engine.is_empty(None)

def test_touching_edges_intersection_has_no_area(engine):
    a = engine.polygon(SQ)
    b = engine.polygon(tuple((x + 2.0, y) for x, y in SQ))
    inter = engine.intersection(a, b)
    # comparten un borde: GEOS devuelve una línea (no vacía, área cero)
    assert inter is not None and inter.area == 0.0
