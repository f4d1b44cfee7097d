import os
import pytest
from ortooverlap.config import get_settings

@pytest.fixture(autouse=True)
def _reset_settings_cache():
    # evita fuga de estado entre tests
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

@pytest.fixture
def reporter():
    from ortooverlap.adapters.console_reporter import MemoryReporter
    return MemoryReporter()

@pytest.fixture
def engine():
    pytest.importorskip("shapely")
    from ortooverlap.adapters.shapely_geometry import ShapelyGeometryEngine
    eng = ShapelyGeometryEngine()
    eng.initialize()
    yield eng
    eng.shutdown()

def pytest_collection_modifyitems(items):
    for item in items:
        if "integration" in item.keywords and os.environ.get("CI") == "true":
            # marca como slow en CI si quieres escalonar
            item.add_marker(pytest.mark.slow)
