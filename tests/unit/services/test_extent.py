import pytest
from ortooverlap.contracts.geo import PixelBox
from ortooverlap.services import extent

def test_ring_has_five_points_and_is_closed():
    ring = extent.build(PixelBox(2, 1, 4, 3), 10, 10, (0.0, 1.0, 0.0, 0.0, 0.0, 1.0))
    assert len(ring) == 5
    assert ring[0] == ring[-1]

def test_full_frame_unit_transform():
    ring = extent.build(PixelBox(0, 0, 9, 9), 10, 10, (0.0, 1.0, 0.0, 0.0, 0.0, 1.0))
    assert ring == ((0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0), (0.0, 0.0))

def test_exclusive_lower_right_corner_and_order():
    gt = (100.0, 10.0, 0.0, 500.0, 0.0, -10.0)
    ring, gbox = extent.build_with_box(PixelBox(1, 2, 3, 4), 8, 8, gt)
    assert (gbox.ulx, gbox.uly, gbox.lrx, gbox.lry) == (110.0, 480.0, 140.0, 450.0)
    assert ring == ((110.0, 480.0), (140.0, 480.0), (140.0, 450.0), (110.0, 450.0), (110.0, 480.0))

def test_fallback_without_transform():
    ring = extent.build(PixelBox(0, 0, 1, 1), 4, 4, None)
    assert ring == ((0.0, 4.0), (2.0, 4.0), (2.0, 2.0), (0.0, 2.0), (0.0, 4.0))

def test_rotation_terms_are_not_corrected():
    gt = (0.0, 1.0, 0.5, 0.0, 0.5, 1.0)
    ring = extent.build(PixelBox(0, 0, 1, 1), 2, 2, gt)
    # esquinas opuestas proyectadas; las otras dos se arman con sus x/y
    assert ring[0] == (0.0, 0.0)
    assert ring[2] == (3.0, 3.0)
    assert ring[1] == (3.0, 0.0) and ring[3] == (0.0, 3.0)

def test_box_outside_raster_rejected():
    with pytest.raises(ValueError):
        extent.build(PixelBox(0, 0, 10, 3), 10, 10, None)
