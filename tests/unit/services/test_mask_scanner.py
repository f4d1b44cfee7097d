import numpy as np
import pytest
from ortooverlap.contracts.errors import NoValidDataFailure
from ortooverlap.services import mask_scanner

def test_full_mask_covers_frame():
    m = np.full((10, 10), 255, dtype=np.uint8)
    box = mask_scanner.scan(m, 10, 10)
    assert (box.minx, box.miny, box.maxx, box.maxy) == (0, 0, 9, 9)

def test_all_zero_is_nodata():
    assert mask_scanner.scan(np.zeros(12, dtype=np.uint8), 4, 3) is None
    with pytest.raises(NoValidDataFailure):
        mask_scanner.scan_or_raise(np.zeros(12, dtype=np.uint8), 4, 3, uri="b.tif")

def test_only_255_counts_as_valid():
    m = np.full((3, 4), 254, dtype=np.uint8)
    m[1, 2] = 255
    box = mask_scanner.scan(m, 4, 3)
    assert (box.minx, box.miny, box.maxx, box.maxy) == (2, 1, 2, 1)
    assert mask_scanner.count_valid(m, 4, 3) == 1

def test_flat_row_major_buffer():
    w, h = 5, 4
    flat = np.zeros(w * h, dtype=np.uint8)
    flat[1 * w + 3] = 255  # (x=3, y=1)
    flat[3 * w + 0] = 255  # (x=0, y=3)
    box = mask_scanner.scan(flat, w, h)
    assert (box.minx, box.miny, box.maxx, box.maxy) == (0, 1, 3, 3)

def test_size_mismatch_raises():
    with pytest.raises(ValueError):
        mask_scanner.scan(np.zeros(11, dtype=np.uint8), 4, 3)

@pytest.mark.parametrize("seed", range(5))
def test_box_contains_every_valid_pixel(seed):
    rng = np.random.default_rng(seed)
    h, w = rng.integers(1, 30, size=2)
    m = np.where(rng.random((h, w)) < 0.05, 255, rng.integers(0, 255, size=(h, w))).astype(np.uint8)
    m[rng.integers(0, h), rng.integers(0, w)] = 255
    box = mask_scanner.scan(m, int(w), int(h))
    assert box.minx <= box.maxx and box.miny <= box.maxy
    ys, xs = np.nonzero(m == 255)
    assert xs.min() == box.minx and xs.max() == box.maxx
    assert ys.min() == box.miny and ys.max() == box.maxy
    assert all(box.contains(int(x), int(y)) for x, y in zip(xs, ys))
