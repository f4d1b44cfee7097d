from ortooverlap.services.projection import project

def test_identity_like_transform_origin():
    assert project(0, 0, (0.0, 1.0, 0.0, 0.0, 0.0, 1.0), 10) == (0.0, 0.0)

def test_no_transform_flips_y_with_height():
    assert project(0, 0, None, 7) == (0.0, 7.0)
    assert project(3, 7, None, 7) == (3.0, 0.0)

def test_affine_with_north_up_pixels():
    gt = (500000.0, 0.5, 0.0, 4000000.0, 0.0, -0.5)
    assert project(10, 20, gt, 100) == (500005.0, 3999990.0)
