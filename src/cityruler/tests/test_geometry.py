import math

from cityruler.geometry import interpolate, project_onto_segment, ring_twice_area


def test_interpolate_endpoints_and_extrapolation():
    a, b = (1.0, 2.0), (3.0, 6.0)
    assert interpolate(a, b, 0.0) == a
    assert interpolate(a, b, 1.0) == b
    assert interpolate(a, b, 0.5) == (2.0, 4.0)
    assert interpolate(a, b, 2.0) == (5.0, 10.0)


def test_project_onto_segment_uses_scaled_space():
    # with ky much larger than kx the closest point moves towards the y-aligned foot
    a, b = (0.0, 0.0), (1.0, 1.0)
    p = (1.0, 0.0)
    iso = project_onto_segment(p, a, b, 1.0, 1.0)
    assert math.isclose(iso.t, 0.5)
    skew = project_onto_segment(p, a, b, 1.0, 3.0)
    assert math.isclose(skew.t, 0.1)
    assert math.isclose(skew.point[0], 0.1)
    assert math.isclose(skew.point[1], 0.1)
    assert math.isclose(skew.sq_dist, 0.9 ** 2 + (0.3) ** 2)


def test_project_onto_segment_clamps():
    a, b = (0.0, 0.0), (2.0, 0.0)
    before = project_onto_segment((-1.0, 1.0), a, b, 1.0, 1.0)
    assert before.t == 0.0 and before.point == a
    assert math.isclose(before.sq_dist, 2.0)
    after = project_onto_segment((5.0, 0.0), a, b, 1.0, 1.0)
    assert after.t == 1.0 and after.point == b
    assert math.isclose(after.sq_dist, 9.0)


def test_project_onto_zero_length_segment():
    res = project_onto_segment((3.0, 4.0), (0.0, 0.0), (0.0, 0.0), 1.0, 1.0)
    assert res.t == 0.0
    assert res.point == (0.0, 0.0)
    assert res.sq_dist == 25.0


def test_ring_twice_area_orientation():
    ccw = [(0.0, 0.0), (2.0, 0.0), (2.0, 1.0), (0.0, 1.0)]
    assert math.isclose(ring_twice_area(ccw), 4.0)
    assert math.isclose(ring_twice_area(ccw[::-1]), -4.0)


def test_ring_twice_area_translation_invariant():
    ring = [(0.0, 0.0), (2.0, 0.0), (1.0, 3.0)]
    moved = [(x - 122.4, y + 37.8) for x, y in ring]
    assert math.isclose(ring_twice_area(ring), ring_twice_area(moved), rel_tol=1e-9)


def test_ring_twice_area_short_rings():
    assert ring_twice_area([]) == 0.0
    assert ring_twice_area([(0.0, 0.0), (1.0, 1.0)]) == 0.0
