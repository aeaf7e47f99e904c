import numpy as np
import pytest

import cityruler
from cityruler.batch import bearings_from, distances_from, pairwise_distances, project_points_onto_line
from cityruler.errors import InvalidInput
from cityruler.tests.fixtures.lines import SF_LAT, SF_LINE

RULER = cityruler.create(SF_LAT)


def _random_points(n, seed=1):
    rng = np.random.RandomState(seed)
    lon = -122.425 + rng.rand(n) * 0.035
    lat = 37.770 + rng.rand(n) * 0.022
    return np.column_stack((lon, lat))


def test_pairwise_distances_match_scalar():
    a = _random_points(40, seed=1)
    b = _random_points(40, seed=2)
    d = pairwise_distances(RULER, a, b)
    assert d.shape == (40,)
    expected = [RULER.distance(p, q) for p, q in zip(a, b)]
    assert np.allclose(d, expected, rtol=1e-12)


def test_pairwise_distances_shape_mismatch():
    with pytest.raises(InvalidInput):
        pairwise_distances(RULER, _random_points(3), _random_points(4))


def test_distances_and_bearings_from_origin():
    pts = _random_points(25)
    origin = SF_LINE[0]
    d = distances_from(RULER, origin, pts)
    b = bearings_from(RULER, origin, pts)
    assert np.allclose(d, [RULER.distance(origin, p) for p in pts], rtol=1e-12)
    assert np.allclose(b, [RULER.bearing(origin, p) for p in pts], atol=1e-9)


def test_distances_from_accepts_single_point_and_empty():
    d = distances_from(RULER, SF_LINE[0], SF_LINE[1])
    assert d.shape == (1,)
    assert np.isclose(d[0], RULER.distance(SF_LINE[0], SF_LINE[1]))
    assert distances_from(RULER, SF_LINE[0], []).shape == (0,)


def test_distances_from_rejects_bad_shape():
    with pytest.raises(InvalidInput):
        distances_from(RULER, SF_LINE[0], np.zeros((4, 3)))


def test_project_points_matches_point_on_line():
    pts = _random_points(60)
    res = project_points_onto_line(RULER, SF_LINE, pts)
    for i, p in enumerate(pts):
        hit = RULER.point_on_line(SF_LINE, p)
        assert res.index[i] == hit.index
        assert np.isclose(res.t[i], hit.t, atol=1e-9)
        assert np.allclose(res.points[i], hit.point, rtol=0, atol=1e-9)
        walked = RULER.line_distance(SF_LINE[:hit.index + 1]) + RULER.distance(SF_LINE[hit.index], hit.point)
        assert np.isclose(res.distance_along[i], walked, rtol=1e-9)


def test_project_points_on_straight_line():
    r = cityruler.create(0.0)
    line = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]
    pts = np.array([[0.5, -0.2], [2.0, 0.5], [-1.0, 0.0], [1.0, 3.0]])
    res = project_points_onto_line(r, line, pts)
    assert np.allclose(res.points, [[0.5, 0.0], [1.0, 0.5], [0.0, 0.0], [1.0, 1.0]])
    assert list(res.index) == [0, 1, 0, 1]
    assert np.allclose(res.t, [0.5, 0.5, 0.0, 1.0])
    assert np.allclose(res.distance_along, [0.5 * r.kx, r.kx + 0.5 * r.ky, 0.0, r.kx + r.ky])


def test_project_points_ties_and_degenerate_segments():
    r = cityruler.create(0.0)
    line = [(-1.0, 0.0), (0.0, 0.0), (0.0, 0.0), (1.0, 0.0)]
    res = project_points_onto_line(r, line, [(0.0, 0.0)])
    # the shared vertex belongs to the first segment
    assert res.index[0] == 0
    assert res.t[0] == 1.0


def test_project_points_single_point_line_and_no_points():
    res = project_points_onto_line(RULER, [SF_LINE[0]], _random_points(3))
    assert np.allclose(res.points, [SF_LINE[0]] * 3)
    assert list(res.index) == [0, 0, 0]
    res = project_points_onto_line(RULER, SF_LINE, [])
    assert res.points.shape == (0, 2)
    with pytest.raises(InvalidInput):
        project_points_onto_line(RULER, [], _random_points(2))
