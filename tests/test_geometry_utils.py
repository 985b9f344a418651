import math

import numpy as np
import pytest

from utils.geometry import (
    angle_diff,
    angle_of,
    arcsin_deg,
    as_vector,
    clamp_norm,
    closest_point_on_segment,
    cross,
    dist,
    mix,
    norm,
    normalize,
    rotate,
    vector_of_angle,
)

def test_normalize_zero_vector_is_zero():
    result = normalize(np.zeros(2))
    assert np.array_equal(result, np.zeros(2))
    assert not np.any(np.isnan(result))

def test_normalize_and_norm():
    assert np.isclose(norm(np.array([3.0, 4.0])), 5.0)
    assert np.allclose(normalize(np.array([3.0, 4.0])), [0.6, 0.8])

def test_cross_dist_and_mix():
    assert cross(np.array([1.0, 0.0]), np.array([0.0, 1.0])) == 1.0
    assert cross(np.array([0.0, 1.0]), np.array([1.0, 0.0])) == -1.0
    assert np.isclose(dist(np.array([1.0, 1.0]), np.array([4.0, 5.0])), 5.0)
    # unclamped interpolation
    assert np.allclose(mix(np.zeros(2), np.array([1.0, 1.0]), 2.0), [2.0, 2.0])

def test_clamp_norm_preserves_direction():
    clamped = clamp_norm(np.array([3.0, 4.0]), 1.0)
    assert np.isclose(norm(clamped), 1.0)
    assert np.allclose(clamped, [0.6, 0.8])
    assert np.array_equal(clamp_norm(np.array([0.3, 0.4]), 1.0), [0.3, 0.4])

@pytest.mark.parametrize(
    "vector, expected",
    [
        ((1.0, 0.0), 0.0),
        ((0.0, 1.0), 90.0),
        ((0.0, -1.0), -90.0),
        ((-1.0, 0.0), 180.0),
        ((1.0, 1.0), 45.0),
        ((0.0, 0.0), 0.0),
    ],
)
def test_angle_of(vector, expected):
    assert np.isclose(angle_of(np.array(vector)), expected)

def test_vector_of_angle_round_trip_is_parallel():
    for vector in ([1.0, 2.0], [-3.0, 0.5], [-0.2, -7.0], [4.0, -4.0], [0.0, 2.5]):
        v = np.array(vector)
        back = vector_of_angle(angle_of(v))
        assert abs(cross(back, normalize(v))) < 1e-9
        assert np.dot(back, normalize(v)) > 0.0

def test_rotate():
    assert np.allclose(rotate(np.array([1.0, 0.0]), 90.0), [0.0, 1.0])
    assert np.allclose(rotate(np.array([0.0, 2.0]), -90.0), [2.0, 0.0])

def test_arcsin_deg():
    assert np.isclose(arcsin_deg(1.0, 2.0), 30.0)
    assert np.isclose(arcsin_deg(2.0, 2.0), 90.0)

def test_angle_diff_wraps_around():
    assert np.isclose(angle_diff(350.0, 10.0), 20.0)
    assert np.isclose(angle_diff(-170.0, 170.0), 20.0)
    assert np.isclose(angle_diff(0.0, 180.0), 180.0)

def test_angle_diff_symmetric_and_bounded():
    angles = np.linspace(-720.0, 720.0, 37)
    for a in angles:
        for b in angles:
            diff = angle_diff(a, b)
            assert diff == angle_diff(b, a)
            assert 0.0 <= diff <= 180.0

def test_closest_point_on_degenerate_segment_returns_start():
    p0 = np.array([1.0, 2.0])
    for target in ([0.0, 0.0], [5.0, -3.0], [1.0, 2.0]):
        assert np.array_equal(closest_point_on_segment(p0, p0.copy(), np.array(target)), p0)

def test_closest_point_on_segment_clamps_parameter():
    p0 = np.array([0.0, 0.0])
    p1 = np.array([2.0, 0.0])
    target = np.array([3.0, 1.0])

    assert np.allclose(closest_point_on_segment(p0, p1, target), [2.0, 0.0])
    assert np.allclose(closest_point_on_segment(p0, p1, target, 0.0, math.inf), [3.0, 0.0])
    assert np.allclose(closest_point_on_segment(p0, p1, np.array([-1.0, 5.0])), [0.0, 0.0])
    assert np.allclose(closest_point_on_segment(p0, p1, np.array([1.0, 5.0])), [1.0, 0.0])

def test_as_vector_rejects_wrong_shape():
    with pytest.raises(ValueError):
        as_vector([1.0, 2.0, 3.0])
    assert as_vector((1, 2)).dtype == float
