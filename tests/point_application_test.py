import os
import sys

import numpy as np
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from geometry.AffineMatrix import AffineMatrix
from geometry.PointFloat import PointFloat
from geometry.VectorFloat import VectorFloat


@pytest.fixture
def identity():
    return AffineMatrix()


@pytest.fixture
def shift():
    return AffineMatrix().translate(10, 20)


@pytest.mark.parametrize("x, y", [(0, 0), (1.5, -2.25), (-1e6, 3e-9)])
def test_identity_leaves_points_alone(identity, x, y):
    assert identity.apply_to_point(x, y).as_tuple() == (x, y)


def test_point_unpacks(shift):
    x, y = shift.apply_to_point(1, 2)
    assert (x, y) == (11, 22)


def test_flat_in_flat_out(identity, shift):
    assert identity.apply_to_array([1, 2, 3, 4]) == [1, 2, 3, 4]
    assert shift.apply_to_array([1, 2, 3, 4]) == [11, 22, 13, 24]


def test_mapping_records_in_mapping_records_out(identity, shift):
    pts = [{"x": 1, "y": 2}, {"x": 3, "y": 4}]
    assert identity.apply_to_array(pts) == [{"x": 1, "y": 2}, {"x": 3, "y": 4}]
    assert shift.apply_to_array(pts) == [{"x": 11, "y": 22}, {"x": 13, "y": 24}]


def test_attribute_records(shift):
    out = shift.apply_to_array([PointFloat(1, 2), PointFloat(3, 4)])
    assert out == [PointFloat(11, 22), PointFloat(13, 24)]


def test_pairs(shift):
    assert shift.apply_to_array([(1, 2), (3, 4)]) == [(11, 22), (13, 24)]


def test_input_is_not_modified(shift):
    flat = [1, 2, 3, 4]
    records = [{"x": 1, "y": 2}]
    shift.apply_to_array(flat)
    shift.apply_to_array(records)
    assert flat == [1, 2, 3, 4]
    assert records == [{"x": 1, "y": 2}]


def test_empty_gives_empty_flat(shift):
    assert shift.apply_to_array([]) == []
    assert shift.apply_to_array(()) == []


def test_odd_flat_keeps_trailing_value(shift):
    assert shift.apply_to_array([1, 2, 3]) == [11, 22, 3]


def test_numpy_flat_input(shift):
    out = shift.apply_to_array(np.array([1.0, 2.0, 3.0, 4.0]))
    assert out == [11, 22, 13, 24]


def test_buffer_is_float32_same_length(shift):
    out = shift.apply_to_buffer([1, 2, 3, 4])
    assert out.dtype == np.float32
    assert out.shape == (4,)
    np.testing.assert_array_equal(out, [11, 22, 13, 24])


def test_buffer_narrows_float64_input():
    m = AffineMatrix().scale(2, 3)
    src = np.array([0.5, 0.25, -1.0, 4.0], dtype=np.float64)
    out = m.apply_to_buffer(src)
    assert out.dtype == np.float32
    np.testing.assert_allclose(out, [1.0, 0.75, -2.0, 12.0])
    # input untouched
    np.testing.assert_array_equal(src, [0.5, 0.25, -1.0, 4.0])


def test_buffer_matches_scalar_path():
    m = AffineMatrix().translate(3, -1).rotate(0.4).skew(0.2, 0.1)
    pts = [1.0, 2.0, -3.0, 0.5, 7.0, 7.0]
    np.testing.assert_allclose(m.apply_to_buffer(pts), m.apply_to_array(pts), rtol=1e-6, atol=1e-5)


def test_buffer_accepts_n_by_2(shift):
    out = shift.apply_to_buffer(np.array([[1, 2], [3, 4]], dtype=np.float32))
    np.testing.assert_array_equal(out, [11, 22, 13, 24])


def test_buffer_odd_and_empty(shift):
    np.testing.assert_array_equal(shift.apply_to_buffer([1, 2, 3]), [11, 22, 3])
    assert shift.apply_to_buffer([]).shape == (0,)


def test_point_and_vector_arithmetic():
    p = PointFloat(1, 2)
    v = PointFloat(4, 6) - p
    assert v == VectorFloat(3, 4)
    assert abs(v) == 5
    assert p + v * 2 == PointFloat(7, 10)
    assert PointFloat.from_record({"x": 1, "y": 2}) == p
    assert p.as_dict() == {"x": 1, "y": 2}
    assert VectorFloat(1, 2).dot(VectorFloat(3, 4)) == 11
    assert VectorFloat(1, 2).cross(VectorFloat(3, 4)) == -2
    assert VectorFloat(1, 0).cross(VectorFloat(0, 1)) == 1
