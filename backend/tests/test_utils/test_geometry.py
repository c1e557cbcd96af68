"""Tests for geometry and math helpers."""

import math

import numpy as np
import pytest

from portrait.utils.geometry import apply_matrix, extent, is_axis_aligned, parse_transform
from portrait.utils.math_helpers import format_number, js_divide, parse_leading_float


def test_format_number_integers_drop_decimal():
    assert format_number(1.0) == "1"
    assert format_number(-12.0) == "-12"
    assert format_number(0) == "0"
    assert format_number(-0.0) == "0"


def test_format_number_fractions():
    assert format_number(0.5) == "0.5"
    assert format_number(-22.25) == "-22.25"
    assert format_number(0.1 + 0.2) == "0.30000000000000004"


def test_parse_leading_float():
    assert parse_leading_float("2") == 2.0
    assert parse_leading_float("2.5px") == 2.5
    assert parse_leading_float(" -.5") == -0.5
    assert parse_leading_float("abc") is None


def test_parse_transform_composes_left_to_right():
    m = parse_transform("translate(10 5) scale(2)")
    pts = apply_matrix(m, np.array([[1.0, 1.0]]))
    assert pts[0] == pytest.approx([12.0, 7.0])


def test_parse_transform_rotate_about_point():
    m = parse_transform("rotate(90 10 10)")
    pts = apply_matrix(m, np.array([[20.0, 10.0]]))
    assert pts[0] == pytest.approx([10.0, 20.0])


def test_parse_transform_matrix_and_commas():
    m = parse_transform("matrix(1,0,0,1,3,4)")
    pts = apply_matrix(m, np.array([[0.0, 0.0]]))
    assert pts[0] == pytest.approx([3.0, 4.0])


def test_parse_transform_empty_is_identity():
    assert np.allclose(parse_transform(None), np.eye(3))
    assert np.allclose(parse_transform(""), np.eye(3))


def test_axis_aligned_detection():
    assert is_axis_aligned(parse_transform("scale(-1 1) translate(5 0)"))
    assert not is_axis_aligned(parse_transform("rotate(30)"))


def test_extent():
    assert extent(np.array([[1.0, 5.0], [3.0, 2.0]])) == (1.0, 2.0, 3.0, 5.0)
    assert extent(np.empty((0, 2))) is None


def test_format_number_non_finite():
    assert format_number(float("inf")) == "Infinity"
    assert format_number(float("-inf")) == "-Infinity"
    assert format_number(float("nan")) == "NaN"


def test_js_divide_by_zero():
    assert js_divide(20, 0) == float("inf")
    assert js_divide(20, -0.0) == float("-inf")
    assert math.isnan(js_divide(0, 0))
    assert js_divide(9, 3) == 3
