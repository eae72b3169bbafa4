"""Tests for transform list parsing."""

from __future__ import annotations

import pytest

from vectorflatten.engine.affine import IDENTITY
from vectorflatten.engine.transform_parser import parse_transform


@pytest.mark.parametrize("source", [None, "", "   "])
def test_empty_is_identity(source):
    assert parse_transform(source) == IDENTITY


def test_translate_single_argument():
    t = parse_transform("translate(10)")
    assert (t.e, t.f) == (10, 0)


def test_list_composes_left_to_right():
    # scale reaches the point first, then translate
    t = parse_transform("translate(10,20) scale(2)")
    assert t.apply(1, 1) == pytest.approx((12, 22))


def test_comma_separated_list():
    t = parse_transform("scale(2),translate(5)")
    assert t.apply(0, 0) == pytest.approx((10, 0))


def test_rotate_with_center():
    t = parse_transform("rotate(90 5 5)")
    assert t.apply(10, 5) == pytest.approx((5, 10))


def test_rotate_with_center_x_only():
    t = parse_transform("rotate(180 5)")
    assert t.apply(0, 0) == pytest.approx((10, 0))


def test_matrix():
    t = parse_transform("matrix(1 0 0 1 3 4)")
    assert t.coefficients == (1, 0, 0, 1, 3, 4)


def test_skew_y_and_case_insensitive_name():
    t = parse_transform("skewY(45)")
    assert t.apply(1, 0) == pytest.approx((1, 1))


def test_exponent_and_unit_suffix():
    assert parse_transform("translate(1e1 -2.5E0)").apply(0, 0) == pytest.approx((10, -2.5))
    assert parse_transform("rotate(90deg)").apply(1, 0) == pytest.approx((0, 1))


def test_unterminated_call_is_skipped():
    assert parse_transform("translate(10") == IDENTITY


def test_name_without_arguments_is_skipped():
    t = parse_transform("scale(2) bogus translate(5)")
    assert t.apply(0, 0) == pytest.approx((10, 0))


def test_wrong_arity_is_skipped():
    t = parse_transform("matrix(1 2 3) translate(3 4)")
    assert t.apply(0, 0) == pytest.approx((3, 4))


def test_unknown_function_is_skipped():
    t = parse_transform("perspective(3) translate(1 1)")
    assert t.apply(0, 0) == pytest.approx((1, 1))


def test_name_inside_parentheses_resumes_there():
    t = parse_transform("translate(5 scale(2))")
    assert t.apply(1, 1) == pytest.approx((2, 2))
