"""Tests for path tokenizing and flattening."""

from __future__ import annotations

import re

import numpy as np
import pytest
from svgpathtools import parse_path

from vectorflatten.engine.affine import IDENTITY, rotation, scaling, translation
from vectorflatten.engine.path_flattener import PathFlattener, flatten_path, tokenize_path


def _samples(d: str) -> np.ndarray:
    """Points along every segment, as interpreted by svgpathtools."""
    path = parse_path(d)
    return np.array([seg.point(t) for seg in path for t in (0.0, 0.25, 0.5, 1.0)])


class TestTokenize:
    def test_numbers_and_letters(self):
        assert tokenize_path("M10-5L.5.5") == ["M", 10.0, -5.0, "L", 0.5, 0.5]

    def test_exponent(self):
        assert tokenize_path("M1e2,2E-1") == ["M", 100.0, 0.2]

    def test_compact_arc_flags(self):
        assert tokenize_path("a5 5 0 0150 0") == ["a", 5.0, 5.0, 0.0, 0.0, 1.0, 50.0, 0.0]

    def test_junk_characters_dropped(self):
        assert tokenize_path("M 1 # 2") == ["M", 1.0, 2.0]


class TestIdentity:
    @pytest.mark.parametrize(
        "d",
        [
            "M10 10 h 20 v 15 l-5 5 H2 V3 z",
            "M0 0 C 1 2 3 4 5 6 S 10 0 10 10 c 1 1 2 2 3 3 s 1 0 1 1",
            "M0 0 Q 5 5 10 0 T 20 0 q 2 2 4 0 t 4 0",
            "M2 12 a 10 10 0 1 0 20 0 A 10 10 0 1 0 2 12",
            "m5 5 10 0 0 10 -10 0 z m20 0 l5 5",
        ],
    )
    def test_same_geometry_as_reference_interpreter(self, d):
        flattened = flatten_path(d, IDENTITY)
        assert np.allclose(_samples(flattened.path_data), _samples(d), atol=1e-3)

    def test_square(self):
        result = flatten_path("M0,0 L10,0 L10,10 L0,10 Z")
        assert result.path_data == "M0,0 L10,0 L10,10 L0,10 Z"

    def test_only_absolute_output_commands(self):
        result = flatten_path("m1 1 h2 v2 s1 1 2 2 t3 3 a1 1 0 0 1 1 1 z")
        letters = set(re.findall(r"[A-Za-z]", result.path_data))
        assert letters <= set("MLCQAZ")


class TestTransforms:
    def test_translate_round_trip(self):
        result = flatten_path("M0,0 L10,0 L10,10 Z", translation(5, 5))
        assert result.path_data == "M5,5 L15,5 L15,15 Z"

    def test_horizontal_line_under_rotation_moves_both_axes(self):
        result = flatten_path("M0,0 H10", rotation(90))
        assert result.path_data == "M0,0 L0,10"

    def test_smooth_reflection_explicit(self):
        result = flatten_path("M0,0 C0,10 10,10 10,0 S20,-10 20,0")
        assert result.path_data == "M0,0 C0,10 10,10 10,0 C10,-10 20,-10 20,0"

    def test_smooth_without_previous_curve_uses_current_point(self):
        result = flatten_path("M5,5 T10,0")
        assert result.path_data == "M5,5 Q5,5 10,0"

    def test_arc_sweep_flips_under_mirror(self):
        d = "M0,0 A5,5 0 0,1 10,0"
        plain = flatten_path(d).path_data
        mirrored = flatten_path(d, scaling(-1, 1)).path_data
        flags = re.compile(r"A\S+ \S+ (\d),(\d)")
        large, sweep = flags.search(plain).groups()
        m_large, m_sweep = flags.search(mirrored).groups()
        assert m_large == large
        assert m_sweep != sweep
        assert mirrored.endswith("-10,0")

    def test_arc_sweep_kept_under_rotation(self):
        result = flatten_path("M0,0 A5,5 0 1,1 10,0", rotation(90))
        assert " 1,1 " in result.path_data

    def test_zero_radius_arc_is_a_line(self):
        assert flatten_path("M0,0 A0,5 0 0,1 10,0").path_data == "M0,0 L10,0"

    def test_precision(self):
        result = PathFlattener(precision=1).flatten("M0.123,1.987")
        assert result.path_data == "M0.1,2"


class TestBoundingBox:
    def test_square(self):
        result = flatten_path("M0,0 L10,0 L10,10 L0,10 Z")
        assert result.bbox.as_tuple() == (0, 0, 10, 10)

    def test_includes_control_points(self):
        result = flatten_path("M0,0 Q5,20 10,0")
        assert result.bbox.max_y == 20

    def test_in_transformed_space(self):
        result = flatten_path("M0,0 L1,1", scaling(3))
        assert result.bbox.as_tuple() == (0, 0, 3, 3)

    def test_empty_path(self):
        result = flatten_path("")
        assert result.is_empty
        assert result.bbox.is_empty
        assert result.bbox.as_tuple() == (float("inf"), float("inf"), float("-inf"), float("-inf"))


class TestMalformed:
    def test_truncated_final_command(self):
        warnings: list[str] = []
        result = flatten_path("M0,0 L10", on_warning=warnings.append)
        assert result.path_data == "M0,0"
        assert len(warnings) == 1

    def test_unknown_command_and_its_arguments_skipped(self):
        warnings: list[str] = []
        result = flatten_path("M0,0 X5,5 L10,0", on_warning=warnings.append)
        assert result.path_data == "M0,0 L10,0"
        assert any("'X'" in w for w in warnings)

    def test_numbers_before_first_command(self):
        warnings: list[str] = []
        result = flatten_path("5 5 M1,1", on_warning=warnings.append)
        assert result.path_data == "M1,1"
        assert len(warnings) == 1

    def test_missing_arguments_resume_at_next_command(self):
        result = flatten_path("M0,0 C1,1 2,2 L5,5", on_warning=lambda _: None)
        assert result.path_data == "M0,0 L5,5"

    def test_implicit_lineto_after_move(self):
        assert flatten_path("M0,0 5,5 10,0").path_data == "M0,0 L5,5 L10,0"

    def test_out_of_range_argument_skips_command(self):
        warnings: list[str] = []
        result = flatten_path("M1e999,0 L5,5", on_warning=warnings.append)
        assert result.path_data == "L5,5"
        assert "inf" not in result.path_data
        assert len(warnings) == 1

    def test_overflow_under_transform_skips_command(self):
        warnings: list[str] = []
        result = flatten_path("M0,0 L1e308,0 L1,1", scaling(10), on_warning=warnings.append)
        assert result.path_data == "M0,0 L10,10"
        assert len(warnings) == 1
