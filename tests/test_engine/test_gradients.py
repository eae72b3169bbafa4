"""Tests for gradient collection, href inheritance and coordinate resolution."""

from __future__ import annotations

import math

import pytest

from vectorflatten.engine.gradients import (
    GradientRegistry,
    USER_SPACE_ON_USE,
    parse_offset,
    resolve_coordinate,
)
from vectorflatten.engine.style import StyleResolver
from vectorflatten.svg.parser import parse_document
from vectorflatten.utils.geometry import BoundingBox
from tests.conftest import GRADIENT_SVG


def _bbox(min_x, min_y, max_x, max_y) -> BoundingBox:
    return BoundingBox(min_x, min_y, max_x, max_y)


def _registry(svg: str) -> tuple[GradientRegistry, list[str]]:
    warnings: list[str] = []
    registry = GradientRegistry(on_warning=warnings.append)
    root = parse_document(svg)
    registry.collect(root, StyleResolver.from_document(root))
    return registry, warnings


class TestResolveCoordinate:
    def test_percentages_follow_bounding_box(self):
        bbox = _bbox(2, 0, 12, 4)
        assert resolve_coordinate("x1", "0%", "objectBoundingBox", bbox) == 2
        assert resolve_coordinate("x2", "100%", "objectBoundingBox", bbox) == 12

    def test_percentages_ignore_units(self):
        bbox = _bbox(2, 0, 12, 4)
        assert resolve_coordinate("x2", "50%", USER_SPACE_ON_USE, bbox) == 7

    def test_bounding_box_fraction(self):
        bbox = _bbox(2, 10, 12, 30)
        assert resolve_coordinate("x2", "0.5", "objectBoundingBox", bbox) == 7
        assert resolve_coordinate("y1", "0.25", "objectBoundingBox", bbox) == 15

    def test_user_space_shifted_by_viewport_origin(self):
        bbox = _bbox(0, 0, 1, 1)
        assert resolve_coordinate("x1", "5", USER_SPACE_ON_USE, bbox, (-10, -20)) == -5
        assert resolve_coordinate("cy", "25px", USER_SPACE_ON_USE, bbox, (-10, -20)) == 5

    def test_radius_uses_diagonal(self):
        bbox = _bbox(0, 0, 6, 8)
        assert resolve_coordinate("r", "50%", "objectBoundingBox", bbox) == 5

    def test_unparseable_value_uses_default(self):
        bbox = _bbox(0, 0, 10, 10)
        assert resolve_coordinate("x2", "auto", "objectBoundingBox", bbox) == 10

    def test_out_of_range_value_uses_default(self):
        bbox = _bbox(0, 0, 10, 10)
        assert resolve_coordinate("x2", "1e999", USER_SPACE_ON_USE, bbox) == 10

    def test_empty_bounding_box(self):
        assert resolve_coordinate("x2", "100%", "objectBoundingBox", BoundingBox()) == 0


def test_parse_offset():
    assert parse_offset("50%") == 0.5
    assert parse_offset("0.3") == 0.3
    assert parse_offset("1.5") == 1.0
    assert parse_offset(None) == 0.0
    assert parse_offset("x") == 0.0


class TestRegistry:
    def test_collect(self):
        registry, _ = _registry(GRADIENT_SVG)
        assert len(registry) == 2
        assert "base" in registry
        assert "missing" not in registry

    def test_href_inherits_stops(self):
        registry, warnings = _registry(GRADIENT_SVG)
        gradient = registry.resolve("g")
        assert [s.color for s in gradient.stops] == ["#ff0000", "#0000ff"]
        assert gradient.coordinates == {"x1": "0%", "x2": "100%"}
        assert warnings == []

    def test_resolve_for_bounding_box(self):
        registry, _ = _registry(GRADIENT_SVG)
        resolved = registry.resolve_for("g", _bbox(2, 0, 12, 4))
        assert resolved.kind == "linear"
        assert resolved.coordinates == {"x1": 2, "y1": 0, "x2": 12, "y2": 0}
        assert [s.argb for s in resolved.stops] == ["#FFFF0000", "#FF0000FF"]
        assert resolved.tile_mode is None

    def test_unknown_id(self):
        registry, _ = _registry(GRADIENT_SVG)
        assert registry.resolve("nope") is None
        assert registry.resolve_for("nope", _bbox(0, 0, 1, 1)) is None

    def test_cyclic_href(self):
        svg = '''<svg xmlns="http://www.w3.org/2000/svg">
          <linearGradient id="a" href="#b"><stop offset="0" stop-color="#000"/></linearGradient>
          <linearGradient id="b" href="#a" x1="10%"/>
        </svg>'''
        registry, warnings = _registry(svg)
        gradient = registry.resolve("b")
        assert gradient.coordinates["x1"] == "10%"
        assert len(gradient.stops) == 1
        assert len(warnings) == 1
        assert "cyclic" in warnings[0]

    def test_missing_href_target(self):
        svg = '''<svg xmlns="http://www.w3.org/2000/svg">
          <radialGradient id="r" href="#gone"><stop offset="1" stop-color="#fff"/></radialGradient>
        </svg>'''
        registry, warnings = _registry(svg)
        assert registry.resolve("r") is not None
        assert "unknown" in warnings[0]

    def test_radial_defaults_and_spread(self):
        svg = '''<svg xmlns="http://www.w3.org/2000/svg">
          <radialGradient id="r" spreadMethod="reflect">
            <stop offset="1" stop-color="#fff"/>
            <stop offset="0" stop-color="#000"/>
          </radialGradient>
        </svg>'''
        registry, _ = _registry(svg)
        resolved = registry.resolve_for("r", _bbox(0, 0, 6, 8))
        assert resolved.coordinates == {"cx": 3, "cy": 4, "r": 5}
        assert resolved.tile_mode == "mirror"
        assert [s.offset for s in resolved.stops] == [0, 1]

    def test_stop_style_and_opacity(self):
        svg = '''<svg xmlns="http://www.w3.org/2000/svg">
          <style>.half { stop-opacity: 0.5 }</style>
          <linearGradient id="g">
            <stop offset="50%" class="half" style="stop-color:#00ff00"/>
          </linearGradient>
        </svg>'''
        registry, _ = _registry(svg)
        stop = registry.resolve("g").stops[0]
        assert stop.offset == 0.5
        assert stop.argb == "#8000FF00"

    def test_none_and_current_color_stops(self):
        svg = '''<svg xmlns="http://www.w3.org/2000/svg">
          <linearGradient id="g">
            <stop offset="0" stop-color="none"/>
            <stop offset="0.5" stop-color="transparent"/>
            <stop offset="1" stop-color="currentColor" color="#00ff00"/>
          </linearGradient>
        </svg>'''
        registry, _ = _registry(svg)
        stops = registry.resolve("g").stops
        assert [s.argb for s in stops] == ["#00000000", "#00000000", "#FF00FF00"]

    def test_user_space_gradient(self):
        svg = '''<svg xmlns="http://www.w3.org/2000/svg">
          <linearGradient id="u" gradientUnits="userSpaceOnUse" x1="4" y1="4" x2="20" y2="4">
            <stop offset="0" stop-color="#000"/><stop offset="1" stop-color="#fff"/>
          </linearGradient>
        </svg>'''
        registry, _ = _registry(svg)
        resolved = registry.resolve_for("u", _bbox(0, 0, 100, 100), (-2, 0))
        assert resolved.coordinates == {"x1": 2, "y1": 4, "x2": 18, "y2": 4}

    def test_collect_is_per_registry(self):
        first, _ = _registry(GRADIENT_SVG)
        second, _ = _registry('<svg xmlns="http://www.w3.org/2000/svg"/>')
        assert len(first) == 2
        assert len(second) == 0
        assert math.isclose(first.resolve_for("g", _bbox(0, 0, 1, 1)).coordinates["x2"], 1)


@pytest.mark.parametrize("units", [None, "objectBoundingBox"])
def test_default_units_are_bounding_box(units):
    from vectorflatten.engine.gradients import GradientDef

    assert GradientDef(id="x", kind="linear", units=units).effective_units == "objectBoundingBox"
