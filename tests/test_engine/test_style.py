"""Tests for the style cascade."""

from __future__ import annotations

from vectorflatten.engine.style import (
    StyleResolver,
    inherit,
    is_hidden,
    parse_declarations,
    parse_stylesheet,
)
from vectorflatten.svg.parser import parse_document
from tests.conftest import STYLESHEET_SVG


def test_parse_declarations():
    assert parse_declarations("fill: red; Stroke:blue !important; bogus; :x") == {
        "fill": "red",
        "stroke": "blue",
    }


def test_parse_stylesheet_groups_and_merges():
    rules = parse_stylesheet("/* c */ .a, .b { fill: red } .a { stroke: blue }")
    assert rules == {"a": {"fill": "red", "stroke": "blue"}, "b": {"fill": "red"}}


def test_parse_stylesheet_ignores_empty_blocks():
    assert parse_stylesheet(".a {} garbage") == {}


def test_cascade_order():
    root = parse_document(STYLESHEET_SVG)
    resolver = StyleResolver.from_document(root)
    rects = [node for node in root.iter() if node.tag == "rect"]

    assert resolver.resolve(rects[0])["fill"] == "#336699"
    # presentation attribute beats class rule
    accent = resolver.resolve(rects[1])
    assert accent["fill"] == "#ff0000"
    assert accent["stroke"] == "#ffffff"
    # inline style beats both
    assert resolver.resolve(rects[2])["fill"] == "#00ff00"


def test_inherit_keeps_only_inheritable_properties():
    parent = {"fill": "red", "opacity": "0.5", "transform": "scale(2)", "stroke-width": "3"}
    own = {"stroke-width": "inherit", "d": "M0,0"}
    assert inherit(parent, own) == {"fill": "red", "stroke-width": "3", "d": "M0,0"}


def test_inherit_own_overrides_parent():
    assert inherit({"fill": "red"}, {"fill": "blue"})["fill"] == "blue"


def test_is_hidden():
    assert is_hidden({"display": "none"})
    assert is_hidden({"opacity": "0"})
    assert is_hidden({"opacity": "0%"})
    assert not is_hidden({"opacity": "0.01"})
    assert not is_hidden({"display": "inline"})
    assert not is_hidden({})
