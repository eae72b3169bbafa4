"""Tests for the Kotlin converter source."""

from __future__ import annotations

from vectorflatten.codegen.kotlin import get_kotlin_converter_source


def test_returned_verbatim():
    assert get_kotlin_converter_source() == get_kotlin_converter_source()
    assert get_kotlin_converter_source().startswith("import kotlin.math.*")


def test_covers_the_algorithm():
    source = get_kotlin_converter_source()
    for marker in (
        "data class Matrix",
        "fun applyToArc",
        "fun parseTransform",
        "class PathFlattener",
        "object Shapes",
        "fun convert(svgString: String): String",
        "android:gradientRadius",
        "xmlns:aapt",
    ):
        assert marker in source


def test_braces_balanced():
    source = get_kotlin_converter_source()
    code = source.replace('"{"', "").replace('"}"', "")
    assert code.count("{") == code.count("}")


def test_rotate_accepts_the_same_argument_counts():
    source = get_kotlin_converter_source()
    for arity in ("1 -> Matrix.rotate(", "2 -> Matrix.rotate(", "3 -> Matrix.rotate("):
        assert arity in source
