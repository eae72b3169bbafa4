"""End-to-end conversion through the pipeline."""

from __future__ import annotations

import re

import pytest

from vectorflatten import ConversionResult, ParseError, convert, convert_document
from vectorflatten.engine.config import ConverterConfig
from vectorflatten.engine.pipeline import Pipeline, create_pipeline
from tests.conftest import GRADIENT_SVG, HIDDEN_SVG, RED_SQUARE_SVG, TRANSLATED_PATH_SVG


def _path_data(xml: str) -> list[str]:
    return re.findall(r'android:pathData="([^"]*)"', xml)


def test_red_square():
    xml = convert(RED_SQUARE_SVG)
    assert 'android:viewportWidth="10"' in xml
    assert 'android:viewportHeight="10"' in xml
    assert 'android:width="10dp"' in xml
    assert _path_data(xml) == ["M0,0 L10,0 L10,10 L0,10 Z"]
    assert 'android:fillColor="#FFFF0000"' in xml
    assert "xmlns:aapt" not in xml
    assert not xml.startswith("<?xml")


def test_translate_round_trip():
    assert _path_data(convert(TRANSLATED_PATH_SVG)) == ["M5,5 L15,5 L15,15 Z"]


def test_hidden_elements_suppressed():
    result = convert_document(HIDDEN_SVG)
    assert result.path_count == 1
    assert 'android:name="visible"' in result.xml


def test_gradient_block():
    result = convert_document(GRADIENT_SVG)
    assert result.gradient_count == 1
    assert 'xmlns:aapt="http://schemas.android.com/aapt"' in result.xml
    assert '<aapt:attr name="android:fillColor">' in result.xml
    assert 'android:startX="2"' in result.xml
    assert 'android:endX="12"' in result.xml
    assert 'android:color="#FF0000FF"' in result.xml


def test_result_metadata():
    result = convert_document('<svg viewBox="0 0 4 4"><path d="M0,0 L10"/></svg>')
    assert isinstance(result, ConversionResult)
    assert result.completed_stages == ["S0.01", "S0.02", "S1.01"]
    assert result.path_count == 1
    assert len(result.warnings) == 1


def test_size_defaults():
    xml = convert('<svg><path d="M0,0 L1,1"/></svg>')
    assert 'android:width="24dp"' in xml
    assert 'android:viewportWidth="24"' in xml


def test_declared_size_with_units():
    xml = convert('<svg width="48px" height="32pt" viewBox="0 0 24 16"><path d="M0,0 L1,1"/></svg>')
    assert 'android:width="48dp"' in xml
    assert 'android:height="32dp"' in xml
    assert 'android:viewportHeight="16"' in xml


def test_embedded_svg_root():
    xhtml = '<html xmlns="http://www.w3.org/1999/xhtml"><body><svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 2 2"><path d="M0,0 L2,2"/></svg></body></html>'
    assert _path_data(convert(xhtml)) == ["M0,0 L2,2"]


@pytest.mark.parametrize("bad", ["", "<svg", "<not-svg/>", "plain text"])
def test_parse_errors(bad):
    with pytest.raises(ParseError):
        convert(bad)


def test_precision_config():
    result = create_pipeline(ConverterConfig(precision=1)).convert(
        '<svg viewBox="0 0 10 10"><path d="M1.26,2.04 L3,3"/></svg>'
    )
    assert _path_data(result.xml) == ["M1.3,2 L3,3"]


def test_names_can_be_disabled():
    xml = convert_document(HIDDEN_SVG, ConverterConfig(emit_names=False)).xml
    assert "android:name" not in xml


def test_conversions_are_isolated():
    pipeline = create_pipeline()
    assert isinstance(pipeline, Pipeline)
    pipeline.convert(GRADIENT_SVG)
    second = pipeline.convert('<svg viewBox="0 0 4 4"><rect width="2" height="2" fill="url(#g)"/></svg>')
    assert second.path_count == 0
    assert second.gradient_count == 0
    assert len(second.warnings) == 1
