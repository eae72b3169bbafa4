"""Shared test fixtures."""

from __future__ import annotations

import pytest

from vectorflatten.engine.context import ConversionContext
from vectorflatten.engine.style import StyleResolver
from vectorflatten.engine.walker import DocumentWalker
from vectorflatten.svg.parser import parse_document
from vectorflatten.svg.viewport import read_viewport


RED_SQUARE_SVG = '<svg viewBox="0 0 10 10"><rect x="0" y="0" width="10" height="10" fill="#ff0000"/></svg>'

TRANSLATED_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20">
  <path transform="translate(5,5)" d="M0,0 L10,0 L10,10 Z"/>
</svg>'''

NESTED_GROUPS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="48" height="48" viewBox="0 0 24 24">
  <g transform="translate(10,0)">
    <g transform="scale(2)">
      <path id="inner" d="M0,0 L1,0 L1,1 Z" fill="#00ff00"/>
    </g>
  </g>
</svg>'''

HIDDEN_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <g opacity="0">
    <rect width="4" height="4"/>
    <g><circle cx="12" cy="12" r="2"/></g>
  </g>
  <g style="display:none">
    <path d="M0,0 L5,5"/>
  </g>
  <rect id="visible" x="1" y="1" width="2" height="2" fill="#000"/>
</svg>'''

GRADIENT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 24 24">
  <defs>
    <linearGradient id="base">
      <stop offset="0" stop-color="#ff0000"/>
      <stop offset="1" stop-color="#0000ff"/>
    </linearGradient>
    <linearGradient id="g" xlink:href="#base" x1="0%" x2="100%"/>
  </defs>
  <rect x="2" y="0" width="10" height="4" fill="url(#g)"/>
</svg>'''

STROKE_ICON_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
  <line x1="9" x2="9.01" y1="9" y2="9"/>
</svg>'''

STYLESHEET_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <style>
    /* brand colours */
    .primary, .accent { fill: #336699; }
    .accent { stroke: #ffffff; stroke-width: 2 }
  </style>
  <rect class="primary" width="10" height="10"/>
  <rect class="accent" x="12" width="10" height="10" fill="#ff0000"/>
  <rect class="primary" y="12" width="10" height="10" style="fill: #00ff00 !important"/>
</svg>'''


def walk(svg: str) -> ConversionContext:
    """Run collection and drawing over ``svg`` without serializing."""
    root = parse_document(svg)
    ctx = ConversionContext(root=root, viewport=read_viewport(root))
    ctx.styles = StyleResolver.from_document(root)
    ctx.gradients.collect(root, ctx.styles)
    DocumentWalker(ctx).walk()
    return ctx


@pytest.fixture
def red_square_svg() -> str:
    return RED_SQUARE_SVG


@pytest.fixture
def gradient_svg() -> str:
    return GRADIENT_SVG


@pytest.fixture
def stroke_icon_svg() -> str:
    return STROKE_ICON_SVG
