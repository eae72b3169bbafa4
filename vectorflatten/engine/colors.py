"""Colour parsing and ARGB encoding.

Only hex (#rgb, #rgba, #rrggbb, #rrggbbaa) and rgb()/rgba() are decoded.
Anything else (named colours, system colours) passes through unchanged.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3,8})$")
_RGB_RE = re.compile(r"^rgba?\(\s*([^)]*)\)$", re.IGNORECASE)
_URL_RE = re.compile(r"^url\(\s*['\"]?#([^)'\"]+)['\"]?\s*\)\s*(.*)$", re.IGNORECASE)

NONE_VALUES = frozenset({"none", "transparent"})


@dataclass(frozen=True)
class Rgba:
    r: int
    g: int
    b: int
    a: float = 1.0

    def to_argb(self, opacity: float = 1.0) -> str:
        """Encode as ``#AARRGGBB`` with ``opacity`` folded into the alpha byte."""
        alpha = round(_clamp(self.a * opacity) * 255)
        return f"#{alpha:02X}{self.r:02X}{self.g:02X}{self.b:02X}"


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def parse_rgba(value: str) -> Rgba | None:
    """Decode a hex or rgb()/rgba() colour; None if the syntax is not one of those."""
    text = value.strip()
    m = _HEX_RE.match(text)
    if m:
        digits = m.group(1)
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) == 6:
            digits += "ff"
        if len(digits) != 8:
            return None
        return Rgba(
            int(digits[0:2], 16),
            int(digits[2:4], 16),
            int(digits[4:6], 16),
            int(digits[6:8], 16) / 255,
        )

    m = _RGB_RE.match(text)
    if m:
        parts = [p for p in re.split(r"[\s,/]+", m.group(1).strip()) if p]
        if len(parts) not in (3, 4):
            return None
        try:
            channels = [_channel(p) for p in parts[:3]]
            alpha = _alpha(parts[3]) if len(parts) == 4 else 1.0
        except ValueError:
            return None
        return Rgba(*channels, a=alpha)
    return None


def _channel(text: str) -> int:
    if text.endswith("%"):
        return round(_clamp(float(text[:-1]) / 100) * 255)
    return int(round(max(0.0, min(255.0, float(text)))))


def _alpha(text: str) -> float:
    if text.endswith("%"):
        return _clamp(float(text[:-1]) / 100)
    return _clamp(float(text))


def is_none(value: str | None) -> bool:
    return value is None or value.strip().lower() in NONE_VALUES


def to_android_color(value: str, opacity: float = 1.0) -> str:
    """Encode a colour for VectorDrawable; unknown syntaxes pass through."""
    rgba = parse_rgba(value)
    if rgba is None:
        return value.strip()
    return rgba.to_argb(opacity)


def color_alpha(value: str) -> float:
    """Alpha channel of a colour; 0 for none/transparent, 1 when unknown."""
    if is_none(value):
        return 0.0
    rgba = parse_rgba(value)
    return 1.0 if rgba is None else rgba.a


def parse_paint_url(value: str) -> tuple[str, str | None] | None:
    """Split ``url(#id) fallback`` into ``(id, fallback)``; None if not a url()."""
    m = _URL_RE.match(value.strip())
    if not m:
        return None
    fallback = m.group(2).strip() or None
    return m.group(1).strip(), fallback


def parse_opacity(value: str | None, default: float = 1.0) -> float:
    """Opacity number or percentage clamped to [0, 1]; malformed input yields ``default``."""
    if value is None:
        return default
    text = value.strip()
    try:
        if text.endswith("%"):
            return _clamp(float(text[:-1]) / 100)
        return _clamp(float(text))
    except ValueError:
        return default
