"""Numeric literal scanning shared by the path, transform and points parsers."""

from __future__ import annotations

import math
from collections.abc import Callable


def scan_number(text: str, start: int) -> int:
    """Return the end index of the numeric literal at ``start`` (``start`` itself if there is none).

    Accepts a leading sign, a decimal point and an exponent: ``-1.5e-3``,
    ``.5``, ``10.``. A second decimal point ends the literal, so ``1.5.5``
    scans as ``1.5`` followed by ``.5``.
    """
    i, n = start, len(text)
    if i < n and text[i] in "+-":
        i += 1
    digits = 0
    while i < n and text[i].isdigit():
        i += 1
        digits += 1
    if i < n and text[i] == ".":
        i += 1
        while i < n and text[i].isdigit():
            i += 1
            digits += 1
    if digits == 0:
        return start
    if i < n and text[i] in "eE":
        j = i + 1
        if j < n and text[j] in "+-":
            j += 1
        if j < n and text[j].isdigit():
            while j < n and text[j].isdigit():
                j += 1
            i = j
    return i


def finite_number(literal: str) -> float | None:
    """Value of a scanned literal, or None when it overflows (``1e999``)."""
    value = float(literal)
    return value if math.isfinite(value) else None


def parse_number_list(
    text: str | None,
    on_warning: Callable[[str], None] | None = None,
) -> list[float]:
    """Every numeric literal in ``text``; separators, junk and overflowing numbers are skipped."""
    values: list[float] = []
    if not text:
        return values
    i, n = 0, len(text)
    while i < n:
        end = scan_number(text, i)
        if end == i:
            i += 1
            continue
        value = finite_number(text[i:end])
        if value is None:
            if on_warning is not None:
                on_warning(f"Number {text[i:end]!r} is out of range; skipped")
        else:
            values.append(value)
        i = end
    return values


def parse_length(
    value: str | None,
    default: float = 0.0,
    on_warning: Callable[[str], None] | None = None,
) -> float:
    """Parse an SVG length, ignoring a unit suffix (``12px`` -> 12.0).

    Missing, unparsable and out-of-range values yield ``default``.
    """
    if value is None:
        return default
    text = value.strip()
    end = scan_number(text, 0)
    if end == 0:
        return default
    number = finite_number(text[:end])
    if number is None:
        if on_warning is not None:
            on_warning(f"Length {text!r} is out of range; using {default:g}")
        return default
    return number
