"""Parse SVG/CSS transform lists into one AffineTransform.

Grammar (whitespace and commas separate everything)::

    transform-list := transform*
    transform      := NAME "(" NUMBER* ")"

The list composes as the matrix product ``T1 · T2 · ...``, so the right-most
function reaches the coordinates first. Anything that does not fit the
grammar is skipped; parsing never fails.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from vectorflatten.engine import affine
from vectorflatten.engine.affine import IDENTITY, AffineTransform
from vectorflatten.utils.scanner import finite_number, scan_number

logger = logging.getLogger(__name__)

# Accepted argument counts per transform function.
_ARITY: dict[str, tuple[int, ...]] = {
    "translate": (1, 2),
    "rotate": (1, 2, 3),
    "scale": (1, 2),
    "matrix": (6,),
    "skewx": (1,),
    "skewy": (1,),
}


@dataclass(frozen=True)
class _Token:
    kind: str  # "name" | "number" | "open" | "close" | "junk"
    text: str
    value: float = 0.0


def _tokenize(source: str) -> list[_Token]:
    tokens: list[_Token] = []
    i, n = 0, len(source)
    while i < n:
        ch = source[i]
        if ch.isspace() or ch == ",":
            i += 1
        elif ch == "(":
            tokens.append(_Token("open", ch))
            i += 1
        elif ch == ")":
            tokens.append(_Token("close", ch))
            i += 1
        elif ch.isalpha() or ch == "_":
            start = i
            while i < n and (source[i].isalnum() or source[i] in "_-"):
                i += 1
            tokens.append(_Token("name", source[start:i]))
        elif ch in "+-.0123456789":
            end = scan_number(source, i)
            if end == i:
                tokens.append(_Token("junk", ch))
                i += 1
                continue
            text = source[i:end]
            value = finite_number(text)
            if value is None:
                tokens.append(_Token("junk", text))
            else:
                tokens.append(_Token("number", text, value))
            i = end
            # A unit glued to the number ("45deg", "10px") carries no meaning here.
            while i < n and source[i].isalpha():
                i += 1
        else:
            tokens.append(_Token("junk", ch))
            i += 1
    return tokens


class _TransformListParser:
    def __init__(self, tokens: list[_Token]) -> None:
        self.tokens = tokens
        self.pos = 0

    def parse(self) -> AffineTransform:
        result = IDENTITY
        while self.pos < len(self.tokens):
            step = self._parse_transform()
            if step is not None:
                result = result.multiply(step)
        return result

    def _parse_transform(self) -> AffineTransform | None:
        token = self.tokens[self.pos]
        if token.kind != "name":
            self.pos += 1
            return None
        self.pos += 1
        if self.pos >= len(self.tokens) or self.tokens[self.pos].kind != "open":
            logger.debug("Transform %r without argument list skipped", token.text)
            return None
        self.pos += 1

        args: list[float] = []
        malformed = False
        while self.pos < len(self.tokens):
            current = self.tokens[self.pos]
            if current.kind == "close":
                self.pos += 1
                break
            if current.kind == "number":
                args.append(current.value)
            elif current.kind == "name":
                # A name inside the parentheses means the list is broken; resume there.
                malformed = True
                break
            else:
                malformed = True
            self.pos += 1
        else:
            malformed = True

        if malformed:
            logger.debug("Malformed transform %s(...) skipped", token.text)
            return None
        return _build(token.text.lower(), args)


def _build(name: str, args: list[float]) -> AffineTransform | None:
    arity = _ARITY.get(name)
    if arity is None or len(args) not in arity:
        logger.debug("Unsupported transform %s%s skipped", name, tuple(args))
        return None

    if name == "translate":
        return affine.translation(args[0], args[1] if len(args) > 1 else 0.0)
    if name == "rotate":
        cx = args[1] if len(args) > 1 else 0.0
        cy = args[2] if len(args) > 2 else 0.0
        return affine.rotation(args[0], cx, cy)
    if name == "scale":
        return affine.scaling(args[0], args[1] if len(args) > 1 else None)
    if name == "matrix":
        return AffineTransform(*args)
    if name == "skewx":
        return affine.skew_x(args[0])
    return affine.skew_y(args[0])


def parse_transform(source: str | None) -> AffineTransform:
    """Parse a transform list; empty or missing input yields the identity."""
    if not source or not source.strip():
        return IDENTITY
    return _TransformListParser(_tokenize(source)).parse()
