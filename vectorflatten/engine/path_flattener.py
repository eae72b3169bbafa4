"""Path flattening: bake an affine transform into SVG path data.

Input commands may be relative, shorthand (H/V/S/T) or implicit repeats.
Output uses absolute M, L, C, Q, A and Z only:

- H and V become L (a rotation can move both axes).
- S and T become C and Q with the reflected control point made explicit.
- A keeps its flags; the sweep flag flips when the transform mirrors.

Every transformed point (endpoints, control points, arc endpoints) extends the
bounding box of the result. Malformed input is skipped command by command.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field

from vectorflatten.engine.affine import IDENTITY, AffineTransform
from vectorflatten.utils.geometry import BoundingBox, format_number
from vectorflatten.utils.scanner import scan_number

logger = logging.getLogger(__name__)

PathToken = str | float

# Arguments consumed per repetition of each command.
ARG_COUNTS: dict[str, int] = {
    "M": 2,
    "L": 2,
    "H": 1,
    "V": 1,
    "C": 6,
    "S": 4,
    "Q": 4,
    "T": 2,
    "A": 7,
    "Z": 0,
}

# Argument slots of an arc holding the large-arc and sweep flags.
_ARC_FLAG_SLOTS = (3, 4)


def tokenize_path(d: str) -> list[PathToken]:
    """Split path data into command letters (str) and numbers (float).

    Arc flags are read as single digits so compact forms such as
    ``a5 5 0 0150 0`` split into ``0, 1, 50, 0``. Characters that are neither
    letters, separators nor numbers are dropped.
    """
    tokens: list[PathToken] = []
    command = ""
    slot = 0
    i, n = 0, len(d)
    while i < n:
        ch = d[i]
        if ch.isspace() or ch == ",":
            i += 1
            continue
        if ch.isalpha():
            tokens.append(ch)
            command = ch.upper()
            slot = 0
            i += 1
            continue
        if command == "A" and slot % 7 in _ARC_FLAG_SLOTS and ch in "01":
            tokens.append(float(ch))
            slot += 1
            i += 1
            continue
        end = scan_number(d, i)
        if end == i:
            i += 1
            continue
        tokens.append(float(d[i:end]))
        slot += 1
        i = end
    return tokens


@dataclass
class FlattenResult:
    path_data: str
    bbox: BoundingBox = field(default_factory=BoundingBox)

    @property
    def is_empty(self) -> bool:
        return not self.path_data


class PathFlattener:
    """Interprets one path string under a fixed transform.

    ``on_warning`` receives a message for every skipped command; without it
    the messages go to the module logger.
    """

    def __init__(
        self,
        transform: AffineTransform = IDENTITY,
        precision: int = 3,
        on_warning: Callable[[str], None] | None = None,
    ) -> None:
        self.transform = transform
        self.precision = precision
        self.on_warning = on_warning
        self._mirrored = transform.determinant < 0
        self._reset()

    def _reset(self) -> None:
        self.current = (0.0, 0.0)
        self.subpath_start = (0.0, 0.0)
        self.last_cubic: tuple[float, float] | None = None
        self.last_quad: tuple[float, float] | None = None
        self.output: list[str] = []
        self.bbox = BoundingBox()

    def flatten(self, d: str) -> FlattenResult:
        self._reset()
        tokens = tokenize_path(d or "")
        command: str | None = None
        stray_reported = False
        i, n = 0, len(tokens)

        while i < n:
            token = tokens[i]
            if isinstance(token, str):
                i += 1
                stray_reported = False
                op = token.upper()
                if op not in ARG_COUNTS:
                    self._warn(f"Unknown path command {token!r} skipped")
                    command = None
                    # Its arguments go with it, silently.
                    stray_reported = True
                    continue
                command = token
                if op == "Z":
                    self._close()
                continue

            if command is None or command in "Zz":
                if not stray_reported:
                    self._warn(f"Number {token:g} outside any command skipped")
                    stray_reported = True
                i += 1
                continue

            count = ARG_COUNTS[command.upper()]
            args = tokens[i:i + count]
            if len(args) < count or any(isinstance(a, str) for a in args):
                self._warn(f"Command {command!r} is missing arguments; skipped")
                while i < n and not isinstance(tokens[i], str):
                    i += 1
                continue
            i += count
            values = [float(a) for a in args]
            if not all(math.isfinite(v) for v in values):
                self._warn(f"Command {command!r} has an out-of-range argument; skipped")
            else:
                try:
                    self._execute(command, values)
                except OverflowError as e:
                    self._warn(f"Command {command!r} skipped: {e}")
            if command == "M":
                command = "L"
            elif command == "m":
                command = "l"

        return FlattenResult(" ".join(self.output), self.bbox)

    def _warn(self, message: str) -> None:
        if self.on_warning is not None:
            self.on_warning(message)
        else:
            logger.warning(message)

    def _map(self, x: float, y: float) -> tuple[float, float]:
        px, py = self.transform.apply(x, y)
        if not (math.isfinite(px) and math.isfinite(py)):
            raise OverflowError(f"({x:g}, {y:g}) leaves the float range")
        return px, py

    def _point(self, point: tuple[float, float]) -> str:
        self.bbox.add(*point)
        return f"{format_number(point[0], self.precision)},{format_number(point[1], self.precision)}"

    def _emit(self, letter: str, *points: tuple[float, float]) -> None:
        mapped = [self._map(x, y) for x, y in points]
        self.output.append(letter + " ".join(self._point(p) for p in mapped))

    def _execute(self, command: str, args: list[float]) -> None:
        op = command.upper()
        relative = command.islower()
        cx, cy = self.current
        ox, oy = (cx, cy) if relative else (0.0, 0.0)
        prev_cubic, prev_quad = self.last_cubic, self.last_quad
        self.last_cubic = self.last_quad = None

        if op == "M":
            end = (args[0] + ox, args[1] + oy)
            self._emit("M", end)
            self.subpath_start = end
        elif op == "L":
            end = (args[0] + ox, args[1] + oy)
            self._emit("L", end)
        elif op == "H":
            end = (args[0] + ox, cy)
            self._emit("L", end)
        elif op == "V":
            end = (cx, args[0] + oy)
            self._emit("L", end)
        elif op == "C":
            c1 = (args[0] + ox, args[1] + oy)
            c2 = (args[2] + ox, args[3] + oy)
            end = (args[4] + ox, args[5] + oy)
            self._emit("C", c1, c2, end)
            self.last_cubic = c2
        elif op == "S":
            c1 = _reflect(prev_cubic, self.current)
            c2 = (args[0] + ox, args[1] + oy)
            end = (args[2] + ox, args[3] + oy)
            self._emit("C", c1, c2, end)
            self.last_cubic = c2
        elif op == "Q":
            c1 = (args[0] + ox, args[1] + oy)
            end = (args[2] + ox, args[3] + oy)
            self._emit("Q", c1, end)
            self.last_quad = c1
        elif op == "T":
            c1 = _reflect(prev_quad, self.current)
            end = (args[0] + ox, args[1] + oy)
            self._emit("Q", c1, end)
            self.last_quad = c1
        else:
            end = (args[5] + ox, args[6] + oy)
            self._arc(args[0], args[1], args[2], args[3], args[4], end)

        self.current = end

    def _arc(
        self,
        rx: float,
        ry: float,
        rotation: float,
        large_arc: float,
        sweep: float,
        end: tuple[float, float],
    ) -> None:
        rx, ry = abs(rx), abs(ry)
        if rx == 0 or ry == 0:
            # Zero radius: the arc is a straight line to its endpoint.
            self._emit("L", end)
            return

        new_rx, new_ry, new_rotation = self.transform.apply_to_arc(rx, ry, rotation)
        if not (math.isfinite(new_rx) and math.isfinite(new_ry)):
            raise OverflowError(f"arc radii ({rx:g}, {ry:g}) leave the float range")
        mapped_end = self._map(*end)
        large_flag = 1 if large_arc != 0 else 0
        sweep_flag = 1 if sweep != 0 else 0
        if self._mirrored:
            sweep_flag = 1 - sweep_flag

        fmt = self.precision
        self.output.append(
            f"A{format_number(new_rx, fmt)},{format_number(new_ry, fmt)} "
            f"{format_number(new_rotation, fmt)} {large_flag},{sweep_flag} "
            f"{self._point(mapped_end)}"
        )

    def _close(self) -> None:
        self.output.append("Z")
        self.current = self.subpath_start
        self.last_cubic = self.last_quad = None


def _reflect(control: tuple[float, float] | None, current: tuple[float, float]) -> tuple[float, float]:
    if control is None:
        return current
    return (2 * current[0] - control[0], 2 * current[1] - control[1])


def flatten_path(
    d: str,
    transform: AffineTransform = IDENTITY,
    precision: int = 3,
    on_warning: Callable[[str], None] | None = None,
) -> FlattenResult:
    """Flatten ``d`` under ``transform``; see PathFlattener."""
    return PathFlattener(transform, precision, on_warning).flatten(d)
