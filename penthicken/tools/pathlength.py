"""
Approximate drawn length of parsed path data.

Lines are measured exactly, curves by the length of their control polygon, which is an
upper bound rather than the true arc length. Smooth curves, arcs and close-path commands
contribute nothing and do not move the cursor. Relative commands are measured as if they
were absolute.
"""

from math import hypot, nan
from typing import Iterable, Sequence, Tuple, Union

from .pathparse import PathCommand, parse_path

Cursor = Tuple[float, float]

ORIGIN = (0.0, 0.0)


def _arg(values: Sequence[float], index: int) -> float:
    # Missing arguments read as NaN, matching a lenient parse.
    try:
        return values[index]
    except IndexError:
        return nan


def _distance(x0, y0, x1, y1) -> float:
    return hypot(x1 - x0, y1 - y0)


def segment_length(command: PathCommand, cursor: Cursor) -> Tuple[float, Cursor]:
    """
    Length contributed by a single command drawn from cursor.

    @param command: parsed path command
    @param cursor: current (x, y) position
    @return: (length, cursor after the command)
    """
    x, y = cursor
    v = command.values
    kind = command.kind
    if kind == "M":
        return 0.0, (_arg(v, 0), _arg(v, 1))
    if kind == "L":
        ex, ey = _arg(v, 0), _arg(v, 1)
        return _distance(x, y, ex, ey), (ex, ey)
    if kind == "H":
        ex = _arg(v, 0)
        return abs(ex - x), (ex, y)
    if kind == "V":
        ey = _arg(v, 0)
        return abs(ey - y), (x, ey)
    if kind == "C":
        c1x, c1y = _arg(v, 0), _arg(v, 1)
        c2x, c2y = _arg(v, 2), _arg(v, 3)
        ex, ey = _arg(v, 4), _arg(v, 5)
        length = (
            _distance(x, y, c1x, c1y)
            + _distance(c1x, c1y, c2x, c2y)
            + _distance(c2x, c2y, ex, ey)
        )
        return length, (ex, ey)
    if kind == "Q":
        cx, cy = _arg(v, 0), _arg(v, 1)
        ex, ey = _arg(v, 2), _arg(v, 3)
        return _distance(x, y, cx, cy) + _distance(cx, cy, ex, ey), (ex, ey)
    # S, T, A, Z and anything unknown.
    return 0.0, cursor


def commands_length(commands: Iterable[PathCommand]) -> float:
    total = 0.0
    cursor = ORIGIN
    for command in commands:
        length, cursor = segment_length(command, cursor)
        total += length
    return total


def path_length(path: Union[str, Iterable[PathCommand]]) -> float:
    """
    Approximate length of path data or of an already parsed command sequence.

    Malformed numbers propagate as NaN, which never compares as long enough to thicken.
    """
    if isinstance(path, str):
        path = parse_path(path)
    return commands_length(path)
