"""
This module provides routines to create jittered copies of path data.

This is not a parallel offset of the curve. Every displaced command is moved by a fixed
distance in a random direction, which is enough to make a pen plotter lay several strokes
next to each other. Only moves, lines and cubic curves are displaced; all other commands
are copied as they are.
"""

from copy import copy
from math import ceil, cos, nan, sin, tau
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .pathparse import PathCommand, format_path, parse_path


def default_rng(seed: Optional[int] = None):
    """
    Random source for the jitter. Any object with a random() method returning a float in
    [0, 1) may be used in its place.
    """
    return np.random.default_rng(seed)


def copy_schedule(copies: int, offset_step: float) -> Iterator[Tuple[int, float]]:
    """
    Direction and distance of each copy. Copies alternate sides of the original, moving
    one step further out every second copy:

    copy 1: (-1, step), copy 2: (+1, step), copy 3: (-1, 2 * step), ...
    """
    for i in range(1, copies + 1):
        direction = 1 if i % 2 == 0 else -1
        yield direction, offset_step * ceil(i / 2)


def _pad(values: List[float], count: int) -> None:
    while len(values) < count:
        values.append(nan)


def offset_command(command: PathCommand, distance: float, rng) -> PathCommand:
    """
    Displaced copy of a single command. Draws one random angle for a move, line or cubic
    curve and none for anything else.

    @param command: source command, left unmodified
    @param distance: signed displacement length
    @param rng: random source
    @return: new command
    """
    shifted = copy(command)
    kind = command.kind
    if kind in ("M", "L"):
        angle = rng.random() * tau
        values = shifted.values
        _pad(values, 2)
        values[0] += cos(angle) * distance
        values[1] += sin(angle) * distance
    elif kind == "C":
        angle = rng.random() * tau
        dx = cos(angle) * distance
        dy = sin(angle) * distance
        values = shifted.values
        _pad(values, len(values) + len(values) % 2)
        for j in range(0, len(values), 2):
            values[j] += dx
            values[j + 1] += dy
    return shifted


def offset_path(path_data: str, distance: float, rng) -> str:
    commands = parse_path(path_data)
    return format_path([offset_command(c, distance, rng) for c in commands])


def offset_copies(path_data: str, copies: int, offset_step: float, rng=None) -> List[str]:
    """
    Create `copies` jittered variants of path_data.

    @param path_data: source path data
    @param copies: number of variants, always the length of the returned list
    @param offset_step: displacement of the innermost pair of copies
    @param rng: random source, a fresh unseeded generator when omitted
    @return: list of path data strings
    """
    if copies < 0:
        raise ValueError(f"copies must not be negative: {copies}")
    if rng is None:
        rng = default_rng()
    return [
        offset_path(path_data, magnitude * direction, rng)
        for direction, magnitude in copy_schedule(copies, offset_step)
    ]
