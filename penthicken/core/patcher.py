"""
Thickening of long paths within SVG text.

The document is never parsed as XML. Path elements are located with a regular expression
and new elements are spliced in directly after the element they were copied from, so every
byte outside of the inserted text is preserved exactly as it was read.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..tools.offsetpath import default_rng, offset_copies
from ..tools.pathlength import path_length
from .exceptions import BadFileError

PATH_ELEMENT_RE = re.compile(r'<path([^>]*)d="([^"]*)"([^>]*)>')

DEFAULT_THRESHOLD = 100.0
DEFAULT_OFFSET = 0.5
DEFAULT_COPIES = 2


@dataclass(frozen=True)
class ThickenConfig:
    """
    Settings of one thickening run.
    """

    threshold: float = DEFAULT_THRESHOLD  # minimum approximate length to thicken
    offset_step: float = DEFAULT_OFFSET  # displacement step between copies
    copies: int = DEFAULT_COPIES  # duplicates added per qualifying path

    def __post_init__(self):
        try:
            whole = not isinstance(self.copies, bool) and int(self.copies) == self.copies
        except (OverflowError, TypeError, ValueError):
            whole = False
        if not whole:
            raise ValueError(f"copies must be a whole number: {self.copies!r}")
        if self.copies < 0:
            raise ValueError(f"copies must not be negative: {self.copies!r}")
        object.__setattr__(self, "copies", int(self.copies))


@dataclass(frozen=True)
class PathMatch:
    """
    A path element found in the document, with its location in the source text.
    """

    start: int
    end: int
    before: str  # attribute text between "<path" and d="
    data: str
    after: str  # attribute text between the closing quote of d and ">"

    @property
    def element(self) -> str:
        return f'<path{self.before}d="{self.data}"{self.after}>'

    def with_data(self, data: str) -> str:
        """Element text identical to this one apart from the path data."""
        return f'<path{self.before}d="{data}"{self.after}>'


def find_paths(text: str) -> List[PathMatch]:
    return [
        PathMatch(m.start(), m.end(), m.group(1), m.group(2), m.group(3))
        for m in PATH_ELEMENT_RE.finditer(text)
    ]


def thicken_document(
    text: str,
    config: Optional[ThickenConfig] = None,
    rng=None,
    channel: Optional[Callable] = None,
) -> str:
    """
    Duplicate every path in text whose approximate length reaches the threshold.

    Each duplicate is inserted on its own line directly after the original element, copies
    in the order they were generated. Paths below the threshold, or whose length is NaN
    because of malformed data, are left untouched.

    @param text: svg document text
    @param config: thickening settings, defaults when omitted
    @param rng: random source for the jitter, see offsetpath.default_rng
    @param channel: callable receiving progress messages
    @return: the patched document
    """
    if config is None:
        config = ThickenConfig()
    if rng is None:
        rng = default_rng()

    def report(message):
        if channel is not None:
            channel(message)

    pieces = []
    position = 0
    matches = find_paths(text)
    thickened = 0
    for match in matches:
        length = path_length(match.data)
        report(f"Path length: {length:.2f}")
        if not length >= config.threshold:
            continue
        report(f"  -> Thickening this path ({config.copies} copies)")
        thickened += 1
        pieces.append(text[position : match.end])
        position = match.end
        for data in offset_copies(match.data, config.copies, config.offset_step, rng):
            pieces.append("\n")
            pieces.append(match.with_data(data))
    pieces.append(text[position:])
    report(f"Thickened {thickened} of {len(matches)} paths")
    return "".join(pieces)


def read_document(filename) -> str:
    """
    Read an svg document without newline translation.

    @raises BadFileError: if the file does not exist or is not a readable file.
    """
    try:
        with open(filename, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError as e:
        raise BadFileError(f'Input file "{filename}" not found') from e
    except (IsADirectoryError, PermissionError, UnicodeDecodeError) as e:
        raise BadFileError(f'Input file "{filename}" could not be read') from e


def write_document(filename, text: str) -> None:
    with open(filename, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def thicken_file(
    input_file,
    output_file,
    config: Optional[ThickenConfig] = None,
    rng=None,
    channel: Optional[Callable] = None,
) -> str:
    """
    Thicken the paths of input_file and write the result to output_file.

    Nothing is written if the input cannot be read.
    """
    text = read_document(input_file)
    result = thicken_document(text, config=config, rng=rng, channel=channel)
    write_document(output_file, result)
    return result
