"""
Lenient tokenizer for SVG path data.

Path data is split into runs of one command letter and the text up to the next command
letter. Nothing is validated: argument counts are not checked against the command and
tokens that are not numbers become NaN, so malformed data survives structurally and is
dealt with (or ignored) by the consumers.
"""

import re
from decimal import Decimal
from math import inf, isinf, isnan, nan
from typing import List, Sequence

PATH_COMMANDS = "MLHVCSQTAZmlhvcsqtaz"

COMMAND_RE = re.compile(f"([{PATH_COMMANDS}])([^{PATH_COMMANDS}]*)")
SEPARATOR_RE = re.compile(r"[\s,]+")
# Longest numeric prefix of a token, "10px" reads as 10.
FLOAT_PREFIX_RE = re.compile(r"[-+]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?)")


class PathCommand:
    """
    A single path command: the letter exactly as written and its numeric arguments.

    Upper case letters are absolute, lower case relative. Relative coordinates are never
    resolved here.
    """

    __slots__ = ("command", "values")

    def __init__(self, command: str, values: Sequence[float] = ()):
        self.command = command
        self.values = list(values)

    def __repr__(self):
        return f"PathCommand({repr(self.command)}, {repr(self.values)})"

    def __eq__(self, other):
        if not isinstance(other, PathCommand):
            return NotImplemented
        return self.command == other.command and self.values == other.values

    def __str__(self):
        return self.command + ",".join(format_value(v) for v in self.values)

    def __copy__(self):
        return PathCommand(self.command, self.values)

    @property
    def kind(self) -> str:
        """Command letter folded to upper case, relative and absolute alike."""
        return self.command.upper()


def parse_float(token: str) -> float:
    """
    Reads the leading number of token. Tokens without one are NaN, never an error.
    """
    match = FLOAT_PREFIX_RE.match(token.strip())
    if match is None:
        return nan
    number = match.group(0)
    if number.endswith("Infinity"):
        return -inf if number.startswith("-") else inf
    return float(number)


def parse_path(path_data: str) -> List[PathCommand]:
    """
    Tokenize path data into the ordered list of commands it contains.

    Text before the first command letter is ignored.
    """
    commands = []
    for match in COMMAND_RE.finditer(path_data):
        letter, arguments = match.group(1), match.group(2).strip()
        values = [parse_float(v) for v in SEPARATOR_RE.split(arguments) if v]
        commands.append(PathCommand(letter, values))
    return commands


def format_value(value: float) -> str:
    """
    Shortest round-trip form of value, written like a javascript number: plain decimals
    between 1e-7 and 1e21, exponent notation such as "1e-7" or "1.5e+21" outside of it.
    """
    if isnan(value):
        return "NaN"
    if isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    number = Decimal(repr(abs(float(value)))).normalize().as_tuple()
    digits = "".join(str(d) for d in number.digits)
    k = len(digits)
    n = number.exponent + k  # position of the decimal point within digits
    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        exponent = n - 1
        mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
        text = f"{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"
    return sign + text


def format_path(commands: Sequence[PathCommand]) -> str:
    """
    Writes commands back as path data: letter then comma separated arguments, with no
    separator between commands.
    """
    return "".join(str(c) for c in commands)
