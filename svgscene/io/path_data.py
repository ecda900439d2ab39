"""
SVG path data parser.

Turns the `d` attribute of a path element into a list of path segments.
Supported commands are MoveTo, LineTo, cubic CurveTo and ClosePath in
both upper (absolute) and lower (relative) case. Each command letter
produces exactly one segment; implicit repeated coordinate groups are
not supported and count as surplus parameters.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import List, Optional

from ..core.shapes import (
    Point, PathSegment, MoveToSegment, LineToSegment,
    CubicBezierSegment, ClosePathSegment
)
from .errors import PathDataError

logger = logging.getLogger(__name__)

# Parameter count per supported command
COMMAND_ARITY = {
    'M': 2,
    'L': 2,
    'C': 6,
    'Z': 0,
}

_NUMBER_TOKEN_RE = re.compile(r'[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?')
_SEPARATOR_RE = re.compile(r'[\s,]*')


@dataclass
class PathCommand:
    """One command letter and the raw parameter text that follows it."""
    letter: str
    params: str
    index: int
    position: int

    @property
    def is_relative(self) -> bool:
        return self.letter.islower()

    @property
    def is_supported(self) -> bool:
        return self.letter.upper() in COMMAND_ARITY


def is_command_letter(char: str) -> bool:
    """Any ASCII letter except the exponent marker starts a command."""
    return char.isascii() and char.isalpha() and char not in 'eE'


def tokenize_path(d: str) -> List[PathCommand]:
    """
    Split path data into commands.

    Everything between one command letter and the next (or the end of
    the string) is that command's parameter text. Text before the first
    command letter belongs to no command and is dropped.
    """
    commands: List[PathCommand] = []
    letter: Optional[str] = None
    start = 0
    buffer: List[str] = []

    for pos, char in enumerate(d):
        if is_command_letter(char):
            if letter is not None:
                commands.append(PathCommand(letter, ''.join(buffer), len(commands), start))
            elif ''.join(buffer).strip():
                logger.debug(f"Dropping path data before first command: {''.join(buffer)!r}")
            letter = char
            start = pos
            buffer = []
        else:
            buffer.append(char)

    if letter is not None:
        commands.append(PathCommand(letter, ''.join(buffer), len(commands), start))
    elif ''.join(buffer).strip():
        logger.debug(f"Path data has no command letters: {d!r}")

    return commands


class PathDataParser:
    """
    Parse SVG path data into segments.

    Lower-case commands are resolved against the current point so every
    emitted segment holds absolute coordinates. With `legacy_relative`
    set, lower-case coordinates are kept as written instead.
    """

    def __init__(self, legacy_relative: bool = False):
        self.legacy_relative = legacy_relative

    def parse(self, d: str) -> List[PathSegment]:
        """Parse a `d` string. Raises PathDataError on bad parameters."""
        segments: List[PathSegment] = []
        current = Point(0.0, 0.0)
        subpath_start = Point(0.0, 0.0)

        for command in tokenize_path(d):
            if not command.is_supported:
                logger.debug(
                    f"Skipping unsupported path command '{command.letter}' "
                    f"at offset {command.position}"
                )
                continue

            values = self._read_params(command)
            kind = command.letter.upper()
            origin = current if command.is_relative and not self.legacy_relative else Point(0.0, 0.0)

            if kind == 'M':
                current = origin + Point(values[0], values[1])
                subpath_start = current
                segments.append(MoveToSegment(current))
            elif kind == 'L':
                current = origin + Point(values[0], values[1])
                segments.append(LineToSegment(current))
            elif kind == 'C':
                cp1 = origin + Point(values[0], values[1])
                cp2 = origin + Point(values[2], values[3])
                current = origin + Point(values[4], values[5])
                segments.append(CubicBezierSegment(cp1, cp2, current))
            else:  # Z
                current = subpath_start
                segments.append(ClosePathSegment())

        return segments

    def _read_params(self, command: PathCommand) -> List[float]:
        """
        Split and convert a command's parameters, enforcing its arity.

        Numbers may be separated by whitespace or commas, or written
        back to back when the sign or decimal point makes the boundary
        unambiguous ("10-5", "0.5.5").
        """
        tokens = []
        end = 0
        for match in _NUMBER_TOKEN_RE.finditer(command.params):
            self._check_gap(command, command.params[end:match.start()])
            tokens.append(match.group(0))
            end = match.end()
        self._check_gap(command, command.params[end:])

        arity = COMMAND_ARITY[command.letter.upper()]
        if len(tokens) != arity:
            raise PathDataError(
                f"Expected {arity} parameters, got {len(tokens)}",
                command.letter, command.index, command.position, command.params
            )

        values = [float(token) for token in tokens]
        if not all(math.isfinite(v) for v in values):
            raise PathDataError(
                "Number out of range",
                command.letter, command.index, command.position, command.params
            )
        return values

    def _check_gap(self, command: PathCommand, gap: str) -> None:
        """Text between numbers may only be separators."""
        if not _SEPARATOR_RE.fullmatch(gap):
            raise PathDataError(
                f"Invalid number {gap.strip()!r}",
                command.letter, command.index, command.position, command.params
            )


def parse_path_data(d: str, legacy_relative: bool = False) -> List[PathSegment]:
    """Parse path data with a one-off parser."""
    return PathDataParser(legacy_relative).parse(d)
