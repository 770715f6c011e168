"""Path-data command parser.

Tokenizes an SVG ``d`` string into PathCommands with raw parameters. Relative
commands keep their deltas; resolution happens in ``resolver``. Never raises:
numbers that can't be read become NaN and the offending token is kept on the
command so callers can report it.
"""

from __future__ import annotations

import math
import re

from tracesight.models.trace import CommandType, PathCommand, Point

_COMMAND_RE = re.compile(r"([MLHVCSQTAZmlhvcsqtaz])([^MLHVCSQTAZmlhvcsqtaz]*)")
_SEPARATOR_RE = re.compile(r"[\s,]+")
_NUMBER = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_NUMBER_RE = re.compile(_NUMBER)
# Several numbers packed without separators, e.g. "10-5" or ".5.5"
_PACKED_RE = re.compile(f"(?:{_NUMBER})+")


def parse_path_commands(path_data: str) -> list[PathCommand]:
    """Parse path data into commands in source order."""
    commands: list[PathCommand] = []

    for match in _COMMAND_RE.finditer(path_data):
        letter, params_str = match.group(1), match.group(2)
        params, malformed = _parse_params(params_str)
        command = PathCommand(
            type=CommandType(letter.upper()),
            is_relative=letter.islower(),
            params=params,
            malformed=malformed,
        )

        if command.type is CommandType.HORIZONTAL_LINE_TO:
            command.points = [Point(v, 0.0) for v in params]
        elif command.type is CommandType.VERTICAL_LINE_TO:
            command.points = [Point(0.0, v) for v in params]
        elif command.type is not CommandType.CLOSE_PATH:
            # M/L pairs; curve parameters are paired as opaque control points
            command.points = _pairs(params)

        commands.append(command)

    return commands


def _parse_params(params_str: str) -> tuple[list[float], list[str]]:
    values: list[float] = []
    malformed: list[str] = []

    for token in _SEPARATOR_RE.split(params_str.strip()):
        if not token:
            continue
        if _PACKED_RE.fullmatch(token):
            for number in _NUMBER_RE.findall(token):
                value = float(number)
                values.append(value)
                # Literals like 1e999 overflow to inf
                if not math.isfinite(value):
                    malformed.append(number)
        else:
            values.append(float("nan"))
            malformed.append(token)

    return values, malformed


def _pairs(params: list[float]) -> list[Point]:
    """Consume params two at a time; a trailing unpaired value is dropped."""
    return [Point(params[i], params[i + 1]) for i in range(0, len(params) - 1, 2)]
