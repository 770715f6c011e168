"""Relative → absolute coordinate resolution.

A single left-to-right fold over the command list carrying the pen position
(cursor) and the start of the current subpath. Input commands are not mutated.
"""

from __future__ import annotations

from tracesight.models.trace import CommandType, PathCommand, Point


def resolve_commands(commands: list[PathCommand]) -> list[PathCommand]:
    """Return the commands with every point in absolute coordinates."""
    cursor = Point(0.0, 0.0)
    subpath_start = Point(0.0, 0.0)
    resolved: list[PathCommand] = []

    for cmd in commands:
        points: list[Point] = []
        rel = cmd.is_relative

        if cmd.type is CommandType.MOVE_TO:
            for i, p in enumerate(cmd.points):
                cursor = Point(cursor.x + p.x, cursor.y + p.y) if rel else p
                points.append(cursor)
                # Only the first pair of an M starts a subpath
                if i == 0:
                    subpath_start = cursor

        elif cmd.type is CommandType.LINE_TO:
            for p in cmd.points:
                cursor = Point(cursor.x + p.x, cursor.y + p.y) if rel else p
                points.append(cursor)

        elif cmd.type is CommandType.HORIZONTAL_LINE_TO:
            for p in cmd.points:
                cursor = Point(cursor.x + p.x if rel else p.x, cursor.y)
                points.append(cursor)

        elif cmd.type is CommandType.VERTICAL_LINE_TO:
            for p in cmd.points:
                cursor = Point(cursor.x, cursor.y + p.y if rel else p.y)
                points.append(cursor)

        elif cmd.type is CommandType.CLOSE_PATH:
            points.append(subpath_start)
            cursor = subpath_start

        else:
            # Curves and arcs: control points kept verbatim, cursor untouched
            points = list(cmd.points)

        resolved.append(
            PathCommand(
                type=cmd.type,
                points=points,
                is_relative=False,
                params=list(cmd.params),
                malformed=list(cmd.malformed),
            )
        )

    return resolved
