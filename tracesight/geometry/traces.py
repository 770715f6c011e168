"""Per-trace analysis: absolute polyline, endpoints, direction, issues."""

from __future__ import annotations

import dataclasses

from tracesight.geometry.commands import parse_path_commands
from tracesight.geometry.resolver import resolve_commands
from tracesight.models.trace import (
    Direction,
    IssueKind,
    PathCommand,
    Point,
    Trace,
    TraceIssue,
)

# A trace is horizontal/vertical when one axis spans more than this
# multiple of the other; anything in between is diagonal.
_DOMINANCE_RATIO = 2.0


def analyze_trace(trace: Trace) -> Trace:
    """Return an enriched copy of ``trace``; raw fields are carried over unchanged."""
    commands = resolve_commands(parse_path_commands(trace.path_data))
    points = flatten_points(commands)

    start = points[0] if points else None
    end = points[-1] if points else None

    return dataclasses.replace(
        trace,
        commands=commands,
        points=points,
        start_point=start,
        end_point=end,
        direction=classify_direction(start, end) if len(points) >= 2 else Direction.UNKNOWN,
        issues=[],
        connected_traces=set(),
        net_id=None,
        features={},
    )


def flatten_points(commands: list[PathCommand]) -> list[Point]:
    """Concatenate resolved points in command order, skipping opaque commands."""
    points: list[Point] = []
    for cmd in commands:
        if not cmd.opaque:
            points.extend(cmd.points)
    return points


def classify_direction(start: Point | None, end: Point | None) -> Direction:
    """Coarse whole-trace direction from the start→end displacement."""
    if start is None or end is None:
        return Direction.UNKNOWN

    dx = abs(end.x - start.x)
    dy = abs(end.y - start.y)

    if dx > dy * _DOMINANCE_RATIO:
        return Direction.HORIZONTAL
    if dy > dx * _DOMINANCE_RATIO:
        return Direction.VERTICAL
    return Direction.DIAGONAL


def find_trace_issues(trace: Trace) -> list[TraceIssue]:
    """Collect the non-fatal problems of an analyzed trace."""
    issues: list[TraceIssue] = []

    for cmd in trace.commands:
        for token in cmd.malformed:
            issues.append(TraceIssue(IssueKind.MALFORMED_NUMBER, f"{cmd.type.value}: {token!r}"))
        if cmd.opaque:
            issues.append(
                TraceIssue(
                    IssueKind.UNSUPPORTED_COMMAND,
                    f"{cmd.type.value} with {len(cmd.params)} parameters kept as opaque points",
                )
            )

    has_malformed = any(i.kind is IssueKind.MALFORMED_NUMBER for i in issues)
    if trace.points and not trace.is_valid and not has_malformed:
        # Finite inputs that overflowed while resolving relative moves
        issues.append(TraceIssue(IssueKind.NON_FINITE_COORDINATE, "resolved coordinates overflow"))

    if not trace.points:
        issues.append(TraceIssue(IssueKind.EMPTY_TRACE, "no resolvable points"))

    return issues
