"""Core trace data model — points, path commands, traces and junctions.

Per-trace results → Trace.* derived fields and Trace.features
Cross-trace results → Junction (rebuilt on every analysis run)
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Any, NamedTuple

import numpy as np
from numpy.typing import NDArray


class Point(NamedTuple):
    x: float
    y: float

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


class CommandType(str, enum.Enum):
    MOVE_TO = "M"
    LINE_TO = "L"
    HORIZONTAL_LINE_TO = "H"
    VERTICAL_LINE_TO = "V"
    CUBIC_TO = "C"
    SMOOTH_CUBIC_TO = "S"
    QUADRATIC_TO = "Q"
    SMOOTH_QUADRATIC_TO = "T"
    ARC_TO = "A"
    CLOSE_PATH = "Z"


# Commands whose geometry is resolved into connectable endpoints
RESOLVABLE_COMMANDS = frozenset({
    CommandType.MOVE_TO,
    CommandType.LINE_TO,
    CommandType.HORIZONTAL_LINE_TO,
    CommandType.VERTICAL_LINE_TO,
    CommandType.CLOSE_PATH,
})


class Direction(str, enum.Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"
    UNKNOWN = "unknown"


class IssueKind(str, enum.Enum):
    MALFORMED_NUMBER = "malformed_number"
    UNSUPPORTED_COMMAND = "unsupported_command"
    EMPTY_TRACE = "empty_trace"
    NON_FINITE_COORDINATE = "non_finite_coordinate"


@dataclass(frozen=True)
class TraceIssue:
    """A non-fatal problem found while interpreting a trace's path data."""

    kind: IssueKind
    detail: str = ""


@dataclass
class PathCommand:
    """One command of a path-data string.

    Before resolution ``points`` holds raw coordinates (H/V carry a ``0``
    placeholder on the axis they don't set). After resolution every point is
    absolute and ``is_relative`` is False.
    """

    type: CommandType
    points: list[Point] = field(default_factory=list)
    is_relative: bool = False
    # Raw numeric parameters as parsed (NaN where a token was malformed)
    params: list[float] = field(default_factory=list)
    # Raw tokens that failed numeric parsing
    malformed: list[str] = field(default_factory=list)

    @property
    def opaque(self) -> bool:
        return self.type not in RESOLVABLE_COMMANDS


@dataclass
class Trace:
    """A single copper trace extracted from one SVG path element."""

    id: str
    # Raw path data (d attribute); all geometry is derived from it
    path_data: str
    width: float = 1.0
    stroke: str | None = None
    fill: str | None = None
    layer: str | None = None
    transform: str | None = None

    # --- Derived by the trace analyzer ---
    commands: list[PathCommand] = field(default_factory=list)
    points: list[Point] = field(default_factory=list)
    start_point: Point | None = None
    end_point: Point | None = None
    direction: Direction = Direction.UNKNOWN
    issues: list[TraceIssue] = field(default_factory=list)

    # --- Written only by the connectivity builder ---
    connected_traces: set[str] = field(default_factory=set)
    # Electrical net label (None until nets are labelled)
    net_id: int | None = None

    # Auxiliary metrics computed by transforms
    features: dict[str, Any] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return all(p.is_finite for p in self.points)

    @property
    def endpoints(self) -> list[Point]:
        return [p for p in (self.start_point, self.end_point) if p is not None]

    def as_array(self) -> NDArray[np.float64]:
        """Points as an Nx2 array."""
        if not self.points:
            return np.empty((0, 2))
        return np.array(self.points, dtype=np.float64)


@dataclass(frozen=True)
class Junction:
    """A point where two or more traces are considered electrically connected."""

    point: Point
    trace_ids: frozenset[str]
