"""Write trace path data back into SVG markup."""

from __future__ import annotations

import dataclasses
import logging
import re

from tracesight.geometry.traces import analyze_trace
from tracesight.models.trace import CommandType, PathCommand, Trace

logger = logging.getLogger(__name__)

_PATH_TAG_RE = re.compile(r"<path\b[^>]*>", re.IGNORECASE)
_ID_RE = re.compile(r'(?<![\w:-])id\s*=\s*"([^"]*)"')
_D_ATTR_RE = re.compile(r'(?<![\w:-])d\s*=\s*"[^"]*"')


def format_number(value: float) -> str:
    """Shortest text that reads back as the same float."""
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def format_path_data(commands: list[PathCommand]) -> str:
    """Render resolved commands as absolute path data, e.g. ``M0,0 L10,0 Z``."""
    parts: list[str] = []
    for cmd in commands:
        if cmd.type is CommandType.CLOSE_PATH:
            parts.append("Z")
        elif cmd.type is CommandType.HORIZONTAL_LINE_TO:
            parts.append("H" + " ".join(format_number(p.x) for p in cmd.points))
        elif cmd.type is CommandType.VERTICAL_LINE_TO:
            parts.append("V" + " ".join(format_number(p.y) for p in cmd.points))
        else:
            coords = " ".join(f"{format_number(p.x)},{format_number(p.y)}" for p in cmd.points)
            parts.append(cmd.type.value + coords)
    return " ".join(parts)


def normalize_trace(trace: Trace) -> Trace:
    """Return the trace with its path data rewritten in absolute coordinates.

    Traces containing curves or arcs are returned unchanged, since those
    commands are not resolved. So are traces with malformed or non-finite
    coordinates, whose original path data is the only faithful record.
    """
    analyzed = trace if trace.commands else analyze_trace(trace)
    if any(cmd.opaque for cmd in analyzed.commands):
        logger.info("Trace %s has curve commands; path data left as is", trace.id)
        return trace
    if not analyzed.is_valid or any(cmd.malformed for cmd in analyzed.commands):
        logger.info("Trace %s has malformed coordinates; path data left as is", trace.id)
        return trace
    return dataclasses.replace(trace, path_data=format_path_data(analyzed.commands))


def update_svg_with_traces(svg_text: str, traces: list[Trace]) -> str:
    """Replace the ``d`` attribute of every path whose id matches a trace.

    Paths without an id attribute are matched by their ``trace-<n>`` default id.
    """
    by_id = {t.id: t.path_data for t in traces}
    count = 0

    def _replace(match: re.Match[str]) -> str:
        nonlocal count
        count += 1
        tag = match.group(0)
        id_match = _ID_RE.search(tag)
        trace_id = (id_match.group(1) if id_match else "") or f"trace-{count}"
        if trace_id not in by_id:
            return tag
        return _D_ATTR_RE.sub(lambda _: f'd="{by_id[trace_id]}"', tag, count=1)

    return _PATH_TAG_RE.sub(_replace, svg_text)
