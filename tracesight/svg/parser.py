"""SVG trace extractor.

Pulls every ``<path>`` element out of raw SVG markup as a raw Trace. Only the
attributes the analysis needs are read; the rest of the document is ignored.
"""

from __future__ import annotations

import logging
import re

from tracesight.engine.config import AnalysisConfig
from tracesight.engine.context import AnalysisContext
from tracesight.engine.pipeline import create_pipeline
from tracesight.models.trace import Trace

logger = logging.getLogger(__name__)

_PATH_TAG_RE = re.compile(r"<path\b[^>]*>", re.IGNORECASE)
_ATTR_RE = re.compile(r'([\w:][\w:.-]*)\s*=\s*"([^"]*)"')
_UNIT_SUFFIXES = ("px", "pt")

# Attributes that carry the board layer, in order of preference
_LAYER_ATTRS = ("data-layer", "layer", "inkscape:label")


def extract_traces(svg_text: str) -> list[Trace]:
    """Extract one raw Trace per path element that has path data."""
    traces: list[Trace] = []

    for count, match in enumerate(_PATH_TAG_RE.finditer(svg_text), start=1):
        attrs = _extract_attrs(match.group(0))
        path_data = attrs.get("d", "")
        if not path_data.strip():
            continue

        trace = Trace(
            id=attrs.get("id") or f"trace-{count}",
            path_data=path_data,
            width=_parse_width(attrs.get("stroke-width")),
            stroke=attrs.get("stroke"),
            fill=attrs.get("fill"),
            layer=next((attrs[a] for a in _LAYER_ATTRS if a in attrs), None),
            transform=attrs.get("transform"),
        )
        logger.debug("Found trace: %s, width: %s", trace.id, trace.width)
        traces.append(trace)

    logger.info("Extracted %d traces", len(traces))
    return traces


def parse_svg(svg_text: str, config: AnalysisConfig | None = None) -> AnalysisContext:
    """Parse raw SVG into an AnalysisContext holding the raw traces."""
    return AnalysisContext(
        traces=extract_traces(svg_text),
        config=config or AnalysisConfig(),
        svg_raw=svg_text,
    )


def analyze_svg(svg_text: str, config: AnalysisConfig | None = None) -> AnalysisContext:
    """Extract traces from SVG and run the full pipeline on them."""
    return create_pipeline().run(parse_svg(svg_text, config))


def _extract_attrs(tag_text: str) -> dict[str, str]:
    """Extract attributes from an SVG tag string."""
    return {m.group(1): m.group(2) for m in _ATTR_RE.finditer(tag_text)}


def _parse_width(raw: str | None) -> float:
    if raw is None:
        return 1.0
    value = raw.strip()
    for suffix in _UNIT_SUFFIXES:
        value = value.removesuffix(suffix)
    try:
        return float(value)
    except ValueError:
        logger.warning("Unreadable stroke-width %r", raw)
        return float("nan")
