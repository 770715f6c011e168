"""Shared test fixtures."""

from __future__ import annotations

import pytest

from tracesight.models.trace import Trace


# Three traces meeting at (10, 0), plus an isolated pad trace
TEE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 40 40">
  <g id="F.Cu">
    <path id="left" d="M0,0 L10,0" stroke="#c83434" stroke-width="0.25" fill="none" data-layer="F.Cu"/>
    <path id="right" d="M10,0 H20" stroke="#c83434" stroke-width="0.25" fill="none" data-layer="F.Cu"/>
    <path id="down" d="M10,0 v15" stroke="#c83434" stroke-width="0.5" fill="none" data-layer="F.Cu"/>
    <path id="pad" d="M30,30 h2 v2 h-2 z" stroke="#c83434" stroke-width="0.1" fill="#c83434"/>
  </g>
</svg>'''

# Paths without ids, one without path data, one with a curve
MIXED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M1 1 L5 1" stroke-width="2px"/>
  <path stroke="red"/>
  <path d="M5 1 C6 2 7 2 8 1" transform="translate(1,1)"/>
  <path id="bad" d="M5,1 Lx,3"/>
</svg>'''

EMPTY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"></svg>'''


def make_trace(trace_id: str, path_data: str, **kwargs) -> Trace:
    return Trace(id=trace_id, path_data=path_data, **kwargs)


@pytest.fixture
def tee_svg() -> str:
    return TEE_SVG


@pytest.fixture
def mixed_svg() -> str:
    return MIXED_SVG
