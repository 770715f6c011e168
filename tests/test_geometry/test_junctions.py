"""Tests for junction detection and connectivity."""

import math

import pytest

from tracesight.geometry.junctions import bucket_key, build_junctions, find_junctions
from tracesight.engine.config import AnalysisConfig
from tracesight.geometry.traces import analyze_trace
from tracesight.models.trace import Point
from tests.conftest import make_trace


def _analyzed(*specs):
    return [analyze_trace(make_trace(tid, d)) for tid, d in specs]


def test_nearby_endpoints_share_a_junction():
    traces = _analyzed(("a", "M0,0 L5.02,5.0"), ("b", "M5.0,5.0 L9,5"))
    junctions = build_junctions(traces, 0.1)

    assert len(junctions) == 1
    assert junctions[0].trace_ids == {"a", "b"}
    assert junctions[0].point.x == pytest.approx(5.0)
    assert junctions[0].point.y == pytest.approx(5.0)
    assert traces[0].connected_traces == {"b"}
    assert traces[1].connected_traces == {"a"}


def test_three_way_tee():
    traces = _analyzed(("a", "M0,0 H10"), ("b", "M10,0 H20"), ("c", "M10,0 V10"), ("d", "M50,50 H60"))
    junctions = build_junctions(traces)

    assert [j.trace_ids for j in junctions] == [{"a", "b", "c"}]
    assert traces[0].connected_traces == {"b", "c"}
    assert traces[2].connected_traces == {"a", "b"}
    assert traces[3].connected_traces == set()


def test_connectivity_symmetric_and_deduplicated():
    # a and b touch at both ends: two junctions, one connection
    traces = _analyzed(("a", "M0,0 H10"), ("b", "M10,0 V5 H0 V0"), ("c", "M10,0 V-5"))
    junctions = build_junctions(traces)

    assert len(junctions) == 2
    by_id = {t.id: t for t in traces}
    for t in traces:
        for other in t.connected_traces:
            assert t.id in by_id[other].connected_traces
        assert t.id not in t.connected_traces
    assert by_id["a"].connected_traces == {"b", "c"}


def test_closed_loop_alone_is_not_a_junction():
    traces = _analyzed(("pad", "M0,0 h2 v2 h-2 z"))
    assert build_junctions(traces) == []
    assert traces[0].connected_traces == set()


def test_empty_trace_excluded():
    traces = _analyzed(("empty", ""), ("a", "M0,0 H1"))
    assert build_junctions(traces) == []


def test_non_finite_endpoints_excluded():
    traces = _analyzed(("a", "M0,0 Lnope,1"), ("b", "M0,0 H4"))
    junctions = build_junctions(traces)
    # a's start is fine, its NaN end is skipped
    assert [j.trace_ids for j in junctions] == [{"a", "b"}]


def test_idempotent():
    traces = _analyzed(("a", "M0,0 H10"), ("b", "M10,0 H20"), ("c", "M10,0 V10"))
    first = build_junctions(traces)
    sets_first = [set(t.connected_traces) for t in traces]
    second = build_junctions(traces)

    assert set(first) == set(second)
    assert [t.connected_traces for t in traces] == sets_first


def test_stale_connections_replaced():
    traces = _analyzed(("a", "M0,0 H10"), ("b", "M20,0 H30"))
    traces[0].connected_traces = {"b"}
    traces[1].connected_traces = {"a"}
    build_junctions(traces)
    assert traces[0].connected_traces == set()
    assert traces[1].connected_traces == set()


def test_find_junctions_leaves_traces_alone():
    traces = _analyzed(("a", "M0,0 H10"), ("b", "M10,0 H20"))
    assert len(find_junctions(traces)) == 1
    assert traces[0].connected_traces == set()


def test_negative_coordinates_bucket_separately():
    traces = _analyzed(("a", "M-1,2 H-5"), ("b", "M1,-2 H5"))
    assert build_junctions(traces) == []


def test_bucket_key_rounds_half_up():
    assert bucket_key(Point(0.25, -0.25), 0.5) == (1, 0)
    assert bucket_key(Point(5.02, 5.0), 0.1) == (50, 50)


def test_bucket_key_none_for_unquantizable_points():
    assert bucket_key(Point(1e308, 0), 0.1) is None
    assert bucket_key(Point(0, math.nan), 0.1) is None
    assert bucket_key(Point(-1e308, 0), 0.1) is None


def test_huge_coordinate_endpoint_skipped():
    traces = _analyzed(("a", "M1e308,0 L0,0"), ("b", "M0,0 H5"))
    junctions = build_junctions(traces, 0.1)
    assert [j.trace_ids for j in junctions] == [{"a", "b"}]
    assert traces[0].connected_traces == {"b"}


def test_bucket_boundary_split_is_accepted():
    # 0.02 apart but on either side of the 0.05 cell edge
    traces = _analyzed(("a", "M0,0 H0.04"), ("b", "M0.06,0 H1"))
    assert build_junctions(traces, 0.1) == []


@pytest.mark.parametrize("tolerance", [0, -0.1, float("nan"), float("inf")])
def test_bad_tolerance_rejected_before_processing(tolerance):
    traces = _analyzed(("a", "M0,0 H10"), ("b", "M10,0 H20"))
    traces[0].connected_traces = {"sentinel"}
    with pytest.raises(ValueError):
        build_junctions(traces, tolerance)
    assert traces[0].connected_traces == {"sentinel"}


def test_no_traces():
    assert build_junctions([], 0.1) == []


def test_tolerance_too_small_to_invert():
    traces = _analyzed(("a", "M0,0 H10"), ("b", "M10,0 H20"))
    with pytest.raises(ValueError, match="too small"):
        build_junctions(traces, 1e-310)
    with pytest.raises(ValueError):
        AnalysisConfig(tolerance=1e-310)
