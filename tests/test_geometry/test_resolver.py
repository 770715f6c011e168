"""Tests for relative → absolute coordinate resolution."""

import pytest

from tracesight.geometry.commands import parse_path_commands
from tracesight.geometry.resolver import resolve_commands
from tracesight.geometry.traces import flatten_points
from tracesight.models.trace import Point


def _resolve(path_data: str) -> list[Point]:
    return flatten_points(resolve_commands(parse_path_commands(path_data)))


def test_absolute_path_unchanged():
    assert _resolve("M0,0 L10,0 L10,10") == [Point(0, 0), Point(10, 0), Point(10, 10)]


def test_relative_lines_accumulate():
    assert _resolve("m1,1 l2,0 l0,3") == [Point(1, 1), Point(3, 1), Point(3, 4)]


def test_relative_move_after_first_pair_acts_like_line():
    assert _resolve("m1 1 2 2") == [Point(1, 1), Point(3, 3)]


def test_horizontal_carries_y():
    assert _resolve("M0,5 H10") == [Point(0, 5), Point(10, 5)]
    assert _resolve("M2,5 h10 h-4") == [Point(2, 5), Point(12, 5), Point(8, 5)]


def test_vertical_carries_x():
    assert _resolve("M3,0 V7") == [Point(3, 0), Point(3, 7)]
    assert _resolve("M3,1 v7") == [Point(3, 1), Point(3, 8)]


def test_close_path_returns_to_subpath_start():
    pts = _resolve("M1,1 L5,1 L5,5 L1,5 Z")
    assert pts[-1] == Point(1, 1)


def test_close_path_uses_most_recent_move():
    pts = _resolve("M0,0 L1,0 Z M10,10 l5,0 l0,5 z l1,1")
    assert pts[2] == Point(0, 0)
    assert pts[6] == Point(10, 10)
    # Cursor reset by z: relative line continues from the subpath start
    assert pts[-1] == Point(11, 11)


def test_all_commands_absolute_after_resolution():
    resolved = resolve_commands(parse_path_commands("m1 1 l1 1 h1 v1 z"))
    assert all(not c.is_relative for c in resolved)


def test_input_not_mutated():
    cmds = parse_path_commands("m1 1 l1 1")
    resolve_commands(cmds)
    assert cmds[1].is_relative
    assert cmds[1].points == [Point(1, 1)]


def test_curve_points_verbatim_and_cursor_untouched():
    resolved = resolve_commands(parse_path_commands("M1,1 c1 1 2 2 3 3 l1,0"))
    assert resolved[1].opaque
    assert resolved[1].points == [Point(1, 1), Point(2, 2), Point(3, 3)]
    # l resolves from the last M, not from the curve end
    assert resolved[2].points == [Point(2, 1)]


@pytest.mark.parametrize(
    "path_data",
    [
        "m0,0 l10,0 l0,10",
        "m2.5,-1 h4 v-3 l-1.5,2.25",
        "m100 100 l-7 3 h0.5 v12 l1e1 -2",
    ],
)
def test_relative_deltas_round_trip(path_data):
    raw = parse_path_commands(path_data)
    deltas = []
    for cmd in raw[1:]:
        for p in cmd.points:
            if cmd.type.value == "H":
                deltas.append((p.x, 0.0))
            elif cmd.type.value == "V":
                deltas.append((0.0, p.y))
            else:
                deltas.append((p.x, p.y))

    pts = _resolve(path_data)
    recovered = [(b.x - a.x, b.y - a.y) for a, b in zip(pts, pts[1:])]
    assert recovered == [pytest.approx(d) for d in deltas]


def test_malformed_number_propagates_as_non_finite():
    pts = _resolve("M0,0 Lbad,1 l1,1")
    assert pts[0].is_finite
    assert not pts[1].is_finite
    assert not pts[2].is_finite
