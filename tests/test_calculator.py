"""Tests for the alignment calculation."""

import pytest

from alignwith.core.geometry import AlignmentResult, Rect, parse_pixels
from alignwith.layout.anchors import resolve_position_code
from alignwith.layout.calculator import compute_alignment

MOVER = Rect(7, 9, 40, 20)
TARGET = Rect(100, 200, 80, 60)


def align_with(position, mover=MOVER, target=TARGET, **kwargs):
    mover_code, target_code = resolve_position_code(position)
    return compute_alignment(mover, target, mover_code, target_code, **kwargs)


@pytest.mark.parametrize(
    "position,left,top",
    [
        ("tl", 100, 200),
        ("tlr", 180, 230),
        ("tltr", 180, 200),
        ("c", 120, 220),
        ("t", 120, 200),
        ("b", 120, 240),
        ("l", 100, 220),
        ("r", 140, 220),
        ("br", 140, 240),
        ("lr", 120, 220),
        ("tlc", 140, 230),
    ],
)
def test_positions(position, left, top):
    assert align_with(position) == AlignmentResult(left=left, top=top)


def test_centre_formula():
    result = align_with("c")
    assert result.left == TARGET.x + TARGET.width / 2 - MOVER.width / 2
    assert result.top == TARGET.y + TARGET.height / 2 - MOVER.height / 2


@pytest.mark.parametrize("position", ["", "xyz123", "cccc", "mm"])
def test_equivalent_to_centre(position):
    assert align_with(position) == align_with("c")


def test_mover_position_is_ignored():
    moved = Rect(-500, 999, MOVER.width, MOVER.height)
    assert align_with("tlr", mover=moved) == align_with("tlr")


def test_offsets_are_linear():
    base = align_with("br")
    shifted = align_with("br", offset_x=5, offset_y=5)
    assert shifted.left == base.left + 5
    assert shifted.top == base.top + 5


def test_negative_offsets():
    result = align_with("tl", offset_x=-15, offset_y=-250)
    assert result == AlignmentResult(left=85, top=-50)


def test_left_margin_moves_mover_left():
    plain = align_with("tl")
    with_margin = align_with("tl", mover_margin_left=10)
    assert with_margin.left == plain.left - 10
    assert with_margin.top == plain.top


@pytest.mark.parametrize("margin", ["10px", "10", 10, 10.8])
def test_margin_forms(margin):
    result = align_with("tl", mover_margin_left=margin, mover_margin_top=margin)
    assert result == AlignmentResult(left=90, top=190)


@pytest.mark.parametrize("margin", [None, "auto", "", float("nan")])
def test_unreadable_margins_count_as_zero(margin):
    result = align_with("tl", mover_margin_left=margin, mover_margin_top=margin)
    assert result == AlignmentResult(left=100, top=200)


def test_zero_size_rectangles():
    point = Rect(5, 5, 0, 0)
    for position in ["tl", "c", "br", "tlr"]:
        assert align_with(position, mover=point, target=point) == AlignmentResult(5, 5)


def test_fractional_geometry_is_not_rounded():
    result = align_with("c", mover=Rect(0, 0, 1, 1), target=Rect(0.5, 0.25, 3, 5))
    assert result == AlignmentResult(left=1.5, top=2.25)


def test_result_is_not_clamped():
    result = align_with("brtl", target=Rect(0, 0, 10, 10))
    assert result == AlignmentResult(left=-40, top=-20)


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, 0),
        (True, 0),
        (7, 7),
        (2.9, 2),
        (-2.9, -2),
        ("12px", 12),
        ("  -3.7em", -3),
        ("+4", 4),
        ("auto", 0),
        ("px10", 0),
        (float("inf"), 0),
    ],
)
def test_parse_pixels(value, expected):
    assert parse_pixels(value) == expected


@pytest.mark.parametrize("offset", [None, "auto", "", float("nan"), 0.4])
def test_unreadable_offsets_count_as_zero(offset):
    assert align_with("tl", offset_x=offset, offset_y=offset) == align_with("tl")


@pytest.mark.parametrize(
    "offset,expected",
    [
        ("5px", 5),
        (2.9, 2),
        (-2.9, -2),
        ("-7", -7),
    ],
)
def test_offsets_are_truncated_toward_zero(offset, expected):
    result = align_with("tl", offset_x=offset, offset_y=offset)
    assert result == AlignmentResult(left=100 + expected, top=200 + expected)
