"""Tests for loading YAML layouts."""

from pathlib import Path

import pytest

from alignwith.layout.loader import LayoutLoader

ASSETS_DIR = Path(__file__).parent.parent / "assets"

SIMPLE_LAYOUT = """
name: simple
size: [400, 300]
elements:
  anchor:
    offset: [100, 200]
    size: [80, 60]
  mover:
    size: [40, 20]
align:
  - movers: mover
    target: anchor
    position: tlr
"""


def test_load_string():
    document = LayoutLoader().load_string(SIMPLE_LAYOUT)
    assert document.name == "simple"
    assert (document.body.width, document.body.height) == (400, 300)
    mover = document.get("mover")
    assert (mover.x, mover.y) == (180, 230)


def test_load_file(tmp_path):
    path = tmp_path / "layout.yaml"
    path.write_text(SIMPLE_LAYOUT)
    document = LayoutLoader().load(path)
    assert document.get("mover").rect.to_dict() == {
        "x": 180, "y": 230, "width": 40, "height": 20,
    }


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        LayoutLoader().load(tmp_path / "missing.yaml")


def test_tooltip_asset():
    document = LayoutLoader().load(ASSETS_DIR / "tooltip.yaml")

    tooltip = document.get("tooltip")
    assert tooltip.parent is document.body
    assert (tooltip.x, tooltip.y) == (140, 166)
    assert tooltip.style["top"] == 162

    badge = document.get("badge")
    assert (badge.x, badge.y) == (132, 222)


def test_alignments_run_in_order():
    document = LayoutLoader().load_string("""
elements:
  a: {offset: [0, 0], size: [10, 10]}
  b: {size: [10, 10]}
  c: {size: [10, 10]}
align:
  - {movers: b, target: a, position: tltr}
  - {movers: c, target: b, position: tltr}
""")
    assert document.get("b").x == 10
    assert document.get("c").x == 20


def test_margin_forms():
    document = LayoutLoader().load_string("""
elements:
  list_margin: {size: [1, 1], margin: [3, 4]}
  dict_margin: {size: [1, 1], margin: {left: 5px}}
  single_margin: {size: [1, 1], margin: auto}
""")
    assert (document.get("list_margin").margin_left, document.get("list_margin").margin_top) == (3, 4)
    assert (document.get("dict_margin").margin_left, document.get("dict_margin").margin_top) == ("5px", None)
    assert document.get("single_margin").margin_top == "auto"


def test_parent_nesting():
    document = LayoutLoader().load_string("""
elements:
  outer: {size: [100, 100]}
  inner: {size: [10, 10], parent: outer}
""")
    assert document.get("inner").parent is document.get("outer")
    assert document.get("inner").depth == 2


@pytest.mark.parametrize(
    "layout,message",
    [
        ("- not a mapping", "mapping"),
        ("elements:\n  a: {offset: [0, 0]}", "size"),
        ("elements:\n  a: {size: [1, 1], parent: nowhere}", "unknown parent"),
        ("elements:\n  body: {size: [1, 1]}", "defined twice"),
        ("elements:\n  a: {size: [1, 1], margin: [1, 2, 3]}", "Margin"),
        ("elements:\n  a: {size: [1, 1]}\nalign:\n  - {movers: a}", "movers"),
        ("elements:\n  a: {size: [1, 1]}\nalign:\n  - {movers: a, target: b}", "'b' not found"),
        ("elements:\n  a: {size: [1, 1]}\nalign:\n  - {movers: [a, z], target: a}", "'z' not found"),
        ("size: 5", "Document size"),
        ("elements:\n  a: {size: 5}", "Size of 'a'"),
        ("elements:\n  a: {size: [1, 2, 3]}", "Size of 'a'"),
        ("elements:\n  a: {size: [1, 1], offset: 3}", "Offset of 'a'"),
        ("elements:\n  a: {size: [1, 1], style: fixed}", "Style of 'a'"),
        ("elements:\n  a: 7", "Element 'a' must be a mapping"),
        ("elements: [a, b]", "'elements' must be a mapping"),
        ("elements:\n  a: {size: [1, 1]}\nalign:\n  - 7", "Alignment #0 must be a mapping"),
        ("elements:\n  a: {size: [1, 1]}\nalign: {movers: a, target: a}", "'align' must be a list"),
        ("elements:\n  a: {size: [1, 1]}\nalign:\n  - {movers: 3, target: a}", "movers must be"),
    ],
)
def test_invalid_layouts(layout, message):
    with pytest.raises(ValueError, match=message):
        LayoutLoader().load_string(layout)

