"""Position codes, alignment computation and layout files."""

from .anchors import AxisClass, classify_code, resolve_anchor, resolve_position_code
from .calculator import compute_alignment
from .aligner import AlignOptions, align, build_request
from .loader import LayoutLoader

__all__ = [
    "AxisClass",
    "classify_code",
    "resolve_anchor",
    "resolve_position_code",
    "compute_alignment",
    "AlignOptions",
    "align",
    "build_request",
    "LayoutLoader",
]
