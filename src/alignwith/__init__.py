"""Align rectangles against each other by named points."""

from .core.geometry import AlignmentRequest, AlignmentResult, Rect
from .host.document import Document
from .layout import AlignOptions, LayoutLoader, align, compute_alignment, resolve_position_code

__all__ = [
    "AlignOptions",
    "AlignmentRequest",
    "AlignmentResult",
    "Document",
    "LayoutLoader",
    "Rect",
    "align",
    "compute_alignment",
    "resolve_position_code",
]
