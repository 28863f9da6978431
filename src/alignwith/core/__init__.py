"""Core geometry components."""

from .geometry import AlignmentRequest, AlignmentResult, Rect, parse_pixels
from .node import Element

__all__ = ["AlignmentRequest", "AlignmentResult", "Rect", "Element", "parse_pixels"]
