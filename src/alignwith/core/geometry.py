"""Geometry snapshots and value types used by the alignment calculation.

Coordinates are document-relative pixels with the origin at the top-left
corner of the document, X growing to the right and Y growing downwards.
Element dimensions are border-box dimensions: they include border and
padding but exclude margin.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def parse_pixels(value: Any) -> int:
    """Coerce a CSS-like pixel value to an integer.

    Reads the leading integer of the value, the way a browser margin such as
    ``"10px"`` is usually read. Anything without a leading integer (``None``,
    ``"auto"``, ``NaN``) is read as 0. Fractional values are truncated toward
    zero.

    Args:
        value: Number, string, or None

    Returns:
        Integer pixel value
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)):
        if not math.isfinite(value):
            return 0
        return int(value)
    match = _INT_PREFIX.match(str(value))
    if match is None:
        return 0
    return int(match.group(1))


@dataclass(frozen=True)
class Rect:
    """An axis-aligned border-box rectangle captured at a single point in time."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def origin(self) -> NDArray[np.float64]:
        """Top-left corner as [x, y]."""
        return np.array([self.x, self.y], dtype=np.float64)

    @property
    def size(self) -> NDArray[np.float64]:
        """Dimensions as [width, height]."""
        return np.array([self.width, self.height], dtype=np.float64)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class AlignmentRequest:
    """A fully resolved alignment instruction, independent of any live element.

    Attributes:
        mover_code: Two-character anchor code on the element being moved
        target_code: Two-character anchor code on the element aligned against
        offset_x: Integer X offset added to the result
        offset_y: Integer Y offset added to the result
        reparent_to_root: Move the mover under the document root after positioning
    """

    mover_code: str
    target_code: str
    offset_x: int = 0
    offset_y: int = 0
    reparent_to_root: bool = False


@dataclass(frozen=True)
class AlignmentResult:
    """Absolute coordinates for the mover, already net of its own margin."""

    left: float
    top: float
