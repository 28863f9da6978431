"""Anchor code system for naming points on a rectangle.

A position code is a string of up to four letters:

- ``t`` = top, ``b`` = bottom
- ``l`` = left, ``r`` = right
- ``c`` or ``m`` = centre/middle

It expands into two 2-letter anchor codes, one for the element being moved
and one for the element it is aligned against. Each anchor code names a
point on a rectangle by giving one class per axis.
"""

from __future__ import annotations

import logging
from enum import Enum
from itertools import product

import numpy as np
from numpy.typing import NDArray


logger = logging.getLogger(__name__)

ALPHABET = frozenset("tbcmlr")
DEFAULT_POSITION = "c"
MAX_POSITION_LENGTH = 4


class AxisClass(Enum):
    """Where a point sits along one axis of a rectangle.

    The value is the normalized coordinate along that axis:
    0 = left/top edge, 0.5 = middle, 1 = right/bottom edge.
    """

    START = 0.0
    CENTER = 0.5
    END = 1.0


# Letters that say nothing about the horizontal axis, and the pair that
# cancels out to the horizontal centre. The vertical sets mirror them.
_X_NEUTRAL = frozenset("tbcm")
_X_END_COMPATIBLE = frozenset("rtbcm")
_Y_NEUTRAL = frozenset("lrcm")
_Y_END_COMPATIBLE = frozenset("blrcm")


def _classify_axis(
    code: str,
    neutral: frozenset[str],
    cancel_pair: frozenset[str],
    end_letter: str,
    end_compatible: frozenset[str],
) -> AxisClass:
    letters = set(code)
    if letters <= neutral or (len(code) == 2 and letters == cancel_pair):
        return AxisClass.CENTER
    if end_letter in letters and letters <= end_compatible:
        return AxisClass.END
    return AxisClass.START


def _build_axis_table() -> dict[str, tuple[AxisClass, AxisClass]]:
    table = {}
    for first, second in product(sorted(ALPHABET), repeat=2):
        code = first + second
        table[code] = (
            _classify_axis(code, _X_NEUTRAL, frozenset("lr"), "r", _X_END_COMPATIBLE),
            _classify_axis(code, _Y_NEUTRAL, frozenset("tb"), "b", _Y_END_COMPATIBLE),
        )
    return table


# (horizontal, vertical) class for every 2-letter code over the alphabet.
# Letters are read as an unordered pair, so "tl" and "lt" share an entry.
AXIS_TABLE: dict[str, tuple[AxisClass, AxisClass]] = _build_axis_table()


def classify_code(code: str) -> tuple[AxisClass, AxisClass]:
    """Look up the (horizontal, vertical) classes of a 2-letter anchor code.

    Args:
        code: Anchor code, e.g. "tl" or "rr"

    Returns:
        Tuple of (horizontal class, vertical class)

    Raises:
        KeyError: If the code is not two letters from the position alphabet
    """
    return AXIS_TABLE[code.lower()]


def normalize_position(raw: object) -> str:
    """Validate a raw position string, falling back to the centre code.

    The string is trimmed and lower-cased. Anything empty, longer than four
    letters, or containing a letter outside the alphabet becomes "c".
    """
    if not isinstance(raw, str):
        if raw is not None:
            logger.warning("Position %r is not a string, using %r", raw, DEFAULT_POSITION)
        return DEFAULT_POSITION

    position = raw.strip().lower()
    if not position:
        return DEFAULT_POSITION
    if len(position) > MAX_POSITION_LENGTH or not set(position) <= ALPHABET:
        logger.warning("Invalid position %r, using %r", raw, DEFAULT_POSITION)
        return DEFAULT_POSITION
    return position


def resolve_position_code(raw: object) -> tuple[str, str]:
    """Expand a position string into (mover code, target code).

    - 1 letter: both codes are the letter doubled ("t" -> "tt", "tt")
    - 2 letters: both codes are the string itself
    - 3 letters: mover gets the first two, target gets the third doubled
    - 4 letters: mover gets the first two, target gets the last two

    Invalid input never raises; it is treated as "c".

    Args:
        raw: User supplied position string (may be None)

    Returns:
        Tuple of two 2-letter anchor codes
    """
    position = normalize_position(raw)

    if len(position) == 1:
        return position * 2, position * 2
    if len(position) == 2:
        return position, position
    if len(position) == 3:
        return position[:2], position[2] * 2
    return position[:2], position[2:]


def resolve_anchor(code: str, size: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert an anchor code to a point relative to a rectangle's top-left corner.

    Args:
        code: Two-letter anchor code
        size: Rectangle size [width, height]

    Returns:
        Offset [x, y] from the rectangle's top-left corner
    """
    horizontal, vertical = classify_code(code)
    point = np.zeros(2, dtype=np.float64)
    # START leaves the axis untouched
    if horizontal is AxisClass.CENTER:
        point[0] = size[0] / 2
    elif horizontal is AxisClass.END:
        point[0] = size[0]
    if vertical is AxisClass.CENTER:
        point[1] = size[1] / 2
    elif vertical is AxisClass.END:
        point[1] = size[1]
    return point
