"""Point-to-point alignment of one rectangle against another."""

from __future__ import annotations

from typing import Any

from ..core.geometry import AlignmentResult, Rect, parse_pixels
from .anchors import resolve_anchor


def compute_alignment(
    mover_rect: Rect,
    target_rect: Rect,
    mover_code: str,
    target_code: str,
    offset_x: Any = 0,
    offset_y: Any = 0,
    mover_margin_left: Any = 0,
    mover_margin_top: Any = 0,
) -> AlignmentResult:
    """Compute where the mover's top-left corner must go.

    The mover's anchor point is placed on the target's anchor point, then
    the mover's own margins are taken off and the offsets are added.

    Only the mover's size is used; its current position is irrelevant.
    Results are not rounded or clamped.

    Args:
        mover_rect: Border box of the element being moved
        target_rect: Border box of the element aligned against
        mover_code: Two-letter anchor code on the mover
        target_code: Two-letter anchor code on the target
        offset_x: Added to the final X when non-zero, truncated toward zero
        offset_y: Added to the final Y when non-zero, truncated toward zero
        mover_margin_left: Mover's left margin (number, "10px", "auto" or None)
        mover_margin_top: Mover's top margin (number, "10px", "auto" or None)

    Returns:
        AlignmentResult with the absolute left/top for the mover
    """
    position = target_rect.origin
    position = position - resolve_anchor(mover_code, mover_rect.size)
    position = position + resolve_anchor(target_code, target_rect.size)

    # Margins push the border box away from left/top
    position[0] -= parse_pixels(mover_margin_left)
    position[1] -= parse_pixels(mover_margin_top)

    offset_x = parse_pixels(offset_x)
    offset_y = parse_pixels(offset_y)
    if offset_x != 0:
        position[0] += offset_x
    if offset_y != 0:
        position[1] += offset_y

    return AlignmentResult(left=float(position[0]), top=float(position[1]))
