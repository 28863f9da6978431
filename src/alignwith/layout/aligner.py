"""Align one or more elements with a target element."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable

from ..core.geometry import AlignmentRequest, AlignmentResult, Rect, parse_pixels
from ..host.protocols import Host
from .anchors import resolve_position_code
from .calculator import compute_alignment


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlignOptions:
    """Optional settings for an alignment call.

    Attributes:
        x: X offset added to the mover's left position (may be negative)
        y: Y offset added to the mover's top position (may be negative)
        append_to_body: Move the mover under the document root afterwards,
            to escape a positioned ancestor
    """

    x: int = 0
    y: int = 0
    append_to_body: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", parse_pixels(self.x))
        object.__setattr__(self, "y", parse_pixels(self.y))
        object.__setattr__(self, "append_to_body", bool(self.append_to_body))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> AlignOptions:
        """Merge user options over the defaults.

        Unknown keys are ignored. ``reparent_to_root`` is accepted as an
        alias for ``append_to_body``.
        """
        if not data:
            return cls()
        append = data.get("append_to_body", data.get("reparent_to_root", False))
        return cls(x=data.get("x", 0), y=data.get("y", 0), append_to_body=append)


def build_request(
    position: str | None = None,
    options: AlignOptions | Mapping[str, Any] | None = None,
) -> AlignmentRequest:
    """Resolve a position string and options into an AlignmentRequest."""
    if not isinstance(options, AlignOptions):
        options = AlignOptions.from_dict(options)
    mover_code, target_code = resolve_position_code(position)
    return AlignmentRequest(
        mover_code=mover_code,
        target_code=target_code,
        offset_x=options.x,
        offset_y=options.y,
        reparent_to_root=options.append_to_body,
    )


def measure(host: Host, element: Any) -> Rect:
    """Take a border-box snapshot of an element."""
    x, y = host.get_offset(element)
    return Rect(x, y, host.get_outer_width(element), host.get_outer_height(element))


def align(
    movers: Iterable[Any] | Any,
    target: Any,
    position: str | None = None,
    options: AlignOptions | Mapping[str, Any] | None = None,
    *,
    host: Host,
) -> list[AlignmentResult]:
    """Align every mover with the target.

    The target is measured once and that snapshot is used for every mover,
    even if moving one of them changes the target's layout.

    Args:
        movers: Element reference, or a list of them
        target: Element reference to align against
        position: Position string of up to four letters (default "c")
        options: AlignOptions or a mapping with x, y, append_to_body
        host: Environment providing geometry and accepting positions

    Returns:
        The applied AlignmentResult for each mover, in order
    """
    if isinstance(movers, (str, bytes)) or not isinstance(movers, Iterable):
        movers = [movers]

    request = build_request(position, options)
    target_rect = measure(host, target)
    logger.debug(
        "Aligning %s -> %s against %s",
        request.mover_code, request.target_code, target_rect,
    )

    results = []
    for mover in movers:
        result = compute_alignment(
            measure(host, mover),
            target_rect,
            request.mover_code,
            request.target_code,
            offset_x=request.offset_x,
            offset_y=request.offset_y,
            mover_margin_left=host.get_margin_left(mover),
            mover_margin_top=host.get_margin_top(mover),
        )
        host.set_position(mover, result)
        if request.reparent_to_root:
            host.reparent_to_document_root(mover)
        results.append(result)

    return results
