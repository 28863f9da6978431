"""In-memory document implementing the host protocols."""

from __future__ import annotations

import logging
from typing import Any

from ..core.geometry import AlignmentResult
from ..core.node import Element


logger = logging.getLogger(__name__)


class Document:
    """A tree of elements rooted at ``body``.

    Implements both GeometryProvider and StyleSink, so it can be passed as
    the host to ``align()``. Elements can be referred to either by their
    Element object or by name.

    Positioning follows absolute layout rules: ``left``/``top`` are
    measured from the nearest positioned ancestor (``relative``,
    ``absolute`` or ``fixed``), or from the document origin when there is
    none. Margins push the border box further right/down.
    """

    def __init__(self, width: float = 0.0, height: float = 0.0, name: str = "document") -> None:
        """Initialize an empty document.

        Args:
            width: Document width in pixels
            height: Document height in pixels
            name: Document name, used for display
        """
        self.name = name
        self.body = Element("body", width=width, height=height)

    def get(self, element: Element | str) -> Element:
        """Resolve an element reference.

        Args:
            element: Element instance or element name

        Returns:
            The matching Element

        Raises:
            ValueError: If no element with that name exists in the document
        """
        if isinstance(element, Element):
            return element
        found = self.body.find(element)
        if found is None:
            raise ValueError(f"Element '{element}' not found in document '{self.name}'")
        return found

    def add(self, element: Element, parent: Element | str | None = None) -> Element:
        """Insert an element under a parent (default: body)."""
        parent_node = self.body if parent is None else self.get(parent)
        return parent_node.add_child(element)

    def iter_elements(self):
        """Iterate over every element except the body."""
        return self.body.iter_nodes(include_self=False)

    # GeometryProvider

    def get_offset(self, element: Element | str) -> tuple[float, float]:
        node = self.get(element)
        return node.x, node.y

    def get_outer_width(self, element: Element | str) -> float:
        return self.get(element).width

    def get_outer_height(self, element: Element | str) -> float:
        return self.get(element).height

    def get_margin_left(self, element: Element | str) -> Any:
        return self.get(element).margin_left

    def get_margin_top(self, element: Element | str) -> Any:
        return self.get(element).margin_top

    # StyleSink

    def set_position(self, element: Element | str, result: AlignmentResult) -> None:
        node = self.get(element)
        if node.style.get("position") not in ("absolute", "fixed"):
            node.style["position"] = "absolute"
        node.style["left"] = result.left
        node.style["top"] = result.top
        self._relayout(node)
        logger.debug("Positioned %s at left=%s top=%s", node.name, result.left, result.top)

    def reparent_to_document_root(self, element: Element | str) -> None:
        node = self.get(element)
        self.body.add_child(node)
        self._relayout(node)
        logger.debug("Moved %s to document root", node.name)

    def _relayout(self, node: Element) -> None:
        """Recompute a node's position from its style and carry its subtree along."""
        old_x, old_y = node.x, node.y
        node.layout_from_style()
        dx = node.x - old_x
        dy = node.y - old_y
        if dx == 0 and dy == 0:
            return
        for child in node.iter_nodes(include_self=False):
            child.x += dx
            child.y += dy
