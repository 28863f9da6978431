"""Element class for a minimal in-memory document tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from .geometry import Rect, parse_pixels


POSITIONED = frozenset({"relative", "absolute", "fixed"})


@dataclass(eq=False)
class Element:
    """A node in the document hierarchy.

    Each element has a document-relative border-box position and size,
    raw margin values and a style mapping. Margins are kept as given
    (numbers, "10px", "auto" or None) so the host can report them the way a
    browser would.

    Example:
        body = Element("body", width=800, height=600)
        panel = body.add_child(Element("panel", x=20, y=20, width=300, height=200))
        panel.style["position"] = "relative"
    """

    name: str
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    margin_left: Any = None
    margin_top: Any = None
    style: dict[str, Any] = field(default_factory=dict)
    children: list[Element] = field(default_factory=list)
    parent: Element | None = field(default=None, repr=False)

    def add_child(self, node: Element) -> Element:
        """Add a child element.

        Args:
            node: The element to add as a child

        Returns:
            The added element (for chaining)
        """
        if node.parent is not None:
            node.parent.remove_child(node)
        node.parent = self
        self.children.append(node)
        return node

    def remove_child(self, node: Element) -> bool:
        """Remove a child element.

        Args:
            node: The element to remove

        Returns:
            True if the element was found and removed
        """
        if node in self.children:
            node.parent = None
            self.children.remove(node)
            return True
        return False

    @property
    def rect(self) -> Rect:
        """Snapshot of the current border box."""
        return Rect(self.x, self.y, self.width, self.height)

    @property
    def is_positioned(self) -> bool:
        return self.style.get("position") in POSITIONED

    def containing_block(self) -> Element | None:
        """Nearest positioned ancestor, or None when positioned against the document."""
        ancestor = self.parent
        while ancestor is not None:
            if ancestor.parent is not None and ancestor.is_positioned:
                return ancestor
            ancestor = ancestor.parent
        return None

    def layout_from_style(self) -> None:
        """Recompute the document position from an absolute left/top style."""
        if self.style.get("position") not in ("absolute", "fixed"):
            return
        # Fixed elements ignore positioned ancestors; the document never scrolls
        block = None if self.style["position"] == "fixed" else self.containing_block()
        base_x = block.x if block is not None else 0.0
        base_y = block.y if block is not None else 0.0
        self.x = base_x + self.style.get("left", 0) + parse_pixels(self.margin_left)
        self.y = base_y + self.style.get("top", 0) + parse_pixels(self.margin_top)

    def iter_nodes(self, include_self: bool = True) -> Iterator[Element]:
        """Iterate over this element and all descendants (depth-first).

        Args:
            include_self: Whether to include this element in the iteration

        Yields:
            Element instances
        """
        if include_self:
            yield self
        for child in self.children:
            yield from child.iter_nodes(include_self=True)

    def find(self, name: str) -> Element | None:
        """Find a descendant element by name.

        Args:
            name: The name to search for

        Returns:
            The first matching element, or None
        """
        for node in self.iter_nodes():
            if node.name == name:
                return node
        return None

    @property
    def depth(self) -> int:
        """Get the depth of this element in the hierarchy (root = 0)."""
        if self.parent is None:
            return 0
        return self.parent.depth + 1

    def __repr__(self) -> str:
        children_str = f", children={len(self.children)}" if self.children else ""
        return (
            f"Element({self.name!r}, x={self.x}, y={self.y}, "
            f"width={self.width}, height={self.height}{children_str})"
        )
