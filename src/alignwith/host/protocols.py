"""Protocols for the rendering environment the aligner reads from and writes to."""

from typing import Any, Protocol, runtime_checkable

from ..core.geometry import AlignmentResult


@runtime_checkable
class GeometryProvider(Protocol):
    """Reads live element geometry.

    Offsets and dimensions are document-relative pixels of the border box.
    Margins may come back as numbers, CSS strings ("10px", "auto") or None.
    """

    def get_offset(self, element: Any) -> tuple[float, float]:
        ...

    def get_outer_width(self, element: Any) -> float:
        ...

    def get_outer_height(self, element: Any) -> float:
        ...

    def get_margin_left(self, element: Any) -> Any:
        ...

    def get_margin_top(self, element: Any) -> Any:
        ...


@runtime_checkable
class StyleSink(Protocol):
    """Writes positions back to elements."""

    def set_position(self, element: Any, result: AlignmentResult) -> None:
        """Apply left/top and switch the element to absolute positioning."""
        ...

    def reparent_to_document_root(self, element: Any) -> None:
        """Move the element directly under the document root."""
        ...


@runtime_checkable
class Host(GeometryProvider, StyleSink, Protocol):
    """A rendering environment that both provides geometry and accepts styles."""
