"""Host environment protocols and the in-memory document."""

from .protocols import GeometryProvider, Host, StyleSink
from .document import Document

__all__ = ["GeometryProvider", "Host", "StyleSink", "Document"]
