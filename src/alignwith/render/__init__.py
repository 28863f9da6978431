"""Preview rendering."""

from .preview import render_document, save_preview

__all__ = ["render_document", "save_preview"]
