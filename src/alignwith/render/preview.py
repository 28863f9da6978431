"""Render a document's element boxes to an image."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw

from ..host.document import Document


PALETTE = [
    (66, 133, 244),
    (219, 68, 55),
    (244, 180, 0),
    (15, 157, 88),
    (171, 71, 188),
    (0, 172, 193),
]

BACKGROUND = (255, 255, 255)


def document_bounds(document: Document) -> tuple[float, float]:
    """Smallest [width, height] covering the document and every element."""
    extent = np.array([document.body.width, document.body.height], dtype=np.float64)
    for element in document.iter_elements():
        corner = element.rect.origin + element.rect.size
        extent = np.maximum(extent, corner)
    return float(extent[0]), float(extent[1])


def render_document(
    document: Document,
    width: int | None = None,
    height: int | None = None,
) -> Image.Image:
    """Draw every element's border box as a translucent labelled rectangle.

    Args:
        document: Document to render
        width: Image width in pixels (default: document bounds)
        height: Image height in pixels (default: document bounds)

    Returns:
        PIL Image in RGB mode
    """
    bounds_w, bounds_h = document_bounds(document)
    if width is None:
        width = max(int(np.ceil(bounds_w)), 1)
    if height is None:
        height = max(int(np.ceil(bounds_h)), 1)

    image = Image.new("RGBA", (width, height), BACKGROUND + (255,))
    overlay = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    draw = ImageDraw.Draw(overlay)

    for index, element in enumerate(document.iter_elements()):
        color = PALETTE[index % len(PALETTE)]
        rect = element.rect
        # PIL boxes are inclusive, so the last pixel is right - 1
        box = [rect.x, rect.y, max(rect.right - 1, rect.x), max(rect.bottom - 1, rect.y)]
        draw.rectangle(box, fill=color + (64,), outline=color + (255,))
        draw.text((rect.x + 2, rect.y + 2), element.name, fill=color + (255,))

    return Image.alpha_composite(image, overlay).convert("RGB")


def save_preview(
    document: Document,
    path: str | Path,
    resolution: tuple[int, int] | None = None,
) -> Path:
    """Render a document and save it as an image file.

    Args:
        document: Document to render
        path: Output path; the format follows the extension
        resolution: Optional (width, height); defaults to the document bounds

    Returns:
        The output path
    """
    path = Path(path)
    width, height = resolution if resolution is not None else (None, None)
    render_document(document, width, height).save(str(path))
    return path
