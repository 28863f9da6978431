"""YAML loader for documents and alignment directives."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ..core.node import Element
from ..host.document import Document
from .aligner import AlignOptions, align


logger = logging.getLogger(__name__)


class LayoutLoader:
    """Builds a Document from a YAML layout and applies its alignments.

    YAML format:
        name: page
        size: [800, 600]           # document size (optional)

        elements:
          panel:
            offset: [20, 20]       # document-relative [x, y] (default [0, 0])
            size: [300, 200]       # border-box [width, height] (required)
            style: {position: relative}
          anchor:
            offset: [100, 200]
            size: [80, 60]
          tooltip:
            parent: panel          # must be declared earlier (default: body)
            size: [40, 20]
            margin: [10, 0]        # [left, top] or {left: .., top: ..}

        align:
          - movers: [tooltip]      # list of names, or a single name
            target: anchor
            position: tlr          # up to four letters (default "c")
            x: 5
            y: -2
            append_to_body: true

    Elements are created in declaration order; alignments run in list order.
    """

    def load(self, path: str | Path) -> Document:
        """Load a layout from a YAML file and apply its alignments.

        Args:
            path: Path to the YAML file

        Returns:
            Document with every alignment applied
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)

        logger.debug("Loaded layout %s", path)
        return self._build_document(data)

    def load_string(self, yaml_string: str) -> Document:
        """Load a layout from a YAML string and apply its alignments.

        Args:
            yaml_string: YAML content as a string

        Returns:
            Document with every alignment applied
        """
        data = yaml.safe_load(yaml_string)
        return self._build_document(data)

    def _build_document(self, data: dict[str, Any] | None) -> Document:
        """Build the document from parsed YAML data."""
        if not isinstance(data, dict):
            raise ValueError("Layout must be a mapping")

        name = data.get("name", "document")
        width, height = self._parse_pair(data.get("size", [0, 0]), "Document size")
        document = Document(width=width, height=height, name=name)

        elements = data.get("elements") or {}
        if not isinstance(elements, dict):
            raise ValueError("'elements' must be a mapping")

        for element_name, element_def in elements.items():
            element_def = element_def or {}
            if not isinstance(element_def, dict):
                raise ValueError(f"Element '{element_name}' must be a mapping")
            element = self._parse_element(element_name, element_def)
            parent = element_def.get("parent")
            if parent is not None and document.body.find(parent) is None:
                raise ValueError(
                    f"Element '{element_name}' has unknown parent '{parent}'"
                )
            if document.body.find(element_name) is not None:
                raise ValueError(f"Element '{element_name}' defined twice")
            document.add(element, parent)

        directives = data.get("align") or []
        if not isinstance(directives, list):
            raise ValueError("'align' must be a list of alignments")

        for index, directive in enumerate(directives):
            self._apply_directive(document, index, directive)

        return document

    def _parse_element(self, name: str, element_def: dict[str, Any]) -> Element:
        """Parse one element definition."""
        if "size" not in element_def:
            raise ValueError(f"Element '{name}' must have a 'size'")

        width, height = self._parse_pair(element_def["size"], f"Size of '{name}'")
        x, y = self._parse_pair(element_def.get("offset", [0, 0]), f"Offset of '{name}'")
        margin_left, margin_top = self._parse_margin(element_def.get("margin"))
        style = element_def.get("style") or {}
        if not isinstance(style, dict):
            raise ValueError(f"Style of '{name}' must be a mapping")

        return Element(
            name=name,
            x=x,
            y=y,
            width=width,
            height=height,
            margin_left=margin_left,
            margin_top=margin_top,
            style=dict(style),
        )

    def _parse_pair(self, value: Any, what: str) -> tuple[Any, Any]:
        """Parse a two-item [a, b] list."""
        if not isinstance(value, (list, tuple)) or len(value) != 2:
            raise ValueError(f"{what} must be a two-item list, got {value!r}")
        return value[0], value[1]

    def _parse_margin(self, margin: Any) -> tuple[Any, Any]:
        """Parse a margin given as [left, top], {left, top} or a single value."""
        if margin is None:
            return None, None
        if isinstance(margin, dict):
            return margin.get("left"), margin.get("top")
        if isinstance(margin, (list, tuple)):
            if len(margin) != 2:
                raise ValueError(f"Margin must be [left, top], got {margin!r}")
            return margin[0], margin[1]
        return margin, margin

    def _apply_directive(self, document: Document, index: int, directive: dict[str, Any]) -> None:
        """Run one entry of the 'align' list."""
        if not isinstance(directive, dict):
            raise ValueError(f"Alignment #{index} must be a mapping, got {directive!r}")
        if "target" not in directive or "movers" not in directive:
            raise ValueError(f"Alignment #{index} must have 'movers' and 'target'")

        movers = directive["movers"]
        if isinstance(movers, str):
            movers = [movers]
        elif not isinstance(movers, list):
            raise ValueError(f"Alignment #{index} movers must be a name or a list of names")

        # Resolve names up front so a typo fails before anything moves
        target = document.get(directive["target"])
        mover_nodes = [document.get(mover) for mover in movers]

        options = AlignOptions.from_dict(directive)
        align(mover_nodes, target, directive.get("position"), options, host=document)
