"""Main entry point for alignwith."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml

from .core.geometry import Rect
from .core.node import Element
from .host.document import Document
from .layout import LayoutLoader, compute_alignment, resolve_position_code
from .layout.aligner import AlignOptions
from .render import save_preview


logger = logging.getLogger(__name__)


def _parse_size(value: str) -> tuple[float, float]:
    """Parse "WxH" into (width, height)."""
    try:
        width, height = value.lower().split("x")
        return float(width), float(height)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH, got {value!r}") from None


def _parse_target(value: str) -> Rect:
    """Parse "X,Y,WxH" into a Rect."""
    try:
        x, y, size = value.split(",")
        width, height = _parse_size(size)
        return Rect(float(x), float(y), width, height)
    except (ValueError, argparse.ArgumentTypeError):
        raise argparse.ArgumentTypeError(f"expected X,Y,WxH, got {value!r}") from None


def _parse_resolution(value: str) -> tuple[int, int]:
    width, height = _parse_size(value)
    return int(width), int(height)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Alignwith - align rectangles by named points",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Position letters: t=top b=bottom l=left r=right c/m=centre\n"
            "  1 letter : same point on both (edge mid-point or centre)\n"
            "  2 letters: same corner/point on both\n"
            "  3 letters: mover point + target side\n"
            "  4 letters: mover point + target point"
        ),
    )
    parser.add_argument(
        "layout",
        nargs="?",
        metavar="LAYOUT",
        help="YAML layout file to load and apply",
    )
    parser.add_argument(
        "--mover",
        metavar="WxH",
        type=_parse_size,
        help="Size of the element to move (single alignment mode)",
    )
    parser.add_argument(
        "--target",
        metavar="X,Y,WxH",
        type=_parse_target,
        help="Rectangle to align against (single alignment mode)",
    )
    parser.add_argument(
        "-p", "--position",
        default="c",
        help="Position string of up to four letters (default: c)",
    )
    parser.add_argument("--x", default=0, help="X offset (default: 0)")
    parser.add_argument("--y", default=0, help="Y offset (default: 0)")
    parser.add_argument(
        "--margin",
        metavar="LEFT,TOP",
        default="0,0",
        help="Mover margins (default: 0,0)",
    )
    parser.add_argument(
        "-r", "--render",
        metavar="PATH",
        help="Render the result to an image file",
    )
    parser.add_argument(
        "--resolution",
        metavar="WxH",
        type=_parse_resolution,
        help="Render resolution (default: fit to content)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    if args.layout is None and (args.mover is None or args.target is None):
        parser.error("either LAYOUT or both --mover and --target are required")

    return args


def _single_alignment(args: argparse.Namespace) -> Document:
    """Compute one alignment from command line geometry and print it."""
    margin_left, _, margin_top = args.margin.partition(",")
    options = AlignOptions(x=args.x, y=args.y)
    mover_code, target_code = resolve_position_code(args.position)

    mover_rect = Rect(0.0, 0.0, *args.mover)
    result = compute_alignment(
        mover_rect,
        args.target,
        mover_code,
        target_code,
        offset_x=options.x,
        offset_y=options.y,
        mover_margin_left=margin_left,
        mover_margin_top=margin_top,
    )

    print(f"mover={mover_code} target={target_code}")
    print(f"left={result.left:g}")
    print(f"top={result.top:g}")

    # Build a two-element document so the result can be rendered
    document = Document(name="alignment")
    target = args.target
    document.add(Element("target", x=target.x, y=target.y, width=target.width, height=target.height))
    mover = document.add(
        Element(
            "mover",
            width=mover_rect.width,
            height=mover_rect.height,
            margin_left=margin_left,
            margin_top=margin_top,
        )
    )
    document.set_position(mover, result)
    return document


def _print_document(document: Document) -> None:
    print(f"Document '{document.name}':")
    for element in document.iter_elements():
        indent = "  " * element.depth
        rect = element.rect
        print(
            f"{indent}- {element.name}: x={rect.x:g} y={rect.y:g} "
            f"w={rect.width:g} h={rect.height:g}"
        )


def main(argv: list[str] | None = None) -> int:
    """Run the alignwith command line tool."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.layout is not None:
        try:
            document = LayoutLoader().load(args.layout)
        except (FileNotFoundError, ValueError, yaml.YAMLError) as exc:
            logger.error("Cannot load layout %s: %s", args.layout, exc)
            return 1
        _print_document(document)
    else:
        document = _single_alignment(args)

    if args.render:
        output_path = Path(args.render)
        save_preview(document, output_path, args.resolution)
        print(f"Saved render to {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
