#!/usr/bin/env python3
"""
Print the scene tree built from an SVG file.
"""

import logging
import sys
from pathlib import Path

from svgscene import SVGParseError, parse
from svgscene.core.nodes import Group, Image, Node, Shape, Text


def describe(node: Node) -> str:
    """One-line summary of a node."""
    offset = "" if node.pos.is_identity else f" @({node.pos.dx:g}, {node.pos.dy:g})"
    if isinstance(node, Group):
        return f"Group [{len(node.contents)}]{offset}"
    if isinstance(node, Shape):
        return (f"Shape {node.form!r} fill={node.fill.to_hex()} "
                f"stroke={node.stroke.fill.to_hex()}/{node.stroke.width:g}{offset}")
    if isinstance(node, Text):
        return f"Text {node.text!r} {node.font.name} {node.font.size}pt{offset}"
    if isinstance(node, Image):
        return f"Image {node.src!r} {node.w}x{node.h}{offset}"
    return "Node"


def print_tree(group: Group, depth: int = 0) -> None:
    for node in group.contents:
        print("  " * depth + describe(node))
        if isinstance(node, Group):
            print_tree(node, depth + 1)


def main():
    if len(sys.argv) < 2:
        print("Usage: python3 dump_svg_tree.py <svg_file> [--debug]")
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if "--debug" in sys.argv[2:] else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s"
    )

    svg_file = Path(sys.argv[1])
    if not svg_file.exists():
        print(f"Error: File not found: {svg_file}")
        sys.exit(1)

    try:
        root = parse(svg_file.read_text(encoding="utf-8"))
    except SVGParseError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print("Root " + describe(root))
    print_tree(root, 1)


if __name__ == "__main__":
    main()
