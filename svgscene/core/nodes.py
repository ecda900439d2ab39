"""
svgscene Scene Nodes

The node tree handed to a renderer: Group, Shape, Text and Image, all
sharing the base Node (which on its own is the inert placeholder used
for unsupported elements).
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set

from .shapes import BLACK, Color, Font, Geometry, Stroke, Transform


@dataclass
class Node:
    """
    Base scene node.

    A bare Node has no geometry and draws nothing; the importer produces
    one for every element it does not turn into something drawable.
    """
    pos: Transform = field(default_factory=Transform)


@dataclass
class Group(Node):
    """
    An ordered container of nodes.

    Content order is drawing order and mirrors the source document.
    """
    contents: List[Node] = field(default_factory=list)
    opaque: bool = True
    visible: bool = True
    clip: Optional[object] = None
    tags: Set[str] = field(default_factory=set)

    def add(self, node: Node) -> None:
        """Append a node to this group."""
        self.contents.append(node)

    def remove(self, node: Node) -> None:
        """Remove this exact node object from the group, if present."""
        for i, child in enumerate(self.contents):
            if child is node:
                del self.contents[i]
                return

    def walk(self) -> Iterator[Node]:
        """Yield every descendant node depth-first, in document order."""
        stack = [iter(self.contents)]
        while stack:
            node = next(stack[-1], None)
            if node is None:
                stack.pop()
                continue
            yield node
            if isinstance(node, Group):
                stack.append(iter(node.contents))


@dataclass
class Shape(Node):
    """A geometry painted with a fill color and a stroke."""
    form: Optional[Geometry] = None
    fill: Color = BLACK
    stroke: Stroke = field(default_factory=Stroke)


@dataclass
class Text(Node):
    """A run of text positioned by its transform."""
    text: str = ""
    font: Font = field(default_factory=Font)
    fill: Color = BLACK


@dataclass
class Image(Node):
    """A raster image referenced by URI."""
    src: str = ""
    w: int = 0
    h: int = 0
