"""
SVG Parser for svgscene

Converts an SVG document into a scene tree of Group, Shape, Text and
Image nodes. Gradients are read but not bound to fills; viewBox, CSS,
`use` references and clip paths are not applied.
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional
from xml.etree import ElementTree as ET

from ..config import ParserSettings
from ..core.nodes import Group, Image, Node, Shape, Text
from ..core.shapes import (
    Circle, Ellipse, Font, GradientStop, Line, LinearGradient, Path,
    Polygon, Polyline, Rect, Transform
)
from . import attributes as attr
from .errors import SVGParseError
from .path_data import PathDataParser

logger = logging.getLogger(__name__)


class SVGTag(Enum):
    """Element names the dispatcher knows about."""
    SVG = "svg"
    G = "g"
    USE = "use"
    SYMBOL = "symbol"
    IMAGE = "image"
    TEXT = "text"
    TSPAN = "tspan"
    PATH = "path"
    RECT = "rect"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    POLYLINE = "polyline"
    POLYGON = "polygon"
    LINE = "line"
    LINEAR_GRADIENT = "linearGradient"
    STOP = "stop"
    PATTERN = "pattern"
    CLIP_PATH = "clipPath"
    DEFS = "defs"

    @classmethod
    def from_name(cls, name: str) -> Optional['SVGTag']:
        try:
            return cls(name)
        except ValueError:
            return None


# Elements that only contribute their children
PLACEHOLDER_TAGS = frozenset({
    SVGTag.SVG, SVGTag.USE, SVGTag.SYMBOL, SVGTag.TSPAN, SVGTag.STOP,
    SVGTag.PATTERN, SVGTag.CLIP_PATH, SVGTag.DEFS,
})


def parse_offset(value: str) -> float:
    """Gradient stop offset, either a fraction or a percentage."""
    value = value.strip()
    if value.endswith('%'):
        number = attr.parse_number(value[:-1])
        return number / 100.0 if number is not None else 0.0
    number = attr.parse_number(value)
    return number if number is not None else 0.0


def parse_linear_gradient(element: ET.Element, legacy: bool = False) -> LinearGradient:
    """Read a linearGradient element and its stop children."""
    attrs = attr.element_attributes(element)
    stops = []
    for child in element:
        if attr.local_name(child.tag) != SVGTag.STOP.value:
            continue
        stop_attrs = attr.element_attributes(child)
        opacity = attr.parse_number(stop_attrs.get('stop-opacity', '1'))
        stops.append(GradientStop(
            offset=parse_offset(stop_attrs.get('offset', '0')),
            color=attr.get_color(stop_attrs, 'stop-color'),
            opacity=opacity if opacity is not None else 1.0
        ))
    return LinearGradient(
        user_space=attrs.get('gradientUnits', 'userSpaceOnUse') != 'objectBoundingBox',
        stops=tuple(stops),
        x1=attr.get_double(attrs, 'x1', legacy),
        y1=attr.get_double(attrs, 'y1', legacy),
        x2=attr.get_double(attrs, 'x2', legacy),
        y2=attr.get_double(attrs, 'y2', legacy)
    )


class SVGParser:
    """Parse SVG documents into scene trees."""

    def __init__(self, settings: Optional[ParserSettings] = None):
        self.settings = settings or ParserSettings()
        self._path_parser = PathDataParser(self.settings.legacy_relative_paths)

        self._handlers: Dict[SVGTag, Callable[[ET.Element, Mapping[str, str]], Node]] = {
            SVGTag.G: self._handle_group,
            SVGTag.IMAGE: self._handle_image,
            SVGTag.TEXT: self._handle_text,
            SVGTag.PATH: self._handle_path,
            SVGTag.RECT: self._handle_rect,
            SVGTag.CIRCLE: self._handle_circle,
            SVGTag.ELLIPSE: self._handle_ellipse,
            SVGTag.POLYLINE: self._handle_polyline,
            SVGTag.POLYGON: self._handle_polygon,
            SVGTag.LINE: self._handle_line,
            SVGTag.LINEAR_GRADIENT: self._handle_linear_gradient,
        }
        for tag in PLACEHOLDER_TAGS:
            self._handlers[tag] = self._handle_placeholder

        missing = set(SVGTag) - set(self._handlers)
        if missing:
            raise RuntimeError(f"No handler for tags: {sorted(t.value for t in missing)}")

    def parse_string(self, svg_string: str) -> Group:
        """Parse an SVG string and return the root Group."""
        if not svg_string or not svg_string.strip():
            raise SVGParseError("Empty SVG document")
        try:
            root = ET.fromstring(svg_string)
        except ET.ParseError as e:
            raise SVGParseError(f"Malformed SVG document: {e}") from e
        return self.parse_element(root)

    def parse_element(self, root: ET.Element) -> Group:
        """
        Build the scene tree for an already parsed document root.

        The root element's children go into a fresh root Group. A root
        element that is itself a group becomes the root Group; a drawable
        root element is added after its children.
        """
        root_node = self.handle_element(root)
        if isinstance(root_node, Group):
            root_group = root_node
        else:
            root_group = Group()

        self._assemble(root, root_group.contents)

        if type(root_node) is not Node and root_node is not root_group:
            root_group.add(root_node)

        logger.info(f"Parsed SVG: {sum(1 for _ in root_group.walk())} nodes")
        return root_group

    def handle_element(self, element: ET.Element) -> Node:
        """Build the node for a single element, ignoring its children."""
        name = attr.local_name(element.tag) if isinstance(element.tag, str) else ""
        tag = SVGTag.from_name(name)
        attrs = attr.element_attributes(element)
        if tag is None:
            logger.debug(f"Unsupported element <{name}>, using placeholder")
            return self._handle_placeholder(element, attrs)
        return self._handlers[tag](element, attrs)

    def _assemble(self, parent: ET.Element, target: List[Node]) -> None:
        """
        Append the nodes for everything below `parent` to `target`.

        A group collects its children's nodes and is appended itself once
        they are done. Any other element's children go to the enclosing
        group first, followed by the element's own node.
        """
        # (remaining children, node to append when done, its list, list for its children)
        stack = [(iter(parent), None, None, target)]
        while stack:
            children, node, node_target, child_target = stack[-1]
            child = next(children, None)
            if child is None:
                stack.pop()
                if node is not None:
                    node_target.append(node)
                continue

            child_node = self.handle_element(child)
            if isinstance(child_node, Group):
                stack.append((iter(child), child_node, child_target, child_node.contents))
            else:
                stack.append((iter(child), child_node, child_target, child_target))

    # Shared attribute helpers

    def _double(self, attrs: Mapping[str, str], name: str) -> float:
        return attr.get_double(attrs, name, self.settings.legacy_numeric_coercion)

    def _integer(self, attrs: Mapping[str, str], name: str) -> int:
        return attr.get_integer(attrs, name, self.settings.legacy_numeric_coercion)

    def _position(self, attrs: Mapping[str, str]) -> Transform:
        """Translation from the optional x/y attributes."""
        return Transform().move(self._double(attrs, 'x'), self._double(attrs, 'y'))

    def _shape(self, form, attrs: Mapping[str, str], pos: Optional[Transform] = None) -> Shape:
        return Shape(
            pos=pos if pos is not None else self._position(attrs),
            form=form,
            fill=attr.get_fill_color(attrs),
            stroke=attr.get_stroke(attrs, self.settings.legacy_numeric_coercion)
        )

    # Element handlers

    def _handle_placeholder(self, element: ET.Element, attrs: Mapping[str, str]) -> Node:
        return Node(pos=Transform())

    def _handle_group(self, element: ET.Element, attrs: Mapping[str, str]) -> Group:
        return Group(
            contents=[],
            pos=Transform(),
            opaque=True,
            visible=True,
            clip=None,
            tags=set()
        )

    def _handle_linear_gradient(self, element: ET.Element, attrs: Mapping[str, str]) -> Node:
        gradient = parse_linear_gradient(element, self.settings.legacy_numeric_coercion)
        logger.debug(
            f"linearGradient {attrs.get('id', '')!r} with {len(gradient.stops)} stops "
            f"is not bound to any fill"
        )
        return Node(pos=Transform())

    def _handle_image(self, element: ET.Element, attrs: Mapping[str, str]) -> Image:
        src = attr.get_string(attrs, 'xlink:href') or attr.get_string(attrs, 'href')
        return Image(
            pos=self._position(attrs),
            src=src,
            w=self._integer(attrs, 'width'),
            h=self._integer(attrs, 'height')
        )

    def _handle_text(self, element: ET.Element, attrs: Mapping[str, str]) -> Text:
        font = Font(
            name=attr.get_font_name(attrs, self.settings.default_font_name),
            size=attr.get_font_size(attrs, self.settings.default_font_size),
            bold=attr.get_font_style(attrs, 'bold'),
            italic=attr.get_font_style(attrs, 'italic'),
            underline=attr.get_text_decoration(attrs, 'underline'),
            strike=attr.get_text_decoration(attrs, 'line-through')
        )
        return Text(
            pos=self._position(attrs),
            text=element.text or "",
            font=font,
            fill=attr.get_fill_color(attrs)
        )

    def _handle_rect(self, element: ET.Element, attrs: Mapping[str, str]) -> Shape:
        rect = Rect(
            x=self._double(attrs, 'x'),
            y=self._double(attrs, 'y'),
            w=self._double(attrs, 'width'),
            h=self._double(attrs, 'height')
        )
        # x/y are already part of the geometry
        return self._shape(rect, attrs, pos=Transform())

    def _handle_circle(self, element: ET.Element, attrs: Mapping[str, str]) -> Shape:
        circle = Circle(
            cx=self._double(attrs, 'cx'),
            cy=self._double(attrs, 'cy'),
            r=self._double(attrs, 'r')
        )
        return self._shape(circle, attrs)

    def _handle_ellipse(self, element: ET.Element, attrs: Mapping[str, str]) -> Shape:
        ellipse = Ellipse(
            cx=self._double(attrs, 'cx'),
            cy=self._double(attrs, 'cy'),
            rx=self._double(attrs, 'rx'),
            ry=self._double(attrs, 'ry')
        )
        return self._shape(ellipse, attrs)

    def _handle_line(self, element: ET.Element, attrs: Mapping[str, str]) -> Shape:
        line = Line(
            x1=self._double(attrs, 'x1'),
            y1=self._double(attrs, 'y1'),
            x2=self._double(attrs, 'x2'),
            y2=self._double(attrs, 'y2')
        )
        return self._shape(line, attrs)

    def _handle_polygon(self, element: ET.Element, attrs: Mapping[str, str]) -> Shape:
        values = attr.parse_number_list(attrs.get('points', ''))
        return self._shape(Polygon.from_flat(values), attrs)

    def _handle_polyline(self, element: ET.Element, attrs: Mapping[str, str]) -> Shape:
        values = attr.parse_number_list(attrs.get('points', ''))
        return self._shape(Polyline.from_flat(values), attrs)

    def _handle_path(self, element: ET.Element, attrs: Mapping[str, str]) -> Shape:
        d = attrs.get('d')
        segments = self._path_parser.parse(d) if d else []
        return self._shape(Path(tuple(segments)), attrs)


def parse(document_text: str, settings: Optional[ParserSettings] = None) -> Group:
    """Parse SVG text into a scene tree and return its root Group."""
    return SVGParser(settings).parse_string(document_text)
