"""
svgscene Core Module

Contains the scene-graph data structures:
- Nodes: Group, Shape, Text, Image and the placeholder Node
- Geometry: Rect, Circle, Ellipse, Line, Polygon, Polyline, Path
- Values: Point, Color, Font, Stroke, Transform, gradients
"""

# Import order matters - shapes first, then nodes
from .shapes import (
    Point, Color, BLACK, LineCap, LineJoin, Stroke, Font, Transform,
    Geometry, Rect, Circle, Ellipse, Line, Polygon, Polyline, Path,
    PathSegment, MoveToSegment, LineToSegment, CubicBezierSegment,
    ClosePathSegment, GradientStop, LinearGradient
)
from .nodes import Node, Group, Shape, Text, Image

__all__ = [
    'Point', 'Color', 'BLACK', 'LineCap', 'LineJoin', 'Stroke', 'Font',
    'Transform',
    'Geometry', 'Rect', 'Circle', 'Ellipse', 'Line', 'Polygon', 'Polyline',
    'Path',
    'PathSegment', 'MoveToSegment', 'LineToSegment', 'CubicBezierSegment',
    'ClosePathSegment', 'GradientStop', 'LinearGradient',
    'Node', 'Group', 'Shape', 'Text', 'Image',
]
