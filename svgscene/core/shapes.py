"""
svgscene Core Shapes Module

Defines the value types the scene nodes are built from: Point, Color,
Font, Stroke, Transform, the geometry variants, path segments and
gradients.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

import numpy as np


@dataclass(frozen=True)
class Point:
    """A 2D point."""
    x: float
    y: float

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class Color:
    """An 8-bit RGB color."""
    r: int = 0
    g: int = 0
    b: int = 0

    @classmethod
    def from_int(cls, value: int) -> 'Color':
        """Split a 24-bit integer into its red, green and blue channels."""
        return cls(
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF
        )

    def to_int(self) -> int:
        return (self.r << 16) | (self.g << 8) | self.b

    def to_hex(self) -> str:
        return f"#{self.to_int():06x}"


BLACK = Color(0, 0, 0)


class LineCap(Enum):
    """Stroke end cap style."""
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


class LineJoin(Enum):
    """Stroke corner join style."""
    MITER = "miter"
    ROUND = "round"
    BEVEL = "bevel"


@dataclass(frozen=True)
class Stroke:
    """Stroke paint. Imported shapes always use round caps and joins."""
    fill: Color = BLACK
    width: float = 0.0
    cap: LineCap = LineCap.ROUND
    join: LineJoin = LineJoin.ROUND


@dataclass(frozen=True)
class Font:
    """Font descriptor for text nodes."""
    name: str = "Serif"
    size: int = 12               # points
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strike: bool = False


@dataclass(frozen=True)
class Transform:
    """
    2D affine transform stored as [a, b, c, d, e, f], i.e. the matrix
    [[a, c, e], [b, d, f], [0, 0, 1]].

    The importer only ever builds translations, but the full matrix is
    kept so a renderer can compose it with its own transforms.
    """
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def translation(cls, dx: float, dy: float) -> 'Transform':
        return cls(e=dx, f=dy)

    @property
    def dx(self) -> float:
        return self.e

    @property
    def dy(self) -> float:
        return self.f

    @property
    def is_identity(self) -> bool:
        return self == Transform()

    @property
    def matrix(self) -> np.ndarray:
        """The transform as a 3x3 numpy matrix."""
        return np.array([
            [self.a, self.c, self.e],
            [self.b, self.d, self.f],
            [0.0, 0.0, 1.0],
        ])

    @classmethod
    def from_matrix(cls, m: np.ndarray) -> 'Transform':
        return cls(
            float(m[0, 0]), float(m[1, 0]),
            float(m[0, 1]), float(m[1, 1]),
            float(m[0, 2]), float(m[1, 2])
        )

    def concat(self, other: 'Transform') -> 'Transform':
        """Return the transform that applies `other` first, then self."""
        return Transform.from_matrix(self.matrix @ other.matrix)

    def move(self, dx: float, dy: float) -> 'Transform':
        """Return this transform followed by a translation."""
        return Transform.translation(dx, dy).concat(self)

    def apply(self, points) -> np.ndarray:
        """Transform an (n, 2) array-like of points."""
        pts = np.asarray(points, dtype=float).reshape(-1, 2)
        if len(pts) == 0:
            return pts
        homogeneous = np.hstack([pts, np.ones((len(pts), 1))])
        return (homogeneous @ self.matrix.T)[:, :2]


# Geometry variants

class Geometry:
    """Marker base class for the shape geometries."""


@dataclass(frozen=True)
class Rect(Geometry):
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0


@dataclass(frozen=True)
class Circle(Geometry):
    cx: float = 0.0
    cy: float = 0.0
    r: float = 0.0


@dataclass(frozen=True)
class Ellipse(Geometry):
    cx: float = 0.0
    cy: float = 0.0
    rx: float = 0.0
    ry: float = 0.0


@dataclass(frozen=True)
class Line(Geometry):
    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0


def _pair_up(values: List[float]) -> Tuple[Tuple[float, float], ...]:
    """Pair a flat number list positionally, dropping an odd trailing value."""
    return tuple(
        (values[i], values[i + 1]) for i in range(0, len(values) - 1, 2)
    )


@dataclass(frozen=True)
class Polygon(Geometry):
    """A closed polygon."""
    points: Tuple[Tuple[float, float], ...] = ()

    @classmethod
    def from_flat(cls, values: List[float]) -> 'Polygon':
        return cls(_pair_up(values))

    def as_array(self) -> np.ndarray:
        return np.array(self.points, dtype=float).reshape(-1, 2)


@dataclass(frozen=True)
class Polyline(Geometry):
    """An open polyline."""
    points: Tuple[Tuple[float, float], ...] = ()

    @classmethod
    def from_flat(cls, values: List[float]) -> 'Polyline':
        return cls(_pair_up(values))

    def as_array(self) -> np.ndarray:
        return np.array(self.points, dtype=float).reshape(-1, 2)


# Path segment types

@dataclass(frozen=True)
class PathSegment:
    """Base class for path segments; `absolute` is always True on import."""


@dataclass(frozen=True)
class MoveToSegment(PathSegment):
    point: Point
    absolute: bool = True


@dataclass(frozen=True)
class LineToSegment(PathSegment):
    point: Point
    absolute: bool = True


@dataclass(frozen=True)
class CubicBezierSegment(PathSegment):
    cp1: Point
    cp2: Point
    end_point: Point
    absolute: bool = True


@dataclass(frozen=True)
class ClosePathSegment(PathSegment):
    absolute: bool = True


@dataclass(frozen=True)
class Path(Geometry):
    """A path made of move, line, cubic and close segments."""
    segments: Tuple[PathSegment, ...] = ()

    @property
    def closed(self) -> bool:
        return bool(self.segments) and isinstance(self.segments[-1], ClosePathSegment)


# Gradients (parsed, not bound to any paint)

@dataclass(frozen=True)
class GradientStop:
    offset: float = 0.0
    color: Color = BLACK
    opacity: float = 1.0


@dataclass(frozen=True)
class LinearGradient:
    user_space: bool = True
    stops: Tuple[GradientStop, ...] = field(default_factory=tuple)
    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0
