"""
svgscene - SVG to scene-graph conversion.
"""

from .config import ParserSettings
from .io import SVGParser, SVGParseError, PathDataError, parse

__version__ = "0.1.0"

__all__ = ['ParserSettings', 'SVGParser', 'SVGParseError', 'PathDataError', 'parse']
