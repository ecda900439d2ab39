"""
svgscene I/O Module

Handles SVG import.
"""

from .errors import SVGParseError, PathDataError
from .path_data import PathDataParser, parse_path_data, tokenize_path
from .svg_parser import SVGParser, SVGTag, parse, parse_linear_gradient

__all__ = [
    'SVGParseError', 'PathDataError',
    'PathDataParser', 'parse_path_data', 'tokenize_path',
    'SVGParser', 'SVGTag', 'parse', 'parse_linear_gradient',
]
