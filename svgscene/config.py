"""
Parser settings for svgscene.
"""

from dataclasses import dataclass


@dataclass
class ParserSettings:
    """Settings for SVG import."""

    # Text defaults
    default_font_name: str = "Serif"
    default_font_size: int = 12       # points

    # Compatibility switches
    legacy_numeric_coercion: bool = False  # Strip every non-digit before parsing numbers
    legacy_relative_paths: bool = False    # Record m/l/c coordinates as absolute, unresolved
