"""
Attribute coercion for SVG elements.

Every function here turns a raw attribute value into a typed value and
falls back to a fixed default when the attribute is absent or cannot be
read. None of them raise.
"""

import math
import re
from typing import Dict, List, Mapping, Optional
from xml.etree import ElementTree as ET

from ..core.shapes import BLACK, Color, Stroke

SVG_NS = '{http://www.w3.org/2000/svg}'
XLINK_NS = '{http://www.w3.org/1999/xlink}'

# Leading signed decimal, optionally with an exponent: "-5.5", "10px", ".5e2"
_NUMBER_RE = re.compile(r'\s*([-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?)')
_NON_DIGIT_RE = re.compile(r'[^0-9]')
_HEX_RE = re.compile(r'\s*([0-9a-fA-F]+)')
_SEPARATOR_RE = re.compile(r'[\s,]+')


def local_name(tag: str) -> str:
    """Strip an XML namespace from a tag or attribute name."""
    if tag.startswith('{'):
        return tag.split('}', 1)[1]
    return tag


def element_attributes(element: ET.Element) -> Dict[str, str]:
    """
    Return the element's attributes keyed the way they are written in SVG.

    ElementTree expands prefixed names, so `xlink:href` arrives as
    `{http://www.w3.org/1999/xlink}href`; this maps it back.
    """
    attrs: Dict[str, str] = {}
    for key, value in element.attrib.items():
        if key.startswith(XLINK_NS):
            attrs['xlink:' + key[len(XLINK_NS):]] = value
        else:
            attrs[local_name(key)] = value
    return attrs


def parse_number(text: str, legacy: bool = False) -> Optional[float]:
    """
    Read a number from the start of `text`, or None if there is none or
    it overflows to infinity.

    With `legacy` set, every non-digit character is removed first, which
    drops signs and decimal points ("-5.5" reads as 55).
    """
    if legacy:
        digits = _NON_DIGIT_RE.sub('', text)
        number = float(digits) if digits else None
    else:
        match = _NUMBER_RE.match(text)
        number = float(match.group(1)) if match else None
    if number is None or not math.isfinite(number):
        return None
    return number


def parse_number_list(text: str) -> List[float]:
    """
    Split on whitespace and commas; tokens that are not finite numbers
    are skipped.
    """
    values = []
    for token in _SEPARATOR_RE.split(text.strip()):
        if not token:
            continue
        try:
            number = float(token)
        except ValueError:
            continue
        if math.isfinite(number):
            values.append(number)
    return values


def get_double(attrs: Mapping[str, str], name: str, legacy: bool = False) -> float:
    """Numeric attribute, default 0."""
    value = attrs.get(name)
    if value is None:
        return 0.0
    number = parse_number(value, legacy)
    return number if number is not None else 0.0


def get_integer(attrs: Mapping[str, str], name: str, legacy: bool = False) -> int:
    """Integer attribute, truncated toward zero, default 0."""
    return int(get_double(attrs, name, legacy))


def get_string(attrs: Mapping[str, str], name: str) -> str:
    return attrs.get(name, "")


def parse_color(value: str) -> Color:
    """
    Parse a hex color with or without a leading '#'.

    Anything that does not start with hex digits (named colors, "none")
    reads as black.
    """
    value = value.strip()
    if value.startswith('#'):
        value = value[1:]
    match = _HEX_RE.match(value)
    if not match:
        return BLACK
    return Color.from_int(int(match.group(1), 16))


def get_color(attrs: Mapping[str, str], name: str) -> Color:
    value = attrs.get(name)
    if value is None:
        return BLACK
    return parse_color(value)


def get_fill_color(attrs: Mapping[str, str]) -> Color:
    return get_color(attrs, 'fill')


def get_stroke(attrs: Mapping[str, str], legacy: bool = False) -> Stroke:
    """Stroke from `stroke` and `stroke-width`; caps and joins are always round."""
    return Stroke(
        fill=get_color(attrs, 'stroke'),
        width=get_double(attrs, 'stroke-width', legacy)
    )


def get_font_name(attrs: Mapping[str, str], default: str = "Serif") -> str:
    return attrs.get('font-family', default)


def get_font_size(attrs: Mapping[str, str], default: int = 12) -> int:
    """`font-size` as a bare number; units or junk fall back to the default."""
    value = attrs.get('font-size')
    if value is None:
        return default
    try:
        return int(float(value.strip()))
    except (ValueError, OverflowError):
        return default


def get_font_style(attrs: Mapping[str, str], style: str) -> bool:
    value = attrs.get('font-style')
    return value is not None and value.lower() == style


def get_text_decoration(attrs: Mapping[str, str], decoration: str) -> bool:
    value = attrs.get('text-decoration')
    return value is not None and decoration in value
