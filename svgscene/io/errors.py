"""
Errors raised while importing SVG documents.
"""

from typing import Optional


class SVGParseError(ValueError):
    """The document could not be converted into a scene tree."""


class PathDataError(SVGParseError):
    """
    A recognised path command has missing, surplus or non-numeric parameters.

    Attributes:
        command: The command letter, e.g. "M"
        index: Ordinal of the command within the path data
        position: Character offset of the command letter
        params: The raw parameter text of the command
    """

    def __init__(self, message: str, command: str, index: int,
                 position: int, params: Optional[str] = None):
        super().__init__(
            f"{message} (command '{command}' #{index} at offset {position})"
        )
        self.command = command
        self.index = index
        self.position = position
        self.params = params
