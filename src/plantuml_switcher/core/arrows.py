"""
Arrow tokens of PlantUML relation lines.

An arrow is a whitespace-delimited token built from direction and line
glyphs, optionally interrupted by bracket groups carrying modifiers::

    A --> B
    A --[norank]-> B
    A -[#red]-[bold]-> B

This module classifies tokens, locates the first arrow in a line, and
reverses arrows while keeping bracket groups legible.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

# Characters allowed outside bracket groups
ARROW_CHARS = frozenset("<>-.[]|o*\\/+#^")

_WHITESPACE = re.compile(r"\s+")

_DIRECTION_SWAP = str.maketrans("<>", "><")


class ArrowMatch(BaseModel):
    """
    An arrow located in a line.

    Attributes:
        arrow: The arrow token text
        index: Offset of the arrow's first character in the line
    """

    arrow: str
    index: int

    model_config = ConfigDict(frozen=True)

    @property
    def end(self) -> int:
        """Offset just past the arrow's last character."""
        return self.index + len(self.arrow)


def is_arrow(token: str) -> bool:
    """
    Check whether a whitespace-delimited token is an arrow.

    Characters inside ``[...]`` are exempt from the glyph check. Brackets do
    not nest, and an unterminated ``[`` exempts the rest of the token.

    Examples:
        >>> is_arrow("-->")
        True
        >>> is_arrow("-[#red]->")
        True
        >>> is_arrow("A::B")
        False
    """
    if not token:
        return False

    in_brackets = False
    for char in token:
        if char == "[":
            in_brackets = True
            continue
        if char == "]":
            in_brackets = False
            continue
        if not in_brackets and char not in ARROW_CHARS:
            return False
    return True


def find_arrow(line: str) -> ArrowMatch | None:
    """
    Find the first arrow token in a line.

    The offset is that of the first occurrence of the token's text in the
    line, which differs from the token's own position only when the same
    text appears earlier as part of another token.
    """
    for token in _WHITESPACE.split(line):
        if is_arrow(token):
            return ArrowMatch(arrow=token, index=line.find(token))
    return None


def tokenize_arrow(arrow: str) -> list[str]:
    """
    Split an arrow into glyph runs and bracket groups, in order.

    Examples:
        >>> tokenize_arrow("-[#red]-[bold]->")
        ['-', '[#red]', '-', '[bold]', '->']
    """
    segments: list[str] = []
    current = ""

    for char in arrow:
        if char == "[":
            if current:
                segments.append(current)
            current = "["
        elif char == "]":
            current += "]"
            segments.append(current)
            current = ""
        else:
            current += char

    if current:
        segments.append(current)
    return segments


def _is_bracket_group(segment: str) -> bool:
    return segment.startswith("[") and segment.endswith("]")


def reverse_arrow(arrow: str) -> str:
    """
    Reverse an arrow's direction.

    Segment order is reversed. Glyph runs are read backwards with ``<`` and
    ``>`` swapped; bracket groups move as a unit and keep their text.

    Examples:
        >>> reverse_arrow("--|>")
        '<|--'
        >>> reverse_arrow("--[norank]->")
        '<-[norank]--'
        >>> reverse_arrow("-[#red]-[bold]->")
        '<-[bold]-[#red]-'
    """
    reversed_segments = []
    for segment in reversed(tokenize_arrow(arrow)):
        if _is_bracket_group(segment):
            reversed_segments.append(segment)
        else:
            reversed_segments.append(segment[::-1].translate(_DIRECTION_SWAP))
    return "".join(reversed_segments)
