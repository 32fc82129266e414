"""
Selection-aware switching over a line-addressable document.

Hosts hand over a document view and the current selection and get back a
single ``TextEdit``: replace ``range`` with ``new_text``.

- Cursor mode (empty selection): the cursor's line goes through
  ``switch_string``, so a cursor inside the arrow toggles its modifier.
- Selection mode (anything selected, even one character): every covered
  line is switched with ``switch_relation``; the cursor is ignored.
"""

from __future__ import annotations

import logging
import re
from typing import Protocol

from pydantic import BaseModel, ConfigDict

from .dispatch import switch_string
from .errors import make_range_error
from .relation import switch_relation

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")


class Position(BaseModel):
    """Zero-based line and character of a document location."""

    line: int
    character: int

    model_config = ConfigDict(frozen=True)

    def __lt__(self, other: Position) -> bool:
        return (self.line, self.character) < (other.line, other.character)


class TextRange(BaseModel):
    """A span between two positions, ``start`` before ``end``."""

    start: Position
    end: Position

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_coordinates(
        cls, start_line: int, start_character: int, end_line: int, end_character: int
    ) -> TextRange:
        return cls(
            start=Position(line=start_line, character=start_character),
            end=Position(line=end_line, character=end_character),
        )

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


class Selection(TextRange):
    """
    A selection in the host editor.

    ``active`` is the caret end of the selection and defaults to ``end``.
    """

    active: Position | None = None

    @property
    def caret(self) -> Position:
        return self.active or self.end

    @classmethod
    def from_anchor(cls, anchor: Position, active: Position) -> Selection:
        """Build a selection from an anchor and caret in either order."""
        start, end = (active, anchor) if active < anchor else (anchor, active)
        return cls(start=start, end=end, active=active)

    @classmethod
    def cursor(cls, line: int, character: int) -> Selection:
        position = Position(line=line, character=character)
        return cls(start=position, end=position)


class TextEdit(BaseModel):
    """Replacement of ``range`` with ``new_text``."""

    new_text: str
    range: TextRange

    model_config = ConfigDict(frozen=True)


class DocumentLine(BaseModel):
    """Text of one line and the span it covers."""

    text: str
    range: TextRange

    model_config = ConfigDict(frozen=True)


class Document(Protocol):
    """Read-only view of a host document."""

    @property
    def line_count(self) -> int: ...

    def line_at(self, line: int) -> DocumentLine: ...

    def get_text(self, text_range: TextRange) -> str: ...


class LineDocument:
    """In-memory document over a source string."""

    def __init__(self, source: str):
        self.source = source
        self.lines = _LINE_BREAK.split(source)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def _check_position(self, position: Position) -> None:
        if not 0 <= position.line < len(self.lines) or position.character < 0:
            snippet = self.lines[position.line] if 0 <= position.line < len(self.lines) else None
            raise make_range_error(
                f"Position {position.line}:{position.character} is outside the document "
                f"({len(self.lines)} lines)",
                line=position.line,
                column=position.character,
                snippet=snippet,
            )

    def line_at(self, line: int) -> DocumentLine:
        self._check_position(Position(line=line, character=0))
        text = self.lines[line]
        return DocumentLine(text=text, range=TextRange.from_coordinates(line, 0, line, len(text)))

    def get_text(self, text_range: TextRange) -> str:
        self._check_position(text_range.start)
        self._check_position(text_range.end)
        if text_range.end < text_range.start:
            raise make_range_error(
                "Range end precedes its start",
                line=text_range.end.line,
                column=text_range.end.character,
            )

        start, end = text_range.start, text_range.end
        if start.line == end.line:
            return self.lines[start.line][start.character : end.character]

        parts = [self.lines[start.line][start.character :]]
        parts.extend(self.lines[start.line + 1 : end.line])
        parts.append(self.lines[end.line][: end.character])
        return "\n".join(parts)

    def apply(self, edit: TextEdit) -> str:
        """Return the source with ``edit`` applied, joined with ``\\n``."""
        start, end = edit.range.start, edit.range.end
        self._check_position(start)
        self._check_position(end)
        head = self.lines[: start.line]
        tail = self.lines[end.line + 1 :]
        prefix = self.lines[start.line][: start.character]
        suffix = self.lines[end.line][end.character :]
        return "\n".join(head + [prefix + edit.new_text + suffix] + tail)


def whole_lines(document: Document, selection: TextRange) -> TextRange:
    """Extend a selection to cover its first and last lines entirely."""
    end_line = document.line_at(selection.end.line)
    return TextRange.from_coordinates(
        selection.start.line, 0, selection.end.line, end_line.range.end.character
    )


def switch_text(document: Document, selection: Selection) -> TextEdit:
    """
    Compute the edit for a switch request.

    Args:
        document: Host document view
        selection: Current selection; empty means cursor mode

    Returns:
        TextEdit whose range is exactly the span being replaced
    """
    if selection.is_empty:
        cursor = selection.caret
        line = document.line_at(cursor.line)
        new_text = switch_string(line.text, cursor.character)
        if new_text is None:
            logger.debug("No arrow on line %d, nothing to switch", cursor.line)
            new_text = line.text
        return TextEdit(new_text=new_text, range=line.range)

    text_range = whole_lines(document, selection)
    text = document.get_text(text_range)
    switched = [switch_relation(line) for line in _LINE_BREAK.split(text)]
    logger.debug(
        "Switched %d lines (%d-%d)", len(switched), text_range.start.line, text_range.end.line
    )
    return TextEdit(new_text="\n".join(switched), range=text_range)
