"""
Relation line parsing and switching.

A relation line has the shape::

    <indent><from_block> ["<from_label>"] <arrow> ["<to_label>"] <to_block> [ : <relation_name>]

for example ``A::B "label1" --> "label2" C::D : relation``. Entity blocks
are opaque: ``::``, ``@`` and ``.`` separators pass through untouched.
"""

from __future__ import annotations

import logging
import re

from pydantic import BaseModel, ConfigDict

from .arrows import find_arrow, reverse_arrow

logger = logging.getLogger(__name__)

RELATION_SEPARATOR = " : "

_INDENT = re.compile(r"^[ \t]*")


class ParsedLine(BaseModel):
    """
    Structural parts of one relation line.

    Labels and the relation name are empty strings when absent.
    """

    indent: str = ""
    from_block: str
    from_label: str = ""
    arrow: str
    to_label: str = ""
    to_block: str
    relation_name: str = ""

    model_config = ConfigDict(frozen=True)


class RelationBuilder:
    """Accumulates the fragments of a relation line, skipping empty ones."""

    def __init__(self, indent: str = ""):
        self.indent = indent
        self._fragments: list[str] = []
        self._suffix = ""

    def add(self, fragment: str) -> RelationBuilder:
        if fragment:
            self._fragments.append(fragment)
        return self

    def add_label(self, label: str) -> RelationBuilder:
        if label:
            self._fragments.append(f'"{label}"')
        return self

    def add_relation_name(self, relation_name: str) -> RelationBuilder:
        if relation_name:
            self._suffix = f"{RELATION_SEPARATOR}{relation_name}"
        return self

    def build(self) -> str:
        return self.indent + " ".join(self._fragments) + self._suffix


def _split_from_side(before: str) -> tuple[str, str]:
    """Return ``(from_block, from_label)`` for the text left of the arrow."""
    first_quote = before.find('"')
    last_quote = before.rfind('"')
    if first_quote != -1 and last_quote != first_quote:
        return before[:first_quote].strip(), before[first_quote + 1 : last_quote].strip()
    return before, ""


def _split_to_side(main_part: str) -> tuple[str, str]:
    """Return ``(to_block, to_label)`` for the text right of the arrow."""
    if main_part.startswith('"'):
        second_quote = main_part.find('"', 1)
        if second_quote != -1:
            return main_part[second_quote + 1 :].strip(), main_part[1:second_quote].strip()
    return main_part, ""


def parse_line(line: str) -> ParsedLine | None:
    """
    Parse a relation line into its parts.

    Returns:
        ParsedLine, or None when the line holds no arrow.

    Examples:
        >>> parse_line('A::B "label1" --> "label2" C::D : relation').to_label
        'label2'
        >>> parse_line("no arrow here") is None
        True
    """
    match = find_arrow(line)
    if match is None:
        return None

    indent_match = _INDENT.match(line)
    indent = indent_match.group(0) if indent_match else ""

    before = line[: match.index].strip()
    after = line[match.end :].strip()

    main_part = after
    relation_name = ""
    separator_index = after.find(RELATION_SEPARATOR)
    if separator_index != -1:
        main_part = after[:separator_index].strip()
        relation_name = after[separator_index + len(RELATION_SEPARATOR) :].strip()

    from_block, from_label = _split_from_side(before)
    to_block, to_label = _split_to_side(main_part)

    return ParsedLine(
        indent=indent,
        from_block=from_block,
        from_label=from_label,
        arrow=match.arrow,
        to_label=to_label,
        to_block=to_block,
        relation_name=relation_name,
    )


def switch_relation(line: str) -> str:
    """
    Swap source and target of a relation line and reverse its arrow.

    Lines without an arrow are returned unchanged.

    Examples:
        >>> switch_relation('A::B "label1" --> "label2" C::D : relation')
        'C::D "label2" <-- "label1" A::B : relation'
        >>> switch_relation('ClassA "name" --|> ClassB::Type : extends')
        'ClassB::Type <|-- "name" ClassA : extends'
    """
    parsed = parse_line(line)
    if parsed is None:
        logger.debug("No arrow in line, left unchanged: %r", line)
        return line

    return (
        RelationBuilder(parsed.indent)
        .add(parsed.to_block)
        .add_label(parsed.to_label)
        .add(reverse_arrow(parsed.arrow))
        .add_label(parsed.from_label)
        .add(parsed.from_block)
        .add_relation_name(parsed.relation_name)
        .build()
    )
