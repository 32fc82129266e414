"""
Relation engine: arrow handling, line parsing, switching and toggling.

All functions here are pure and never raise for malformed diagram text.
"""

from .arrows import ARROW_CHARS, ArrowMatch, find_arrow, is_arrow, reverse_arrow, tokenize_arrow
from .dispatch import cursor_in_arrow, switch_string
from .modifiers import ARROW_TOGGLE_OPTIONS, next_option, toggle_arrow_token_in_arrow
from .relation import ParsedLine, RelationBuilder, parse_line, switch_relation
from .text import (
    Document,
    DocumentLine,
    LineDocument,
    Position,
    Selection,
    TextEdit,
    TextRange,
    switch_text,
    whole_lines,
)

__all__ = [
    "ARROW_CHARS",
    "ARROW_TOGGLE_OPTIONS",
    "ArrowMatch",
    "Document",
    "DocumentLine",
    "LineDocument",
    "ParsedLine",
    "Position",
    "RelationBuilder",
    "Selection",
    "TextEdit",
    "TextRange",
    "cursor_in_arrow",
    "find_arrow",
    "is_arrow",
    "next_option",
    "parse_line",
    "reverse_arrow",
    "switch_relation",
    "switch_string",
    "switch_text",
    "tokenize_arrow",
    "toggle_arrow_token_in_arrow",
    "whole_lines",
]
