"""
Cursor-mode dispatch between modifier toggling and relation switching.
"""

from __future__ import annotations

import logging

from .arrows import ArrowMatch, find_arrow
from .modifiers import toggle_arrow_token_in_arrow
from .relation import switch_relation

logger = logging.getLogger(__name__)


def cursor_in_arrow(match: ArrowMatch, cursor_pos: int) -> bool:
    """
    Check whether a cursor column lies strictly inside an arrow.

    A cursor on the first character's left edge or just past the last
    character is outside.
    """
    return match.index < cursor_pos < match.end


def switch_string(line: str, cursor_pos: int) -> str | None:
    """
    Transform a line according to the cursor position.

    With the cursor strictly inside the arrow, the arrow's modifier is
    toggled in place. Anywhere else, the whole relation is switched.

    Returns:
        The transformed line, or None when the line holds no arrow.
    """
    match = find_arrow(line)
    if match is None:
        return None

    if cursor_in_arrow(match, cursor_pos):
        logger.debug("Toggling modifier of %r at column %d", match.arrow, cursor_pos)
        toggled = toggle_arrow_token_in_arrow(match.arrow, cursor_pos, match.index)
        return line[: match.index] + toggled + line[match.end :]

    logger.debug("Switching relation around %r", match.arrow)
    return switch_relation(line)
