"""
Arrow modifier toggling.

A modifier is a bracket group inside an arrow (``--[norank]->``). Toggling
advances it through ``ARROW_TOGGLE_OPTIONS``, where the empty option means
the group is absent. Other bracket groups, such as colors, are left alone.
"""

from __future__ import annotations

import re

# Cycle order; the empty option is "no modifier"
ARROW_TOGGLE_OPTIONS: tuple[str, ...] = ("", "norank", "hidden")

_MODIFIER_PATTERN = re.compile(
    r"\[(" + "|".join(re.escape(option) for option in ARROW_TOGGLE_OPTIONS if option) + r")\]"
)


def next_option(option: str) -> str:
    """Return the option following ``option`` in the circular cycle."""
    index = ARROW_TOGGLE_OPTIONS.index(option)
    return ARROW_TOGGLE_OPTIONS[(index + 1) % len(ARROW_TOGGLE_OPTIONS)]


def toggle_arrow_token_in_arrow(arrow: str, cursor_offset: int, arrow_offset: int) -> str:
    """
    Advance the modifier of an arrow by one step.

    Args:
        arrow: Arrow token text
        cursor_offset: Cursor column in the line
        arrow_offset: Column of the arrow's first character in the line

    Returns:
        The arrow with its first recognised modifier advanced, removed when
        the cycle wraps, or ``[norank]`` inserted at the cursor when no
        modifier is present. A cursor on either outer edge of the arrow
        leaves it unchanged.

    Examples:
        >>> toggle_arrow_token_in_arrow("-->", 14, 13)
        '-[norank]->'
        >>> toggle_arrow_token_in_arrow("--[norank]->", 14, 13)
        '--[hidden]->'
        >>> toggle_arrow_token_in_arrow("--[hidden]->", 14, 13)
        '--->'
    """
    local_offset = cursor_offset - arrow_offset
    if local_offset == 0 or local_offset == len(arrow):
        return arrow

    match = _MODIFIER_PATTERN.search(arrow)
    if match is None:
        first_option = ARROW_TOGGLE_OPTIONS[1]
        return f"{arrow[:local_offset]}[{first_option}]{arrow[local_offset:]}"

    successor = next_option(match.group(1))
    replacement = f"[{successor}]" if successor else ""
    return arrow[: match.start()] + replacement + arrow[match.end() :]
