"""
plantuml-switcher - swap and restyle PlantUML relations.

Reverses relation lines such as ``A --> B`` into ``B <-- A`` and cycles
arrow modifiers like ``[norank]`` and ``[hidden]``.
"""

from __future__ import annotations

from ._version import get_version as _get_version
from .core import (
    find_arrow,
    parse_line,
    reverse_arrow,
    switch_relation,
    switch_string,
    switch_text,
    toggle_arrow_token_in_arrow,
)
from .core.errors import ConfigError, DocumentRangeError, SwitcherError

__version__ = _get_version()

__all__ = [
    "__version__",
    "ConfigError",
    "DocumentRangeError",
    "SwitcherError",
    "find_arrow",
    "parse_line",
    "reverse_arrow",
    "switch_relation",
    "switch_string",
    "switch_text",
    "toggle_arrow_token_in_arrow",
]
