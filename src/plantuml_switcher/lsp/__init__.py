"""
plantuml-switcher Language Server Protocol implementation.

Provides the relation switch as a code action:
- Cursor in a line: switch source and target, reversing the arrow
- Cursor inside the arrow: cycle its modifier (norank, hidden, none)
- Selection: switch every selected line
"""

from .server import start_server

__all__ = ["start_server"]
