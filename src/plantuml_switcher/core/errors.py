"""
Error types for plantuml-switcher host layers.

The relation engine itself never raises for malformed diagram text; these
errors cover contract violations at the document boundary and broken
configuration files.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class SwitcherError(Exception):
    """Base exception for all plantuml-switcher errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class DocumentRangeError(SwitcherError):
    """
    Raised when a position or range does not address the document.

    Examples:
    - Line number past the last line
    - Negative line or column
    - Range whose end precedes its start
    """

    pass


class ConfigError(SwitcherError):
    """
    Raised when a configuration file cannot be loaded.

    Examples:
    - Invalid TOML syntax
    - Wrong value type for a known key
    """

    pass


@dataclass
class ErrorContext:
    """
    Location information for an error.

    Attributes:
        line: Line number (0-indexed, as editors address documents), None
            when only the file is known
        column: Column number (0-indexed), None with line
        snippet: Optional text of the offending line
        file: Optional path of the document or config file
    """

    line: int | None = None
    column: int | None = None
    snippet: str | None = None
    file: Path | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "diagram.puml:10:5"
        """
        if self.line is None:
            return str(self.file) if self.file else ""

        location = f"{self.line}:{self.column or 0}"
        if self.file:
            location = f"{self.file}:{location}"

        if self.snippet is not None:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format the snippet with its line number and a column marker."""
        prefix = f"{self.line:4d} | "
        marker_pos = len(prefix) + max(self.column or 0, 0)
        return f"{prefix}{self.snippet}\n{' ' * marker_pos}^^^"


def make_range_error(
    message: str,
    line: int,
    column: int,
    snippet: str | None = None,
) -> DocumentRangeError:
    """
    Helper to create a DocumentRangeError with context.

    Args:
        message: Error description
        line: Line number the host asked for
        column: Column number the host asked for
        snippet: Optional text of the addressed line

    Returns:
        DocumentRangeError with context attached
    """
    context = ErrorContext(line=line, column=column, snippet=snippet)
    return DocumentRangeError(message, context)


def make_config_error(
    message: str,
    file: Path,
    line: int | None = None,
    column: int | None = None,
) -> ConfigError:
    """
    Helper to create a ConfigError pointing at the offending file.

    Args:
        message: Error description
        file: Configuration file path
        line: Optional line number (0-indexed)
        column: Optional column number (0-indexed)

    Returns:
        ConfigError with context attached
    """
    context = ErrorContext(line=line, column=column, file=file)
    return ConfigError(message, context)
