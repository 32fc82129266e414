"""
plantuml-switcher CLI utilities.

Shared helpers used across CLI modules.
"""

import logging
import platform

import typer

from plantuml_switcher._version import get_version


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        lsp_available = True
        try:
            import pygls  # noqa: F401
        except ImportError:
            lsp_available = False

        typer.echo(f"plantuml-switcher {get_version()}")
        typer.echo(f"Python:        {python_impl} {python_version}")
        typer.echo(f"LSP server:    {'available' if lsp_available else 'not installed'}")
        raise typer.Exit()


def configure_logging(verbose: bool, level: str = "WARNING") -> None:
    """Route log records to stderr, at DEBUG when ``verbose`` is set."""
    logging.basicConfig(level=logging.DEBUG if verbose else level)
