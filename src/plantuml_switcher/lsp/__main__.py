"""
Entry point for the plantuml-switcher LSP server.

Usage:
    python -m plantuml_switcher.lsp
"""

from .server import start_server

if __name__ == "__main__":
    start_server()
