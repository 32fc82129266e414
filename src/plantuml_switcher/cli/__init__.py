"""
plantuml-switcher CLI package.

- switch.py: line and file switch commands
- lsp.py: language server commands
- utils.py: shared utilities
"""

import typer

from plantuml_switcher.cli.lsp import lsp_app
from plantuml_switcher.cli.switch import file_command, switch_command
from plantuml_switcher.cli.utils import configure_logging, version_callback
from plantuml_switcher.config import get_log_level

app = typer.Typer(
    help="""plantuml-switcher – swap PlantUML relations and cycle arrow modifiers

  • switch: transform one line given as an argument
  • file: transform a cursor position or selection in a file
  • lsp run: serve the switch as an editor code action
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    """plantuml-switcher main callback for global options."""
    configure_logging(verbose, get_log_level("WARNING"))


app.command(name="switch")(switch_command)
app.command(name="file")(file_command)
app.add_typer(lsp_app, name="lsp")


def main() -> None:
    app(standalone_mode=True)


__all__ = ["app", "main"]
