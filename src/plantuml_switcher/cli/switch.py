"""
Switch commands.

- ``switch``: transform a single relation line given on the command line
- ``file``: transform a cursor position or selection inside a file
"""

import logging
from pathlib import Path

import typer

from plantuml_switcher.core import (
    LineDocument,
    Position,
    Selection,
    switch_relation,
    switch_string,
    switch_text,
)
from plantuml_switcher.core.errors import SwitcherError

logger = logging.getLogger(__name__)


def switch_command(
    line: str = typer.Argument(..., help='Relation line, e.g. \'A "x" --> B : uses\''),
    cursor: int | None = typer.Option(
        None,
        "--cursor",
        "-c",
        help="Cursor column; inside the arrow it toggles the modifier instead",
    ),
) -> None:
    """
    Switch one relation line and print the result.

    Without --cursor the relation is always switched.
    """
    if cursor is None:
        typer.echo(switch_relation(line))
        return

    result = switch_string(line, cursor)
    if result is None:
        logger.info("No arrow found, line left unchanged")
        result = line
    typer.echo(result)


def file_command(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="PlantUML file"),
    line: int = typer.Option(..., "--line", "-l", help="Cursor line (0-indexed)"),
    column: int = typer.Option(0, "--column", help="Cursor column (0-indexed)"),
    end_line: int | None = typer.Option(None, "--end-line", help="Selection end line"),
    end_column: int | None = typer.Option(None, "--end-column", help="Selection end column"),
    in_place: bool = typer.Option(False, "--in-place", "-i", help="Rewrite the file"),
) -> None:
    """
    Switch relations in a file at a cursor or over a selection.

    With --end-line/--end-column the request is a selection and every
    covered line is switched. Otherwise it is a cursor at --line/--column.
    """
    source = path.read_text(encoding="utf-8")
    document = LineDocument(source)

    anchor = Position(line=line, character=column)
    if end_line is None and end_column is None:
        selection = Selection(start=anchor, end=anchor)
    else:
        active = Position(
            line=line if end_line is None else end_line,
            character=column if end_column is None else end_column,
        )
        selection = Selection.from_anchor(anchor, active)

    try:
        edit = switch_text(document, selection)
        updated = document.apply(edit)
    except SwitcherError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if in_place:
        path.write_text(updated, encoding="utf-8")
        typer.echo(
            f"Updated {path} (lines {edit.range.start.line}-{edit.range.end.line})"
        )
    else:
        typer.echo(updated, nl=False)
