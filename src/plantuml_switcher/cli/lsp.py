"""
LSP (Language Server Protocol) CLI commands.

Commands for running the plantuml-switcher LSP server.
"""

from importlib.metadata import PackageNotFoundError, version

import typer

from plantuml_switcher.config import load_config

LSP_DISTRIBUTIONS = ("pygls", "lsprotocol")

lsp_app = typer.Typer(
    help="Language Server Protocol (LSP) commands.",
    no_args_is_help=True,
)


@lsp_app.command("run")
def lsp_run(
    tcp: bool = typer.Option(
        False,
        "--tcp",
        help="Use TCP transport (for debugging)",
    ),
    port: int | None = typer.Option(
        None,
        "--port",
        help="TCP port (only used with --tcp, defaults to the configured port)",
    ),
) -> None:
    """
    Start the plantuml-switcher LSP server.

    By default uses stdio transport for editor integration.
    Use --tcp --port for debugging with a TCP connection.
    """
    if tcp:
        config = load_config()
        typer.echo(f"Starting plantuml-switcher LSP server on TCP port {port or config.server.port}...")
        try:
            from plantuml_switcher.lsp.server import start_tcp_server

            start_tcp_server(config, port)
        except Exception as e:
            typer.echo(f"Error starting LSP server: {e}", err=True)
            raise typer.Exit(code=1)
    else:
        try:
            from plantuml_switcher.lsp import start_server

            start_server()
        except KeyboardInterrupt:
            typer.echo("\nLSP server stopped.")
        except Exception as e:
            typer.echo(f"Error starting LSP server: {e}", err=True)
            raise typer.Exit(code=1)


@lsp_app.command("check")
def lsp_check() -> None:
    """
    Report the installed versions of the language server's distributions.
    """
    missing = []
    for distribution in LSP_DISTRIBUTIONS:
        try:
            typer.echo(f"{distribution + ':':<14}{version(distribution)}")
        except PackageNotFoundError:
            missing.append(distribution)

    if missing:
        typer.echo(f"Missing: {', '.join(missing)} (reinstall plantuml-switcher)", err=True)
        raise typer.Exit(code=1)
