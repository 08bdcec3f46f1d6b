"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="cload",
    help="Component Loader - Inspect Dapr component definitions on disk.",
    no_args_is_help=True,
)


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _register_commands() -> None:
    from component_loader.cli.commands.list_cmd import app as list_app
    from component_loader.cli.commands.show_cmd import app as show_app
    from component_loader.cli.commands.validate_cmd import app as validate_app
    from component_loader.cli.commands.split_cmd import app as split_app

    app.add_typer(list_app, name="list", help="List components")
    app.add_typer(show_app, name="show", help="Show a component's details")
    app.add_typer(validate_app, name="validate", help="Report files and documents that failed to load")
    app.add_typer(split_app, name="split", help="Show the documents a YAML file splits into")


_register_commands()


def main() -> None:
    app()
