"""cload list - List components."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from component_loader.cli.options import OutputOption, PathOption
from component_loader.core.component_store import ComponentsPathError, ComponentStore
from component_loader.output.formatters import output_components

app = typer.Typer()


@app.callback(invoke_without_command=True)
def list_components(
    output: str = OutputOption,
    path: Optional[Path] = PathOption,
    type: Optional[str] = typer.Option(None, "--type", "-t", help="Only components of this type, e.g. state.redis"),
    filter: Optional[str] = typer.Option(None, "--filter", "-f", help="Regex filter on component name"),
) -> None:
    """List all components in the components directory."""
    store = ComponentStore(path)
    try:
        result = store.load_components(type_filter=type, name_filter=filter)
    except ComponentsPathError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    output_components(result.components, output)
