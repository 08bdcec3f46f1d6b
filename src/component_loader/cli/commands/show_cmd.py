"""cload show <name> - Show a single component."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from component_loader.cli.options import NamespaceOption, OutputOption, PathOption
from component_loader.core.component_store import ComponentsPathError, ComponentStore
from component_loader.output.formatters import output_component_info

app = typer.Typer(context_settings={"allow_interspersed_args": True})


@app.callback(invoke_without_command=True)
def show(
    name: str = typer.Argument(help="Component name"),
    output: str = OutputOption,
    path: Optional[Path] = PathOption,
    namespace: Optional[str] = NamespaceOption,
) -> None:
    """Show the header fields and spec of one component."""
    store = ComponentStore(path)
    try:
        component = store.get_component(name, namespace=namespace)
    except ComponentsPathError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)

    if component is None:
        typer.echo(f"Component '{name}' not found.", err=True)
        raise typer.Exit(code=1)

    output_component_info(component, output)
