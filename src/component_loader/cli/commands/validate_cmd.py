"""cload validate - Report load problems."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from component_loader.cli.options import OutputOption, PathOption
from component_loader.core.component_store import ComponentsPathError, ComponentStore
from component_loader.output.formatters import output_problems

app = typer.Typer()


@app.callback(invoke_without_command=True)
def validate(
    output: str = OutputOption,
    path: Optional[Path] = PathOption,
) -> None:
    """Load every component file and list the ones that failed.

    Exits with code 1 when any document failed to parse or any file could
    not be read.
    """
    store = ComponentStore(path)
    try:
        result = store.load_components()
    except ComponentsPathError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)

    output_problems(result, output)
    if result.has_errors:
        raise typer.Exit(code=1)
