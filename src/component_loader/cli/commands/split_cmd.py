"""cload split <file> - Show how a file is split into documents."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape

from component_loader.cli.options import OutputOption
from component_loader.output.formatters import output_documents
from component_loader.utils.yaml_splitter import split_documents

app = typer.Typer(context_settings={"allow_interspersed_args": True})


@app.callback(invoke_without_command=True)
def split(
    file: Path = typer.Argument(help="YAML file to split"),
    output: str = OutputOption,
) -> None:
    """Print the raw documents found in a multi-document YAML file."""
    try:
        content = file.read_bytes()
    except OSError as exc:
        typer.echo(f"Cannot read {file}: {exc}", err=True)
        raise typer.Exit(code=1)

    output_documents(list(split_documents(content)), output, title=f"Documents: {escape(file.name)}")
