"""Rich table builders for each command."""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from component_loader.models.component import Component
from component_loader.models.result import LoadResult
from component_loader.output.themes import styled_severity


def component_list_table(components: list[Component]) -> Table:
    table = Table(title="Components", expand=True, show_lines=False)
    table.add_column("Namespace", style="blue", no_wrap=True)
    table.add_column("Name", style="bold white", no_wrap=True)
    table.add_column("Type", style="magenta", no_wrap=True)
    table.add_column("Version", style="cyan")
    table.add_column("Scopes", style="dim")
    table.add_column("File", style="dim", no_wrap=True)

    for c in components:
        table.add_row(
            Text(c.namespace),
            Text(c.name),
            Text(c.type),
            Text(c.version),
            Text(", ".join(c.scopes)),
            Text(Path(c.source).name if c.source else ""),
        )
    return table


def component_panel(component: Component) -> Panel:
    import yaml

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")

    table.add_row("Name", Text(component.name))
    table.add_row("Namespace", Text(component.namespace or "-"))
    table.add_row("API Version", Text(component.api_version or "-"))
    table.add_row("Type", Text(component.type or "-"))
    table.add_row("Version", Text(component.version or "-"))
    if component.init_timeout:
        table.add_row("Init Timeout", Text(component.init_timeout))
    if component.ignore_errors:
        table.add_row("Ignore Errors", "true")
    if component.auth_secret_store:
        table.add_row("Secret Store", Text(component.auth_secret_store))
    if component.scopes:
        table.add_row("Scopes", Text(", ".join(component.scopes)))
    table.add_row("File", Text(component.source or "-"))

    text = yaml.safe_dump(component.spec, default_flow_style=False) if component.spec else "(empty spec)"
    table.add_row("Spec", Syntax(text, "yaml", theme="monokai", line_numbers=False))

    return Panel(table, title=f"[bold]Component: {escape(component.name)}[/bold]", border_style="blue")


def diagnostics_table(result: LoadResult) -> Table:
    table = Table(title="Load Problems", expand=True)
    table.add_column("Severity", no_wrap=True)
    table.add_column("File", style="cyan")
    table.add_column("Doc", justify="right", style="dim")
    table.add_column("Message")

    for w in result.warnings:
        table.add_row(styled_severity(w.severity), Text(w.file_id), "-", Text(w.message))
    for d in result.diagnostics:
        doc = str(d.document_index) if d.document_index >= 0 else "-"
        table.add_row(styled_severity(d.severity), Text(d.file_id), doc, Text(d.message))
    return table


def documents_table(documents: list[bytes], title: str) -> Table:
    table = Table(title=title, expand=True)
    table.add_column("#", justify="right", style="bold")
    table.add_column("Bytes", justify="right", style="dim")
    table.add_column("First Line", max_width=60)

    for index, doc in enumerate(documents):
        text = doc.decode("utf-8", errors="replace").strip()
        first = text.splitlines()[0] if text else "(empty)"
        table.add_row(str(index), str(len(doc)), Text(first))
    return table
