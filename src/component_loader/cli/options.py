"""Shared CLI options."""

from __future__ import annotations

import typer

OutputOption = typer.Option("table", "--output", "-o", help="Output format: table, json, yaml")
PathOption = typer.Option(
    None, "--path", "-p", help="Components directory (default: $DAPR_COMPONENTS_PATH or ~/.dapr/components)",
)
NamespaceOption = typer.Option(None, "--namespace", "-n", help="Component namespace")
