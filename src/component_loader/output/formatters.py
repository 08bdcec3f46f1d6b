"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from component_loader.models.component import Component
from component_loader.models.result import LoadResult

console = Console()


def _component_to_dict(c: Component, include_spec: bool = False) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": c.name,
        "namespace": c.namespace,
        "type": c.type,
        "version": c.version,
        "scopes": c.scopes,
        "file": c.source,
    }
    if include_spec:
        data["api_version"] = c.api_version
        data["auth_secret_store"] = c.auth_secret_store
        data["spec"] = c.spec
    return data


def _problems_to_dict(result: LoadResult) -> dict[str, Any]:
    return {
        "summary": result.summary,
        "warnings": [
            {"file": w.file_id, "severity": w.severity.value, "message": w.message}
            for w in result.warnings
        ],
        "diagnostics": [
            {
                "file": d.file_id,
                "document": d.document_index,
                "severity": d.severity.value,
                "message": d.message,
            }
            for d in result.diagnostics
        ],
    }


def output_components(components: list[Component], fmt: str) -> None:
    if fmt == "json":
        data = [_component_to_dict(c) for c in components]
        console.print_json(json.dumps(data, indent=2))
    elif fmt == "yaml":
        data = [_component_to_dict(c) for c in components]
        console.print(yaml.safe_dump(data, default_flow_style=False), markup=False)
    else:
        from component_loader.output.tables import component_list_table
        console.print(component_list_table(components))


def output_component_info(component: Component, fmt: str) -> None:
    if fmt == "json":
        data = _component_to_dict(component, include_spec=True)
        console.print_json(json.dumps(data, indent=2, default=str))
    elif fmt == "yaml":
        data = _component_to_dict(component, include_spec=True)
        console.print(yaml.safe_dump(data, default_flow_style=False), markup=False)
    else:
        from component_loader.output.tables import component_panel
        console.print(component_panel(component))


def output_problems(result: LoadResult, fmt: str) -> None:
    if fmt == "json":
        console.print_json(json.dumps(_problems_to_dict(result), indent=2))
    elif fmt == "yaml":
        console.print(yaml.safe_dump(_problems_to_dict(result), default_flow_style=False), markup=False)
    else:
        from component_loader.output.tables import diagnostics_table
        if result.has_errors:
            console.print(diagnostics_table(result))
        summary = result.summary
        console.print(
            f"Scanned {summary['files']} file(s): {summary['components']} component(s), "
            f"{summary['diagnostics']} parse error(s), {summary['warnings']} unreadable file(s)."
        )


def output_documents(documents: list[bytes], fmt: str, title: str = "Documents") -> None:
    texts = [doc.decode("utf-8", errors="replace") for doc in documents]
    if fmt == "json":
        console.print_json(json.dumps(texts, indent=2))
    elif fmt == "yaml":
        console.print(yaml.safe_dump(texts, default_flow_style=False), markup=False)
    else:
        from component_loader.output.tables import documents_table
        console.print(documents_table(documents, title))
