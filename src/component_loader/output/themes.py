"""Severity color map."""

from component_loader.models.diagnostic import Severity

SEVERITY_COLORS: dict[Severity, str] = {
    Severity.WARNING: "yellow",
    Severity.ERROR: "red bold",
}


def styled_severity(severity: Severity) -> str:
    color = SEVERITY_COLORS.get(severity, "white")
    return f"[{color}]{severity.value}[/{color}]"
