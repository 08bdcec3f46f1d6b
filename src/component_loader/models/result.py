"""Decode and load result containers."""

from __future__ import annotations

from dataclasses import dataclass, field

from component_loader.models.component import Component
from component_loader.models.diagnostic import Diagnostic, SourceWarning


@dataclass
class DecodeResult:
    file_id: str
    components: list[Component] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)


@dataclass
class LoadResult:
    components: list[Component] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    warnings: list[SourceWarning] = field(default_factory=list)
    files: list[str] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.diagnostics or self.warnings)

    @property
    def summary(self) -> dict[str, int]:
        return {
            "files": len(self.files),
            "components": len(self.components),
            "diagnostics": len(self.diagnostics),
            "warnings": len(self.warnings),
        }

    def extend(self, decoded: DecodeResult) -> None:
        self.files.append(decoded.file_id)
        self.components.extend(decoded.components)
        self.diagnostics.extend(decoded.diagnostics)
