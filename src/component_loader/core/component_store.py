"""Load component resources from a components directory."""

from __future__ import annotations

import logging
import re
from functools import partial
from pathlib import Path
from typing import Iterable

from component_loader.config.settings import settings
from component_loader.core.component_decoder import decode_all, decode_chunks
from component_loader.models.component import Component
from component_loader.models.diagnostic import SourceWarning
from component_loader.models.result import DecodeResult, LoadResult

logger = logging.getLogger(__name__)


class ComponentsPathError(Exception):
    """The components directory itself could not be listed."""


class ComponentStore:
    """Reads component files from a directory and decodes their resources."""

    def __init__(self, components_path: Path | str | None = None):
        self.components_path = Path(components_path) if components_path else settings.components_path

    @staticmethod
    def is_yaml(filename: str) -> bool:
        return Path(filename).suffix.lower() in settings.yaml_extensions

    def list_component_files(self) -> list[Path]:
        """Return the YAML files in the components directory, sorted by name."""
        try:
            entries = sorted(self.components_path.iterdir(), key=lambda p: p.name)
            return [p for p in entries if not p.is_dir() and self.is_yaml(p.name)]
        except OSError as exc:
            raise ComponentsPathError(
                f"cannot read components directory {self.components_path}: {exc}"
            ) from exc

    def load_components(
        self,
        type_filter: str | None = None,
        name_filter: str | None = None,
    ) -> LoadResult:
        """Load every component in the directory.

        Unreadable files and malformed documents are reported in the result
        rather than raised; only a missing or unlistable directory raises
        ComponentsPathError.
        """
        result = LoadResult()
        for path in self.list_component_files():
            file_id = str(path)
            try:
                with path.open("rb") as handle:
                    chunks = iter(partial(handle.read, settings.read_chunk_size), b"")
                    decoded = decode_chunks(chunks, file_id)
            except OSError as exc:
                self._record_unreadable(result, file_id, exc)
                continue
            self._collect(result, decoded)

        return self._apply_filters(result, type_filter, name_filter)

    def load_from_sources(
        self,
        sources: Iterable[tuple[str, bytes]],
        type_filter: str | None = None,
        name_filter: str | None = None,
    ) -> LoadResult:
        """Load components from pre-read ``(file_id, content)`` pairs."""
        result = LoadResult()
        for file_id, content in sources:
            self._collect(result, decode_all(content, file_id))
        return self._apply_filters(result, type_filter, name_filter)

    def get_component(self, name: str, namespace: str | None = None) -> Component | None:
        """Return the first component with the given name, or None."""
        for component in self.load_components().components:
            if component.name != name:
                continue
            if namespace is not None and component.namespace != namespace:
                continue
            return component
        return None

    @staticmethod
    def _record_unreadable(result: LoadResult, file_id: str, exc: OSError) -> None:
        logger.warning("failed to read component file %s: %s", file_id, exc)
        result.files.append(file_id)
        result.warnings.append(SourceWarning(file_id=file_id, message=str(exc)))

    @staticmethod
    def _collect(result: LoadResult, decoded: DecodeResult) -> None:
        for diagnostic in decoded.diagnostics:
            logger.warning(
                "failed to parse component yaml in %s: %s", diagnostic.file_id, diagnostic.message,
            )
        result.extend(decoded)

    @staticmethod
    def _apply_filters(
        result: LoadResult,
        type_filter: str | None,
        name_filter: str | None,
    ) -> LoadResult:
        if type_filter:
            result.components = [c for c in result.components if c.type == type_filter]
        if name_filter:
            pattern = re.compile(name_filter, re.IGNORECASE)
            result.components = [c for c in result.components if pattern.search(c.name)]
        return result
