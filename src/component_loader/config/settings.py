"""Application configuration and defaults."""

from __future__ import annotations

import os
import platform
from dataclasses import dataclass, field
from pathlib import Path


def _default_components_path() -> Path:
    """Return the default components directory for the current platform.

    Checks DAPR_COMPONENTS_PATH first, then falls back to the
    ``.dapr/components`` directory that ``dapr init`` creates in the
    user's home.
    """
    explicit = os.environ.get("DAPR_COMPONENTS_PATH", "")
    if explicit:
        return Path(explicit)
    if platform.system() == "Windows":
        profile = os.environ.get("USERPROFILE", "")
        if profile:
            return Path(profile) / ".dapr" / "components"
    return Path.home() / ".dapr" / "components"


@dataclass
class Settings:
    components_path: Path = field(default_factory=_default_components_path)
    component_kind: str = "Component"
    yaml_separator: bytes = b"\n---"
    yaml_extensions: tuple[str, ...] = (".yaml", ".yml")
    default_output: str = "table"
    read_chunk_size: int = 64 * 1024


# Global singleton
settings = Settings()
