"""Diagnostic models for load failures."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Severity(enum.Enum):
    WARNING = "warning"
    ERROR = "error"


@dataclass
class Diagnostic:
    """A document in ``file_id`` that failed to decode."""

    file_id: str
    error: Exception
    document_index: int = -1
    severity: Severity = Severity.ERROR

    @property
    def message(self) -> str:
        return str(self.error)


@dataclass
class SourceWarning:
    """A file whose content could not be read."""

    file_id: str
    message: str
    severity: Severity = Severity.WARNING
