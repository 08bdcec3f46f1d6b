"""Data models for the component loader."""

from __future__ import annotations

from component_loader.models.component import Component, ComponentMetadata, EnvelopeError, MetadataItem
from component_loader.models.diagnostic import Diagnostic, Severity, SourceWarning
from component_loader.models.result import DecodeResult, LoadResult

__all__ = [
    "Component",
    "ComponentMetadata",
    "DecodeResult",
    "Diagnostic",
    "EnvelopeError",
    "LoadResult",
    "MetadataItem",
    "Severity",
    "SourceWarning",
]
