"""Component resource models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class EnvelopeError(ValueError):
    """A decoded document does not have the shape of a resource envelope."""


def _mapping(d: dict, key: str, where: str = "") -> dict:
    value = d.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        path = f"{where}.{key}" if where else key
        raise EnvelopeError(f"{path}: expected a mapping, got {type(value).__name__}")
    return value


def _string(d: dict, key: str, where: str = "") -> str:
    value = d.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        path = f"{where}.{key}" if where else key
        raise EnvelopeError(f"{path}: expected a string, got {type(value).__name__}")
    return value


@dataclass
class ComponentMetadata:
    name: str = ""
    namespace: str = ""
    labels: dict[str, Any] = field(default_factory=dict)
    annotations: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, d: dict) -> ComponentMetadata:
        return cls(
            name=_string(d, "name", "metadata"),
            namespace=_string(d, "namespace", "metadata"),
            labels=_mapping(d, "labels", "metadata"),
            annotations=_mapping(d, "annotations", "metadata"),
        )


@dataclass
class MetadataItem:
    """One ``spec.metadata`` entry. Values are kept as written."""

    name: str = ""
    value: Any = None
    secret_key_ref: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, d: dict) -> MetadataItem:
        return cls(
            name=str(d.get("name", "") or ""),
            value=d.get("value"),
            secret_key_ref=d.get("secretKeyRef") or {},
        )


@dataclass
class Component:
    """A decoded resource envelope.

    The header fields are typed; ``spec`` is carried as the decoded mapping
    and left for downstream consumers to interpret.
    """

    api_version: str = ""
    kind: str = ""
    metadata: ComponentMetadata = field(default_factory=ComponentMetadata)
    spec: dict[str, Any] = field(default_factory=dict)
    auth_secret_store: str = ""
    scopes: list[str] = field(default_factory=list)
    raw: dict[str, Any] = field(default_factory=dict)
    source: str = ""

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    @property
    def type(self) -> str:
        return str(self.spec.get("type", "") or "")

    @property
    def version(self) -> str:
        return str(self.spec.get("version", "") or "")

    @property
    def ignore_errors(self) -> bool:
        value = self.spec.get("ignoreErrors", False)
        if isinstance(value, str):
            return value.lower() == "true"
        return value is True

    @property
    def init_timeout(self) -> str:
        return str(self.spec.get("initTimeout", "") or "")

    @property
    def metadata_items(self) -> list[MetadataItem]:
        items = self.spec.get("metadata") or []
        if not isinstance(items, list):
            return []
        return [MetadataItem.from_dict(item) for item in items if isinstance(item, dict)]

    @classmethod
    def from_dict(cls, d: Any, source: str = "") -> Component:
        """Build a Component from a decoded YAML document.

        ``None`` (an empty document) yields an empty envelope. Anything that
        is not a mapping, or whose header fields have the wrong type, raises
        EnvelopeError.
        """
        if d is None:
            return cls(source=source)
        if not isinstance(d, dict):
            raise EnvelopeError(f"expected a mapping at document root, got {type(d).__name__}")

        scopes = d.get("scopes") or []
        if not isinstance(scopes, list):
            raise EnvelopeError(f"scopes: expected a list, got {type(scopes).__name__}")
        for scope in scopes:
            if not isinstance(scope, str):
                raise EnvelopeError(f"scopes: expected string items, got {type(scope).__name__}")

        return cls(
            api_version=_string(d, "apiVersion"),
            kind=_string(d, "kind"),
            metadata=ComponentMetadata.from_dict(_mapping(d, "metadata")),
            spec=_mapping(d, "spec"),
            auth_secret_store=_string(_mapping(d, "auth"), "secretStore", "auth"),
            scopes=list(scopes),
            raw=d,
            source=source,
        )
