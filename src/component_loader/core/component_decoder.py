"""Decode component resources from multi-document YAML content."""

from __future__ import annotations

import logging
from typing import Iterable

import yaml

from component_loader.config.settings import settings
from component_loader.models.component import Component, EnvelopeError
from component_loader.models.diagnostic import Diagnostic
from component_loader.models.result import DecodeResult
from component_loader.utils.yaml_splitter import split_documents

logger = logging.getLogger(__name__)


def decode_document(document: bytes, source: str = "") -> Component:
    """Decode one raw YAML document into a Component envelope.

    Raises yaml.YAMLError on invalid YAML and EnvelopeError when the
    document is not shaped like a resource.
    """
    return Component.from_dict(yaml.safe_load(document), source=source)


def decode_chunks(
    chunks: Iterable[bytes],
    file_id: str,
    kind: str | None = None,
) -> DecodeResult:
    """Decode every document in a chunked byte stream, keeping ``kind`` only.

    A document that fails to decode becomes a Diagnostic and the remaining
    documents are still processed. Documents of another kind are dropped
    without a diagnostic.
    """
    expected = kind or settings.component_kind
    result = DecodeResult(file_id=file_id)

    for index, document in enumerate(split_documents(chunks)):
        try:
            component = decode_document(document, source=file_id)
        except (yaml.YAMLError, EnvelopeError) as exc:
            result.diagnostics.append(Diagnostic(file_id=file_id, error=exc, document_index=index))
            continue

        if component.kind != expected:
            logger.debug("Skipping document %d in %s with kind %r", index, file_id, component.kind)
            continue

        result.components.append(component)

    return result


def decode_all(stream: bytes, file_id: str, kind: str | None = None) -> DecodeResult:
    """Decode the full content of one file."""
    return decode_chunks([stream], file_id, kind=kind)
