"""Split multi-document YAML byte streams into individual documents."""

from __future__ import annotations

import enum
from typing import Iterable, Iterator, Union

from component_loader.config.settings import settings

ByteStream = Union[bytes, bytearray, memoryview, Iterable[bytes]]


class SplitterState(enum.Enum):
    SCANNING = "scanning"
    EMIT = "emit"
    DONE = "done"


def split_yaml_doc(
    data: bytes | bytearray,
    at_eof: bool,
    separator: bytes | None = None,
) -> tuple[int, bytes | None]:
    """Find the next document in ``data``.

    Returns ``(advance, token)``: the number of bytes to drop from the front
    of the buffer and the document found, or ``None`` when no document is
    ready. ``(0, None)`` with ``at_eof`` set means the stream is exhausted;
    without it, that more input is needed.
    """
    if separator is None:
        separator = settings.yaml_separator
    if at_eof and not data:
        return 0, None

    i = data.find(separator)
    if i >= 0:
        after = i + len(separator)
        if after == len(data):
            if at_eof:
                return len(data), bytes(data[:i])
            # The next chunk may start another separator or continue this one.
            return 0, None
        j = data.find(b"\n", after)
        if j >= 0:
            return j + 1, bytes(data[:i])
        if at_eof:
            # The separator line runs to the end of the stream.
            return len(data), bytes(data[:i])
        return 0, None

    if at_eof:
        return len(data), bytes(data)
    return 0, None


class DocumentSplitter:
    """Incremental tokenizer over a YAML byte stream.

    Bytes arrive through :meth:`feed`; :meth:`close` marks the end of input.
    :meth:`next_document` returns the next complete document, or ``None``
    when more input is required (still open) or the stream is exhausted
    (``state`` is ``DONE``).
    """

    def __init__(self, separator: bytes | None = None):
        self.separator = separator if separator is not None else settings.yaml_separator
        if not self.separator:
            raise ValueError("separator must not be empty")
        self.state = SplitterState.SCANNING
        self._buffer = bytearray()
        self._at_eof = False

    @property
    def closed(self) -> bool:
        return self._at_eof

    @property
    def buffered(self) -> int:
        """Number of bytes received but not yet consumed."""
        return len(self._buffer)

    def feed(self, chunk: bytes) -> None:
        if self.closed:
            raise ValueError("cannot feed a closed splitter")
        self._buffer.extend(chunk)

    def close(self) -> None:
        self._at_eof = True

    def next_document(self) -> bytes | None:
        if self.state is SplitterState.DONE:
            return None
        self.state = SplitterState.SCANNING

        advance, token = split_yaml_doc(self._buffer, self.closed, self.separator)
        if advance:
            del self._buffer[:advance]
        if token is None:
            if self.closed and not self._buffer:
                self.state = SplitterState.DONE
            return None

        self.state = SplitterState.EMIT
        return token

    def __iter__(self) -> Iterator[bytes]:
        """Yield every document that is ready with the input seen so far."""
        while True:
            token = self.next_document()
            if token is None:
                return
            yield token


def split_documents(stream: ByteStream, separator: bytes | None = None) -> Iterator[bytes]:
    """Yield the raw documents of ``stream``.

    ``stream`` is either the whole content or an iterable of chunks; the
    documents produced do not depend on how the content is chunked.
    """
    if isinstance(stream, (bytes, bytearray, memoryview)):
        stream = [bytes(stream)]

    splitter = DocumentSplitter(separator)
    for chunk in stream:
        splitter.feed(chunk)
        yield from splitter
    splitter.close()
    yield from splitter
