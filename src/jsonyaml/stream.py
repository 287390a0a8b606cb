"""Multi-document YAML streams.

Decoder pulls one `---`-separated document per decode() call and raises
EndOfStream once the source is exhausted. Encoder writes one document per
encode() call, putting the `---` marker before every document but the
first, never after the last.
"""

import io
import logging
from typing import IO, Any, Iterator, Optional

from jsonyaml.api import marshal, tree_to_value
from jsonyaml.codes import StreamState, UnknownFieldPolicy
from jsonyaml.contracts import DecodeOptions
from jsonyaml.errors import EndOfStream, ParseError
from jsonyaml.kernel.convert import to_strict
from jsonyaml.kernel.parser import DocumentReader, Source

logger = logging.getLogger(__name__)

DOCUMENT_MARKER = "---\n"


class Decoder:
    """Reads successive YAML documents from one source.

    The source is read incrementally. A ParseError leaves the underlying
    parser unusable, so it is remembered and raised again by every later
    call. Any other error only concerns the document that caused it; the
    next call moves on to the following document.
    """

    def __init__(self, source: Source, options: Optional[DecodeOptions] = None):
        self._reader = DocumentReader(source)
        self._options = options or DecodeOptions()
        self._state = StreamState.OPEN
        self._error: Optional[ParseError] = None
        self._documents = 0

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def documents(self) -> int:
        """Number of documents read so far."""
        return self._documents

    def known_fields(self) -> "Decoder":
        """Reject unknown fields from now on."""
        self._options = self._options.model_copy(
            update={"unknown_fields": UnknownFieldPolicy.REJECT}
        )
        return self

    def decode(self, target: Any = Any) -> Any:
        """Decode the next document into `target`.

        Raises:
            EndOfStream: no documents remain
        """
        if self._error is not None:
            raise self._error
        if self._state is StreamState.EXHAUSTED:
            raise EndOfStream()

        try:
            node = self._reader.next_document()
        except ParseError as e:
            self._error = e
            raise

        if node is None:
            self._state = StreamState.EXHAUSTED
            logger.debug("stream exhausted after %d documents", self._documents)
            raise EndOfStream()

        self._documents += 1
        logger.debug("decoding document %d", self._documents)
        return tree_to_value(to_strict(node), target, self._options)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        try:
            return self.decode()
        except EndOfStream:
            raise StopIteration from None


class Encoder:
    """Writes successive YAML documents to one text or binary sink."""

    def __init__(self, sink: IO[Any]):
        self._sink = sink
        self._binary = isinstance(sink, (io.RawIOBase, io.BufferedIOBase))
        self._documents = 0

    @property
    def documents(self) -> int:
        """Number of documents written so far."""
        return self._documents

    def _write(self, text: str) -> None:
        self._sink.write(text.encode("utf-8") if self._binary else text)

    def encode(self, value: Any) -> None:
        """Append one document holding `value`."""
        text = marshal(value)
        if self._documents:
            self._write(DOCUMENT_MARKER)
        self._write(text)
        self._documents += 1
