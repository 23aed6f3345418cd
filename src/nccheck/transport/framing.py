"""End-of-message delimiter framing for NETCONF documents.

Every document on the wire is followed by the literal ``]]>]]>``. A single
read from the channel may hold part of a document, exactly one document, or
the tail of one document and the head of the next; the :class:`Framer`
buffers across reads so that all three cases decode identically.
"""

from __future__ import annotations

import time

from ..config import default_max_buffer
from ..protocol.fields import DELIMITER
from .base import FramingError, Transport, TransportError, TransportTimeout


def encode(document: str) -> bytes:
    """Return the wire representation of *document*, terminator included."""
    return document.encode("utf-8") + DELIMITER


class Framer:
    """Write framed documents to, and read framed documents from, a transport.

    Bytes that arrive after a terminator are kept and consumed by the next
    call to :func:`decode`.
    """

    read_size = 32768

    def __init__(self, transport: Transport, max_buffer: int = default_max_buffer):
        self.transport = transport
        self.max_buffer = max_buffer
        self._buffer = bytearray()

    @property
    def pending(self) -> bytes:
        """Bytes received but not yet returned as part of a document."""
        return bytes(self._buffer)

    def write(self, document: str) -> None:
        self.transport.write(encode(document))

    def decode(self, timeout: float) -> str:
        """Return the next complete document, without its terminator.

        Raises :class:`FramingError` if no terminator is seen within *timeout*
        seconds, if the peer closes the stream first, if a read fails, or if
        a document exceeds the configured ceiling.
        """

        deadline = time.monotonic() + timeout
        buffer = self._buffer
        searched = 0

        # A document of exactly max_buffer bytes, plus its terminator.
        limit = self.max_buffer + len(DELIMITER)

        while True:
            index = buffer.find(DELIMITER, searched)
            if index != -1:
                break

            if len(buffer) >= limit:
                raise FramingError(
                    f"no message terminator within {self.max_buffer} buffered bytes"
                )

            # The terminator may straddle two reads; rescan the tail.
            searched = max(0, len(buffer) - len(DELIMITER) + 1)

            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise FramingError(f"no message terminator in {timeout:.2f} sec")

            try:
                size = min(self.read_size, limit - len(buffer))
                chunk = self.transport.read(size, remaining)
            except TransportTimeout as exc:
                raise FramingError(f"no message terminator in {timeout:.2f} sec") from exc
            except TransportError as exc:
                raise FramingError(f"read failed before message terminator: {exc}") from exc

            if not chunk:
                raise FramingError(
                    f"stream closed with {len(buffer)} bytes and no message terminator"
                )

            buffer.extend(chunk)

        if index > self.max_buffer:
            raise FramingError(
                f"document of {index} bytes exceeds the {self.max_buffer} byte ceiling"
            )

        document = bytes(buffer[:index])
        del buffer[:index + len(DELIMITER)]

        try:
            return document.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FramingError(f"document is not valid UTF-8: {exc}") from exc

