"""Transport interface.

This is the (small) contract that transport implementations should follow.
It lives outside :mod:`nccheck.protocol` so the protocol remains
transport-agnostic: the protocol layer deals in XML documents, the
transport only moves bytes.
"""

from __future__ import annotations

import builtins
from abc import ABC, abstractmethod
from typing import Optional


class NetconfError(Exception):
    """Base class for every error raised by nccheck."""


# Transport agnostic exceptions

class TransportError(NetconfError):
    """Base class for all transport-layer errors."""


class TransportTimeout(TransportError):
    """A read or write did not complete before its deadline."""


class TransportConnectionError(TransportError, builtins.ConnectionError):
    """The transport could not dial, authenticate, or open the subsystem."""


# Session layer exceptions; these live here so that every layer can share
# one import point for the complete taxonomy.

class SessionError(NetconfError):
    """The session could not proceed: failed handshake, mismatched reply,
    request outside the ready state, or a transport failure mid-session.
    """


class FramingError(SessionError):
    """A complete document could not be extracted from the byte stream."""


class CloseWarning(Warning):
    """The peer did not acknowledge a close-session request in time.

    This is never raised by the session; it is returned from
    :func:`nccheck.transport.session.Session.close` and reported.
    """


class Transport(ABC):
    """Minimal contract for a byte-level transport."""

    @abstractmethod
    def open(self) -> None:
        """Establish the underlying connection and channel."""

    @abstractmethod
    def close(self) -> None:
        """Tear down the underlying connection and channel."""

    @abstractmethod
    def write(self, data: bytes) -> None:
        """Write all of *data* to the channel."""

    @abstractmethod
    def read(self, size: int, timeout: Optional[float] = None) -> bytes:
        """Return up to *size* bytes; ``b''`` means the peer closed."""

    @property
    def is_open(self) -> bool:
        """Whether the transport is currently connected."""
        return False
