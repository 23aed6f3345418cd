"""Transport-agnostic NETCONF session layer.

A :class:`Session` owns one transport for its whole life. It performs the
hello exchange, correlates each request with its reply through the
``message-id`` attribute, and tears the channel down on every exit path.
"""

from __future__ import annotations

import enum
import itertools
import logging
import time
from typing import Optional

from ..config import SessionOptions
from ..protocol import factory
from ..protocol.message import Hello, Message, Operation, ParseError, Reply
from ..report import Reporter
from .base import CloseWarning, FramingError, SessionError, Transport, TransportError
from .framing import Framer


logger = logging.getLogger(__name__)


class State(enum.Enum):
    CREATED = "created"
    HANDSHAKE_SENT = "handshake-sent"
    READY = "ready"
    CLOSING = "closing"
    CLOSED = "closed"


class Session:
    """Client-side NETCONF session.

    Typical use::

        with Session(SSHTransport(parameters)) as session:
            session.handshake()
            reply = session.get_config()

    Leaving the ``with`` block always closes the session, whether or not
    the handshake completed.
    """

    def __init__(
        self,
        transport: Transport,
        options: Optional[SessionOptions] = None,
        reporter: Optional[Reporter] = None,
    ):
        self.transport = transport
        self.options = options or SessionOptions()
        self.reporter = reporter or Reporter()
        self.framer = Framer(transport, self.options.max_buffer)
        self.state = State.CREATED
        self.peer: Optional[Hello] = None
        self.last_id: Optional[str] = None
        self._ids = itertools.count(1)

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self):
        return f"<Session {self.state.value} via {self.transport!r}>"

    @property
    def session_id(self) -> Optional[str]:
        return self.peer.session_id if self.peer is not None else None

    @property
    def capabilities(self) -> frozenset:
        return self.peer.capabilities if self.peer is not None else frozenset()

    # --- internal ---
    def _next_id(self) -> str:
        message_id = str(next(self._ids))
        self.last_id = message_id
        return message_id

    def _abort(self) -> None:
        self.state = State.CLOSED
        self.transport.close()

    def _write(self, document: str) -> None:
        try:
            self.framer.write(document)
        except TransportError as exc:
            self._abort()
            raise SessionError(f"write failed: {exc}") from exc

    def _read(self, timeout: float) -> str:
        try:
            return self.framer.decode(timeout)
        except FramingError:
            self._abort()
            raise

    # --- lifecycle ---
    def open(self) -> None:
        """Open the transport and announce local capabilities.

        Connection failures propagate unchanged as
        :class:`nccheck.transport.base.TransportConnectionError`.
        """

        if self.state is not State.CREATED:
            raise SessionError(f"cannot open a session in state {self.state.value}")

        try:
            self.transport.open()
        except TransportError:
            self._abort()
            raise

        self._write(factory.hello().to_xml())
        self.state = State.HANDSHAKE_SENT

    def handshake(self) -> Hello:
        """Exchange hello documents; the session is ready afterwards.

        The peer's capabilities are recorded and logged; nothing here
        branches on them.
        """

        if self.state is State.CREATED:
            self.open()

        if self.state is not State.HANDSHAKE_SENT:
            raise SessionError(f"cannot perform handshake in state {self.state.value}")

        text = self._read(self.options.reply_timeout)

        try:
            peer = Hello.from_xml(text)
        except ParseError as exc:
            self._abort()
            raise SessionError(f"invalid peer hello: {exc}") from exc

        self.peer = peer
        self.state = State.READY

        logger.debug("peer session id %s, %d capabilities", peer.session_id, len(peer.capabilities))
        for capability in sorted(peer.capabilities):
            logger.debug("peer capability: %s", capability)

        self.reporter.info("NETCONF session initiated")
        return peer

    def request(self, operation: Operation) -> Reply:
        """Send one ``<rpc>`` and return its reply.

        Every call takes a fresh message identifier; a request is never
        re-sent under the identifier of an earlier one.
        """

        if self.state is not State.READY:
            raise SessionError(f"request issued in state {self.state.value}")

        message = Message(self._next_id(), operation)
        self._write(message.to_xml())
        text = self._read(self.options.reply_timeout)

        try:
            reply = Reply.from_xml(text)
        except ParseError as exc:
            self._abort()
            raise SessionError(f"invalid reply to message {message.id}: {exc}") from exc

        if reply.id != message.id:
            self._abort()
            raise SessionError(f"reply message-id {reply.id!r} does not match request {message.id!r}")

        return reply

    def get_config(self, source: str = "running") -> Reply:
        return self.request(factory.get_config(source))

    def close(self) -> Optional[CloseWarning]:
        """Close the session, returning a :class:`CloseWarning` if the peer
        did not acknowledge in time. The transport is closed regardless.
        """

        if self.state is State.CLOSED:
            return None

        if self.state is not State.READY:
            # No session was established; there is nobody to say goodbye to.
            self._abort()
            return None

        self.state = State.CLOSING
        grace = self.options.close_grace
        deadline = time.monotonic() + grace
        warning = None

        try:
            message = Message(self._next_id(), factory.close_session())
            self.framer.write(message.to_xml())
            reply = Reply.from_xml(self.framer.decode(grace))

            if reply.id != message.id:
                warning = CloseWarning(f"close-session reply has message-id {reply.id!r}, expected {message.id!r}")
            elif not reply.ok:
                warning = CloseWarning("close-session was not acknowledged with <ok/>")
            else:
                self._wait_closed(deadline)
        except (TransportError, SessionError, ParseError) as exc:
            warning = CloseWarning(f"peer did not acknowledge close-session: {exc}")
        finally:
            self._abort()

        if warning is None:
            self.reporter.info("NETCONF session closed")
        else:
            self.reporter.warn(f"Failed to close session gracefully: {warning}")

        return warning

    def _wait_closed(self, deadline: float) -> bool:
        """Drain the channel until the peer closes it or *deadline* passes."""

        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                logger.debug("peer left the channel open after close-session")
                return False
            try:
                chunk = self.transport.read(Framer.read_size, remaining)
            except TransportError:
                logger.debug("peer left the channel open after close-session")
                return False
            if not chunk:
                return True
