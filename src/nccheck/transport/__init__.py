"""Transport layer: bytes over SSH, framing, and the session built on them."""

from .base import (
    NetconfError,
    TransportError,
    TransportTimeout,
    TransportConnectionError,
    SessionError,
    FramingError,
    CloseWarning,
)

from .framing import Framer
from .session import Session, State
from .ssh import SSHTransport
