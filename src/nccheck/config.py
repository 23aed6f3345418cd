""" Connection parameters and session options for a single compliance run.
    Values are supplied once per run, either explicitly, from command line
    flags, or from ``NCCHECK_*`` environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple


default_port = 830
default_address = 'localhost:%d' % (default_port)
default_username = 'netconf'
default_password = 'netconf'
default_timeout = 10.0
default_reply_timeout = 30.0
default_close_grace = 5.0
default_max_buffer = 16 * 1024 * 1024


def split_address(address: str) -> Tuple[str, int]:
    """ Split a ``host:port`` string into its components. The port is
        optional and defaults to 830; IPv6 literals must be bracketed
        when a port is included, as in ``[::1]:830``.
    """

    address = address.strip()
    if address == '':
        raise ValueError('empty router address')

    if address.startswith('['):
        host, _, rest = address[1:].partition(']')
        if rest == '':
            return host, default_port
        if not rest.startswith(':'):
            raise ValueError('invalid router address: ' + repr(address))
        port = rest[1:]
    elif address.count(':') == 1:
        host, port = address.split(':')
    else:
        # Either a bare hostname or an unbracketed IPv6 literal.
        return address, default_port

    try:
        port = int(port)
    except ValueError:
        raise ValueError('invalid port in router address: ' + repr(address))

    if port < 1 or port > 65535:
        raise ValueError('port out of range: ' + str(port))

    return host, port


@dataclass(frozen=True)
class ConnectionParameters:
    """ Where to connect and how to authenticate. The *timeout* bounds
        the dial, the authentication, and the subsystem request.
    """

    address: str = default_address
    username: str = default_username
    password: str = default_password
    timeout: float = default_timeout

    def __post_init__(self):
        # Validate early; a malformed address is a caller error, not a
        # connection failure.
        split_address(self.address)
        if self.timeout <= 0:
            raise ValueError('connect timeout must be positive')

    @property
    def host(self) -> str:
        return split_address(self.address)[0]

    @property
    def port(self) -> int:
        return split_address(self.address)[1]

    def __repr__(self):
        return '%s(address=%r, username=%r, timeout=%r)' % (
            type(self).__name__, self.address, self.username, self.timeout)

    @classmethod
    def from_environment(cls, environ: Optional[Mapping[str, str]] = None) -> 'ConnectionParameters':
        environ = os.environ if environ is None else environ
        return cls(
            address=environ.get('NCCHECK_ROUTER_ADDRESS', default_address),
            username=environ.get('NCCHECK_USERNAME', default_username),
            password=environ.get('NCCHECK_PASSWORD', default_password),
            timeout=float(environ.get('NCCHECK_TIMEOUT', default_timeout)),
        )


@dataclass(frozen=True)
class SessionOptions:
    """ Deadlines and limits applied after the connection is established.

        :ivar reply_timeout: seconds to wait for the peer hello, and for
            the reply to each request.
        :ivar close_grace: seconds to wait for the peer to acknowledge a
            close-session request before the channel is forced shut.
        :ivar max_buffer: largest number of bytes the framer will hold
            while looking for a message terminator.
    """

    reply_timeout: float = default_reply_timeout
    close_grace: float = default_close_grace
    max_buffer: int = default_max_buffer

    def __post_init__(self):
        if self.reply_timeout <= 0:
            raise ValueError('reply timeout must be positive')
        if self.close_grace < 0:
            raise ValueError('close grace period cannot be negative')
        if self.max_buffer <= 0:
            raise ValueError('buffer ceiling must be positive')

    @classmethod
    def from_environment(cls, environ: Optional[Mapping[str, str]] = None) -> 'SessionOptions':
        environ = os.environ if environ is None else environ
        return cls(
            reply_timeout=float(environ.get('NCCHECK_REPLY_TIMEOUT', default_reply_timeout)),
            close_grace=float(environ.get('NCCHECK_CLOSE_GRACE', default_close_grace)),
            max_buffer=int(environ.get('NCCHECK_MAX_BUFFER', default_max_buffer)),
        )


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
