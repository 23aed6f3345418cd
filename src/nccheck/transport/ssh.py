"""SSH transport bound to the NETCONF subsystem.

The connection is made with :mod:`paramiko`. Host key verification is
deliberately not performed: unknown host keys are accepted, and a warning
is logged for every connection so the omission is visible.
"""

from __future__ import annotations

import logging
import socket
import threading
from typing import Optional

import paramiko

from ..config import ConnectionParameters
from ..protocol.fields import SUBSYSTEM
from .base import Transport, TransportConnectionError, TransportError, TransportTimeout


logger = logging.getLogger(__name__)


class SSHTransport(Transport):
    """Issue bytes to, and receive bytes from, a NETCONF subsystem channel."""

    subsystem = SUBSYSTEM

    def __init__(self, parameters: ConnectionParameters):
        self.parameters = parameters
        self.client: Optional[paramiko.SSHClient] = None
        self.channel: Optional[paramiko.Channel] = None

    def __repr__(self):
        return f"SSHTransport({self.parameters.host}:{self.parameters.port})"

    @property
    def is_open(self) -> bool:
        channel = self.channel
        return channel is not None and not channel.closed

    def open(self) -> None:
        params = self.parameters
        host = params.host
        port = params.port
        timeout = params.timeout

        client = paramiko.SSHClient()
        client.set_missing_host_key_policy(paramiko.AutoAddPolicy())
        logger.warning("host key verification disabled for %s:%d", host, port)

        try:
            client.connect(
                host,
                port=port,
                username=params.username,
                password=params.password,
                timeout=timeout,
                banner_timeout=timeout,
                auth_timeout=timeout,
                look_for_keys=False,
                allow_agent=False,
            )
        except paramiko.AuthenticationException as exc:
            client.close()
            raise TransportConnectionError(
                f"authentication failed for {params.username}@{host}:{port}"
            ) from exc
        except socket.timeout as exc:
            client.close()
            raise TransportConnectionError(
                f"SSH dial to {host}:{port} timed out after {timeout:.1f} sec"
            ) from exc
        except (paramiko.SSHException, OSError) as exc:
            client.close()
            raise TransportConnectionError(f"SSH dial to {host}:{port} failed: {exc}") from exc

        logger.debug("SSH connection established to %s:%d", host, port)
        self.client = client

        # paramiko waits on the subsystem request without any timeout. If the
        # deadline passes first the watchdog closes the connection, which
        # wakes the waiting request with an SSHException.

        expired = threading.Event()

        def expire():
            expired.set()
            client.close()

        watchdog = threading.Timer(timeout, expire)
        watchdog.daemon = True
        watchdog.start()

        try:
            self.channel = client.get_transport().open_session(timeout=timeout)
            self.channel.settimeout(timeout)
            self.channel.invoke_subsystem(self.subsystem)
        except (paramiko.SSHException, OSError, EOFError) as exc:
            self.close()
            if expired.is_set():
                raise TransportConnectionError(
                    f"{self.subsystem!r} subsystem request on {host}:{port} timed out after {timeout:.1f} sec"
                ) from exc
            raise TransportConnectionError(
                f"failed to request {self.subsystem!r} subsystem on {host}:{port}: {exc}"
            ) from exc
        finally:
            watchdog.cancel()

        if expired.is_set():
            self.close()
            raise TransportConnectionError(
                f"{self.subsystem!r} subsystem request on {host}:{port} timed out after {timeout:.1f} sec"
            )

    def close(self) -> None:
        channel = self.channel
        client = self.client
        self.channel = None
        self.client = None

        if channel is not None:
            channel.close()
        if client is not None:
            client.close()

    def _require_channel(self) -> paramiko.Channel:
        channel = self.channel
        if channel is None:
            raise TransportError("transport is not open")
        return channel

    def write(self, data: bytes) -> None:
        channel = self._require_channel()
        try:
            channel.sendall(data)
        except socket.timeout as exc:
            raise TransportTimeout(f"write of {len(data)} bytes timed out") from exc
        except (paramiko.SSHException, OSError) as exc:
            raise TransportError(f"write failed: {exc}") from exc

    def read(self, size: int, timeout: Optional[float] = None) -> bytes:
        channel = self._require_channel()
        channel.settimeout(timeout)
        try:
            return channel.recv(size)
        except socket.timeout as exc:
            raise TransportTimeout(f"no data in {timeout} sec") from exc
        except (paramiko.SSHException, OSError) as exc:
            raise TransportError(f"read failed: {exc}") from exc
