""" Implementation of the top-level :func:`run` method. This is intended to
    be the principal entry point for anyone checking a device: one call
    connects, retrieves the running configuration, evaluates it, and
    closes the session.
"""

import logging

from . import compliance
from .config import ConnectionParameters, SessionOptions
from .report import Reporter
from .transport.base import SessionError
from .transport.session import Session
from .transport.ssh import SSHTransport


logger = logging.getLogger(__name__)


def run(parameters=None, options=None, reporter=None, transport=None):
    """ Check the device described by *parameters* and return a
        :class:`nccheck.compliance.ComplianceResult`.

        Progress is rendered through *reporter*; *transport* may be
        supplied to bypass the default :class:`SSHTransport`, which is
        useful for tests and for devices reached some other way.

        Any fatal error (:class:`TransportConnectionError`,
        :class:`SessionError`, :class:`FramingError`) propagates to the
        caller, and no result is returned. A failure to close the session
        gracefully is only reported; the result already computed is
        returned regardless.
    """

    if parameters is None:
        parameters = ConnectionParameters()

    if options is None:
        options = SessionOptions()

    if reporter is None:
        reporter = Reporter()

    if transport is None:
        transport = SSHTransport(parameters)

    reporter.info('Connecting to NETCONF router at ' + parameters.address)

    with Session(transport, options, reporter) as session:
        session.handshake()
        logger.debug('session %s established with %r', session.session_id, transport)

        reporter.info('Retrieving running configuration...')
        reply = session.get_config()

        if reply.errors:
            raise SessionError('get-config failed: ' + '; '.join(reply.errors))

        reporter.info('Configuration retrieved successfully')
        reporter.info('Validating compliance rules...')
        result = compliance.evaluate(reply.text)

    return result


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
