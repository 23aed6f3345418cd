""" Command line entry point: parse flags, run one compliance check, render
    the outcome as log lines, and map it to an exit status. Zero means every
    rule passed; one means a rule failed or the check could not complete.
"""

import argparse
import logging
import sys

from . import begin
from . import compliance
from . import config
from .report import LoggingReporter
from .transport.base import NetconfError


version = '1.0.0'

logger = logging.getLogger('nccheck')


def parse_arguments(argv=None):

    parser = argparse.ArgumentParser(
        prog='nccheck',
        description='Retrieve the running configuration of a NETCONF device and check it for compliance.'
    )

    try:
        defaults = config.ConnectionParameters.from_environment()
        session_defaults = config.SessionOptions.from_environment()
    except ValueError as exc:
        parser.error('environment: ' + str(exc))

    parser.add_argument(
        '--router-address', default=defaults.address,
        help='NETCONF router address, host:port (default: %(default)s)'
    )
    parser.add_argument(
        '--username', default=defaults.username,
        help='NETCONF username (default: %(default)s)'
    )
    parser.add_argument(
        '--password', default=defaults.password,
        help='NETCONF password'
    )
    parser.add_argument(
        '--timeout', type=float, default=defaults.timeout,
        help='seconds allowed to connect and open the subsystem (default: %(default)s)'
    )
    parser.add_argument(
        '--reply-timeout', type=float, default=session_defaults.reply_timeout,
        help='seconds allowed for each reply from the device (default: %(default)s)'
    )
    parser.add_argument(
        '--close-grace', type=float, default=session_defaults.close_grace,
        help='seconds to wait for the device to acknowledge close-session (default: %(default)s)'
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='log protocol detail, including SSH library messages'
    )
    parser.add_argument(
        '--version', action='version', version='%(prog)s ' + version
    )

    arguments = parser.parse_args(argv)

    try:
        arguments.parameters = config.ConnectionParameters(
            arguments.router_address, arguments.username,
            arguments.password, arguments.timeout)
        arguments.options = config.SessionOptions(
            arguments.reply_timeout, arguments.close_grace,
            session_defaults.max_buffer)
    except ValueError as exc:
        parser.error(str(exc))

    return arguments


def setup_logging(verbose=False):

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format='%(asctime)s %(message)s')

    # paramiko is chatty at INFO; only show it when asked.

    if not verbose:
        logging.getLogger('paramiko').setLevel(logging.WARNING)


def main(argv=None):

    arguments = parse_arguments(argv)
    setup_logging(arguments.verbose)

    reporter = LoggingReporter(logger)
    reporter.info('Starting NETCONF Compliance Checker v' + version)

    try:
        result = begin.run(arguments.parameters, arguments.options, reporter)
    except NetconfError as exc:
        logger.error('[ERROR] Compliance check failed: %s', exc)
        return 1

    compliance.report(result, reporter)

    if result.success:
        reporter.info('Exiting with code 0')
        return 0

    reporter.info('Exiting with code 1')
    return 1


if __name__ == '__main__':
    sys.exit(main())


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
