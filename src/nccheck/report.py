""" Presentation of progress and outcomes. The core never logs pass/fail
    outcomes on its own; it is handed a :class:`Reporter` and calls its
    methods, so that the core can be exercised without capturing output.
"""

import logging


logger = logging.getLogger(__name__)


class Reporter:
    """ The base :class:`Reporter` discards everything. Subclasses override
        whichever of :func:`info`, :func:`passed`, :func:`failed`, and
        :func:`warn` they care about.
    """

    def info(self, text):
        pass

    def passed(self, text):
        pass

    def failed(self, text):
        pass

    def warn(self, text):
        pass


# end of class Reporter



class LoggingReporter(Reporter):
    """ Render each event as a tagged log line, for example::

            [PASS] ✓ NTP is enabled
            [FAIL] ✗ Telnet is enabled - SECURITY VIOLATION

        Passing and informational lines are logged at INFO, failures at
        ERROR, and warnings at WARNING, all through the *log* provided
        (by default, the logger for this module).
    """

    def __init__(self, log=None):
        self.log = logger if log is None else log

    def info(self, text):
        self.log.info('[INFO] %s', text)

    def passed(self, text):
        self.log.info('[PASS] ✓ %s', text)

    def failed(self, text):
        self.log.error('[FAIL] ✗ %s', text)

    def warn(self, text):
        self.log.warning('[WARN] %s', text)


# end of class LoggingReporter


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
