""" Python implementation of a NETCONF compliance checker. This includes the
    session machinery, which speaks NETCONF over SSH to a single device, and
    the compliance rules applied to the running configuration it retrieves.
"""

# Submodules used by multiple other components.

from . import config
from . import protocol
from . import report

# Core components.

from . import compliance
from . import transport

# Primary public-facing interfaces.

from . import begin
run = begin.run

from .compliance import ComplianceResult, Outcome, Rule, evaluate
from .config import ConnectionParameters, SessionOptions
from .transport import (
    NetconfError,
    TransportConnectionError,
    SessionError,
    FramingError,
    CloseWarning,
    Session,
)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
