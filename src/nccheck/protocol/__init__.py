from . import fields
from . import message
from . import factory

from .message import Hello, Message, Reply, ParseError


"""
nccheck Protocol Layer
======================

This package defines the NETCONF documents exchanged by a session: how
they are built, and how received documents are interpreted.

The protocol layer MUST NOT depend on any transport implementation
(e.g. SSH); it deals in XML text, never in bytes or channels.

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

Run orchestration (begin.py)
    connect -> handshake -> get-config -> evaluate -> close

    │
    ▼
Session Layer (transport/session.py)
    Lifecycle and correlation
    - handshake()
    - request()
    - close()
    Allocates message identifiers, checks replies echo them

    │
    ▼
Message Model (protocol/message.py, protocol/factory.py)
    - Hello
    - Message (<rpc>)
    - Reply (<rpc-reply>)
    Defines semantic meaning only

    │
    ▼
Framing Layer (transport/framing.py)
    Maps documents <-> delimiter-terminated byte stream

    │
    ▼
Transport Layer (transport/ssh.py)
    Moves bytes over the SSH 'netconf' subsystem channel

---------------------------------------------------------------------

Design Principles
-----------------

1. Transport Agnostic
   Documents are built and parsed identically regardless of how the
   bytes arrive.

2. Layer Isolation
   Dependencies only flow downward:
       Session -> Protocol, Session -> Framing -> Transport
   Never upward.

3. Read Only
   Only retrieval and session control operations are defined here;
   nothing in this package can modify a device configuration.

---------------------------------------------------------------------
"""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
