""" A class representation of the NETCONF documents exchanged by a session:
    the capability announcement (:class:`Hello`), the outgoing request
    (:class:`Message`), and the incoming response (:class:`Reply`).
"""

from __future__ import annotations

import xml.etree.ElementTree as ElementTree
from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple, Union

from .fields import (
    BASE_CAPABILITY, CAPABILITIES, CAPABILITY, DATA, HELLO, MESSAGE_ID,
    NAMESPACE, OK, RPC, RPC_ERROR, RPC_REPLY, SESSION_ID,
)


ElementTree.register_namespace('', NAMESPACE)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

Operation = Union[str, ElementTree.Element]


class ParseError(ValueError):
    """ A received document is not well-formed XML, or is not the kind of
        document the caller expected.
    """


def qualified(tag):
    """ Return the *tag* qualified with the NETCONF base namespace.
    """

    return '{%s}%s' % (NAMESPACE, tag)


def local_name(tag):
    """ Strip any ``{namespace}`` prefix from an element *tag*. Devices are
        not consistent about namespacing their replies, so all matching is
        done on local names.
    """

    if tag[:1] == '{':
        return tag.split('}', 1)[1]
    return tag


def _children(element, name):
    return [child for child in element if local_name(child.tag) == name]


def _parse(text):
    try:
        return ElementTree.fromstring(text)
    except ElementTree.ParseError as exc:
        raise ParseError('malformed XML document: ' + str(exc)) from exc


def _serialize(element):
    return XML_DECLARATION + ElementTree.tostring(element, encoding='unicode')


@dataclass(frozen=True)
class Hello:
    """ A capability announcement. Every peer sends exactly one, first, and
        the server's also carries the identifier of the new session.
    """

    capabilities: FrozenSet[str] = frozenset((BASE_CAPABILITY,))
    session_id: Optional[str] = None

    def to_xml(self) -> str:
        root = ElementTree.Element(qualified(HELLO))
        container = ElementTree.SubElement(root, qualified(CAPABILITIES))

        for capability in sorted(self.capabilities):
            element = ElementTree.SubElement(container, qualified(CAPABILITY))
            element.text = capability

        if self.session_id is not None:
            element = ElementTree.SubElement(root, qualified(SESSION_ID))
            element.text = str(self.session_id)

        return _serialize(root)

    @classmethod
    def from_xml(cls, text: str) -> 'Hello':
        root = _parse(text)

        if local_name(root.tag) != HELLO:
            raise ParseError('expected <hello>, received <%s>' % (local_name(root.tag)))

        capabilities = set()
        for container in _children(root, CAPABILITIES):
            for element in _children(container, CAPABILITY):
                if element.text and element.text.strip():
                    capabilities.add(element.text.strip())

        if not capabilities:
            raise ParseError('<hello> declares no capabilities')

        session_id = None
        for element in _children(root, SESSION_ID):
            session_id = (element.text or '').strip() or None

        return cls(frozenset(capabilities), session_id)


# end of class Hello



@dataclass(frozen=True)
class Message:
    """ An outgoing ``<rpc>`` request. The *id* is allocated by the owning
        session; the *operation* is either an element, or a string of XML
        for the single operation wrapped by the ``<rpc>``. The framing
        terminator is not part of the document; it is appended by
        :class:`nccheck.transport.framing.Framer` on the way out.
    """

    id: str
    operation: Operation

    def to_xml(self) -> str:
        root = ElementTree.Element(qualified(RPC), {MESSAGE_ID: self.id})

        operation = self.operation
        if isinstance(operation, str):
            operation = _parse(operation)

        root.append(operation)
        return _serialize(root)


# end of class Message



@dataclass(frozen=True)
class Reply:
    """ An incoming ``<rpc-reply>``. The *text* is the complete document as
        received, with the framing terminator already stripped; *data* is
        the serialized content of the ``<data>`` element, if any.

        :ivar errors: the text of each ``<error-message>`` (or the error
            tag, when no message is present) of every ``<rpc-error>``.
        :ivar ok: True if the reply consisted of a bare ``<ok/>``.
    """

    id: Optional[str]
    text: str
    data: Optional[str] = None
    errors: Tuple[str, ...] = field(default_factory=tuple)
    ok: bool = False

    @classmethod
    def from_xml(cls, text: str) -> 'Reply':
        root = _parse(text)

        if local_name(root.tag) != RPC_REPLY:
            raise ParseError('expected <rpc-reply>, received <%s>' % (local_name(root.tag)))

        data = None
        for element in _children(root, DATA):
            inner = [ElementTree.tostring(child, encoding='unicode') for child in element]
            data = (element.text or '') + ''.join(inner)

        errors = list()
        for element in _children(root, RPC_ERROR):
            description = None
            for child in element:
                name = local_name(child.tag)
                if name == 'error-message' and child.text:
                    description = child.text.strip()
                    break
                if name == 'error-tag' and child.text and description is None:
                    description = child.text.strip()
            errors.append(description or 'unspecified rpc-error')

        ok = bool(_children(root, OK))

        return cls(root.get(MESSAGE_ID), text, data, tuple(errors), ok)


# end of class Reply


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
