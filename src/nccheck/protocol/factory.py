"""Convenience constructors for protocol operations."""

from __future__ import annotations

import xml.etree.ElementTree as ElementTree
from typing import Iterable, Optional

from .fields import BASE_CAPABILITY, CANDIDATE, CLOSE_SESSION, GET_CONFIG, RUNNING, STARTUP
from .message import Hello, qualified


DATASTORES = (RUNNING, CANDIDATE, STARTUP)


def hello(capabilities: Optional[Iterable[str]] = None) -> Hello:
    """Create the local capability announcement; base:1.0 is always included."""
    declared = set(capabilities or ())
    declared.add(BASE_CAPABILITY)
    return Hello(frozenset(declared))


def get_config(source: str = RUNNING) -> ElementTree.Element:
    if source not in DATASTORES:
        raise ValueError(f"unknown datastore: {source!r}")

    operation = ElementTree.Element(qualified(GET_CONFIG))
    container = ElementTree.SubElement(operation, qualified("source"))
    ElementTree.SubElement(container, qualified(source))
    return operation


def close_session() -> ElementTree.Element:
    return ElementTree.Element(qualified(CLOSE_SESSION))
