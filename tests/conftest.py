import re

import pytest

import nccheck
from nccheck.protocol.fields import DELIMITER
from nccheck.transport.base import Transport, TransportTimeout


SERVER_HELLO = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<hello xmlns="urn:ietf:params:xml:ns:netconf:base:1.0">'
    '<capabilities>'
    '<capability>urn:ietf:params:netconf:base:1.0</capability>'
    '<capability>urn:ietf:params:netconf:capability:startup:1.0</capability>'
    '</capabilities>'
    '<session-id>4</session-id>'
    '</hello>'
)

RUNNING_CONFIG = (
    '<config>'
    '<hostname>router1</hostname>'
    '<ntp><server>1.1.1.1</server></ntp>'
    '<line>no telnet</line>'
    '</config>'
)


def rpc_reply(message_id, body):
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rpc-reply xmlns="urn:ietf:params:xml:ns:netconf:base:1.0" message-id="%s">'
        '%s</rpc-reply>' % (message_id, body)
    )


class ScriptedTransport(Transport):
    """ An in-memory transport. Reads are served from *incoming*, one item
        per read: bytes are returned (split if larger than the read size),
        an exception instance is raised, and an empty queue raises a
        timeout. Every write is recorded, and handed to the *responder*,
        whose return value (a list of chunks) is queued for reading.
    """

    def __init__(self, responder=None, incoming=(), open_error=None, write_error=None):
        self.responder = responder
        self.incoming = list(incoming)
        self.open_error = open_error
        self.write_error = write_error
        self.written = list()
        self.opened = False
        self.closed = False

    @property
    def is_open(self):
        return self.opened and not self.closed

    def open(self):
        if self.open_error is not None:
            raise self.open_error
        self.opened = True

    def close(self):
        self.closed = True

    def write(self, data):
        if self.write_error is not None:
            raise self.write_error
        self.written.append(data)
        if self.responder is not None:
            self.incoming.extend(self.responder(data))

    def read(self, size, timeout=None):
        if not self.incoming:
            raise TransportTimeout('no scripted data')

        item = self.incoming.pop(0)
        if isinstance(item, Exception):
            raise item

        if len(item) > size:
            self.incoming.insert(0, item[size:])
            item = item[:size]

        return item

    def documents(self):
        """ Return every written document, decoded and unframed. """
        data = b''.join(self.written)
        return [part.decode() for part in data.split(DELIMITER) if part]


class FakeDevice:
    """ Answer hello, get-config, and close-session like a NETCONF server.
        Replies are split into *fragment* byte chunks when requested.
    """

    def __init__(self, config=RUNNING_CONFIG, fragment=None, hello=SERVER_HELLO,
                 acknowledge_close=True, id_offset=0, rpc_error=None):
        self.config = config
        self.fragment = fragment
        self.hello = hello
        self.acknowledge_close = acknowledge_close
        self.id_offset = id_offset
        self.rpc_error = rpc_error
        self.requests = list()

    def _chunks(self, document):
        data = document.encode() + DELIMITER
        size = self.fragment or len(data)
        return [data[i:i + size] for i in range(0, len(data), size)]

    def __call__(self, data):
        text = data.decode()

        if '<hello' in text:
            return self._chunks(self.hello)

        match = re.search(r'message-id="([^"]+)"', text)
        message_id = match.group(1)
        if self.id_offset:
            message_id = str(int(message_id) + self.id_offset)
        self.requests.append(message_id)

        if 'close-session' in text:
            if not self.acknowledge_close:
                return []
            return self._chunks(rpc_reply(message_id, '<ok/>')) + [b'']

        if self.rpc_error is not None:
            body = (
                '<rpc-error><error-type>application</error-type>'
                '<error-tag>access-denied</error-tag>'
                '<error-message>%s</error-message></rpc-error>' % (self.rpc_error)
            )
            return self._chunks(rpc_reply(message_id, body))

        return self._chunks(rpc_reply(message_id, '<data>%s</data>' % (self.config)))


class RecordingReporter(nccheck.report.Reporter):

    def __init__(self):
        self.lines = list()

    def info(self, text):
        self.lines.append(('info', text))

    def passed(self, text):
        self.lines.append(('pass', text))

    def failed(self, text):
        self.lines.append(('fail', text))

    def warn(self, text):
        self.lines.append(('warn', text))

    def of(self, kind):
        return [text for level, text in self.lines if level == kind]


@pytest.fixture
def device():
    return FakeDevice()


@pytest.fixture
def transport(device):
    return ScriptedTransport(device)


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def make_device():
    return FakeDevice


@pytest.fixture
def make_transport():
    return ScriptedTransport


@pytest.fixture
def fast_options():
    return nccheck.SessionOptions(reply_timeout=1.0, close_grace=0.5, max_buffer=1 << 16)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
