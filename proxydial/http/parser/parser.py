# -*- coding: utf-8 -*-
"""
    proxydial
    ~~~~~~~~~
    Proxy aware connection dialer for SSH and SFTP clients.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       http
"""
from typing import Dict, Type, Tuple, TypeVar, Optional

from .types import httpParserStates
from ...exception import ProxyProtocolError
from ...common.constants import CRLF, COLON, WHITESPACE


T = TypeVar('T', bound='HttpParser')


class HttpParser:
    """HTTP response head parser.

    Only the status line and the headers are parsed.  Bytes
    following the blank line which terminates the head are
    left untouched in ``buffer``, for a CONNECT tunnel they
    already belong to the tunneled stream.
    """

    def __init__(self) -> None:
        self.state: int = httpParserStates.INITIALIZED
        self.code: Optional[bytes] = None
        self.reason: Optional[bytes] = None
        self.version: Optional[bytes] = None
        # Buffer to hold unprocessed bytes
        self.buffer: Optional[memoryview] = None
        # Internal headers data structure:
        # - Keys are lower case header names.
        # - Values are 2-tuple containing original
        #   header and it's value as received.
        self.headers: Optional[Dict[bytes, Tuple[bytes, bytes]]] = None

    @classmethod
    def response(cls: Type[T], raw: bytes) -> T:
        parser = cls()
        parser.parse(memoryview(raw))
        return parser

    def add_header(self, key: bytes, value: bytes) -> bytes:
        """Add/Update a header to internal data structure.

        Returns key with which passed (key, value) tuple is available."""
        if self.headers is None:
            self.headers = {}
        k = key.lower()
        self.headers[k] = (key, value)
        return k

    @property
    def is_complete(self) -> bool:
        return self.state == httpParserStates.COMPLETE

    @property
    def status_code(self) -> int:
        """Numeric response status code.

        Raises :exc:`ProxyProtocolError` unless a valid status line was parsed."""
        if self.code is None or \
                len(self.code) != 3 or \
                not self.code.isdigit():
            raise ProxyProtocolError(
                'Invalid status code %r' % self.code,
            )
        return int(self.code)

    def parse(self, raw: memoryview) -> None:
        """Parses HTTP head out of raw bytes.

        Check for `HttpParser.state` after `parse` has successfully returned."""
        if self.buffer:
            raw = memoryview(self.buffer.tobytes() + raw.tobytes())
        self.buffer, more = None, len(raw) > 0
        while more and self.state != httpParserStates.COMPLETE:
            if self.state == httpParserStates.INITIALIZED:
                more, raw = self._process_line(raw)
            else:
                more, raw = self._process_headers(raw)
        self.buffer = None if raw == b'' else raw

    def _process_headers(self, raw: memoryview) -> Tuple[bool, memoryview]:
        """Returns False when no CRLF could be found in received bytes."""
        while True:
            parts = raw.tobytes().split(CRLF, 1)
            if len(parts) == 1:
                return False, raw
            line, raw = parts[0], memoryview(parts[1])
            if line.strip() == b'':  # Blank line received.
                self.state = httpParserStates.COMPLETE
                break
            self.state = httpParserStates.RCVING_HEADERS
            self._process_header(line)
            if raw == b'':
                break
        return len(raw) > 0, raw

    def _process_line(self, raw: memoryview) -> Tuple[bool, memoryview]:
        parts = raw.tobytes().split(CRLF, 1)
        if len(parts) == 1:
            return False, raw
        line, raw = parts[0], memoryview(parts[1])
        parts = line.split(WHITESPACE, 2)
        if len(parts) < 2 or not parts[0].startswith(b'HTTP/'):
            raise ProxyProtocolError('Invalid status line %r' % line)
        self.version = parts[0]
        self.code = parts[1]
        # Some proxies don't send any reason
        if len(parts) == 3:
            self.reason = parts[2]
        self.state = httpParserStates.LINE_RCVD
        return len(raw) > 0, raw

    def _process_header(self, raw: bytes) -> None:
        parts = raw.split(COLON, 1)
        key, value = (
            parts[0].strip(),
            b'' if len(parts) == 1 else parts[1].strip(),
        )
        self.add_header(key, value)
