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
import base64
import socket
import logging

from typing import Dict, Optional

from .url import Url
from .parser import HttpParser
from ..core.dialer import Dialer
from ..exception import (
    HttpConnectRejected, ProxyConfigError, ProxyConnectionFailed, ProxyProtocolError,
)
from ..common.utils import bytes_, text_, build_http_request, split_host_port
from ..common.constants import (
    CRLF, COLON, HTTP_OK, HTTP_CONNECT, DEFAULT_NETWORK, DEFAULT_TIMEOUT,
    DEFAULT_BUFFER_SIZE, USER_AGENT_HEADER_KEY, USER_AGENT_HEADER_VALUE,
    DEFAULT_MAX_RESPONSE_HEAD_SIZE,
)

logger = logging.getLogger(__name__)

END_OF_HEAD = CRLF + CRLF


class HttpConnectDialer(Dialer):
    """Tunnels connections through an HTTP proxy using the CONNECT method.

    Proxy is reached using ``forward`` dialer.  Basic authentication is
    sent only when both ``username`` and ``password`` are non-empty.
    """

    def __init__(
            self,
            proxy_address: str,
            forward: Dialer,
            username: Optional[str] = None,
            password: Optional[str] = None,
            timeout: Optional[float] = DEFAULT_TIMEOUT,
    ) -> None:
        self.host, self.port = split_host_port(proxy_address)
        if not self.host:
            raise ProxyConfigError('Missing proxy host in %r' % proxy_address)
        self.proxy_address = proxy_address
        self.forward = forward
        self.timeout = timeout
        self.have_auth = bool(username) and bool(password)
        self.username = username if self.have_auth else None
        self.password = password if self.have_auth else None

    @classmethod
    def from_url(cls, url: Url, forward: Dialer) -> 'HttpConnectDialer':
        username = password = None
        if url.has_credentials:
            username, password = text_(url.username), text_(url.password)
        return cls(url.host_port, forward, username, password)

    def dial(self, network: str, address: str) -> socket.socket:
        target = self.connect_target(address)
        conn = self.forward.dial(DEFAULT_NETWORK, self.proxy_address)
        logger.debug('Requesting CONNECT %s via %s', target, self.proxy_address)
        previous_timeout = conn.gettimeout()
        try:
            conn.settimeout(self.timeout)
            conn.sendall(self.build_request(target))
            response = read_response_head(conn)
            # Only look at the status once the head parsed fine
            status_code = response.status_code
        except ProxyProtocolError:
            conn.close()
            raise
        except OSError as e:
            conn.close()
            raise ProxyConnectionFailed(self.host, self.port, str(e)) from e
        if status_code != HTTP_OK:
            conn.close()
            logger.warning(
                'Proxy %s refused CONNECT %s with %d',
                self.proxy_address, target, status_code,
            )
            raise HttpConnectRejected(
                status_code, reason=response.reason, target=target,
            )
        # A successful CONNECT response has no body, whatever
        # follows the head belongs to the tunnel.
        conn.settimeout(previous_timeout)
        logger.debug('Tunnel to %s established via %s', target, self.proxy_address)
        return conn

    @staticmethod
    def connect_target(address: str) -> str:
        """Returns ``host:port`` out of address, dropping any scheme or path."""
        url = Url.from_bytes(bytes_(address))
        if not url.hostname or url.port is None:
            raise ProxyConfigError('Invalid CONNECT target %r' % address)
        return url.host_port

    def build_request(self, target: str) -> bytes:
        headers: Dict[bytes, bytes] = {
            b'Host': bytes_(target),
            USER_AGENT_HEADER_KEY: USER_AGENT_HEADER_VALUE,
        }
        if self.have_auth:
            credentials = b'Basic ' + base64.b64encode(
                bytes_(self.username) + COLON + bytes_(self.password),
            )
            headers[b'Proxy-Authorization'] = credentials
            headers[b'Authorization'] = credentials
        return build_http_request(HTTP_CONNECT, bytes_(target), headers=headers)


def read_response_head(
        conn: socket.socket,
        max_size: int = DEFAULT_MAX_RESPONSE_HEAD_SIZE,
) -> HttpParser:
    """Reads and parses the response head, consuming nothing beyond it.

    Bytes are peeked first so that data sent by the destination
    right after the head stays unread in ``conn``."""
    head = b''
    while True:
        peeked = conn.recv(DEFAULT_BUFFER_SIZE, socket.MSG_PEEK)
        if not peeked:
            raise ProxyProtocolError(
                'Proxy closed connection before completing response head',
            )
        end = (head[-3:] + peeked).find(END_OF_HEAD)
        wanted = len(peeked) if end < 0 else end + len(END_OF_HEAD) - len(head[-3:])
        head += _recv_exactly(conn, wanted)
        if end >= 0:
            break
        if len(head) > max_size:
            raise ProxyProtocolError(
                'Response head larger than %d bytes' % max_size,
            )
    response = HttpParser.response(head)
    assert response.is_complete
    return response


def _recv_exactly(conn: socket.socket, size: int) -> bytes:
    data = b''
    while len(data) < size:
        chunk = conn.recv(size - len(data))
        if not chunk:
            raise ProxyProtocolError('Proxy closed connection mid response')
        data += chunk
    return data
