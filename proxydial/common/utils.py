# -*- coding: utf-8 -*-
"""
    proxydial
    ~~~~~~~~~
    Proxy aware connection dialer for SSH and SFTP clients.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       utils
"""
import socket
import logging
import ipaddress

from typing import Optional, Dict, Any, List, Union

from .types import HostPort
from .constants import COLON, CRLF, HTTP_1_1, PERCENT, WHITESPACE, DEFAULT_TIMEOUT
from ..exception import ProxyConfigError

logger = logging.getLogger(__name__)


def text_(s: Any, encoding: str = 'utf-8', errors: str = 'strict') -> Any:
    """Utility to ensure text-like usability.

    If s is of type bytes or int, return s.decode(encoding, errors),
    otherwise return s as it is."""
    if isinstance(s, int):
        return str(s)
    if isinstance(s, bytes):
        return s.decode(encoding, errors)
    return s


def bytes_(s: Any, encoding: str = 'utf-8', errors: str = 'strict') -> Any:
    """Utility to ensure binary-like usability.

    If s is type str or int, return s.encode(encoding, errors),
    otherwise return s as it is."""
    if isinstance(s, int):
        s = str(s)
    if isinstance(s, str):
        return s.encode(encoding, errors)
    return s


def build_http_request(
    method: bytes, url: bytes,
    protocol_version: bytes = HTTP_1_1,
    headers: Optional[Dict[bytes, bytes]] = None,
    body: Optional[bytes] = None,
) -> bytes:
    """Build and returns a HTTP request packet."""
    if headers is None:
        headers = {}
    return build_http_pkt(
        [method, url, protocol_version], headers, body,
    )


def build_http_header(k: bytes, v: bytes) -> bytes:
    """Build and return a HTTP header line for use in raw packet."""
    return k + COLON + WHITESPACE + v


def build_http_pkt(
    line: List[bytes],
    headers: Optional[Dict[bytes, bytes]] = None,
    body: Optional[bytes] = None,
) -> bytes:
    """Build and returns a HTTP request or response packet."""
    pkt = WHITESPACE.join(line) + CRLF
    if headers is not None:
        for k in headers:
            pkt += build_http_header(k, headers[k]) + CRLF
    pkt += CRLF
    if body:
        pkt += body
    return pkt


def split_host_port(address: str) -> HostPort:
    """Splits ``host:port`` or ``[ipv6]:port`` into a (host, port) tuple.

    Raises :exc:`ProxyConfigError` for addresses without a valid port."""
    address = text_(address)
    if address.startswith('['):
        end = address.find(']')
        if end < 0:
            raise ProxyConfigError('Missing ] in address %r' % address)
        host, rest = address[1:end], address[end + 1:]
        if not rest.startswith(':'):
            raise ProxyConfigError('Missing port in address %r' % address)
        port = rest[1:]
    else:
        host, sep, port = address.rpartition(':')
        if not sep:
            raise ProxyConfigError('Missing port in address %r' % address)
        if ':' in host:
            raise ProxyConfigError('Too many colons in address %r' % address)
    return host, parse_port(port, address)


def parse_port(port: Union[str, int], address: Optional[str] = None) -> int:
    try:
        value = int(port)
    except (TypeError, ValueError):
        value = -1
    if not 0 <= value <= 65535:
        raise ProxyConfigError(
            'Invalid port %r in address %r' % (port, address)
            if address is not None else 'Invalid port %r' % port,
        )
    return value


def join_host_port(host: str, port: Union[str, int]) -> str:
    """Inverse of :func:`split_host_port`, IPv6 hosts are bracketed."""
    if ':' in host:
        return '[%s]:%s' % (host, port)
    return '%s:%s' % (host, port)


def expand_proxy_command(
        command: str,
        host: str,
        port: Union[str, int],
        user: Optional[str] = None,
) -> str:
    """Expands ``%h``, ``%p``, ``%r`` and ``%%`` tokens of a ProxyCommand.

    Unknown tokens are kept as they are."""
    tokens = {'h': host, 'p': text_(port), 'r': user or '', PERCENT: PERCENT}
    out, i = [], 0
    while i < len(command):
        ch = command[i]
        if ch == PERCENT and i + 1 < len(command) and command[i + 1] in tokens:
            out.append(tokens[command[i + 1]])
            i += 2
            continue
        out.append(ch)
        i += 1
    return ''.join(out)


def new_socket_connection(
        addr: HostPort,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
) -> socket.socket:
    conn = None
    try:
        ip = ipaddress.ip_address(addr[0])
        if ip.version == 4:
            conn = socket.socket(
                socket.AF_INET, socket.SOCK_STREAM, 0,
            )
            conn.settimeout(timeout)
            conn.connect(addr)
        else:
            conn = socket.socket(
                socket.AF_INET6, socket.SOCK_STREAM, 0,
            )
            conn.settimeout(timeout)
            conn.connect((addr[0], addr[1], 0, 0))
    except ValueError:
        pass    # does not appear to be an IPv4 or IPv6 address
    except OSError:
        if conn is not None:
            conn.close()
        raise

    if conn is not None:
        return conn

    # try to establish dual stack IPv4/IPv6 connection.
    return socket.create_connection(addr, timeout=timeout)
