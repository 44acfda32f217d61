# -*- coding: utf-8 -*-
"""
    proxydial
    ~~~~~~~~~
    Proxy aware connection dialer for SSH and SFTP clients.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import socket
import logging

from typing import Tuple

logger = logging.getLogger(__name__)


def socket_pair() -> Tuple[socket.socket, socket.socket]:
    # On Unix: AF_UNIX.  On Windows: socketpair() defaults to AF_INET.
    if hasattr(socket, 'AF_UNIX'):
        return socket.socketpair(socket.AF_UNIX, socket.SOCK_STREAM)
    return socket.socketpair()  # pragma: no cover


class DuplexPipe:
    """In-process duplex byte stream with two ends.

    Bytes written into ``client`` are read from ``server`` and vice versa.
    Since both ends are real sockets, the server end can be handed to a
    child process as its stdin/stdout while the client end is used like
    any other network connection.
    """

    def __init__(self) -> None:
        self.client, self.server = socket_pair()

    def close_server(self) -> None:
        """Closing server end signals end-of-stream to the client end."""
        self.server.close()

    def close(self) -> None:
        self.server.close()
        self.client.close()

    def __repr__(self) -> str:
        return '<DuplexPipe client=%d server=%d>' % (
            self.client.fileno(), self.server.fileno(),
        )
