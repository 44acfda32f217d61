# -*- coding: utf-8 -*-
"""
    proxydial
    ~~~~~~~~~
    Proxy aware connection dialer for SSH and SFTP clients.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import os
import socket
import logging
import selectors

from ..common.constants import DEFAULT_BUFFER_SIZE

logger = logging.getLogger(__name__)


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def pump(
        conn: socket.socket,
        reader: int,
        writer: int,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> None:
    """Relays bytes between ``conn`` and a pair of file descriptors.

    Data read from ``reader`` is sent over ``conn``, data received
    from ``conn`` is written into ``writer``.  EOF on ``reader`` is
    propagated as a write shutdown.  Returns once ``conn`` reaches EOF.
    """
    sel = selectors.DefaultSelector()
    sel.register(conn, selectors.EVENT_READ, 'conn')
    sel.register(reader, selectors.EVENT_READ, 'reader')
    sent = received = 0
    try:
        while True:
            for key, _mask in sel.select():
                if key.data == 'reader':
                    data = os.read(reader, buffer_size)
                    if not data:
                        logger.debug('Reader closed, shutting down write side')
                        sel.unregister(reader)
                        conn.shutdown(socket.SHUT_WR)
                        continue
                    conn.sendall(data)
                    sent += len(data)
                else:
                    data = conn.recv(buffer_size)
                    if not data:
                        return
                    _write_all(writer, data)
                    received += len(data)
    finally:
        sel.close()
        logger.debug('Relayed %d bytes out, %d bytes in', sent, received)
