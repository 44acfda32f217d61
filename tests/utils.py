# -*- coding: utf-8 -*-
"""
    proxydial
    ~~~~~~~~~
    Proxy aware connection dialer for SSH and SFTP clients.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import socket
import struct
import threading

from typing import Any, List, Optional, Tuple

from proxydial.core import Dialer, DirectDialer
from proxydial.common.constants import CRLF


def recv_until(conn: socket.socket, marker: bytes) -> bytes:
    data = b''
    while marker not in data:
        chunk = conn.recv(1)
        if not chunk:
            break
        data += chunk
    return data


def recv_exactly(conn: socket.socket, size: int) -> bytes:
    data = b''
    while len(data) < size:
        chunk = conn.recv(size - len(data))
        if not chunk:
            raise ConnectionError('peer closed after %d bytes' % len(data))
        data += chunk
    return data


class LoopbackServer:
    """Accepts loopback connections and handles each on its own thread."""

    def __init__(self) -> None:
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self.sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self.sock.bind(('127.0.0.1', 0))
        self.sock.listen(8)
        self.port: int = self.sock.getsockname()[1]
        self.tunneled = b''
        self.lock = threading.Lock()
        self.thread = threading.Thread(target=self._serve, daemon=True)

    @property
    def address(self) -> str:
        return '127.0.0.1:%d' % self.port

    def __enter__(self) -> Any:
        self.thread.start()
        return self

    def __exit__(self, *args: Any) -> None:
        self.sock.close()

    def _serve(self) -> None:
        while True:
            try:
                conn, _ = self.sock.accept()
            except OSError:
                return
            threading.Thread(
                target=self._handle_and_close, args=(conn,), daemon=True,
            ).start()

    def _handle_and_close(self, conn: socket.socket) -> None:
        with conn:
            try:
                self.handle(conn)
            except OSError:
                pass

    def handle(self, conn: socket.socket) -> None:
        self.echo(conn)

    def echo(self, conn: socket.socket) -> None:
        while True:
            data = conn.recv(1024)
            if not data:
                return
            with self.lock:
                self.tunneled += data
            conn.sendall(data)


class HttpConnectServer(LoopbackServer):
    """Fake HTTP proxy answering CONNECT requests with a canned response.

    Once established, the tunnel echoes whatever it receives."""

    def __init__(
            self,
            status: int = 200,
            reason: bytes = b'Connection established',
            headers: bytes = b'',
            early_data: bytes = b'',
            raw_response: Optional[bytes] = None,
    ) -> None:
        super().__init__()
        self.status = status
        self.reason = reason
        self.headers = headers
        self.early_data = early_data
        self.raw_response = raw_response
        self.requests: List[bytes] = []

    def handle(self, conn: socket.socket) -> None:
        head = recv_until(conn, CRLF + CRLF)
        with self.lock:
            self.requests.append(head)
        if self.raw_response is not None:
            conn.sendall(self.raw_response)
            return
        conn.sendall(
            b'HTTP/1.1 %d %s\r\n%s\r\n' % (self.status, self.reason, self.headers) +
            self.early_data,
        )
        if self.status == 200:
            self.echo(conn)


class Socks5Server(LoopbackServer):
    """Fake SOCKS5 proxy, username/password method is used when configured."""

    def __init__(
            self,
            username: Optional[bytes] = None,
            password: Optional[bytes] = None,
            reply: int = 0,
    ) -> None:
        super().__init__()
        self.username = username
        self.password = password
        self.reply = reply
        self.destinations: List[Tuple[str, int]] = []
        self.credentials: List[Tuple[bytes, bytes]] = []

    def handle(self, conn: socket.socket) -> None:
        version, nmethods = recv_exactly(conn, 2)
        assert version == 5
        methods = recv_exactly(conn, nmethods)
        if self.username is not None:
            if 2 not in methods:
                conn.sendall(b'\x05\xff')
                return
            conn.sendall(b'\x05\x02')
            _ver, ulen = recv_exactly(conn, 2)
            username = recv_exactly(conn, ulen)
            plen = recv_exactly(conn, 1)[0]
            password = recv_exactly(conn, plen)
            self.credentials.append((username, password))
            ok = username == self.username and password == self.password
            conn.sendall(b'\x01\x00' if ok else b'\x01\x01')
            if not ok:
                return
        else:
            conn.sendall(b'\x05\x00')
        _ver, _cmd, _rsv, atyp = recv_exactly(conn, 4)
        if atyp == 1:
            host = socket.inet_ntop(socket.AF_INET, recv_exactly(conn, 4))
        elif atyp == 4:
            host = socket.inet_ntop(socket.AF_INET6, recv_exactly(conn, 16))
        else:
            host = recv_exactly(conn, recv_exactly(conn, 1)[0]).decode()
        port = struct.unpack('!H', recv_exactly(conn, 2))[0]
        self.destinations.append((host, port))
        conn.sendall(
            bytes([5, self.reply, 0, 1]) + socket.inet_aton('127.0.0.1') +
            struct.pack('!H', self.port),
        )
        if self.reply == 0:
            self.echo(conn)


class RecordingDialer(Dialer):
    """Dials directly while remembering every request and connection."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, str]] = []
        self.conns: List[socket.socket] = []
        self.direct = DirectDialer(timeout=5)

    def dial(self, network: str, address: str) -> socket.socket:
        self.calls.append((network, address))
        conn = self.direct.dial(network, address)
        self.conns.append(conn)
        return conn


class BlockingDialer(Dialer):
    """Never completes on its own, used to exercise cancellation."""

    def __init__(self) -> None:
        self.release = threading.Event()
        self.conn: Optional[socket.socket] = None

    def dial(self, network: str, address: str) -> socket.socket:
        self.release.wait(5)
        self.conn, peer = socket.socketpair()
        peer.close()
        return self.conn


class JumpDialer(RecordingDialer):
    """Reaches ``target`` whatever address is requested, the way a
    jump host reaches proxies the local network cannot."""

    def __init__(self, target: str) -> None:
        super().__init__()
        self.target = target

    def dial(self, network: str, address: str) -> socket.socket:
        self.calls.append((network, address))
        conn = self.direct.dial(network, self.target)
        self.conns.append(conn)
        return conn


def unused_port() -> int:
    """Returns a loopback port nothing listens on."""
    sock = socket.socket()
    sock.bind(('127.0.0.1', 0))
    port: int = sock.getsockname()[1]
    sock.close()
    return port
