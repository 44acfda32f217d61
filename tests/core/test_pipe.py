# -*- coding: utf-8 -*-
"""
    proxydial
    ~~~~~~~~~
    Proxy aware connection dialer for SSH and SFTP clients.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import unittest

from proxydial.core import DuplexPipe


class TestDuplexPipe(unittest.TestCase):

    def setUp(self) -> None:
        self.pipe = DuplexPipe()

    def tearDown(self) -> None:
        self.pipe.close()

    def test_bytes_flow_both_ways(self) -> None:
        self.pipe.client.sendall(b'ping')
        self.assertEqual(self.pipe.server.recv(4), b'ping')
        self.pipe.server.sendall(b'pong')
        self.assertEqual(self.pipe.client.recv(4), b'pong')

    def test_close_server_signals_eof(self) -> None:
        self.pipe.server.sendall(b'last words')
        self.pipe.close_server()
        self.assertEqual(self.pipe.client.recv(1024), b'last words')
        self.assertEqual(self.pipe.client.recv(1024), b'')

    def test_close_is_idempotent(self) -> None:
        self.pipe.close()
        self.pipe.close()
        self.assertEqual(self.pipe.client.fileno(), -1)
        self.assertEqual(self.pipe.server.fileno(), -1)
