# -*- coding: utf-8 -*-
"""
    proxydial
    ~~~~~~~~~
    Proxy aware connection dialer for SSH and SFTP clients.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import pytest

from unittest import mock

from pytest_mock import MockerFixture

from proxydial.core import Context, ContextDialer
from proxydial.core.ssh import ssh_connect


class TestSshConnect:

    @pytest.fixture(autouse=True)   # type: ignore[misc]
    def _setUp(self, mocker: MockerFixture) -> None:
        self.mock_client = mocker.patch('paramiko.SSHClient')
        self.dialer = mock.Mock()
        self.conn = self.dialer.dial.return_value

    def test_handshake_runs_over_dialed_connection(self) -> None:
        client = ssh_connect(self.dialer, 'example.com', 2222, username='git')
        self.dialer.dial.assert_called_once_with('tcp', 'example.com:2222')
        assert client is self.mock_client.return_value
        client.load_system_host_keys.assert_called_once_with()
        client.connect.assert_called_once_with(
            hostname='example.com', port=2222, sock=self.conn, username='git',
        )

    def test_context_is_honored(self) -> None:
        dialer = mock.Mock(spec=ContextDialer)
        ctx = Context()
        ssh_connect(dialer, '::1', ctx=ctx)
        dialer.dial_context.assert_called_once_with(ctx, 'tcp', '[::1]:22')

    def test_failed_handshake_closes_everything(self) -> None:
        self.mock_client.return_value.connect.side_effect = EOFError()
        with pytest.raises(EOFError):
            ssh_connect(self.dialer, 'example.com')
        self.mock_client.return_value.close.assert_called_once_with()
        self.conn.close.assert_called_once_with()
