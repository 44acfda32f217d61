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

from typing import Optional

from .process import TunnelProcess
from ..core.context import Context
from ..core.dialer import CancellableDialer, race
from ..exception import ProxyConfigError
from ..common.constants import DEFAULT_SHELL

logger = logging.getLogger(__name__)


class CommandDialer(CancellableDialer):
    """Uses an external command as the transport, ProxyCommand style.

    Every dial spawns ``shell -c command`` and returns a socket wired
    to its stdin and stdout.  ``network`` and ``address`` are ignored,
    the command is expected to already know where to connect to.
    """

    def __init__(self, command: str, shell: str = DEFAULT_SHELL) -> None:
        if not command or not command.strip():
            raise ProxyConfigError('Empty proxy command')
        self.command = command
        self.shell = shell

    def dial(self, network: str, address: str) -> socket.socket:
        return self._spawn().client

    def dial_context(
            self,
            ctx: Optional[Context],
            network: str,
            address: str,
    ) -> socket.socket:
        if ctx is None:
            return self.dial(network, address)
        tunnel = race(ctx, self._spawn, TunnelProcess.terminate)
        return tunnel.client

    def _spawn(self) -> TunnelProcess:
        logger.debug('Spawning proxy command %r', self.command)
        return TunnelProcess(self.command, self.shell).start()
