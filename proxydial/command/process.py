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
import threading
import subprocess

from typing import IO, Optional

from ..core.pipe import DuplexPipe
from ..exception import ProxyCommandFailed
from ..common.utils import text_
from ..common.constants import DEFAULT_SHELL

logger = logging.getLogger(__name__)


class TunnelProcess:
    """A ProxyCommand process bound to the server end of a :class:`DuplexPipe`.

    Process stdin and stdout are the server end, hence whatever is
    written into :attr:`client` reaches the process and whatever the
    process prints can be read back from :attr:`client`.  Process stderr
    is diagnostic only and goes to the logger.
    """

    def __init__(self, command: str, shell: str = DEFAULT_SHELL) -> None:
        self.command = command
        self.shell = shell
        self.pipe: Optional[DuplexPipe] = None
        self.process: Optional['subprocess.Popen[bytes]'] = None
        self.watcher: Optional[threading.Thread] = None
        self.stderr_reader: Optional[threading.Thread] = None

    @property
    def client(self) -> socket.socket:
        assert self.pipe is not None
        return self.pipe.client

    def start(self) -> 'TunnelProcess':
        self.pipe = DuplexPipe()
        try:
            self.process = subprocess.Popen(
                [self.shell, '-c', self.command],
                stdin=self.pipe.server,
                stdout=self.pipe.server,
                stderr=subprocess.PIPE,
                close_fds=True,
            )
        except OSError as e:
            self.pipe.close()
            raise ProxyCommandFailed(self.command, str(e)) from e
        logger.debug('Started %r with pid %d', self.command, self.process.pid)
        assert self.process.stderr is not None
        self.stderr_reader = threading.Thread(
            target=self._log_stderr,
            args=(self.process.stderr,),
            daemon=True,
        )
        self.stderr_reader.start()
        self.watcher = threading.Thread(target=self._watch, daemon=True)
        self.watcher.start()
        return self

    def terminate(self) -> None:
        """Kills the process if still running and closes both pipe ends."""
        if self.process is not None and self.process.poll() is None:
            logger.debug('Killing %r with pid %d', self.command, self.process.pid)
            try:
                self.process.kill()
            except ProcessLookupError:  # pragma: no cover
                pass
        if self.process is not None:
            self.process.wait()
        if self.pipe is not None:
            self.pipe.close()

    def _watch(self) -> None:
        assert self.process is not None and self.pipe is not None
        code = self.process.wait()
        logger.debug('%r exited with code %d', self.command, code)
        # Client end observes EOF after whatever was already buffered
        self.pipe.close_server()

    def _log_stderr(self, stderr: IO[bytes]) -> None:
        with stderr:
            for line in iter(stderr.readline, b''):
                logger.info(text_(line.rstrip(b'\r\n'), errors='replace'))
