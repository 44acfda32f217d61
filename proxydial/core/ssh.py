# -*- coding: utf-8 -*-
"""
    proxydial
    ~~~~~~~~~
    Proxy aware connection dialer for SSH and SFTP clients.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import logging

from typing import TYPE_CHECKING, Any, Optional

from .context import Context
from .dialer import ContextDialer, Dialer
from ..common.utils import join_host_port
from ..common.constants import DEFAULT_NETWORK, DEFAULT_SSH_PORT

if TYPE_CHECKING:   # pragma: no cover
    from paramiko import SSHClient

logger = logging.getLogger(__name__)


def ssh_connect(
        dialer: Dialer,
        hostname: str,
        port: int = DEFAULT_SSH_PORT,
        ctx: Optional[Context] = None,
        **kwargs: Any,
) -> 'SSHClient':
    """Dials ``hostname:port`` through ``dialer`` and runs the SSH
    handshake over the resulting connection.

    Remaining keyword arguments are passed to
    :meth:`paramiko.SSHClient.connect` e.g. ``username``,
    ``key_filename`` or ``password``."""
    # pylint: disable=import-outside-toplevel
    from paramiko import SSHClient, AutoAddPolicy

    if not isinstance(dialer, ContextDialer):
        dialer = ContextDialer(dialer)
    conn = dialer.dial_context(ctx, DEFAULT_NETWORK, join_host_port(hostname, port))
    client = SSHClient()
    try:
        client.load_system_host_keys()
        client.set_missing_host_key_policy(AutoAddPolicy())
        client.connect(hostname=hostname, port=port, sock=conn, **kwargs)
    except Exception:
        client.close()
        conn.close()
        raise
    logger.debug('SSH connection established to %s:%d', hostname, port)
    return client
