# -*- coding: utf-8 -*-
"""
    proxydial
    ~~~~~~~~~
    Proxy aware connection dialer for SSH and SFTP clients.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .proxy import Proxy, main, entry_point
from .core import Context, Dialer, ContextDialer, DirectDialer
from .core.ssh import ssh_connect
from .common.version import __version__


__all__ = [
    # PyPi package entry_point, also used as an SSH ProxyCommand
    # e.g. ProxyCommand proxydial --proxy-url socks5://127.0.0.1:1080 %h:%p
    'entry_point',
    # Embed proxydial CLI
    'main',
    'Proxy',
    'Context',
    'Dialer',
    'ContextDialer',
    'DirectDialer',
    'ssh_connect',
    '__version__',
]
