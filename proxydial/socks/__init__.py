# -*- coding: utf-8 -*-
"""
    proxydial
    ~~~~~~~~~
    Proxy aware connection dialer for SSH and SFTP clients.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       socks
"""
from .dialer import Socks5Auth, Socks5Dialer

__all__ = [
    'Socks5Auth',
    'Socks5Dialer',
]
