# -*- coding: utf-8 -*-
"""
    proxydial
    ~~~~~~~~~
    Proxy aware connection dialer for SSH and SFTP clients.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .process import TunnelProcess
from .dialer import CommandDialer

__all__ = [
    'TunnelProcess',
    'CommandDialer',
]
