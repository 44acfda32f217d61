# -*- coding: utf-8 -*-
"""
    proxydial
    ~~~~~~~~~
    Proxy aware connection dialer for SSH and SFTP clients.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .pipe import DuplexPipe
from .pump import pump
from .dialer import (
    Dialer, CancellableDialer, DirectDialer, ContextDialer, race,
)
from .context import Context

__all__ = [
    'Context',
    'Dialer',
    'CancellableDialer',
    'DirectDialer',
    'ContextDialer',
    'race',
    'DuplexPipe',
    'pump',
]
