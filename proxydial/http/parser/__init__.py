# -*- coding: utf-8 -*-
"""
    proxydial
    ~~~~~~~~~
    Proxy aware connection dialer for SSH and SFTP clients.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling:word-list::

       http
       Submodules
"""
from .types import httpParserStates
from .parser import HttpParser


__all__ = [
    'HttpParser',
    'httpParserStates',
]
