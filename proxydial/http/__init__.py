# -*- coding: utf-8 -*-
"""
    proxydial
    ~~~~~~~~~
    Proxy aware connection dialer for SSH and SFTP clients.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       http
       Submodules
"""
from .url import Url
from .connect import HttpConnectDialer, read_response_head


__all__ = [
    'Url',
    'HttpConnectDialer',
    'read_response_head',
]
