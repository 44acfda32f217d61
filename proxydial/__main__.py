# -*- coding: utf-8 -*-
"""
    proxydial
    ~~~~~~~~~
    Proxy aware connection dialer for SSH and SFTP clients.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .proxy import entry_point

if __name__ == '__main__':
    entry_point()
