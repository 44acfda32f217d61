# -*- coding: utf-8 -*-
"""
    proxydial
    ~~~~~~~~~
    Proxy aware connection dialer for SSH and SFTP clients.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from typing import NamedTuple

from .version import __version__


CRLF = b'\r\n'
COLON = b':'
WHITESPACE = b' '
SLASH = b'/'
AT = b'@'
PERCENT = '%'
HTTP_PROTO = b'http'
HTTPS_PROTO = HTTP_PROTO + b's'
SOCKS_PROTO = b'socks'
SOCKS5_PROTO = SOCKS_PROTO + b'5'
HTTP_1_1 = HTTP_PROTO.upper() + SLASH + b'1.1'
SCHEME_SEPARATOR = b'://'

HTTP_CONNECT = b'CONNECT'
HTTP_OK = 200

USER_AGENT_HEADER_KEY = b'User-Agent'
USER_AGENT_HEADER_VALUE = b'proxydial v' + \
    __version__.encode('utf-8', 'strict')

ProxyTypes = NamedTuple(
    'ProxyTypes', [
        ('HTTP', str),
        ('HTTPS', str),
        ('SOCKS', str),
        ('SOCKS5', str),
        ('COMMAND', str),
    ],
)
proxyTypes = ProxyTypes('http', 'https', 'socks', 'socks5', 'command')

# Networks understood by stream dialers
TCP_NETWORKS = ('tcp', 'tcp4', 'tcp6')

# Defaults
DEFAULT_NETWORK = 'tcp'
DEFAULT_TIMEOUT = 10.0
DEFAULT_BUFFER_SIZE = 64 * 1024
DEFAULT_MAX_RESPONSE_HEAD_SIZE = 64 * 1024
DEFAULT_SHELL = 'sh'
DEFAULT_SSH_PORT = 22
DEFAULT_SOCKS_RDNS = True
DEFAULT_LOG_FILE = None
DEFAULT_LOG_FORMAT = '%(asctime)s - pid:%(process)d [%(levelname)-.1s] %(module)s.%(funcName)s:%(lineno)d - %(message)s'
DEFAULT_LOG_LEVEL = 'INFO'
DEFAULT_VERSION = False
DEFAULT_PROXY_TYPE = None
DEFAULT_PROXY_ADDRESS = None
DEFAULT_PROXY_PORT = None
DEFAULT_PROXY_USER = None
DEFAULT_PROXY_PASSWORD = None
DEFAULT_PROXY_COMMAND = None
DEFAULT_PROXY_URL = None
