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

from typing import NamedTuple, Optional

from python_socks import ProxyType
from python_socks._errors import IncompleteReadError
from python_socks._protocols.errors import ReplyError
from python_socks._connectors.factory_sync import create_connector
from python_socks.sync._stream import SyncSocketStream
from python_socks.sync._resolver import SyncResolver

from ..http.url import Url
from ..core.dialer import Dialer
from ..exception import ProxyConfigError, ProxyConnectionFailed, ProxyProtocolError
from ..common.utils import text_, split_host_port
from ..common.constants import (
    DEFAULT_NETWORK, DEFAULT_SOCKS_RDNS, DEFAULT_TIMEOUT, TCP_NETWORKS,
)

logger = logging.getLogger(__name__)


class Socks5Auth(NamedTuple):
    user: str
    password: str

    @classmethod
    def from_credentials(
            cls,
            user: Optional[str],
            password: Optional[str],
    ) -> Optional['Socks5Auth']:
        """Returns None unless both credentials are non-empty."""
        if user and password:
            return cls(user, password)
        return None


class Socks5Dialer(Dialer):
    """Tunnels connections through a SOCKS5 proxy.

    The proxy is reached using ``forward``, then SOCKS5 negotiation
    runs over that very socket using the ``python-socks`` connector.
    Hostnames are resolved by the proxy.
    """

    def __init__(
            self,
            network: str,
            address: str,
            auth: Optional[Socks5Auth],
            forward: Dialer,
            rdns: bool = DEFAULT_SOCKS_RDNS,
            timeout: Optional[float] = DEFAULT_TIMEOUT,
    ) -> None:
        if network not in TCP_NETWORKS:
            raise ProxyConfigError('Unsupported network %r for SOCKS5 proxy' % network)
        self.host, self.port = split_host_port(address)
        if not self.host:
            raise ProxyConfigError('Missing proxy host in %r' % address)
        self.network = network
        self.proxy_address = address
        self.auth = auth
        self.forward = forward
        self.timeout = timeout
        self.connector = create_connector(
            proxy_type=ProxyType.SOCKS5,
            username=auth.user if auth else None,
            password=auth.password if auth else None,
            rdns=rdns,
            resolver=SyncResolver(),
        )

    @classmethod
    def from_url(cls, url: Url, forward: Dialer) -> 'Socks5Dialer':
        auth = None
        if url.has_credentials:
            auth = Socks5Auth.from_credentials(
                text_(url.username), text_(url.password),
            )
        return cls(DEFAULT_NETWORK, url.host_port, auth, forward)

    def dial(self, network: str, address: str) -> socket.socket:
        if network not in TCP_NETWORKS:
            raise ProxyConfigError('Unsupported network %r for SOCKS5 proxy' % network)
        dest_host, dest_port = split_host_port(address)
        conn = self.forward.dial(self.network, self.proxy_address)
        logger.debug(
            'Negotiating SOCKS5 tunnel to %s via %s', address, self.proxy_address,
        )
        try:
            conn.settimeout(self.timeout)
            self.connector.connect(
                stream=SyncSocketStream(conn),
                host=dest_host,
                port=dest_port,
            )
        except (ReplyError, IncompleteReadError) as e:
            conn.close()
            raise ProxyProtocolError(
                'SOCKS5 proxy %s failed to connect %s: %s' % (self.proxy_address, address, e),
            ) from e
        except OSError as e:
            conn.close()
            raise ProxyConnectionFailed(self.host, self.port, str(e) or 'timed out') from e
        except Exception:
            conn.close()
            raise
        conn.settimeout(None)
        return conn
