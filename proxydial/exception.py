# -*- coding: utf-8 -*-
"""
    proxydial
    ~~~~~~~~~
    Proxy aware connection dialer for SSH and SFTP clients.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       conn
"""
from typing import Any, Optional


class ProxyDialerException(Exception):
    """Top level :exc:`ProxyDialerException` exception class.

    All exceptions raised while establishing a proxied connection
    MUST inherit :exc:`ProxyDialerException` base class."""

    def __init__(self, message: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message or 'Reason unknown')


class ProxyConfigError(ProxyDialerException):
    """Raised for unsupported proxy types and malformed addresses, ports or URLs."""


class ProxyConnectionFailed(ProxyDialerException):
    """Exception raised when a proxy or the destination cannot be reached."""

    def __init__(self, host: str, port: int, reason: str, **kwargs: Any):
        self.host: str = host
        self.port: int = port
        self.reason: str = reason
        super().__init__(
            '%s %s:%d %s' % (self.__class__.__name__, host, port, reason),
            **kwargs,
        )


class ProxyProtocolError(ProxyDialerException):
    """Proxy replied with something we cannot work with."""

    def __init__(
            self,
            message: Optional[str] = None,
            status_code: Optional[int] = None,
            **kwargs: Any,
    ) -> None:
        self.status_code: Optional[int] = status_code
        super().__init__(message, **kwargs)


class HttpConnectRejected(ProxyProtocolError):
    """HTTP proxy answered our CONNECT request with a non 200 status code."""

    def __init__(
            self,
            status_code: int,
            reason: Optional[bytes] = None,
            target: Optional[str] = None,
            **kwargs: Any,
    ) -> None:
        self.reason: Optional[bytes] = reason
        self.target: Optional[str] = target
        message = 'Proxy rejected CONNECT %s with status code [%d]' % (
            target or '', status_code,
        )
        if reason:
            message += ' %s' % reason.decode('utf-8', 'replace')
        super().__init__(message, status_code=status_code, **kwargs)


class ProxyCommandFailed(ProxyDialerException):
    """Exception raised when a ProxyCommand process cannot be started."""

    def __init__(self, command: str, reason: str, **kwargs: Any) -> None:
        self.command: str = command
        self.reason: str = reason
        super().__init__(
            '%s %r %s' % (self.__class__.__name__, command, reason),
            **kwargs,
        )


class DialCancelled(ProxyDialerException):
    """Dial was abandoned because its context got cancelled."""

    def __init__(self, message: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message or 'context cancelled', **kwargs)


class DialTimeout(DialCancelled):
    """Dial was abandoned because its context deadline expired."""

    def __init__(self, message: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message or 'context deadline exceeded', **kwargs)
