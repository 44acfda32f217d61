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
import threading

from abc import ABC, abstractmethod
from typing import Callable, Generic, Optional, TypeVar

from .context import Context
from ..exception import DialCancelled, ProxyConfigError, ProxyConnectionFailed
from ..common.utils import new_socket_connection, split_host_port
from ..common.constants import DEFAULT_TIMEOUT, TCP_NETWORKS

logger = logging.getLogger(__name__)

T = TypeVar('T')


class Dialer(ABC):
    """Opens stream connections to ``host:port`` addresses."""

    @abstractmethod
    def dial(self, network: str, address: str) -> socket.socket:
        """Blocks until connection is established or raises."""
        raise NotImplementedError()     # pragma: no cover


class CancellableDialer(Dialer):
    """Dialer which natively honors a :class:`Context`."""

    @abstractmethod
    def dial_context(
            self,
            ctx: Optional[Context],
            network: str,
            address: str,
    ) -> socket.socket:
        raise NotImplementedError()     # pragma: no cover


class _Attempt(Generic[T]):
    """Outcome of one background dial attempt.

    Whoever flips the state first wins, either the attempt by
    completing or the caller by abandoning it."""

    def __init__(
            self,
            fn: Callable[[], T],
            abandon: Callable[[T], None],
    ) -> None:
        self.fn = fn
        self.abandon = abandon
        self.finished = threading.Event()
        self.lock = threading.Lock()
        self.completed = False
        self.abandoned = False
        self.result: Optional[T] = None
        self.exc: Optional[Exception] = None

    def run(self) -> None:
        result: Optional[T] = None
        exc: Optional[Exception] = None
        try:
            result = self.fn()
        except Exception as e:  # re-raised by the waiting caller
            exc = e
        with self.lock:
            lost = self.abandoned
            if not lost:
                self.completed = True
                self.result, self.exc = result, exc
        self.finished.set()
        if lost:
            if result is not None:
                logger.debug('Closing result of abandoned dial %r', result)
                self.abandon(result)
            elif exc is not None:
                logger.debug('Abandoned dial failed: %s', exc)

    def give_up(self) -> bool:
        """Returns False if the attempt already completed."""
        with self.lock:
            if self.completed:
                return False
            self.abandoned = True
            return True


def race(
        ctx: Context,
        fn: Callable[[], T],
        abandon: Callable[[T], None],
) -> T:
    """Runs blocking ``fn`` on a background thread and waits for either
    its completion or ``ctx`` to be done, whichever comes first.

    When ``ctx`` wins, its error is raised right away and
    ``abandon`` is later called with whatever ``fn`` produced."""
    if ctx.error is not None:
        raise _context_error(ctx)
    attempt = _Attempt(fn, abandon)
    ctx.add_callback(attempt.finished.set)
    try:
        threading.Thread(target=attempt.run, daemon=True).start()
        attempt.finished.wait()
    finally:
        ctx.remove_callback(attempt.finished.set)
    if attempt.give_up():
        raise _context_error(ctx)
    if attempt.exc is not None:
        raise attempt.exc
    assert attempt.result is not None
    return attempt.result


def _context_error(ctx: Context) -> DialCancelled:
    """Returns a new instance of the error ctx is done with.

    The context keeps a single error for every dial it governs."""
    assert ctx.error is not None
    return type(ctx.error)(str(ctx.error))


def close_connection(conn: socket.socket) -> None:
    conn.close()


class DirectDialer(CancellableDialer):
    """Dials destination over plain TCP, no proxy involved."""

    def __init__(self, timeout: Optional[float] = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout

    def dial(self, network: str, address: str) -> socket.socket:
        return self._connect(network, address, self.timeout)

    def dial_context(
            self,
            ctx: Optional[Context],
            network: str,
            address: str,
    ) -> socket.socket:
        if ctx is None:
            return self.dial(network, address)
        timeout = self.timeout
        remaining = ctx.remaining()
        if remaining is not None and (timeout is None or remaining < timeout):
            timeout = remaining
        return race(
            ctx,
            lambda: self._connect(network, address, timeout),
            close_connection,
        )

    @staticmethod
    def _connect(network: str, address: str, timeout: Optional[float]) -> socket.socket:
        if network not in TCP_NETWORKS:
            raise ProxyConfigError('Unsupported network %r' % network)
        host, port = split_host_port(address)
        logger.debug('Connecting to %s:%d', host, port)
        try:
            conn = new_socket_connection((host, port), timeout=timeout)
        except OSError as e:
            raise ProxyConnectionFailed(host, port, str(e)) from e
        # Connection is handed over to upper layers, which
        # manage their own timeouts.
        conn.settimeout(None)
        return conn


class ContextDialer(CancellableDialer):
    """Gives any :class:`Dialer` a uniform ``dial_context`` operation.

    Dialers that are not :class:`CancellableDialer` get their blocking
    ``dial`` raced against the context on a background thread.
    Connections produced after the context won are closed.
    """

    def __init__(
            self,
            dialer: Optional[Dialer],
            proxy_type: Optional[str] = None,
    ) -> None:
        self.dialer = dialer
        self.proxy_type = proxy_type

    def get_dialer(self) -> Optional[Dialer]:
        return self.dialer

    def dial(self, network: str, address: str) -> socket.socket:
        return self._get().dial(network, address)

    def dial_context(
            self,
            ctx: Optional[Context],
            network: str,
            address: str,
    ) -> socket.socket:
        dialer = self._get()
        if ctx is None:
            return dialer.dial(network, address)
        if isinstance(dialer, CancellableDialer):
            return dialer.dial_context(ctx, network, address)
        return race(
            ctx,
            lambda: dialer.dial(network, address),
            close_connection,
        )

    def _get(self) -> Dialer:
        if self.dialer is None:
            raise ProxyConfigError(
                'No dialer available for proxy type %r' % self.proxy_type,
            )
        return self.dialer
