# -*- coding: utf-8 -*-
"""
    proxydial
    ~~~~~~~~~
    Proxy aware connection dialer for SSH and SFTP clients.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import time
import logging
import threading

from types import TracebackType
from typing import Callable, List, Optional, Type

from ..exception import DialCancelled, DialTimeout

logger = logging.getLogger(__name__)


class Context:
    """Cancellation signal for dial operations.

    A context is done once :meth:`cancel` is called, once ``timeout``
    seconds have elapsed or once its ``parent`` is done, whichever
    happens first.  After that :attr:`error` holds the exception
    a dialer must raise, :exc:`DialTimeout` for expired deadlines
    and :exc:`DialCancelled` otherwise.

    Use it as a context manager to release the deadline timer
    once the dial has returned.
    """

    def __init__(
            self,
            timeout: Optional[float] = None,
            parent: Optional['Context'] = None,
    ) -> None:
        self._lock = threading.Lock()
        self._done = threading.Event()
        self._error: Optional[DialCancelled] = None
        self._callbacks: List[Callable[[], None]] = []
        self._timer: Optional[threading.Timer] = None
        self._parent = parent
        self._propagate: Optional[Callable[[], None]] = None
        self.deadline: Optional[float] = None
        if parent is not None:
            self.deadline = parent.deadline
        if timeout is not None:
            deadline = time.monotonic() + timeout
            if self.deadline is None or deadline < self.deadline:
                self.deadline = deadline
        if parent is not None:
            self._propagate = self._on_parent_done(parent)
            parent.add_callback(self._propagate)
        if self.deadline is not None and not self.done:
            remaining = self.deadline - time.monotonic()
            if remaining <= 0:
                self._finish(DialTimeout())
            else:
                self._timer = threading.Timer(remaining, self._expire)
                self._timer.daemon = True
                self._timer.start()

    @property
    def done(self) -> bool:
        return self._done.is_set()

    @property
    def error(self) -> Optional[DialCancelled]:
        """Returns None until the context is done."""
        return self._error

    def cancel(self) -> None:
        self._finish(DialCancelled())

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Blocks until the context is done.  Returns False on timeout."""
        return self._done.wait(timeout)

    def remaining(self) -> Optional[float]:
        """Seconds left until deadline, None when context has no deadline."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def add_callback(self, callback: Callable[[], None]) -> None:
        """Registers a callable invoked once when the context is done.

        Invoked immediately if the context is already done."""
        with self._lock:
            if not self._done.is_set():
                self._callbacks.append(callback)
                return
        callback()

    def remove_callback(self, callback: Callable[[], None]) -> None:
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

    def _expire(self) -> None:
        self._finish(DialTimeout())

    def _on_parent_done(self, parent: 'Context') -> Callable[[], None]:
        def propagate() -> None:
            self._finish(parent.error or DialCancelled())
        return propagate

    def _finish(self, error: DialCancelled) -> None:
        with self._lock:
            if self._done.is_set():
                return
            self._error = error
            self._done.set()
            callbacks, self._callbacks = self._callbacks, []
            timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()
        # Parent runs its callbacks outside of its lock
        if self._parent is not None and self._propagate is not None:
            self._parent.remove_callback(self._propagate)
        logger.debug('Context done: %s', error)
        for callback in callbacks:
            callback()

    def __enter__(self) -> 'Context':
        return self

    def __exit__(
            self,
            exc_type: Optional[Type[BaseException]],
            exc_val: Optional[BaseException],
            exc_tb: Optional[TracebackType],
    ) -> None:
        self.cancel()
