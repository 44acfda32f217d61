# -*- coding: utf-8 -*-
"""
    proxydial
    ~~~~~~~~~
    Proxy aware connection dialer for SSH and SFTP clients.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import logging

from typing import Callable, Dict

from .dialer import Dialer
from ..http.url import Url
from ..exception import ProxyConfigError
from ..common.utils import text_

logger = logging.getLogger(__name__)

DialerFactory = Callable[[Url, Dialer], Dialer]

_factories: Dict[str, DialerFactory] = {}


def register_dialer_type(scheme: str, factory: DialerFactory) -> None:
    """Makes :func:`from_url` build dialers for ``scheme`` URLs.

    A later registration for the same scheme replaces the former."""
    _factories[scheme.lower()] = factory


def from_url(url: Url, forward: Dialer) -> Dialer:
    """Returns a dialer for proxy ``url`` which reaches the proxy using ``forward``."""
    scheme = text_(url.scheme or b'').lower()
    factory = _factories.get(scheme)
    if factory is None:
        raise ProxyConfigError('Unknown proxy scheme %r in %s' % (scheme, url))
    logger.debug('Creating %s dialer for %s', scheme, url)
    return factory(url, forward)
