# -*- coding: utf-8 -*-
"""
    proxydial
    ~~~~~~~~~
    Proxy aware connection dialer for SSH and SFTP clients.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import sys
import logging
from typing import Optional

from .constants import DEFAULT_LOG_FILE, DEFAULT_LOG_LEVEL, DEFAULT_LOG_FORMAT
from ..exception import ProxyConfigError


SINGLE_CHAR_TO_LEVEL = {
    'D': logging.DEBUG,
    'I': logging.INFO,
    'W': logging.WARNING,
    'E': logging.ERROR,
    'C': logging.CRITICAL,
}

# Libraries which log every transport detail at INFO level
NOISY_LOGGERS = ('paramiko',)


def single_char_to_level(level: str) -> int:
    """Maps ``DEBUG``, ``debug`` or simply ``d`` to :data:`logging.DEBUG`."""
    if not level or level.upper()[0] not in SINGLE_CHAR_TO_LEVEL:
        raise ProxyConfigError('Invalid log level %r' % level)
    return SINGLE_CHAR_TO_LEVEL[level.upper()[0]]


class Logger:
    """Common logging utilities and setup."""

    @staticmethod
    def setup(
            log_file: Optional[str] = DEFAULT_LOG_FILE,
            log_level: str = DEFAULT_LOG_LEVEL,
            log_format: str = DEFAULT_LOG_FORMAT,
    ) -> None:
        level = single_char_to_level(log_level)
        handler: logging.Handler
        if log_file:
            handler = logging.FileHandler(log_file, mode='a')
        else:
            # stdout carries tunnel data when used as a ProxyCommand
            handler = logging.StreamHandler(sys.stderr)
        logging.basicConfig(level=level, format=log_format, handlers=[handler])
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(
                logging.NOTSET if level == logging.DEBUG else logging.WARNING,
            )
