"""__init__.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

import logging
from typing import Callable, ClassVar, TYPE_CHECKING

from ripcodec.logger.handler import configure
from ripcodec.logger.lazy import lazyexc
from ripcodec.logger.lazy import lazyformat
from ripcodec.logger.lazy import lazymsg

if TYPE_CHECKING:
    from ripcodec.environment.config import Environment

__all__ = [
    'LogMessage',
    'SOURCES',
    'lazyexc',
    'lazyformat',
    'lazymsg',
    'log',
]

# the text is only built once we know it is going to be written
LogMessage = Callable[[], str]

# parser: decoding decisions, serializer: encoding, wire: packet dumps, cli: the command line
SOURCES: tuple[str, ...] = ('parser', 'serializer', 'wire', 'cli')


class log:
    """Category aware front end to the ripcodec logger.

    Nothing is written until init() was called, so the codec can be used
    as a library without ever configuring the logging module.
    """

    logger: ClassVar[logging.Logger | None] = None
    enabled: ClassVar[dict[str, bool]] = {}

    @classmethod
    def init(cls, env: Environment) -> None:
        if not env.log.enable:
            cls.disable()
            return
        cls.enabled = {
            'parser': env.log.all or env.log.parser,
            'serializer': env.log.all or env.log.serializer,
            'wire': env.log.all or env.log.packets,
            'cli': True,
        }
        cls.logger = configure(env.log.destination, env.log.level, env.log.short)

    @classmethod
    def disable(cls) -> None:
        cls.logger = None
        cls.enabled = {}

    @classmethod
    def _emit(cls, level: int, message: LogMessage, source: str) -> None:
        logger = cls.logger
        if logger is None or not cls.enabled.get(source, False) or not logger.isEnabledFor(level):
            return
        for line in message().split('\n'):
            logger.log(level, line, extra={'source': source})

    @classmethod
    def debug(cls, message: LogMessage, source: str) -> None:
        cls._emit(logging.DEBUG, message, source)

    @classmethod
    def info(cls, message: LogMessage, source: str) -> None:
        cls._emit(logging.INFO, message, source)

    @classmethod
    def warning(cls, message: LogMessage, source: str) -> None:
        cls._emit(logging.WARNING, message, source)

    @classmethod
    def error(cls, message: LogMessage, source: str) -> None:
        cls._emit(logging.ERROR, message, source)

    @classmethod
    def critical(cls, message: LogMessage, source: str) -> None:
        cls._emit(logging.CRITICAL, message, source)
