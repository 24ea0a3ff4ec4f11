"""lazy.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from typing import Callable

from ripcodec.util.types import Buffer


def lazyformat(prefix: str, data: Buffer) -> Callable[[], str]:
    """Hex dump of a packet, two bytes per group: 'received RIP (   4) 0202 0000'"""

    def _lazy() -> str:
        return f'{prefix} ({len(data):4d}) {bytes(data).hex(" ", -2).upper()}'

    return _lazy


def lazymsg(template: str, **kwargs: object) -> Callable[[], str]:
    def _lazy() -> str:
        return template.format(**kwargs)

    return _lazy


def lazyexc(prefix: str, exception: BaseException) -> Callable[[], str]:
    def _lazy() -> str:
        return f'{prefix} {type(exception).__name__}: {exception}'

    return _lazy
