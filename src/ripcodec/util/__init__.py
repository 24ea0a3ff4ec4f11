"""__init__.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

import string
from typing import Any, Iterator, Sequence, TypeVar

S = TypeVar('S', bound=Sequence[Any])


def string_is_hex(data: str) -> bool:
    """True for a non empty, even length string of hexadecimal digits (0x prefix allowed)."""
    digits = data[2:] if data[:2].lower() == '0x' else data
    return bool(digits) and len(digits) % 2 == 0 and all(c in string.hexdigits for c in digits)


def split(data: S, step: int) -> Iterator[S]:
    """Cut a sequence in consecutive slices of at most step items."""
    return (data[start : start + step] for start in range(0, len(data), step))
