"""metric.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from struct import pack
from typing import ClassVar


# ===================================================================== Metric
# RFC 2453 Section 3.6, valid routes use 1 to 15, 16 is unreachable.
# The codec carries any 32 bits value, keeping in range is a routing concern.


class Metric(int):
    MIN: ClassVar[int] = 1
    INFINITY: ClassVar[int] = 16
    MAX: ClassVar[int] = 0xFFFFFFFF

    def pack(self) -> bytes:
        return pack('!L', self)

    def is_infinity(self) -> bool:
        return self >= self.INFINITY

    def is_routing_value(self) -> bool:
        return self.MIN <= self <= self.INFINITY

    def __len__(self) -> int:
        return 4
