"""version.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from typing import ClassVar

from ripcodec.rip.error import InvalidVersion


class Version(int):
    V1: ClassVar[int] = 1  # RFC 1058
    V2: ClassVar[int] = 2  # RFC 2453

    v1: ClassVar[Version]
    v2: ClassVar[Version]

    _known: ClassVar[dict[int, Version]] = {}

    def __str__(self) -> str:
        return f'v{int(self)}'

    def __repr__(self) -> str:
        return str(self)

    def pack(self) -> bytes:
        return bytes([self])

    @classmethod
    def unpack_version(cls, value: int, offset: int | None = None) -> Version:
        # version 0 "must be discarded" is refused like any other unknown value
        if value not in cls._known:
            raise InvalidVersion(value, offset)
        return cls._known[value]

    @classmethod
    def from_int(cls, value: int) -> Version:
        if value not in cls._known:
            raise ValueError(f'unknown RIP version {value}')
        return cls._known[value]


Version.v1 = Version(Version.V1)
Version.v2 = Version(Version.V2)

Version._known = {
    Version.V1: Version.v1,
    Version.V2: Version.v2,
}
