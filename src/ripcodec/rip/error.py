"""error.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from typing import ClassVar


# ==================================================================== RIPError
# Every failure of the codec is terminal for the call which raised it.
# The transport layer is expected to drop the datagram.


class RIPError(ValueError):
    DESCRIPTION: ClassVar[str] = 'RIP codec error'

    def __init__(self, message: str, offset: int | None = None) -> None:
        ValueError.__init__(self, message)
        self.message = message
        self.offset = offset

    def __str__(self) -> str:
        if self.offset is None:
            return self.message
        return f'{self.message} (at byte {self.offset})'

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.message!r}, offset={self.offset!r})'


class TooShort(RIPError):
    DESCRIPTION = 'not enough data for a RIP header'


class InvalidCommand(RIPError):
    DESCRIPTION = 'unknown RIP command'

    def __init__(self, command: int, offset: int | None = None) -> None:
        RIPError.__init__(self, f'invalid command {command}', offset)
        self.command = command


class InvalidVersion(RIPError):
    DESCRIPTION = 'unknown RIP version'

    def __init__(self, version: int, offset: int | None = None) -> None:
        RIPError.__init__(self, f'invalid version {version}', offset)
        self.version = version


class MalformedEntryData(RIPError):
    DESCRIPTION = 'the entries are not a sequence of 20 bytes records'


# 26 or more entries on the wire is also malformed entry data
class TooManyEntries(MalformedEntryData):
    DESCRIPTION = 'more than 25 entries in one packet'

    def __init__(self, count: int, offset: int | None = None) -> None:
        MalformedEntryData.__init__(self, f'{count} entries, a packet can only carry up to 25', offset)
        self.count = count


class InvalidAddressFamily(RIPError):
    DESCRIPTION = 'unsupported address family identifier'

    def __init__(self, afi: int, offset: int | None = None) -> None:
        RIPError.__init__(self, f'invalid address family identifier {afi}', offset)
        self.afi = afi


class VersionMismatch(RIPError):
    DESCRIPTION = 'the header version does not match the entries'
