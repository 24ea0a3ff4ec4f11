"""command.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from typing import ClassVar

from ripcodec.rip.error import InvalidCommand


# ===================================================================== Command
# RFC 1058 Section 3.1 / RFC 2453 Section 4


class Command(int):
    REQUEST: ClassVar[int] = 0x01
    RESPONSE: ClassVar[int] = 0x02

    # Singleton instances (initialized after class definition)
    request: ClassVar[Command]
    response: ClassVar[Command]

    _names: ClassVar[dict[int, str]] = {
        0x01: 'request',
        0x02: 'response',
    }

    codes: ClassVar[dict[str, Command]] = {}

    def __str__(self) -> str:
        return self._names.get(self, f'unknown-command-{int(self)}')

    def __repr__(self) -> str:
        return str(self)

    def pack(self) -> bytes:
        return bytes([self])

    @classmethod
    def unpack_command(cls, value: int, offset: int | None = None) -> Command:
        if value not in cls._names:
            raise InvalidCommand(value, offset)
        return cls.codes[cls._names[value]]

    @classmethod
    def from_string(cls, name: str) -> Command:
        command = cls.codes.get(name.lower(), None)
        if command is None:
            raise ValueError(f'unknown command {name}')
        return command


Command.request = Command(Command.REQUEST)
Command.response = Command(Command.RESPONSE)

Command.codes = {
    'request': Command.request,
    'response': Command.response,
}
