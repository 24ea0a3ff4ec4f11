"""header.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from typing import ClassVar

from ripcodec.rip.command import Command
from ripcodec.rip.version import Version
from ripcodec.rip.error import TooShort
from ripcodec.util.types import Buffer


# ====================================================================== Header
# RFC 2453 Section 4

#  0                   1                   2                   3
#  0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |  command (1)  |  version (1)  |       must be zero (2)        |
# +---------------+---------------+-------------------------------+


class Header:
    LENGTH: ClassVar[int] = 4
    RESERVED: ClassVar[bytes] = b'\x00\x00'

    __slots__ = ('_packed',)

    def __init__(self, packed: bytes) -> None:
        """Initialize from packed wire-format bytes.

        NO validation - trusted internal use only.
        Use unpack_header() for wire data or make_header() for semantic construction.

        Args:
            packed: 4 bytes, a known command, a known version and two zero bytes
        """
        self._packed: bytes = packed

    @classmethod
    def make_header(cls, command: int, version: int) -> Header:
        """Create a header from its command and version.

        Raises:
            InvalidCommand: command is not a request or a response
            InvalidVersion: version is not 1 or 2
        """
        return cls(Command.unpack_command(command).pack() + Version.unpack_version(version).pack() + cls.RESERVED)

    @classmethod
    def unpack_header(cls, data: Buffer) -> Header:
        """Validate and create from the first four bytes of a packet.

        The reserved bytes are not checked (RFC 2453 Section 4 asks to
        ignore them on receipt) and are not kept.
        """
        if len(data) < cls.LENGTH:
            raise TooShort(f'a RIP header needs {cls.LENGTH} bytes, got {len(data)}', len(data))
        command = Command.unpack_command(data[0], 0)
        version = Version.unpack_version(data[1], 1)
        return cls(command.pack() + version.pack() + cls.RESERVED)

    @property
    def command(self) -> Command:
        return Command.unpack_command(self._packed[0])

    @property
    def version(self) -> Version:
        return Version.unpack_version(self._packed[1])

    def pack_header(self) -> bytes:
        return self._packed

    def __len__(self) -> int:
        return self.LENGTH

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Header):
            return False
        return self._packed == other._packed

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash(self._packed)

    def __str__(self) -> str:
        return f'{self.command} {self.version}'

    def __repr__(self) -> str:
        return f'Header(command={self.command}, version={self.version})'
