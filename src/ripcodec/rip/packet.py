"""packet.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from typing import ClassVar, Iterable, Iterator, Type, TypeVar

from ripcodec.rip.command import Command
from ripcodec.rip.entry import Entry
from ripcodec.rip.error import TooManyEntries
from ripcodec.rip.error import VersionMismatch
from ripcodec.rip.family import AFI
from ripcodec.rip.header import Header
from ripcodec.rip.metric import Metric
from ripcodec.rip.v1 import EntryV1
from ripcodec.rip.v2 import EntryV2
from ripcodec.rip.version import Version
from ripcodec.util import split

P = TypeVar('P', bound='Packet')


# ====================================================================== Packet
# A header and up to 25 entries, all using the header's version.
# RFC 2453 Section 3.6: 4 + 25 * 20 = 504 bytes, within a 512 bytes datagram


class Packet:
    MAX_ENTRIES: ClassVar[int] = 25
    MAX_LENGTH: ClassVar[int] = Header.LENGTH + MAX_ENTRIES * Entry.LENGTH

    VERSION: ClassVar[Version]
    ENTRY: ClassVar[Type[Entry]]

    registered_packet: ClassVar[dict[int, Type[Packet]]] = {}

    __slots__ = ('_header', '_entries')
    __match_args__ = ('header', 'entries')

    def __init__(self, header: Header, entries: tuple[Entry, ...]) -> None:
        """Initialize from already validated parts.

        NO validation - trusted internal use only.
        Use make_packet() (or make_v1_packet/make_v2_packet) otherwise.
        """
        self._header: Header = header
        self._entries: tuple[Entry, ...] = entries

    @classmethod
    def register(cls, klass: Type[P]) -> Type[P]:
        if klass.VERSION in cls.registered_packet:
            raise RuntimeError('only one class can be registered per version')
        cls.registered_packet[klass.VERSION] = klass
        return klass

    @classmethod
    def klass(cls, version: int) -> Type[Packet]:
        if version in cls.registered_packet:
            return cls.registered_packet[version]
        raise RuntimeError(f'no packet format registered for version {version}')

    @classmethod
    def make_packet(cls: Type[P], header: Header, entries: Iterable[Entry] = ()) -> P:
        """Create a packet, checking the RFC limits eagerly.

        Raises:
            TooManyEntries: more than 25 entries were given
            VersionMismatch: the header or an entry is not of this packet version
        """
        if not isinstance(header, Header):
            raise TypeError(f'header must be a Header, not {type(header).__name__}')
        entries = tuple(entries)
        if len(entries) > cls.MAX_ENTRIES:
            raise TooManyEntries(len(entries))
        if header.version != cls.VERSION:
            raise VersionMismatch(f'a {cls.VERSION} packet can not use a {header.version} header')
        for index, entry in enumerate(entries):
            if isinstance(entry, cls.ENTRY):
                continue
            if isinstance(entry, Entry):
                raise VersionMismatch(f'entry {index} is a {entry.VERSION} entry, the packet is {cls.VERSION}')
            raise TypeError(f'entry {index} must be an {cls.ENTRY.__name__}, not {type(entry).__name__}')
        return cls(header, entries)

    @classmethod
    def split(cls: Type[P], header: Header, entries: Iterable[Entry]) -> Iterator[P]:
        """Yield as many packets as required to carry all the entries.

        A header-only packet is produced when there is no entry.
        """
        entries = tuple(entries)
        if not entries:
            yield cls.make_packet(header, ())
            return
        for chunk in split(entries, cls.MAX_ENTRIES):
            yield cls.make_packet(header, chunk)

    @property
    def header(self) -> Header:
        return self._header

    @property
    def entries(self) -> tuple[Entry, ...]:
        return self._entries

    @property
    def command(self) -> Command:
        return self._header.command

    @property
    def version(self) -> Version:
        return self._header.version

    def length(self) -> int:
        return Header.LENGTH + len(self._entries) * Entry.LENGTH

    def is_whole_table_request(self) -> bool:
        # RFC 1058 Section 3.4.1 / RFC 2453 Section 3.9.1
        if self.command != Command.REQUEST or len(self._entries) != 1:
            return False
        entry = self._entries[0]
        return entry.address_family_identifier == AFI.UNSPECIFIED and entry.metric == Metric.INFINITY

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Packet) or type(self) is not type(other):
            return False
        return self._header == other._header and self._entries == other._entries

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash((self._header, self._entries))

    def __str__(self) -> str:
        if not self._entries:
            return f'rip {self._header} (no entry)'
        return f'rip {self._header} ' + ', '.join(str(entry) for entry in self._entries)

    def __repr__(self) -> str:
        return f'{type(self).__name__}(header={self._header!r}, entries={list(self._entries)!r})'


@Packet.register
class PacketV1(Packet):
    VERSION = Version.v1
    ENTRY = EntryV1

    __slots__ = ()

    _entries: tuple[EntryV1, ...]

    @property
    def entries(self) -> tuple[EntryV1, ...]:
        return self._entries


@Packet.register
class PacketV2(Packet):
    VERSION = Version.v2
    ENTRY = EntryV2

    __slots__ = ()

    _entries: tuple[EntryV2, ...]

    @property
    def entries(self) -> tuple[EntryV2, ...]:
        return self._entries


def make_v1_packet(header: Header, entries: Iterable[EntryV1] = ()) -> PacketV1:
    return PacketV1.make_packet(header, entries)


def make_v2_packet(header: Header, entries: Iterable[EntryV2] = ()) -> PacketV2:
    return PacketV2.make_packet(header, entries)
