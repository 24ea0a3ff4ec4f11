"""parser.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from typing import TypeAlias, cast

from ripcodec.logger import log
from ripcodec.logger import lazyexc
from ripcodec.logger import lazyformat
from ripcodec.logger import lazymsg
from ripcodec.rip.entry import Entry
from ripcodec.rip.error import MalformedEntryData
from ripcodec.rip.error import RIPError
from ripcodec.rip.error import TooManyEntries
from ripcodec.rip.header import Header
from ripcodec.rip.packet import Packet
from ripcodec.rip.packet import PacketV1
from ripcodec.rip.packet import PacketV2
from ripcodec.util.types import Buffer

# The class of the packet is the version tag:
#   match parse(data):
#       case PacketV1(header, entries): ...
#       case PacketV2(header, entries): ...
ParsedPacket: TypeAlias = PacketV1 | PacketV2


def parse(data: Buffer) -> ParsedPacket:
    """Decode one RIP datagram payload.

    The header is decoded first, its version selects the layout used for
    every 20 bytes entry which follows. The first problem found aborts the
    decoding, no partial packet is ever returned.

    Raises:
        TooShort: less than 4 bytes were given
        InvalidCommand: the command is neither a request nor a response
        InvalidVersion: the version is neither 1 nor 2
        MalformedEntryData: the entries are not made of 20 bytes records
        TooManyEntries: more than 25 entries are present
        InvalidAddressFamily: an entry uses an unsupported address family
    """
    raw = bytes(data)
    log.debug(lazyformat('received RIP', raw), 'wire')

    try:
        packet = _parse(raw)
    except RIPError as exc:
        log.debug(lazyexc('invalid RIP packet,', exc), 'parser')
        raise

    log.debug(
        lazymsg(
            'decoded {command} {version} with {count} entries',
            command=packet.command,
            version=packet.version,
            count=len(packet.entries),
        ),
        'parser',
    )
    return packet


def _parse(data: bytes) -> ParsedPacket:
    header = Header.unpack_header(data)

    remainder = len(data) - Header.LENGTH
    if remainder % Entry.LENGTH:
        raise MalformedEntryData(
            f'{remainder} bytes follow the header, not a multiple of {Entry.LENGTH}',
            Header.LENGTH + remainder - remainder % Entry.LENGTH,
        )

    count = remainder // Entry.LENGTH
    if count > Packet.MAX_ENTRIES:
        raise TooManyEntries(count, Packet.MAX_LENGTH)

    klass = Packet.klass(header.version)
    entries = []
    for offset in range(Header.LENGTH, len(data), Entry.LENGTH):
        entries.append(klass.ENTRY.unpack_entry(data[offset : offset + Entry.LENGTH], offset))

    return cast(ParsedPacket, klass.make_packet(header, entries))
