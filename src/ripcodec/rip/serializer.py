"""serializer.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from typing import Type

from ripcodec.logger import log
from ripcodec.logger import lazyformat
from ripcodec.logger import lazymsg
from ripcodec.rip.error import TooManyEntries
from ripcodec.rip.packet import Packet
from ripcodec.rip.packet import PacketV1
from ripcodec.rip.packet import PacketV2


def _serialize(klass: Type[Packet], packet: Packet) -> bytes:
    if not isinstance(packet, klass):
        raise TypeError(f'expected a {klass.__name__}, got {type(packet).__name__}')

    # a packet built with make_packet can not get here, never truncate one which was not
    if len(packet.entries) > Packet.MAX_ENTRIES:
        raise TooManyEntries(len(packet.entries))

    data = packet.header.pack_header() + b''.join(entry.pack_entry() for entry in packet.entries)

    log.debug(
        lazymsg(
            'encoded {command} {version} with {count} entries',
            command=packet.command,
            version=packet.version,
            count=len(packet.entries),
        ),
        'serializer',
    )
    log.debug(lazyformat('sending RIP', data), 'wire')
    return data


def serialize_v1_packet(packet: PacketV1) -> bytes:
    """Encode a RIPv1 packet into its wire format."""
    return _serialize(PacketV1, packet)


def serialize_v2_packet(packet: PacketV2) -> bytes:
    """Encode a RIPv2 packet into its wire format."""
    return _serialize(PacketV2, packet)


def serialize(packet: PacketV1 | PacketV2) -> bytes:
    """Encode a packet of either version."""
    if isinstance(packet, PacketV1):
        return serialize_v1_packet(packet)
    if isinstance(packet, PacketV2):
        return serialize_v2_packet(packet)
    raise TypeError(f'can not serialize {type(packet).__name__}')
