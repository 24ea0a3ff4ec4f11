"""json.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from typing import Any

from ripcodec.rip.command import Command
from ripcodec.rip.entry import Entry
from ripcodec.rip.family import AFI
from ripcodec.rip.header import Header
from ripcodec.rip.packet import Packet
from ripcodec.rip.packet import PacketV1
from ripcodec.rip.packet import PacketV2
from ripcodec.rip.v1 import EntryV1
from ripcodec.rip.v2 import EntryV2
from ripcodec.rip.version import Version


def entry_to_json(entry: Entry) -> dict[str, Any]:
    if isinstance(entry, EntryV2):
        return {
            'address-family': str(entry.address_family_identifier),
            'route-tag': entry.route_tag,
            'ip-address': str(entry.ip_address),
            'subnet-mask': str(entry.subnet_mask),
            'next-hop': str(entry.next_hop),
            'metric': int(entry.metric),
        }
    return {
        'address-family': str(entry.address_family_identifier),
        'ip-address': str(entry.ip_address),
        'metric': int(entry.metric),
    }


def packet_to_json(packet: Packet) -> dict[str, Any]:
    return {
        'command': str(packet.command),
        'version': int(packet.version),
        'entries': [entry_to_json(entry) for entry in packet.entries],
    }


def _afi(value: Any) -> AFI:
    if isinstance(value, str):
        return AFI.from_string(value)
    return AFI.from_int(value)


def _command(value: Any) -> Command:
    if isinstance(value, str):
        return Command.from_string(value)
    return Command.unpack_command(value)


def _object(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f'an entry must be a JSON object, not {type(data).__name__}')
    return data


def _entry_v1(data: dict[str, Any]) -> EntryV1:
    data = _object(data)
    return EntryV1.make_entry(
        _afi(data.get('address-family', 'ip')),
        data['ip-address'],
        data['metric'],
    )


def _entry_v2(data: dict[str, Any]) -> EntryV2:
    data = _object(data)
    return EntryV2.make_entry(
        _afi(data.get('address-family', 'ip')),
        data.get('route-tag', 0),
        data['ip-address'],
        data.get('subnet-mask', '0.0.0.0'),
        data.get('next-hop', '0.0.0.0'),
        data['metric'],
    )


def packet_from_json(data: dict[str, Any]) -> PacketV1 | PacketV2:
    """Build a packet from the dictionary produced by packet_to_json.

    The address family defaults to ip, the route tag to 0 and the
    subnet mask and next hop to 0.0.0.0.

    Raises:
        ValueError: a field is missing or has an invalid value (RIPError included)
        TypeError: a field has the wrong type
    """
    if not isinstance(data, dict):
        raise TypeError(f'a packet must be a JSON object, not {type(data).__name__}')
    try:
        version = Version.from_int(data['version'])
        header = Header.make_header(_command(data['command']), version)
        entries = data.get('entries', [])
        if version == Version.V1:
            return PacketV1.make_packet(header, [_entry_v1(entry) for entry in entries])
        return PacketV2.make_packet(header, [_entry_v2(entry) for entry in entries])
    except KeyError as exc:
        raise ValueError(f'missing field {exc.args[0]}') from None
