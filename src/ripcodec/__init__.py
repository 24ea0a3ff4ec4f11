"""ripcodec

Encoder and decoder for RIP version 1 and 2 packets (RFC 1058, RFC 2453).

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from ripcodec.rip.error import RIPError
from ripcodec.rip.error import TooShort
from ripcodec.rip.error import InvalidCommand
from ripcodec.rip.error import InvalidVersion
from ripcodec.rip.error import MalformedEntryData
from ripcodec.rip.error import TooManyEntries
from ripcodec.rip.error import InvalidAddressFamily
from ripcodec.rip.error import VersionMismatch
from ripcodec.rip.command import Command
from ripcodec.rip.version import Version
from ripcodec.rip.family import AFI
from ripcodec.rip.metric import Metric
from ripcodec.rip.header import Header
from ripcodec.rip.entry import Entry
from ripcodec.rip.v1 import EntryV1
from ripcodec.rip.v2 import EntryV2
from ripcodec.rip.packet import Packet
from ripcodec.rip.packet import PacketV1
from ripcodec.rip.packet import PacketV2
from ripcodec.rip.packet import make_v1_packet
from ripcodec.rip.packet import make_v2_packet
from ripcodec.rip.parser import ParsedPacket
from ripcodec.rip.parser import parse
from ripcodec.rip.serializer import serialize
from ripcodec.rip.serializer import serialize_v1_packet
from ripcodec.rip.serializer import serialize_v2_packet

__all__ = [
    'RIPError',
    'TooShort',
    'InvalidCommand',
    'InvalidVersion',
    'MalformedEntryData',
    'TooManyEntries',
    'InvalidAddressFamily',
    'VersionMismatch',
    'Command',
    'Version',
    'AFI',
    'Metric',
    'Header',
    'Entry',
    'EntryV1',
    'EntryV2',
    'Packet',
    'PacketV1',
    'PacketV2',
    'ParsedPacket',
    'make_v1_packet',
    'make_v2_packet',
    'parse',
    'serialize',
    'serialize_v1_packet',
    'serialize_v2_packet',
]
