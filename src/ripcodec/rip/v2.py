"""v2.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from ipaddress import IPv4Address
from struct import pack
from struct import unpack
from typing import ClassVar

from ripcodec.rip.entry import Entry
from ripcodec.rip.entry import pack_ipv4
from ripcodec.rip.entry import pack_metric
from ripcodec.rip.family import AFI
from ripcodec.rip.version import Version
from ripcodec.util.types import Buffer


# ==================================================================== EntryV2
# RFC 2453 Section 4

#  0                   1                   2                   3
#  0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# | address family identifier (2) |        route tag (2)          |
# +-------------------------------+-------------------------------+
# |                         IPv4 address (4)                      |
# +---------------------------------------------------------------+
# |                         subnet mask (4)                       |
# +---------------------------------------------------------------+
# |                           next hop (4)                        |
# +---------------------------------------------------------------+
# |                           metric (4)                          |
# +---------------------------------------------------------------+


class EntryV2(Entry):
    VERSION = Version.v2

    ROUTE_TAG_MAX: ClassVar[int] = 0xFFFF

    __slots__ = ()

    @classmethod
    def make_entry(
        cls,
        address_family_identifier: int,
        route_tag: int,
        ip_address: IPv4Address | str | int,
        subnet_mask: IPv4Address | str | int,
        next_hop: IPv4Address | str | int,
        metric: int,
    ) -> EntryV2:
        """Create a RIPv2 entry from its values.

        Raises:
            InvalidAddressFamily: the identifier is not a known one
            ValueError: an address, the route tag or the metric is out of range
            TypeError: a value of the wrong kind was given
        """
        afi = AFI.from_int(address_family_identifier)
        if isinstance(route_tag, bool) or not isinstance(route_tag, int):
            raise TypeError(f'route tag must be an integer, not {type(route_tag).__name__}')
        if not 0 <= route_tag <= cls.ROUTE_TAG_MAX:
            raise ValueError(f'route tag value out of range: {route_tag}')
        return cls(
            afi.pack_afi()
            + pack('!H', route_tag)
            + pack_ipv4(ip_address)
            + pack_ipv4(subnet_mask)
            + pack_ipv4(next_hop)
            + pack_metric(metric)
        )

    @classmethod
    def unpack_entry(cls, data: Buffer, offset: int = 0) -> EntryV2:
        cls._check_length(data)
        packed = bytes(data)
        AFI.unpack_afi(packed[0:2], offset)
        return cls(packed)

    @property
    def route_tag(self) -> int:
        return unpack('!H', self._packed[2:4])[0]

    @property
    def subnet_mask(self) -> IPv4Address:
        return IPv4Address(self._packed[8:12])

    @property
    def next_hop(self) -> IPv4Address:
        return IPv4Address(self._packed[12:16])

    def __str__(self) -> str:
        return (
            f'{self.address_family_identifier} {self.ip_address}/{self.subnet_mask} '
            f'next-hop {self.next_hop} metric {self.metric} tag {self.route_tag}'
        )

    def __repr__(self) -> str:
        return (
            f'EntryV2(address_family_identifier={self.address_family_identifier}, '
            f'route_tag={self.route_tag}, ip_address={self.ip_address}, '
            f'subnet_mask={self.subnet_mask}, next_hop={self.next_hop}, metric={self.metric})'
        )
