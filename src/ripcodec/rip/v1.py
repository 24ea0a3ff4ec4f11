"""v1.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from ipaddress import IPv4Address
from typing import ClassVar

from ripcodec.rip.entry import Entry
from ripcodec.rip.entry import pack_ipv4
from ripcodec.rip.entry import pack_metric
from ripcodec.rip.family import AFI
from ripcodec.rip.version import Version
from ripcodec.util.types import Buffer


# ==================================================================== EntryV1
# RFC 1058 Section 3.1

#  0                   1                   2                   3
#  0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# | address family identifier (2) |      must be zero (2)         |
# +-------------------------------+-------------------------------+
# |                         IPv4 address (4)                      |
# +---------------------------------------------------------------+
# |                        must be zero (4)                       |
# +---------------------------------------------------------------+
# |                        must be zero (4)                       |
# +---------------------------------------------------------------+
# |                           metric (4)                          |
# +---------------------------------------------------------------+


class EntryV1(Entry):
    VERSION = Version.v1

    __slots__ = ()

    ZERO_2: ClassVar[bytes] = bytes(2)
    ZERO_8: ClassVar[bytes] = bytes(8)

    @classmethod
    def make_entry(
        cls,
        address_family_identifier: int,
        ip_address: IPv4Address | str | int,
        metric: int,
    ) -> EntryV1:
        """Create a RIPv1 entry from its values.

        Raises:
            InvalidAddressFamily: the identifier is not a known one
            ValueError: the address or the metric is out of range
            TypeError: a value of the wrong kind was given
        """
        afi = AFI.from_int(address_family_identifier)
        return cls(afi.pack_afi() + cls.ZERO_2 + pack_ipv4(ip_address) + cls.ZERO_8 + pack_metric(metric))

    @classmethod
    def unpack_entry(cls, data: Buffer, offset: int = 0) -> EntryV1:
        cls._check_length(data)
        packed = bytes(data)
        afi = AFI.unpack_afi(packed[0:2], offset)
        # reserved fields are ignored on receipt and never re-emitted
        return cls(afi.pack_afi() + cls.ZERO_2 + packed[4:8] + cls.ZERO_8 + packed[16:20])

    def __str__(self) -> str:
        return f'{self.address_family_identifier} {self.ip_address} metric {self.metric}'

    def __repr__(self) -> str:
        return (
            f'EntryV1(address_family_identifier={self.address_family_identifier}, '
            f'ip_address={self.ip_address}, metric={self.metric})'
        )
