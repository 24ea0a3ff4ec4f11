"""entry.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from ipaddress import IPv4Address
from struct import pack
from struct import unpack
from typing import ClassVar, Type, TypeVar

from ripcodec.rip.family import AFI
from ripcodec.rip.metric import Metric
from ripcodec.rip.version import Version
from ripcodec.util.types import Buffer

E = TypeVar('E', bound='Entry')


def pack_ipv4(address: IPv4Address | str | int) -> bytes:
    """Return the four network order bytes of an IPv4 address.

    Raises:
        ValueError: the value is not a valid IPv4 address
        TypeError: the value is not an address, a string or an integer
    """
    if isinstance(address, IPv4Address):
        return address.packed
    if isinstance(address, bool) or not isinstance(address, (str, int)):
        raise TypeError(f'can not use {type(address).__name__} as an IPv4 address')
    return IPv4Address(address).packed


def pack_metric(metric: int) -> bytes:
    if isinstance(metric, bool) or not isinstance(metric, int):
        raise TypeError(f'metric must be an integer, not {type(metric).__name__}')
    if not 0 <= metric <= Metric.MAX:
        raise ValueError(f'metric value out of range: {metric}')
    return pack('!L', metric)


# ====================================================================== Entry
# Both versions use 20 bytes records, only the first two bytes (AFI), the
# address and the metric are at the same place.


class Entry:
    LENGTH: ClassVar[int] = 20
    VERSION: ClassVar[Version]

    __slots__ = ('_packed',)

    def __init__(self, packed: bytes) -> None:
        """Initialize from packed wire-format bytes.

        NO validation - trusted internal use only.
        Use unpack_entry() for wire data or make_entry() for semantic construction.

        Args:
            packed: 20 bytes record, reserved fields already zeroed
        """
        self._packed: bytes = packed

    @classmethod
    def unpack_entry(cls: Type[E], data: Buffer, offset: int = 0) -> E:
        raise NotImplementedError('unpack_entry not implemented in subclass')

    @staticmethod
    def _check_length(data: Buffer) -> None:
        # the parser slices the packet, anything else is a programming error
        if len(data) != Entry.LENGTH:
            raise ValueError(f'a RIP entry is {Entry.LENGTH} bytes, got {len(data)}')

    @property
    def address_family_identifier(self) -> AFI:
        return AFI.unpack_afi(self._packed[0:2])

    @property
    def ip_address(self) -> IPv4Address:
        return IPv4Address(self._packed[4:8])

    @property
    def metric(self) -> Metric:
        return Metric(unpack('!L', self._packed[16:20])[0])

    def pack_entry(self) -> bytes:
        return self._packed

    def __len__(self) -> int:
        return self.LENGTH

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry) or type(self) is not type(other):
            return False
        return self._packed == other._packed

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash((self.VERSION, self._packed))

