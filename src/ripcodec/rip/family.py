"""family.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from struct import pack
from struct import unpack
from typing import ClassVar

from ripcodec.rip.error import InvalidAddressFamily
from ripcodec.util.types import Buffer


# ======================================================================== AFI
# https://www.iana.org/assignments/address-family-numbers/
# RIP only ever carries IPv4 (2), 0 is used by the "whole table" request.
# 0xFFFF starts an authentication entry (RFC 2453 Section 4.1), it is not
# supported and refused like any other unknown family


class AFI(int):
    UNSPECIFIED: ClassVar[int] = 0x0000  # RFC 1058 Section 3.4.1
    IP: ClassVar[int] = 0x0002  # RFC 1058 / RFC 2453

    unspecified: ClassVar[AFI]
    ip: ClassVar[AFI]

    _names: ClassVar[dict[int, str]] = {
        0x0000: 'unspecified',
        0x0002: 'ip',
    }

    common: ClassVar[dict[bytes, AFI]] = {}
    codes: ClassVar[dict[str, AFI]] = {}

    def pack_afi(self) -> bytes:
        return pack('!H', self)

    def name(self) -> str:
        return self._names.get(self, f'unknown-afi-{hex(self)}')

    def __repr__(self) -> str:
        return self.name()

    def __str__(self) -> str:
        return self.name()

    @staticmethod
    def unpack_afi(data: Buffer, offset: int | None = None) -> AFI:
        if len(data) < 2:
            raise ValueError(f'AFI data too short: need 2 bytes, got {len(data)}')
        key = bytes(data[:2])
        if key not in AFI.common:
            raise InvalidAddressFamily(unpack('!H', key)[0], offset)
        return AFI.common[key]

    @classmethod
    def from_int(cls, value: int) -> AFI:
        for afi in cls.common.values():
            if afi == value:
                return afi
        raise InvalidAddressFamily(value)

    @classmethod
    def from_string(cls, string: str) -> AFI:
        afi = cls.codes.get(string.lower(), None)
        if afi is None:
            raise ValueError(f'unknown address family {string}')
        return afi


AFI.unspecified = AFI(AFI.UNSPECIFIED)
AFI.ip = AFI(AFI.IP)

AFI.common = {
    AFI.unspecified.pack_afi(): AFI.unspecified,
    AFI.ip.pack_afi(): AFI.ip,
}

AFI.codes = {
    'unspecified': AFI.unspecified,
    'ip': AFI.ip,
    'ipv4': AFI.ip,
}
