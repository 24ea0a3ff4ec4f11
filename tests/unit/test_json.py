# encoding: utf-8
"""test_json.py

Tests for the JSON representation of RIP packets used by the command line.
"""

import pytest

from ripcodec import parse
from ripcodec.rip.error import InvalidAddressFamily
from ripcodec.rip.error import InvalidCommand
from ripcodec.rip.error import TooManyEntries
from ripcodec.rip.json import packet_from_json
from ripcodec.rip.json import packet_to_json
from ripcodec.rip.packet import PacketV1
from ripcodec.rip.packet import PacketV2
from ripcodec.rip.serializer import serialize

V2_EXAMPLE = bytes([2, 2, 0, 0, 0, 2, 1, 2, 192, 0, 2, 100, 255, 255, 255, 0, 192, 0, 2, 111, 4, 3, 2, 1])
V1_EXAMPLE = bytes([1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 16])


class TestToJson:
    def test_v2(self) -> None:
        assert packet_to_json(parse(V2_EXAMPLE)) == {
            'command': 'response',
            'version': 2,
            'entries': [
                {
                    'address-family': 'ip',
                    'route-tag': 258,
                    'ip-address': '192.0.2.100',
                    'subnet-mask': '255.255.255.0',
                    'next-hop': '192.0.2.111',
                    'metric': 67305985,
                }
            ],
        }

    def test_v1(self) -> None:
        assert packet_to_json(parse(V1_EXAMPLE)) == {
            'command': 'request',
            'version': 1,
            'entries': [{'address-family': 'unspecified', 'ip-address': '0.0.0.0', 'metric': 16}],
        }


class TestFromJson:
    def test_back_and_forth(self) -> None:
        for data in (V1_EXAMPLE, V2_EXAMPLE):
            assert serialize(packet_from_json(packet_to_json(parse(data)))) == data

    def test_defaults(self) -> None:
        packet = packet_from_json(
            {'command': 'response', 'version': 2, 'entries': [{'ip-address': '10.0.0.0', 'metric': 1}]}
        )
        assert isinstance(packet, PacketV2)
        entry = packet.entries[0]
        assert str(entry.address_family_identifier) == 'ip'
        assert entry.route_tag == 0
        assert str(entry.subnet_mask) == '0.0.0.0'
        assert str(entry.next_hop) == '0.0.0.0'

    def test_numeric_values(self) -> None:
        packet = packet_from_json(
            {'command': 2, 'version': 1, 'entries': [{'address-family': 2, 'ip-address': '10.0.0.0', 'metric': 1}]}
        )
        assert isinstance(packet, PacketV1)

    def test_no_entries(self) -> None:
        assert packet_from_json({'command': 'request', 'version': 2}).entries == ()

    def test_missing_field(self) -> None:
        with pytest.raises(ValueError, match='missing field version'):
            packet_from_json({'command': 'request'})
        with pytest.raises(ValueError, match='missing field metric'):
            packet_from_json({'command': 'request', 'version': 1, 'entries': [{'ip-address': '10.0.0.0'}]})

    def test_invalid_values(self) -> None:
        with pytest.raises(ValueError):
            packet_from_json({'command': 'poll', 'version': 2})
        with pytest.raises(InvalidCommand):
            packet_from_json({'command': 5, 'version': 2})
        with pytest.raises(ValueError):
            packet_from_json({'command': 'request', 'version': 3})
        entry = {'address-family': 10, 'ip-address': '::', 'metric': 1}
        with pytest.raises(InvalidAddressFamily):
            packet_from_json({'command': 'request', 'version': 2, 'entries': [entry]})

    def test_too_many_entries(self) -> None:
        entries = [{'ip-address': '10.0.0.0', 'metric': 1}] * 26
        with pytest.raises(TooManyEntries):
            packet_from_json({'command': 'response', 'version': 1, 'entries': entries})

    def test_wrong_types(self) -> None:
        with pytest.raises(TypeError):
            packet_from_json(['command', 'version'])  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            packet_from_json({'command': 'request', 'version': 2, 'entries': ['10.0.0.0']})
