"""Fuzzing tests for RIP packet decoding and encoding.

RIP Packet Structure (RFC 1058 / RFC 2453):
    - Command: 1 byte (1 = request, 2 = response)
    - Version: 1 byte (1 or 2)
    - Reserved: 2 bytes (ignored on receipt)
    - Entries: 0 to 25 records of 20 bytes

Test Coverage:
    - Random binary data never fails with anything but a RIPError
    - Any accepted payload encodes back to itself, reserved fields zeroed
    - Packets of 0 to 25 entries survive encoding then decoding
    - Truncation of valid payloads is always detected

Run Instructions:
    # Run all fuzzing tests
    python -m pytest tests/fuzz/ -v -m fuzz

    # Skip fuzzing tests
    python -m pytest tests/ -v -m "not fuzz"
"""

import pytest
from hypothesis import given, strategies as st, settings, HealthCheck

from ripcodec import parse
from ripcodec import serialize
from ripcodec.rip.command import Command
from ripcodec.rip.error import MalformedEntryData
from ripcodec.rip.error import RIPError
from ripcodec.rip.error import TooShort
from ripcodec.rip.family import AFI
from ripcodec.rip.header import Header
from ripcodec.rip.packet import PacketV1
from ripcodec.rip.packet import PacketV2
from ripcodec.rip.v1 import EntryV1
from ripcodec.rip.v2 import EntryV2
from ripcodec.rip.version import Version

# Mark all tests in this module as fuzz tests
pytestmark = pytest.mark.fuzz

u32 = st.integers(min_value=0, max_value=0xFFFFFFFF)
families = st.sampled_from([AFI.IP, AFI.UNSPECIFIED])
commands = st.sampled_from([Command.REQUEST, Command.RESPONSE])

v1_entries = st.builds(EntryV1.make_entry, families, u32, u32)
v2_entries = st.builds(
    EntryV2.make_entry,
    families,
    st.integers(min_value=0, max_value=0xFFFF),
    u32,
    u32,
    u32,
    u32,
)


@st.composite
def v1_packets(draw: st.DrawFn) -> PacketV1:
    header = Header.make_header(draw(commands), Version.V1)
    return PacketV1.make_packet(header, draw(st.lists(v1_entries, max_size=25)))


@st.composite
def v2_packets(draw: st.DrawFn) -> PacketV2:
    header = Header.make_header(draw(commands), Version.V2)
    return PacketV2.make_packet(header, draw(st.lists(v2_entries, max_size=25)))


@st.composite
def wire_payloads(draw: st.DrawFn) -> bytes:
    """A valid header followed by entries using the known address families."""
    command, version = draw(st.sampled_from([1, 2])), draw(st.sampled_from([1, 2]))
    header = bytes([command, version]) + draw(st.binary(min_size=2, max_size=2))
    count = draw(st.integers(min_value=0, max_value=25))
    entries = b''.join(
        draw(st.sampled_from([b'\x00\x00', b'\x00\x02'])) + draw(st.binary(min_size=18, max_size=18))
        for _ in range(count)
    )
    return header + entries


@given(data=st.binary(min_size=0, max_size=600))
@settings(suppress_health_check=[HealthCheck.too_slow])
def test_random_data_only_raises_rip_errors(data: bytes) -> None:
    try:
        packet = parse(data)
    except RIPError:
        return
    assert isinstance(packet, (PacketV1, PacketV2))
    assert len(serialize(packet)) == len(data)


@given(data=wire_payloads())
def test_accepted_payload_encodes_back(data: bytes) -> None:
    packet = parse(data)
    encoded = serialize(packet)
    assert len(encoded) == len(data)
    assert encoded[:2] == data[:2]
    assert encoded[2:4] == b'\x00\x00'
    assert parse(encoded) == packet
    if packet.version == Version.V2:
        assert encoded[4:] == data[4:]


@given(packet=v1_packets())
def test_v1_round_trip(packet: PacketV1) -> None:
    assert parse(serialize(packet)) == packet


@given(packet=v2_packets())
def test_v2_round_trip(packet: PacketV2) -> None:
    data = serialize(packet)
    assert len(data) == 4 + 20 * len(packet.entries)
    assert parse(data) == packet


@given(data=wire_payloads(), cut=st.integers(min_value=1, max_value=19))
def test_truncation_is_detected(data: bytes, cut: int) -> None:
    if len(data) <= 4:
        with pytest.raises(TooShort):
            parse(data[: max(0, 4 - cut)])
        return
    with pytest.raises(MalformedEntryData):
        parse(data[:-cut])
