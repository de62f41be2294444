import pytest

from netviz.core.models import RelationshipMode
from netviz.exceptions import ConfigurationError
from netviz.extractor import (
    AddressKeyExtractor,
    extract_keys,
    format_ipv4,
    format_ipv6,
    key_to_packed,
)
from netviz.histogram import CountHistogram
from tests.fixtures.packet_factory import PacketFactory


V6_KEY = "2001:0db8:0000:0000:0000:0000:0000:0001"


def test_format_ipv4():
    assert format_ipv4(bytes([192, 0, 2, 1])) == "192.0.2.1"


def test_format_ipv6_is_fixed_width():
    key = format_ipv6(bytes.fromhex("20010db8000000000000000000000001"))
    assert key == V6_KEY
    assert "::" not in key


def test_format_rejects_wrong_width():
    with pytest.raises(ValueError):
        format_ipv4(b"\x01\x02\x03")
    with pytest.raises(ValueError):
        format_ipv6(b"\x00" * 4)


def test_key_to_packed_inverts_formatting():
    assert key_to_packed("10.0.0.1") == bytes([10, 0, 0, 1])
    assert key_to_packed(V6_KEY) == bytes.fromhex("20010db8000000000000000000000001")


@pytest.mark.parametrize(
    "mode,expected",
    [
        (RelationshipMode.SOURCE, ["10.0.0.1"]),
        (RelationshipMode.DESTINATION, ["10.0.0.2"]),
        (RelationshipMode.SOURCE_OR_DESTINATION, ["10.0.0.1", "10.0.0.2"]),
    ],
)
def test_extract_keys_ipv4_relationships(mode, expected):
    data = PacketFactory.ipv4_bytes("10.0.0.1", "10.0.0.2")
    assert extract_keys(data, mode) == expected


def test_extract_keys_ipv6_source():
    data = PacketFactory.ipv6_bytes("2001:db8::1", "2001:db8::2")
    assert extract_keys(data, RelationshipMode.SOURCE) == [V6_KEY]


def test_extract_keys_skips_non_ip():
    assert extract_keys(b"\x00\x01\x08\x00" * 10, RelationshipMode.SOURCE_OR_DESTINATION) == []
    assert extract_keys(b"", RelationshipMode.SOURCE) == []


def test_ipv4_and_ipv6_keys_never_collide():
    v4 = extract_keys(PacketFactory.ipv4_bytes("0.0.0.1", "0.0.0.1"), RelationshipMode.SOURCE)
    v6 = extract_keys(PacketFactory.ipv6_bytes("::1", "::1"), RelationshipMode.SOURCE)
    assert v4 != v6


def test_extractor_ingest_counts_loopback_twice():
    hist = CountHistogram(max_bars=2)
    extractor = AddressKeyExtractor("both")
    counted = extractor.ingest(PacketFactory.ipv4_bytes("127.0.0.1", "127.0.0.1"), hist)
    assert counted == 2
    assert hist.counts["127.0.0.1"] == 2


def test_extractor_tracks_skipped_payloads():
    extractor = AddressKeyExtractor(RelationshipMode.DESTINATION)
    assert extractor(b"garbage") == []
    assert extractor.skipped == 1


def test_relationship_aliases():
    assert RelationshipMode.parse("src") is RelationshipMode.SOURCE
    assert RelationshipMode.parse("dst") is RelationshipMode.DESTINATION
    assert RelationshipMode.parse("Both") is RelationshipMode.SOURCE_OR_DESTINATION
    assert RelationshipMode.parse("source-or-destination") is RelationshipMode.SOURCE_OR_DESTINATION
    with pytest.raises(ConfigurationError):
        RelationshipMode.parse("sideways")
