"""Centralized constant definitions for netviz."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Capture file magic numbers used for basic validation
# ---------------------------------------------------------------------------
MAGIC_PCAP_LE: bytes = b"\xd4\xc3\xb2\xa1"  # Little-endian PCAP
MAGIC_PCAP_BE: bytes = b"\xa1\xb2\xc3\xd4"  # Big-endian PCAP
MAGIC_PCAP_NS_LE: bytes = b"\x4d\x3c\xb2\xa1"  # Nanosecond PCAP, little-endian
MAGIC_PCAP_NS_BE: bytes = b"\xa1\xb2\x3c\x4d"  # Nanosecond PCAP, big-endian
MAGIC_PCAPNG: bytes = b"\x0a\x0d\x0d\x0a"  # PCAPNG format

CAPTURE_MAGICS: tuple[bytes, ...] = (
    MAGIC_PCAP_LE,
    MAGIC_PCAP_BE,
    MAGIC_PCAP_NS_LE,
    MAGIC_PCAP_NS_BE,
    MAGIC_PCAPNG,
)

# ---------------------------------------------------------------------------
# Network layer header geometry
# ---------------------------------------------------------------------------
IPV4_VERSION: int = 4
IPV6_VERSION: int = 6
IPV4_MIN_HEADER_LEN: int = 20
IPV6_HEADER_LEN: int = 40
IPV4_ADDR_LEN: int = 4
IPV6_ADDR_LEN: int = 16

# Width every raw address is padded to before tie-break comparison
ADDRESS_COMPARE_WIDTH: int = IPV6_ADDR_LEN

# ---------------------------------------------------------------------------
# Histogram defaults
# ---------------------------------------------------------------------------
DEFAULT_MAX_BARS: int = 10

__all__ = [
    "MAGIC_PCAP_LE",
    "MAGIC_PCAP_BE",
    "MAGIC_PCAP_NS_LE",
    "MAGIC_PCAP_NS_BE",
    "MAGIC_PCAPNG",
    "CAPTURE_MAGICS",
    "IPV4_VERSION",
    "IPV6_VERSION",
    "IPV4_MIN_HEADER_LEN",
    "IPV6_HEADER_LEN",
    "IPV4_ADDR_LEN",
    "IPV6_ADDR_LEN",
    "ADDRESS_COMPARE_WIDTH",
    "DEFAULT_MAX_BARS",
]
