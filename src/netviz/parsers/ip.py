"""Minimal IPv4/IPv6 header parsing for network-layer payloads.

Both parse functions are total: malformed or non-IP input returns ``None``
instead of raising, so callers can try one family after the other.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Optional

from ..core.constants import (
    IPV4_MIN_HEADER_LEN,
    IPV4_VERSION,
    IPV6_HEADER_LEN,
    IPV6_VERSION,
)

# version/ihl, tos, total length, id, flags/frag, ttl, proto, checksum, src, dst
_IPV4_HEADER = struct.Struct("!BBHHHBBH4s4s")
# version/class/flow, payload length, next header, hop limit, src, dst
_IPV6_HEADER = struct.Struct("!IHBB16s16s")


@dataclass(frozen=True)
class IPv4Header:
    ihl: int
    total_length: int
    protocol: int
    ttl: int
    src: bytes
    dst: bytes


@dataclass(frozen=True)
class IPv6Header:
    payload_length: int
    next_header: int
    hop_limit: int
    src: bytes
    dst: bytes


def parse_ipv4(data: bytes) -> Optional[IPv4Header]:
    """Return the IPv4 header of ``data`` or ``None`` if it is not IPv4."""
    if data is None or len(data) < IPV4_MIN_HEADER_LEN:
        return None
    (ver_ihl, _tos, total_length, _ident, _frag, ttl, proto, _csum, src, dst) = (
        _IPV4_HEADER.unpack_from(data)
    )
    if ver_ihl >> 4 != IPV4_VERSION:
        return None
    ihl = ver_ihl & 0x0F
    if ihl < 5 or ihl * 4 > len(data):
        return None
    return IPv4Header(
        ihl=ihl,
        total_length=total_length,
        protocol=proto,
        ttl=ttl,
        src=src,
        dst=dst,
    )


def parse_ipv6(data: bytes) -> Optional[IPv6Header]:
    """Return the IPv6 fixed header of ``data`` or ``None`` if it is not IPv6."""
    if data is None or len(data) < IPV6_HEADER_LEN:
        return None
    vtf, payload_length, next_header, hop_limit, src, dst = _IPV6_HEADER.unpack_from(data)
    if vtf >> 28 != IPV6_VERSION:
        return None
    return IPv6Header(
        payload_length=payload_length,
        next_header=next_header,
        hop_limit=hop_limit,
        src=src,
        dst=dst,
    )


__all__ = ["IPv4Header", "IPv6Header", "parse_ipv4", "parse_ipv6"]
