"""Map network-layer payloads to canonical address keys."""

from __future__ import annotations

import ipaddress
import struct
from typing import Any, List

from .core.cache import AddressCache
from .core.constants import IPV4_ADDR_LEN, IPV6_ADDR_LEN
from .core.models import RelationshipMode
from .logging import get_logger
from .parsers.ip import parse_ipv4, parse_ipv6

logger = get_logger(__name__)

_address_cache = AddressCache()

_IPV6_GROUPS = struct.Struct("!8H")


def format_ipv4(raw: bytes) -> str:
    """Return ``raw`` (4 bytes) in dotted-decimal form."""
    if len(raw) != IPV4_ADDR_LEN:
        raise ValueError(f"IPv4 address must be {IPV4_ADDR_LEN} bytes, got {len(raw)}")
    return str(ipaddress.IPv4Address(raw))


def format_ipv6(raw: bytes) -> str:
    """Return ``raw`` (16 bytes) as eight zero-padded hex groups.

    No ``::`` compression is applied, so every key has the same width.
    """
    if len(raw) != IPV6_ADDR_LEN:
        raise ValueError(f"IPv6 address must be {IPV6_ADDR_LEN} bytes, got {len(raw)}")
    return ":".join(f"{group:04x}" for group in _IPV6_GROUPS.unpack(raw))


def format_address(raw: bytes) -> str:
    """Format a packed IPv4 or IPv6 address as its address key."""
    if len(raw) == IPV4_ADDR_LEN:
        return format_ipv4(raw)
    return format_ipv6(raw)


@_address_cache.memoize
def key_to_packed(key: str) -> bytes:
    """Return the raw address bytes behind an address key.

    Keys that do not parse as an address fall back to their UTF-8 bytes so
    they still take part in a deterministic ordering.
    """
    try:
        return ipaddress.ip_address(key).packed
    except ValueError:
        return key.encode("utf-8")


def extract_keys(data: bytes, relationship: RelationshipMode) -> List[str]:
    """Return the address keys ``data`` contributes under ``relationship``.

    IPv4 is tried before IPv6. The source key, when requested, precedes the
    destination key. Payloads that are neither yield an empty list.
    """
    ip4 = parse_ipv4(data)
    if ip4 is not None:
        src, dst, fmt = ip4.src, ip4.dst, format_ipv4
    else:
        ip6 = parse_ipv6(data)
        if ip6 is None:
            return []
        src, dst, fmt = ip6.src, ip6.dst, format_ipv6

    keys: List[str] = []
    if relationship.includes_source:
        keys.append(fmt(src))
    if relationship.includes_destination:
        keys.append(fmt(dst))
    return keys


class AddressKeyExtractor:
    """Extract address keys for a fixed :class:`RelationshipMode`."""

    def __init__(self, relationship: RelationshipMode | str = RelationshipMode.SOURCE_OR_DESTINATION) -> None:
        self.relationship = RelationshipMode.parse(relationship)
        self.skipped = 0

    def extract(self, data: bytes) -> List[str]:
        keys = extract_keys(data, self.relationship)
        if not keys:
            self.skipped += 1
            logger.debug("Skipping non-IP payload of %d bytes", len(data or b""))
        return keys

    def ingest(self, data: bytes, histogram: Any) -> int:
        """Increment ``histogram`` once per extracted key.

        ``histogram`` only needs an ``increment(key, delta)`` method.
        Returns the number of keys counted.
        """
        keys = self.extract(data)
        for key in keys:
            histogram.increment(key, 1)
        return len(keys)

    __call__ = extract


__all__ = [
    "AddressKeyExtractor",
    "extract_keys",
    "format_address",
    "format_ipv4",
    "format_ipv6",
    "key_to_packed",
]
