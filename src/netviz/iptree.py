"""Byte-wise prefix tree counting observations per IP address."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple, Union

from .core.constants import IPV4_ADDR_LEN, IPV6_ADDR_LEN
from .extractor import format_address

AddressLike = Union[str, bytes, ipaddress.IPv4Address, ipaddress.IPv6Address]
NetworkLike = Union[str, ipaddress.IPv4Network, ipaddress.IPv6Network]


@dataclass
class _Node:
    count: int = 0
    children: Dict[int, "_Node"] = field(default_factory=dict)


@dataclass(frozen=True)
class AddrElem:
    """A leaf exported from :class:`IPTree`: packed address and its count."""

    addr: bytes
    count: int

    def as_key(self) -> str:
        return format_address(self.addr)


def _packed(address: AddressLike) -> bytes:
    if isinstance(address, bytes):
        if len(address) not in (IPV4_ADDR_LEN, IPV6_ADDR_LEN):
            raise ValueError(f"Packed address must be 4 or 16 bytes, got {len(address)}")
        return address
    if isinstance(address, str):
        return ipaddress.ip_address(address).packed
    return address.packed


class IPTree:
    """Accumulate address counts in a trie keyed one byte per level.

    Every node stores the sum of counts beneath it, so both the grand total
    and byte-aligned prefix totals are answered without a scan. IPv4 and
    IPv6 addresses live under separate roots.
    """

    def __init__(self) -> None:
        self._roots: Dict[int, _Node] = {IPV4_ADDR_LEN: _Node(), IPV6_ADDR_LEN: _Node()}
        self._distinct = 0

    def add(self, address: AddressLike, count: int = 1) -> None:
        if count <= 0:
            raise ValueError(f"count must be positive, got {count}")
        raw = _packed(address)
        node = self._roots[len(raw)]
        node.count += count
        for octet in raw:
            child = node.children.get(octet)
            if child is None:
                child = node.children[octet] = _Node()
            node = child
            node.count += count
        if node.count == count:
            self._distinct += 1

    def sum(self) -> int:
        """Return the total of all counts added to the tree."""
        return sum(root.count for root in self._roots.values())

    def __len__(self) -> int:
        return self._distinct

    def __contains__(self, address: AddressLike) -> bool:
        return self.count(address) > 0

    def count(self, address: AddressLike) -> int:
        raw = _packed(address)
        return self._walk(self._roots[len(raw)], raw)

    def prefix_count(self, network: NetworkLike) -> int:
        """Return the total count of addresses inside ``network``.

        Only byte-aligned prefix lengths (``/0``, ``/8``, ``/16``, ...) are
        supported.
        """
        net = ipaddress.ip_network(network, strict=False)
        if net.prefixlen % 8:
            raise ValueError(f"Prefix length must be a multiple of 8, got /{net.prefixlen}")
        raw = net.network_address.packed
        return self._walk(self._roots[len(raw)], raw[: net.prefixlen // 8])

    @staticmethod
    def _walk(node: _Node, path: bytes) -> int:
        for octet in path:
            node = node.children.get(octet)
            if node is None:
                return 0
        return node.count

    def _iter_leaves(self) -> Iterator[Tuple[bytes, int]]:
        for width, root in self._roots.items():
            stack: List[Tuple[_Node, bytes]] = [(root, b"")]
            while stack:
                node, path = stack.pop()
                if len(path) == width:
                    yield path, node.count
                    continue
                for octet, child in node.children.items():
                    stack.append((child, path + bytes((octet,))))

    def get_histogram(self) -> List[AddrElem]:
        """Export every stored address with its count, in no particular order."""
        return [AddrElem(addr=addr, count=count) for addr, count in self._iter_leaves()]


__all__ = ["AddrElem", "IPTree"]
