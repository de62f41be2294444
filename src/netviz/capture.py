"""Read network-layer payloads out of pcap/pcapng captures."""

from __future__ import annotations

from pathlib import Path
from typing import Generator, Optional

from .core.constants import CAPTURE_MAGICS
from .core.decorators import handle_capture_errors, log_performance
from .core.dependencies import container
from .exceptions import CorruptCaptureError
from .logging import get_logger

logger = get_logger(__name__)


def validate_capture_file(filepath: str | Path) -> bool:
    """Return ``True`` if ``filepath`` appears to be a valid PCAP/PCAPNG file."""

    path = Path(filepath)
    if not path.is_file():
        logger.warning("Capture file does not exist: %s", filepath)
        return False
    try:
        with path.open("rb") as f:
            magic = f.read(4)
    except OSError as exc:
        logger.warning("Failed to read file %s: %s", filepath, exc)
        return False

    if magic in CAPTURE_MAGICS:
        return True

    logger.warning("Invalid capture magic number %s for %s", magic.hex(), filepath)
    return False


def network_payload(packet) -> bytes:
    """Return the network-layer bytes of a scapy ``packet``.

    The outermost IPv4 or IPv6 layer is used when present, so tunnelled
    packets count under their outer addresses. Otherwise the link layer is
    stripped and whatever it carried is returned unchanged.
    """
    ip_cls = container.get("scapy_inet", feature="capture reading").IP
    ipv6_cls = container.get("scapy_inet6", feature="capture reading").IPv6
    layer = packet
    while layer:
        if isinstance(layer, (ip_cls, ipv6_cls)):
            return bytes(layer)
        layer = layer.payload
    return bytes(packet.payload)


@handle_capture_errors
@log_performance
def iter_network_payloads(
    filepath: str | Path, max_packets: Optional[int] = None
) -> Generator[bytes, None, None]:
    """Yield the network-layer payload of each packet in ``filepath``."""
    if not validate_capture_file(filepath):
        raise CorruptCaptureError(
            f"Not a readable pcap/pcapng file: {filepath}",
            suggestion="Check the path and that the file is a packet capture",
        )
    reader_cls = container.get("scapy_utils", feature="capture reading").PcapReader
    return _read_payloads(reader_cls, str(filepath), max_packets)


def _read_payloads(reader_cls, filepath: str, max_packets: Optional[int]) -> Generator[bytes, None, None]:
    count = 0
    with reader_cls(filepath) as reader:
        for packet in reader:
            if max_packets is not None and count >= max_packets:
                break
            count += 1
            yield network_payload(packet)
    logger.info("Read %d packets from %s", count, filepath)


__all__ = ["iter_network_payloads", "network_payload", "validate_capture_file"]
