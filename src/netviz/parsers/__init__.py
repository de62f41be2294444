from .ip import IPv4Header, IPv6Header, parse_ipv4, parse_ipv6

__all__ = ["IPv4Header", "IPv6Header", "parse_ipv4", "parse_ipv6"]
