# src/netviz/__init__.py
from .core.models import RelationshipMode, FrequencyEntry, TopNResult
from .extractor import AddressKeyExtractor, extract_keys, format_ipv4, format_ipv6
from .histogram import AddressHistogram, CountHistogram, TopNReducer, reduce_top_n
from .iptree import IPTree, AddrElem
from .rendering import PlotConfig, address_bar_chart
from .capture import iter_network_payloads, validate_capture_file
from .utils import export_to_csv


__all__ = [
    "RelationshipMode",
    "FrequencyEntry",
    "TopNResult",
    "AddressKeyExtractor",
    "extract_keys",
    "format_ipv4",
    "format_ipv6",
    "AddressHistogram",
    "CountHistogram",
    "TopNReducer",
    "reduce_top_n",
    "IPTree",
    "AddrElem",
    "PlotConfig",
    "address_bar_chart",
    "iter_network_payloads",
    "validate_capture_file",
    "export_to_csv",
]
