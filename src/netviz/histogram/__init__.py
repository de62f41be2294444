from .reducer import TopNReducer, rank_key, reduce_top_n, sort_entries
from .count_histogram import CountHistogram
from .address_histogram import AddressHistogram

__all__ = [
    "AddressHistogram",
    "CountHistogram",
    "TopNReducer",
    "rank_key",
    "reduce_top_n",
    "sort_entries",
]
