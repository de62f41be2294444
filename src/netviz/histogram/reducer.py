"""Deterministic top-N reduction of an address frequency population."""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Tuple

from ..core.constants import ADDRESS_COMPARE_WIDTH
from ..core.models import FrequencyEntry, TopNResult
from ..exceptions import ConfigurationError
from ..extractor import format_address, key_to_packed
from ..logging import get_logger

logger = get_logger(__name__)

RankKey = Tuple[int, bytes, int]


def rank_key(count: int, raw: bytes) -> RankKey:
    """Return an ascending sort key for the top-N order.

    Higher counts come first. Equal counts are ordered by raw address bytes,
    most significant byte first, larger address first. Addresses are padded
    to a common width for the comparison; if two still compare equal the
    longer (IPv6) address wins.
    """
    padded = raw.ljust(ADDRESS_COMPARE_WIDTH, b"\x00")
    return (-count, bytes(0xFF - b for b in padded), -len(raw))


def sort_entries(entries: Iterable[FrequencyEntry]) -> List[FrequencyEntry]:
    """Return ``entries`` in top-N order, dropping non-positive counts."""
    live = [e for e in entries if e.count > 0]
    return sorted(live, key=lambda e: rank_key(e.count, key_to_packed(e.key)))


def _check_capacity(capacity: int) -> int:
    if capacity < 0:
        raise ConfigurationError(
            f"Top-N capacity must be zero or positive, got {capacity}",
            context="histogram configuration",
        )
    return capacity


def reduce_top_n(
    entries: Iterable[FrequencyEntry],
    capacity: int,
    total: Optional[int] = None,
) -> TopNResult:
    """Project ``entries`` onto exactly ``capacity`` ordered slots.

    Parameters
    ----------
    entries:
        The full population of ``(key, count)`` entries.
    capacity:
        Number of slots in the result. Missing slots are padded with
        :meth:`FrequencyEntry.empty`.
    total:
        Aggregate count supplied by the caller (for example a frequency
        tree's own sum). Defaults to the sum over ``entries``.
    """
    _check_capacity(capacity)
    entries = list(entries)
    ordered = sort_entries(entries)
    top = ordered[:capacity]
    top.extend(FrequencyEntry.empty() for _ in range(capacity - len(top)))
    if total is None:
        total = sum(e.count for e in entries if e.count > 0)
    logger.debug(
        "Reduced %d addresses to %d slots (total=%d)", len(ordered), capacity, total
    )
    return TopNResult(entries=tuple(top), total_count=total)


class TopNReducer:
    """Reduce address populations to a fixed number of histogram bars."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)

    def reduce(self, entries: Iterable[FrequencyEntry], total: Optional[int] = None) -> TopNResult:
        return reduce_top_n(entries, self.capacity, total)

    def from_counts(self, counts: Mapping[str, int]) -> TopNResult:
        """Reduce a key -> count mapping such as a :class:`collections.Counter`."""
        return self.reduce(FrequencyEntry(key, count) for key, count in counts.items())

    def from_tree(self, tree: Any) -> TopNResult:
        """Reduce the bulk export of a frequency tree.

        ``tree`` must provide ``get_histogram()`` returning elements with
        ``addr`` (packed bytes) and ``count``, plus ``sum()``.
        """
        elems = [e for e in tree.get_histogram() if e.count > 0]
        elems.sort(key=lambda e: rank_key(e.count, e.addr))
        top = [FrequencyEntry(format_address(e.addr), e.count) for e in elems[: self.capacity]]
        top.extend(FrequencyEntry.empty() for _ in range(self.capacity - len(top)))
        return TopNResult(entries=tuple(top), total_count=tree.sum())


__all__ = ["TopNReducer", "rank_key", "reduce_top_n", "sort_entries"]
