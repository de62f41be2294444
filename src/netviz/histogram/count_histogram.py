"""Accumulating key -> count mapping behind an address histogram."""

from __future__ import annotations

from collections import Counter
from typing import Optional, Sequence

from ..core.models import FrequencyEntry, TopNResult
from ..exceptions import ConfigurationError
from ..rendering.plot import PlotConfig
from .reducer import reduce_top_n


class CountHistogram:
    """Count observations per key and project them to ``max_bars`` slots.

    Counts accumulate through :meth:`increment`. A top list and sum can
    also be installed wholesale (for example from a frequency tree); once
    set they take precedence over the counter until :meth:`clear`, and
    later increments are folded into them.
    """

    def __init__(self, max_bars: int, plot: Optional[PlotConfig] = None) -> None:
        if max_bars < 0:
            raise ConfigurationError(
                f"max_bars must be zero or positive, got {max_bars}",
                suggestion="Set NETVIZ_MAX_BARS to a non-negative integer",
            )
        self.max_bars = max_bars
        self.parent_plot = plot or PlotConfig()
        self.counts: Counter[str] = Counter()
        self._top_list: Optional[tuple[FrequencyEntry, ...]] = None
        self._count_sum: Optional[int] = None

    def increment(self, key: str, delta: int = 1) -> None:
        self.counts[key] += delta
        if self._count_sum is not None:
            self._count_sum += delta
        if self._top_list is not None:
            self._merge_into_top_list(key, delta)

    def _merge_into_top_list(self, key: str, delta: int) -> None:
        # Keys outside the installed list only have the counts seen since.
        live = {e.key: e.count for e in self._top_list if not e.is_empty}
        if key in live:
            live[key] += delta
        else:
            live[key] = self.counts[key]
        merged = reduce_top_n(
            (FrequencyEntry(k, c) for k, c in live.items()), self.max_bars
        )
        self._top_list = merged.entries

    def set_top_list(self, entries: Sequence[FrequencyEntry]) -> None:
        """Install a precomputed top list, resized to ``max_bars`` slots."""
        top = list(entries[: self.max_bars])
        top.extend(FrequencyEntry.empty() for _ in range(self.max_bars - len(top)))
        self._top_list = tuple(top)

    def set_count_sum(self, total: int) -> None:
        self._count_sum = total

    def result(self) -> TopNResult:
        """Return the current :class:`TopNResult`."""
        derived = None
        if self._top_list is None or self._count_sum is None:
            derived = reduce_top_n(
                (FrequencyEntry(k, c) for k, c in self.counts.items()), self.max_bars
            )
        entries = self._top_list if self._top_list is not None else derived.entries
        total = self._count_sum if self._count_sum is not None else derived.total_count
        return TopNResult(entries=entries, total_count=total)

    def top_list(self) -> tuple[FrequencyEntry, ...]:
        return self.result().entries

    def count_sum(self) -> int:
        return self.result().total_count

    def clear(self) -> None:
        self.counts.clear()
        self._top_list = None
        self._count_sum = None

    def __len__(self) -> int:
        return len(self.counts)
