"""Per-session address histogram: ingest packets, reduce, render."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from ..core.config import settings
from ..core.models import RelationshipMode, TopNResult
from ..extractor import AddressKeyExtractor
from ..logging import get_logger
from ..rendering.chart_generator import address_bar_chart
from .count_histogram import CountHistogram
from .reducer import TopNReducer

logger = get_logger(__name__)


class AddressHistogram:
    """Histogram of the most frequent IPv4/IPv6 addresses in a capture.

    Packets are fed as network-layer bytes through :meth:`ingest_packet`,
    or a whole frequency tree is loaded with :meth:`from_iptree`.
    """

    def __init__(
        self,
        relationship: RelationshipMode | str | None = None,
        max_bars: Optional[int] = None,
    ) -> None:
        self.extractor = AddressKeyExtractor(
            relationship if relationship is not None else settings.relationship
        )
        self.parent_count_histogram = CountHistogram(
            settings.max_bars if max_bars is None else max_bars
        )
        self.packets_seen = 0

    @property
    def relationship(self) -> RelationshipMode:
        return self.extractor.relationship

    @relationship.setter
    def relationship(self, value: RelationshipMode | str) -> None:
        self.extractor.relationship = RelationshipMode.parse(value)

    @property
    def max_bars(self) -> int:
        return self.parent_count_histogram.max_bars

    @property
    def plot(self):
        return self.parent_count_histogram.parent_plot

    def ingest_packet(self, data: bytes) -> int:
        """Count the addresses of one network-layer payload.

        Returns the number of keys counted (0, 1 or 2).
        """
        self.packets_seen += 1
        return self.extractor.ingest(data, self.parent_count_histogram)

    def ingest(self, payloads: Iterable[bytes]) -> int:
        """Ingest every payload in ``payloads`` and return the keys counted."""
        counted = 0
        for data in payloads:
            counted += self.ingest_packet(data)
        logger.info(
            "Ingested %d packets: %d keys counted, %d skipped",
            self.packets_seen,
            counted,
            self.extractor.skipped,
        )
        return counted

    def from_iptree(self, tree) -> TopNResult:
        """Replace the top list and sum with those exported by ``tree``."""
        result = TopNReducer(self.max_bars).from_tree(tree)
        self.parent_count_histogram.set_top_list(result.entries)
        self.parent_count_histogram.set_count_sum(result.total_count)
        return result

    def top_n(self) -> TopNResult:
        return self.parent_count_histogram.result()

    def quick_config(
        self,
        relationship: RelationshipMode | str,
        title: str,
        subtitle: str,
    ) -> None:
        """Apply the standard layout for an address chart."""
        self.relationship = relationship
        plot = self.plot
        plot.title = title
        plot.subtitle = subtitle
        plot.title_on_bottom = True
        plot.pad_left_factor = 0.0
        plot.pad_right_factor = 0.0
        plot.x_label = ""
        plot.y_label = ""

    def render(self, path: str | Path | None = None) -> bytes:
        """Render the histogram to PNG bytes, optionally writing ``path``."""
        png = address_bar_chart(self.top_n(), self.plot)
        if path is not None and png:
            Path(path).write_bytes(png)
        return png
