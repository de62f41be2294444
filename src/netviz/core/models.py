"""Core data structures shared by the extractor, reducer and renderer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Tuple

import pandas as pd

from ..exceptions import ConfigurationError


class RelationshipMode(str, Enum):
    """Which address of a packet contributes to the histogram."""

    SOURCE = "source"
    DESTINATION = "destination"
    SOURCE_OR_DESTINATION = "source_or_destination"

    @property
    def includes_source(self) -> bool:
        return self in (RelationshipMode.SOURCE, RelationshipMode.SOURCE_OR_DESTINATION)

    @property
    def includes_destination(self) -> bool:
        return self in (RelationshipMode.DESTINATION, RelationshipMode.SOURCE_OR_DESTINATION)

    @classmethod
    def parse(cls, value: "str | RelationshipMode") -> "RelationshipMode":
        """Return the mode named by ``value``.

        Accepts the enum values as well as the short CLI spellings
        ``src``, ``dst`` and ``both``.
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower().replace("-", "_")
        name = _RELATIONSHIP_ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            raise ConfigurationError(
                f"Unknown relationship mode: {value!r}",
                suggestion="Use one of: src, dst, both",
            ) from None


_RELATIONSHIP_ALIASES: Dict[str, str] = {
    "src": "source",
    "dst": "destination",
    "both": "source_or_destination",
    "src_or_dst": "source_or_destination",
}


@dataclass(frozen=True)
class FrequencyEntry:
    """One histogram bar: an address key and how often it was seen.

    The empty entry (``key=""``, ``count=0``) marks a padding slot.
    """

    key: str = ""
    count: int = 0

    @classmethod
    def empty(cls) -> "FrequencyEntry":
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.count == 0 and not self.key


@dataclass(frozen=True)
class TopNResult:
    """Fixed-width top-N projection of an address population.

    ``entries`` always holds exactly the configured capacity of slots.
    ``total_count`` covers every observation, including those that did not
    make it into ``entries``.
    """

    entries: Tuple[FrequencyEntry, ...] = ()
    total_count: int = 0

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[FrequencyEntry]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> FrequencyEntry:
        return self.entries[index]

    @property
    def capacity(self) -> int:
        return len(self.entries)

    @property
    def shown_count(self) -> int:
        """Sum of counts across the visible slots."""
        return sum(e.count for e in self.entries)

    def non_empty(self) -> List[FrequencyEntry]:
        return [e for e in self.entries if not e.is_empty]

    def as_pairs(self) -> List[Tuple[str, int]]:
        return [(e.key, e.count) for e in self.entries]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "top": [{"address": e.key, "count": e.count} for e in self.entries],
            "total_count": self.total_count,
        }

    def as_dataframe(self) -> pd.DataFrame:
        """Return the slots as a DataFrame with rank, address, count and share."""
        rows = []
        for rank, entry in enumerate(self.entries, start=1):
            share = entry.count / self.total_count if self.total_count else 0.0
            rows.append(
                {
                    "rank": rank,
                    "address": entry.key,
                    "count": entry.count,
                    "share": share,
                }
            )
        return pd.DataFrame(rows, columns=["rank", "address", "count", "share"])


__all__ = ["RelationshipMode", "FrequencyEntry", "TopNResult"]
