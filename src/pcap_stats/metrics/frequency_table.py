"""Counting map from a port or IPv4 key to its number of occurrences."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterator, Optional

import pandas as pd


@dataclass(frozen=True)
class FrequencyEntry:
    key: int
    count: int
    percentage: float


class FrequencyTable:
    """Accumulate integer counts and produce a threshold-filtered view."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._counts: Counter[int] = Counter()

    def increment(self, key: int) -> None:
        """Count one more occurrence of ``key``."""
        self._counts[int(key)] += 1

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def filter(self, threshold: float) -> list[FrequencyEntry]:
        """Return entries whose share is strictly above ``threshold`` percent.

        Entries are sorted by ascending key. An empty table yields ``[]``.
        """
        total = self.total
        if total == 0:
            return []
        entries = []
        for key in sorted(self._counts):
            count = self._counts[key]
            percentage = 100.0 * count / total
            if percentage > threshold:
                entries.append(FrequencyEntry(key, count, percentage))
        return entries

    def items(self) -> list[tuple[int, int]]:
        return sorted(self._counts.items())

    def most_common(self, n: Optional[int] = None) -> list[tuple[int, int]]:
        return self._counts.most_common(n)

    def merge(self, other: "FrequencyTable") -> None:
        """Add every count of ``other`` into this table."""
        self._counts.update(other._counts)

    def clear(self) -> None:
        self._counts.clear()

    def to_dataframe(self, threshold: Optional[float] = None) -> pd.DataFrame:
        """Return ``key``, ``count`` and ``percentage`` columns.

        With ``threshold`` set only the filtered rows are included.
        """
        if threshold is not None:
            entries = self.filter(threshold)
        else:
            total = self.total
            entries = [
                FrequencyEntry(key, count, 100.0 * count / total) for key, count in self.items()
            ]
        return pd.DataFrame(
            [(e.key, e.count, e.percentage) for e in entries],
            columns=["key", "count", "percentage"],
        )

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, key: object) -> bool:
        return key in self._counts

    def __getitem__(self, key: int) -> int:
        return self._counts.get(key, 0)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._counts))

    def __repr__(self) -> str:
        return f"FrequencyTable(name={self.name!r}, keys={len(self)}, total={self.total})"


__all__ = ["FrequencyEntry", "FrequencyTable"]
