"""Exponential payload-length histogram.

Bucket ``0`` holds zero-length payloads. Non-zero lengths fall into
half-open ranges starting at ``[1, 20)`` whose upper bound doubles until the
next doubling would pass the maximum ``M``; the last range is clamped to
``[lower, M]``. A trailing overlay row counts the lengths equal to ``M``;
it is not part of the partition.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..core.constants import FIRST_BUCKET_UPPER_BOUND


@dataclass(frozen=True)
class HistogramBucket:
    """One histogram row. ``upper`` is exclusive."""

    label: str
    lower: int
    upper: int
    count: int
    percentage: float
    is_max: bool = False


def histogram_depth(max_length: int) -> int:
    """Return ``floor(log2(max_length))``, or ``0`` when ``max_length`` is 0."""
    if max_length <= 0:
        return 0
    # exact for ints of any size, unlike math.log2
    return int(max_length).bit_length() - 1


def bucket_bounds(max_length: int) -> list[tuple[int, int]]:
    """Return the ``(lower, upper)`` ranges covering ``1..max_length``."""
    if max_length <= 0:
        return []
    bounds: list[tuple[int, int]] = []
    lower, upper = 1, FIRST_BUCKET_UPPER_BOUND
    # depth + 1 bounds the number of ranges for every max_length >= 1
    for _ in range(histogram_depth(max_length) + 1):
        bounds.append((lower, upper))
        if upper > max_length:
            break
        lower = upper
        upper = max_length + 1 if upper * 2 > max_length else upper * 2
    return bounds


def build_payload_histogram(max_length: int, lengths: Sequence[int]) -> list[HistogramBucket]:
    """Bucket ``lengths`` into the exponential layout for ``max_length``.

    Returns an empty list when ``lengths`` is empty. Percentages are relative
    to ``len(lengths)``.
    """
    total = len(lengths)
    if total == 0:
        return []

    arr = np.asarray(lengths, dtype=np.int64)
    observed_max = int(arr.max())
    if observed_max > max_length:
        raise ValueError(
            f"max_length {max_length} is smaller than observed length {observed_max}"
        )

    def pct(count: int) -> float:
        return 100.0 * count / total

    zero_count = int(np.count_nonzero(arr == 0))
    rows = [HistogramBucket("0", 0, 1, zero_count, pct(zero_count))]
    if max_length == 0:
        return rows

    bounds = bucket_bounds(max_length)
    uppers = np.array([upper for _, upper in bounds], dtype=np.int64)
    # side="right" places a length equal to a bound in the next bucket up
    idx = np.searchsorted(uppers, arr[arr > 0], side="right")
    counts = np.bincount(idx, minlength=len(bounds))

    for (lower, upper), count in zip(bounds, counts):
        count = int(count)
        rows.append(HistogramBucket(f"{lower}-{upper - 1}", lower, upper, count, pct(count)))

    count_of_maxes = int(np.count_nonzero(arr == max_length))
    rows.append(
        HistogramBucket(
            str(max_length), max_length, max_length + 1, count_of_maxes, pct(count_of_maxes), is_max=True
        )
    )
    return rows


__all__ = ["HistogramBucket", "histogram_depth", "bucket_bounds", "build_payload_histogram"]
