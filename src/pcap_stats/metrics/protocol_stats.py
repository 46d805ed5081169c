"""Per-transport payload accumulator."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..core.models import Transport
from .histogram import HistogramBucket, build_payload_histogram


@dataclass
class ProtocolStats:
    """Packet count, byte total, running maximum and raw payload lengths.

    ``lengths`` keeps arrival order and has one entry per counted packet.
    """

    transport: Transport
    packet_count: int = 0
    total_bytes: int = 0
    max_length: int = 0
    lengths: list[int] = field(default_factory=list)

    def update(self, length: int) -> None:
        """Account for one packet carrying ``length`` payload bytes."""
        if length < 0:
            raise ValueError(f"payload length must be non-negative, got {length}")
        self.packet_count += 1
        self.total_bytes += length
        if length > self.max_length:
            self.max_length = length
        self.lengths.append(length)

    def clear(self) -> None:
        self.packet_count = 0
        self.total_bytes = 0
        self.max_length = 0
        self.lengths.clear()

    def merge(self, other: "ProtocolStats") -> None:
        """Fold ``other`` into this accumulator; ``other``'s lengths go last."""
        if other.transport is not self.transport:
            raise ValueError(
                f"cannot merge {other.transport.value} stats into {self.transport.value} stats"
            )
        self.packet_count += other.packet_count
        self.total_bytes += other.total_bytes
        self.max_length = max(self.max_length, other.max_length)
        self.lengths.extend(other.lengths)

    def histogram(self) -> list[HistogramBucket]:
        return build_payload_histogram(self.max_length, self.lengths)

    @property
    def mean_length(self) -> float:
        if self.packet_count == 0:
            return 0.0
        return self.total_bytes / self.packet_count


__all__ = ["ProtocolStats"]
