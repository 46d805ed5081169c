"""Single-pass aggregator for decoded packet records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable

from ..core.models import PacketRecord, Transport
from ..logging import get_logger
from .frequency_table import FrequencyTable
from .protocol_stats import ProtocolStats

logger = get_logger(__name__)


@dataclass(frozen=True)
class DistributionRow:
    label: str
    count: int
    percentage: float


class StatsCollector:
    """Accumulate per-transport payload statistics and destination frequencies.

    Each call to :meth:`collect` classifies the record once as TCP, UDP or
    other. TCP and UDP records update their :class:`ProtocolStats` and the
    destination port table; every other record only bumps
    ``dropped_packets``. The destination address is counted for any record
    that carries one.
    """

    def __init__(self) -> None:
        self.tcp = ProtocolStats(Transport.TCP)
        self.udp = ProtocolStats(Transport.UDP)
        self.dst_ports = FrequencyTable("dst_ports")
        self.dst_ipv4 = FrequencyTable("dst_ipv4")
        self.total_packets = 0
        self.dropped_packets = 0
        self._by_transport: Dict[Transport, ProtocolStats] = {
            Transport.TCP: self.tcp,
            Transport.UDP: self.udp,
        }

    @property
    def protocols(self) -> Dict[Transport, ProtocolStats]:
        return dict(self._by_transport)

    def collect(self, record: PacketRecord) -> None:
        """Update every accumulator for a single record."""
        if not isinstance(record, PacketRecord):
            raise TypeError(f"expected PacketRecord, got {type(record).__name__}")

        stats = self._by_transport.get(record.transport)
        if stats is None:
            self.dropped_packets += 1
        else:
            stats.update(record.payload_length)
            # port 0 means "no port"
            if record.destination_port:
                self.dst_ports.increment(record.destination_port)

        if record.destination_ip is not None:
            self.dst_ipv4.increment(record.destination_ip)
        self.total_packets += 1

    def collect_many(self, records: Iterable[PacketRecord]) -> int:
        """Collect every record in ``records`` and return how many were consumed."""
        count = 0
        for record in records:
            self.collect(record)
            count += 1
        logger.debug("Collected %d records (%d total)", count, self.total_packets)
        return count

    def clear(self) -> None:
        """Reset to the empty state, keeping the same accumulator objects."""
        self.tcp.clear()
        self.udp.clear()
        self.dst_ports.clear()
        self.dst_ipv4.clear()
        self.total_packets = 0
        self.dropped_packets = 0

    def merge(self, other: "StatsCollector") -> None:
        """Fold another collector's state into this one."""
        self.tcp.merge(other.tcp)
        self.udp.merge(other.udp)
        self.dst_ports.merge(other.dst_ports)
        self.dst_ipv4.merge(other.dst_ipv4)
        self.total_packets += other.total_packets
        self.dropped_packets += other.dropped_packets

    def protocol_distribution(self) -> list[DistributionRow]:
        """Return UDP and TCP shares of the classified packets."""
        classified = self.tcp.packet_count + self.udp.packet_count
        if classified == 0:
            return []
        return [
            DistributionRow(
                stats.transport.value,
                stats.packet_count,
                100.0 * stats.packet_count / classified,
            )
            for stats in (self.udp, self.tcp)
        ]

    def summary(self) -> Dict[str, Any]:
        """Return collected metrics."""
        return {
            "total_packets": self.total_packets,
            "dropped_packets": self.dropped_packets,
            "protocols": {
                transport.value.lower(): {
                    "packets": stats.packet_count,
                    "bytes": stats.total_bytes,
                    "max_length": stats.max_length,
                }
                for transport, stats in self._by_transport.items()
            },
            "top_ports": dict(self.dst_ports.most_common(10)),
            "top_ipv4": dict(self.dst_ipv4.most_common(10)),
        }


__all__ = ["DistributionRow", "StatsCollector"]
