"""Turn a populated :class:`StatsCollector` into printable report sections."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from typing import List, Tuple, Union

import pandas as pd

from ..core.constants import DEFAULT_MIN_IP_PERCENT, DEFAULT_MIN_PORT_PERCENT
from ..logging import get_logger
from ..metrics.frequency_table import FrequencyTable
from ..metrics.protocol_stats import ProtocolStats
from ..metrics.stats_collector import StatsCollector

logger = get_logger(__name__)

ReportRow = Tuple[Union[str, int], int, float]


@dataclass
class ReportSection:
    title: str
    headers: Tuple[str, str, str]
    rows: List[ReportRow] = field(default_factory=list)
    center_label: bool = False

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(self.rows, columns=list(self.headers))


def payload_length_section(stats: ProtocolStats) -> ReportSection:
    """Histogram rows for one transport. The caller skips empty protocols."""
    rows: List[ReportRow] = [
        (bucket.label, bucket.count, bucket.percentage) for bucket in stats.histogram()
    ]
    return ReportSection(
        f"{stats.transport.value} payload length", ("interval", "count", "perc"), rows
    )


def dst_ports_section(table: FrequencyTable, threshold: float) -> ReportSection:
    rows: List[ReportRow] = [(e.key, e.count, e.percentage) for e in table.filter(threshold)]
    return ReportSection("Dest port stats", ("port", "count", "perc"), rows)


def dst_ipv4_section(table: FrequencyTable, threshold: float) -> ReportSection:
    rows: List[ReportRow] = [
        (str(ipaddress.IPv4Address(e.key)), e.count, e.percentage)
        for e in table.filter(threshold)
    ]
    return ReportSection("Dest IPv4 stats", ("IPv4", "count", "perc"), rows)


def protocol_distribution_section(collector: StatsCollector) -> ReportSection:
    rows: List[ReportRow] = [
        (row.label, row.count, row.percentage) for row in collector.protocol_distribution()
    ]
    return ReportSection(
        "Protocols distribution", ("protocol", "count", "perc"), rows, center_label=True
    )


def build_report(
    collector: StatsCollector,
    port_threshold: float = DEFAULT_MIN_PORT_PERCENT,
    ip_threshold: float = DEFAULT_MIN_IP_PERCENT,
) -> List[ReportSection]:
    """Return the report sections in output order.

    Payload sections appear only for protocols that saw packets and the
    frequency sections only for non-empty tables. The protocol distribution
    section is always present.
    """
    sections: List[ReportSection] = []
    for stats in (collector.udp, collector.tcp):
        if stats.packet_count > 0:
            sections.append(payload_length_section(stats))
    if len(collector.dst_ports):
        sections.append(dst_ports_section(collector.dst_ports, port_threshold))
    if len(collector.dst_ipv4):
        sections.append(dst_ipv4_section(collector.dst_ipv4, ip_threshold))
    sections.append(protocol_distribution_section(collector))
    logger.debug("Built %d report sections", len(sections))
    return sections


__all__ = [
    "ReportRow",
    "ReportSection",
    "payload_length_section",
    "dst_ports_section",
    "dst_ipv4_section",
    "protocol_distribution_section",
    "build_report",
]
