from pathlib import Path

import pytest

from pcap_stats.core.models import PacketRecord, Transport
from pcap_stats.ingestor import collect_pcap
from pcap_stats.metrics.frequency_table import FrequencyEntry
from pcap_stats.metrics.stats_collector import StatsCollector

IP_A = 0x0A000001  # 10.0.0.1
IP_B = 0x0A000002  # 10.0.0.2


def _tcp(length: int, port: int | None = 443, ip: int | None = IP_A) -> PacketRecord:
    return PacketRecord(Transport.TCP, length, port, ip)


def _assert_invariants(sc: StatsCollector) -> None:
    assert sc.total_packets == sc.tcp.packet_count + sc.udp.packet_count + sc.dropped_packets
    for stats in (sc.tcp, sc.udp):
        assert len(stats.lengths) == stats.packet_count
        assert stats.total_bytes == sum(stats.lengths)
        assert stats.max_length == max(stats.lengths, default=0)


def test_three_tcp_packets_same_port():
    sc = StatsCollector()
    for length in (0, 15, 15):
        sc.collect(_tcp(length))

    assert sc.tcp.packet_count == 3
    assert sc.tcp.max_length == 15
    assert sc.tcp.total_bytes == 30
    rows = sc.tcp.histogram()
    assert (rows[0].label, rows[0].count) == ("0", 1)
    assert (rows[1].label, rows[1].count) == ("1-19", 2)
    assert sc.dst_ports.items() == [(443, 3)]
    assert sc.dst_ports.filter(5.0) == [FrequencyEntry(443, 3, 100.0)]
    _assert_invariants(sc)


def test_tcp_and_udp_share_port_table():
    sc = StatsCollector()
    sc.collect(PacketRecord(Transport.TCP, 10, 80, IP_A))
    sc.collect(PacketRecord(Transport.UDP, 20, 80, IP_B))

    assert sc.dst_ports.items() == [(80, 2)]
    assert sc.dst_ipv4.items() == [(IP_A, 1), (IP_B, 1)]
    assert sc.tcp.packet_count == 1
    assert sc.udp.packet_count == 1
    assert sc.dropped_packets == 0
    _assert_invariants(sc)


def test_other_transport_is_dropped_but_address_counted():
    sc = StatsCollector()
    sc.collect(PacketRecord(Transport.OTHER, 8, None, IP_B))

    assert sc.dropped_packets == 1
    assert sc.total_packets == 1
    assert len(sc.dst_ports) == 0
    assert sc.dst_ipv4.items() == [(IP_B, 1)]
    assert sc.tcp.packet_count == 0
    assert sc.udp.packet_count == 0


def test_other_transport_port_is_ignored():
    sc = StatsCollector()
    sc.collect(PacketRecord(Transport.OTHER, 0, 1234, None))

    assert len(sc.dst_ports) == 0
    assert sc.dropped_packets == 1


def test_missing_optional_fields_do_not_fail():
    sc = StatsCollector()
    sc.collect(_tcp(5, port=None, ip=None))
    sc.collect(PacketRecord(Transport.UDP, 7))

    assert sc.total_packets == 2
    assert len(sc.dst_ports) == 0
    assert len(sc.dst_ipv4) == 0
    _assert_invariants(sc)


def test_port_zero_is_not_recorded():
    sc = StatsCollector()
    sc.collect(_tcp(1, port=0))
    sc.collect(_tcp(1, port=22))

    assert sc.dst_ports.items() == [(22, 1)]
    assert sc.tcp.packet_count == 2


def test_collect_rejects_non_records():
    sc = StatsCollector()
    with pytest.raises(TypeError):
        sc.collect({"protocol": "TCP"})
    assert sc.total_packets == 0


def test_empty_collector_reports_zero():
    sc = StatsCollector()

    assert sc.total_packets == 0
    assert sc.dropped_packets == 0
    assert sc.tcp.histogram() == []
    assert sc.dst_ports.filter(5.0) == []
    assert sc.dst_ipv4.filter(5.0) == []
    assert sc.protocol_distribution() == []
    _assert_invariants(sc)


def test_clear_resets_everything():
    sc = StatsCollector()
    tcp = sc.tcp
    sc.collect_many([_tcp(10), PacketRecord(Transport.OTHER, 0, None, IP_B)])
    sc.clear()

    assert sc.tcp is tcp
    assert sc.total_packets == 0
    assert sc.dropped_packets == 0
    assert sc.tcp.lengths == []
    assert len(sc.dst_ports) == 0
    assert len(sc.dst_ipv4) == 0

    sc.collect(_tcp(3))
    assert sc.protocols[Transport.TCP].packet_count == 1


def test_collect_many_returns_count():
    sc = StatsCollector()
    assert sc.collect_many(_tcp(n) for n in range(5)) == 5
    assert sc.tcp.lengths == [0, 1, 2, 3, 4]


def test_merge_combines_collectors():
    left = StatsCollector()
    right = StatsCollector()
    left.collect(_tcp(10, port=80))
    right.collect(_tcp(30, port=80, ip=IP_B))
    right.collect(PacketRecord(Transport.UDP, 5, 53, IP_B))
    right.collect(PacketRecord(Transport.OTHER))

    left.merge(right)

    assert left.total_packets == 4
    assert left.dropped_packets == 1
    assert left.tcp.lengths == [10, 30]
    assert left.tcp.max_length == 30
    assert left.dst_ports.items() == [(53, 1), (80, 2)]
    assert left.dst_ipv4.items() == [(IP_A, 1), (IP_B, 2)]
    _assert_invariants(left)


def test_protocol_distribution():
    sc = StatsCollector()
    sc.collect_many([_tcp(1), _tcp(2), _tcp(3), PacketRecord(Transport.UDP, 4, 53)])
    sc.collect(PacketRecord(Transport.OTHER))

    rows = sc.protocol_distribution()

    assert [(r.label, r.count) for r in rows] == [("UDP", 1), ("TCP", 3)]
    assert rows[0].percentage == pytest.approx(25.0)
    assert rows[1].percentage == pytest.approx(75.0)


def test_summary():
    sc = StatsCollector()
    sc.collect_many([_tcp(100), PacketRecord(Transport.UDP, 4, 53, IP_B)])

    summary = sc.summary()

    assert summary["total_packets"] == 2
    assert summary["protocols"]["tcp"] == {"packets": 1, "bytes": 100, "max_length": 100}
    assert summary["top_ports"] == {443: 1, 53: 1}
    assert summary["top_ipv4"] == {IP_A: 1, IP_B: 1}


def test_stats_collector_from_pcap(mixed_pcap: Path):
    sc = collect_pcap(mixed_pcap)

    assert sc.total_packets == 6
    assert sc.dropped_packets == 2  # ICMP and ARP
    assert sc.tcp.lengths == [0, 15, 15]
    assert sc.udp.lengths == [40]
    assert sc.dst_ports.items() == [(53, 1), (443, 3)]
    assert sc.dst_ipv4.items() == [(0x0A000002, 3), (0x0A000003, 1), (0x0A000004, 1)]
    _assert_invariants(sc)


def test_collect_pcap_reuses_collector(mixed_pcap: Path):
    sc = StatsCollector()
    collect_pcap(mixed_pcap, collector=sc, max_packets=3)
    collect_pcap(mixed_pcap, collector=sc, max_packets=3)

    assert sc.total_packets == 6
    assert sc.tcp.packet_count == 6
