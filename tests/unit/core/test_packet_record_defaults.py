import math

import pytest

from pcap_stats.core.models import PacketRecord, Transport


def test_packet_record_defaults():
    rec = PacketRecord()

    assert rec.transport is Transport.OTHER
    assert rec.payload_length == 0
    assert rec.destination_port is None
    assert rec.destination_ip is None
    assert rec.destination_ip_str is None


def test_packet_record_is_read_only():
    rec = PacketRecord(Transport.TCP, 10, 443)
    with pytest.raises(AttributeError):
        rec.payload_length = 20


@pytest.mark.parametrize(
    "kwargs",
    [
        {"payload_length": -1},
        {"destination_port": 70000},
        {"destination_ip": 2**32},
    ],
)
def test_packet_record_rejects_out_of_range(kwargs):
    with pytest.raises(ValueError):
        PacketRecord(Transport.TCP, **kwargs)


@pytest.mark.parametrize(
    "name, expected",
    [("tcp", Transport.TCP), ("UDP", Transport.UDP), ("icmp", Transport.OTHER), (None, Transport.OTHER)],
)
def test_transport_from_name(name, expected):
    assert Transport.from_name(name) is expected


def test_transport_string_is_normalised():
    assert PacketRecord("udp").transport is Transport.UDP


def test_from_parser_row_full():
    rec = PacketRecord.from_parser_row(
        {
            "protocol": "TCP",
            "payload_length": "1,460",
            "destination_port": "443",
            "destination_ip": "192.168.1.10",
        }
    )

    assert rec.transport is Transport.TCP
    assert rec.payload_length == 1460
    assert rec.destination_port == 443
    assert rec.destination_ip_str == "192.168.1.10"


def test_from_parser_row_handles_missing_and_nan():
    rec = PacketRecord.from_parser_row(
        {
            "protocol": "UDP",
            "payload_length": math.nan,
            "destination_port": None,
            "destination_ip": float("nan"),
        }
    )

    assert rec.transport is Transport.UDP
    assert rec.payload_length == 0
    assert rec.destination_port is None
    assert rec.destination_ip is None


def test_from_parser_row_ipv6_address_is_absent():
    rec = PacketRecord.from_parser_row({"protocol": "tcp", "destination_ip": "2001:db8::1"})

    assert rec.destination_ip is None


def test_from_parser_row_empty():
    assert PacketRecord.from_parser_row({}) == PacketRecord()
