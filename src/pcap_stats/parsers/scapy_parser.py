from __future__ import annotations

import ipaddress
from pathlib import Path
from typing import Generator, Optional

from scapy.layers.inet import IP, TCP, UDP
from scapy.layers.inet6 import IPv6  # noqa: F401  registers IPv6 dissection
from scapy.packet import Packet, Padding
from scapy.utils import PcapReader

from ..core.decorators import handle_parse_errors
from ..core.models import PacketRecord, Transport
from ..logging import get_logger
from .base import BaseParser

logger = get_logger(__name__)


def _payload_size(layer: Packet) -> int:
    """Return the bytes carried above ``layer``'s header, link padding excluded."""
    payload = layer.payload
    size = len(payload)
    padding = payload.getlayer(Padding)
    if padding is not None:
        size -= len(padding)
    return max(size, 0)


def packet_to_record(pkt: Packet) -> PacketRecord:
    """Convert a dissected scapy packet into a :class:`PacketRecord`."""
    if pkt.haslayer(TCP):
        transport, l4 = Transport.TCP, pkt[TCP]
    elif pkt.haslayer(UDP):
        transport, l4 = Transport.UDP, pkt[UDP]
    else:
        transport, l4 = Transport.OTHER, None

    payload_length = 0
    destination_port: Optional[int] = None
    if l4 is not None:
        payload_length = _payload_size(l4)
        destination_port = int(l4.dport)

    destination_ip: Optional[int] = None
    ip_layer = pkt.getlayer(IP)
    if ip_layer is not None:
        try:
            destination_ip = int(ipaddress.IPv4Address(str(ip_layer.dst)))
        except ValueError:
            logger.debug("Unparseable IPv4 destination %r", ip_layer.dst)

    return PacketRecord(
        transport=transport,
        payload_length=payload_length,
        destination_port=destination_port,
        destination_ip=destination_ip,
    )


class ScapyParser(BaseParser):
    """Parser implementation using scapy's ``PcapReader`` (pcap and pcapng)."""

    @handle_parse_errors
    def parse(
        self,
        file_path: str | Path,
        max_packets: Optional[int] = None,
    ) -> Generator[PacketRecord, None, None]:
        return _parse_with_scapy(file_path, max_packets)


def _parse_with_scapy(
    file_path: str | Path, max_packets: Optional[int]
) -> Generator[PacketRecord, None, None]:
    logger.debug("Parsing with scapy: %s", file_path)
    packet_count = 0
    with PcapReader(str(file_path)) as reader:
        for pkt in reader:
            packet_count += 1
            yield packet_to_record(pkt)
            if max_packets is not None and packet_count >= max_packets:
                logger.debug("Reached max_packets=%d", max_packets)
                break
