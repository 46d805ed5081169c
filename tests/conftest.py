import sys
from pathlib import Path

# Ensure the src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
for _path in (SRC_PATH, PROJECT_ROOT):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))


import pytest

from tests.fixtures.packet_factory import PacketFactory
from tests.fixtures.pcap_builder import PcapBuilder


@pytest.fixture
def mixed_pcap(tmp_path: Path) -> Path:
    """Return a small capture with TCP, UDP, ICMP and ARP frames."""
    packets = [
        PacketFactory.tcp_packet("10.0.0.1", "10.0.0.2", 40000, 443),
        PacketFactory.tcp_packet("10.0.0.1", "10.0.0.2", 40000, 443, payload=b"x" * 15),
        PacketFactory.tcp_packet("10.0.0.1", "10.0.0.2", 40000, 443, payload=b"y" * 15),
        PacketFactory.udp_packet("10.0.0.1", "10.0.0.3", 5353, 53, payload=b"z" * 40),
        PacketFactory.icmp_packet("10.0.0.1", "10.0.0.4"),
        PacketFactory.arp_request("00:11:22:33:44:55", "10.0.0.1", "ff:ff:ff:ff:ff:ff", "10.0.0.9"),
    ]
    return PcapBuilder.build_in_temp(packets, tmp_path, "mixed.pcap")
