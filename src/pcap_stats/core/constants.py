"""Centralized constant definitions for pcap_stats."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# PCAP file magic numbers used for basic validation
# ---------------------------------------------------------------------------
MAGIC_PCAP_LE: bytes = b"\xd4\xc3\xb2\xa1"  # Little-endian PCAP
MAGIC_PCAP_BE: bytes = b"\xa1\xb2\xc3\xd4"  # Big-endian PCAP
MAGIC_PCAP_NS_LE: bytes = b"\x4d\x3c\xb2\xa1"  # Nanosecond PCAP, little-endian
MAGIC_PCAP_NS_BE: bytes = b"\xa1\xb2\x3c\x4d"  # Nanosecond PCAP, big-endian
MAGIC_PCAPNG: bytes = b"\x0a\x0d\x0d\x0a"  # PCAPNG format

PCAP_MAGIC_NUMBERS: tuple[bytes, ...] = (
    MAGIC_PCAP_LE,
    MAGIC_PCAP_BE,
    MAGIC_PCAP_NS_LE,
    MAGIC_PCAP_NS_BE,
    MAGIC_PCAPNG,
)

# ---------------------------------------------------------------------------
# Aggregation defaults
# ---------------------------------------------------------------------------
DEFAULT_MIN_PORT_PERCENT: float = 5.0
DEFAULT_MIN_IP_PERCENT: float = 5.0

# Upper bound (exclusive) of the first non-zero payload length bucket
FIRST_BUCKET_UPPER_BOUND: int = 20

MAX_PORT: int = 0xFFFF
MAX_IPV4: int = 0xFFFFFFFF

# ---------------------------------------------------------------------------
# Legacy config file keys
# ---------------------------------------------------------------------------
CONFIG_KEY_PORT_PERCENT: str = "MINIMAL_PORT_PERC"
CONFIG_KEY_IP_PERCENT: str = "MINIMAL_IP_PERC"

OUTPUT_FORMATS: tuple[str, ...] = ("txt", "csv")

__all__ = [
    "MAGIC_PCAP_LE",
    "MAGIC_PCAP_BE",
    "MAGIC_PCAP_NS_LE",
    "MAGIC_PCAP_NS_BE",
    "MAGIC_PCAPNG",
    "PCAP_MAGIC_NUMBERS",
    "DEFAULT_MIN_PORT_PERCENT",
    "DEFAULT_MIN_IP_PERCENT",
    "FIRST_BUCKET_UPPER_BOUND",
    "MAX_PORT",
    "MAX_IPV4",
    "CONFIG_KEY_PORT_PERCENT",
    "CONFIG_KEY_IP_PERCENT",
    "OUTPUT_FORMATS",
]
