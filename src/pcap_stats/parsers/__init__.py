from .base import BaseParser
from .scapy_parser import ScapyParser, packet_to_record
from .validation import validate_pcap_file

__all__ = ["BaseParser", "ScapyParser", "packet_to_record", "validate_pcap_file"]
