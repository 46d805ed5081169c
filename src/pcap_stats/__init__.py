# src/pcap_stats/__init__.py
__version__ = "1.0.0"

from .core.models import PacketRecord, Transport
from .core.config import Settings, get_settings, load_config_file
from .metrics.stats_collector import StatsCollector
from .metrics.protocol_stats import ProtocolStats
from .metrics.frequency_table import FrequencyTable
from .metrics.histogram import build_payload_histogram
from .parsers import ScapyParser, packet_to_record, validate_pcap_file
from .ingestor import iter_packet_records, collect_pcap
from .reporting import build_report, render_text, render_csv, write_report


__all__ = [
    "__version__",
    "PacketRecord",
    "Transport",
    "Settings",
    "get_settings",
    "load_config_file",
    "StatsCollector",
    "ProtocolStats",
    "FrequencyTable",
    "build_payload_histogram",
    "ScapyParser",
    "packet_to_record",
    "validate_pcap_file",
    "iter_packet_records",
    "collect_pcap",
    "build_report",
    "render_text",
    "render_csv",
    "write_report",
]
