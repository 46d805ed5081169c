from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional

from .core.models import PacketRecord
from .logging import get_logger
from .metrics.stats_collector import StatsCollector
from .parsers.base import BaseParser
from .parsers.scapy_parser import ScapyParser
from .parsers.validation import validate_pcap_file

logger = get_logger(__name__)


def iter_packet_records(
    path: str | Path,
    max_packets: Optional[int] = None,
    parser: Optional[BaseParser] = None,
) -> Iterator[PacketRecord]:
    """
    Lazily iterate through a capture file and yield a PacketRecord per frame.

    The file is validated before decoding starts; frames are decoded one at a
    time so memory use does not grow with the capture size.

    Args:
        path: The file path to the pcap or pcapng file.
        max_packets: Optional limit on the number of frames read.
        parser: Decoder to use; defaults to :class:`ScapyParser`.

    Yields:
        PacketRecord: A decoded record for each frame in the file.
    """
    validate_pcap_file(path)
    logger.info("File successfully opened: %s", Path(path).name)
    parser = parser if parser is not None else ScapyParser()
    yield from parser.parse(path, max_packets=max_packets)


def collect_pcap(
    path: str | Path,
    collector: Optional[StatsCollector] = None,
    max_packets: Optional[int] = None,
) -> StatsCollector:
    """Feed every frame of ``path`` into ``collector`` (a new one by default)."""
    collector = collector if collector is not None else StatsCollector()
    count = collector.collect_many(iter_packet_records(path, max_packets=max_packets))
    logger.info("All packets collected: %d", count)
    return collector
