from .frequency_table import FrequencyEntry, FrequencyTable
from .histogram import HistogramBucket, build_payload_histogram
from .protocol_stats import ProtocolStats
from .stats_collector import DistributionRow, StatsCollector

__all__ = [
    "FrequencyEntry",
    "FrequencyTable",
    "HistogramBucket",
    "build_payload_histogram",
    "ProtocolStats",
    "DistributionRow",
    "StatsCollector",
]
