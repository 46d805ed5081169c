from .config import Settings, get_settings, load_config_file
from .constants import *  # noqa: F401,F403
from .models import PacketRecord, Transport
from ..exceptions import (
    PcapStatsError,
    PcapParsingError,
    CorruptPcapError,
    ConfigFileError,
    ReportGenerationError,
)

__all__ = [
    "Settings",
    "get_settings",
    "load_config_file",
    "PacketRecord",
    "Transport",
    "PcapStatsError",
    "PcapParsingError",
    "CorruptPcapError",
    "ConfigFileError",
    "ReportGenerationError",
] + [name for name in globals().keys() if name.isupper()]
