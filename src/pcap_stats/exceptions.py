"""Custom exceptions for the :mod:`pcap_stats` package."""


class PcapStatsError(Exception):
    """Base class for all custom ``pcap_stats`` exceptions.

    Parameters
    ----------
    message:
        Short description of the failure.
    context:
        Optional additional information about where/why the error occurred.
    suggestion:
        Optional hint that may help recover from the error.
    """

    def __init__(
        self,
        message: str = "",
        *,
        context: str | None = None,
        suggestion: str | None = None,
    ) -> None:
        super().__init__(message)
        self.context = context
        self.suggestion = suggestion


class PcapParsingError(PcapStatsError):
    """Raised when parsing of a PCAP file fails."""


class CorruptPcapError(PcapParsingError):
    """Raised when the PCAP file is corrupt or has an invalid format."""


class ConfigFileError(PcapStatsError):
    """Raised when the threshold config file cannot be read or holds bad values."""


class ReportGenerationError(PcapStatsError):
    """Raised when the text or CSV report cannot be produced."""
