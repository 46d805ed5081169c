import logging
import sys
import json

_PACKAGE_LOGGER = "pcap_stats"


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object on a single line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": self.formatTime(record),
            "lvl": record.levelname,
            "mod": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(_PACKAGE_LOGGER)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    return logger


def get_logger(name: str = __name__) -> logging.Logger:
    """Return a JSON-configured logger.

    Loggers outside the ``pcap_stats`` namespace are re-parented under it so
    that every module shares the single package handler.
    """
    _package_logger()
    if name != _PACKAGE_LOGGER and not name.startswith(_PACKAGE_LOGGER + "."):
        name = f"{_PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def set_verbose(verbose: bool) -> None:
    """Switch the package log level between ``INFO`` and ``DEBUG``."""
    _package_logger().setLevel(logging.DEBUG if verbose else logging.INFO)
