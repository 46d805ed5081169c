from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigFileError
from ..logging import get_logger
from .constants import (
    CONFIG_KEY_IP_PERCENT,
    CONFIG_KEY_PORT_PERCENT,
    DEFAULT_MIN_IP_PERCENT,
    DEFAULT_MIN_PORT_PERCENT,
)

logger = get_logger(__name__)

# Legacy config file key -> Settings field
_CONFIG_FILE_KEYS: dict[str, str] = {
    CONFIG_KEY_PORT_PERCENT: "min_port_percent",
    CONFIG_KEY_IP_PERCENT: "min_ip_percent",
}


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    # Report filter settings
    min_port_percent: float = Field(
        DEFAULT_MIN_PORT_PERCENT,
        ge=0.0,
        le=100.0,
        description="Destination ports at or below this share are not reported",
    )
    min_ip_percent: float = Field(
        DEFAULT_MIN_IP_PERCENT,
        ge=0.0,
        le=100.0,
        description="Destination addresses at or below this share are not reported",
    )

    # Output settings
    output_format: Literal["txt", "csv"] = Field("txt", description="Report layout")
    verbose: bool = Field(False, description="Log per-stage details")

    # Parser settings
    max_packets: Optional[int] = Field(
        None, ge=1, description="Stop reading after this many packets"
    )

    model_config = SettingsConfigDict(env_prefix="PCAP_STATS_", env_file=".env")


@lru_cache()
def get_settings() -> Settings:
    """Return a singleton settings instance."""
    return Settings()


def load_config_file(path: str | Path, base: Optional[Settings] = None) -> Settings:
    """Apply a ``KEY=VALUE`` threshold file on top of ``base``.

    Lines starting with ``#`` are comments. Only ``MINIMAL_PORT_PERC`` and
    ``MINIMAL_IP_PERC`` are recognised; other keys are ignored.
    """
    path = Path(path)
    base = base if base is not None else get_settings()
    try:
        lines = path.read_text().splitlines()
    except OSError as exc:
        raise ConfigFileError(
            f"Cannot read config file {path.name}",
            context=str(exc),
            suggestion="Check that the file exists and is readable.",
        ) from exc

    updates: dict[str, str] = {}
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep:
            logger.debug("Skipping line %d without '=' in %s", lineno, path.name)
            continue
        field_name = _CONFIG_FILE_KEYS.get(key)
        if field_name is None:
            logger.debug("Ignoring unknown config key %r in %s", key, path.name)
            continue
        updates[field_name] = value.strip()

    try:
        settings = Settings(**{**base.model_dump(), **updates})
    except ValidationError as exc:
        raise ConfigFileError(
            f"Invalid value in config file {path.name}",
            context=str(exc),
            suggestion="Thresholds must be numbers between 0 and 100.",
        ) from exc
    logger.info("Config file read: %s", path.name)
    return settings


__all__ = ["Settings", "get_settings", "load_config_file"]
