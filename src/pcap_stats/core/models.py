"""Core data structures for decoded packet records."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import pandas as pd

from .constants import MAX_IPV4, MAX_PORT


class Transport(Enum):
    """Closed set of transport kinds the aggregator distinguishes."""

    TCP = "TCP"
    UDP = "UDP"
    OTHER = "Other"

    @classmethod
    def from_name(cls, name: Any) -> "Transport":
        """Map a protocol name such as ``"tcp"`` to a member; anything else is ``OTHER``."""
        if isinstance(name, Transport):
            return name
        if name is None:
            return cls.OTHER
        key = str(name).strip().upper()
        if key == "TCP":
            return cls.TCP
        if key == "UDP":
            return cls.UDP
        return cls.OTHER


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # pd.isna returns arrays for list-likes; treat those as present
        return False


def _safe_int(value: Any) -> Optional[int]:
    """Safely convert numbers that may contain commas to ``int``."""

    try:
        return int(str(value).replace(",", ""))
    except (TypeError, ValueError):
        try:
            return int(float(value))
        except (TypeError, ValueError):
            return None


def _coerce_ipv4(value: Any) -> Optional[int]:
    if _is_missing(value):
        return None
    if isinstance(value, int):
        return value
    try:
        addr = ipaddress.ip_address(str(value).strip())
    except ValueError:
        return _safe_int(value)
    if isinstance(addr, ipaddress.IPv4Address):
        return int(addr)
    return None


@dataclass(frozen=True)
class PacketRecord:
    """Read-only view of one decoded packet.

    ``destination_port`` is only meaningful for TCP/UDP; ``destination_ip`` is
    the IPv4 destination as an unsigned 32-bit integer and is ``None`` when
    the frame has no IPv4 layer.
    """

    transport: Transport = Transport.OTHER
    payload_length: int = 0
    destination_port: Optional[int] = None
    destination_ip: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.transport, Transport):
            object.__setattr__(self, "transport", Transport.from_name(self.transport))
        if self.payload_length < 0:
            raise ValueError(f"payload_length must be non-negative, got {self.payload_length}")
        if self.destination_port is not None and not 0 <= self.destination_port <= MAX_PORT:
            raise ValueError(f"destination_port out of range: {self.destination_port}")
        if self.destination_ip is not None and not 0 <= self.destination_ip <= MAX_IPV4:
            raise ValueError(f"destination_ip out of range: {self.destination_ip}")

    @property
    def destination_ip_str(self) -> Optional[str]:
        if self.destination_ip is None:
            return None
        return str(ipaddress.IPv4Address(self.destination_ip))

    @classmethod
    def from_parser_row(cls, row: dict[str, Any]) -> "PacketRecord":
        """Create a :class:`PacketRecord` from a loosely typed parser ``row``.

        Recognised keys are ``protocol`` (or ``transport``), ``payload_length``,
        ``destination_port`` and ``destination_ip``. Missing, ``None`` or NaN
        values leave the optional fields absent rather than failing.
        """

        proto = row.get("transport", row.get("protocol"))
        transport = Transport.OTHER if _is_missing(proto) else Transport.from_name(proto)

        length_val = row.get("payload_length")
        length = 0 if _is_missing(length_val) else _safe_int(length_val)
        if length is None:
            length = 0

        port_val = row.get("destination_port")
        port = None if _is_missing(port_val) else _safe_int(port_val)

        return cls(
            transport=transport,
            payload_length=length,
            destination_port=port,
            destination_ip=_coerce_ipv4(row.get("destination_ip")),
        )


__all__ = ["Transport", "PacketRecord"]
