from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generator, Optional

from ..core.models import PacketRecord


class BaseParser(ABC):
    """Abstract base class for capture decoders feeding the aggregator."""

    @abstractmethod
    def parse(
        self,
        file_path: str | Path,
        max_packets: Optional[int] = None,
    ) -> Generator[PacketRecord, None, None]:
        """Yield :class:`PacketRecord` objects for ``file_path``."""
