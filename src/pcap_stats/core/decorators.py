"""Error translation for capture decoders."""

from __future__ import annotations

import time
from functools import wraps
from pathlib import Path

from ..logging import get_logger
from ..exceptions import PcapParsingError


logger = get_logger(__name__)


def handle_parse_errors(func):
    """Wrap a ``parse(self, file_path, ...)`` method yielding records.

    Any failure while decoding is re-raised as :class:`PcapParsingError`
    whose ``context`` names the capture and the packet being decoded.
    """

    @wraps(func)
    def wrapper(self, file_path, *args, **kwargs):
        name = Path(file_path).name
        decoded = 0
        start_time = time.perf_counter()
        try:
            for record in func(self, file_path, *args, **kwargs):
                decoded += 1
                yield record
        except PcapParsingError:
            raise
        except Exception as exc:
            logger.error("Decoding %s failed at packet %d: %s", name, decoded + 1, exc)
            raise PcapParsingError(
                f"Cannot decode {name}: {exc}",
                context=f"capture {file_path}, packet {decoded + 1}",
                suggestion="The capture may be truncated; try --max-packets to read the part before the damage.",
            ) from exc
        logger.debug(
            "Decoded %d packets from %s in %.3f seconds",
            decoded,
            name,
            time.perf_counter() - start_time,
        )

    return wrapper
