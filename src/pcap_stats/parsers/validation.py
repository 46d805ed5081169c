from __future__ import annotations

from pathlib import Path

from ..core.constants import PCAP_MAGIC_NUMBERS
from ..exceptions import CorruptPcapError


def validate_pcap_file(file_path: str | Path) -> Path:
    """Check that ``file_path`` exists and starts with a pcap/pcapng magic number."""
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")
    with path.open("rb") as fh:
        magic = fh.read(4)
    if magic not in PCAP_MAGIC_NUMBERS:
        raise CorruptPcapError(
            f"{path.name} is not a pcap or pcapng file",
            context=f"magic number {magic.hex() or '<empty>'}",
            suggestion="Re-export the capture as .pcap or .pcapng.",
        )
    return path
