"""Fixed-width text and CSV renderers for report sections."""

from __future__ import annotations

import io
from typing import IO, Iterable

from ..core.constants import OUTPUT_FORMATS
from ..exceptions import ReportGenerationError
from .report import ReportSection

CELL_WIDTH = 16
TABLE_WIDTH = CELL_WIDTH * 3


def _format_percentage(value: float) -> str:
    return f"{value:.2f}"


def render_text(sections: Iterable[ReportSection]) -> str:
    lines = []
    for section in sections:
        lines.append(f"|{section.title:=^{TABLE_WIDTH}}|")
        lines.append("|" + "".join(f"{h:^{CELL_WIDTH}}" for h in section.headers) + "|")
        label_align = "^" if section.center_label else "<"
        for label, count, percentage in section.rows:
            lines.append(
                f"|{str(label):{label_align}{CELL_WIDTH}}"
                f"{count:<{CELL_WIDTH}}"
                f"{_format_percentage(percentage):<{CELL_WIDTH}}|"
            )
    return "\n".join(lines) + "\n" if lines else ""


def render_csv(sections: Iterable[ReportSection]) -> str:
    buf = io.StringIO()
    for section in sections:
        buf.write(f"{section.title}\n")
        section.to_dataframe().to_csv(
            buf, index=False, float_format="%.2f", lineterminator="\n"
        )
    return buf.getvalue()


_RENDERERS = {
    "txt": render_text,
    "csv": render_csv,
}


def write_report(sections: Iterable[ReportSection], stream: IO[str], output_format: str = "txt") -> None:
    """Render ``sections`` as ``output_format`` and write them to ``stream``."""
    renderer = _RENDERERS.get(output_format)
    if renderer is None:
        raise ReportGenerationError(
            f"Unknown report format: {output_format!r}",
            suggestion=f"Use one of: {', '.join(OUTPUT_FORMATS)}",
        )
    try:
        stream.write(renderer(sections))
    except OSError as exc:
        raise ReportGenerationError("Failed to write report", context=str(exc)) from exc


__all__ = ["render_text", "render_csv", "write_report"]
