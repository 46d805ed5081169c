from .formatters import render_csv, render_text, write_report
from .report import ReportSection, build_report

__all__ = ["ReportSection", "build_report", "render_text", "render_csv", "write_report"]
