import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from . import __version__
from .core.config import Settings, get_settings, load_config_file
from .exceptions import ConfigFileError, PcapParsingError, ReportGenerationError
from .ingestor import collect_pcap
from .logging import get_logger, set_verbose
from .reporting import build_report, write_report

logger = get_logger("pcap_stats.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pcap-stats",
        description="Payload length, destination and protocol statistics for a capture",
    )
    parser.add_argument("-f", dest="infile", required=True, help="path to input pcap/pcapng file")
    parser.add_argument("-o", dest="outfile", help="path to output report file (.csv for CSV)")
    parser.add_argument("-v", dest="verbose", action="store_true", help="verbose mode")
    parser.add_argument("--config", dest="config", help="threshold config file")
    parser.add_argument("--max-packets", dest="max_packets", type=int, help="stop after N packets")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _resolve_settings(args: argparse.Namespace) -> Settings:
    settings = get_settings()
    if args.config:
        settings = load_config_file(args.config, base=settings)
    updates = {}
    if args.verbose:
        updates["verbose"] = True
    if args.max_packets is not None:
        updates["max_packets"] = args.max_packets
    if args.outfile:
        updates["output_format"] = "csv" if Path(args.outfile).suffix.lower() == ".csv" else "txt"
    if updates:
        settings = Settings(**{**settings.model_dump(), **updates})
    return settings


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    set_verbose(args.verbose)

    try:
        settings = _resolve_settings(args)
    except (ConfigFileError, ValidationError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1
    set_verbose(settings.verbose)

    if args.outfile and Path(args.outfile).exists():
        logger.error("Output file exists: %s", args.outfile)
        return 1

    logger.debug("Starting analysis")
    try:
        collector = collect_pcap(args.infile, max_packets=settings.max_packets)
    except FileNotFoundError as exc:
        logger.error("Cannot open %s: %s", Path(args.infile).name, exc)
        return 1
    except PcapParsingError as exc:
        logger.error("Failed to parse %s: %s (%s)", Path(args.infile).name, exc, exc.context)
        return 1

    logger.info("Writing report")
    sections = build_report(
        collector,
        port_threshold=settings.min_port_percent,
        ip_threshold=settings.min_ip_percent,
    )
    try:
        if args.outfile:
            with open(args.outfile, "w", newline="") as fh:
                write_report(sections, fh, settings.output_format)
        else:
            write_report(sections, sys.stdout, settings.output_format)
    except (OSError, ReportGenerationError) as exc:
        logger.error("Failed to write report: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
