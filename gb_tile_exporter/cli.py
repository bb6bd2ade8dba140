#!/usr/bin/env python3
"""
Command line interface for the Game Boy tile exporter

Usage:
    gb-tile-exporter image.png -o <dir> [options]

Options:
    --name <name>       Asset name used for the C identifiers (default: file name)
    --bank <num>        ROM bank number, 0 for the default bank (default: 0)
    --log-level <lvl>   DEBUG, INFO, WARNING, ERROR (default: INFO)
    --log-file <file>   Also write the log to a file
    --remember          Store name, bank and output folder as the new defaults
    --ignore-settings   Do not read stored defaults
"""

import argparse
import sys
from typing import Optional

from .exporter import ExportError, export_png
from .logging_config import setup_logging
from .security_utils import SecurityError
from .settings_manager import get_settings
from .utils.validation import ValidationError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gb-tile-exporter",
        description=(
            "Export a 4-color indexed PNG (8-256 pixels per side, multiples of 8) "
            "as Game Boy background tiles and tilemap for GBDK-2020."
        ),
    )
    parser.add_argument("input", help="Indexed PNG image to export")
    parser.add_argument(
        "-o",
        "--output-dir",
        help="Destination folder for the .h and .c files (default: last used or current folder)",
    )
    parser.add_argument("--name", help="Asset name (a valid C identifier)")
    parser.add_argument("--bank", type=int, help="ROM bank number (0-255)")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity",
    )
    parser.add_argument("--log-file", help="Optional log file")
    parser.add_argument(
        "--remember",
        action="store_true",
        help="Save name, bank and output folder as defaults for the next run",
    )
    parser.add_argument(
        "--ignore-settings",
        action="store_true",
        help="Ignore stored defaults",
    )
    return parser


def main(argv: Optional[list] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)

    stored = {"asset_name": "", "output_dir": "", "bank": 0}
    settings = None
    if args.remember or not args.ignore_settings:
        settings = get_settings()
        if not args.ignore_settings:
            stored = settings.get_export_params()

    output_dir = args.output_dir or stored["output_dir"] or "."
    asset_name = args.name or stored["asset_name"] or None
    bank = args.bank if args.bank is not None else stored["bank"]

    try:
        report = export_png(args.input, output_dir, asset_name=asset_name, bank=bank)
    except (ValidationError, SecurityError, ExportError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if settings is not None:
        settings.add_recent_input(args.input)
        if args.remember:
            settings.update_export_params(
                asset_name=report.asset_name, output_dir=output_dir, bank=report.bank
            )

    result = report.result
    print(f"wrote {report.header_path}")
    print(f"wrote {report.source_path}")
    print(
        f"{result.unique_tile_count} unique tiles, {result.total_tile_count} total, "
        f"{result.tile_width}x{result.tile_height} tiles"
    )
    if report.advisory:
        print(f"WARNING: {report.advisory}", file=sys.stderr)

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
