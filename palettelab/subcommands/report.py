#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/subcommands/report.py

import argparse
import sys

from palettelab.core import config as c
from palettelab.logic.report import engine
from palettelab.shared.logger import PalettelabArgumentParser
from palettelab.shared.sanitizer import INPUT_HANDLERS


def get_report_parser() -> argparse.ArgumentParser:
    """Create argument parser for report command."""
    parser = PalettelabArgumentParser(
        prog="palettelab report",
        description="palettelab report: palette-wide accessibility score",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-c",
        "--colour",
        action="append",
        type=INPUT_HANDLERS["colour_spec"],
        help=(
            "palette colour as COLOUR[:NAME[:CATEGORY[:ROLE]]], repeat for each colour\n"
            f"roles: {' '.join(c.ROLE_KEYS)}\n"
            "example:\n"
            '  -c "#1e40af:Brand Blue:primary:text" -c "#ffffff:White:neutral:background"'
        ),
    )
    parser.add_argument(
        "-n",
        "--name",
        default="palette",
        help="palette name used in the report title",
    )
    parser.add_argument(
        "-R",
        "--reviewed",
        action="append",
        help="warning key to treat as reviewed, e.g. contrast:c1:c2:protanopia",
    )
    parser.add_argument(
        "-T",
        "--threshold",
        type=INPUT_HANDLERS["threshold"],
        default=c.DISTINGUISH_THRESHOLD,
        help=f"minimum simulated RGB distance within a category (default: {c.DISTINGUISH_THRESHOLD:g})",
    )
    parser.add_argument(
        "--text",
        action="store_true",
        help="print the full plain-text report",
    )
    return parser


def main() -> None:
    """Main entry point for report command."""
    parser = get_report_parser()
    args = parser.parse_args(sys.argv[1:])
    engine.run(args)


if __name__ == "__main__":
    main()
