#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/subcommands/contrast.py

import argparse
import sys

from palettelab.core import config as c
from palettelab.logic.contrast import engine
from palettelab.shared.logger import PalettelabArgumentParser
from palettelab.shared.sanitizer import INPUT_HANDLERS


def get_contrast_parser() -> argparse.ArgumentParser:
    """Create argument parser for contrast command."""
    parser = PalettelabArgumentParser(
        prog="palettelab contrast",
        description="palettelab contrast: WCAG 2.1 contrast checks and fixes",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-f",
        "--foreground",
        type=INPUT_HANDLERS["colour"],
        help="text colour",
    )
    parser.add_argument(
        "-b",
        "--background",
        type=INPUT_HANDLERS["colour"],
        help="background colour (default: black or white, whichever reads best)",
    )
    parser.add_argument(
        "-c",
        "--colour",
        action="append",
        type=INPUT_HANDLERS["colour"],
        help="use -c COLOUR multiple times for a pairwise contrast matrix",
    )
    parser.add_argument(
        "-L",
        "--large-text",
        action="store_true",
        help="grade against the large-text thresholds",
    )
    parser.add_argument(
        "-t",
        "--target",
        type=INPUT_HANDLERS["ratio"],
        default=c.WCAG_AA_NORMAL,
        help=f"target ratio for suggestions and matrix checks (default: {c.WCAG_AA_NORMAL})",
    )
    parser.add_argument(
        "-S",
        "--suggest",
        action="store_true",
        help="suggest a foreground that reaches the target ratio",
    )
    return parser


def main() -> None:
    """Main entry point for contrast command."""
    parser = get_contrast_parser()
    args = parser.parse_args(sys.argv[1:])
    engine.run(args)


if __name__ == "__main__":
    main()
