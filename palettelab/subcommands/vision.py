#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/subcommands/vision.py

import argparse
import sys

from palettelab.core import config as c
from palettelab.core.types import CVD_TYPES
from palettelab.logic.vision import engine
from palettelab.shared.logger import PalettelabArgumentParser
from palettelab.shared.sanitizer import INPUT_HANDLERS


def get_vision_parser() -> argparse.ArgumentParser:
    """Create argument parser for vision command."""
    parser = PalettelabArgumentParser(
        prog="palettelab vision",
        description="palettelab vision: simulate colour vision deficiencies",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-c",
        "--colour",
        action="append",
        type=INPUT_HANDLERS["colour"],
        help="colour to simulate; repeat -c to check a palette for clashing pairs",
    )
    parser.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="simulate a random colour",
    )
    parser.add_argument(
        "-y",
        "--type",
        type=INPUT_HANDLERS["cvd_type"],
        default=None,
        help=f"only this deficiency (default: all)\ntypes: {' '.join(t.value for t in CVD_TYPES)}",
    )
    parser.add_argument(
        "-b",
        "--background",
        type=INPUT_HANDLERS["colour"],
        help="suggest lightness fixes so the colour stays readable on this background",
    )
    parser.add_argument(
        "-t",
        "--target",
        type=INPUT_HANDLERS["ratio"],
        default=c.WCAG_AA_NORMAL,
        help=f"target ratio for --background fixes (default: {c.WCAG_AA_NORMAL})",
    )
    parser.add_argument(
        "-T",
        "--threshold",
        type=INPUT_HANDLERS["threshold"],
        default=c.DISTINGUISH_THRESHOLD,
        help=f"minimum simulated RGB distance between palette colours (default: {c.DISTINGUISH_THRESHOLD:g})",
    )
    parser.add_argument(
        "-d",
        "--describe",
        action="store_true",
        help="print a short description of each deficiency",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )
    return parser


def main() -> None:
    """Main entry point for vision command."""
    parser = get_vision_parser()
    args = parser.parse_args(sys.argv[1:])
    engine.run(args)


if __name__ == "__main__":
    main()
