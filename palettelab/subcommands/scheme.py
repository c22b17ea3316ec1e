#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/subcommands/scheme.py

import argparse
import sys

from palettelab.core import config as c
from palettelab.logic.scheme import engine
from palettelab.shared.logger import PalettelabArgumentParser
from palettelab.shared.sanitizer import INPUT_HANDLERS


def get_scheme_parser() -> argparse.ArgumentParser:
    """Create argument parser for scheme command."""
    parser = PalettelabArgumentParser(
        prog="palettelab scheme",
        description="palettelab scheme: colour harmonies and random palettes",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    input_group = parser.add_mutually_exclusive_group()
    input_group.add_argument(
        "-c",
        "--colour",
        type=INPUT_HANDLERS["colour"],
        help="base colour",
    )
    input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="use a random base colour",
    )
    input_group.add_argument(
        "-p",
        "--palette",
        type=INPUT_HANDLERS["count"],
        default=None,
        help=f"draw a random palette of this many colours (max: {c.MAX_COUNT})",
    )
    input_group.add_argument(
        "-C",
        "--complete",
        action="store_true",
        help="draw a full random design palette, one 50-950 scale per category",
    )
    parser.add_argument(
        "-m",
        "--model",
        type=INPUT_HANDLERS["harmony"],
        default="complementary",
        help=f"harmony model (default: complementary)\nmodels: {' '.join(c.HARMONY_KEYS)}",
    )
    parser.add_argument(
        "-a",
        "--all-models",
        action="store_true",
        help="show every harmony model",
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
    """Main entry point for scheme command."""
    parser = get_scheme_parser()
    args = parser.parse_args(sys.argv[1:])
    engine.run(args)


if __name__ == "__main__":
    main()
