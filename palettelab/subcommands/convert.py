#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/subcommands/convert.py

import argparse
import sys

from palettelab.core import config as c
from palettelab.logic.convert import engine
from palettelab.shared.logger import PalettelabArgumentParser
from palettelab.shared.sanitizer import INPUT_HANDLERS


def get_convert_parser() -> argparse.ArgumentParser:
    """Create argument parser for convert command."""
    parser = PalettelabArgumentParser(
        prog="palettelab convert",
        description="palettelab convert: show a colour in other notations",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    input_group = parser.add_mutually_exclusive_group()
    input_group.add_argument(
        "-c",
        "--colour",
        type=INPUT_HANDLERS["colour"],
        help=(
            "colour to convert, must be in quotes\n"
            "examples:\n"
            '  -c "#1e40af"\n'
            '  -c "1e4"\n'
            '  -c "rgb(30, 64, 175)"\n'
            '  -c "hsl(226, 71%%, 40%%)"'
        ),
    )
    input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="convert a random colour",
    )
    parser.add_argument(
        "-t",
        "--to-format",
        type=INPUT_HANDLERS["format"],
        default=None,
        help=f"target notation (default: all)\nall formats: {' '.join(c.FORMAT_KEYS)}",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="print the conversion verbosely",
    )
    return parser


def main() -> None:
    """Main entry point for convert command."""
    parser = get_convert_parser()
    args = parser.parse_args(sys.argv[1:])
    engine.run(args)


if __name__ == "__main__":
    main()
