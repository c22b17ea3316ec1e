#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/subcommands/scale.py

import argparse
import sys

from palettelab.core import config as c
from palettelab.logic.scale import engine
from palettelab.shared.logger import PalettelabArgumentParser
from palettelab.shared.sanitizer import INPUT_HANDLERS


def get_scale_parser() -> argparse.ArgumentParser:
    """Create argument parser for scale command."""
    parser = PalettelabArgumentParser(
        prog="palettelab scale",
        description="palettelab scale: tailwind-style 50-950 scales and variations",
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
    parser.add_argument(
        "-m",
        "--method",
        type=INPUT_HANDLERS["method"],
        default="oklch",
        help="interpolation space: hsl or oklch (default: oklch)",
    )
    parser.add_argument(
        "-S",
        "--steps",
        type=INPUT_HANDLERS["steps"],
        default=None,
        help=f"custom number of steps instead of 50-950 (max: {c.MAX_STEPS})",
    )
    parser.add_argument(
        "-v",
        "--variation",
        action="append",
        choices=list(engine.VARIATIONS),
        help="also print tints, shades or tones (repeatable)",
    )
    parser.add_argument(
        "-n",
        "--count",
        type=INPUT_HANDLERS["count"],
        default=5,
        help="colours per variation (default: 5)",
    )
    parser.add_argument(
        "-x",
        "--mix-with",
        type=INPUT_HANDLERS["colour"],
        help="mix the base with this colour (with -S: gradient stops)",
    )
    parser.add_argument(
        "--ratio",
        type=INPUT_HANDLERS["mix_ratio"],
        default=0.5,
        help="share of --mix-with in the mix, 0 to 1 (default: 0.5)",
    )

    adjust_group = parser.add_argument_group("base adjustments")
    adjust_group.add_argument(
        "-l",
        "--lightness",
        type=INPUT_HANDLERS["float_signed_100"],
        default=0.0,
        help="add to HSL lightness before building the scale",
    )
    adjust_group.add_argument(
        "--saturation",
        type=INPUT_HANDLERS["float_signed_100"],
        default=0.0,
        help="add to HSL saturation before building the scale",
    )
    adjust_group.add_argument(
        "--hue",
        type=INPUT_HANDLERS["float_signed_360"],
        default=0.0,
        help="rotate the hue by this many degrees",
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
    """Main entry point for scale command."""
    parser = get_scale_parser()
    args = parser.parse_args(sys.argv[1:])
    engine.run(args)


if __name__ == "__main__":
    main()
