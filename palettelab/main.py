#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/main.py

import argparse
import sys

from palettelab import __version__
from palettelab.subcommands.command_registry import SUBCOMMANDS
from palettelab.shared.logger import log, PalettelabArgumentParser
from palettelab.shared.truecolor import ensure_truecolor


def get_main_parser() -> argparse.ArgumentParser:
    """Create the top-level parser; the real work lives in subcommands."""
    parser = PalettelabArgumentParser(
        prog="palettelab",
        description=(
            "palettelab: colour palette design and accessibility analysis\n\n"
            f"commands: {', '.join(SUBCOMMANDS)}\n"
            "run 'palettelab COMMAND -h' for command help"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"palettelab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_main_command(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            getattr(module, f"get_{name}_parser")().print_help()
        sys.exit(0)

    if args.command:
        log("error", f"unrecognized command or argument: '{args.command}'")
        log("info", f"available commands: {', '.join(SUBCOMMANDS)}")
        sys.exit(2)

    parser.print_help()


def main() -> None:
    """Main entry point for palettelab CLI"""
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            ensure_truecolor()
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_main_parser()
    args = parser.parse_args()
    handle_main_command(args, parser)


if __name__ == "__main__":
    main()
