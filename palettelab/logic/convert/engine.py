#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/convert/engine.py

import argparse

from palettelab.core import config as c
from palettelab.logic.resolver import resolve_colour_input
from .renderer import render_all_formats, render_convert_info


def run(args: argparse.Namespace) -> None:
    """Print a colour in the requested notation, or in all of them."""
    hex_code, title = resolve_colour_input(args, "convert")

    if not args.to_format:
        render_all_formats(hex_code, title)
        return

    out = render_convert_info(hex_code, args.to_format)
    if args.verbose:
        src = render_convert_info(hex_code, "hex")
        print(f"{src} {c.MSG_BOLD_COLORS['info']}->{c.RESET} {out}")
    else:
        print(out)
