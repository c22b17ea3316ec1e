#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/contrast/engine.py

import argparse

from palettelab.core.contrast import (
    check_all_contrast,
    find_best_contrast,
    generate_contrast_matrix,
    get_contrast_ratio_from_hex,
    get_contrast_result,
    get_optimal_text_colour,
    get_wcag_level,
    suggest_contrasting_colour,
)
from palettelab.shared.logger import fail, log
from palettelab.shared.preview import print_color_block
from .renderer import render_matrix, render_pair, render_suggestion


def run(args: argparse.Namespace) -> None:
    """Check one text/background pair, or every pair of a colour list."""
    if args.colour:
        if len(args.colour) < 2:
            fail("at least 2 colours are required for a matrix", "use -c COLOUR multiple times")
        _, failures = check_all_contrast(args.colour, args.target)
        render_matrix(args.colour, generate_contrast_matrix(args.colour), failures)
        return

    if not args.foreground:
        fail(
            "one of the arguments -f/--foreground -c/--colour is required",
            "use 'palettelab contrast -h' for usage",
        )

    fg = args.foreground
    bg = args.background or get_optimal_text_colour(fg)
    if not args.background:
        log("info", f"no background given, using {bg}")

    result = get_contrast_result(fg, bg)
    ratio = get_contrast_ratio_from_hex(fg, bg)
    render_pair(fg, bg, result, get_wcag_level(ratio, args.large_text))

    if args.suggest:
        suggested = suggest_contrasting_colour(bg, fg, args.target)
        render_suggestion(suggested, bg, get_contrast_ratio_from_hex(suggested, bg))
        best_plain = find_best_contrast(bg, ["#000000", "#ffffff"])
        print_color_block(best_plain, "best plain text")
