#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/vision/engine.py

import argparse

from palettelab.core import config as c
from palettelab.core.contrast import get_contrast_ratio_from_hex
from palettelab.core.types import COMMON_CVD_TYPES, CVD_TYPES
from palettelab.core.vision import (
    check_palette_accessibility,
    get_all_simulations,
    simulate_colourblindness,
    suggest_contrast_fix,
    suggest_distinguishable_fix,
)
from palettelab.logic.resolver import resolve_colour_input
from .renderer import render_contrast_fixes, render_palette_check, render_simulations


def _types(args: argparse.Namespace, default=CVD_TYPES):
    return (args.type,) if args.type else default


def run(args: argparse.Namespace) -> None:
    """Simulate one colour, fix it against a background, or check a palette."""
    if args.colour and len(args.colour) > 1:
        results = check_palette_accessibility(
            args.colour, args.threshold, cvd_types=_types(args, COMMON_CVD_TYPES)
        )
        fixes = {}
        for cvd_type, result in results.items():
            for hex1, hex2 in result.problematic_pairs:
                fixes[(cvd_type, hex1, hex2)] = suggest_distinguishable_fix(
                    hex2, hex1, cvd_type, max(args.threshold, c.DISTINGUISH_FIX_THRESHOLD)
                )
        render_palette_check(results, fixes)
        return

    hex_code, title = resolve_colour_input(args, "vision")

    if args.background:
        fixes = {}
        for cvd_type in _types(args):
            fix = suggest_contrast_fix(hex_code, args.background, cvd_type, args.target)
            ratio = get_contrast_ratio_from_hex(
                simulate_colourblindness(fix.hex, cvd_type),
                simulate_colourblindness(args.background, cvd_type),
            )
            fixes[cvd_type] = (fix, ratio)
        render_contrast_fixes(hex_code, args.background, fixes)
        return

    if args.type:
        simulations = {args.type: simulate_colourblindness(hex_code, args.type)}
    else:
        simulations = get_all_simulations(hex_code)
    render_simulations(hex_code, title, simulations, args.describe)
