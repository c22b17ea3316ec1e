#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/vision/renderer.py

from palettelab.core import config as c
from palettelab.core.vision import get_colourblind_type_description, get_colourblind_type_name
from palettelab.shared.formatting import format_contrast_ratio
from palettelab.shared.preview import paint, print_color_block


def render_simulations(hex_code: str, title: str, simulations: dict, describe: bool = False) -> None:
    print()
    print_color_block(hex_code, title)
    for cvd_type, sim_hex in simulations.items():
        print_color_block(sim_hex, cvd_type.value)
        if describe:
            print(f"{' ' * 22}{paint(get_colourblind_type_description(cvd_type), c.MSG_BOLD_COLORS['dim'])}")
    print()


def render_palette_check(results: dict, fixes: dict) -> None:
    """Per-type verdict, each problem pair with a suggested replacement."""
    print()
    for cvd_type, result in results.items():
        name = get_colourblind_type_name(cvd_type)
        if result.accessible:
            print(f"{name:<32}{paint('pass', c.MSG_COLORS['success'])}")
            continue
        verdict = f"{len(result.problematic_pairs)} pair(s) too close"
        print(f"{name:<32}{paint(verdict, c.MSG_COLORS['error'])}")
        for hex1, hex2 in result.problematic_pairs:
            fix = fixes.get((cvd_type, hex1, hex2))
            note = f"try {fix.hex} (L {fix.adjusted_lightness:.0f}%)" if fix else "no lightness fix found"
            print(f"   {hex1} ~ {hex2}   {paint(note, c.MSG_BOLD_COLORS['dim'])}")
    print()


def render_contrast_fixes(text_hex: str, bg_hex: str, fixes: dict) -> None:
    print()
    print_color_block(text_hex, "text")
    print_color_block(bg_hex, "background")
    for cvd_type, (fix, ratio) in fixes.items():
        print_color_block(fix.hex, cvd_type.value, f"{format_contrast_ratio(ratio)} simulated")
    print()
