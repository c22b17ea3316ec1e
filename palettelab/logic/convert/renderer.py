#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/convert/renderer.py

from palettelab.core import config as c
from palettelab.core.contrast import get_optimal_text_colour
from palettelab.core.luminance import relative_luminance
from palettelab.core.conversions import hex_to_rgb
from palettelab.shared.formatting import format_colorspace
from palettelab.shared.preview import print_color_block


def render_convert_info(hex_code: str, fmt: str) -> str:
    """One colour in one notation, bolded for the terminal."""
    return f"{c.BOLD_WHITE}{format_colorspace(fmt, hex_code)}{c.RESET}"


def render_all_formats(hex_code: str, title: str) -> None:
    print()
    print_color_block(hex_code, title)
    for fmt in c.FORMAT_KEYS[1:]:
        print(f"   {fmt:<15}{c.BOLD_WHITE}:{c.RESET}   {format_colorspace(fmt, hex_code)}")
    print(f"   {'luminance':<15}{c.BOLD_WHITE}:{c.RESET}   {relative_luminance(*hex_to_rgb(hex_code)):.4f}")
    print(f"   {'text colour':<15}{c.BOLD_WHITE}:{c.RESET}   {get_optimal_text_colour(hex_code)}")
    print()
