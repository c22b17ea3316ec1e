#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/formatting.py

from palettelab.core import conversions as conv
from .clamping import round_half_up, round_to


def format_rgb(r: int, g: int, b: int) -> str:
    return f"rgb({r}, {g}, {b})"


def format_hsl(h: float, s: float, l: float) -> str:
    # whole degrees and percents, so it parses back through parse_colour
    return f"hsl({round_half_up(h) % 360}, {round_half_up(s)}%, {round_half_up(l)}%)"


def format_hsv(h: float, s: float, v: float) -> str:
    return f"hsv({round_half_up(h) % 360}, {round_half_up(s)}%, {round_half_up(v)}%)"


def format_oklch(l: float, c: float, h: float) -> str:
    return f"oklch({round_to(l, 2):g} {round_to(c, 3):g} {round_to(h, 1):g})"


def format_lab(l: float, a: float, b: float) -> str:
    return f"lab({l:.2f} {a:.2f} {b:.2f})"


def format_cmyk(c: int, m: int, y: int, k: int) -> str:
    return f"cmyk({c}%, {m}%, {y}%, {k}%)"


def format_contrast_ratio(ratio: float) -> str:
    return f"{ratio:.2f}:1"


def format_colorspace(fmt: str, hex_code: str) -> str:
    """Render a hex colour in one of the FORMAT_KEYS notations."""
    if fmt == "hex":
        return conv.normalise_hex(hex_code)
    if fmt == "rgb":
        return format_rgb(*conv.hex_to_rgb(hex_code))
    if fmt == "hsl":
        return format_hsl(*conv.hex_to_hsl(hex_code))
    if fmt == "hsv":
        return format_hsv(*conv.hex_to_hsv(hex_code))
    if fmt == "oklch":
        return format_oklch(*conv.hex_to_oklch(hex_code))
    if fmt == "lab":
        return format_lab(*conv.hex_to_lab(hex_code))
    if fmt == "cmyk":
        return format_cmyk(*conv.hex_to_cmyk(hex_code))
    return ""
