#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/preview.py

import re

from palettelab.core import config as c
from palettelab.core.conversions import hex_to_rgb, normalise_hex
from .truecolor import colour_enabled

_ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")

LABEL_WIDTH = 18


def paint(text, style: str) -> str:
    """Wrap text in an ANSI style, or return it bare when colour is disabled."""
    if not colour_enabled():
        return str(text)
    return f"{style}{text}{c.RESET}"


def get_visible_len(s: str) -> int:
    return len(_ANSI_ESCAPE.sub("", s))


def swatch(hex_code: str, width: int = 16) -> str:
    """A run of spaces painted with the colour as a 24-bit background."""
    if not colour_enabled():
        return ""
    r, g, b = hex_to_rgb(hex_code)
    return f"\033[48;2;{r};{g};{b}m{' ' * width}{c.RESET}"


def print_color_block(hex_code: str, title: str = "color", suffix: str = "", end: str = "\n") -> None:
    """Print 'title : [swatch]  #rrggbb  suffix' with the title padded to a column."""
    padding = " " * max(0, LABEL_WIDTH - get_visible_len(title))
    block = swatch(hex_code)
    gap = f"   {block}  " if block else "   "
    line = f"{title}{padding}{paint(':', c.BOLD_WHITE)}{gap}{paint(normalise_hex(hex_code), c.BOLD_WHITE)}"
    if suffix:
        line += f"  {suffix}"
    print(line, end=end)


def print_text_sample(fg_hex: str, bg_hex: str, text: str = " Sample Text ") -> None:
    """Show fg text on a bg swatch, or nothing when colour is disabled."""
    if not colour_enabled():
        return
    fr, fg, fb = hex_to_rgb(fg_hex)
    br, bg, bb = hex_to_rgb(bg_hex)
    print(f"{' ' * (LABEL_WIDTH + 4)}\033[38;2;{fr};{fg};{fb};48;2;{br};{bg};{bb}m{text}{c.RESET}")
