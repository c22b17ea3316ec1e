#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/scheme/renderer.py

from typing import Dict, List

from palettelab.core import config as c
from palettelab.core.harmony import get_harmony_description, get_harmony_name
from palettelab.shared.preview import print_color_block


def render_harmony(harmony_type: str, colours: List[str]) -> None:
    print()
    print(f"{c.BOLD_WHITE}{get_harmony_name(harmony_type)}{c.RESET}")
    print(f"{c.MSG_BOLD_COLORS['dim']}{get_harmony_description(harmony_type)}{c.RESET}")
    for i, hex_code in enumerate(colours, 1):
        print_color_block(hex_code, f"{harmony_type} {i}")


def render_palette(colours: List[str], title: str = "palette") -> None:
    print()
    for i, hex_code in enumerate(colours, 1):
        print_color_block(hex_code, f"{title} {i}")
    print()


def render_complete_palette(palette: Dict[str, list]) -> None:
    for category, scale in palette.items():
        print()
        print(f"{c.BOLD_WHITE}{category}{c.RESET}")
        for entry in scale:
            print_color_block(entry.hex, entry.name)
    print()
