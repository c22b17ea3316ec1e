#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/scale/renderer.py

from palettelab.core import config as c
from palettelab.shared.preview import print_color_block


def render_scale(title: str, colours) -> None:
    """Print a dict keyed by step, or a plain list numbered from 1."""
    print()
    print(f"{c.BOLD_WHITE}{title}{c.RESET}")
    items = colours.items() if isinstance(colours, dict) else enumerate(colours, 1)
    for label, hex_code in items:
        print_color_block(hex_code, str(label))
