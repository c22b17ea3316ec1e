#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/scheme/engine.py

import argparse

from palettelab.core import config as c
from palettelab.core.harmony import (
    generate_complete_random_palette,
    generate_harmony,
    generate_random_palette,
)
from palettelab.logic.resolver import make_rng, resolve_colour_input
from .renderer import render_complete_palette, render_harmony, render_palette


def run(args: argparse.Namespace) -> None:
    """Harmonies around a base colour, or freshly drawn random palettes."""
    if args.complete:
        render_complete_palette(generate_complete_random_palette(make_rng(args)))
        return

    if args.palette:
        render_palette(generate_random_palette(args.palette, make_rng(args)))
        return

    hex_code, _ = resolve_colour_input(args, "scheme")
    models = c.HARMONY_KEYS if args.all_models else [args.model]
    for model in models:
        render_harmony(model, generate_harmony(hex_code, model))
    print()
