#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/scale/engine.py

import argparse

from palettelab.core import scales
from palettelab.logic.resolver import resolve_colour_input
from .renderer import render_scale

VARIATIONS = {
    "tints": scales.generate_tints,
    "shades": scales.generate_shades,
    "tones": scales.generate_tones,
}


def run(args: argparse.Namespace) -> None:
    """Tailwind-style 50-950 ramps plus tints, shades, tones and mixes."""
    base, _ = resolve_colour_input(args, "scale")

    if args.mix_with:
        if args.steps:
            render_scale("gradient", scales.create_gradient_stops(base, args.mix_with, args.steps))
        else:
            render_scale("mix", [scales.mix_colours(base, args.mix_with, args.ratio)])
        print()
        return

    if args.lightness or args.saturation or args.hue:
        base = scales.adjust_brightness(base, args.lightness)
        base = scales.adjust_saturation(base, args.saturation)
        base = scales.shift_hue(base, args.hue)
        render_scale("adjusted base", [base])

    if args.steps:
        render_scale(f"custom ({args.method})", scales.generate_custom_scale(base, args.steps, args.method))
    elif args.method == "hsl":
        render_scale("hsl scale", scales.generate_scale_hsl(base))
    else:
        render_scale("oklch scale", scales.generate_scale_oklch(base))

    for name in args.variation or []:
        render_scale(name, VARIATIONS[name](base, args.count))
    print()
