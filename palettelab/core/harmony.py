#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/harmony.py

import random
from typing import Dict, List, Optional

from . import config as c
from .conversions import hex_to_hsl, hex_to_oklch, hsl_to_hex, oklch_to_hex
from .types import NamedColour
from palettelab.shared.clamping import _clamp


def _rotate(hex_code: str, degrees: float) -> str:
    h, s, L = hex_to_hsl(hex_code)
    return hsl_to_hex((h + degrees) % c.HUE_MAX, s, L)


def generate_monochromatic(hex_code: str, count: int = c.MONO_DEFAULT_COUNT) -> List[str]:
    """Same hue and saturation, lightness stepped from 90 down to 10."""
    if count <= 1:
        return [hex_code]

    h, s, _ = hex_to_hsl(hex_code)
    lo, hi = c.MONO_LIGHTNESS_RANGE
    step = (hi - lo) / (count - 1)
    return [hsl_to_hex(h, s, _clamp(hi - i * step, lo, hi)) for i in range(count)]


def generate_harmony(hex_code: str, harmony_type: str) -> List[str]:
    """
    Colours related to hex_code by hue rotation on the HSL wheel.

    The base colour is returned unchanged at its offset-0 position.
    Unknown harmony types give back just the base colour.
    """
    if harmony_type == "monochromatic":
        return generate_monochromatic(hex_code)

    offsets = c.HARMONY_OFFSETS.get(harmony_type)
    if offsets is None:
        return [hex_code]

    return [hex_code if deg == 0 else _rotate(hex_code, deg) for deg in offsets]


def get_harmony_name(harmony_type: str) -> str:
    return c.HARMONY_NAMES.get(harmony_type, harmony_type)


def get_harmony_description(harmony_type: str) -> str:
    return c.HARMONY_DESCRIPTIONS.get(harmony_type, "")


# ==========================================
# Random Generation
# ==========================================


def generate_random_colour(rng: Optional[random.Random] = None) -> str:
    """Random hue with saturation in [50, 90) and lightness in [30, 70)."""
    rng = rng or random.Random()
    s_start, s_width = c.RANDOM_SATURATION
    l_start, l_width = c.RANDOM_LIGHTNESS
    return hsl_to_hex(
        rng.randrange(int(c.HUE_MAX)),
        rng.randrange(s_start, s_start + s_width),
        rng.randrange(l_start, l_start + l_width),
    )


def generate_random_palette(count: int = 5, rng: Optional[random.Random] = None) -> List[str]:
    """A random base colour followed by count-1 colours spread around the wheel."""
    rng = rng or random.Random()
    base = generate_random_colour(rng)
    h, s, L = hex_to_hsl(base)
    jitter = c.RANDOM_PALETTE_JITTER

    colours = [base]
    for i in range(1, count):
        hue_shift = (c.HUE_MAX / count) * i + rng.uniform(-jitter, jitter)
        colours.append(
            hsl_to_hex(
                (h + hue_shift) % c.HUE_MAX,
                _clamp(s + rng.uniform(-jitter, jitter), *c.RANDOM_PALETTE_SAT_BOUNDS),
                _clamp(L + rng.uniform(-jitter, jitter), *c.RANDOM_PALETTE_LIGHT_BOUNDS),
            )
        )
    return colours


def _named_scale(h: float, s: float, category: str) -> List[NamedColour]:
    base = hex_to_oklch(hsl_to_hex(h, s, c.SCALE_BASE_LIGHTNESS))
    return [
        NamedColour(
            oklch_to_hex(
                c.SCALE_OKLCH_LIGHTNESS[step],
                min(c.OKLCH_MAX_CHROMA, base.c * c.SCALE_OKLCH_CHROMA_MULT[step]),
                base.h,
            ),
            f"{category}-{step}",
        )
        for step in c.SCALE_STEPS
    ]


def generate_complete_random_palette(
    rng: Optional[random.Random] = None,
) -> Dict[str, List[NamedColour]]:
    """
    One 50-950 scale for each semantic category. Brand hues derive from a
    random base hue; status colours stay in their customary hue bands.
    """
    rng = rng or random.Random()
    base_hue = rng.randrange(360)

    if rng.random() > 0.5:
        error_hue = rng.randrange(15)
    else:
        error_hue = rng.randrange(345, 360)

    recipe = (
        ("primary", base_hue, rng.randrange(70, 90)),
        ("secondary", (base_hue + 180 + rng.randrange(-20, 20)) % 360, rng.randrange(50, 70)),
        ("accent", (base_hue + 120 + rng.randrange(-15, 15)) % 360, rng.randrange(80, 95)),
        ("neutral", base_hue, 8),
        ("success", rng.randrange(100, 140), 70),
        ("warning", rng.randrange(35, 55), 85),
        ("error", error_hue, 75),
        ("info", rng.randrange(200, 230), 75),
    )
    return {key: _named_scale(h, s, key.capitalize()) for key, h, s in recipe}
