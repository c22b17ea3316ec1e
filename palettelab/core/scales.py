#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/scales.py

from typing import Dict, List

from . import config as c
from .conversions import hex_to_hsl, hex_to_oklch, hsl_to_hex, oklch_to_hex
from palettelab.shared.clamping import _clamp


def generate_scale_hsl(hex_code: str) -> Dict[int, str]:
    """50-950 scale at fixed HSL lightness, saturation eased at the ends."""
    h, s, _ = hex_to_hsl(hex_code)
    return {
        step: hsl_to_hex(
            h,
            _clamp(s + c.SCALE_HSL_SATURATION_ADJUST[step], 0.0, c.PERCENT),
            c.SCALE_HSL_LIGHTNESS[step],
        )
        for step in c.SCALE_STEPS
    }


def generate_scale_oklch(hex_code: str) -> Dict[int, str]:
    """50-950 scale in OKLCH for more even perceived steps."""
    base = hex_to_oklch(hex_code)
    return {
        step: oklch_to_hex(
            c.SCALE_OKLCH_LIGHTNESS[step],
            min(c.OKLCH_MAX_CHROMA, base.c * c.SCALE_OKLCH_CHROMA_MULT[step]),
            base.h,
        )
        for step in c.SCALE_STEPS
    }


def _custom_chroma_mult(t: float) -> float:
    if t < 0.5:
        return 0.15 + (t * 2) * 0.85
    return 1 - (t - 0.5) * 0.9


def generate_custom_scale(hex_code: str, steps: int = 11, method: str = "oklch") -> List[str]:
    """Light-to-dark ramp with an arbitrary number of steps."""
    if steps <= 1:
        return [hex_code]

    if method == "hsl":
        h, s, _ = hex_to_hsl(hex_code)
        return [
            hsl_to_hex(
                h,
                s,
                max(c.CUSTOM_SCALE_FLOOR_HSL, c.CUSTOM_SCALE_TOP_HSL - (i / (steps - 1)) * c.CUSTOM_SCALE_SPAN_HSL),
            )
            for i in range(steps)
        ]

    base = hex_to_oklch(hex_code)
    colours = []
    for i in range(steps):
        t = i / (steps - 1)
        colours.append(
            oklch_to_hex(
                c.CUSTOM_SCALE_TOP_OKLCH - t * c.CUSTOM_SCALE_SPAN_OKLCH,
                min(c.OKLCH_MAX_CHROMA, base.c * _custom_chroma_mult(t)),
                base.h,
            )
        )
    return colours


def generate_tints(hex_code: str, count: int = 5) -> List[str]:
    """Lighter versions, easing off saturation as they approach white."""
    if count < 1:
        return []
    h, s, L = hex_to_hsl(hex_code)
    step = (c.TINT_MAX_LIGHTNESS - L) / count
    return [
        hsl_to_hex(
            h,
            max(0.0, s - i * c.TINT_SATURATION_STEP),
            min(c.TINT_MAX_LIGHTNESS, L + step * i),
        )
        for i in range(1, count + 1)
    ]


def generate_shades(hex_code: str, count: int = 5) -> List[str]:
    if count < 1:
        return []
    h, s, L = hex_to_hsl(hex_code)
    step = (L - c.SHADE_MIN_LIGHTNESS) / count
    return [
        hsl_to_hex(h, s, max(c.SHADE_MIN_LIGHTNESS, L - step * i))
        for i in range(1, count + 1)
    ]


def generate_tones(hex_code: str, count: int = 5) -> List[str]:
    """Progressively greyer versions at the same lightness."""
    if count < 1:
        return []
    h, s, L = hex_to_hsl(hex_code)
    step = s / (count + 1)
    return [hsl_to_hex(h, max(0.0, s - step * i), L) for i in range(1, count + 1)]


def mix_colours(hex1: str, hex2: str, ratio: float = 0.5) -> str:
    """Blend in HSL, taking the shorter way round the hue circle."""
    h1, s1, l1 = hex_to_hsl(hex1)
    h2, s2, l2 = hex_to_hsl(hex2)

    if abs(h1 - h2) > c.HUE_HALF:
        if h1 > h2:
            h2 += c.HUE_MAX
        else:
            h1 += c.HUE_MAX

    return hsl_to_hex(
        (h1 * (1 - ratio) + h2 * ratio) % c.HUE_MAX,
        s1 * (1 - ratio) + s2 * ratio,
        l1 * (1 - ratio) + l2 * ratio,
    )


def create_gradient_stops(start_hex: str, end_hex: str, steps: int = 5) -> List[str]:
    if steps <= 1:
        return [mix_colours(start_hex, end_hex, 0.0)]
    return [mix_colours(start_hex, end_hex, i / (steps - 1)) for i in range(steps)]


def adjust_brightness(hex_code: str, amount: float) -> str:
    h, s, L = hex_to_hsl(hex_code)
    return hsl_to_hex(h, s, _clamp(L + amount, 0.0, c.PERCENT))


def adjust_saturation(hex_code: str, amount: float) -> str:
    h, s, L = hex_to_hsl(hex_code)
    return hsl_to_hex(h, _clamp(s + amount, 0.0, c.PERCENT), L)


def shift_hue(hex_code: str, degrees: float) -> str:
    h, s, L = hex_to_hsl(hex_code)
    return hsl_to_hex((h + degrees) % c.HUE_MAX, s, L)
