#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/luminance.py

from . import config as c


def _wcag_linear(color_comp: float) -> float:
    """Linearize an 8-bit channel with the WCAG 2.1 threshold."""
    c_norm = color_comp / c.RGB_MAX
    if c_norm <= c.WCAG_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def relative_luminance(r: int, g: int, b: int) -> float:
    """
    Relative luminance of an sRGB colour, 0.0 (black) to 1.0 (white).

    Source: https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
    """
    return (
        c.LUMA_R * _wcag_linear(r) +
        c.LUMA_G * _wcag_linear(g) +
        c.LUMA_B * _wcag_linear(b)
    )
