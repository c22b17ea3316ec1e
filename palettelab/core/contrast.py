#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/contrast.py

from typing import List, Optional, Sequence, Tuple

from . import config as c
from .conversions import hex_to_rgb, rgb_to_hex
from .luminance import relative_luminance
from .types import RGB, ContrastResult, WCAGLevel
from palettelab.shared.clamping import round_half_up, round_to


def contrast_ratio(l1: float, l2: float) -> float:
    """
    WCAG 2.1 contrast ratio between two relative luminances.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    Formula: (L1 + 0.05) / (L2 + 0.05), L1 being the lighter of the two.
    """
    lighter, darker = (l1, l2) if l1 > l2 else (l2, l1)
    return (lighter + c.WCAG_LUMINANCE_OFFSET) / (darker + c.WCAG_LUMINANCE_OFFSET)


def get_contrast_ratio_from_hex(hex1: str, hex2: str) -> float:
    """Contrast ratio between two hex colours."""
    return contrast_ratio(
        relative_luminance(*hex_to_rgb(hex1)),
        relative_luminance(*hex_to_rgb(hex2)),
    )


def get_contrast_result(hex1: str, hex2: str) -> ContrastResult:
    ratio = get_contrast_ratio_from_hex(hex1, hex2)
    return ContrastResult(
        ratio=round_to(ratio, 2),
        wcag_aa=ratio >= c.WCAG_AA_NORMAL,
        wcag_aaa=ratio >= c.WCAG_AAA_NORMAL,
        wcag_aa_large=ratio >= c.WCAG_AA_LARGE,
        wcag_aaa_large=ratio >= c.WCAG_AAA_LARGE,
    )


def get_wcag_level(ratio: float, is_large_text: bool = False) -> str:
    """Map a contrast ratio to its WCAG level string."""
    if is_large_text:
        if ratio >= c.WCAG_AAA_LARGE:
            return WCAGLevel.AAA
        if ratio >= c.WCAG_AA_LARGE:
            return WCAGLevel.AA
        return WCAGLevel.FAIL

    if ratio >= c.WCAG_AAA_NORMAL:
        return WCAGLevel.AAA
    if ratio >= c.WCAG_AA_NORMAL:
        return WCAGLevel.AA
    if ratio >= c.WCAG_AA_LARGE:
        return WCAGLevel.AA_LARGE
    return WCAGLevel.FAIL


def is_light_colour(hex_code: str) -> bool:
    return relative_luminance(*hex_to_rgb(hex_code)) > c.LIGHT_COLOUR_LUMINANCE


def get_optimal_text_colour(background_hex: str) -> str:
    """Black text on light backgrounds, white text on dark ones."""
    return "#000000" if is_light_colour(background_hex) else "#ffffff"


def find_best_contrast(target_hex: str, candidates: Sequence[str]) -> Optional[str]:
    """Candidate with the highest ratio against target. First one wins ties."""
    if not candidates:
        return None

    best_colour = candidates[0]
    best_ratio = get_contrast_ratio_from_hex(target_hex, best_colour)
    for candidate in candidates[1:]:
        ratio = get_contrast_ratio_from_hex(target_hex, candidate)
        if ratio > best_ratio:
            best_ratio = ratio
            best_colour = candidate
    return best_colour


def generate_contrast_matrix(colours: Sequence[str]) -> List[List[float]]:
    """Square matrix of pairwise ratios, 1.0 on the diagonal."""
    return [
        [
            1.0 if i == j else get_contrast_ratio_from_hex(a, b)
            for j, b in enumerate(colours)
        ]
        for i, a in enumerate(colours)
    ]


def check_all_contrast(
    colours: Sequence[str], min_ratio: float = c.WCAG_AA_NORMAL
) -> Tuple[bool, List[Tuple[str, str, float]]]:
    """Every unordered pair must reach min_ratio. Returns (passing, failures)."""
    failures = []
    for i in range(len(colours)):
        for j in range(i + 1, len(colours)):
            ratio = get_contrast_ratio_from_hex(colours[i], colours[j])
            if ratio < min_ratio:
                failures.append((colours[i], colours[j], ratio))
    return not failures, failures


def _blend(fg: RGB, amount: float, toward_black: bool) -> RGB:
    if toward_black:
        return RGB(*(round_half_up(ch * (1 - amount)) for ch in fg))
    return RGB(*(round_half_up(ch + (c.RGB_MAX - ch) * amount) for ch in fg))


def suggest_contrasting_colour(
    background_hex: str, foreground_hex: str, target_ratio: float = c.WCAG_AA_NORMAL
) -> str:
    """
    Blend the foreground toward black (light background) or white (dark
    background) until it reaches target_ratio against the background.

    Binary search over the blend amount. Returns the least-blended colour
    that meets the target; if no tried blend meets it, the one with the
    highest ratio.
    """
    bg_lum = relative_luminance(*hex_to_rgb(background_hex))
    fg = hex_to_rgb(foreground_hex)
    toward_black = bg_lum > c.SUGGEST_LIGHT_BG_LUMINANCE

    low, high = 0.0, 1.0
    best_hex = None
    fallback_hex = rgb_to_hex(*fg)
    fallback_ratio = contrast_ratio(bg_lum, relative_luminance(*fg))

    for _ in range(c.CONTRAST_BINARY_SEARCH_ITERATIONS):
        mid = (low + high) / c.DIV_2
        adjusted = _blend(fg, mid, toward_black)
        ratio = contrast_ratio(bg_lum, relative_luminance(*adjusted))

        if ratio > fallback_ratio:
            fallback_ratio = ratio
            fallback_hex = rgb_to_hex(*adjusted)

        if ratio >= target_ratio:
            best_hex = rgb_to_hex(*adjusted)
            high = mid
        else:
            low = mid

    return best_hex if best_hex is not None else fallback_hex
