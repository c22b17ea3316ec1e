#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/vision.py

"""
Colour vision deficiency simulation and the pairwise checks built on it.

Simulation applies a fixed 3x3 matrix per deficiency to RGB scaled to
0-1 (Machado, Oliveira & Fernandes, 2009). Results are memoised in a
SimulationCache; pass ``cache=`` to use a private one.
"""

import math
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

from . import config as c
from .cache import SimulationCache
from .contrast import get_contrast_ratio_from_hex
from .conversions import hex_to_hsl, hex_to_rgb, hsl_to_hex, rgb_to_hex
from .types import (
    COMMON_CVD_TYPES,
    CVD_TYPES,
    HSL,
    CategoryAccessibility,
    CategoryPair,
    CVDType,
    LightnessFix,
    TypeAccessibility,
)
from palettelab.shared.clamping import _clamp, round_half_up

CVDLike = Union[CVDType, str]

_default_cache = SimulationCache()


def _cache_for(cache: Optional[SimulationCache]) -> SimulationCache:
    return _default_cache if cache is None else cache


def _apply_matrix(r: int, g: int, b: int, matrix) -> tuple:
    r_n, g_n, b_n = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    return tuple(
        (row[0] * r_n + row[1] * g_n + row[2] * b_n) * c.RGB_MAX
        for row in matrix
    )


def simulate_colourblindness(
    hex_code: str, cvd_type: CVDLike, cache: Optional[SimulationCache] = None
) -> str:
    """Return how hex_code appears under cvd_type, as '#rrggbb'."""
    cvd_type = CVDType(cvd_type)
    store = _cache_for(cache)
    key = f"{hex_code.lower()}:{cvd_type.value}"

    cached = store.get(key)
    if cached is not None:
        return cached

    simulated = _apply_matrix(*hex_to_rgb(hex_code), c.CB_MATRICES[cvd_type.value])
    result = rgb_to_hex(*simulated)
    store.set(key, result)
    return result


def clear_simulation_cache(cache: Optional[SimulationCache] = None) -> None:
    _cache_for(cache).clear()


def get_simulation_cache_size(cache: Optional[SimulationCache] = None) -> int:
    return len(_cache_for(cache))


def simulate_colourblindness_batch(
    hex_values: Iterable[str], cvd_type: CVDLike, cache: Optional[SimulationCache] = None
) -> List[str]:
    return [simulate_colourblindness(h, cvd_type, cache) for h in hex_values]


def get_all_simulations(
    hex_code: str, cache: Optional[SimulationCache] = None
) -> Dict[CVDType, str]:
    """Simulate one colour under every deficiency type."""
    return {t: simulate_colourblindness(hex_code, t, cache) for t in CVD_TYPES}


def simulated_distance(
    hex1: str, hex2: str, cvd_type: CVDLike, cache: Optional[SimulationCache] = None
) -> float:
    """Euclidean RGB distance between two colours after simulation."""
    rgb1 = hex_to_rgb(simulate_colourblindness(hex1, cvd_type, cache))
    rgb2 = hex_to_rgb(simulate_colourblindness(hex2, cvd_type, cache))
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(rgb1, rgb2)))


def are_colours_distinguishable(
    hex1: str,
    hex2: str,
    cvd_type: CVDLike,
    threshold: float = c.DISTINGUISH_THRESHOLD,
    cache: Optional[SimulationCache] = None,
) -> bool:
    return simulated_distance(hex1, hex2, cvd_type, cache) >= threshold


def check_palette_accessibility(
    hex_values: Sequence[str],
    threshold: float = c.DISTINGUISH_THRESHOLD,
    cache: Optional[SimulationCache] = None,
    cvd_types: Iterable[CVDLike] = COMMON_CVD_TYPES,
) -> Dict[CVDType, TypeAccessibility]:
    """
    Check every unordered pair under each of cvd_types (the four full
    deficiencies by default). A type is accessible when none of its pairs
    fall below threshold.
    """
    result = {}
    for cvd_type in map(CVDType, cvd_types):
        pairs = []
        for i in range(len(hex_values)):
            for j in range(i + 1, len(hex_values)):
                if not are_colours_distinguishable(
                    hex_values[i], hex_values[j], cvd_type, threshold, cache
                ):
                    pairs.append((hex_values[i], hex_values[j]))
        result[cvd_type] = TypeAccessibility(not pairs, pairs)
    return result


def check_category_accessibility(
    categories: Mapping[str, Sequence[str]],
    threshold: float = c.DISTINGUISH_THRESHOLD,
    cache: Optional[SimulationCache] = None,
) -> CategoryAccessibility:
    """
    Like check_palette_accessibility, but colours are only compared with
    others in the same category. Categories with fewer than two colours
    are skipped and do not appear in by_category.
    """
    by_type = {t: TypeAccessibility(True, []) for t in COMMON_CVD_TYPES}
    by_category = {}

    for category, hex_values in categories.items():
        if len(hex_values) < 2:
            continue

        category_result = check_palette_accessibility(hex_values, threshold, cache)
        by_category[category] = category_result

        for cvd_type, type_result in category_result.items():
            if type_result.accessible:
                continue
            merged = by_type[cvd_type].problematic_pairs + [
                CategoryPair(h1, h2, category) for h1, h2 in type_result.problematic_pairs
            ]
            by_type[cvd_type] = TypeAccessibility(False, merged)

    return CategoryAccessibility(by_type, by_category)


def _whole_lightness(hex_code: str) -> HSL:
    """HSL with lightness rounded, so fix searches step through whole percentages."""
    h, s, lightness = hex_to_hsl(hex_code)
    return HSL(h, s, round_half_up(lightness))


def _lightness_candidates(lightness: float, go_darker: bool, attempts: int, bounds):
    """Yield lightness values alternating around the start, preferred side first."""
    lo, hi = bounds
    for i in range(1, attempts + 1):
        delta = i * c.FIX_LIGHTNESS_STEP
        steps = (-delta, delta) if go_darker else (delta, -delta)
        for step in steps:
            yield _clamp(lightness + step, lo, hi)


def suggest_contrast_fix(
    text_hex: str,
    background_hex: str,
    cvd_type: CVDLike,
    target_ratio: float = c.WCAG_AA_NORMAL,
    cache: Optional[SimulationCache] = None,
) -> LightnessFix:
    """
    Find a lightness for the text colour that reaches target_ratio against
    the background once both are simulated. Always returns a suggestion:
    if the search fails, an extreme lightness in the preferred direction.
    """
    h, s, lightness = _whole_lightness(text_hex)
    go_darker = lightness > _whole_lightness(background_hex).l
    simulated_bg = simulate_colourblindness(background_hex, cvd_type, cache)

    for candidate in _lightness_candidates(
        lightness, go_darker, c.CONTRAST_FIX_MAX_ATTEMPTS, c.CONTRAST_FIX_BOUNDS
    ):
        new_hex = hsl_to_hex(h, s, candidate)
        simulated_text = simulate_colourblindness(new_hex, cvd_type, cache)
        if get_contrast_ratio_from_hex(simulated_text, simulated_bg) >= target_ratio:
            return LightnessFix(new_hex, candidate)

    fallback = c.CONTRAST_FIX_FALLBACK_DARK if go_darker else c.CONTRAST_FIX_FALLBACK_LIGHT
    return LightnessFix(hsl_to_hex(h, s, fallback), fallback)


def suggest_distinguishable_fix(
    colour_to_adjust: str,
    other_colour: str,
    cvd_type: CVDLike,
    threshold: float = c.DISTINGUISH_FIX_THRESHOLD,
    cache: Optional[SimulationCache] = None,
) -> Optional[LightnessFix]:
    """Shift lightness until the two colours separate under simulation, or None."""
    h, s, lightness = _whole_lightness(colour_to_adjust)
    go_darker = lightness > _whole_lightness(other_colour).l

    for candidate in _lightness_candidates(
        lightness, go_darker, c.DISTINGUISH_FIX_MAX_ATTEMPTS, c.DISTINGUISH_FIX_BOUNDS
    ):
        new_hex = hsl_to_hex(h, s, candidate)
        if are_colours_distinguishable(new_hex, other_colour, cvd_type, threshold, cache):
            return LightnessFix(new_hex, candidate)
    return None


def get_colourblind_type_name(cvd_type: CVDLike) -> str:
    return c.CB_NAMES[CVDType(cvd_type).value]


def get_colourblind_type_description(cvd_type: CVDLike) -> str:
    return c.CB_DESCRIPTIONS[CVDType(cvd_type).value]
