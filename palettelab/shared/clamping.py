#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/clamping.py

import math


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(1.0, v))


def _clamp(v: float, lo: float, hi: float) -> float:
    if v != v:
        return lo
    return max(lo, min(hi, v))


def round_half_up(v: float) -> int:
    """Round .5 away from zero for positives, like a browser's Math.round."""
    return int(math.floor(v + 0.5))


def round_to(v: float, digits: int) -> float:
    scale = 10 ** digits
    return math.floor(v * scale + 0.5) / scale
