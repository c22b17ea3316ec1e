#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/conversions.py

import functools
import math
import re
from typing import Optional, Tuple

from . import config as c
from .types import CMYK, HSL, HSV, LAB, OKLCH, RGB
from palettelab.shared.clamping import _clamp, _clamp01, round_half_up

_HEX_RE = re.compile(r"^#?([0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)
_RGB_RE = re.compile(r"^rgb\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)$")
_HSL_RE = re.compile(r"^hsl\s*\(\s*(\d+)\s*,\s*(\d+)%?\s*,\s*(\d+)%?\s*\)$")


# ==========================================
# Hex Handling
# ==========================================


def is_valid_hex(hex_code: str) -> bool:
    """Strict check for '#rgb' / '#rrggbb' (the '#' is optional)."""
    if not isinstance(hex_code, str):
        return False
    return _HEX_RE.match(hex_code) is not None


def normalise_hex(hex_code: str) -> str:
    """Lower-case, '#'-prefixed and expanded to 6 digits. Does not validate."""
    h = hex_code[1:] if hex_code.startswith("#") else hex_code
    h = h.lower()
    if len(h) == 3:
        h = "".join(ch * 2 for ch in h)
    return f"#{h}"


def hex_to_rgb(hex_code: str) -> RGB:
    """Convert hex string to RGB. Anything malformed decodes as black."""
    if not is_valid_hex(hex_code):
        return RGB(0, 0, 0)
    h = normalise_hex(hex_code)[1:]
    return RGB(*(int(h[i : i + 2], 16) for i in (0, 2, 4)))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to '#rrggbb'."""
    r_c = round_half_up(_clamp(r, 0.0, c.RGB_MAX))
    g_c = round_half_up(_clamp(g, 0.0, c.RGB_MAX))
    b_c = round_half_up(_clamp(b, 0.0, c.RGB_MAX))
    return f"#{r_c:02x}{g_c:02x}{b_c:02x}"


def _to_rgb(r: float, g: float, b: float) -> RGB:
    return RGB(
        round_half_up(_clamp01(r) * c.RGB_MAX),
        round_half_up(_clamp01(g) * c.RGB_MAX),
        round_half_up(_clamp01(b) * c.RGB_MAX),
    )


# ==========================================
# HSL / HSV
# ==========================================


def _hue_from_rgb(r_f: float, g_f: float, b_f: float, cmax: float, delta: float) -> float:
    if cmax == r_f:
        h = (g_f - b_f) / delta + (6.0 if g_f < b_f else 0.0)
    elif cmax == g_f:
        h = (b_f - r_f) / delta + 2.0
    else:
        h = (r_f - g_f) / delta + 4.0
    return (h * 60.0) % c.HUE_MAX


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """Convert RGB to HSL (degrees, percent, percent)."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta == 0:
        return HSL(0.0, 0.0, L * c.PERCENT)

    if L > 0.5:
        s = delta / (c.DIV_2 - cmax - cmin)
    else:
        s = delta / (cmax + cmin)
    h = _hue_from_rgb(r_f, g_f, b_f, cmax, delta)
    return HSL(h, s * c.PERCENT, L * c.PERCENT)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, L: float) -> RGB:
    """Convert HSL to RGB. Hue wraps, saturation and lightness clamp."""
    h_n = (h % c.HUE_MAX) / c.HUE_MAX
    s_n = _clamp01(s / c.PERCENT)
    l_n = _clamp01(L / c.PERCENT)

    if s_n == 0:
        return _to_rgb(l_n, l_n, l_n)

    q = l_n * (1 + s_n) if l_n < 0.5 else l_n + s_n - l_n * s_n
    p = 2 * l_n - q
    return _to_rgb(
        _hue_to_channel(p, q, h_n + 1 / 3),
        _hue_to_channel(p, q, h_n),
        _hue_to_channel(p, q, h_n - 1 / 3),
    )


def rgb_to_hsv(r: int, g: int, b: int) -> HSV:
    """Convert RGB to HSV (degrees, percent, percent)."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    s = 0.0 if cmax == 0 else delta / cmax
    h = 0.0 if delta == 0 else _hue_from_rgb(r_f, g_f, b_f, cmax, delta)
    return HSV(h, s * c.PERCENT, cmax * c.PERCENT)


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """Convert HSV to RGB."""
    h_n = (h % c.HUE_MAX) / c.HUE_MAX
    s_n = _clamp01(s / c.PERCENT)
    v_n = _clamp01(v / c.PERCENT)

    i = math.floor(h_n * 6)
    f = h_n * 6 - i
    p = v_n * (1 - s_n)
    q = v_n * (1 - f * s_n)
    t = v_n * (1 - (1 - f) * s_n)

    sector = i % 6
    if sector == 0:
        r, g, b = v_n, t, p
    elif sector == 1:
        r, g, b = q, v_n, p
    elif sector == 2:
        r, g, b = p, v_n, t
    elif sector == 3:
        r, g, b = p, q, v_n
    elif sector == 4:
        r, g, b = t, p, v_n
    else:
        r, g, b = v_n, p, q
    return _to_rgb(r, g, b)


# ==========================================
# CMYK
# ==========================================


def rgb_to_cmyk(r: int, g: int, b: int) -> CMYK:
    """Convert RGB to CMYK whole percentages."""
    r_n, g_n, b_n = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    k = c.UNIT - max(r_n, g_n, b_n)
    if k >= c.UNIT:
        return CMYK(0, 0, 0, 100)
    denom = c.UNIT - k
    return CMYK(
        round_half_up((c.UNIT - r_n - k) / denom * c.PERCENT),
        round_half_up((c.UNIT - g_n - k) / denom * c.PERCENT),
        round_half_up((c.UNIT - b_n - k) / denom * c.PERCENT),
        round_half_up(k * c.PERCENT),
    )


def cmyk_to_rgb(cy: float, m: float, y: float, k: float) -> RGB:
    """Convert CMYK percentages to RGB."""
    cy_n, m_n = _clamp01(cy / c.PERCENT), _clamp01(m / c.PERCENT)
    y_n, k_n = _clamp01(y / c.PERCENT), _clamp01(k / c.PERCENT)
    return _to_rgb(
        (c.UNIT - cy_n) * (c.UNIT - k_n),
        (c.UNIT - m_n) * (c.UNIT - k_n),
        (c.UNIT - y_n) * (c.UNIT - k_n),
    )


# ==========================================
# Linear Light, XYZ & CIELAB
# ==========================================


def _srgb_to_linear(color_comp: float) -> float:
    """Linearize an sRGB component given on the 0-255 scale."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def _linear_to_srgb(l_val: float) -> float:
    """Apply sRGB gamma to a linear component, result on the 0-1 scale."""
    l_val = max(l_val, 0.0)
    if l_val <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * l_val
    return c.SRGB_DIVISOR * (l_val ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def rgb_to_xyz(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert RGB to CIE XYZ (Y on the 0-100 scale)."""
    r_lin = _srgb_to_linear(r)
    g_lin = _srgb_to_linear(g)
    b_lin = _srgb_to_linear(b)
    x = r_lin * c.M_SRGB_XYZ_X[0] + g_lin * c.M_SRGB_XYZ_X[1] + b_lin * c.M_SRGB_XYZ_X[2]
    y = r_lin * c.M_SRGB_XYZ_Y[0] + g_lin * c.M_SRGB_XYZ_Y[1] + b_lin * c.M_SRGB_XYZ_Y[2]
    z = r_lin * c.M_SRGB_XYZ_Z[0] + g_lin * c.M_SRGB_XYZ_Z[1] + b_lin * c.M_SRGB_XYZ_Z[2]
    return x * c.XYZ_SCALING, y * c.XYZ_SCALING, z * c.XYZ_SCALING


def xyz_to_rgb(x: float, y: float, z: float) -> RGB:
    """Convert CIE XYZ to RGB."""
    x_n, y_n, z_n = x / c.XYZ_SCALING, y / c.XYZ_SCALING, z / c.XYZ_SCALING
    r_lin = x_n * c.M_XYZ_SRGB_R[0] + y_n * c.M_XYZ_SRGB_R[1] + z_n * c.M_XYZ_SRGB_R[2]
    g_lin = x_n * c.M_XYZ_SRGB_G[0] + y_n * c.M_XYZ_SRGB_G[1] + z_n * c.M_XYZ_SRGB_G[2]
    b_lin = x_n * c.M_XYZ_SRGB_B[0] + y_n * c.M_XYZ_SRGB_B[1] + z_n * c.M_XYZ_SRGB_B[2]
    return _to_rgb(_linear_to_srgb(r_lin), _linear_to_srgb(g_lin), _linear_to_srgb(b_lin))


def _xyz_f(t: float) -> float:
    """Helper function for XYZ to LAB."""
    return t**c.LAB_POW if t > c.LAB_E else (c.LAB_K * t) + c.LAB_OFFSET


def _xyz_f_inv(t: float) -> float:
    """Helper function for LAB to XYZ."""
    return t**3 if t > c.LAB_INV_THR else (t - c.LAB_OFFSET) / c.LAB_K


def rgb_to_lab(r: int, g: int, b: int) -> LAB:
    """Convert RGB to CIE LAB (D65)."""
    x, y, z = rgb_to_xyz(r, g, b)
    x_r = _xyz_f(x / c.D65_X)
    y_r = _xyz_f(y / c.D65_Y)
    z_r = _xyz_f(z / c.D65_Z)
    return LAB(
        (c.LAB_L_MULT * y_r) - c.LAB_L_SUB,
        c.LAB_A_MULT * (x_r - y_r),
        c.LAB_B_MULT * (y_r - z_r),
    )


def lab_to_rgb(L: float, a: float, b: float) -> RGB:
    """Convert CIE LAB (D65) to RGB."""
    y_r = (L + c.LAB_L_SUB) / c.LAB_L_MULT
    x_r = a / c.LAB_A_MULT + y_r
    z_r = y_r - b / c.LAB_B_MULT
    return xyz_to_rgb(
        _xyz_f_inv(x_r) * c.D65_X,
        _xyz_f_inv(y_r) * c.D65_Y,
        _xyz_f_inv(z_r) * c.D65_Z,
    )


# ==========================================
# OKLab / OKLCH
# ==========================================


def _signed_cbrt(v: float) -> float:
    return v ** c.OKLAB_CUBE_ROOT_EXP if v >= 0 else -((-v) ** c.OKLAB_CUBE_ROOT_EXP)


def _mat3(m, v0: float, v1: float, v2: float) -> Tuple[float, float, float]:
    return (
        m[0][0] * v0 + m[0][1] * v1 + m[0][2] * v2,
        m[1][0] * v0 + m[1][1] * v1 + m[1][2] * v2,
        m[2][0] * v0 + m[2][1] * v1 + m[2][2] * v2,
    )


def rgb_to_oklab(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert RGB to OKLab."""
    lms = _mat3(c.M1_OKLAB, _srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b))
    return _mat3(c.M2_OKLAB, *(_signed_cbrt(v) for v in lms))


def oklab_to_rgb(L: float, a: float, b: float) -> RGB:
    """Convert OKLab to RGB."""
    l_, m_, s_ = _mat3(c.M2_OKLAB_INV, L, a, b)
    r_lin, g_lin, b_lin = _mat3(c.M1_OKLAB_INV, l_**3, m_**3, s_**3)
    return _to_rgb(_linear_to_srgb(r_lin), _linear_to_srgb(g_lin), _linear_to_srgb(b_lin))


def rgb_to_oklch(r: int, g: int, b: int) -> OKLCH:
    """Convert RGB to OKLCH."""
    L, a, b_ok = rgb_to_oklab(r, g, b)
    chroma = math.hypot(a, b_ok)
    hue = math.degrees(math.atan2(b_ok, a)) % c.HUE_MAX
    return OKLCH(L, chroma, hue)


def oklch_to_rgb(L: float, chroma: float, hue: float) -> RGB:
    """Convert OKLCH to RGB, capping chroma to stay near the sRGB gamut."""
    L = _clamp01(L)
    chroma = _clamp(chroma, 0.0, c.OKLCH_MAX_CHROMA)
    a = chroma * math.cos(math.radians(hue))
    b = chroma * math.sin(math.radians(hue))
    return oklab_to_rgb(L, a, b)


# ==========================================
# Direct Conversion Wrappers
# ==========================================


def hex_to_hsl(hex_code: str) -> HSL:
    """Direct Hex to HSL."""
    return rgb_to_hsl(*hex_to_rgb(hex_code))


def hsl_to_hex(h: float, s: float, L: float) -> str:
    """Direct HSL to Hex."""
    return rgb_to_hex(*hsl_to_rgb(h, s, L))


def hex_to_hsv(hex_code: str) -> HSV:
    """Direct Hex to HSV."""
    return rgb_to_hsv(*hex_to_rgb(hex_code))


def hsv_to_hex(h: float, s: float, v: float) -> str:
    """Direct HSV to Hex."""
    return rgb_to_hex(*hsv_to_rgb(h, s, v))


def hex_to_cmyk(hex_code: str) -> CMYK:
    """Direct Hex to CMYK."""
    return rgb_to_cmyk(*hex_to_rgb(hex_code))


def cmyk_to_hex(cy: float, m: float, y: float, k: float) -> str:
    """Direct CMYK to Hex."""
    return rgb_to_hex(*cmyk_to_rgb(cy, m, y, k))


def hex_to_lab(hex_code: str) -> LAB:
    """Direct Hex to LAB."""
    return rgb_to_lab(*hex_to_rgb(hex_code))


def lab_to_hex(L: float, a: float, b: float) -> str:
    """Direct LAB to Hex."""
    return rgb_to_hex(*lab_to_rgb(L, a, b))


def hex_to_oklch(hex_code: str) -> OKLCH:
    """Direct Hex to OKLCH."""
    return rgb_to_oklch(*hex_to_rgb(hex_code))


def oklch_to_hex(L: float, chroma: float, hue: float) -> str:
    """Direct OKLCH to Hex."""
    return rgb_to_hex(*oklch_to_rgb(L, chroma, hue))


# ==========================================
# Loose Parsing
# ==========================================


def parse_colour(value: str) -> Optional[str]:
    """
    Parse hex, 'rgb(r, g, b)' or 'hsl(h, s%, l%)' into canonical hex.
    Returns None when the string is none of those.
    """
    if not isinstance(value, str):
        return None
    value = value.strip().lower()

    if is_valid_hex(value):
        return normalise_hex(value)

    m = _RGB_RE.match(value)
    if m:
        return rgb_to_hex(*(int(g) for g in m.groups()))

    m = _HSL_RE.match(value)
    if m:
        return hsl_to_hex(*(int(g) for g in m.groups()))

    return None


# Apply LRU caching to all functions in this module
for _name, _obj in list(globals().items()):
    if callable(_obj) and getattr(_obj, "__module__", None) == __name__ and not isinstance(_obj, type):
        globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_obj)
