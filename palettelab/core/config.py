#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 1024

# Default capacity of the CVD simulation cache
SIMULATION_CACHE_SIZE = 500

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_LARGE = 4.5               # Enhanced contrast for large text (Level AAA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_MIN_RATIO = 1.0               # Lower bound for WCAG calculation
WCAG_MAX_RATIO = 21.0              # Upper bound for WCAG calculation (Black on White)
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula
WCAG_LINEAR_TH = 0.03928           # sRGB linearisation threshold used by the WCAG 2.1 text

# Luminance above which black text reads better than white
LIGHT_COLOUR_LUMINANCE = 0.179
# Background luminance above which contrast suggestions darken the foreground
SUGGEST_LIGHT_BG_LUMINANCE = 0.5
CONTRAST_BINARY_SEARCH_ITERATIONS = 20

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
HUE_HALF = 180.0                   # Half circle, shorter-arc test for hue mixing
PERCENT = 100.0                    # Percentage scale for HSL/HSV/CMYK channels

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# XYZ D65 Reference White (Source: ASTM E308-01 / CIE D65)
D65_X = 95.047                     # X coordinate for D65 illuminant (2-degree observer)
D65_Y = 100.0                      # Y coordinate (Luminance) for D65 illuminant
D65_Z = 108.883                    # Z coordinate for D65 illuminant
XYZ_SCALING = 100.0                # Factor for normalizing/scaling XYZ coordinates

# sRGB to XYZ Matrix (Source: sRGB D65)
M_SRGB_XYZ_X = (0.4124564, 0.3575761, 0.1804375)
M_SRGB_XYZ_Y = (0.2126729, 0.7151522, 0.0721750)
M_SRGB_XYZ_Z = (0.0193339, 0.1191920, 0.9503041)

# XYZ to sRGB Matrix (Source: sRGB D65 inverse)
M_XYZ_SRGB_R = (3.2404542, -1.5371385, -0.4985314)
M_XYZ_SRGB_G = (-0.9692660, 1.8760108, 0.0415560)
M_XYZ_SRGB_B = (0.0556434, -0.2040259, 1.0572252)

# CIELAB Constants (Source: CIE 15:2004)
LAB_E = 0.008856                   # Threshold for switching between linear and power functions
LAB_K = 7.787                      # Slope of the linear segment for low luminance values
LAB_OFFSET = 16.0 / 116.0          # Constant offset for normalization in XYZ to Lab conversion
LAB_POW = 1.0 / 3.0                # Cube root exponent
LAB_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LAB_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LAB_A_MULT = 500.0                 # Multiplier for 'a*' (green-red) channel calculation
LAB_B_MULT = 200.0                 # Multiplier for 'b*' (blue-yellow) channel calculation
LAB_INV_THR = 0.20689655           # Threshold for inverse conversion (Lab to XYZ)

# OKLab (Source: https://bottosson.github.io/posts/oklab/)
OKLAB_CUBE_ROOT_EXP = 1.0 / 3.0    # Power exponent for perceptual LMS non-linearity
OKLCH_MAX_CHROMA = 0.4             # Chroma cap when going back to sRGB

# Linear sRGB to LMS
M1_OKLAB = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

# LMS' to OKLab
M2_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

# OKLab to LMS'
M2_OKLAB_INV = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

# LMS to linear sRGB
M1_OKLAB_INV = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)

# Color Blindness Simulation Matrices (Source: Machado, Oliveira & Fernandes, 2009)
# Applied to RGB scaled to 0-1, rows produce R, G, B.
CB_MATRICES = {
    "protanopia": (
        (0.56667, 0.43333, 0.00000),
        (0.55833, 0.44167, 0.00000),
        (0.00000, 0.24167, 0.75833),
    ),
    "deuteranopia": (
        (0.62500, 0.37500, 0.00000),
        (0.70000, 0.30000, 0.00000),
        (0.00000, 0.30000, 0.70000),
    ),
    "tritanopia": (
        (0.95000, 0.05000, 0.00000),
        (0.00000, 0.43333, 0.56667),
        (0.00000, 0.47500, 0.52500),
    ),
    "achromatopsia": (
        (0.21260, 0.71520, 0.07220),
        (0.21260, 0.71520, 0.07220),
        (0.21260, 0.71520, 0.07220),
    ),
    "protanomaly": (
        (0.81667, 0.18333, 0.00000),
        (0.33333, 0.66667, 0.00000),
        (0.00000, 0.12500, 0.87500),
    ),
    "deuteranomaly": (
        (0.80000, 0.20000, 0.00000),
        (0.25833, 0.74167, 0.00000),
        (0.00000, 0.14167, 0.85833),
    ),
    "tritanomaly": (
        (0.96667, 0.03333, 0.00000),
        (0.00000, 0.73333, 0.26667),
        (0.00000, 0.18333, 0.81667),
    ),
}

CB_NAMES = {
    "protanopia": "Protanopia (Red-blind)",
    "deuteranopia": "Deuteranopia (Green-blind)",
    "tritanopia": "Tritanopia (Blue-blind)",
    "achromatopsia": "Achromatopsia (Monochromacy)",
    "protanomaly": "Protanomaly (Red-weak)",
    "deuteranomaly": "Deuteranomaly (Green-weak)",
    "tritanomaly": "Tritanomaly (Blue-weak)",
}

CB_DESCRIPTIONS = {
    "protanopia": "Cannot perceive red light. Affects ~1% of people.",
    "deuteranopia": "Cannot perceive green light. Affects ~1% of people.",
    "tritanopia": "Cannot perceive blue light. Rare condition.",
    "achromatopsia": "Cannot perceive any colour. Very rare condition.",
    "protanomaly": "Reduced sensitivity to red light. Affects ~1% of people.",
    "deuteranomaly": "Reduced sensitivity to green light. Most common CVD type.",
    "tritanomaly": "Reduced sensitivity to blue light. Rare condition.",
}

# Distinguishability thresholds (Euclidean distance in simulated RGB)
DISTINGUISH_THRESHOLD = 20.0       # General palette checks
DISTINGUISH_FIX_THRESHOLD = 25.0   # Stricter target when suggesting a fix

# Lightness search used by the fix suggestions
FIX_LIGHTNESS_STEP = 5
CONTRAST_FIX_MAX_ATTEMPTS = 20
CONTRAST_FIX_BOUNDS = (0.0, 100.0)
CONTRAST_FIX_FALLBACK_DARK = 10.0
CONTRAST_FIX_FALLBACK_LIGHT = 95.0
DISTINGUISH_FIX_MAX_ATTEMPTS = 18
DISTINGUISH_FIX_BOUNDS = (5.0, 95.0)

# Simulated contrast drop that flags a pair as degraded
DEGRADED_RATIO_DROP = 1.0

# Report score weights
CONTRAST_SCORE_WEIGHT = 0.6
COLOURBLIND_SCORE_WEIGHT = 0.4

# ==========================================
# Harmonies & Scales
# ==========================================

# Hue offsets per harmony, base colour marked by 0
HARMONY_OFFSETS = {
    "complementary": (0, 180),
    "analogous": (-30, 0, 30),
    "triadic": (0, 120, 240),
    "tetradic": (0, 60, 180, 240),
    "split-complementary": (0, 150, 210),
    "square": (0, 90, 180, 270),
}

HARMONY_KEYS = [
    "complementary",
    "analogous",
    "triadic",
    "tetradic",
    "split-complementary",
    "square",
    "monochromatic",
]

HARMONY_NAMES = {
    "complementary": "Complementary",
    "analogous": "Analogous",
    "triadic": "Triadic",
    "tetradic": "Tetradic",
    "split-complementary": "Split Complementary",
    "square": "Square",
    "monochromatic": "Monochromatic",
}

HARMONY_DESCRIPTIONS = {
    "complementary": "Two colours opposite each other on the colour wheel. High contrast and vibrant.",
    "analogous": "Three colours adjacent to each other. Harmonious and serene.",
    "triadic": "Three colours evenly spaced around the colour wheel. Balanced and vibrant.",
    "tetradic": "Four colours forming two complementary pairs. Rich and varied.",
    "split-complementary": "A colour and two colours adjacent to its complement. High contrast with less tension.",
    "square": "Four colours evenly spaced around the colour wheel. Bold and dynamic.",
    "monochromatic": "Variations of a single hue. Clean and cohesive.",
}

MONO_LIGHTNESS_RANGE = (10.0, 90.0)
MONO_DEFAULT_COUNT = 5

SCALE_STEPS = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

# Tuned to match Tailwind's colour ramps, do not re-derive
SCALE_HSL_LIGHTNESS = {
    50: 97, 100: 94, 200: 86, 300: 77, 400: 66, 500: 55,
    600: 45, 700: 37, 800: 29, 900: 22, 950: 14,
}
SCALE_HSL_SATURATION_ADJUST = {
    50: -15, 100: -10, 200: -5, 300: 0, 400: 0, 500: 0,
    600: 0, 700: 0, 800: 5, 900: 5, 950: 10,
}
SCALE_OKLCH_LIGHTNESS = {
    50: 0.97, 100: 0.93, 200: 0.85, 300: 0.76, 400: 0.65, 500: 0.55,
    600: 0.45, 700: 0.38, 800: 0.30, 900: 0.22, 950: 0.14,
}
SCALE_OKLCH_CHROMA_MULT = {
    50: 0.15, 100: 0.25, 200: 0.45, 300: 0.65, 400: 0.85, 500: 1.0,
    600: 0.95, 700: 0.85, 800: 0.75, 900: 0.65, 950: 0.55,
}

# Custom scale interpolation
CUSTOM_SCALE_TOP_HSL = 97.0
CUSTOM_SCALE_SPAN_HSL = 85.0
CUSTOM_SCALE_FLOOR_HSL = 10.0
CUSTOM_SCALE_TOP_OKLCH = 0.97
CUSTOM_SCALE_SPAN_OKLCH = 0.85

TINT_MAX_LIGHTNESS = 95.0
TINT_SATURATION_STEP = 5.0
SHADE_MIN_LIGHTNESS = 10.0

# Random colour ranges: (start, width)
RANDOM_SATURATION = (50, 40)
RANDOM_LIGHTNESS = (30, 40)
RANDOM_PALETTE_JITTER = 10.0
RANDOM_PALETTE_SAT_BOUNDS = (20.0, 100.0)
RANDOM_PALETTE_LIGHT_BOUNDS = (20.0, 80.0)
SCALE_BASE_LIGHTNESS = 55

# ==========================================
# Application Logic & Constraints
# ==========================================

MAX_STEPS = 100                    # Upper bound for generated steps
MAX_COUNT = 100                    # Maximum number of colors allowed in batch processing

# ==========================================
# CLI UI & Data Structures
# ==========================================

FORMAT_KEYS = ["hex", "rgb", "hsl", "hsv", "oklch", "lab", "cmyk"]

ROLE_KEYS = ["text", "background", "both"]

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
