#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/sanitizer.py

import argparse
import re

from palettelab.core import config as c
from palettelab.core.conversions import parse_colour
from palettelab.core.types import CVDType, PaletteColour, normalise_category


def _sanitize_for_log(value) -> str:
    """Collapse whitespace and newlines so a bad value logs on one line."""
    if value is None:
        return ""
    return " ".join(str(value).split())


def _extract_signed_int(value: str) -> int:
    """
    Pull an integer out of a string, keeping a leading minus sign and
    ignoring any other non-digit characters.
    """
    if value is None:
        return None
    s = str(value)
    digits_only = "".join(re.findall(r"[0-9]", s))
    if not digits_only:
        return None
    val = int(digits_only)
    return -val if s.strip().startswith("-") else val


def _extract_signed_float(value: str) -> float:
    """Like _extract_signed_int, but keeps the first decimal point."""
    if value is None:
        return None
    s = str(value)
    kept = []
    dot_seen = False
    for char in re.findall(r"[0-9\.]", s):
        if char == ".":
            if dot_seen:
                continue
            dot_seen = True
        kept.append(char)

    clean_str = "".join(kept)
    if not clean_str or clean_str == ".":
        return None
    val = float(clean_str)
    return -val if s.strip().startswith("-") else val


def _extract_keyword(value: str) -> str:
    """Lowercase and keep letters and hyphens, e.g. 'Split Complementary' -> 'split-complementary'."""
    if value is None:
        return ""
    s = "-".join(str(value).lower().split())
    return "".join(re.findall(r"[a-z\-]", s)).strip("-")


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================


def handle_colour(v: str) -> str:
    """Accept hex (with or without '#'), rgb(r, g, b) or hsl(h, s%, l%)."""
    parsed = parse_colour(str(v)) if v is not None else None
    if parsed is None:
        raise argparse.ArgumentTypeError(f"invalid colour value: '{_sanitize_for_log(v)}'")
    return parsed


def handle_cvd_type(v: str) -> CVDType:
    key = _extract_keyword(v)
    try:
        return CVDType(key)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"unknown vision deficiency: '{_sanitize_for_log(v)}'"
        ) from None


def handle_choice(choices):
    """Factory: keyword cleaned with _extract_keyword, then checked against choices."""
    def validator(v: str) -> str:
        key = _extract_keyword(v)
        if key not in choices:
            raise argparse.ArgumentTypeError(
                f"invalid choice: '{_sanitize_for_log(v)}' (choose from {', '.join(choices)})"
            )
        return key
    return validator


def handle_category(v: str) -> str:
    try:
        return normalise_category(v)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def handle_colour_spec(v: str) -> PaletteColour:
    """
    Parse 'COLOUR[:NAME[:CATEGORY[:ROLE]]]' into a PaletteColour.
    The id is left empty; the report resolver numbers colours in order.
    """
    raw = _sanitize_for_log(v)
    parts = [p.strip() for p in str(v).split(":")]
    if len(parts) > 4:
        raise argparse.ArgumentTypeError(f"too many fields in colour spec: '{raw}'")

    hex_code = handle_colour(parts[0])
    name = parts[1] if len(parts) > 1 and parts[1] else hex_code
    category = handle_category(parts[2]) if len(parts) > 2 and parts[2] else "uncategorised"

    role = None
    if len(parts) > 3 and parts[3]:
        role = _extract_keyword(parts[3])
        if role not in c.ROLE_KEYS:
            raise argparse.ArgumentTypeError(
                f"invalid role '{parts[3]}' in colour spec (choose from {', '.join(c.ROLE_KEYS)})"
            )
    return PaletteColour("", hex_code, name, category, role)


def handle_float_any(v: str) -> float:
    val = _extract_signed_float(v)
    if val is None:
        raise argparse.ArgumentTypeError(f"invalid numeric value: '{_sanitize_for_log(v)}'")
    return val


def handle_int_range(min_v: int, max_v: int):
    """Factory: integer validator that clamps into [min_v, max_v]."""
    def validator(v: str) -> int:
        val = _extract_signed_int(v)
        if val is None:
            raise argparse.ArgumentTypeError(f"invalid integer value: '{_sanitize_for_log(v)}'")
        return max(min_v, min(max_v, val))
    return validator


def handle_float_range(min_v: float, max_v: float):
    """Factory: float validator that clamps into [min_v, max_v]."""
    def validator(v: str) -> float:
        val = _extract_signed_float(v)
        if val is None:
            raise argparse.ArgumentTypeError(f"invalid float value: '{_sanitize_for_log(v)}'")
        return max(min_v, min(max_v, val))
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "colour": handle_colour,
    "colour_spec": handle_colour_spec,
    "cvd_type": handle_cvd_type,
    "harmony": handle_choice(c.HARMONY_KEYS),
    "format": handle_choice(c.FORMAT_KEYS),
    "method": handle_choice(["hsl", "oklch"]),
    "float": handle_float_any,
    "ratio": handle_float_range(c.WCAG_MIN_RATIO, c.WCAG_MAX_RATIO),
    "mix_ratio": handle_float_range(0.0, 1.0),
    "threshold": handle_float_range(0.0, 442.0),
    "float_signed_100": handle_float_range(-100.0, 100.0),
    "float_signed_360": handle_float_range(-360.0, 360.0),
    "count": handle_int_range(1, c.MAX_COUNT),
    "steps": handle_int_range(2, c.MAX_STEPS),
    "seed": handle_int_range(0, 999_999_999_999_999_999),
}
