#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/types.py

"""Value types shared by the colour engine."""

from enum import Enum
from typing import NamedTuple, Optional


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    h: float
    s: float
    l: float


class HSV(NamedTuple):
    h: float
    s: float
    v: float


class OKLCH(NamedTuple):
    l: float
    c: float
    h: float


class LAB(NamedTuple):
    l: float
    a: float
    b: float


class CMYK(NamedTuple):
    c: int
    m: int
    y: int
    k: int


class ContrastResult(NamedTuple):
    ratio: float
    wcag_aa: bool
    wcag_aaa: bool
    wcag_aa_large: bool
    wcag_aaa_large: bool


class LightnessFix(NamedTuple):
    """A suggested replacement colour and the HSL lightness it was found at."""
    hex: str
    adjusted_lightness: float


class CVDType(str, Enum):
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"
    ACHROMATOPSIA = "achromatopsia"
    PROTANOMALY = "protanomaly"
    DEUTERANOMALY = "deuteranomaly"
    TRITANOMALY = "tritanomaly"

    def __str__(self) -> str:
        return self.value


CVD_TYPES = tuple(CVDType)

# Full-deficiency types checked by palette and category analysis
COMMON_CVD_TYPES = (
    CVDType.PROTANOPIA,
    CVDType.DEUTERANOPIA,
    CVDType.TRITANOPIA,
    CVDType.ACHROMATOPSIA,
)


class WCAGLevel:
    AAA = "AAA"
    AA = "AA"
    AA_LARGE = "AA Large"
    FAIL = "Fail"


PASSING_LEVELS = (WCAGLevel.AA, WCAGLevel.AAA)


class PaletteColour(NamedTuple):
    """A palette entry as seen by the report: id, colour, label and usage."""
    id: str
    hex: str
    name: str
    category: str
    role: Optional[str] = None


def normalise_category(name: str) -> str:
    """
    Categories are open-ended (built-ins plus anything the user adds),
    so they stay plain strings and are only checked for being non-blank.
    """
    cleaned = " ".join(str(name).split()) if name is not None else ""
    if not cleaned:
        raise ValueError("category name must not be empty")
    return cleaned


class TypeAccessibility(NamedTuple):
    """Outcome of one CVD type over a set of colours."""
    accessible: bool
    problematic_pairs: list


class CategoryPair(NamedTuple):
    hex1: str
    hex2: str
    category: str


class CategoryAccessibility(NamedTuple):
    # by_type: CVDType -> TypeAccessibility of CategoryPair
    # by_category: category -> CVDType -> TypeAccessibility of (hex, hex)
    by_type: dict
    by_category: dict


class NamedColour(NamedTuple):
    hex: str
    name: str
