#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/contrast/renderer.py

from typing import List, Sequence

from palettelab.core import config as c
from palettelab.core.types import WCAGLevel
from palettelab.shared.formatting import format_contrast_ratio
from palettelab.shared.preview import print_color_block, print_text_sample


def _level_style(level: str) -> str:
    if level == WCAGLevel.FAIL:
        return c.MSG_BOLD_COLORS["error"]
    if level == WCAGLevel.AA_LARGE:
        return c.MSG_BOLD_COLORS["warning"]
    return c.MSG_BOLD_COLORS["success"]


def _flag(ok: bool) -> str:
    if ok:
        return f"{c.MSG_COLORS['success']}Pass{c.RESET}"
    return f"{c.MSG_COLORS['error']}Fail{c.RESET}"


def render_pair(fg_hex: str, bg_hex: str, result, level: str) -> None:
    print()
    print_color_block(fg_hex, "foreground")
    print_color_block(bg_hex, "background")
    print_text_sample(fg_hex, bg_hex)
    print()
    print(f"   {'ratio':<15}{c.BOLD_WHITE}:{c.RESET}   {format_contrast_ratio(result.ratio)}")
    print(f"   {'level':<15}{c.BOLD_WHITE}:{c.RESET}   {_level_style(level)}{level}{c.RESET}")
    print(f"   {'AA':<15}{c.BOLD_WHITE}:{c.RESET}   {_flag(result.wcag_aa)}")
    print(f"   {'AAA':<15}{c.BOLD_WHITE}:{c.RESET}   {_flag(result.wcag_aaa)}")
    print(f"   {'AA large':<15}{c.BOLD_WHITE}:{c.RESET}   {_flag(result.wcag_aa_large)}")
    print(f"   {'AAA large':<15}{c.BOLD_WHITE}:{c.RESET}   {_flag(result.wcag_aaa_large)}")


def render_suggestion(suggested_hex: str, bg_hex: str, ratio: float) -> None:
    print()
    print_color_block(suggested_hex, "suggested", format_contrast_ratio(ratio))
    print_text_sample(suggested_hex, bg_hex)


def render_matrix(colours: Sequence[str], matrix: List[List[float]], failures) -> None:
    """Pairwise ratio table followed by the pairs below the minimum."""
    print()
    header = " " * 10 + "".join(f"{h:>10}" for h in colours)
    print(f"{c.BOLD_WHITE}{header}{c.RESET}")
    for hex_code, row in zip(colours, matrix):
        cells = "".join(f"{ratio:>10.2f}" for ratio in row)
        print(f"{hex_code:<10}{cells}")

    print()
    if not failures:
        print(f"{c.MSG_BOLD_COLORS['success']}all pairs pass{c.RESET}")
        return
    for a, b, ratio in failures:
        print(f"   {c.MSG_COLORS['error']}{a} / {b}  {format_contrast_ratio(ratio)}{c.RESET}")
