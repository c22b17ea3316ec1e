#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/report/engine.py

"""
Palette-wide accessibility aggregation.

Combines role-based WCAG contrast, within-category CVD distinguishability
and text/background contrast under CVD simulation into one report with
0-100 scores. Warnings the user has already reviewed stay in the report
but no longer count against the scores.
"""

from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence

from palettelab.core import config as c
from palettelab.core.cache import SimulationCache
from palettelab.core.contrast import get_contrast_ratio_from_hex, get_wcag_level
from palettelab.core.types import (
    COMMON_CVD_TYPES,
    CVD_TYPES,
    PASSING_LEVELS,
    CVDType,
    PaletteColour,
    TypeAccessibility,
)
from palettelab.core.vision import check_category_accessibility, simulate_colourblindness
from palettelab.shared.clamping import round_half_up
from .renderer import print_report, render_report_text
from .resolver import resolve_report_colours


class ContrastPair(NamedTuple):
    text: PaletteColour
    background: PaletteColour
    ratio: float
    level: str


class CategoryIssue(NamedTuple):
    hex1: str
    hex2: str
    category: str
    reviewed: bool
    key: Optional[str]


class SimulatedContrastIssue(NamedTuple):
    text: PaletteColour
    background: PaletteColour
    original_ratio: float
    simulated_ratio: float
    fails_under_simulation: bool
    degraded: bool
    reviewed: bool
    key: str


class AccessibilityReport(NamedTuple):
    has_roles_assigned: bool
    text_colour_count: int
    background_colour_count: int
    role_based_total: int
    role_based_passing: int
    role_based_failures: List[ContrastPair]
    colourblind_results: Dict[CVDType, TypeAccessibility]
    colourblind_by_category: Dict[str, Dict[CVDType, TypeAccessibility]]
    category_issues: Dict[CVDType, List[CategoryIssue]]
    simulated_contrast_issues: Dict[CVDType, List[SimulatedContrastIssue]]
    total_category_issues: int
    total_category_reviewed: int
    total_simulated_issues: int
    total_simulated_reviewed: int
    contrast_score: int
    colourblind_score: int
    overall_score: int
    categories_checked: int
    colours: List[PaletteColour]

    @property
    def role_based_failing(self) -> int:
        return len(self.role_based_failures)


def warning_key(kind: str, id1: str, id2: str, cvd_type) -> str:
    """Opaque token a caller stores to mark one warning as reviewed."""
    return f"{kind}:{id1}:{id2}:{CVDType(cvd_type).value}"


def _passes(level: str) -> bool:
    return level in PASSING_LEVELS


def _group_by_category(colours: Sequence[PaletteColour]) -> Dict[str, List[PaletteColour]]:
    groups = {}
    for colour in colours:
        groups.setdefault(colour.category, []).append(colour)
    return groups


def _role_pairs(texts, backgrounds) -> Iterable:
    for text in texts:
        for bg in backgrounds:
            if text.id != bg.id:
                yield text, bg


def _find_id(members: Sequence[PaletteColour], hex_code: str) -> Optional[str]:
    target = hex_code.lower()
    for colour in members:
        if colour.hex.lower() == target:
            return colour.id
    return None


def _category_issues(groups, by_type, reviewed) -> Dict[CVDType, List[CategoryIssue]]:
    issues = {}
    for cvd_type, result in by_type.items():
        pairs = []
        for pair in result.problematic_pairs:
            members = groups.get(pair.category, [])
            id1 = _find_id(members, pair.hex1)
            id2 = _find_id(members, pair.hex2)
            key = warning_key("distinguish", id1, id2, cvd_type) if id1 and id2 else None
            pairs.append(
                CategoryIssue(pair.hex1, pair.hex2, pair.category, key in reviewed, key)
            )
        issues[cvd_type] = pairs
    return issues


def _simulated_issues(role_pairs, reviewed, cache) -> Dict[CVDType, List[SimulatedContrastIssue]]:
    issues = {}
    for cvd_type in CVD_TYPES:
        pairs = []
        for text, bg in role_pairs:
            original = get_contrast_ratio_from_hex(text.hex, bg.hex)
            simulated = get_contrast_ratio_from_hex(
                simulate_colourblindness(text.hex, cvd_type, cache),
                simulate_colourblindness(bg.hex, cvd_type, cache),
            )
            degraded = original - simulated > c.DEGRADED_RATIO_DROP
            fails = _passes(get_wcag_level(original)) and not _passes(get_wcag_level(simulated))
            if fails or degraded:
                key = warning_key("contrast", text.id, bg.id, cvd_type)
                pairs.append(
                    SimulatedContrastIssue(
                        text, bg, original, simulated, fails, degraded, key in reviewed, key
                    )
                )
        issues[cvd_type] = pairs
    return issues


def _count(issue_lists, reviewed: bool) -> int:
    return sum(1 for pairs in issue_lists for p in pairs if p.reviewed == reviewed)


def build_accessibility_report(
    colours: Sequence[PaletteColour],
    reviewed_warnings: Iterable[str] = (),
    threshold: float = c.DISTINGUISH_THRESHOLD,
    cache: Optional[SimulationCache] = None,
) -> Optional[AccessibilityReport]:
    """Aggregate every check over a palette; None for fewer than two colours."""
    colours = list(colours)
    if len(colours) < 2:
        return None

    reviewed = set(reviewed_warnings)
    texts = [col for col in colours if col.role in ("text", "both")]
    backgrounds = [col for col in colours if col.role in ("background", "both")]
    has_roles = bool(texts) and bool(backgrounds)

    # Role-based WCAG contrast
    role_pairs = list(_role_pairs(texts, backgrounds)) if has_roles else []
    contrast_pairs = []
    for text, bg in role_pairs:
        ratio = get_contrast_ratio_from_hex(text.hex, bg.hex)
        contrast_pairs.append(ContrastPair(text, bg, ratio, get_wcag_level(ratio)))
    passing = sum(1 for p in contrast_pairs if _passes(p.level))
    failures = [p for p in contrast_pairs if not _passes(p.level)]

    # Distinguishability within categories
    groups = {
        name: members
        for name, members in _group_by_category(colours).items()
        if len(members) >= 2
    }
    cb = check_category_accessibility(
        {name: [m.hex for m in members] for name, members in groups.items()},
        threshold,
        cache,
    )
    category_issues = _category_issues(groups, cb.by_type, reviewed)

    # Text/background contrast under simulation
    simulated = _simulated_issues(role_pairs, reviewed, cache) if has_roles else {}

    # Scores
    contrast_score = round_half_up(passing / len(contrast_pairs) * 100) if contrast_pairs else 0

    total_types = len(COMMON_CVD_TYPES)
    category_issue_types = sum(
        1 for t in COMMON_CVD_TYPES if any(not p.reviewed for p in category_issues[t])
    )
    simulated_issue_types = sum(
        1 for t in COMMON_CVD_TYPES if any(not p.reviewed for p in simulated.get(t, []))
    )
    issue_types = max(category_issue_types, simulated_issue_types)
    colourblind_score = round_half_up((total_types - issue_types) / total_types * 100)

    if has_roles:
        overall = round_half_up(
            contrast_score * c.CONTRAST_SCORE_WEIGHT
            + colourblind_score * c.COLOURBLIND_SCORE_WEIGHT
        )
    else:
        overall = colourblind_score

    return AccessibilityReport(
        has_roles_assigned=has_roles,
        text_colour_count=len(texts),
        background_colour_count=len(backgrounds),
        role_based_total=len(contrast_pairs),
        role_based_passing=passing,
        role_based_failures=failures,
        colourblind_results=cb.by_type,
        colourblind_by_category=cb.by_category,
        category_issues=category_issues,
        simulated_contrast_issues=simulated,
        total_category_issues=_count(category_issues.values(), reviewed=False),
        total_category_reviewed=_count(category_issues.values(), reviewed=True),
        total_simulated_issues=_count(simulated.values(), reviewed=False),
        total_simulated_reviewed=_count(simulated.values(), reviewed=True),
        contrast_score=contrast_score,
        colourblind_score=colourblind_score,
        overall_score=overall,
        categories_checked=len(groups),
        colours=colours,
    )


def run(args) -> None:
    """CLI entry: build the report from -c specs and print it."""
    colours = resolve_report_colours(args)
    report = build_accessibility_report(colours, args.reviewed or (), args.threshold)
    if args.text:
        print(render_report_text(report, args.name))
    else:
        print_report(report, args.name)
