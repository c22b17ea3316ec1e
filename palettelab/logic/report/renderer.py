#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/report/renderer.py

import datetime
from typing import Optional

from palettelab.core import config as c
from palettelab.core.vision import get_colourblind_type_name
from palettelab.shared.formatting import format_contrast_ratio
from palettelab.shared.preview import paint, print_color_block

NO_ROLES_HINT = (
    "No colour roles assigned. Assign text and background roles "
    "(':text', ':background' or ':both' in a colour spec) for accurate analysis."
)


def render_report_text(report, palette_name: str, generated: Optional[datetime.date] = None) -> str:
    """Plain-text accessibility report, one section per check."""
    generated = generated or datetime.date.today()
    lines = [
        f'Accessibility Report for "{palette_name}"',
        f"Generated: {generated.isoformat()}",
        "",
        "## Overall Score",
        f"{report.overall_score}/100",
        "",
        "## Colour Roles",
        f"Text colours: {report.text_colour_count}",
        f"Background colours: {report.background_colour_count}",
        "",
        "## Contrast Analysis (Text vs Background)",
    ]

    if report.has_roles_assigned:
        lines += [
            f"Total combinations: {report.role_based_total}",
            f"Passing WCAG AA (4.5:1): {report.role_based_passing} ({report.contrast_score}%)",
            f"Failing WCAG AA: {report.role_based_failing}",
            "",
            "## Failing Combinations",
        ]
        lines += [
            f"- {p.text.name} ({p.text.hex}) on {p.background.name} ({p.background.hex}): "
            f"{format_contrast_ratio(p.ratio)}"
            for p in report.role_based_failures
        ]
    else:
        lines.append(NO_ROLES_HINT)

    lines += [
        "",
        "## Colour Vision Deficiency Analysis (Within Categories)",
        f"Categories checked: {report.categories_checked}",
    ]
    for cvd_type, result in report.colourblind_results.items():
        status = "Pass" if result.accessible else f"Fail ({len(result.problematic_pairs)} issues)"
        lines.append(f"- {get_colourblind_type_name(cvd_type)}: {status}")

    lines += ["", "## Text/Background Contrast Under CVD Simulation"]
    if report.has_roles_assigned:
        lines += [f"Total issues: {report.total_simulated_issues}", ""]
        for cvd_type, pairs in report.simulated_contrast_issues.items():
            if not pairs:
                continue
            lines.append(f"### {get_colourblind_type_name(cvd_type)}")
            for p in pairs:
                verdict = "Fails WCAG" if p.fails_under_simulation else "Degraded"
                if p.reviewed:
                    verdict += ", reviewed"
                lines.append(
                    f"- {p.text.name} on {p.background.name}: "
                    f"{format_contrast_ratio(p.original_ratio)} -> "
                    f"{format_contrast_ratio(p.simulated_ratio)} ({verdict})"
                )
    else:
        lines.append("No colour roles assigned.")

    lines += ["", "## Palette Colours"]
    lines += [
        f"- {col.name}: {col.hex}" + (f" ({col.role})" if col.role else "")
        for col in report.colours
    ]
    return "\n".join(lines)


def _score_level(score: int) -> str:
    if score >= 80:
        return "success"
    if score >= 60:
        return "warning"
    return "error"


def print_report(report, palette_name: str) -> None:
    """Terminal summary: coloured scores, failing pairs and per-type results."""
    def score(label: str, value: int) -> str:
        style = c.MSG_BOLD_COLORS[_score_level(value)]
        return f"{label:<18}{paint(':', c.BOLD_WHITE)}   {paint(f'{value}/100', style)}"

    print(paint(palette_name, c.BOLD_WHITE))
    print(score("overall", report.overall_score))
    if report.has_roles_assigned:
        print(score("contrast", report.contrast_score))
    print(score("colour vision", report.colourblind_score))

    if report.role_based_failures:
        print(f"\n{paint('failing text/background pairs', c.MSG_BOLD_COLORS['error'])}")
        for p in report.role_based_failures:
            print_color_block(p.text.hex, p.text.name, f"on {p.background.name} {format_contrast_ratio(p.ratio)}")

    print(f"\n{paint('colour vision deficiency', c.MSG_BOLD_COLORS['info'])}")
    for cvd_type, issues in report.category_issues.items():
        open_issues = [i for i in issues if not i.reviewed]
        simulated = [i for i in report.simulated_contrast_issues.get(cvd_type, []) if not i.reviewed]
        total = len(open_issues) + len(simulated)
        if total:
            mark = paint(f"{total} issue(s)", c.MSG_COLORS["error"])
        else:
            mark = paint("pass", c.MSG_COLORS["success"])
        print(f"  {get_colourblind_type_name(cvd_type):<32}{mark}")
        for issue in open_issues:
            print(f"    {issue.category}: {issue.hex1} ~ {issue.hex2}")

    if not report.has_roles_assigned:
        print(f"\n{paint(NO_ROLES_HINT, c.MSG_BOLD_COLORS['dim'])}")
