"""Tests for the palette accessibility report."""

import datetime

import pytest

from palettelab.core.cache import SimulationCache
from palettelab.core.types import CVDType, PaletteColour
from palettelab.logic.report import build_accessibility_report, render_report_text, warning_key

BLACK_TEXT = PaletteColour('c1', '#000000', 'Black', 'neutral', 'text')
WHITE_BG = PaletteColour('c2', '#ffffff', 'White', 'neutral', 'background')
GREY_TEXT = PaletteColour('c3', '#777777', 'Grey', 'neutral', 'text')

RED_TEXT = PaletteColour('c1', '#ff0000', 'Red', 'brand', 'text')
BLACK_BG = PaletteColour('c2', '#000000', 'Black', 'neutral', 'background')


def _report(colours, reviewed=()):
    return build_accessibility_report(colours, reviewed, cache=SimulationCache())


class TestWarningKey:
    def test_format(self):
        assert warning_key('contrast', 'c1', 'c2', 'protanopia') == 'contrast:c1:c2:protanopia'
        assert warning_key('distinguish', 'a', 'b', CVDType.TRITANOPIA) == 'distinguish:a:b:tritanopia'


class TestReport:
    def test_needs_two_colours(self):
        assert _report([BLACK_TEXT]) is None
        assert _report([]) is None

    def test_perfect_palette(self):
        report = _report([BLACK_TEXT, WHITE_BG])
        assert report.has_roles_assigned
        assert report.role_based_total == 1
        assert report.role_based_passing == 1
        assert report.contrast_score == 100
        assert report.colourblind_score == 100
        assert report.overall_score == 100

    def test_failing_contrast_pair(self):
        report = _report([BLACK_TEXT, WHITE_BG, GREY_TEXT])
        assert report.role_based_total == 2
        assert report.role_based_failing == 1
        assert report.role_based_failures[0].text == GREY_TEXT
        assert report.role_based_failures[0].level == 'AA Large'
        assert report.contrast_score == 50
        assert report.colourblind_score == 100
        assert report.overall_score == 70

    def test_both_role_is_not_paired_with_itself(self):
        colours = [
            PaletteColour('c1', '#000000', 'Ink', 'neutral', 'both'),
            PaletteColour('c2', '#ffffff', 'Paper', 'neutral', 'background'),
        ]
        report = _report(colours)
        assert report.text_colour_count == 1
        assert report.background_colour_count == 2
        assert report.role_based_total == 1

    def test_without_roles_scores_colour_vision_only(self):
        colours = [
            PaletteColour('c1', '#ff0000', 'Red', 'brand'),
            PaletteColour('c2', '#ff0505', 'Red 2', 'brand'),
        ]
        report = _report(colours)
        assert not report.has_roles_assigned
        assert report.contrast_score == 0
        assert report.simulated_contrast_issues == {}
        assert report.total_category_issues == 4
        assert report.colourblind_score == 0
        assert report.overall_score == 0

    def test_reviewed_category_warnings(self):
        colours = [
            PaletteColour('c1', '#ff0000', 'Red', 'brand'),
            PaletteColour('c2', '#ff0505', 'Red 2', 'brand'),
        ]
        reviewed = [
            warning_key('distinguish', 'c1', 'c2', t)
            for t in ('protanopia', 'deuteranopia', 'tritanopia', 'achromatopsia')
        ]
        report = _report(colours, reviewed)
        assert report.total_category_issues == 0
        assert report.total_category_reviewed == 4
        assert report.colourblind_score == 100
        issue = report.category_issues[CVDType.PROTANOPIA][0]
        assert issue.reviewed
        assert issue.key == 'distinguish:c1:c2:protanopia'

    def test_categories_are_checked_separately(self):
        colours = [
            PaletteColour('c1', '#ff0000', 'Red', 'brand'),
            PaletteColour('c2', '#ff0505', 'Alert', 'status'),
        ]
        report = _report(colours)
        assert report.categories_checked == 0
        assert report.colourblind_score == 100


class TestSimulatedContrast:
    def test_red_on_black(self):
        report = _report([RED_TEXT, BLACK_BG])
        assert report.contrast_score == 100

        failing_types = {t for t, issues in report.simulated_contrast_issues.items() if issues}
        assert failing_types == {CVDType.ACHROMATOPSIA, CVDType.DEUTERANOMALY}

        issue = report.simulated_contrast_issues[CVDType.ACHROMATOPSIA][0]
        assert issue.fails_under_simulation
        assert issue.degraded
        assert issue.original_ratio == pytest.approx(5.252)
        assert issue.simulated_ratio < 3
        assert issue.key == 'contrast:c1:c2:achromatopsia'

        assert report.total_simulated_issues == 2
        assert report.colourblind_score == 75
        assert report.overall_score == 90

    def test_degraded_pair_that_still_passes(self):
        colours = [
            PaletteColour('c1', '#dff8e3', 'Mint', 'surface', 'text'),
            PaletteColour('c2', '#843719', 'Rust', 'brand', 'background'),
        ]
        report = _report(colours)
        assert report.contrast_score == 100

        issue = report.simulated_contrast_issues[CVDType.PROTANOPIA][0]
        assert issue.degraded
        assert not issue.fails_under_simulation
        assert issue.original_ratio - issue.simulated_ratio > 1.0
        assert issue.simulated_ratio >= 4.5

        assert report.colourblind_score == 50
        assert report.overall_score == 80

    def test_reviewed_simulated_warning(self):
        report = _report([RED_TEXT, BLACK_BG], ['contrast:c1:c2:achromatopsia'])
        assert report.total_simulated_reviewed == 1
        assert report.total_simulated_issues == 1
        assert report.colourblind_score == 100
        assert report.overall_score == 100


class TestRenderText:
    def test_sections(self):
        report = _report([RED_TEXT, BLACK_BG])
        text = render_report_text(report, 'Demo', datetime.date(2024, 1, 2))
        assert text.startswith('Accessibility Report for "Demo"')
        assert 'Generated: 2024-01-02' in text
        assert '## Overall Score\n90/100' in text
        assert '- Red: #ff0000 (text)' in text
        assert '### Achromatopsia (Monochromacy)' in text

    def test_no_roles_hint(self):
        colours = [
            PaletteColour('c1', '#000000', 'Black', 'neutral'),
            PaletteColour('c2', '#ffffff', 'White', 'neutral'),
        ]
        text = render_report_text(_report(colours), 'Plain', datetime.date(2024, 1, 2))
        assert 'No colour roles assigned' in text
        assert '- Black: #000000' in text
