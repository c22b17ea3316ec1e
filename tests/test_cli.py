"""End-to-end tests for the palettelab command line."""

import argparse
import sys

import pytest

from palettelab import __version__
from palettelab.main import main
from palettelab.shared.sanitizer import INPUT_HANDLERS, handle_colour_spec


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    monkeypatch.setenv('NO_COLOR', '1')


def run_cli(monkeypatch, capsys, *argv):
    monkeypatch.setattr(sys, 'argv', ['palettelab', *argv])
    with pytest.raises(SystemExit) as exc:
        main()
    out, err = capsys.readouterr()
    return exc.value.code, out, err


class TestConvert:
    def test_to_rgb(self, monkeypatch, capsys):
        code, out, _ = run_cli(monkeypatch, capsys, 'convert', '-c', '#ff0000', '-t', 'rgb')
        assert code == 0
        assert 'rgb(255, 0, 0)' in out

    def test_all_formats(self, monkeypatch, capsys):
        code, out, _ = run_cli(monkeypatch, capsys, 'convert', '-c', 'rgb(30, 64, 175)')
        assert code == 0
        assert '#1e40af' in out
        assert 'hsl(' in out
        assert 'oklch(' in out

    def test_invalid_colour(self, monkeypatch, capsys):
        code, _, err = run_cli(monkeypatch, capsys, 'convert', '-c', 'nothex')
        assert code == 2
        assert '[error]' in err

    def test_missing_input(self, monkeypatch, capsys):
        code, _, err = run_cli(monkeypatch, capsys, 'convert')
        assert code == 2
        assert '-c/--colour' in err


class TestContrast:
    def test_pair(self, monkeypatch, capsys):
        code, out, _ = run_cli(monkeypatch, capsys, 'contrast', '-f', '#000000', '-b', '#ffffff')
        assert code == 0
        assert '21.00:1' in out
        assert 'AAA' in out

    def test_matrix(self, monkeypatch, capsys):
        code, out, _ = run_cli(
            monkeypatch, capsys, 'contrast', '-c', '#000000', '-c', '#ffffff', '-c', '#111111'
        )
        assert code == 0
        assert '#000000 / #111111' in out


class TestVision:
    def test_single_type(self, monkeypatch, capsys):
        code, out, _ = run_cli(monkeypatch, capsys, 'vision', '-c', '#ff0000', '-y', 'achromatopsia')
        assert code == 0
        assert '#363636' in out

    def test_unknown_type(self, monkeypatch, capsys):
        code, _, _ = run_cli(monkeypatch, capsys, 'vision', '-c', '#ff0000', '-y', 'tetrachromacy')
        assert code == 2

    def test_palette_check_only_reports_chosen_type(self, monkeypatch, capsys):
        code, out, _ = run_cli(
            monkeypatch, capsys, 'vision', '-y', 'protanopia', '-c', '#ff0000', '-c', '#ff0505'
        )
        assert code == 0
        assert 'Protanopia (Red-blind)' in out
        assert '1 pair(s) too close' in out
        for other in ('Deuteranopia', 'Tritanopia', 'Achromatopsia'):
            assert other not in out

    def test_palette_check_with_anomaly_type(self, monkeypatch, capsys):
        code, out, _ = run_cli(
            monkeypatch, capsys, 'vision', '-y', 'protanomaly', '-c', '#ff0000', '-c', '#ff0505'
        )
        assert code == 0
        assert 'Protanomaly (Red-weak)' in out
        assert 'Protanopia' not in out

    def test_palette_check_without_type_covers_full_deficiencies(self, monkeypatch, capsys):
        _, out, _ = run_cli(monkeypatch, capsys, 'vision', '-c', '#ff0000', '-c', '#ff0505')
        for name in ('Protanopia', 'Deuteranopia', 'Tritanopia', 'Achromatopsia'):
            assert name in out
        assert 'Protanomaly' not in out

    def test_no_color_output_is_plain(self, monkeypatch, capsys):
        _, out, _ = run_cli(monkeypatch, capsys, 'vision', '-c', '#ff0000', '-c', '#ff0505')
        assert '\x1b[' not in out


class TestScheme:
    def test_triadic(self, monkeypatch, capsys):
        code, out, _ = run_cli(monkeypatch, capsys, 'scheme', '-c', '#ff0000', '-m', 'triadic')
        assert code == 0
        assert '#00ff00' in out
        assert '#0000ff' in out

    def test_seeded_palette_is_repeatable(self, monkeypatch, capsys):
        _, first, _ = run_cli(monkeypatch, capsys, 'scheme', '-p', '4', '-s', '11')
        _, second, _ = run_cli(monkeypatch, capsys, 'scheme', '-p', '4', '-s', '11')
        assert first == second


class TestScale:
    def test_default_scale(self, monkeypatch, capsys):
        code, out, _ = run_cli(monkeypatch, capsys, 'scale', '-c', '#3b82f6')
        assert code == 0
        assert '950' in out

    def test_gradient(self, monkeypatch, capsys):
        code, out, _ = run_cli(
            monkeypatch, capsys, 'scale', '-c', '#000000', '-x', '#ffffff', '-S', '3'
        )
        assert code == 0
        assert '#808080' in out


class TestReport:
    def test_text_report(self, monkeypatch, capsys):
        code, out, _ = run_cli(
            monkeypatch, capsys, 'report',
            '-c', '#ff0000:Red:brand:text',
            '-c', '#000000:Black:neutral:background',
            '-n', 'Demo',
            '--text',
        )
        assert code == 0
        assert 'Accessibility Report for "Demo"' in out
        assert '90/100' in out

    def test_reviewed_key(self, monkeypatch, capsys):
        code, out, _ = run_cli(
            monkeypatch, capsys, 'report',
            '-c', '#ff0000:Red:brand:text',
            '-c', '#000000:Black:neutral:background',
            '-R', 'contrast:c1:c2:achromatopsia',
            '--text',
        )
        assert code == 0
        assert '100/100' in out

    def test_terminal_report_is_plain_without_colour(self, monkeypatch, capsys):
        code, out, _ = run_cli(
            monkeypatch, capsys, 'report',
            '-c', '#ff0000:Red:brand:text',
            '-c', '#000000:Black:neutral:background',
        )
        assert code == 0
        assert 'overall' in out
        assert '90/100' in out
        assert '\x1b[' not in out

    def test_needs_two_colours(self, monkeypatch, capsys):
        code, _, err = run_cli(monkeypatch, capsys, 'report', '-c', '#ff0000')
        assert code == 2
        assert 'at least 2 colours' in err


class TestMain:
    def test_version(self, monkeypatch, capsys):
        code, out, _ = run_cli(monkeypatch, capsys, '--version')
        assert code == 0
        assert f'palettelab {__version__}' in out

    def test_unknown_command(self, monkeypatch, capsys):
        code, _, err = run_cli(monkeypatch, capsys, 'paint')
        assert code == 2
        assert "unrecognized command" in err


class TestColourSpec:
    def test_all_fields(self):
        spec = handle_colour_spec('#1E40AF:Brand Blue:primary:text')
        assert spec.hex == '#1e40af'
        assert spec.name == 'Brand Blue'
        assert spec.category == 'primary'
        assert spec.role == 'text'

    def test_defaults(self):
        spec = handle_colour_spec('#ffffff')
        assert spec.name == '#ffffff'
        assert spec.category == 'uncategorised'
        assert spec.role is None

    def test_bad_role(self):
        with pytest.raises(argparse.ArgumentTypeError):
            handle_colour_spec('#ffffff:White:neutral:border')

    def test_count_is_clamped(self):
        assert INPUT_HANDLERS['count']('500') == 100
        assert INPUT_HANDLERS['count']('0') == 1
