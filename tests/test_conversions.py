"""Tests for palettelab.core.conversions and the display formatters."""

import pytest

from palettelab.core.conversions import (
    cmyk_to_rgb,
    hex_to_hsl,
    hex_to_lab,
    hex_to_oklch,
    hex_to_rgb,
    hsl_to_rgb,
    hsv_to_rgb,
    is_valid_hex,
    lab_to_rgb,
    normalise_hex,
    oklch_to_hex,
    oklch_to_rgb,
    parse_colour,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_lab,
    rgb_to_oklch,
)
from palettelab.shared.formatting import (
    format_cmyk,
    format_contrast_ratio,
    format_hsl,
    format_oklch,
    format_rgb,
)

SAMPLES = [
    (0, 0, 0),
    (255, 255, 255),
    (255, 0, 0),
    (30, 64, 175),
    (59, 130, 246),
    (17, 200, 93),
    (128, 128, 128),
    (250, 204, 21),
]


def _close(a, b, tol=1):
    return all(abs(x - y) <= tol for x, y in zip(a, b))


class TestHex:
    def test_six_digit(self):
        assert hex_to_rgb('#1e40af') == (30, 64, 175)

    def test_short_and_no_hash(self):
        assert hex_to_rgb('fff') == (255, 255, 255)
        assert hex_to_rgb('#F00') == (255, 0, 0)

    def test_malformed_is_black(self):
        assert hex_to_rgb('invalid') == (0, 0, 0)
        assert hex_to_rgb('#ff') == (0, 0, 0)
        assert hex_to_rgb('#ffffffff') == (0, 0, 0)

    def test_rgb_to_hex_clamps_and_lowercases(self):
        assert rgb_to_hex(255, 0, 0) == '#ff0000'
        assert rgb_to_hex(300, -5, 127.5) == '#ff0080'

    @pytest.mark.parametrize('rgb', SAMPLES)
    def test_hex_round_trip_is_exact(self, rgb):
        assert hex_to_rgb(rgb_to_hex(*rgb)) == rgb

    def test_is_valid_hex(self):
        assert is_valid_hex('#123')
        assert is_valid_hex('AbCdEf')
        assert not is_valid_hex('#12345')
        assert not is_valid_hex('12g')
        assert not is_valid_hex(None)

    def test_normalise_hex(self):
        assert normalise_hex('ABC') == '#aabbcc'
        assert normalise_hex('#FF0000') == '#ff0000'


class TestHsl:
    def test_primaries(self):
        assert rgb_to_hsl(255, 0, 0) == (0.0, 100.0, 50.0)
        assert rgb_to_hsl(0, 255, 0).h == pytest.approx(120.0)
        assert hsl_to_rgb(0, 100, 50) == (255, 0, 0)

    def test_hue_wraps(self):
        assert hsl_to_rgb(360, 100, 50) == (255, 0, 0)
        assert hsl_to_rgb(-120, 100, 50) == (0, 0, 255)

    def test_out_of_range_is_clamped(self):
        assert hsl_to_rgb(0, 0, 150) == (255, 255, 255)
        assert hsl_to_rgb(0, -20, 50) == (128, 128, 128)

    @pytest.mark.parametrize('rgb', SAMPLES)
    def test_round_trip(self, rgb):
        assert _close(hsl_to_rgb(*rgb_to_hsl(*rgb)), rgb)

    def test_hex_to_hsl(self):
        h, s, l = hex_to_hsl('#808080')
        assert s == 0.0
        assert l == pytest.approx(50.2, abs=0.1)


class TestHsv:
    def test_red(self):
        assert rgb_to_hsv(255, 0, 0) == (0.0, 100.0, 100.0)
        assert hsv_to_rgb(0, 100, 100) == (255, 0, 0)

    @pytest.mark.parametrize('rgb', SAMPLES)
    def test_round_trip(self, rgb):
        assert _close(hsv_to_rgb(*rgb_to_hsv(*rgb)), rgb)


class TestCmyk:
    def test_red(self):
        assert rgb_to_cmyk(255, 0, 0) == (0, 100, 100, 0)
        assert cmyk_to_rgb(0, 100, 100, 0) == (255, 0, 0)

    def test_black(self):
        assert rgb_to_cmyk(0, 0, 0) == (0, 0, 0, 100)


class TestLab:
    def test_white(self):
        L, a, b = hex_to_lab('#ffffff')
        assert L == pytest.approx(100.0, abs=0.05)
        assert a == pytest.approx(0.0, abs=0.05)
        assert b == pytest.approx(0.0, abs=0.05)

    @pytest.mark.parametrize('rgb', SAMPLES)
    def test_round_trip(self, rgb):
        assert _close(lab_to_rgb(*rgb_to_lab(*rgb)), rgb)


class TestOklch:
    def test_white(self):
        L, c, _ = hex_to_oklch('#ffffff')
        assert L == pytest.approx(1.0, abs=1e-3)
        assert c < 1e-3

    def test_red(self):
        L, c, h = hex_to_oklch('#ff0000')
        assert L == pytest.approx(0.628, abs=0.01)
        assert c == pytest.approx(0.258, abs=0.01)
        assert h == pytest.approx(29.2, abs=0.5)

    @pytest.mark.parametrize('rgb', SAMPLES)
    def test_round_trip(self, rgb):
        assert _close(oklch_to_rgb(*rgb_to_oklch(*rgb)), rgb)

    def test_lightness_is_clamped(self):
        assert oklch_to_hex(2.0, 0.0, 0.0) == '#ffffff'
        assert oklch_to_hex(-1.0, 0.0, 0.0) == '#000000'


class TestParseColour:
    def test_hex_forms(self):
        assert parse_colour('#ABC') == '#aabbcc'
        assert parse_colour('abc') == '#aabbcc'
        assert parse_colour('  #FF0000  ') == '#ff0000'

    def test_rgb_function(self):
        assert parse_colour('rgb(255, 0, 0)') == '#ff0000'
        assert parse_colour('RGB(30,64,175)') == '#1e40af'

    def test_hsl_function(self):
        assert parse_colour('hsl(120, 100%, 50%)') == '#00ff00'

    def test_unrecognised_is_none(self):
        assert parse_colour('nope') is None
        assert parse_colour('rgb(1, 2)') is None
        assert parse_colour('') is None


class TestFormatting:
    def test_rgb(self):
        assert format_rgb(30, 64, 175) == 'rgb(30, 64, 175)'

    def test_hsl(self):
        assert format_hsl(*hex_to_hsl('#ff0000')) == 'hsl(0, 100%, 50%)'

    def test_hsl_output_parses_back(self):
        assert parse_colour(format_hsl(*hex_to_hsl('#00ff00'))) == '#00ff00'

    def test_oklch(self):
        assert format_oklch(1.0, 0.0, 0.0) == 'oklch(1 0 0)'
        assert format_oklch(0.6279, 0.25768, 29.23) == 'oklch(0.63 0.258 29.2)'

    def test_cmyk(self):
        assert format_cmyk(0, 100, 100, 0) == 'cmyk(0%, 100%, 100%, 0%)'

    def test_contrast_ratio(self):
        assert format_contrast_ratio(21) == '21.00:1'
        assert format_contrast_ratio(4.478) == '4.48:1'
