"""Tests for tonal scales and colour adjustments."""

import pytest

from palettelab.core import config as c
from palettelab.core.conversions import hex_to_hsl, hex_to_oklch, hex_to_rgb
from palettelab.core.luminance import relative_luminance
from palettelab.core.scales import (
    adjust_brightness,
    adjust_saturation,
    create_gradient_stops,
    generate_custom_scale,
    generate_scale_hsl,
    generate_scale_oklch,
    generate_shades,
    generate_tints,
    generate_tones,
    mix_colours,
    shift_hue,
)


def _lum(hex_code):
    return relative_luminance(*hex_to_rgb(hex_code))


class TestNamedScales:
    def test_hsl_scale_lightness_table(self):
        scale = generate_scale_hsl('#3b82f6')
        assert list(scale) == list(c.SCALE_STEPS)
        for step, hex_code in scale.items():
            assert hex_to_hsl(hex_code).l == pytest.approx(c.SCALE_HSL_LIGHTNESS[step], abs=1)

    def test_hsl_scale_keeps_hue(self):
        h0 = hex_to_hsl('#3b82f6').h
        assert hex_to_hsl(generate_scale_hsl('#3b82f6')[500]).h == pytest.approx(h0, abs=2)

    def test_oklch_scale_on_grey(self):
        scale = generate_scale_oklch('#808080')
        assert list(scale) == list(c.SCALE_STEPS)
        for step, hex_code in scale.items():
            assert hex_to_oklch(hex_code).l == pytest.approx(c.SCALE_OKLCH_LIGHTNESS[step], abs=0.01)

    def test_oklch_scale_darkens(self):
        values = list(generate_scale_oklch('#808080').values())
        lums = [_lum(v) for v in values]
        assert lums == sorted(lums, reverse=True)


class TestCustomScale:
    def test_single_step(self):
        assert generate_custom_scale('#3b82f6', 1) == ['#3b82f6']

    def test_hsl_endpoints(self):
        colours = generate_custom_scale('#3b82f6', 5, 'hsl')
        assert len(colours) == 5
        assert hex_to_hsl(colours[0]).l == pytest.approx(97, abs=1)
        assert hex_to_hsl(colours[-1]).l == pytest.approx(12, abs=1)

    def test_oklch_runs_light_to_dark(self):
        colours = generate_custom_scale('#3b82f6', 7)
        assert len(colours) == 7
        assert _lum(colours[0]) > _lum(colours[-1])


class TestVariations:
    def test_tints(self):
        tints = generate_tints('#3b82f6')
        assert len(tints) == 5
        lightness = [hex_to_hsl(t).l for t in tints]
        assert lightness == sorted(lightness)
        assert lightness[-1] == pytest.approx(95, abs=1)

    def test_shades(self):
        shades = generate_shades('#3b82f6', 4)
        assert len(shades) == 4
        lightness = [hex_to_hsl(s).l for s in shades]
        assert lightness == sorted(lightness, reverse=True)
        assert lightness[-1] == pytest.approx(10, abs=1)

    def test_tones(self):
        tones = generate_tones('#3b82f6')
        saturation = [hex_to_hsl(t).s for t in tones]
        assert saturation == sorted(saturation, reverse=True)
        assert saturation[0] < hex_to_hsl('#3b82f6').s

    @pytest.mark.parametrize('generate', [generate_tints, generate_shades, generate_tones])
    def test_zero_count(self, generate):
        assert generate('#3b82f6', 0) == []


class TestMixing:
    def test_takes_short_way_round(self):
        assert mix_colours('#ff0000', '#0000ff') == '#ff00ff'

    def test_endpoints(self):
        assert mix_colours('#ff0000', '#0000ff', 0.0) == '#ff0000'
        assert mix_colours('#ff0000', '#0000ff', 1.0) == '#0000ff'

    def test_gradient(self):
        assert create_gradient_stops('#000000', '#ffffff', 3) == ['#000000', '#808080', '#ffffff']


class TestAdjustments:
    def test_brightness_is_clamped(self):
        assert adjust_brightness('#808080', 100) == '#ffffff'
        assert adjust_brightness('#808080', -100) == '#000000'

    def test_desaturate(self):
        assert adjust_saturation('#ff0000', -100) == '#808080'

    def test_shift_hue(self):
        assert shift_hue('#ff0000', 120) == '#00ff00'
        assert shift_hue('#ff0000', -240) == '#00ff00'
