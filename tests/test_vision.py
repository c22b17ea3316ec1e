"""Tests for CVD simulation, its cache and the distinguishability checks."""

import pytest

from palettelab.core.cache import SimulationCache
from palettelab.core.contrast import get_contrast_ratio_from_hex
from palettelab.core.conversions import hex_to_hsl
from palettelab.core.types import CVD_TYPES, CategoryPair, CVDType
from palettelab.core.vision import (
    are_colours_distinguishable,
    check_category_accessibility,
    check_palette_accessibility,
    clear_simulation_cache,
    get_all_simulations,
    get_colourblind_type_description,
    get_colourblind_type_name,
    get_simulation_cache_size,
    simulate_colourblindness,
    simulate_colourblindness_batch,
    simulated_distance,
    suggest_contrast_fix,
    suggest_distinguishable_fix,
)


@pytest.fixture
def cache():
    return SimulationCache()


class TestSimulation:
    def test_achromatopsia_red(self, cache):
        assert simulate_colourblindness('#ff0000', 'achromatopsia', cache) == '#363636'

    @pytest.mark.parametrize('cvd_type', CVD_TYPES)
    def test_white_and_black_are_fixed(self, cvd_type, cache):
        assert simulate_colourblindness('#ffffff', cvd_type, cache) == '#ffffff'
        assert simulate_colourblindness('#000000', cvd_type, cache) == '#000000'

    def test_accepts_enum_and_string(self, cache):
        assert simulate_colourblindness('#3b82f6', CVDType.TRITANOPIA, cache) == \
            simulate_colourblindness('#3b82f6', 'tritanopia', cache)

    def test_unknown_type_raises(self, cache):
        with pytest.raises(ValueError):
            simulate_colourblindness('#ff0000', 'tetrachromacy', cache)

    def test_batch(self, cache):
        result = simulate_colourblindness_batch(['#ff0000', '#ffffff'], 'achromatopsia', cache)
        assert result == ['#363636', '#ffffff']

    def test_all_simulations(self, cache):
        result = get_all_simulations('#ff0000', cache)
        assert set(result) == set(CVD_TYPES)
        assert result[CVDType.ACHROMATOPSIA] == '#363636'


class TestSimulationCache:
    def test_rejects_empty_capacity(self):
        with pytest.raises(ValueError):
            SimulationCache(max_size=0)

    def test_evicts_oldest(self):
        cache = SimulationCache(max_size=2)
        for hex_code in ('#ff0000', '#00ff00', '#0000ff'):
            simulate_colourblindness(hex_code, 'protanopia', cache)
        assert len(cache) == 2
        assert '#ff0000:protanopia' not in cache
        assert '#0000ff:protanopia' in cache

    def test_read_promotes_entry(self):
        cache = SimulationCache(max_size=2)
        cache.set('a', '#000000')
        cache.set('b', '#111111')
        assert cache.get('a') == '#000000'
        cache.set('c', '#222222')
        assert 'a' in cache
        assert 'b' not in cache

    def test_key_is_case_insensitive(self, cache):
        simulate_colourblindness('#FF0000', 'protanopia', cache)
        simulate_colourblindness('#ff0000', 'protanopia', cache)
        assert len(cache) == 1

    def test_default_cache(self):
        clear_simulation_cache()
        assert get_simulation_cache_size() == 0
        simulate_colourblindness('#123456', 'deuteranopia')
        assert get_simulation_cache_size() == 1
        clear_simulation_cache()
        assert get_simulation_cache_size() == 0

    def test_injected_cache_leaves_default_alone(self, cache):
        clear_simulation_cache()
        simulate_colourblindness('#123456', 'deuteranopia', cache)
        assert get_simulation_cache_size() == 0
        assert get_simulation_cache_size(cache) == 1


class TestDistinguishability:
    def test_red_green_under_deuteranopia(self, cache):
        distance = simulated_distance('#ff0000', '#00ff00', 'deuteranopia', cache)
        assert 130 < distance < 150
        assert are_colours_distinguishable('#ff0000', '#00ff00', 'deuteranopia', cache=cache)

    def test_identical_colours(self, cache):
        assert simulated_distance('#3b82f6', '#3b82f6', 'protanopia', cache) == 0
        assert not are_colours_distinguishable('#3b82f6', '#3b82f6', 'protanopia', cache=cache)

    def test_palette_with_duplicate(self, cache):
        result = check_palette_accessibility(['#ff0000', '#ff0000', '#0000ff'], cache=cache)
        assert len(result) == 4
        for type_result in result.values():
            assert not type_result.accessible
            assert ('#ff0000', '#ff0000') in type_result.problematic_pairs

    def test_palette_check_for_chosen_types(self, cache):
        result = check_palette_accessibility(
            ['#ff0000', '#ff0505'], cache=cache, cvd_types=['protanomaly']
        )
        assert list(result) == [CVDType.PROTANOMALY]
        assert not result[CVDType.PROTANOMALY].accessible

    def test_black_and_white_palette(self, cache):
        result = check_palette_accessibility(['#000000', '#ffffff'], cache=cache)
        assert all(r.accessible for r in result.values())

    def test_category_accessibility(self, cache):
        result = check_category_accessibility(
            {
                'primary': ['#ff0000', '#ff0001'],
                'neutral': ['#000000'],
                'surface': ['#000000', '#ffffff'],
            },
            cache=cache,
        )
        assert set(result.by_category) == {'primary', 'surface'}
        protan = result.by_type[CVDType.PROTANOPIA]
        assert not protan.accessible
        assert protan.problematic_pairs == [CategoryPair('#ff0000', '#ff0001', 'primary')]
        assert result.by_category['surface'][CVDType.PROTANOPIA].accessible

    def test_colours_in_different_categories_are_not_compared(self, cache):
        result = check_category_accessibility(
            {'primary': ['#ff0000'], 'secondary': ['#ff0000']}, cache=cache
        )
        assert result.by_category == {}
        assert all(r.accessible for r in result.by_type.values())


class TestFixes:
    def test_contrast_fix_darkens_grey(self, cache):
        fix = suggest_contrast_fix('#777777', '#ffffff', 'protanopia', cache=cache)
        assert fix.adjusted_lightness == 42
        assert fix.hex == '#6b6b6b'
        simulated = simulate_colourblindness(fix.hex, 'protanopia', cache)
        assert get_contrast_ratio_from_hex(simulated, '#ffffff') >= 4.5

    def test_contrast_fix_steps_through_whole_lightness(self, cache):
        fix = suggest_contrast_fix('#3b82f6', '#ffffff', 'protanopia', cache=cache)
        assert fix.adjusted_lightness == round(fix.adjusted_lightness)
        assert (fix.adjusted_lightness - round(hex_to_hsl('#3b82f6').l)) % 5 == 0

    def test_contrast_fix_falls_back_light(self, cache):
        fix = suggest_contrast_fix('#ffffff', '#ffffff', 'achromatopsia', target_ratio=22, cache=cache)
        assert fix == ('#f2f2f2', 95.0)

    def test_contrast_fix_falls_back_dark(self, cache):
        fix = suggest_contrast_fix('#ffffff', '#000000', 'achromatopsia', target_ratio=22, cache=cache)
        assert fix == ('#1a1a1a', 10.0)

    def test_distinguishable_fix(self, cache):
        fix = suggest_distinguishable_fix('#ff0000', '#ff0000', 'achromatopsia', cache=cache)
        assert fix is not None
        assert fix.adjusted_lightness == 55.0
        assert hex_to_hsl(fix.hex).h == pytest.approx(0.0)
        assert are_colours_distinguishable(fix.hex, '#ff0000', 'achromatopsia', 25, cache)

    def test_distinguishable_fix_gives_up(self, cache):
        assert suggest_distinguishable_fix(
            '#000000', '#000000', 'achromatopsia', threshold=1000, cache=cache
        ) is None


class TestNames:
    def test_name(self):
        assert get_colourblind_type_name('deuteranopia') == 'Deuteranopia (Green-blind)'
        assert get_colourblind_type_name(CVDType.ACHROMATOPSIA) == 'Achromatopsia (Monochromacy)'

    def test_every_type_has_a_description(self):
        for cvd_type in CVD_TYPES:
            assert get_colourblind_type_description(cvd_type)
