"""palettelab: colour conversions, WCAG contrast, CVD simulation and palette analysis."""

__version__ = "0.1.0"

from .core.cache import SimulationCache
from .core.contrast import (
    check_all_contrast,
    contrast_ratio,
    find_best_contrast,
    generate_contrast_matrix,
    get_contrast_ratio_from_hex,
    get_contrast_result,
    get_optimal_text_colour,
    get_wcag_level,
    is_light_colour,
    suggest_contrasting_colour,
)
from .core.conversions import (
    cmyk_to_hex,
    cmyk_to_rgb,
    hex_to_cmyk,
    hex_to_hsl,
    hex_to_hsv,
    hex_to_lab,
    hex_to_oklch,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    hsv_to_hex,
    hsv_to_rgb,
    is_valid_hex,
    lab_to_hex,
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
from .core.harmony import (
    generate_complete_random_palette,
    generate_harmony,
    generate_monochromatic,
    generate_random_colour,
    generate_random_palette,
    get_harmony_description,
    get_harmony_name,
)
from .core.luminance import relative_luminance
from .core.scales import (
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
from .core.types import (
    CMYK,
    HSL,
    HSV,
    LAB,
    OKLCH,
    RGB,
    ContrastResult,
    CVDType,
    LightnessFix,
    PaletteColour,
    WCAGLevel,
)
from .core.vision import (
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
    suggest_contrast_fix,
    suggest_distinguishable_fix,
)
from .logic.report import (
    AccessibilityReport,
    build_accessibility_report,
    render_report_text,
    warning_key,
)
from .shared.formatting import (
    format_cmyk,
    format_contrast_ratio,
    format_hsl,
    format_oklch,
    format_rgb,
)
