"""
Unit tests for pageflow/theme.py - color utilities and Theme palettes
"""
import colorsys

import pytest

from pageflow.theme import (
    Theme,
    accent_from_main,
    contrast_color,
    darken,
    hex_to_rgb,
    lighten,
    relative_luminance,
    rgb_to_hex,
)


class TestColorConversion:
    """Test hex/RGB conversion."""

    def test_hex_to_rgb(self):
        assert hex_to_rgb("#1e3a5f") == (30, 58, 95)

    def test_hex_to_rgb_without_hash_and_uppercase(self):
        assert hex_to_rgb("FF8000") == (255, 128, 0)

    @pytest.mark.parametrize("bad", ["", "#fff", "not a color", "#12345g", None])
    def test_invalid_hex_is_black(self, bad):
        """Bad colors degrade to black instead of raising."""
        assert hex_to_rgb(bad) == (0, 0, 0)

    def test_rgb_to_hex_clamps_and_rounds_half_up(self):
        assert rgb_to_hex(255.6, -3, 127.5) == "#ff0080"

    def test_rgb_to_hex_pads(self):
        assert rgb_to_hex(1, 2, 3) == "#010203"


class TestLightenDarken:
    """Test linear blends toward white and black."""

    def test_lighten_half(self):
        assert lighten("#000000", 50) == "#808080"

    def test_darken_half(self):
        assert darken("#ffffff", 50) == "#808080"

    def test_extremes(self):
        assert lighten("#1e3a5f", 0) == "#1e3a5f"
        assert lighten("#1e3a5f", 100) == "#ffffff"
        assert darken("#1e3a5f", 100) == "#000000"


class TestLuminanceAndContrast:
    """Test relative luminance and contrast text selection."""

    def test_luminance_bounds(self):
        assert relative_luminance("#000000") == 0
        assert relative_luminance("#ffffff") == pytest.approx(1.0)

    def test_luminance_weights_green_most(self):
        assert relative_luminance("#00ff00") > relative_luminance("#ff0000") > relative_luminance("#0000ff")

    @pytest.mark.parametrize("background", ["#ffffff", "#f5f5f5", "#cccccc", "#fef3c7"])
    def test_light_background_gets_dark_text(self, background):
        assert contrast_color(background) == "#1a202c"

    @pytest.mark.parametrize("background", ["#000000", "#1e3a5f", "#777777", "#7c3aed"])
    def test_dark_background_gets_light_text(self, background):
        assert contrast_color(background) == "#ffffff"


class TestAccentFromMain:
    """Test complementary accent derivation."""

    def test_red_becomes_cyan(self):
        assert accent_from_main("#ff0000") == "#00ffff"

    @pytest.mark.parametrize("main", ["#1e3a5f", "#166534", "#b45309", "#000000", "#ffffff"])
    def test_lightness_kept_in_mid_range(self, main):
        r, g, b = (c / 255 for c in hex_to_rgb(accent_from_main(main)))
        _, lightness, _ = colorsys.rgb_to_hls(r, g, b)
        assert 0.29 <= lightness <= 0.61

    def test_hue_rotated_half_turn(self):
        main = "#1e3a5f"
        r, g, b = (c / 255 for c in hex_to_rgb(main))
        main_hue = colorsys.rgb_to_hls(r, g, b)[0]
        r, g, b = (c / 255 for c in hex_to_rgb(accent_from_main(main)))
        accent_hue = colorsys.rgb_to_hls(r, g, b)[0]
        diff = abs(accent_hue - main_hue)
        assert min(diff, 1 - diff) == pytest.approx(0.5, abs=0.02)


class TestTheme:
    """Test Theme palettes."""

    def test_accent_derived_when_missing(self):
        theme = Theme(main_color="#1e3a5f")
        assert theme.accent_color == accent_from_main("#1e3a5f")

    def test_explicit_accent_kept(self):
        theme = Theme(main_color="#1e3a5f", accent_color="#be123c")
        assert theme.accent_color == "#be123c"
        assert theme.callout_style("important")["border"] == "#be123c"

    def test_palette_lengths(self, theme):
        assert len(theme.chapter_styles) == 4
        assert len(theme.step_styles) == 4
        assert len(theme.subheading_styles) == 4
        assert len(theme.highlight_styles) == 3
        assert set(theme.callout_styles) == {"tip", "important", "example", "data", "note"}

    def test_cyclic_lookup(self, theme):
        assert theme.chapter_style(4) is theme.chapter_styles[0]
        assert theme.chapter_style(7) is theme.chapter_styles[3]
        assert theme.subheading_style(5) is theme.subheading_styles[1]
        assert theme.highlight_style(3) is theme.highlight_styles[0]

    def test_step_style_by_number(self, theme):
        assert theme.step_style(1) is theme.step_styles[0]
        assert theme.step_style(5) is theme.step_styles[0]
        assert theme.step_style(0) is theme.step_styles[3]

    def test_unknown_callout_type_falls_back_to_tip(self, theme):
        assert theme.callout_style("mystery") is theme.callout_styles["tip"]

    def test_chapter_gradient_contrast(self):
        assert Theme(main_color="#f5f5f5").chapter_styles[0]["color"] == "#1a202c"
        assert Theme(main_color="#1e3a5f").chapter_styles[0]["color"] == "#ffffff"

    def test_step_badges_use_contrast_text(self, theme):
        for style in theme.step_styles:
            assert style["num_color"] == contrast_color(style["num_bg"])

    def test_table_header_follows_main_color(self, theme):
        assert theme.table_style["header_bg"] == "#1e3a5f"
        assert theme.table_style["header_color"] == "#ffffff"
