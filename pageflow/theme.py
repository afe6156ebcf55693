#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Theme Resolver - Derive every block palette from two seed colors.

- Hex/RGB conversion, relative luminance, contrast text selection
- Lighten/darken by linear blend toward white/black
- Complementary accent derivation (HSL hue rotation)
- Cyclic palettes for chapter headings, step badges, subheadings, highlights
"""

import colorsys
import math
import re
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Tuple

from .utils.constants import (
    ACCENT_HUE_SHIFT,
    ACCENT_LIGHTNESS_RANGE,
    ACCENT_SATURATION_BOOST,
    ACCENT_SATURATION_SCALE,
    CALLOUT_FIXED_STYLES,
    CALLOUT_IMPORTANT_ICON,
    CHECKLIST_ICON,
    CONTRAST_DARK_TEXT,
    CONTRAST_LIGHT_TEXT,
    CONTRAST_LUMINANCE_THRESHOLD,
    HIGHLIGHT_ICONS,
    QUOTE_BOX_STYLE,
    SUMMARY_ICON,
    TABLE_STYLES,
)
from config.constants import DEFAULT_MAIN_COLOR


HEX_PATTERN = re.compile(r'^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$', re.IGNORECASE)


# =============================================================================
# COLOR UTILITIES
# =============================================================================

def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """
    Parse a #rrggbb color.

    Anything that is not a 6-digit hex color yields black, so a bad color
    degrades the look of a block instead of failing the layout.
    """
    match = HEX_PATTERN.match(hex_color or "")
    if not match:
        return (0, 0, 0)
    return tuple(int(part, 16) for part in match.groups())


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Format channels as #rrggbb, clamping to 0..255 and rounding half up."""
    return "#" + "".join(
        f"{max(0, min(255, _round_half_up(c))):02x}" for c in (r, g, b)
    )


def relative_luminance(hex_color: str) -> float:
    """WCAG relative luminance of a color (0 = black, 1 = white)."""
    def linear(channel: int) -> float:
        c = channel / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = (linear(c) for c in hex_to_rgb(hex_color))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_color(background: str) -> str:
    """Dark text on light backgrounds, white text on dark ones."""
    if relative_luminance(background) > CONTRAST_LUMINANCE_THRESHOLD:
        return CONTRAST_DARK_TEXT
    return CONTRAST_LIGHT_TEXT


def lighten(hex_color: str, percent: float) -> str:
    """Blend toward white by `percent` (0-100)."""
    r, g, b = hex_to_rgb(hex_color)
    ratio = percent / 100
    return rgb_to_hex(
        r + (255 - r) * ratio,
        g + (255 - g) * ratio,
        b + (255 - b) * ratio,
    )


def darken(hex_color: str, percent: float) -> str:
    """Blend toward black by `percent` (0-100)."""
    r, g, b = hex_to_rgb(hex_color)
    ratio = 1 - percent / 100
    return rgb_to_hex(r * ratio, g * ratio, b * ratio)


def accent_from_main(main_color: str) -> str:
    """
    Derive an accent color from the main color.

    Rotates the hue half a turn, boosts saturation and keeps lightness in a
    readable mid range.
    """
    r, g, b = (c / 255 for c in hex_to_rgb(main_color))
    hue, lightness, saturation = colorsys.rgb_to_hls(r, g, b)

    new_hue = (hue + ACCENT_HUE_SHIFT) % 1
    new_saturation = min(1.0, saturation * ACCENT_SATURATION_SCALE + ACCENT_SATURATION_BOOST)
    low, high = ACCENT_LIGHTNESS_RANGE
    new_lightness = max(low, min(high, lightness))

    nr, ng, nb = colorsys.hls_to_rgb(new_hue, new_lightness, new_saturation)
    return rgb_to_hex(nr * 255, ng * 255, nb * 255)


def gradient(angle: int, start: str, end: str) -> str:
    return f"linear-gradient({angle}deg, {start}, {end})"


# =============================================================================
# THEME
# =============================================================================

@dataclass
class Theme:
    """
    Seed colors plus every derived palette.

    Palettes are built once in __post_init__; cyclic ones are indexed with
    `palette[index % len(palette)]` through the *_style() helpers.

    Usage:
        theme = Theme(main_color="#1e3a5f")          # accent derived
        theme.chapter_style(4) is theme.chapter_styles[0]
    """
    main_color: str = DEFAULT_MAIN_COLOR
    accent_color: Optional[str] = None

    chapter_styles: List[Dict[str, str]] = field(init=False, repr=False)
    step_styles: List[Dict[str, str]] = field(init=False, repr=False)
    subheading_styles: List[Dict[str, str]] = field(init=False, repr=False)
    highlight_styles: List[Dict[str, str]] = field(init=False, repr=False)
    callout_styles: Dict[str, Dict[str, str]] = field(init=False, repr=False)
    summary_style: Dict[str, str] = field(init=False, repr=False)
    quote_style: Dict[str, str] = field(init=False, repr=False)
    checklist_style: Dict[str, str] = field(init=False, repr=False)
    title_style: Dict[str, str] = field(init=False, repr=False)
    table_style: Dict[str, str] = field(init=False, repr=False)

    def __post_init__(self):
        if not self.accent_color:
            self.accent_color = accent_from_main(self.main_color)

        main = self.main_color
        accent = self.accent_color

        self.title_style = {
            "background": gradient(135, main, lighten(main, 15)),
            "color": contrast_color(main),
        }

        self.chapter_styles = [
            # Gradient band
            {"background": gradient(135, main, lighten(main, 25)), "color": contrast_color(main),
             "border_radius": "6px"},
            # Side accent
            {"background": "#f8f9fa", "color": "#2d3748", "border_left": f"5px solid {main}",
             "border_radius": "0"},
            # Underline
            {"background": "transparent", "color": "#1a202c", "border_bottom": f"2px solid {main}",
             "border_radius": "0"},
            # Soft background
            {"background": lighten(main, 85), "color": darken(main, 10), "border_radius": "6px"},
        ]

        self.step_styles = [
            self._step_style(main, lighten(main, 90)),
            self._step_style(lighten(main, 20), lighten(main, 92)),
            self._step_style(darken(main, 10), lighten(main, 88)),
            self._step_style(main, lighten(main, 85)),
        ]

        self.subheading_styles = [
            {"color": c, "border_left": f"3px solid {c}"}
            for c in (accent, darken(accent, 10), lighten(accent, 10), accent)
        ]

        self.highlight_styles = [
            {"bg": gradient(90, lighten(accent, 70), lighten(accent, 60)), "color": darken(accent, 30),
             "icon": HIGHLIGHT_ICONS[0]},
            {"bg": gradient(90, lighten(accent, 75), lighten(accent, 65)), "color": darken(accent, 25),
             "icon": HIGHLIGHT_ICONS[1]},
            {"bg": gradient(90, lighten(accent, 80), lighten(accent, 70)), "color": darken(accent, 20),
             "icon": HIGHLIGHT_ICONS[2]},
        ]

        self.callout_styles = {name: dict(style) for name, style in CALLOUT_FIXED_STYLES.items()}
        self.callout_styles["important"] = {
            "bg": gradient(135, lighten(accent, 90), lighten(accent, 80)),
            "border": accent,
            "color": darken(accent, 20),
            "icon": CALLOUT_IMPORTANT_ICON,
        }

        self.summary_style = {
            "bg": gradient(135, darken(main, 30), darken(main, 10)),
            "color": "#f8fafc",
            "border": main,
            "icon": SUMMARY_ICON,
        }

        self.quote_style = dict(QUOTE_BOX_STYLE)

        self.checklist_style = {
            "bg": lighten(accent, 92),
            "check_color": accent,
            "text_color": darken(accent, 20),
            "icon": CHECKLIST_ICON,
        }

        self.table_style = dict(TABLE_STYLES)
        self.table_style["header_bg"] = main
        self.table_style["header_color"] = contrast_color(main)

    @staticmethod
    def _step_style(badge: str, background: str) -> Dict[str, str]:
        return {"num_bg": badge, "num_color": contrast_color(badge), "bg": background, "border": badge}

    # -------------------------------------------------------------------------
    # Cyclic lookups
    # -------------------------------------------------------------------------

    def chapter_style(self, index: int) -> Dict[str, str]:
        return self.chapter_styles[index % len(self.chapter_styles)]

    def step_style(self, step_number: int) -> Dict[str, str]:
        return self.step_styles[(step_number - 1) % len(self.step_styles)]

    def subheading_style(self, index: int) -> Dict[str, str]:
        return self.subheading_styles[index % len(self.subheading_styles)]

    def highlight_style(self, index: int) -> Dict[str, str]:
        return self.highlight_styles[index % len(self.highlight_styles)]

    def callout_style(self, callout_type: str) -> Dict[str, str]:
        return self.callout_styles.get(callout_type, self.callout_styles["tip"])
