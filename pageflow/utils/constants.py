#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Layout Constants - Block metrics, margins and fixed palettes.

All sizes are in page-box units (the same unit as block coordinates;
normally on-screen pixels of a 500-wide preview page).
"""

# =============================================================================
# PAGE SIZES (millimetres)
# =============================================================================

PAGE_SIZES = {
    "A4": {"width": 210, "height": 297, "label": "A4 (210x297mm)"},
    "A5": {"width": 148, "height": 210, "label": "A5 (148x210mm)"},
    "B5": {"width": 182, "height": 257, "label": "B5 (182x257mm)"},
}

# Content box as fractions of the page box
PAGE_GEOMETRY = {
    "left_ratio": 0.08,
    "width_ratio": 0.84,
    "top_ratio": 0.06,
    "bottom_ratio": 0.85,
}

# Inset of dividers (fraction of content width, each side) and image placeholders
DIVIDER_INSET_RATIO = 0.1
IMAGE_INSET = 20

# =============================================================================
# BOX METRICS
# =============================================================================

# Extra lines of wrapped text add this much height
LINE_HEIGHT = 16

# Fixed-height kinds
FIXED_HEIGHTS = {
    "heading-title": 66,
    "heading-chapter": 42,
    "heading-sub": 30,
    "checklist-item": 24,
    "list-item": 20,
    "image-placeholder": 100,
    "divider": 20,
}

# Variable-height kinds: base height + wrapped lines. Paragraphs count one
# extra line per full chars_per_line ("floor"), other boxes one per started
# line after the first.
VARIABLE_HEIGHTS = {
    "step": {"base": 44, "chars_per_line": 35},
    "summary": {"base": 50, "chars_per_line": 35},
    "big-quote": {"base": 50, "chars_per_line": 38},
    "highlight": {"base": 36, "chars_per_line": 38},
    "callout": {"base": 34, "chars_per_line": 40},
    "paragraph": {"base": 20, "chars_per_line": 45, "wrap": "floor"},
}

# Table: header row + data rows + padding
TABLE_METRICS = {
    "header_height": 32,
    "row_height": 28,
    "padding": 16,
}

# Top margins. "after" entries apply when the previous block on the page has
# the given kind; "first" applies to the first block on a page.
MARGINS = {
    "heading-title": {"default": 16, "first": 0},
    "heading-chapter": {"default": 18, "after": {"heading-title": 14}},
    "heading-sub": {"default": 14},
    "step": {"default": 14},
    "summary": {"default": 16},
    "big-quote": {"default": 14},
    "checklist-item": {"default": 10, "after": {"checklist-item": 4}},
    "highlight": {"default": 12},
    "callout": {"default": 12},
    "list-item": {"default": 8, "after": {"list-item": 4}},
    "image-placeholder": {"default": 14},
    "table": {"default": 14},
    "divider": {"default": 16},
    "paragraph": {"default": 10, "after": {"paragraph": 6}},
}

# Blank line spacing (collapsed: applied once per run of blank lines)
BLANK_SPACING = {
    "default": 12,
    "after": {"paragraph": 16},
}

# =============================================================================
# THEME
# =============================================================================

CONTRAST_LUMINANCE_THRESHOLD = 0.4
CONTRAST_DARK_TEXT = "#1a202c"
CONTRAST_LIGHT_TEXT = "#ffffff"

# Complementary accent derivation
ACCENT_HUE_SHIFT = 0.5
ACCENT_SATURATION_SCALE = 1.3
ACCENT_SATURATION_BOOST = 0.2
ACCENT_LIGHTNESS_RANGE = (0.3, 0.6)

CALLOUT_FIXED_STYLES = {
    "tip": {"bg": "linear-gradient(135deg, #fffbeb, #fef3c7)", "border": "#d97706", "color": "#92400e", "icon": "💡"},
    "example": {"bg": "linear-gradient(135deg, #f0fdf4, #dcfce7)", "border": "#16a34a", "color": "#166534", "icon": "📌"},
    "data": {"bg": "linear-gradient(135deg, #eff6ff, #dbeafe)", "border": "#2563eb", "color": "#1e40af", "icon": "📊"},
    "note": {"bg": "linear-gradient(135deg, #faf5ff, #f3e8ff)", "border": "#9333ea", "color": "#7c3aed", "icon": "📝"},
}
CALLOUT_IMPORTANT_ICON = "❗"

QUOTE_BOX_STYLE = {
    "bg": "#f8fafc",
    "color": "#475569",
    "border": "#94a3b8",
}

SUMMARY_ICON = "🎯"
SUMMARY_LABEL = "Key Summary"
CHECKLIST_ICON = "✅"
HIGHLIGHT_ICONS = ["⭐", "✨", "🔥"]
IMAGE_ICON = "📷"
IMAGE_LABEL = "Image area"

PARAGRAPH_COLOR = "#2d3748"
DIVIDER_BACKGROUND = "linear-gradient(90deg, transparent, #d1d5db, transparent)"

IMAGE_PLACEHOLDER_STYLE = {
    "background": "#f1f5f9",
    "border": "2px dashed #94a3b8",
    "border_radius": "8px",
    "padding": "20px",
    "text_align": "center",
    "color": "#64748b",
}

TABLE_STYLES = {
    "border": "#cbd5e1",
    "row_border": "#e2e8f0",
    "stripe_bg": "#f8fafc",
    "row_bg": "#ffffff",
    "text_color": "#1e293b",
    "cell_padding": "8px 12px",
}

SHAPE_DEFAULTS = {
    "height": 70,
    "stroke": "#1d4ed8",
    "stroke_width": 2,
    "fill": "transparent",
}
SHAPE_TYPES = ("rect", "circle", "line")

# =============================================================================
# CALLOUT CLASSIFICATION
# =============================================================================

# Checked in this order; first subtype with a matching substring wins.
# Unmatched callouts are "tip".
CALLOUT_KEYWORDS = {
    "important": ["중요", "주의", "경고", "important", "warning", "caution"],
    "example": ["예시", "사례", "예를 들", "example", "for instance", "e.g."],
    "data": ["데이터", "통계", "연구", "%", "data", "statistic", "research"],
    "note": ["참고", "노트", "메모", "note", "memo", "reference"],
}
DEFAULT_CALLOUT_TYPE = "tip"
