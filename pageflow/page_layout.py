#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Page Layout - Page size presets and the content box of a page.

Manages:
- Page sizes (A4, A5, B5)
- Preview page boxes (the on-screen size the flow lays out against)
- Content box: left edge, width, top and bottom of the flow area
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from .exceptions import LayoutConfigError
from .utils.constants import (
    PAGE_SIZES,
    PAGE_GEOMETRY,
    DIVIDER_INSET_RATIO,
    IMAGE_INSET,
)
from config.constants import DEFAULT_PREVIEW_WIDTH


# =============================================================================
# DATA CLASSES
# =============================================================================

@dataclass(frozen=True)
class PageGeometry:
    """Content box of a page, in block-coordinate units."""
    page_width: float
    page_height: float
    left: float
    content_width: float
    content_top: float
    content_bottom: float

    @classmethod
    def from_page_box(cls, width: float, height: float) -> "PageGeometry":
        """
        Derive the content box from a page box.

        Args:
            width: Page width
            height: Page height

        Raises:
            LayoutConfigError: If either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise LayoutConfigError(f"Page box must be positive, got {width} x {height}")
        return cls(
            page_width=width,
            page_height=height,
            left=width * PAGE_GEOMETRY["left_ratio"],
            content_width=width * PAGE_GEOMETRY["width_ratio"],
            content_top=height * PAGE_GEOMETRY["top_ratio"],
            content_bottom=height * PAGE_GEOMETRY["bottom_ratio"],
        )

    @property
    def content_height(self) -> float:
        return self.content_bottom - self.content_top

    def divider_frame(self) -> Tuple[float, float]:
        """(x, width) of a divider, inset from both sides."""
        inset = self.content_width * DIVIDER_INSET_RATIO
        return self.left + inset, self.content_width - 2 * inset

    def image_frame(self) -> Tuple[float, float]:
        """(x, width) of an image placeholder."""
        return self.left + IMAGE_INSET, self.content_width - 2 * IMAGE_INSET

    def to_dict(self) -> Dict[str, float]:
        return {
            "page_width": self.page_width,
            "page_height": self.page_height,
            "left": self.left,
            "content_width": self.content_width,
            "content_top": self.content_top,
            "content_bottom": self.content_bottom,
        }


# =============================================================================
# PRESETS
# =============================================================================

def page_size_mm(name: str) -> Tuple[float, float]:
    """
    Physical size of a preset.

    Raises:
        LayoutConfigError: For an unknown preset name
    """
    size = PAGE_SIZES.get(name.upper())
    if size is None:
        raise LayoutConfigError(
            f"Unknown page size {name!r} (choose from {', '.join(PAGE_SIZES)})"
        )
    return size["width"], size["height"]


def preview_size(name: str, width: float = DEFAULT_PREVIEW_WIDTH) -> Tuple[float, float]:
    """
    On-screen page box for a preset: fixed width, preset aspect ratio.

    Usage:
        preview_size("A4")   # (500, 707.14...)
    """
    mm_width, mm_height = page_size_mm(name)
    return width, width * mm_height / mm_width


def geometry_for_preset(name: str, width: float = DEFAULT_PREVIEW_WIDTH) -> PageGeometry:
    return PageGeometry.from_page_box(*preview_size(name, width))
