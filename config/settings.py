#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

import re
from pathlib import Path
from typing import Optional, Tuple
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .constants import (
    DEFAULT_MAIN_COLOR,
    DEFAULT_PAGE_SIZE,
    DEFAULT_PREVIEW_WIDTH,
    LOG_LEVEL,
    OUTPUT_DIR,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent

HEX_COLOR_PATTERN = re.compile(r'^#?[0-9a-fA-F]{6}$')


def _normalize_hex(value: str) -> str:
    if not HEX_COLOR_PATTERN.match(value):
        raise ValueError(f"Invalid hex color: {value!r} (expected #rrggbb)")
    return value.lower() if value.startswith("#") else f"#{value.lower()}"


class Settings(BaseSettings):
    """Application settings"""

    # ========== Theme ==========
    main_color: str = Field(default=DEFAULT_MAIN_COLOR, description="Main seed color (#rrggbb)")
    # Empty means "derive from main color" (complementary hue)
    accent_color: Optional[str] = Field(default=None, description="Accent seed color (#rrggbb)")

    # ========== Page ==========
    page_size: str = DEFAULT_PAGE_SIZE  # A4 | A5 | B5
    preview_width: float = DEFAULT_PREVIEW_WIDTH

    # ========== Output ==========
    output_dir: Path = BASE_DIR / OUTPUT_DIR
    log_level: str = LOG_LEVEL

    class Config:
        env_prefix = "PAGEFLOW_"
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model

    @field_validator("main_color")
    @classmethod
    def _check_main_color(cls, value: str) -> str:
        return _normalize_hex(value)

    @field_validator("accent_color")
    @classmethod
    def _check_accent_color(cls, value: Optional[str]) -> Optional[str]:
        if value is None or value == "":
            return None
        return _normalize_hex(value)

    @field_validator("page_size")
    @classmethod
    def _check_page_size(cls, value: str) -> str:
        from pageflow.utils.constants import PAGE_SIZES

        name = value.upper()
        if name not in PAGE_SIZES:
            raise ValueError(f"Unsupported page size: {value!r} (choose from {', '.join(PAGE_SIZES)})")
        return name

    @field_validator("preview_width")
    @classmethod
    def _check_preview_width(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("preview_width must be positive")
        return value

    def get_theme(self):
        """Build the Theme for the configured seed colors."""
        from pageflow.theme import Theme

        return Theme(main_color=self.main_color, accent_color=self.accent_color)

    def get_page_box(self) -> Tuple[float, float]:
        """On-screen page box (width, height) for the configured page size."""
        from pageflow.page_layout import preview_size

        return preview_size(self.page_size, width=self.preview_width)

    def print_config(self):
        """Print configuration summary"""
        width, height = self.get_page_box()
        print("\n" + "=" * 70)
        print("CONFIGURATION")
        print("=" * 70)
        print(f"Main Color:      {self.main_color}")
        print(f"Accent Color:    {self.accent_color or 'auto (complementary)'}")
        print(f"Page Size:       {self.page_size} ({width:.0f} x {height:.1f})")
        print(f"Output Dir:      {self.output_dir}")
        print(f"Log Level:       {self.log_level}")
        print("=" * 70 + "\n")


# Global settings instance
settings = Settings()
