#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PageFlow command line - lay out a markup file into pages.

Examples:
  # A4 preview pages as JSON next to the input
  pageflow chapter.md

  # A5 pages with a custom theme
  pageflow chapter.md --page-size A5 --main-color "#166534" -o out/pages.json

  # Preset theme color by name
  pageflow chapter.md --main-color teal

  # Round-trip the laid-out pages back to markup
  pageflow chapter.md --markup -o chapter.flow.md
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from config.constants import PRESET_MAIN_COLORS
from config.logging_config import get_logger, set_console_level
from config.settings import settings

from .exceptions import PageFlowError
from .exporters import JsonPageExporter, MarkupExporter
from .flow_engine import FlowAccumulator, visible_pages
from .page_layout import PageGeometry, preview_size
from .theme import Theme
from .utils.constants import PAGE_SIZES

logger = get_logger(__name__)

PRESET_COLORS_BY_NAME = {name: color for color, name in PRESET_MAIN_COLORS}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pageflow",
        description="Lay out line markup into fixed-size pages of positioned blocks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples:", 1)[1] if __doc__ else None,
    )
    parser.add_argument("input_file", help="Markup file to lay out ('-' reads stdin)")
    parser.add_argument("-o", "--output", help="Output file (default: <input>.pages.json or .flow.md)")
    parser.add_argument("--page-size", choices=sorted(PAGE_SIZES), default=settings.page_size,
                        help=f"Page size preset (default: {settings.page_size})")
    parser.add_argument("--preview-width", type=float, default=settings.preview_width,
                        help=f"Page box width in block units (default: {settings.preview_width:g})")
    parser.add_argument("--main-color", default=settings.main_color,
                        help=f"Main theme color as #rrggbb or a preset name "
                             f"({', '.join(PRESET_COLORS_BY_NAME)}; default: {settings.main_color})")
    parser.add_argument("--accent-color", default=settings.accent_color,
                        help="Accent color (default: derived from the main color)")
    parser.add_argument("--markup", action="store_true",
                        help="Write the laid-out blocks back as markup instead of JSON")
    parser.add_argument("--include-sentinel", action="store_true",
                        help="Keep the hidden first page in JSON output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _resolve_color(value: Optional[str]) -> Optional[str]:
    if not value:
        return value
    return PRESET_COLORS_BY_NAME.get(value.strip().lower(), value)


def _default_output(input_file: str, markup: bool) -> str:
    if input_file == "-":
        stem = str(Path(settings.output_dir) / "stdin")
    else:
        stem = str(Path(input_file).with_suffix(""))
    return f"{stem}.flow.md" if markup else f"{stem}.pages.json"


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        for name in list(logging.Logger.manager.loggerDict):
            if name == "pageflow" or name.startswith("pageflow."):
                set_console_level(logging.getLogger(name), logging.DEBUG)

    try:
        text = _read_input(args.input_file)
        page_box = preview_size(args.page_size, width=args.preview_width)
        theme = Theme(main_color=_resolve_color(args.main_color),
                      accent_color=_resolve_color(args.accent_color))
        flow = FlowAccumulator(theme=theme, geometry=PageGeometry.from_page_box(*page_box))
        pages = flow.run(text)

        output = args.output or _default_output(args.input_file, args.markup)
        if args.markup:
            path = MarkupExporter().export(pages, output)
        else:
            exporter = JsonPageExporter(include_sentinel=args.include_sentinel)
            path = exporter.export(
                pages, output, page_box=page_box,
                theme={"main_color": theme.main_color, "accent_color": theme.accent_color},
            )
    except (PageFlowError, OSError) as e:
        logger.error(f"Layout failed: {e}")
        return 1

    shown = visible_pages(pages)
    logger.info(
        f"Laid out {sum(len(p) for p in shown)} blocks on {len(shown)} pages "
        f"({args.page_size}) -> {path}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
