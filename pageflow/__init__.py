#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PageFlow - Document flow and pagination engine v1.0

Converts line-oriented markup (headings, callouts, step boxes, summaries,
checklists, tables, images, dividers, paragraphs) into fixed-size pages of
absolutely positioned, styled blocks.

Stages:
1. Classification - Decide the block kind of each line
2. Sizing - Estimate block heights and contextual margins
3. Flow - Place blocks, buffer tables, break pages
4. Export - JSON page lists or markup round-trip
"""

__version__ = "1.0.0"

from .document_model import (
    Block,
    BlockKind,
    BlockStyle,
    CalloutType,
    IdArena,
    LayoutState,
    Page,
)
from .theme import (
    Theme,
    accent_from_main,
    contrast_color,
    darken,
    hex_to_rgb,
    lighten,
    relative_luminance,
    rgb_to_hex,
)
from .classifier import ClassifiedLine, LineClassifier, classify_callout_type
from .box_sizer import BoxMetrics, blank_spacing, block_height, margin_top, measure
from .table_buffer import TableBuffer, TableDraft, render_table_html
from .page_layout import PageGeometry, geometry_for_preset, page_size_mm, preview_size
from .block_builder import BlockBuilder, make_shape_block
from .flow_engine import (
    FlowAccumulator,
    PageAssembler,
    layout_document,
    select_export_range,
    visible_pages,
)
from .streaming import StreamingLayoutSession
from .exporters import JsonPageExporter, MarkupExporter, load_pages
from .exceptions import PageFlowError, LayoutConfigError, ExportError

__all__ = [
    # Model
    "Block",
    "BlockKind",
    "BlockStyle",
    "CalloutType",
    "IdArena",
    "LayoutState",
    "Page",
    # Theme
    "Theme",
    "accent_from_main",
    "contrast_color",
    "darken",
    "hex_to_rgb",
    "lighten",
    "relative_luminance",
    "rgb_to_hex",
    # Classification
    "ClassifiedLine",
    "LineClassifier",
    "classify_callout_type",
    # Sizing
    "BoxMetrics",
    "blank_spacing",
    "block_height",
    "margin_top",
    "measure",
    # Tables
    "TableBuffer",
    "TableDraft",
    "render_table_html",
    # Page layout
    "PageGeometry",
    "geometry_for_preset",
    "page_size_mm",
    "preview_size",
    # Blocks
    "BlockBuilder",
    "make_shape_block",
    # Flow
    "FlowAccumulator",
    "PageAssembler",
    "layout_document",
    "select_export_range",
    "visible_pages",
    "StreamingLayoutSession",
    # Export
    "JsonPageExporter",
    "MarkupExporter",
    "load_pages",
    # Errors
    "PageFlowError",
    "LayoutConfigError",
    "ExportError",
]
