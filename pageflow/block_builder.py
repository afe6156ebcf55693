#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Block Builder - Turn classified lines into styled blocks.

Resolves each block's content, frame and style from the theme. Style
cycles (chapter, subheading, highlight) advance through the LayoutState,
which is returned updated rather than mutated.
"""

from dataclasses import replace
from typing import Optional, Tuple

from .classifier import ClassifiedLine
from .document_model import Block, BlockKind, BlockStyle, CalloutType, LayoutState
from .page_layout import PageGeometry
from .table_buffer import TableDraft
from .theme import Theme
from .utils.constants import (
    DIVIDER_BACKGROUND,
    IMAGE_ICON,
    IMAGE_LABEL,
    IMAGE_PLACEHOLDER_STYLE,
    PARAGRAPH_COLOR,
    SHAPE_DEFAULTS,
    SHAPE_TYPES,
    SUMMARY_LABEL,
)


class BlockBuilder:
    """
    Build blocks for one theme and page geometry.

    Usage:
        builder = BlockBuilder(theme, geometry)
        block, state = builder.build(classified, state, y=120.0, block_id="block-7",
                                     layout_height=42)
    """

    def __init__(self, theme: Theme, geometry: PageGeometry):
        self.theme = theme
        self.geometry = geometry

    def build(
        self,
        line: ClassifiedLine,
        state: LayoutState,
        y: float,
        block_id: str,
        layout_height: float,
    ) -> Tuple[Block, LayoutState]:
        """
        Build the block for a classified line at vertical offset `y`.

        Returns:
            (block, state with the style cycle of this kind advanced)
        """
        x = self.geometry.left
        width = self.geometry.content_width
        kind = line.kind
        extra = {}

        if kind == BlockKind.TITLE:
            content = line.payload
            style = BlockStyle(
                font_size=26, font_weight="bold", text_align="center",
                background=self.theme.title_style["background"],
                color=self.theme.title_style["color"],
                padding="16px 20px", border_radius="8px",
            )

        elif kind == BlockKind.CHAPTER:
            palette = self.theme.chapter_style(state.chapter_index)
            content = line.payload
            style = BlockStyle(font_size=17, font_weight="bold", padding="12px 16px", **palette)
            extra["palette_index"] = state.chapter_index % len(self.theme.chapter_styles)
            state = replace(state, chapter_index=state.chapter_index + 1)

        elif kind == BlockKind.SUBHEADING:
            palette = self.theme.subheading_style(state.subheading_index)
            content = line.payload
            style = BlockStyle(
                font_size=13, font_weight="600", background="transparent",
                padding="4px 10px", **palette,
            )
            extra["palette_index"] = state.subheading_index % len(self.theme.subheading_styles)
            state = replace(state, subheading_index=state.subheading_index + 1)

        elif kind == BlockKind.STEP:
            number = line.extra["step_number"]
            palette = self.theme.step_style(number)
            content = f"STEP {number}|{line.payload}"
            style = BlockStyle(
                background=palette["bg"], border=f"2px solid {palette['border']}",
                border_radius="10px", padding="12px 14px 12px 50px",
                num_bg=palette["num_bg"], num_color=palette["num_color"],
            )
            extra["step_number"] = number

        elif kind == BlockKind.SUMMARY:
            palette = self.theme.summary_style
            content = f"{palette['icon']} {SUMMARY_LABEL}|{line.payload}"
            style = BlockStyle(
                background=palette["bg"], color=palette["color"],
                border_left=f"5px solid {palette['border']}",
                border_radius="8px", padding="14px 16px",
            )

        elif kind == BlockKind.BIG_QUOTE:
            palette = self.theme.quote_style
            content = line.payload
            style = BlockStyle(
                background=palette["bg"], color=palette["color"],
                border_left=f"4px solid {palette['border']}",
                border_radius="8px", padding="16px 16px 16px 40px", font_style="italic",
            )

        elif kind == BlockKind.CHECKLIST:
            palette = self.theme.checklist_style
            content = f"{palette['icon']} {line.payload}"
            style = BlockStyle(
                background=palette["bg"], color=palette["text_color"],
                padding="6px 12px", border_radius="6px",
            )

        elif kind == BlockKind.HIGHLIGHT:
            palette = self.theme.highlight_style(state.highlight_index)
            content = f"{palette['icon']} {line.payload}"
            style = BlockStyle(
                background=palette["bg"], color=palette["color"],
                padding="10px 14px", border_radius="20px",
                font_weight="600", text_align="center",
            )
            extra["palette_index"] = state.highlight_index % len(self.theme.highlight_styles)
            state = replace(state, highlight_index=state.highlight_index + 1)

        elif kind == BlockKind.CALLOUT:
            callout_type = line.extra.get("callout_type", CalloutType.TIP)
            palette = self.theme.callout_style(callout_type.value)
            content = f"{palette['icon']} {line.payload}"
            style = BlockStyle(
                background=palette["bg"], border_left=f"4px solid {palette['border']}",
                color=palette["color"], padding="12px 14px", border_radius="6px",
            )
            extra["callout_type"] = callout_type.value

        elif kind == BlockKind.LIST_ITEM:
            content = line.payload
            style = BlockStyle()
            extra["list_type"] = line.extra.get("list_type", "bullet")

        elif kind == BlockKind.IMAGE:
            content = f"{IMAGE_ICON} {IMAGE_LABEL}\n{line.payload}"
            x, width = self.geometry.image_frame()
            style = BlockStyle(**IMAGE_PLACEHOLDER_STYLE)
            extra["description"] = line.payload

        elif kind == BlockKind.DIVIDER:
            content = ""
            x, width = self.geometry.divider_frame()
            style = BlockStyle(background=DIVIDER_BACKGROUND, border_radius="1px", padding="1px 0")

        else:
            content = line.payload
            style = BlockStyle(color=PARAGRAPH_COLOR)

        block = Block(
            id=block_id, kind=kind, content=content,
            x=x, y=y, width=width, style=style,
            layout_height=layout_height, extra=extra,
        )
        return block, state

    def build_table(self, draft: TableDraft, y: float, block_id: str, layout_height: float) -> Block:
        """Build the composite block for a flushed table."""
        return Block(
            id=block_id,
            kind=BlockKind.TABLE,
            content=draft.html,
            x=self.geometry.left,
            y=y,
            width=self.geometry.content_width,
            style=BlockStyle(),
            layout_height=layout_height,
            extra={"row_count": draft.row_count, "rows": [list(r) for r in draft.rows]},
        )


def make_shape_block(
    block_id: str,
    shape_type: str,
    x: float,
    y: float,
    width: float,
    height: Optional[float] = None,
    fill: Optional[str] = None,
    stroke: Optional[str] = None,
    stroke_width: Optional[float] = None,
    z_index: Optional[int] = None,
) -> Block:
    """
    Create a free-standing shape block (rect, circle or line).

    Shapes are placed by the editor, not by the flow, so they carry an
    explicit height.

    Raises:
        ValueError: For an unknown shape type
    """
    if shape_type not in SHAPE_TYPES:
        raise ValueError(f"Unknown shape type {shape_type!r} (choose from {', '.join(SHAPE_TYPES)})")
    shape_height = SHAPE_DEFAULTS["height"] if height is None else height
    return Block(
        id=block_id,
        kind=BlockKind.SHAPE,
        content="",
        x=x,
        y=y,
        width=width,
        height=shape_height,
        rotation=0,
        style=BlockStyle(
            shape_type=shape_type,
            fill=fill or SHAPE_DEFAULTS["fill"],
            stroke=stroke or SHAPE_DEFAULTS["stroke"],
            stroke_width=SHAPE_DEFAULTS["stroke_width"] if stroke_width is None else stroke_width,
            z_index=z_index,
        ),
        layout_height=shape_height,
    )
