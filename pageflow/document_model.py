#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Document Model - Blocks, pages and the run-scoped layout state.

- BlockKind / CalloutType enumerations
- Block and BlockStyle (one positioned, styled, atomic visual unit)
- Page (ordered blocks; the first page of a result is a hidden sentinel)
- LayoutState (cursor and style-cycle counters threaded through a run)
- IdArena (identifiers scoped to one transform call)
"""

from dataclasses import dataclass, field, fields, asdict
from enum import Enum
from typing import Optional, List, Dict, Any


# =============================================================================
# ENUMERATIONS
# =============================================================================

class BlockKind(str, Enum):
    """Kind of a visual block."""
    TITLE = "heading-title"
    CHAPTER = "heading-chapter"
    SUBHEADING = "heading-sub"
    PARAGRAPH = "paragraph"
    LIST_ITEM = "list-item"
    CALLOUT = "callout"
    STEP = "step"
    SUMMARY = "summary"
    BIG_QUOTE = "big-quote"
    CHECKLIST = "checklist-item"
    HIGHLIGHT = "highlight"
    IMAGE = "image-placeholder"
    TABLE = "table"
    DIVIDER = "divider"
    SHAPE = "shape"
    # Line-level only: buffered by the table buffer, never emitted as a block
    TABLE_ROW = "table-row"


class CalloutType(str, Enum):
    """Keyword-driven callout subtype."""
    TIP = "tip"
    IMPORTANT = "important"
    EXAMPLE = "example"
    DATA = "data"
    NOTE = "note"


# =============================================================================
# BLOCKS AND PAGES
# =============================================================================

@dataclass
class BlockStyle:
    """Resolved visual style of a block. Unset fields are omitted on export."""
    font_size: Optional[float] = None
    font_weight: Optional[str] = None
    color: Optional[str] = None
    text_align: Optional[str] = None  # left, center, right
    background: Optional[str] = None
    border_left: Optional[str] = None
    border_bottom: Optional[str] = None
    border: Optional[str] = None
    border_radius: Optional[str] = None
    padding: Optional[str] = None
    # Step badge
    num_bg: Optional[str] = None
    num_color: Optional[str] = None
    font_style: Optional[str] = None
    # Shapes
    shape_type: Optional[str] = None  # rect, circle, line
    fill: Optional[str] = None
    stroke: Optional[str] = None
    stroke_width: Optional[float] = None
    z_index: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BlockStyle":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


@dataclass
class Block:
    """A single positioned, styled visual unit. Blocks are never split."""
    id: str
    kind: BlockKind
    content: str
    x: float
    y: float
    width: float
    # Explicit height: shapes only, other kinds size themselves
    height: Optional[float] = None
    rotation: Optional[float] = None
    locked: Optional[bool] = None
    style: BlockStyle = field(default_factory=BlockStyle)
    # Estimated rendered height used by the flow
    layout_height: float = 0.0
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def bottom(self) -> float:
        return self.y + (self.height if self.height is not None else self.layout_height)

    def geometry(self) -> tuple:
        """(kind, x, y, width, layout_height): everything except the identifier."""
        return (self.kind, self.x, self.y, self.width, self.layout_height)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "kind": self.kind.value,
            "content": self.content,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "layout_height": self.layout_height,
            "style": self.style.to_dict(),
        }
        if self.height is not None:
            data["height"] = self.height
        if self.rotation is not None:
            data["rotation"] = self.rotation
        if self.locked is not None:
            data["locked"] = self.locked
        if self.extra:
            data["extra"] = dict(self.extra)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Block":
        return cls(
            id=data["id"],
            kind=BlockKind(data["kind"]),
            content=data.get("content", ""),
            x=data.get("x", 0.0),
            y=data.get("y", 0.0),
            width=data.get("width", 0.0),
            height=data.get("height"),
            rotation=data.get("rotation"),
            locked=data.get("locked"),
            style=BlockStyle.from_dict(data.get("style", {})),
            layout_height=data.get("layout_height", 0.0),
            extra=dict(data.get("extra", {})),
        )

    def __repr__(self):
        text = self.content if len(self.content) <= 30 else self.content[:30] + "..."
        return f"<{self.kind.value} @({self.x:.1f}, {self.y:.1f}): {text}>"


@dataclass
class Page:
    """An ordered list of blocks bounded by the page content box."""
    id: str
    blocks: List[Block] = field(default_factory=list)
    # The first page of every layout result is hidden bookkeeping
    sentinel: bool = False

    def to_dict(self) -> Dict[str, Any]:
        data = {"id": self.id, "blocks": [b.to_dict() for b in self.blocks]}
        if self.sentinel:
            data["sentinel"] = True
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Page":
        return cls(
            id=data["id"],
            blocks=[Block.from_dict(b) for b in data.get("blocks", [])],
            sentinel=data.get("sentinel", False),
        )

    def __len__(self) -> int:
        return len(self.blocks)


# =============================================================================
# RUN STATE
# =============================================================================

@dataclass(frozen=True)
class LayoutState:
    """
    Flow cursor plus style-cycle counters.

    Immutable: each styling/placement step returns an updated copy via
    dataclasses.replace().
    """
    cursor_y: float
    last_kind: Optional[BlockKind] = None
    last_was_blank: bool = False
    # Blank line seen while a table was open; spacing applies after the table
    pending_blank: bool = False
    blocks_on_page: int = 0
    chapter_index: int = 0
    subheading_index: int = 0
    highlight_index: int = 0


class IdArena:
    """Sequential identifiers scoped to a single transform call."""

    def __init__(self):
        self._blocks = 0
        self._pages = 0

    def next_block_id(self) -> str:
        self._blocks += 1
        return f"block-{self._blocks}"

    def next_page_id(self) -> str:
        page_id = f"page-{self._pages}"
        self._pages += 1
        return page_id
