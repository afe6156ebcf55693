#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Box Sizer - Estimate block heights and top margins.

Heights are estimates, not typeset measurements: fixed per kind for
single-line blocks, base height plus wrapped lines for text boxes.
Top margins depend on the kind of the previous block on the page.
"""

import math
from dataclasses import dataclass
from typing import Optional

from .document_model import BlockKind
from .utils.constants import (
    BLANK_SPACING,
    FIXED_HEIGHTS,
    LINE_HEIGHT,
    MARGINS,
    TABLE_METRICS,
    VARIABLE_HEIGHTS,
)


@dataclass(frozen=True)
class BoxMetrics:
    """Estimated height of a block and the margin to leave above it."""
    height: float
    margin_top: float

    @property
    def total(self) -> float:
        return self.margin_top + self.height


def wrapped_extra_lines(length: int, chars_per_line: int) -> int:
    """Lines beyond the first needed for `length` characters."""
    if length <= 0:
        return 0
    return max(0, math.ceil(length / chars_per_line) - 1)


def table_height(row_count: int) -> float:
    """Header row + data rows + padding."""
    rows = max(row_count, 1)
    return (
        TABLE_METRICS["header_height"]
        + (rows - 1) * TABLE_METRICS["row_height"]
        + TABLE_METRICS["padding"]
    )


def block_height(kind: BlockKind, payload: str = "", row_count: int = 0) -> float:
    """
    Estimated rendered height of a block.

    Args:
        kind: Block kind
        payload: Text the block displays (wrapping estimate for text boxes)
        row_count: Number of rows, tables only

    Returns:
        Height in page-box units
    """
    if kind == BlockKind.TABLE:
        return table_height(row_count)

    fixed = FIXED_HEIGHTS.get(kind.value)
    if fixed is not None:
        return fixed

    variable = VARIABLE_HEIGHTS.get(kind.value)
    if variable is not None:
        if variable.get("wrap") == "floor":
            extra = len(payload) // variable["chars_per_line"]
        else:
            extra = wrapped_extra_lines(len(payload), variable["chars_per_line"])
        return variable["base"] + extra * LINE_HEIGHT

    # Shapes carry an explicit height; anything else gets one paragraph line
    return VARIABLE_HEIGHTS["paragraph"]["base"]


def margin_top(kind: BlockKind, last_kind: Optional[BlockKind]) -> float:
    """
    Top margin for `kind` following `last_kind` on the same page.

    Args:
        kind: Block being placed
        last_kind: Kind of the previous block on this page (None if first)
    """
    rules = MARGINS.get(kind.value)
    if rules is None:
        return 0
    if last_kind is None and "first" in rules:
        return rules["first"]
    if last_kind is not None:
        after = rules.get("after", {})
        if last_kind.value in after:
            return after[last_kind.value]
    return rules["default"]


def blank_spacing(last_kind: Optional[BlockKind]) -> float:
    """Cursor advance for one run of blank lines."""
    if last_kind is not None and last_kind.value in BLANK_SPACING["after"]:
        return BLANK_SPACING["after"][last_kind.value]
    return BLANK_SPACING["default"]


def measure(
    kind: BlockKind,
    payload: str = "",
    last_kind: Optional[BlockKind] = None,
    row_count: int = 0,
) -> BoxMetrics:
    """Height and top margin of a block in one call."""
    return BoxMetrics(
        height=block_height(kind, payload, row_count),
        margin_top=margin_top(kind, last_kind),
    )
