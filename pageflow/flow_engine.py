#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Flow Engine - Lay out line markup as fixed-size pages of positioned blocks.

Pipeline per call (one linear pass, no I/O):
1. Split the text into lines; blank lines collapse into one spacing unit
2. Classify each line (LineClassifier)
3. Buffer table rows; flush them as one table block on the first non-blank,
   non-table line (blank lines inside a table do not end it)
4. Size each block (box_sizer) and break the page when it would overflow
5. Assemble pages; the first page is an empty sentinel

The transform is pure over (text, theme, page box): running it again on the
same input, or on a longer text with the same prefix, reproduces the same
geometry for the shared blocks.
"""

from dataclasses import replace
from typing import Optional, List, Tuple

from config.logging_config import get_logger

from .block_builder import BlockBuilder
from .box_sizer import BoxMetrics, blank_spacing, measure
from .classifier import ClassifiedLine, LineClassifier
from .document_model import Block, BlockKind, IdArena, LayoutState, Page
from .exceptions import LayoutConfigError
from .page_layout import PageGeometry, geometry_for_preset
from .table_buffer import TableBuffer
from .theme import Theme
from config.constants import DEFAULT_PAGE_SIZE

logger = get_logger(__name__)


# =============================================================================
# PAGE ASSEMBLER
# =============================================================================

class PageAssembler:
    """
    Collect finished blocks into pages.

    The first page is always an empty sentinel; content pages follow in
    order and each holds at least one block.
    """

    def __init__(self, ids: IdArena):
        self.ids = ids
        self.pages: List[Page] = [Page(id=ids.next_page_id(), sentinel=True)]
        self.current: List[Block] = []

    def add(self, block: Block) -> None:
        self.current.append(block)

    def close_page(self) -> None:
        """Push the in-progress page (if it holds anything) and start a new one."""
        if self.current:
            self.pages.append(Page(id=self.ids.next_page_id(), blocks=self.current))
            self.current = []

    def finish(self) -> List[Page]:
        self.close_page()
        return self.pages


# =============================================================================
# FLOW ACCUMULATOR
# =============================================================================

class FlowAccumulator:
    """
    Single-pass layout of line markup into pages.

    Usage:
        flow = FlowAccumulator(theme=Theme("#1e3a5f"), geometry=geometry_for_preset("A4"))
        pages = flow.run(text)
        visible = pages[1:]

    An instance holds configuration only; every run() starts from a fresh
    cursor, table buffer and identifier arena.
    """

    def __init__(
        self,
        theme: Optional[Theme] = None,
        geometry: Optional[PageGeometry] = None,
        classifier: Optional[LineClassifier] = None,
    ):
        self.theme = theme or Theme()
        self.geometry = geometry or geometry_for_preset(DEFAULT_PAGE_SIZE)
        self.classifier = classifier or LineClassifier()
        self.builder = BlockBuilder(self.theme, self.geometry)

    def run(self, text: str) -> List[Page]:
        """
        Lay out the full text.

        Args:
            text: Line markup (the whole document accumulated so far)

        Returns:
            Pages in order; pages[0] is the hidden sentinel
        """
        ids = IdArena()
        assembler = PageAssembler(ids)
        table = TableBuffer(self.theme.table_style)
        state = LayoutState(cursor_y=self.geometry.content_top)
        line_count = 0

        for raw_line in (text or "").split("\n"):
            line_count += 1
            stripped = raw_line.strip()

            if not stripped:
                if state.last_was_blank:
                    continue
                if table:
                    # Rows after a blank line join the open table; the spacing
                    # is applied once the table has been placed
                    state = replace(state, last_was_blank=True, pending_blank=True)
                else:
                    state = replace(
                        state,
                        cursor_y=state.cursor_y + blank_spacing(state.last_kind),
                        last_was_blank=True,
                    )
                continue

            state = replace(state, last_was_blank=False)
            classified = self.classifier.classify(stripped)

            if classified.kind == BlockKind.TABLE_ROW:
                table.add(classified)
                continue

            if table:
                state = self._flush_table(table, state, assembler, ids)
                if state.pending_blank:
                    state = replace(
                        state,
                        cursor_y=state.cursor_y + blank_spacing(state.last_kind),
                        pending_blank=False,
                    )

            state = self._place_line(classified, state, assembler, ids)

        if table:
            state = self._flush_table(table, state, assembler, ids)

        pages = assembler.finish()
        logger.debug(
            f"Laid out {line_count} lines into {sum(len(p) for p in pages)} blocks "
            f"on {len(pages) - 1} pages"
        )
        return pages

    # =========================================================================
    # PLACEMENT
    # =========================================================================

    def _fit(
        self,
        metrics: BoxMetrics,
        state: LayoutState,
        assembler: PageAssembler,
    ) -> Tuple[float, LayoutState]:
        """
        Decide where a block of the given metrics goes.

        Breaks the page when the block would cross the content bottom and the
        current page already holds a block; the block then starts the new
        page with no top margin. A block alone on its page may overflow.

        Returns:
            (block y, state with the cursor advanced past the block)
        """
        bottom = state.cursor_y + metrics.total
        if bottom > self.geometry.content_bottom and state.blocks_on_page > 0:
            assembler.close_page()
            logger.debug(
                f"Page break: block of height {metrics.height} at y={state.cursor_y:.1f} "
                f"exceeds {self.geometry.content_bottom:.1f}"
            )
            y = self.geometry.content_top
            state = replace(
                state,
                cursor_y=y + metrics.height,
                last_kind=None,
                blocks_on_page=1,
            )
            return y, state

        y = state.cursor_y + metrics.margin_top
        state = replace(
            state,
            cursor_y=state.cursor_y + metrics.total,
            blocks_on_page=state.blocks_on_page + 1,
        )
        return y, state

    def _place_line(
        self,
        classified: ClassifiedLine,
        state: LayoutState,
        assembler: PageAssembler,
        ids: IdArena,
    ) -> LayoutState:
        metrics = measure(classified.kind, classified.payload, state.last_kind)
        y, state = self._fit(metrics, state, assembler)
        block, state = self.builder.build(
            classified, state, y=y, block_id=ids.next_block_id(), layout_height=metrics.height
        )
        assembler.add(block)
        logger.debug(f"Placed {block.id} ({classified.rule} rule) at y={y:.1f}")
        return replace(state, last_kind=block.kind)

    def _flush_table(
        self,
        table: TableBuffer,
        state: LayoutState,
        assembler: PageAssembler,
        ids: IdArena,
    ) -> LayoutState:
        draft = table.flush()
        metrics = measure(BlockKind.TABLE, last_kind=state.last_kind, row_count=draft.row_count)
        y, state = self._fit(metrics, state, assembler)
        block = self.builder.build_table(draft, y=y, block_id=ids.next_block_id(),
                                         layout_height=metrics.height)
        assembler.add(block)
        logger.debug(f"Flushed table with {draft.row_count} rows at y={y:.1f}")
        return replace(state, last_kind=BlockKind.TABLE)


# =============================================================================
# CONVENIENCE API
# =============================================================================

def layout_document(
    text: str,
    theme: Optional[Theme] = None,
    page_box: Optional[Tuple[float, float]] = None,
    classifier: Optional[LineClassifier] = None,
) -> List[Page]:
    """
    Lay out `text` into pages.

    Args:
        text: Line markup
        theme: Theme (default navy theme with derived accent)
        page_box: (width, height) of a page; default is the A4 preview box
        classifier: Custom classifier (e.g. other callout keywords)

    Returns:
        Pages in order; pages[0] is the hidden sentinel

    Raises:
        LayoutConfigError: If page_box is not positive
    """
    geometry = PageGeometry.from_page_box(*page_box) if page_box else None
    return FlowAccumulator(theme=theme, geometry=geometry, classifier=classifier).run(text)


def visible_pages(pages: List[Page]) -> List[Page]:
    """Pages shown to the reader (everything except sentinels)."""
    return [page for page in pages if not page.sentinel]


def select_export_range(pages: List[Page], start: int, end: int) -> List[Page]:
    """
    Visible pages `start`..`end` (1-based, inclusive) for export.

    Raises:
        LayoutConfigError: If the range is empty or out of bounds
    """
    shown = visible_pages(pages)
    if start < 1 or end < start or end > len(shown):
        raise LayoutConfigError(
            f"Export range {start}-{end} is invalid for {len(shown)} visible pages"
        )
    return shown[start - 1:end]
