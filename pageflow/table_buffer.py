#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Table Buffer - Merge consecutive table-row lines into one table block.

Rows accumulate until the first non-table line (or end of input); the flow
then flushes the buffer into a single atomic table block.
"""

import html
from dataclasses import dataclass
from typing import List, Dict

from .classifier import ClassifiedLine


@dataclass
class TableDraft:
    """A flushed table: rows plus its rendered HTML."""
    rows: List[List[str]]
    html: str

    @property
    def row_count(self) -> int:
        return len(self.rows)


def render_table_html(rows: List[List[str]], style: Dict[str, str]) -> str:
    """
    Render rows as a bordered HTML table.

    The first row is the header; data rows alternate between the stripe and
    plain backgrounds. Cell text is HTML-escaped.

    Args:
        rows: Row-cell arrays, header first
        style: Table palette (Theme.table_style)
    """
    border = style["border"]
    parts = [
        f'<table style="width:100%;border-collapse:collapse;border:1px solid {border};'
        f'border-radius:6px;overflow:hidden;">'
    ]
    last_row = len(rows) - 1

    for row_idx, row in enumerate(rows):
        is_header = row_idx == 0
        if is_header:
            bg_color = style["header_bg"]
            text_color = style["header_color"]
            font_weight = "600"
            tag = "th"
        else:
            bg_color = style["stripe_bg"] if row_idx % 2 == 1 else style["row_bg"]
            text_color = style["text_color"]
            font_weight = "normal"
            tag = "td"

        parts.append(f'<tr style="background:{bg_color};">')
        for cell_idx, cell in enumerate(row):
            border_right = f"border-right:1px solid {border};" if cell_idx < len(row) - 1 else ""
            border_bottom = f"border-bottom:1px solid {style['row_border']};" if row_idx < last_row else ""
            parts.append(
                f'<{tag} style="padding:{style["cell_padding"]};text-align:left;color:{text_color};'
                f'font-weight:{font_weight};{border_right}{border_bottom}">{html.escape(cell)}</{tag}>'
            )
        parts.append("</tr>")

    parts.append("</table>")
    return "".join(parts)


class TableBuffer:
    """
    Accumulate table rows for one table.

    Usage:
        buffer = TableBuffer(theme.table_style)
        buffer.add(classified_row)
        if buffer:
            draft = buffer.flush()
    """

    def __init__(self, style: Dict[str, str]):
        self.style = style
        self.rows: List[List[str]] = []

    def add(self, line: ClassifiedLine) -> bool:
        """
        Buffer one table-row line.

        Returns:
            False if the row was a separator (|---|:--:|) and was dropped
        """
        if line.extra.get("separator"):
            return False
        self.rows.append(list(line.extra.get("cells", [])))
        return True

    def flush(self) -> TableDraft:
        """Emit the buffered rows as one table and clear the buffer."""
        draft = TableDraft(rows=self.rows, html=render_table_html(self.rows, self.style))
        self.rows = []
        return draft

    def __len__(self) -> int:
        return len(self.rows)

    def __bool__(self) -> bool:
        return bool(self.rows)
