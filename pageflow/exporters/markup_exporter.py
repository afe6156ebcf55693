#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Markup Exporter - Turn laid-out blocks back into line markup.

Used to hand one page's content back to a text editing step. Blocks are
separated by blank lines; icons and labels added during layout are removed,
so re-running the flow on the output reproduces the same block kinds.

Supports:
- Headings (#, ##, ###)
- Callouts (>), list items, paragraphs
- Bracket tokens ([STEP n], [SUMMARY], [QUOTE], [x], [HIGHLIGHT], [IMAGE: ...])
- Tables (| a | b | with separator row) and dividers (---)
"""

import re
from pathlib import Path
from typing import List, Optional

from ..document_model import Block, BlockKind, Page
from ..exceptions import ExportError

TAG_PATTERN = re.compile(r'<[^>]*>')

# Kinds whose content starts with "<icon> "
ICON_PREFIXED = {BlockKind.CALLOUT, BlockKind.CHECKLIST, BlockKind.HIGHLIGHT}


def _strip_icon(content: str) -> str:
    head, sep, rest = content.partition(" ")
    if sep and head and not head.isalnum():
        return rest
    return content


def _after_bar(content: str) -> str:
    return content.split("|", 1)[1] if "|" in content else content


class MarkupExporter:
    """
    Export blocks/pages to line markup.

    Usage:
        exporter = MarkupExporter()
        text = exporter.blocks_to_markup(page.blocks)
        path = exporter.export(pages, "book.md")
    """

    def __init__(self, page_separator: Optional[str] = "---"):
        """
        Args:
            page_separator: Line written between pages in export(); None writes
                pages back to back
        """
        self.page_separator = page_separator

    def blocks_to_markup(self, blocks: List[Block]) -> str:
        """Serialize blocks in order, one blank line between blocks."""
        parts = [self._block_to_markup(block) for block in blocks]
        return "\n\n".join(part for part in parts if part)

    def pages_to_markup(self, pages: List[Page]) -> str:
        """Serialize visible pages, optionally separated by a divider line."""
        chunks = [self.blocks_to_markup(page.blocks) for page in pages if not page.sentinel]
        joiner = f"\n\n{self.page_separator}\n\n" if self.page_separator else "\n\n"
        return joiner.join(chunk for chunk in chunks if chunk)

    def export(self, pages: List[Page], output_path: str) -> str:
        """
        Write the markup of all visible pages to a file.

        Returns:
            Absolute path to saved file

        Raises:
            ExportError: If the file cannot be written
        """
        path = Path(output_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.pages_to_markup(pages) + "\n", encoding="utf-8")
        except OSError as e:
            raise ExportError(str(path), str(e)) from e
        return str(path.absolute())

    def _block_to_markup(self, block: Block) -> str:
        kind = block.kind
        content = block.content

        if kind == BlockKind.TITLE:
            return f"# {content}"
        if kind == BlockKind.CHAPTER:
            return f"## {content}"
        if kind == BlockKind.SUBHEADING:
            return f"### {content}"
        if kind == BlockKind.CALLOUT:
            return f"> {_strip_icon(content)}"
        if kind == BlockKind.STEP:
            number = block.extra.get("step_number")
            if number is None:
                number = content.split("|", 1)[0].replace("STEP", "").strip()
            return f"[STEP {number}] {_after_bar(content)}"
        if kind == BlockKind.SUMMARY:
            return f"[SUMMARY] {_after_bar(content)}"
        if kind == BlockKind.BIG_QUOTE:
            return f"[QUOTE] {content}"
        if kind == BlockKind.CHECKLIST:
            return f"[x] {_strip_icon(content)}"
        if kind == BlockKind.HIGHLIGHT:
            return f"[HIGHLIGHT] {_strip_icon(content)}"
        if kind == BlockKind.IMAGE:
            description = block.extra.get("description")
            if description is None:
                description = content.split("\n", 1)[1] if "\n" in content else ""
            return f"[IMAGE: {description}]"
        if kind == BlockKind.TABLE:
            return self._table_to_markup(block)
        if kind == BlockKind.DIVIDER:
            return "---"
        if kind == BlockKind.SHAPE:
            return ""
        if kind == BlockKind.LIST_ITEM:
            return content
        return TAG_PATTERN.sub("", content)

    @staticmethod
    def _table_to_markup(block: Block) -> str:
        rows = block.extra.get("rows")
        if not rows:
            return TAG_PATTERN.sub("", block.content)
        lines = ["| " + " | ".join(rows[0]) + " |",
                 "|" + "|".join("---" for _ in rows[0]) + "|"]
        lines.extend("| " + " | ".join(row) + " |" for row in rows[1:])
        return "\n".join(lines)
