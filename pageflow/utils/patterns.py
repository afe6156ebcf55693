#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Line Markup Patterns - Regex patterns for the line-oriented source markup.

Supports:
- ATX headings (#, ##, ###)
- Bracket tokens ([STEP n], [SUMMARY], [QUOTE], [x], [HIGHLIGHT], [IMAGE: ...])
- Callouts (> prefix), list items (-, N.)
- Markdown table rows (| a | b |) and separator rows
- Horizontal rules (---, ***, ___)
"""

import re
from typing import List


# =============================================================================
# BLOCK MARKERS
# =============================================================================

DIVIDER_MARKERS = ("---", "***", "___")

TITLE_PREFIX = "# "
CHAPTER_PREFIX = "## "
SUBHEADING_PREFIX = "### "
CALLOUT_PREFIX = ">"
BULLET_PREFIX = "- "

STEP_PATTERN = re.compile(r'^\[STEP\s*(\d+)\]\s*(.*)$', re.IGNORECASE)
SUMMARY_PATTERN = re.compile(r'^\[SUMMARY\]\s*', re.IGNORECASE)
QUOTE_PATTERN = re.compile(r'^\[QUOTE\]\s*', re.IGNORECASE)
CHECKLIST_PATTERN = re.compile(r'^\[(?:x|✓)\]\s*', re.IGNORECASE)
HIGHLIGHT_PATTERN = re.compile(r'^\[HIGHLIGHT\]\s*', re.IGNORECASE)
NUMBERED_PATTERN = re.compile(r'^\d+\.')

# [IMAGE: description] and the localized [이미지: description]
IMAGE_PREFIXES = ("[IMAGE:", "[이미지:")
IMAGE_PATTERN = re.compile(r'^\[(?:IMAGE|이미지):\s*(.*?)\s*\]?\s*$', re.IGNORECASE | re.DOTALL)


# =============================================================================
# TABLE PATTERNS
# =============================================================================

TABLE_PREFIX = "|"

# Individual separator cell: ---, :---, :---:, ---:
TABLE_ALIGN_PATTERN = re.compile(r'^:?-+:?$')


def parse_table_cells(line: str) -> List[str]:
    """
    Split a table row into its non-empty cells.

    Args:
        line: Table row like "| cell1 | cell2 |"

    Returns:
        List of stripped cell contents (empty segments dropped)
    """
    return [cell.strip() for cell in line.split('|') if cell.strip()]


def is_separator_cells(cells: List[str]) -> bool:
    """Check if parsed cells form a |---|:--:| separator row (or nothing at all)."""
    return all(TABLE_ALIGN_PATTERN.match(cell) for cell in cells)
