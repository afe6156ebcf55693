#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Line Classifier - Decide the block kind of one source line.

Rules are an explicit ordered list of (name, parser) pairs; the first parser
that returns a result wins. Every non-empty line classifies: lines that no
structured rule accepts become paragraphs.

Precedence:
    divider > title > chapter > subheading > step > summary > quote >
    checklist > highlight > callout > list item > image > table row >
    paragraph
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, Callable, Tuple

from .document_model import BlockKind, CalloutType
from .utils.constants import CALLOUT_KEYWORDS, DEFAULT_CALLOUT_TYPE
from .utils.patterns import (
    DIVIDER_MARKERS,
    TITLE_PREFIX,
    CHAPTER_PREFIX,
    SUBHEADING_PREFIX,
    CALLOUT_PREFIX,
    BULLET_PREFIX,
    STEP_PATTERN,
    SUMMARY_PATTERN,
    QUOTE_PATTERN,
    CHECKLIST_PATTERN,
    HIGHLIGHT_PATTERN,
    NUMBERED_PATTERN,
    IMAGE_PREFIXES,
    IMAGE_PATTERN,
    TABLE_PREFIX,
    parse_table_cells,
    is_separator_cells,
)


@dataclass
class ClassifiedLine:
    """Kind and raw payload of one trimmed source line."""
    kind: BlockKind
    payload: str
    extra: Dict[str, Any] = field(default_factory=dict)
    # Name of the rule that claimed the line
    rule: str = "paragraph"

    def __repr__(self):
        text = self.payload if len(self.payload) <= 30 else self.payload[:30] + "..."
        return f"<{self.kind.value}: {text}>"


Rule = Tuple[str, Callable[[str], Optional[ClassifiedLine]]]


def classify_callout_type(text: str, keywords: Optional[Dict[str, List[str]]] = None) -> CalloutType:
    """
    Pick the callout subtype by keyword substring.

    Subtypes are checked in table order (important, example, data, note);
    the first one with any keyword contained in the lower-cased text wins.
    """
    table = keywords if keywords is not None else CALLOUT_KEYWORDS
    lowered = text.lower()
    for callout_type, words in table.items():
        if any(word.lower() in lowered for word in words):
            return CalloutType(callout_type)
    return CalloutType(DEFAULT_CALLOUT_TYPE)


class LineClassifier:
    """
    Classify trimmed, non-empty source lines.

    Usage:
        classifier = LineClassifier()
        line = classifier.classify("> Important: back up first")
        line.kind                    # BlockKind.CALLOUT
        line.extra["callout_type"]   # CalloutType.IMPORTANT
    """

    def __init__(self, callout_keywords: Optional[Dict[str, List[str]]] = None):
        """
        Args:
            callout_keywords: Ordered subtype -> keywords table overriding the
                built-in one (subtype names must be CalloutType values)
        """
        self.callout_keywords = callout_keywords if callout_keywords is not None else CALLOUT_KEYWORDS
        self.rules: List[Rule] = [
            ("divider", self._divider),
            ("title", self._prefixed(TITLE_PREFIX, BlockKind.TITLE)),
            ("chapter", self._prefixed(CHAPTER_PREFIX, BlockKind.CHAPTER)),
            ("subheading", self._prefixed(SUBHEADING_PREFIX, BlockKind.SUBHEADING)),
            ("step", self._step),
            ("summary", self._tagged(SUMMARY_PATTERN, BlockKind.SUMMARY)),
            ("quote", self._tagged(QUOTE_PATTERN, BlockKind.BIG_QUOTE)),
            ("checklist", self._tagged(CHECKLIST_PATTERN, BlockKind.CHECKLIST)),
            ("highlight", self._tagged(HIGHLIGHT_PATTERN, BlockKind.HIGHLIGHT)),
            ("callout", self._callout),
            ("list", self._list_item),
            ("image", self._image),
            ("table", self._table_row),
        ]

    def classify(self, line: str) -> ClassifiedLine:
        """
        Classify one line.

        Args:
            line: Source line; surrounding whitespace is ignored

        Returns:
            ClassifiedLine (paragraph when no rule matches)
        """
        stripped = line.strip()
        for name, rule in self.rules:
            result = rule(stripped)
            if result is not None:
                result.rule = name
                return result
        return ClassifiedLine(BlockKind.PARAGRAPH, stripped)

    # =========================================================================
    # RULES
    # =========================================================================

    @staticmethod
    def _divider(line: str) -> Optional[ClassifiedLine]:
        if line in DIVIDER_MARKERS:
            return ClassifiedLine(BlockKind.DIVIDER, "", {"marker": line})
        return None

    @staticmethod
    def _prefixed(prefix: str, kind: BlockKind) -> Callable[[str], Optional[ClassifiedLine]]:
        def rule(line: str) -> Optional[ClassifiedLine]:
            if line.startswith(prefix):
                return ClassifiedLine(kind, line[len(prefix):].strip())
            return None
        return rule

    @staticmethod
    def _tagged(pattern, kind: BlockKind) -> Callable[[str], Optional[ClassifiedLine]]:
        def rule(line: str) -> Optional[ClassifiedLine]:
            match = pattern.match(line)
            if match:
                return ClassifiedLine(kind, line[match.end():].strip())
            return None
        return rule

    @staticmethod
    def _step(line: str) -> Optional[ClassifiedLine]:
        match = STEP_PATTERN.match(line)
        if not match:
            return None
        return ClassifiedLine(
            BlockKind.STEP,
            match.group(2).strip(),
            {"step_number": int(match.group(1))},
        )

    def _callout(self, line: str) -> Optional[ClassifiedLine]:
        if not line.startswith(CALLOUT_PREFIX):
            return None
        text = line[len(CALLOUT_PREFIX):].strip()
        callout_type = classify_callout_type(text, self.callout_keywords)
        return ClassifiedLine(BlockKind.CALLOUT, text, {"callout_type": callout_type})

    @staticmethod
    def _list_item(line: str) -> Optional[ClassifiedLine]:
        if line.startswith(BULLET_PREFIX):
            return ClassifiedLine(BlockKind.LIST_ITEM, line, {"list_type": "bullet"})
        if NUMBERED_PATTERN.match(line):
            return ClassifiedLine(BlockKind.LIST_ITEM, line, {"list_type": "numbered"})
        return None

    @staticmethod
    def _image(line: str) -> Optional[ClassifiedLine]:
        if not line.upper().startswith(IMAGE_PREFIXES):
            return None
        match = IMAGE_PATTERN.match(line)
        description = match.group(1) if match else ""
        return ClassifiedLine(BlockKind.IMAGE, description)

    @staticmethod
    def _table_row(line: str) -> Optional[ClassifiedLine]:
        if not line.startswith(TABLE_PREFIX):
            return None
        cells = parse_table_cells(line)
        return ClassifiedLine(
            BlockKind.TABLE_ROW,
            line,
            {"cells": cells, "separator": is_separator_cells(cells)},
        )
