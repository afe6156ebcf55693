#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Streaming Layout Session

Re-derive the page list while source text streams in from a generator
(e.g. a chat-completion stream). Every update lays out the full text
accumulated so far; the new page list supersedes the previous one.
"""

from typing import Callable, Iterable, List, Optional

from config.logging_config import get_logger
logger = get_logger(__name__)

from .document_model import Page
from .flow_engine import FlowAccumulator, visible_pages


class StreamingLayoutSession:
    """
    Accumulate streamed text and keep the latest layout.

    Features:
    - Full re-layout on every chunk (no incremental patching)
    - Optional listener called with each new page list
    - Result identical to a single run on the final text

    Usage:
        session = StreamingLayoutSession(FlowAccumulator(theme=theme, geometry=geometry))
        for chunk in stream:
            pages = session.feed(chunk)
        final_pages = session.pages
    """

    def __init__(
        self,
        flow: Optional[FlowAccumulator] = None,
        on_update: Optional[Callable[[List[Page]], None]] = None,
    ):
        """
        Initialize streaming session

        Args:
            flow: Configured flow accumulator (default theme and A4 preview)
            on_update: Called with the new page list after every update
        """
        self.flow = flow or FlowAccumulator()
        self.on_update = on_update
        self._chunks: List[str] = []
        self.pages: List[Page] = self.flow.run("")
        self.updates = 0

    @property
    def text(self) -> str:
        return "".join(self._chunks)

    def feed(self, chunk: str) -> List[Page]:
        """
        Append a chunk and re-run the layout over the whole text.

        Returns:
            The new page list (sentinel first)
        """
        if chunk:
            self._chunks.append(chunk)
        return self._relayout()

    def replace_text(self, text: str) -> List[Page]:
        """Swap the accumulated text (e.g. after an edit) and re-run the layout."""
        self._chunks = [text] if text else []
        return self._relayout()

    def consume(self, stream: Iterable[str]) -> List[Page]:
        """Feed every chunk of `stream`; returns the final page list."""
        for chunk in stream:
            self.feed(chunk)
        return self.pages

    def visible_page_count(self) -> int:
        return len(visible_pages(self.pages))

    def _relayout(self) -> List[Page]:
        self.pages = self.flow.run(self.text)
        self.updates += 1
        logger.debug(f"Streaming update {self.updates}: {len(self.text)} chars, "
                     f"{self.visible_page_count()} visible pages")
        if self.on_update:
            self.on_update(self.pages)
        return self.pages
