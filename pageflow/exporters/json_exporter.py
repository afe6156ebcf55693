#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
JSON Exporter - Serialize page lists for the rendering layer.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..document_model import Page
from ..exceptions import ExportError


class JsonPageExporter:
    """
    Export pages as JSON.

    Usage:
        exporter = JsonPageExporter(include_sentinel=False)
        data = exporter.to_dict(pages, page_box=(500, 707.1))
        path = exporter.export(pages, "pages.json")
    """

    def __init__(self, include_sentinel: bool = True, indent: Optional[int] = 2):
        """
        Args:
            include_sentinel: Keep the hidden first page in the output
            indent: JSON indentation (None for compact output)
        """
        self.include_sentinel = include_sentinel
        self.indent = indent

    def to_dict(
        self,
        pages: List[Page],
        page_box: Optional[Tuple[float, float]] = None,
        theme: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        selected = [p for p in pages if self.include_sentinel or not p.sentinel]
        data: Dict[str, Any] = {
            "page_count": len([p for p in selected if not p.sentinel]),
            "pages": [page.to_dict() for page in selected],
        }
        if page_box:
            data["page_box"] = {"width": page_box[0], "height": page_box[1]}
        if theme:
            data["theme"] = theme
        return data

    def to_json(self, pages: List[Page], **kwargs) -> str:
        return json.dumps(self.to_dict(pages, **kwargs), ensure_ascii=False, indent=self.indent)

    def export(self, pages: List[Page], output_path: str, **kwargs) -> str:
        """
        Write pages to a JSON file.

        Returns:
            Absolute path to saved file

        Raises:
            ExportError: If the file cannot be written
        """
        path = Path(output_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.to_json(pages, **kwargs), encoding="utf-8")
        except OSError as e:
            raise ExportError(str(path), str(e)) from e
        return str(path.absolute())


def load_pages(data: Dict[str, Any]) -> List[Page]:
    """Rebuild pages from JsonPageExporter.to_dict() output."""
    return [Page.from_dict(page) for page in data.get("pages", [])]
