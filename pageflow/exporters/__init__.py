#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Page Exporters - Export laid-out pages to JSON or back to line markup.
"""

from .json_exporter import JsonPageExporter, load_pages
from .markup_exporter import MarkupExporter

__all__ = [
    "JsonPageExporter",
    "load_pages",
    "MarkupExporter",
]
