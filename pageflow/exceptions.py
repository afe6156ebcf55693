#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PageFlow exceptions.

The layout transform itself never raises for any input text; these errors
are raised at configuration and export boundaries only.
"""


class PageFlowError(Exception):
    """Base error for PageFlow"""
    pass


class LayoutConfigError(PageFlowError):
    """Raised for an invalid page box, page-size preset or export range"""
    pass


class ExportError(PageFlowError):
    """Raised when exported pages cannot be written"""
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Export to {path} failed: {reason}")
