"""
Pytest configuration and shared fixtures for PageFlow tests.
"""
import os
import sys
import pytest
from pathlib import Path

# Keep test runs from writing rotating log files
os.environ.setdefault("PAGEFLOW_LOG_FILE", "")

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from pageflow.theme import Theme
from pageflow.page_layout import PageGeometry, geometry_for_preset
from pageflow.flow_engine import FlowAccumulator


# ============================================================================
# Fixtures: Theme & Geometry
# ============================================================================

@pytest.fixture
def theme():
    """Default navy theme with derived accent."""
    return Theme(main_color="#1e3a5f")


@pytest.fixture
def a4_geometry():
    """A4 preview page (500 wide)."""
    return geometry_for_preset("A4")


@pytest.fixture
def short_geometry():
    """
    500 x 250 page box: content from y=15 to y=212.5.

    Fits a title, a chapter and a one-line paragraph (separated by blank
    lines) but not a callout after them.
    """
    return PageGeometry.from_page_box(500, 250)


@pytest.fixture
def flow(theme, a4_geometry):
    return FlowAccumulator(theme=theme, geometry=a4_geometry)


@pytest.fixture
def short_flow(theme, short_geometry):
    return FlowAccumulator(theme=theme, geometry=short_geometry)


# ============================================================================
# Fixtures: Sample Documents
# ============================================================================

@pytest.fixture
def sample_document():
    """A book chapter exercising every block kind."""
    return "\n".join([
        "# The Practical Guide",
        "",
        "## Chapter 1: Getting Started",
        "",
        "This chapter walks through the basics of setting up your workspace "
        "and explains the core ideas you will use throughout the book.",
        "",
        "### Why it matters",
        "",
        "> Tip: start small and iterate often.",
        "",
        "> Important: always keep a backup of your notes.",
        "",
        "[STEP 1] Install the tools you need for the project.",
        "[STEP 2] Create a fresh workspace and open it.",
        "",
        "- First point",
        "- Second point",
        "1. Numbered point",
        "",
        "| Tool | Purpose |",
        "|------|---------|",
        "| Editor | Writing |",
        "| Terminal | Running |",
        "",
        "[IMAGE: workspace overview diagram]",
        "",
        "---",
        "",
        "[SUMMARY] Set up once, then focus on the work itself.",
        "[QUOTE] The best time to start was yesterday.",
        "[x] Tools installed",
        "[✓] Workspace created",
        "[HIGHLIGHT] Consistency beats intensity.",
        "",
        "## Chapter 2: Going Further",
        "",
        "Another paragraph of plain text that continues the discussion.",
        "",
    ])


@pytest.fixture
def long_document():
    """Enough varied content to fill several A4 pages."""
    sections = []
    for i in range(1, 9):
        sections.extend([
            f"## Chapter {i}",
            "",
            f"### Section {i}.1",
            "",
            "Paragraph text that is long enough to wrap over a few estimated lines "
            "so that the sizer adds extra height for it. " * 2,
            "",
            f"> Note: remember point {i}.",
            "",
            f"[STEP {i}] Do the thing described in chapter {i}.",
            "",
            "| Key | Value |",
            "|-----|-------|",
            f"| a{i} | b{i} |",
            "",
            "[HIGHLIGHT] Keep going.",
            "",
        ])
    return "\n".join(sections)
