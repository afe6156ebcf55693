"""
Unit tests for pageflow/table_buffer.py - row buffering and HTML rendering
"""
import pytest

from pageflow.classifier import LineClassifier
from pageflow.table_buffer import TableBuffer, render_table_html


@pytest.fixture
def classifier():
    return LineClassifier()


@pytest.fixture
def buffer(theme):
    return TableBuffer(theme.table_style)


class TestTableBuffer:
    """Test accumulating and flushing rows."""

    def test_empty_buffer_is_falsy(self, buffer):
        assert not buffer
        assert len(buffer) == 0

    def test_separator_rows_dropped(self, buffer, classifier):
        assert buffer.add(classifier.classify("| Name | Role |")) is True
        assert buffer.add(classifier.classify("|------|:----:|")) is False
        assert buffer.add(classifier.classify("| Ada | Engineer |")) is True
        assert len(buffer) == 2

    def test_flush_returns_rows_and_clears(self, buffer, classifier):
        for line in ["| a | b |", "|---|---|", "| 1 | 2 |", "| 3 | 4 |"]:
            buffer.add(classifier.classify(line))

        draft = buffer.flush()

        assert draft.rows == [["a", "b"], ["1", "2"], ["3", "4"]]
        assert draft.row_count == 3
        assert "<table" in draft.html
        assert not buffer


class TestRenderTableHtml:
    """Test table markup."""

    def test_header_uses_theme_main_color(self, theme):
        html = render_table_html([["H1", "H2"], ["a", "b"]], theme.table_style)
        assert html.count("<th ") == 2
        assert html.count("<td ") == 2
        assert f'<tr style="background:{theme.main_color};">' in html
        assert f"color:{theme.table_style['header_color']}" in html

    def test_rows_alternate_stripe(self, theme):
        html = render_table_html([["H"], ["r1"], ["r2"], ["r3"]], theme.table_style)
        assert html.count('<tr style="background:#f8fafc;">') == 2
        assert html.count('<tr style="background:#ffffff;">') == 1

    def test_cells_are_escaped(self, theme):
        html = render_table_html([["<b>bold</b> & co"]], theme.table_style)
        assert "&lt;b&gt;bold&lt;/b&gt; &amp; co" in html
        assert "<b>" not in html

    def test_last_row_has_no_bottom_border(self, theme):
        html = render_table_html([["only"]], theme.table_style)
        assert "border-bottom" not in html
