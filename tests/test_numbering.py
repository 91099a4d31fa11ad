"""
Tests for ordered/bullet list prefix computation.
"""

from delta2pdf.attributes import ListPrefix, Style
from delta2pdf.config import ConversionConfig
from delta2pdf.delta_model import ListKind
from delta2pdf.elements import ElementBuffer, ImageRef, TextRun
from delta2pdf.numbering import ListNumbering


def _buffer(*texts):
    buffer = ElementBuffer()
    for text in texts:
        buffer.push(TextRun.from_style(text, Style()) if text is not None else ImageRef("x.png"))
    return buffer


class TestBullets:

    def test_bullet_is_stateless(self):
        numbering = ListNumbering()
        assert numbering.prefix_for(ListKind.BULLET, _buffer("a")) == ListPrefix("• ")
        assert numbering.prefix_for(ListKind.BULLET, _buffer("b")) == ListPrefix("• ")
        assert numbering.next_ordinal == 1

    def test_custom_bullet(self):
        config = ConversionConfig()
        config.BULLET_PREFIX = "- "
        assert ListNumbering(config).prefix_for(ListKind.BULLET, _buffer("a")).text == "- "


class TestOrdered:

    def test_first_item_is_one(self):
        numbering = ListNumbering()
        assert numbering.prefix_for(ListKind.ORDERED, _buffer("A")).text == "1. "
        assert numbering.next_ordinal == 2

    def test_continues_after_previous_ordinal(self):
        numbering = ListNumbering()
        numbering.next_ordinal = 3
        assert numbering.prefix_for(ListKind.ORDERED, _buffer("2. B", "C")).text == "3. "
        assert numbering.next_ordinal == 4

    def test_resets_when_previous_line_lacks_marker(self):
        numbering = ListNumbering()
        numbering.next_ordinal = 3
        assert numbering.prefix_for(ListKind.ORDERED, _buffer("plain paragraph", "C")).text == "1. "
        assert numbering.next_ordinal == 2

    def test_resets_when_previous_is_image(self):
        numbering = ListNumbering()
        numbering.next_ordinal = 2
        assert numbering.prefix_for(ListKind.ORDERED, _buffer(None, "B")).text == "1. "

    def test_resets_when_nothing_precedes(self):
        numbering = ListNumbering()
        numbering.next_ordinal = 5
        assert numbering.prefix_for(ListKind.ORDERED, _buffer("only")).text == "1. "

    def test_bullet_between_ordered_items_breaks_run(self):
        numbering = ListNumbering()
        numbering.next_ordinal = 2
        assert numbering.prefix_for(ListKind.ORDERED, _buffer("• B", "C")).text == "1. "
