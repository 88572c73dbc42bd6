"""
Layout Policy and Padding Unit Tests
"""

import pytest

from jewel_receipt.exceptions import RenderError, UnsupportedPaperWidthError
from jewel_receipt.layout import (
    Align,
    ItemLayout,
    LayoutPolicy,
    PaperWidth,
    label_value,
    pad_left,
    pad_right,
    printable,
    table_cell,
    table_row,
)


class TestPadding:
    """Tests for fixed-width padding"""

    @pytest.mark.parametrize("text", ["", "A", "GOLD RING", "A VERY LONG ITEM NAME INDEED"])
    @pytest.mark.parametrize("width", [1, 5, 12, 20])
    def test_exact_width(self, text: str, width: int):
        """Should always produce exactly the requested width"""
        assert len(pad_right(text, width)) == width
        assert len(pad_left(text, width)) == width

    def test_pad_right(self):
        assert pad_right("AB", 5) == "AB   "
        assert pad_right("ABCDEFG", 5) == "ABCDE"

    def test_pad_left(self):
        assert pad_left("AB", 5) == "   AB"
        assert pad_left("ABCDEFG", 5) == "ABCDE"

    def test_left_cell_keeps_gap(self):
        """Should truncate left cells one short so columns never touch"""
        assert table_cell("NECKLACE SET", 8, Align.LEFT) == "NECKLAC "

    def test_table_row_width(self):
        columns = [(8, Align.LEFT), (3, Align.RIGHT), (7, Align.RIGHT)]
        row = table_row(["BANGLE PAIR", "2", "21.500"], columns)
        assert row == "BANGLE    2 21.500"
        assert len(row) == 18

    def test_full_right_cell_keeps_gap(self):
        """Should never let a right-aligned figure touch the column before it"""
        columns = [(8, Align.LEFT), (7, Align.RIGHT), (6, Align.RIGHT)]
        row = table_row(["RING", "10.000", "0.200g"], columns)

        assert row == "RING     10.000 0.200"
        assert len(row) == 21

    def test_printable(self):
        """Should drop control characters but keep ordinary text"""
        assert printable("Gold\x1bd\x05Mart\x7f") == "GolddMart"
        assert printable("R\tX\n") == "RX"
        assert printable("Rs.1,000 (CR)") == "Rs.1,000 (CR)"

    def test_label_value(self):
        line = label_value("TOTAL", "Rs.31,100", 32, 14)
        assert len(line) == 32
        assert line.startswith("TOTAL")
        assert line.endswith("Rs.31,100")

    def test_label_value_long_value(self):
        """Should widen the value field rather than cut the figure"""
        line = label_value("NET", "Rs.1,23,45,67,890 (CR)", 32, 14)
        assert len(line) == 32
        assert line.endswith("Rs.1,23,45,67,890 (CR)")


class TestLayoutPolicy:
    """Tests for LayoutPolicy"""

    @pytest.fixture
    def policy(self) -> LayoutPolicy:
        return LayoutPolicy()

    @pytest.mark.parametrize("paper,chars,layout,max_width", [
        ("58mm", 32, ItemLayout.MULTI_LINE, 220),
        ("80mm", 48, ItemLayout.TABULAR, 380),
        ("112mm", 64, ItemLayout.TABULAR, 450),
    ])
    def test_width_classes(self, policy, paper, chars, layout, max_width):
        width_class = policy.width_class(paper)
        assert width_class.char_width == chars
        assert width_class.item_layout == layout
        assert width_class.html_max_width == max_width

    def test_columns_fill_line(self, policy: LayoutPolicy):
        for width_class in policy.all_width_classes():
            assert width_class.columns.total == width_class.char_width

    def test_columns_monotonic(self, policy: LayoutPolicy):
        """Each column should never shrink on wider paper"""
        classes = policy.all_width_classes()
        for narrow, wide in zip(classes, classes[1:]):
            for a, b in zip(narrow.columns.widths, wide.columns.widths):
                assert a <= b

    def test_accepts_variants(self, policy: LayoutPolicy):
        assert policy.parse("80") == PaperWidth.MEDIUM
        assert policy.parse(" 112MM ") == PaperWidth.WIDE
        assert policy.parse(PaperWidth.NARROW) == PaperWidth.NARROW

    def test_unsupported_width(self, policy: LayoutPolicy):
        with pytest.raises(UnsupportedPaperWidthError) as exc_info:
            policy.width_class("76mm")

        assert exc_info.value.requested == "76mm"
        assert exc_info.value.code == "LAYOUT01"
        assert isinstance(exc_info.value, RenderError)
