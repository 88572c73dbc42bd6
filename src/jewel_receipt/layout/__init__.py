"""
Layout module
"""

from jewel_receipt.layout.layout_policy import (
    ColumnScheme,
    ItemLayout,
    LayoutPolicy,
    PaperWidth,
    WidthClass,
)
from jewel_receipt.layout.text import (
    Align,
    center,
    label_value,
    pad_left,
    pad_right,
    printable,
    rule,
    table_cell,
    table_row,
)

__all__ = [
    "ColumnScheme",
    "ItemLayout",
    "LayoutPolicy",
    "PaperWidth",
    "WidthClass",
    "Align",
    "center",
    "label_value",
    "pad_left",
    "pad_right",
    "printable",
    "rule",
    "table_cell",
    "table_row",
]
