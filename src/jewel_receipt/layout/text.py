"""Fixed-width text helpers for monospaced receipt lines"""

from enum import Enum
from typing import Sequence, Tuple


class Align(str, Enum):
    """Horizontal alignment"""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def pad_right(text: str, width: int) -> str:
    """Left-align ``text`` in exactly ``width`` characters, truncating if needed"""
    if width <= 0:
        return ""
    if len(text) >= width:
        return text[:width]
    return text + " " * (width - len(text))


def pad_left(text: str, width: int) -> str:
    """Right-align ``text`` in exactly ``width`` characters, truncating if needed"""
    if width <= 0:
        return ""
    if len(text) >= width:
        return text[:width]
    return " " * (width - len(text)) + text


def center(text: str, width: int) -> str:
    if len(text) >= width:
        return text[:width]
    left = (width - len(text)) // 2
    return pad_right(" " * left + text, width)


def table_cell(text: str, width: int, align: Align, leading_gap: bool = False) -> str:
    """
    Fit one table cell

    Left-aligned cells give up their last character so the next
    column never runs into them; with ``leading_gap`` a right-aligned
    cell gives up its first character for the same reason.
    """
    if align == Align.LEFT:
        return pad_right(text[:max(0, width - 1)], width)
    if align == Align.CENTER:
        return center(text, width)
    if leading_gap and width > 0:
        return " " + pad_left(text, width - 1)
    return pad_left(text, width)


def table_row(cells: Sequence[str], columns: Sequence[Tuple[int, Align]]) -> str:
    """Join cells into one line whose length is the sum of column widths"""
    return "".join(
        table_cell(text, width, align, leading_gap=index > 0)
        for index, (text, (width, align)) in enumerate(zip(cells, columns))
    )


def printable(text: str) -> str:
    """Drop C0 control characters and DEL from caller-supplied text"""
    return "".join(ch for ch in text if ch >= " " and ch != "\x7f")


def label_value(label: str, value: str, width: int, value_width: int) -> str:
    """
    Label on the left, value right-aligned in the last ``value_width``
    characters; a value wider than its field borrows from the label
    """
    value_width = min(max(value_width, len(value)), width)
    return pad_right(label, width - value_width) + pad_left(value, value_width)


def rule(width: int, heavy: bool = False) -> str:
    return ("=" if heavy else "-") * width
