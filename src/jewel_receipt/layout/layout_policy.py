"""
Paper-width layout policy

Maps the configured paper width onto one of three fixed layout tiers.
Every renderer reads its column widths from the same ``WidthClass`` so
the thermal and HTML outputs stay in proportion.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from jewel_receipt.exceptions import UnsupportedPaperWidthError

logger = logging.getLogger(__name__)


class PaperWidth(str, Enum):
    """Supported paper widths"""
    NARROW = "58mm"
    MEDIUM = "80mm"
    WIDE = "112mm"


class ItemLayout(str, Enum):
    """How line items are laid out"""
    MULTI_LINE = "multi_line"
    TABULAR = "tabular"


@dataclass(frozen=True)
class ColumnScheme:
    """Character widths of the item table columns"""
    name: int
    pieces: int
    weight: int
    wastage: int
    making_charge: int
    amount: int

    @property
    def widths(self) -> Tuple[int, ...]:
        return (
            self.name,
            self.pieces,
            self.weight,
            self.wastage,
            self.making_charge,
            self.amount,
        )

    @property
    def total(self) -> int:
        return sum(self.widths)


@dataclass(frozen=True)
class WidthClass:
    """Resolved layout parameters for one paper width"""
    paper_width: PaperWidth
    char_width: int
    columns: ColumnScheme
    item_layout: ItemLayout
    html_max_width: int
    value_width: int


_WIDTH_CLASSES: Dict[PaperWidth, WidthClass] = {
    PaperWidth.NARROW: WidthClass(
        paper_width=PaperWidth.NARROW,
        char_width=32,
        columns=ColumnScheme(
            name=8, pieces=3, weight=7, wastage=5, making_charge=4, amount=5
        ),
        item_layout=ItemLayout.MULTI_LINE,
        html_max_width=220,
        value_width=14,
    ),
    PaperWidth.MEDIUM: WidthClass(
        paper_width=PaperWidth.MEDIUM,
        char_width=48,
        columns=ColumnScheme(
            name=13, pieces=3, weight=9, wastage=6, making_charge=7, amount=10
        ),
        item_layout=ItemLayout.TABULAR,
        html_max_width=380,
        value_width=16,
    ),
    PaperWidth.WIDE: WidthClass(
        paper_width=PaperWidth.WIDE,
        char_width=64,
        columns=ColumnScheme(
            name=20, pieces=4, weight=10, wastage=8, making_charge=10, amount=12
        ),
        item_layout=ItemLayout.TABULAR,
        html_max_width=450,
        value_width=18,
    ),
}


class LayoutPolicy:
    """
    LayoutPolicy class
    Resolves a configured paper width to its ``WidthClass``

    Example:
        >>> policy = LayoutPolicy()
        >>> policy.width_class("80mm").char_width
        48
    """

    def parse(self, paper_width: object) -> PaperWidth:
        """
        Map a configured width onto the closed set of tiers

        Raises:
            UnsupportedPaperWidthError: If the width has no layout
        """
        if isinstance(paper_width, PaperWidth):
            return paper_width

        text = str(paper_width).strip().lower()
        if text.isdigit():
            text = f"{text}mm"
        try:
            return PaperWidth(text)
        except ValueError:
            raise UnsupportedPaperWidthError(paper_width) from None

    def width_class(self, paper_width: object) -> WidthClass:
        tier = self.parse(paper_width)
        width_class = _WIDTH_CLASSES[tier]
        logger.debug(
            "Paper width %s resolved to %d columns (%s items)",
            tier.value,
            width_class.char_width,
            width_class.item_layout.value,
        )
        return width_class

    def all_width_classes(self) -> Tuple[WidthClass, ...]:
        return tuple(_WIDTH_CLASSES[tier] for tier in PaperWidth)
