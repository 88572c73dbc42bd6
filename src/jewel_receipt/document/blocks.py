"""
Receipt document representation

A receipt is a sequence of sections, each holding blocks. Renderers
walk this structure; they never look at the payload or recompute a
figure, so the thermal and HTML outputs cannot disagree.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple, Union

from jewel_receipt.layout.layout_policy import WidthClass
from jewel_receipt.layout.text import Align
from jewel_receipt.models.totals import Totals


class SectionKind(str, Enum):
    """Receipt sections in print order"""
    HEADER = "header"
    TITLE = "title"
    RATES = "rates"
    PARTY = "party"
    ITEMS = "items"
    GST = "gst"
    PURCHASE = "purchase"
    CHIT = "chit"
    ADVANCE = "advance"
    NET = "net"
    SERVICE = "service"
    FOOTER = "footer"


class Style(str, Enum):
    """Presentation hints; the HTML renderer maps them to CSS classes"""
    PLAIN = "row"
    SHOP_NAME = "shop-name"
    SHOP_INFO = "shop-info"
    TITLE = "receipt-title"
    SECTION_TITLE = "section-title"
    DETAIL = "item-detail"
    EMPLOYEE = "employee-row"
    FOOTER = "footer"


@dataclass(frozen=True)
class Line:
    """A single line of text"""
    text: str
    align: Align = Align.LEFT
    bold: bool = False
    double: bool = False
    style: Style = Style.PLAIN


@dataclass(frozen=True)
class Pair:
    """Caption on the left, figure on the right"""
    label: str
    value: str
    bold: bool = False
    style: Style = Style.PLAIN


@dataclass(frozen=True)
class Rule:
    heavy: bool = False


@dataclass(frozen=True)
class Column:
    width: int
    align: Align = Align.RIGHT


@dataclass(frozen=True)
class TableRow:
    """
    One table row

    A ``detail`` row carries a single cell that spans the full
    table width (tag numbers, rates, stone weights under an item).
    """
    cells: Tuple[str, ...]
    bold: bool = False
    header: bool = False
    detail: bool = False


@dataclass(frozen=True)
class Table:
    """
    Fixed-column table

    Column widths are character counts from the active
    ``ColumnScheme``; the HTML renderer turns them into percentages.
    """
    columns: Tuple[Column, ...]
    rows: Tuple[TableRow, ...]


@dataclass(frozen=True)
class Banner:
    """Highlighted settlement line"""
    text: str


Block = Union[Line, Pair, Rule, Table, Banner]


@dataclass(frozen=True)
class Section:
    kind: SectionKind
    blocks: Tuple[Block, ...]


@dataclass(frozen=True)
class ReceiptDocument:
    """Fully composed receipt, ready for any renderer"""
    title: str
    width_class: WidthClass
    sections: Tuple[Section, ...]
    totals: Totals = field(default_factory=Totals)
    issued_at: Optional[datetime] = None

    @property
    def section_kinds(self) -> Tuple[SectionKind, ...]:
        return tuple(section.kind for section in self.sections)

    def section(self, kind: SectionKind) -> Optional[Section]:
        for section in self.sections:
            if section.kind == kind:
                return section
        return None

    def has_section(self, kind: SectionKind) -> bool:
        return self.section(kind) is not None
