"""
Document module
"""

from jewel_receipt.document.blocks import (
    Banner,
    Block,
    Column,
    Line,
    Pair,
    ReceiptDocument,
    Rule,
    Section,
    SectionKind,
    Style,
    Table,
    TableRow,
)
from jewel_receipt.document.builder import DocumentBuilder, select_title

__all__ = [
    "Banner",
    "Block",
    "Column",
    "Line",
    "Pair",
    "ReceiptDocument",
    "Rule",
    "Section",
    "SectionKind",
    "Style",
    "Table",
    "TableRow",
    "DocumentBuilder",
    "select_title",
]
