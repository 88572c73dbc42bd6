"""
Thermal renderer

Walks a ``ReceiptDocument`` and emits an ESC/POS text stream. Every
padded line is exactly ``char_width`` characters wide.
"""

import logging
from typing import List

from jewel_receipt.config.receipt_config import ConfigDefaults
from jewel_receipt.document.blocks import (
    Banner,
    Block,
    Line,
    Pair,
    ReceiptDocument,
    Rule,
    Table,
)
from jewel_receipt.exceptions import RenderError
from jewel_receipt.layout.layout_policy import WidthClass
from jewel_receipt.layout.text import (
    Align,
    label_value,
    pad_right,
    printable,
    rule,
    table_row,
)
from jewel_receipt.render.escpos import ALIGN_COMMANDS, EscPos

logger = logging.getLogger(__name__)


class ThermalRenderer:
    """
    ThermalRenderer class
    Fixed-width ESC/POS rendering of a composed receipt

    Example:
        >>> renderer = ThermalRenderer(feed_lines=4)
        >>> stream = renderer.render(document)
    """

    def __init__(self, feed_lines: int = ConfigDefaults.FEED_LINES) -> None:
        self.feed_lines = feed_lines

    def render(self, document: ReceiptDocument) -> str:
        """
        Render the whole document

        Raises:
            RenderError: If a block cannot be rendered
        """
        width_class = document.width_class
        out: List[str] = [EscPos.RESET]

        for section in document.sections:
            for block in section.blocks:
                out.extend(self._block(block, width_class))

        out.append(EscPos.NEWLINE * self.feed_lines)
        stream = "".join(out)
        logger.debug(
            "Rendered thermal receipt: %d sections, %d characters",
            len(document.sections),
            len(stream),
        )
        return stream

    def encode(self, stream: str, encoding: str = ConfigDefaults.THERMAL_ENCODING) -> bytes:
        """Encode a rendered stream for the printer; unmappable characters become '?'"""
        try:
            return stream.encode(encoding, errors="replace")
        except LookupError as e:
            raise RenderError(
                f"Unknown thermal encoding: {encoding}",
                code="RENDER02",
                cause=e,
            ) from e

    def _block(self, block: Block, width_class: WidthClass) -> List[str]:
        width = width_class.char_width

        if isinstance(block, Line):
            return [self._styled(printable(block.text), block.align, block.bold, block.double)]

        if isinstance(block, Pair):
            text = label_value(
                printable(block.label), printable(block.value), width, width_class.value_width
            )
            return [self._styled(text, Align.LEFT, block.bold)]

        if isinstance(block, Rule):
            return [self._styled(rule(width, block.heavy), Align.LEFT)]

        if isinstance(block, Table):
            columns = [(column.width, column.align) for column in block.columns]
            lines = []
            for row in block.rows:
                cells = [printable(cell) for cell in row.cells]
                if row.detail:
                    text = pad_right(cells[0], width)
                else:
                    text = table_row(cells, columns)
                lines.append(self._styled(text, Align.LEFT, row.bold))
            return lines

        if isinstance(block, Banner):
            return [self._styled(printable(block.text), Align.CENTER, bold=True)]

        raise RenderError(
            f"Unsupported block type: {type(block).__name__}",
            code="RENDER03",
        )

    @staticmethod
    def _styled(text: str, align: Align, bold: bool = False, double: bool = False) -> str:
        parts = [ALIGN_COMMANDS[align]]
        if bold:
            parts.append(EscPos.BOLD_ON)
        if double:
            parts.append(EscPos.DOUBLE_ON)
        parts.append(text)
        if double:
            parts.append(EscPos.DOUBLE_OFF)
        if bold:
            parts.append(EscPos.BOLD_OFF)
        parts.append(EscPos.NEWLINE)
        return "".join(parts)
