"""
HTML renderer

Walks a ``ReceiptDocument`` and produces a standalone HTML page for the
system print pipeline. The page embeds its own stylesheet and makes no
external references; all text is escaped.
"""

import html
import logging
from string import Template
from typing import List

from jewel_receipt.document.blocks import (
    Banner,
    Block,
    Line,
    Pair,
    ReceiptDocument,
    Rule,
    Section,
    Style,
    Table,
    TableRow,
)
from jewel_receipt.exceptions import RenderError
from jewel_receipt.layout.layout_policy import WidthClass
from jewel_receipt.layout.text import Align, printable

logger = logging.getLogger(__name__)

RECEIPT_STYLES = Template("""
body {
    font-family: 'Courier New', 'Courier', monospace;
    padding: 8px 4px;
    color: #000;
    max-width: ${max_width}px;
    margin: auto;
    font-size: 11px;
    line-height: 1.5;
}
section { margin: 0; }
.shop-name {
    font-size: 18px;
    font-weight: bold;
    text-transform: uppercase;
    letter-spacing: 1.5px;
    margin-bottom: 2px;
}
.shop-info { font-size: 11px; margin-bottom: 2px; }
.receipt-title {
    font-size: 15px;
    font-weight: bold;
    margin: 8px 0;
    padding: 4px 0;
    border-top: 1.5px solid #000;
    border-bottom: 1.5px solid #000;
    text-transform: uppercase;
}
.section-title {
    font-size: 13px;
    font-weight: bold;
    margin: 8px 0 4px 0;
    text-decoration: underline;
}
.dash-line { border-top: 1px dashed #000; margin: 4px 0; }
.double-line { border-top: 3px double #000; margin: 4px 0; }
.row {
    display: flex;
    justify-content: space-between;
    margin-bottom: 2px;
    font-size: 11px;
}
.row-bold {
    display: flex;
    justify-content: space-between;
    margin-bottom: 2px;
    font-size: 12px;
    font-weight: bold;
}
.item-detail { font-size: 10px; padding-left: 8px; }
.net-amt {
    text-align: center;
    font-size: 16px;
    font-weight: bold;
    margin: 10px 0;
    padding: 8px;
    border: 2px solid #000;
}
.footer {
    margin-top: 15px;
    font-size: 11px;
    font-weight: bold;
    font-style: italic;
}
.employee-row { font-size: 11px; font-weight: bold; }
.items-table {
    width: 100%;
    border-collapse: collapse;
    margin: 4px 0;
    font-size: 10.5px;
    table-layout: fixed;
}
.items-table th {
    border-bottom: 1px solid #000;
    padding: 2px 0;
    font-weight: bold;
}
.items-table td { vertical-align: top; padding: 1px 0; }
.bold { font-weight: bold; }
.double { font-size: 18px; }
.text-left { text-align: left; }
.text-center { text-align: center; }
.text-right { text-align: right; }
@media print {
    body { padding: 0; }
}
""")

_ALIGN_CLASSES = {
    Align.LEFT: "text-left",
    Align.CENTER: "text-center",
    Align.RIGHT: "text-right",
}


def _escape(text: str) -> str:
    return html.escape(printable(text), quote=True)


class HtmlRenderer:
    """
    HtmlRenderer class
    Box/table rendering of a composed receipt

    Example:
        >>> page = HtmlRenderer().render(document)
    """

    def render(self, document: ReceiptDocument) -> str:
        """
        Render the whole document as one HTML page

        Raises:
            RenderError: If a block cannot be rendered
        """
        width_class = document.width_class
        body = "\n".join(self._section(section) for section in document.sections)
        page = (
            "<!DOCTYPE html>\n"
            "<html>\n"
            "<head>\n"
            '<meta charset="utf-8">\n'
            f"<title>{_escape(document.title)}</title>\n"
            f"<style>{self.stylesheet(width_class)}</style>\n"
            "</head>\n"
            "<body>\n"
            f"{body}\n"
            "</body>\n"
            "</html>\n"
        )
        logger.debug(
            "Rendered HTML receipt: %d sections, %d characters",
            len(document.sections),
            len(page),
        )
        return page

    def stylesheet(self, width_class: WidthClass) -> str:
        return RECEIPT_STYLES.substitute(max_width=width_class.html_max_width)

    def _section(self, section: Section) -> str:
        parts = [f'<section class="section-{section.kind.value}">']
        for block in section.blocks:
            parts.append(self._block(block))
        parts.append("</section>")
        return "\n".join(parts)

    def _block(self, block: Block) -> str:
        if isinstance(block, Line):
            classes = [block.style.value, _ALIGN_CLASSES[block.align]]
            if block.bold:
                classes.append("bold")
            if block.double:
                classes.append("double")
            return f'<div class="{" ".join(classes)}">{_escape(block.text)}</div>'

        if isinstance(block, Pair):
            css = "row-bold" if block.bold else "row"
            if block.style != Style.PLAIN:
                css = f"{css} {block.style.value}"
            return (
                f'<div class="{css}"><span>{_escape(block.label)}</span>'
                f"<span>{_escape(block.value)}</span></div>"
            )

        if isinstance(block, Rule):
            css = "double-line" if block.heavy else "dash-line"
            return f'<div class="{css}"></div>'

        if isinstance(block, Table):
            return self._table(block)

        if isinstance(block, Banner):
            return f'<div class="net-amt">{_escape(block.text)}</div>'

        raise RenderError(
            f"Unsupported block type: {type(block).__name__}",
            code="RENDER03",
        )

    def _table(self, table: Table) -> str:
        total = sum(column.width for column in table.columns) or 1
        lines: List[str] = ['<table class="items-table">', "<colgroup>"]
        for column in table.columns:
            share = round(column.width * 100 / total, 2)
            lines.append(f'<col style="width: {share}%">')
        lines.append("</colgroup>")

        head = [row for row in table.rows if row.header]
        body = [row for row in table.rows if not row.header]
        if head:
            lines.append("<thead>")
            lines.extend(self._row(row, table, "th") for row in head)
            lines.append("</thead>")
        lines.append("<tbody>")
        lines.extend(self._row(row, table, "td") for row in body)
        lines.append("</tbody>")
        lines.append("</table>")
        return "\n".join(lines)

    def _row(self, row: TableRow, table: Table, tag: str) -> str:
        if row.detail:
            return (
                f'<tr class="item-detail"><td colspan="{len(table.columns)}">'
                f"{_escape(row.cells[0].strip())}</td></tr>"
            )

        cells = []
        for text, column in zip(row.cells, table.columns):
            cells.append(
                f'<{tag} class="{_ALIGN_CLASSES[column.align]}">{_escape(text)}</{tag}>'
            )
        css = ' class="bold"' if row.bold and not row.header else ""
        return f"<tr{css}>{''.join(cells)}</tr>"
