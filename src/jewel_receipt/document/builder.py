"""
Receipt document builder

Decides which sections a receipt carries, picks its title and turns
every figure into text exactly once. The result is a
``ReceiptDocument`` that both renderers consume unchanged.
"""

import logging
from datetime import datetime
from typing import List, Optional, Tuple

from jewel_receipt.config.labels import ReceiptLabels
from jewel_receipt.config.receipt_config import (
    MakingChargeDisplayType,
    ReceiptConfig,
    WastageDisplayType,
)
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
from jewel_receipt.layout.layout_policy import ColumnScheme, ItemLayout, WidthClass
from jewel_receipt.layout.text import Align
from jewel_receipt.models.items import (
    LessWeightType,
    MakingChargeType,
    PurchaseItem,
    WastageType,
)
from jewel_receipt.models.party import ReceiptPayload, ShopDetails
from jewel_receipt.models.totals import PricedItem, Totals
from jewel_receipt.utils.numbers import (
    format_currency,
    format_plain,
    format_signed_currency,
    format_weight,
    group_indian,
    round_amount,
)

logger = logging.getLogger(__name__)

DATE_FORMAT = "%d-%m-%Y"


def select_title(
    has_items: bool,
    has_purchase: bool,
    has_chit: bool,
    has_advance: bool,
    labels: Optional[ReceiptLabels] = None,
) -> str:
    """
    Pick the receipt title from the sections present

    Items always make an estimation slip. Otherwise a single kind of
    deduction gets its own title and any mixture (or nothing at all)
    is a plain receipt.
    """
    labels = labels or ReceiptLabels()
    if has_items:
        return labels.estimation_slip
    if has_purchase and not has_chit and not has_advance:
        return labels.purchase_voucher
    if has_chit and not has_purchase and not has_advance:
        return labels.chit_receipt
    if has_advance and not has_purchase and not has_chit:
        return labels.advance_receipt
    return labels.receipt


class DocumentBuilder:
    """
    DocumentBuilder class
    Turns a payload and its totals into a ``ReceiptDocument``

    One builder is bound to a shop, a configuration and a resolved
    paper width; it holds no per-receipt state.
    """

    def __init__(
        self,
        shop: ShopDetails,
        config: ReceiptConfig,
        width_class: WidthClass,
        labels: Optional[ReceiptLabels] = None,
    ) -> None:
        self.shop = shop
        self.config = config
        self.width_class = width_class
        self.labels = labels or ReceiptLabels()

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def money(self, amount: float) -> str:
        return format_currency(amount, self.config.currency_symbol)

    def signed_money(self, amount: float) -> str:
        return format_signed_currency(amount, self.config.currency_symbol)

    @staticmethod
    def figure(amount: float) -> str:
        """Rounded, grouped amount without a currency prefix (table cells)"""
        return group_indian(round_amount(amount))

    def date_line(self, issued_at: datetime) -> Line:
        return Line(
            f"{self.labels.date}: {issued_at.strftime(DATE_FORMAT)}",
            align=Align.RIGHT,
        )

    # ------------------------------------------------------------------
    # Estimation receipts
    # ------------------------------------------------------------------

    def build(self, payload: ReceiptPayload, totals: Totals) -> ReceiptDocument:
        """
        Compose a full estimation / settlement receipt

        Args:
            payload: Transaction data
            totals: Totals computed from the same payload

        Returns:
            The composed document
        """
        title = select_title(
            payload.has_items,
            payload.has_purchase,
            payload.has_chit,
            payload.has_advance,
            self.labels,
        )

        sections: List[Optional[Section]] = [self.header_section()]

        rates = self._rates_section(payload)
        sections.append(self._title_section(payload, title, closed=rates is None))
        sections.append(rates)
        sections.append(self._party_section(payload))

        if payload.has_items:
            sections.append(self._items_section(totals))
            if self.config.show_gst:
                sections.append(self._gst_section(totals))
        if payload.has_purchase:
            sections.append(self._purchase_section(payload.purchase_items, totals))
        if payload.has_chit:
            sections.append(self._deduction_section(
                SectionKind.CHIT,
                self.labels.chit_section,
                [(f"{self.labels.chit} ({c.chit_id})", c.amount) for c in payload.chit_items],
            ))
        if payload.has_advance:
            sections.append(self._deduction_section(
                SectionKind.ADVANCE,
                self.labels.advance_section,
                [(f"{self.labels.advance} ({a.advance_id})", a.amount) for a in payload.advance_items],
            ))

        sections.append(self._net_section(payload, totals))
        sections.append(self.footer_section())

        present = tuple(s for s in sections if s is not None)
        logger.debug(
            "Composed %r with sections %s",
            title,
            ", ".join(s.kind.value for s in present),
        )
        return ReceiptDocument(
            title=title,
            width_class=self.width_class,
            sections=present,
            totals=totals,
            issued_at=payload.issued_at,
        )

    def header_section(self) -> Optional[Section]:
        """Shop header, or None when hidden or empty"""
        if not self.config.show_header:
            return None

        shop = self.shop
        blocks: List[Block] = []
        if shop.name:
            blocks.append(Line(
                shop.name, align=Align.CENTER, bold=True, double=True,
                style=Style.SHOP_NAME,
            ))
        if shop.address:
            blocks.append(Line(shop.address, align=Align.CENTER, style=Style.SHOP_INFO))
        if shop.phone:
            blocks.append(Line(
                f"{self.labels.phone}: {shop.phone}",
                align=Align.CENTER, style=Style.SHOP_INFO,
            ))
        if self.config.show_gst and shop.gst_number:
            blocks.append(Line(
                f"{self.labels.gstin}: {shop.gst_number}",
                align=Align.CENTER, style=Style.SHOP_INFO,
            ))
        if self.config.show_device_name and shop.device_name:
            blocks.append(Line(
                f"{self.labels.device}: {shop.device_name}",
                align=Align.CENTER, style=Style.SHOP_INFO,
            ))

        if not blocks:
            return None
        return Section(SectionKind.HEADER, tuple(blocks))

    def footer_section(self) -> Optional[Section]:
        if not self.config.show_footer:
            return None
        message = self.shop.footer_message or self.labels.thank_you
        return Section(
            SectionKind.FOOTER,
            (Line(message, align=Align.CENTER, style=Style.FOOTER),),
        )

    def _title_section(
        self, payload: ReceiptPayload, title: str, closed: bool
    ) -> Section:
        blocks: List[Block] = [
            Line(title, align=Align.CENTER, bold=True, style=Style.TITLE)
        ]
        if payload.estimation_number:
            blocks.append(Line(
                f"{self.labels.estimation_number}: {payload.estimation_number}",
                align=Align.CENTER,
            ))
        blocks.append(self.date_line(payload.issued_at))
        if closed:
            blocks.append(Rule(heavy=True))
        return Section(SectionKind.TITLE, tuple(blocks))

    def _rates_section(self, payload: ReceiptPayload) -> Optional[Section]:
        """Board rates, shown only on receipts that price merchandise"""
        if not payload.has_items or payload.rates is None:
            return None
        rates = payload.rates
        text = (
            f"{self.labels.gold_rate}: {self.money(rates.gold_22k)} | "
            f"{self.labels.silver_rate}: {self.money(rates.silver)}/g"
        )
        return Section(SectionKind.RATES, (Line(text, bold=True), Rule(heavy=True)))

    def _party_section(self, payload: ReceiptPayload) -> Optional[Section]:
        config = self.config
        blocks: List[Block] = []

        customer = payload.customer
        if config.show_customer and customer is not None and not customer.is_empty():
            if customer.name and config.show_customer_name:
                blocks.append(Line(f"{self.labels.customer}: {customer.name.upper()}"))
            if customer.mobile and config.show_customer_mobile:
                blocks.append(Line(f"{self.labels.customer_phone}: {customer.mobile}"))
            if customer.address and config.show_customer_address:
                blocks.append(Line(
                    f"{self.labels.customer_address}: {customer.address.upper()}"
                ))

        if config.show_operator and payload.employee_name:
            blocks.append(Line(
                f"{self.labels.operator}: {payload.employee_name}",
                style=Style.EMPLOYEE,
            ))

        if not blocks:
            return None
        blocks.append(Rule(heavy=True))
        return Section(SectionKind.PARTY, tuple(blocks))

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    def wastage_caption(self, priced: PricedItem) -> str:
        """Wastage as configured: the entered value, or its weight in grams"""
        item = priced.item
        if self.config.wastage_display_type == WastageDisplayType.GRAMS:
            return format_weight(priced.wastage_weight)
        if item.wastage_type == WastageType.PERCENTAGE:
            return f"{format_plain(item.wastage)}%"
        return f"{format_plain(item.wastage)}g"

    def making_charge_caption(self, priced: PricedItem, with_symbol: bool = False) -> str:
        """
        Making charge as configured

        ``auto`` shows the charge the way it was entered; the other
        styles convert it to a share of the metal value, a per-gram
        figure, or the flat amount.
        """
        item = priced.item
        style = self.config.making_charge_display_type
        if style == MakingChargeDisplayType.AUTO:
            style = {
                MakingChargeType.PERCENTAGE: MakingChargeDisplayType.PERCENTAGE,
                MakingChargeType.PER_GRAM: MakingChargeDisplayType.GRAMS,
                MakingChargeType.FIXED: MakingChargeDisplayType.FIXED,
            }[item.making_charge_type]

        if style == MakingChargeDisplayType.PERCENTAGE:
            if item.making_charge_type == MakingChargeType.PERCENTAGE:
                share = item.making_charge
            elif priced.gold_value:
                share = round(priced.making_charge_value * 100 / priced.gold_value, 2)
            else:
                share = 0.0
            return f"{format_plain(share)}%"

        if style == MakingChargeDisplayType.GRAMS:
            if item.making_charge_type == MakingChargeType.PER_GRAM:
                per_gram = item.making_charge
            elif item.net_weight:
                per_gram = round(priced.making_charge_value / item.net_weight, 2)
            else:
                per_gram = 0.0
            return f"{format_plain(per_gram)}/g"

        if with_symbol:
            return self.money(priced.making_charge_value)
        return self.figure(priced.making_charge_value)

    def _item_columns(self, scheme: ColumnScheme) -> Tuple[Column, ...]:
        return (
            Column(scheme.name, Align.LEFT),
            Column(scheme.pieces),
            Column(scheme.weight),
            Column(scheme.wastage),
            Column(scheme.making_charge),
            Column(scheme.amount),
        )

    @staticmethod
    def _fitted_row(
        cells: Tuple[str, ...],
        captions: Tuple[str, ...],
        columns: Tuple[Column, ...],
        bold: bool = False,
    ) -> List[TableRow]:
        """
        Table row whose figures are never cut

        A figure wider than its column (less the one-character gap) is
        left out of the row and printed in full on a detail row below.
        """
        fitted = [cells[0]]
        spilled: List[TableRow] = []
        for text, caption, column in zip(cells[1:], captions[1:], columns[1:]):
            if len(text) > column.width - 1:
                fitted.append("")
                spilled.append(TableRow((f"  {caption}: {text}",), detail=True))
            else:
                fitted.append(text)
        return [TableRow(tuple(fitted), bold=bold)] + spilled

    def _items_section(self, totals: Totals) -> Section:
        if self.width_class.item_layout == ItemLayout.TABULAR:
            blocks = self._item_table(totals.priced_items)
        else:
            blocks = self._item_lines(totals.priced_items)

        blocks.append(Rule())
        blocks.append(Pair(self.labels.total, self.money(totals.total_taxable_value), bold=True))
        blocks.append(Pair(self.labels.total_gross_weight, format_weight(totals.total_gross_weight)))
        blocks.append(Pair(self.labels.total_net_weight, format_weight(totals.total_net_weight)))

        if not self.config.show_gst:
            blocks.append(Rule())
            blocks.append(Pair(
                self.labels.estimation_amount,
                self.money(totals.estimation_amount),
                bold=True,
            ))
        return Section(SectionKind.ITEMS, tuple(blocks))

    def _item_table(self, priced_items: Tuple[PricedItem, ...]) -> List[Block]:
        labels = self.labels
        show_wastage = self.config.show_wastage
        show_making = self.config.show_making_charge
        columns = self._item_columns(self.width_class.columns)
        captions = (
            labels.item,
            labels.pcs,
            labels.weight,
            labels.wastage if show_wastage else "",
            labels.making_charge if show_making else "",
            labels.amount,
        )

        rows = [TableRow(captions, bold=True, header=True)]

        for priced in priced_items:
            item = priced.item
            rows.extend(self._fitted_row(
                (
                    item.name.upper(),
                    str(item.pcs),
                    f"{item.net_weight:.3f}",
                    self.wastage_caption(priced) if show_wastage else "",
                    self.making_charge_caption(priced) if show_making else "",
                    self.figure(priced.taxable_value),
                ),
                captions,
                columns,
                bold=True,
            ))
            if item.tag_number:
                rows.append(TableRow((f"  {labels.tag}: {item.tag_number}",), detail=True))
            if item.stone_weight:
                rows.append(TableRow(
                    (
                        f"  {labels.gross_weight}: {format_weight(item.gross_weight)}"
                        f"  {labels.stone_weight}: {format_weight(item.stone_weight)}",
                    ),
                    detail=True,
                ))
            rows.append(TableRow((f"  @{self.money(item.rate)}/g",), detail=True))

        return [Table(columns, tuple(rows))]

    def _item_lines(self, priced_items: Tuple[PricedItem, ...]) -> List[Block]:
        labels = self.labels
        blocks: List[Block] = [Pair(labels.item, labels.amount, bold=True), Rule()]

        for priced in priced_items:
            item = priced.item
            blocks.append(Pair(item.name.upper(), self.money(priced.taxable_value), bold=True))
            blocks.append(Line(f"  {item.pcs} Pcs", style=Style.DETAIL))
            if item.tag_number:
                blocks.append(Line(f"  {labels.tag}: {item.tag_number}", style=Style.DETAIL))
            if item.stone_weight:
                blocks.append(Line(
                    f"  {labels.stone_weight}: {format_weight(item.stone_weight)}",
                    style=Style.DETAIL,
                ))
            blocks.append(Line(
                f"  {labels.net_weight}: {format_weight(item.net_weight)} | @{self.money(item.rate)}",
                style=Style.DETAIL,
            ))
            if self.config.show_wastage:
                if item.wastage_type == WastageType.PERCENTAGE:
                    entered = f"{format_plain(item.wastage)}%"
                else:
                    entered = f"{format_plain(item.wastage)}g"
                blocks.append(Line(
                    f"  {labels.wastage}: {format_weight(priced.wastage_weight)} ({entered})",
                    style=Style.DETAIL,
                ))
            if self.config.show_making_charge:
                blocks.append(Line(
                    f"  {labels.making_charge}: {self.making_charge_caption(priced, with_symbol=True)}",
                    style=Style.DETAIL,
                ))
            blocks.append(Rule())
        return blocks

    def _gst_section(self, totals: Totals) -> Section:
        half = format_plain(totals.gst_percent / 2)
        # the printed halves must add up to the rounded GST
        cgst = round_amount(totals.cgst)
        sgst = round_amount(totals.total_gst) - cgst
        return Section(SectionKind.GST, (
            Pair(f"{self.labels.cgst} ({half}%)", self.money(cgst)),
            Pair(f"{self.labels.sgst} ({half}%)", self.money(sgst)),
            Rule(),
            Pair(self.labels.estimation_amount, self.money(totals.estimation_amount), bold=True),
        ))

    # ------------------------------------------------------------------
    # Deductions
    # ------------------------------------------------------------------

    def less_caption(self, item: PurchaseItem, with_symbol: bool = False) -> str:
        if item.less_weight_type == LessWeightType.PERCENTAGE:
            return f"{format_plain(item.less_weight)}%"
        if item.less_weight_type == LessWeightType.AMOUNT:
            return self.money(item.less_weight) if with_symbol else self.figure(item.less_weight)
        return f"{format_plain(item.less_weight)}g"

    def _purchase_section(
        self, purchase_items: List[PurchaseItem], totals: Totals
    ) -> Section:
        labels = self.labels
        blocks: List[Block] = [
            Rule(heavy=True),
            Line(labels.purchase_section, align=Align.CENTER, bold=True, style=Style.SECTION_TITLE),
        ]

        if self.width_class.item_layout == ItemLayout.TABULAR:
            columns = self._item_columns(self.width_class.columns)
            captions = (
                labels.item, labels.pcs, labels.net_weight_column,
                labels.less, labels.rate, labels.amount,
            )
            rows = [TableRow(captions, bold=True, header=True)]
            for item in purchase_items:
                rows.extend(self._fitted_row(
                    (
                        item.category.upper(),
                        str(item.pcs),
                        f"{item.net_weight:.3f}",
                        self.less_caption(item),
                        self.figure(item.rate),
                        self.figure(item.amount),
                    ),
                    captions,
                    columns,
                ))
            blocks.append(Table(columns, tuple(rows)))
        else:
            blocks.extend([Pair(labels.item, labels.amount, bold=True), Rule()])
            for item in purchase_items:
                blocks.append(Pair(item.category.upper(), self.money(item.amount), bold=True))
                blocks.append(Line(
                    f"  {labels.gross_weight}: {format_weight(item.gross_weight)}",
                    style=Style.DETAIL,
                ))
                blocks.append(Line(
                    f"  {labels.less}: {self.less_caption(item, with_symbol=True)}",
                    style=Style.DETAIL,
                ))
                blocks.append(Line(
                    f"  {labels.net_weight}: {format_weight(item.net_weight)} | @{self.money(item.rate)}",
                    style=Style.DETAIL,
                ))
                blocks.append(Rule())

        blocks.append(Rule())
        blocks.append(Pair(labels.purchase_total, self.money(totals.total_purchase_amount), bold=True))
        blocks.append(Pair(labels.total_net_weight, format_weight(totals.total_purchase_weight)))
        return Section(SectionKind.PURCHASE, tuple(blocks))

    def _deduction_section(
        self,
        kind: SectionKind,
        heading: str,
        entries: List[Tuple[str, float]],
    ) -> Section:
        blocks: List[Block] = [
            Rule(heavy=True),
            Line(heading, align=Align.CENTER, bold=True, style=Style.SECTION_TITLE),
        ]
        blocks.extend(Pair(label, self.money(amount)) for label, amount in entries)
        return Section(kind, tuple(blocks))

    def _net_section(self, payload: ReceiptPayload, totals: Totals) -> Section:
        blocks: List[Block] = [Rule(heavy=True)]
        if payload.has_items and totals.total_deductions > 0:
            blocks.append(Pair(self.labels.deductions, self.money(totals.total_deductions)))
        blocks.append(Banner(
            f"{self.labels.net_amount}: {self.signed_money(totals.net_payable)}"
        ))
        blocks.append(Rule(heavy=True))
        return Section(SectionKind.NET, tuple(blocks))
