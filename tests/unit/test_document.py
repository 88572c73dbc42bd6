"""
Document Builder Unit Tests
"""

import pytest

from jewel_receipt.config import ReceiptConfig, ReceiptLabels
from jewel_receipt.document import (
    Banner,
    DocumentBuilder,
    Pair,
    SectionKind,
    Table,
    select_title,
)
from jewel_receipt.layout import LayoutPolicy
from jewel_receipt.models import (
    AdvanceItem,
    ChitItem,
    CustomerDetails,
    EstimationItem,
    MarketRates,
    PurchaseItem,
    ReceiptPayload,
    ShopDetails,
)
from jewel_receipt.pricing import TotalsCalculator, price_item


def build(payload, shop=None, **config):
    receipt_config = ReceiptConfig(**config)
    width_class = LayoutPolicy().width_class(receipt_config.paper_width)
    builder = DocumentBuilder(shop or ShopDetails(), receipt_config, width_class)
    totals = TotalsCalculator(receipt_config.gst_percent).calculate(
        payload.items, payload.purchase_items, payload.chit_items, payload.advance_items
    )
    return builder.build(payload, totals)


class TestTitleSelection:
    """Tests for select_title"""

    @pytest.mark.parametrize("flags,title", [
        ((True, False, False, False), "ESTIMATION SLIP"),
        ((True, True, True, True), "ESTIMATION SLIP"),
        ((False, True, False, False), "PURCHASE VOUCHER"),
        ((False, False, True, False), "CHIT RECEIPT"),
        ((False, False, False, True), "ADVANCE RECEIPT"),
        ((False, True, True, False), "RECEIPT"),
        ((False, True, False, True), "RECEIPT"),
        ((False, False, True, True), "RECEIPT"),
        ((False, False, False, False), "RECEIPT"),
    ])
    def test_titles(self, flags, title):
        assert select_title(*flags) == title

    def test_custom_labels(self):
        labels = ReceiptLabels(estimation_slip="QUOTATION")
        assert select_title(True, False, False, False, labels) == "QUOTATION"


class TestSectionPresence:
    """A category section appears iff its collection is non-empty"""

    def test_chit_only(self, shop, issued_at):
        payload = ReceiptPayload(chit_items=[ChitItem(chit_id="C1", amount=100)], issued_at=issued_at)
        document = build(payload, shop)

        assert document.section_kinds == (
            SectionKind.HEADER,
            SectionKind.TITLE,
            SectionKind.CHIT,
            SectionKind.NET,
            SectionKind.FOOTER,
        )

    def test_empty_payload(self, issued_at):
        document = build(ReceiptPayload(issued_at=issued_at), show_footer=False)

        assert document.title == "RECEIPT"
        assert document.section_kinds == (SectionKind.TITLE, SectionKind.NET)
        banner = next(b for b in document.section(SectionKind.NET).blocks if isinstance(b, Banner))
        assert banner.text == "NET AMOUNT: Rs.0"

    def test_all_categories(self, estimation_payload):
        payload = estimation_payload.model_copy(update={
            "purchase_items": [PurchaseItem(category="Chain", gross_weight=1, rate=5000)],
            "chit_items": [ChitItem(chit_id="C1", amount=100)],
            "advance_items": [AdvanceItem(advance_id="A1", amount=100)],
        })
        kinds = build(payload).section_kinds

        for kind in (SectionKind.ITEMS, SectionKind.GST, SectionKind.PURCHASE,
                     SectionKind.CHIT, SectionKind.ADVANCE, SectionKind.NET):
            assert kind in kinds

    def test_gst_section_follows_toggle(self, estimation_payload):
        assert build(estimation_payload).has_section(SectionKind.GST)
        assert not build(estimation_payload, show_gst=False).has_section(SectionKind.GST)

    def test_party_section_needs_content(self, estimation_payload):
        payload = estimation_payload.model_copy(update={
            "customer": CustomerDetails(),
            "employee_name": None,
        })
        assert not build(payload).has_section(SectionKind.PARTY)

    def test_rates_need_items(self, issued_at):
        payload = ReceiptPayload(
            advance_items=[AdvanceItem(advance_id="A1", amount=100)],
            rates=MarketRates(gold_22k=6000, silver=80),
            issued_at=issued_at,
        )
        assert not build(payload).has_section(SectionKind.RATES)


class TestItemLayout:
    """Tests for item section layout per paper width"""

    def test_tabular_uses_column_scheme(self, estimation_payload):
        document = build(estimation_payload, paper_width="112mm")
        table = next(b for b in document.section(SectionKind.ITEMS).blocks if isinstance(b, Table))

        assert tuple(c.width for c in table.columns) == document.width_class.columns.widths
        assert table.rows[0].header is True
        assert table.rows[1].cells[0] == "GOLD RING"

    def test_narrow_has_no_table(self, estimation_payload):
        document = build(estimation_payload, paper_width="58mm")
        assert not any(isinstance(b, Table) for b in document.section(SectionKind.ITEMS).blocks)

    def test_totals_pair(self, estimation_payload):
        document = build(estimation_payload)
        pairs = [b for b in document.section(SectionKind.ITEMS).blocks if isinstance(b, Pair)]
        total = next(p for p in pairs if p.label == "TOTAL")
        assert total.value == "Rs.31,100"
        assert total.bold is True


class TestCaptions:
    """Tests for wastage and making-charge captions"""

    @pytest.fixture
    def priced(self, ring: EstimationItem):
        return price_item(ring)

    def caption_builder(self, **config) -> DocumentBuilder:
        receipt_config = ReceiptConfig(**config)
        return DocumentBuilder(
            ShopDetails(), receipt_config, LayoutPolicy().width_class("80mm")
        )

    def test_wastage_as_entered(self, priced):
        assert self.caption_builder().wastage_caption(priced) == "2%"

    def test_wastage_in_grams(self, priced):
        builder = self.caption_builder(wastage_display_type="grams")
        assert builder.wastage_caption(priced) == "0.200g"

    def test_making_charge_auto(self, priced):
        assert self.caption_builder().making_charge_caption(priced) == "500"
        assert self.caption_builder().making_charge_caption(priced, with_symbol=True) == "Rs.500"

    def test_making_charge_as_percentage(self, priced):
        builder = self.caption_builder(making_charge_display_type="percentage")
        assert builder.making_charge_caption(priced) == "1.67%"

    def test_making_charge_per_gram(self, priced):
        builder = self.caption_builder(making_charge_display_type="grams")
        assert builder.making_charge_caption(priced) == "50/g"

    def test_entered_percentage(self):
        item = EstimationItem(
            name="Chain", gross_weight=8, rate=6000,
            making_charge=12, making_charge_type="percentage",
        )
        builder = self.caption_builder(making_charge_display_type="fixed")
        assert builder.making_charge_caption(price_item(item)) == "5,760"


class TestFigureFit:
    """Tests for table figures wider than their column"""

    def test_wide_amount_moves_to_detail_row(self, issued_at):
        payload = ReceiptPayload(
            items=[EstimationItem(name="Gold Bar", gross_weight=1700, rate=6000)],
            issued_at=issued_at,
        )
        document = build(payload, paper_width="80mm")
        table = next(b for b in document.section(SectionKind.ITEMS).blocks if isinstance(b, Table))

        assert table.rows[1].cells[0] == "GOLD BAR"
        assert table.rows[1].cells[-1] == ""
        assert table.rows[2].detail is True
        assert table.rows[2].cells == ("  AMOUNT: 1,02,00,000",)

    def test_wide_amount_stays_on_wide_paper(self, issued_at):
        payload = ReceiptPayload(
            items=[EstimationItem(name="Gold Bar", gross_weight=1700, rate=6000)],
            issued_at=issued_at,
        )
        document = build(payload, paper_width="112mm")
        table = next(b for b in document.section(SectionKind.ITEMS).blocks if isinstance(b, Table))

        assert table.rows[1].cells[-1] == "1,02,00,000"
        assert not any("AMOUNT:" in row.cells[0] for row in table.rows)

    def test_wide_purchase_amount(self, issued_at):
        payload = ReceiptPayload(
            purchase_items=[PurchaseItem(category="Old Bar", gross_weight=2000, rate=6000)],
            issued_at=issued_at,
        )
        document = build(payload, paper_width="80mm")
        table = next(b for b in document.section(SectionKind.PURCHASE).blocks if isinstance(b, Table))

        assert table.rows[1].cells[-1] == ""
        assert table.rows[2].cells == ("  AMOUNT: 1,20,00,000",)


class TestGstSplit:
    """Tests for the CGST and SGST lines"""

    def test_halves_add_up_to_rounded_gst(self, estimation_payload):
        document = build(estimation_payload)
        pairs = [b for b in document.section(SectionKind.GST).blocks if isinstance(b, Pair)]

        assert pairs[0].label == "CGST (1.5%)"
        assert pairs[0].value == "Rs.467"
        assert pairs[1].label == "SGST (1.5%)"
        assert pairs[1].value == "Rs.466"
        assert pairs[2].value == "Rs.32,033"
