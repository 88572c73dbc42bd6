"""
Receipt composer

Entry point for rendering. A composer is bound to a shop and a
configuration; each call resolves the paper width and the totals once,
builds one ``ReceiptDocument`` and hands it to the requested renderer.
Nothing is returned or written unless the whole receipt rendered.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple

from jewel_receipt.composer.service_receipts import (
    compose_delivery_receipt,
    compose_repair_receipt,
    compose_test_print,
)
from jewel_receipt.config.labels import ReceiptLabels
from jewel_receipt.config.receipt_config import ReceiptConfig
from jewel_receipt.document.blocks import ReceiptDocument
from jewel_receipt.document.builder import DocumentBuilder
from jewel_receipt.exceptions import RenderError, TransportError
from jewel_receipt.layout.layout_policy import LayoutPolicy, WidthClass
from jewel_receipt.models.party import ReceiptPayload, ShopDetails
from jewel_receipt.models.repair import RepairOrder
from jewel_receipt.models.totals import Totals
from jewel_receipt.pricing.calculator import TotalsCalculator
from jewel_receipt.render.html import HtmlRenderer
from jewel_receipt.render.thermal import ThermalRenderer
from jewel_receipt.transport.base import PrintTransport, WriteResult

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    """Output encodings"""
    THERMAL = "thermal"
    HTML = "html"


@dataclass(frozen=True)
class RenderedReceipt:
    """A rendered receipt together with the figures it shows"""
    format: OutputFormat
    content: str
    totals: Totals
    width_class: WidthClass
    title: str = ""


@dataclass(frozen=True)
class PrintOutcome:
    """Result of a print request, including any fallback attempt"""
    success: bool
    format: OutputFormat
    result: WriteResult
    totals: Totals
    fallback_result: Optional[WriteResult] = None

    @property
    def used_fallback(self) -> bool:
        return self.fallback_result is not None


class ReceiptComposer:
    """
    ReceiptComposer class
    Composes receipts and drives the thermal and HTML renderers

    Example:
        >>> composer = ReceiptComposer(shop, ReceiptConfig(paper_width="80mm"))
        >>> receipt = composer.render_thermal(payload)
        >>> receipt.totals.net_payable
    """

    def __init__(
        self,
        shop: Optional[ShopDetails] = None,
        config: Optional[ReceiptConfig] = None,
        labels: Optional[ReceiptLabels] = None,
        policy: Optional[LayoutPolicy] = None,
    ) -> None:
        self.shop = shop or ShopDetails()
        self.config = config or ReceiptConfig()
        self.labels = labels or ReceiptLabels()
        self.policy = policy or LayoutPolicy()
        self.thermal = ThermalRenderer(feed_lines=self.config.feed_lines)
        self.html = HtmlRenderer()

    def builder(self) -> DocumentBuilder:
        """
        Builder for the configured paper width

        Raises:
            UnsupportedPaperWidthError: If the paper width has no layout
        """
        width_class = self.policy.width_class(self.config.paper_width)
        return DocumentBuilder(self.shop, self.config, width_class, self.labels)

    def calculate(self, payload: ReceiptPayload) -> Totals:
        return TotalsCalculator(self.config.gst_percent).calculate(
            payload.items,
            payload.purchase_items,
            payload.chit_items,
            payload.advance_items,
        )

    def compose(self, payload: ReceiptPayload) -> ReceiptDocument:
        """
        Build the receipt document for a payload

        Args:
            payload: Transaction data

        Returns:
            The composed document

        Raises:
            RenderError: If the receipt cannot be composed
        """
        try:
            builder = self.builder()
            totals = self.calculate(payload)
            return builder.build(payload, totals)
        except RenderError:
            raise
        except (ValueError, TypeError, ArithmeticError, KeyError, AttributeError) as e:
            raise RenderError(f"Failed to compose receipt: {e}", cause=e) from e

    def render_document(
        self, document: ReceiptDocument, fmt: OutputFormat
    ) -> RenderedReceipt:
        """Render an already composed document"""
        fmt = OutputFormat(fmt)
        try:
            if fmt == OutputFormat.THERMAL:
                content = self.thermal.render(document)
            else:
                content = self.html.render(document)
        except RenderError:
            raise
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            raise RenderError(f"Failed to render {fmt.value} receipt: {e}", cause=e) from e

        return RenderedReceipt(
            format=fmt,
            content=content,
            totals=document.totals,
            width_class=document.width_class,
            title=document.title,
        )

    def render_thermal(self, payload: ReceiptPayload) -> RenderedReceipt:
        return self.render_document(self.compose(payload), OutputFormat.THERMAL)

    def render_html(self, payload: ReceiptPayload) -> RenderedReceipt:
        return self.render_document(self.compose(payload), OutputFormat.HTML)

    def render_both(
        self, payload: ReceiptPayload
    ) -> Tuple[RenderedReceipt, RenderedReceipt]:
        """Thermal stream and HTML preview from a single composition"""
        document = self.compose(payload)
        return (
            self.render_document(document, OutputFormat.THERMAL),
            self.render_document(document, OutputFormat.HTML),
        )

    def render_separate(
        self, payload: ReceiptPayload, fmt: OutputFormat = OutputFormat.THERMAL
    ) -> List[RenderedReceipt]:
        """
        One receipt per entry: items, then purchases, chits and advances

        Every receipt keeps the payload's customer, operator, rates and
        issue time. All receipts are rendered before any is returned.
        """
        shared = {"items": [], "purchase_items": [], "chit_items": [], "advance_items": []}
        singles: List[ReceiptPayload] = []
        for field_name in ("items", "purchase_items", "chit_items", "advance_items"):
            for entry in getattr(payload, field_name):
                singles.append(payload.model_copy(update={**shared, field_name: [entry]}))

        logger.debug("Rendering %d separate receipts", len(singles))
        return [self.render_document(self.compose(single), fmt) for single in singles]

    def render(
        self, payload: ReceiptPayload, fmt: OutputFormat = OutputFormat.THERMAL
    ) -> List[RenderedReceipt]:
        """Render one merged receipt, or one per entry when merge_print is off"""
        if self.config.merge_print or payload.entry_count <= 1:
            return [self.render_document(self.compose(payload), fmt)]
        return self.render_separate(payload, fmt)

    def print_receipt(
        self,
        payload: ReceiptPayload,
        transport: PrintTransport,
        fallback: Optional[PrintTransport] = None,
    ) -> PrintOutcome:
        """
        Render and send a receipt to a thermal transport

        The stream is rendered and encoded in full before the single
        write. When the write fails and a fallback transport is given,
        the same composed document is rendered as HTML and sent there.

        Args:
            payload: Transaction data
            transport: Thermal printer sink
            fallback: Sink for the HTML rendering (optional)

        Returns:
            PrintOutcome describing what was written where

        Raises:
            RenderError: If the receipt cannot be rendered
        """
        document = self.compose(payload)
        stream = self.render_document(document, OutputFormat.THERMAL).content
        data = self.thermal.encode(stream, self.config.thermal_encoding)

        logger.info("Sending %r to printer (%d bytes)", document.title, len(data))
        result = self._write(transport, data)
        if result.success:
            return PrintOutcome(
                success=True,
                format=OutputFormat.THERMAL,
                result=result,
                totals=document.totals,
            )

        logger.warning("Thermal print failed: %s", result.error)
        if fallback is None:
            return PrintOutcome(
                success=False,
                format=OutputFormat.THERMAL,
                result=result,
                totals=document.totals,
            )

        page = self.render_document(document, OutputFormat.HTML).content
        logger.warning("Falling back to HTML print (%d characters)", len(page))
        fallback_result = self._write(fallback, page.encode("utf-8"))
        if not fallback_result.success:
            logger.warning("HTML fallback print failed: %s", fallback_result.error)

        return PrintOutcome(
            success=fallback_result.success,
            format=OutputFormat.HTML,
            result=result,
            totals=document.totals,
            fallback_result=fallback_result,
        )

    @staticmethod
    def _write(transport: PrintTransport, data: bytes) -> WriteResult:
        try:
            return transport.write(data)
        except TransportError as e:
            return WriteResult.failed(str(e))

    # ------------------------------------------------------------------
    # Service slips
    # ------------------------------------------------------------------

    def compose_repair(
        self, repair: RepairOrder, employee_name: Optional[str] = None
    ) -> ReceiptDocument:
        return compose_repair_receipt(self.builder(), repair, employee_name)

    def compose_delivery(
        self,
        repair: RepairOrder,
        extra_amount: float = 0.0,
        gst_amount: float = 0.0,
        employee_name: Optional[str] = None,
        delivered_at: Optional[datetime] = None,
    ) -> ReceiptDocument:
        return compose_delivery_receipt(
            self.builder(), repair, extra_amount, gst_amount, employee_name, delivered_at
        )

    def compose_test_print(
        self, employee_name: Optional[str] = None, printed_at: Optional[datetime] = None
    ) -> ReceiptDocument:
        return compose_test_print(self.builder(), employee_name, printed_at)
