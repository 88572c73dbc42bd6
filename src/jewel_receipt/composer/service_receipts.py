"""
Repair, delivery and printer-test slips

These slips share the shop header, footer and both renderers with the
estimation receipt but carry their own body.
"""

from datetime import datetime
from typing import List, Optional

from jewel_receipt.document.blocks import (
    Block,
    Line,
    Pair,
    ReceiptDocument,
    Rule,
    Section,
    SectionKind,
    Style,
)
from jewel_receipt.document.builder import DATE_FORMAT, DocumentBuilder
from jewel_receipt.layout.text import Align
from jewel_receipt.models.repair import RepairOrder


def _document(
    builder: DocumentBuilder,
    title: str,
    issued_at: datetime,
    body: List[Block],
) -> ReceiptDocument:
    sections = [
        builder.header_section(),
        Section(SectionKind.TITLE, (
            Line(title, align=Align.CENTER, bold=True, style=Style.TITLE),
            builder.date_line(issued_at),
            Rule(),
        )),
        Section(SectionKind.SERVICE, tuple(body)),
        builder.footer_section(),
    ]
    return ReceiptDocument(
        title=title,
        width_class=builder.width_class,
        sections=tuple(s for s in sections if s is not None),
        issued_at=issued_at,
    )


def _customer_block(builder: DocumentBuilder, repair: RepairOrder) -> List[Block]:
    config = builder.config
    labels = builder.labels
    blocks: List[Block] = []
    if not config.show_customer:
        return blocks
    if repair.customer_name and config.show_customer_name:
        blocks.append(Pair(f"{labels.customer}:", repair.customer_name.upper()))
    if repair.customer_mobile and config.show_customer_mobile:
        blocks.append(Pair(f"{labels.customer_phone}:", repair.customer_mobile))
    if blocks:
        blocks.append(Rule())
    return blocks


def _item_block(builder: DocumentBuilder, repair: RepairOrder, amount: float) -> List[Block]:
    labels = builder.labels
    blocks: List[Block] = [
        Pair(labels.item, labels.amount, bold=True),
        Rule(),
        Pair(repair.item_name.upper(), builder.money(amount), bold=True),
    ]
    if repair.sub_product_name:
        blocks.append(Line(f"  {repair.sub_product_name}", style=Style.DETAIL))
    return blocks


def _operator_line(
    builder: DocumentBuilder, repair: Optional[RepairOrder], employee_name: Optional[str]
) -> List[Block]:
    operator = employee_name or (repair.emp_id if repair is not None else None)
    if not builder.config.show_operator or not operator:
        return []
    return [Pair(f"{builder.labels.operator}:", operator, style=Style.EMPLOYEE)]


def compose_repair_receipt(
    builder: DocumentBuilder,
    repair: RepairOrder,
    employee_name: Optional[str] = None,
) -> ReceiptDocument:
    """
    Repair intake slip handed over when a job is booked

    Args:
        builder: Builder bound to the shop, configuration and paper width
        repair: The booked job
        employee_name: Operator; falls back to the job's employee id
    """
    labels = builder.labels
    body: List[Block] = [Pair(f"{labels.repair_number}:", repair.id)]
    if repair.due_date is not None:
        body.append(Pair(f"{labels.due_date}:", repair.due_date.strftime(DATE_FORMAT)))
    body.append(Rule())

    body.extend(_customer_block(builder, repair))
    body.extend(_item_block(builder, repair, repair.total_amount))
    body.append(Line(f"  {labels.issue.title()}: {repair.issue or 'N/A'}", style=Style.DETAIL))
    body.append(Rule())
    body.append(Pair(f"{labels.advance_paid}:", builder.money(repair.advance)))
    body.append(Pair(f"{labels.balance_due}:", builder.money(repair.balance)))
    body.append(Rule(heavy=True))
    body.append(Pair(f"{labels.total}:", builder.money(repair.total_amount), bold=True))
    body.append(Rule(heavy=True))
    body.append(Pair(f"{labels.status}:", repair.status))
    body.extend(_operator_line(builder, repair, employee_name))

    return _document(builder, labels.repair_receipt, repair.date, body)


def compose_delivery_receipt(
    builder: DocumentBuilder,
    repair: RepairOrder,
    extra_amount: float = 0.0,
    gst_amount: float = 0.0,
    employee_name: Optional[str] = None,
    delivered_at: Optional[datetime] = None,
) -> ReceiptDocument:
    """
    Delivery slip handed over when a repaired item is collected

    The customer pays the outstanding balance plus any extra work and
    its GST; the advance was settled at intake.
    """
    labels = builder.labels
    total_paid = repair.balance + extra_amount + gst_amount
    delivered_at = delivered_at or datetime.now()

    body: List[Block] = [Pair(f"{labels.repair_number}:", repair.id), Rule()]
    body.extend(_customer_block(builder, repair))
    body.extend(_item_block(builder, repair, repair.balance))
    body.append(Line(f"  {labels.status.title()}: {repair.status}", style=Style.DETAIL))
    body.append(Rule())
    body.append(Pair(f"{labels.advance_paid}:", builder.money(repair.advance)))
    body.append(Pair(f"{labels.balance_due}:", builder.money(repair.balance)))
    if extra_amount > 0:
        body.append(Pair(f"{labels.extra_amount}:", builder.money(extra_amount)))
    if gst_amount > 0:
        body.append(Pair(f"{labels.gst}:", builder.money(gst_amount)))
    body.append(Rule(heavy=True))
    body.append(Pair(f"{labels.total_paid}:", builder.money(total_paid), bold=True))
    body.append(Rule(heavy=True))
    body.extend(_operator_line(builder, repair, employee_name))

    return _document(builder, labels.delivery_receipt, delivered_at, body)


def compose_test_print(
    builder: DocumentBuilder,
    employee_name: Optional[str] = None,
    printed_at: Optional[datetime] = None,
) -> ReceiptDocument:
    """Printer test slip: shop header, a status line and the operator"""
    body: List[Block] = [
        Line(builder.labels.status_ok, align=Align.CENTER, bold=True),
        Rule(),
    ]
    body.extend(_operator_line(builder, None, employee_name))
    return _document(
        builder, builder.labels.test_print, printed_at or datetime.now(), body
    )
