"""
Totals calculator

Pure arithmetic over the line items of a receipt. The same inputs
always give the same ``Totals``, so a receipt can be re-rendered for
another sink without drift.
"""

import logging
from typing import Sequence

from jewel_receipt.models.items import (
    AdvanceItem,
    ChitItem,
    EstimationItem,
    MakingChargeType,
    PurchaseItem,
    WastageType,
)
from jewel_receipt.models.totals import PricedItem, Totals

logger = logging.getLogger(__name__)

DEFAULT_GST_PERCENT = 3.0


def gold_value(net_weight: float, rate: float) -> float:
    return net_weight * rate


def wastage_value(
    net_weight: float, wastage: float, wastage_type: WastageType, rate: float
) -> float:
    """
    Value of the wastage (VA) charge

    Percentage wastage is a share of the net weight; gram wastage is
    an absolute weight. Either way it is charged at the metal rate.
    """
    if wastage_type == WastageType.PERCENTAGE:
        return net_weight * wastage / 100 * rate
    return wastage * rate


def making_charge_value(
    net_weight: float,
    rate: float,
    making_charge: float,
    making_charge_type: MakingChargeType,
) -> float:
    """Value of the making charge"""
    if making_charge_type == MakingChargeType.PERCENTAGE:
        return net_weight * rate * making_charge / 100
    if making_charge_type == MakingChargeType.PER_GRAM:
        return net_weight * making_charge
    return making_charge


def gst_value(taxable: float, gst_percent: float = DEFAULT_GST_PERCENT) -> float:
    return taxable * gst_percent / 100


def price_item(
    item: EstimationItem, gst_percent: float = DEFAULT_GST_PERCENT
) -> PricedItem:
    """Compute the derived values of one estimation item"""
    net = item.net_weight
    gold = gold_value(net, item.rate)
    wastage = wastage_value(net, item.wastage, item.wastage_type, item.rate)
    making = making_charge_value(
        net, item.rate, item.making_charge, item.making_charge_type
    )
    return PricedItem(
        item=item,
        gold_value=gold,
        wastage_value=wastage,
        making_charge_value=making,
        gst_value=gst_value(gold + wastage + making, gst_percent),
    )


class TotalsCalculator:
    """
    TotalsCalculator class
    Aggregates items and deductions into a ``Totals`` structure

    Example:
        >>> calc = TotalsCalculator()
        >>> totals = calc.calculate(items, purchases, chits, advances)
        >>> totals.net_payable
    """

    def __init__(self, gst_percent: float = DEFAULT_GST_PERCENT) -> None:
        self.gst_percent = gst_percent

    def calculate(
        self,
        items: Sequence[EstimationItem] = (),
        purchase_items: Sequence[PurchaseItem] = (),
        chit_items: Sequence[ChitItem] = (),
        advance_items: Sequence[AdvanceItem] = (),
    ) -> Totals:
        """
        Compute receipt totals

        GST is levied on the aggregate taxable value and only when at
        least one estimation item is present; deduction-only receipts
        carry no tax.

        Args:
            items: Merchandise items
            purchase_items: Old-metal purchases
            chit_items: Chit scheme deductions
            advance_items: Advance deductions

        Returns:
            Totals at full precision
        """
        priced = tuple(price_item(item, self.gst_percent) for item in items)

        taxable = sum(p.taxable_value for p in priced)
        total_gst = gst_value(taxable, self.gst_percent) if priced else 0.0

        totals = Totals(
            total_pcs=sum(item.pcs for item in items),
            total_gross_weight=sum(item.gross_weight for item in items),
            total_net_weight=sum(item.net_weight for item in items),
            total_taxable_value=taxable,
            total_gst=total_gst,
            gst_percent=self.gst_percent if priced else 0.0,
            estimation_amount=taxable + total_gst,
            total_purchase_amount=sum(p.amount for p in purchase_items),
            total_purchase_weight=sum(p.net_weight for p in purchase_items),
            total_chit_amount=sum(c.amount for c in chit_items),
            total_advance_amount=sum(a.amount for a in advance_items),
            priced_items=priced,
        )

        logger.debug(
            "Totals computed: taxable=%.4f gst=%.4f deductions=%.4f net=%.4f",
            totals.total_taxable_value,
            totals.total_gst,
            totals.total_deductions,
            totals.net_payable,
        )
        return totals
