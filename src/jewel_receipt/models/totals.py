"""Derived figures; never persisted"""

from dataclasses import dataclass, field
from typing import Tuple

from jewel_receipt.models.items import EstimationItem, WastageType


@dataclass(frozen=True)
class PricedItem:
    """An estimation item with its computed values"""
    item: EstimationItem
    gold_value: float
    wastage_value: float
    making_charge_value: float
    gst_value: float

    @property
    def taxable_value(self) -> float:
        """Value before GST"""
        return self.gold_value + self.wastage_value + self.making_charge_value

    @property
    def total_value(self) -> float:
        return self.taxable_value + self.gst_value

    @property
    def wastage_weight(self) -> float:
        """Wastage expressed in grams"""
        if self.item.wastage_type == WastageType.PERCENTAGE:
            return self.item.net_weight * self.item.wastage / 100
        return self.item.wastage


@dataclass(frozen=True)
class Totals:
    """Aggregate figures shared by every renderer"""
    total_pcs: int = 0
    total_gross_weight: float = 0.0
    total_net_weight: float = 0.0
    total_taxable_value: float = 0.0
    total_gst: float = 0.0
    gst_percent: float = 0.0
    estimation_amount: float = 0.0
    total_purchase_amount: float = 0.0
    total_purchase_weight: float = 0.0
    total_chit_amount: float = 0.0
    total_advance_amount: float = 0.0
    priced_items: Tuple[PricedItem, ...] = field(default_factory=tuple)

    @property
    def cgst(self) -> float:
        return self.total_gst / 2

    @property
    def sgst(self) -> float:
        return self.total_gst / 2

    @property
    def total_deductions(self) -> float:
        return (
            self.total_purchase_amount
            + self.total_chit_amount
            + self.total_advance_amount
        )

    @property
    def net_payable(self) -> float:
        """Settlement amount; negative means a credit owed to the customer"""
        return self.estimation_amount - self.total_deductions

    @property
    def is_credit(self) -> bool:
        return self.net_payable < 0
