"""
Pricing module
"""

from jewel_receipt.pricing.calculator import (
    DEFAULT_GST_PERCENT,
    TotalsCalculator,
    gold_value,
    gst_value,
    making_charge_value,
    price_item,
    wastage_value,
)

__all__ = [
    "DEFAULT_GST_PERCENT",
    "TotalsCalculator",
    "gold_value",
    "gst_value",
    "making_charge_value",
    "price_item",
    "wastage_value",
]
