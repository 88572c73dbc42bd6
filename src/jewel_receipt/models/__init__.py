"""
Data models
"""

from jewel_receipt.models.items import (
    AdvanceItem,
    ChitItem,
    EstimationItem,
    LessWeightType,
    MakingChargeType,
    Metal,
    PurchaseItem,
    WastageType,
)
from jewel_receipt.models.party import (
    CustomerDetails,
    MarketRates,
    ReceiptPayload,
    ShopDetails,
)
from jewel_receipt.models.repair import RepairOrder
from jewel_receipt.models.totals import PricedItem, Totals

__all__ = [
    "AdvanceItem",
    "ChitItem",
    "EstimationItem",
    "LessWeightType",
    "MakingChargeType",
    "Metal",
    "PurchaseItem",
    "WastageType",
    "CustomerDetails",
    "MarketRates",
    "ReceiptPayload",
    "ShopDetails",
    "RepairOrder",
    "PricedItem",
    "Totals",
]
