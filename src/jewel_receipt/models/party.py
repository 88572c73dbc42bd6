"""Shop, customer and transaction payload models"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from jewel_receipt.models.items import (
    AdvanceItem,
    ChitItem,
    EstimationItem,
    PurchaseItem,
)
from jewel_receipt.utils.numbers import parse_number


class ShopDetails(BaseModel):
    """Display-only shop metadata; a blank field suppresses its line"""

    name: Optional[str] = Field(None, description="Shop name")
    address: Optional[str] = Field(None, description="Shop address")
    phone: Optional[str] = Field(None, description="Shop phone number")
    gst_number: Optional[str] = Field(None, description="GSTIN")
    device_name: Optional[str] = Field(None, description="Device label")
    footer_message: Optional[str] = Field(None, description="Footer message")

    model_config = {
        "str_strip_whitespace": True,
        "frozen": True,
    }


class CustomerDetails(BaseModel):
    """Customer shown on the receipt"""

    name: Optional[str] = Field(None, description="Customer name")
    mobile: Optional[str] = Field(None, description="Mobile number")
    address: Optional[str] = Field(None, description="Place / address")

    model_config = {
        "str_strip_whitespace": True,
    }

    @field_validator("mobile", mode="before")
    @classmethod
    def stringify_mobile(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)

    def is_empty(self) -> bool:
        return not (self.name or self.mobile or self.address)


class MarketRates(BaseModel):
    """Board rates printed on estimation slips"""

    gold_24k: float = Field(0.0, description="24k gold rate per gram")
    gold_22k: float = Field(0.0, description="22k gold rate per gram")
    gold_18k: float = Field(0.0, description="18k gold rate per gram")
    silver: float = Field(0.0, description="Silver rate per gram")

    @field_validator("gold_24k", "gold_22k", "gold_18k", "silver", mode="before")
    @classmethod
    def parse_numeric(cls, v: Any) -> float:
        return parse_number(v)


class ReceiptPayload(BaseModel):
    """
    Everything a single receipt is rendered from

    The caller assembles the collections in display order.
    ``issued_at`` is fixed at construction so re-rendering the same
    payload produces identical output.
    """

    items: List[EstimationItem] = Field(default_factory=list)
    purchase_items: List[PurchaseItem] = Field(default_factory=list)
    chit_items: List[ChitItem] = Field(default_factory=list)
    advance_items: List[AdvanceItem] = Field(default_factory=list)
    customer: Optional[CustomerDetails] = Field(None, description="Customer")
    employee_name: Optional[str] = Field(None, description="Operator name")
    estimation_number: Optional[int] = Field(
        None, description="Estimation sequence number for the business day"
    )
    rates: Optional[MarketRates] = Field(None, description="Board rates")
    issued_at: datetime = Field(default_factory=datetime.now)

    @property
    def has_items(self) -> bool:
        return len(self.items) > 0

    @property
    def has_purchase(self) -> bool:
        return len(self.purchase_items) > 0

    @property
    def has_chit(self) -> bool:
        return len(self.chit_items) > 0

    @property
    def has_advance(self) -> bool:
        return len(self.advance_items) > 0

    @property
    def entry_count(self) -> int:
        return (
            len(self.items)
            + len(self.purchase_items)
            + len(self.chit_items)
            + len(self.advance_items)
        )
