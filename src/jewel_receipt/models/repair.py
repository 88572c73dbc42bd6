"""Repair order model"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from jewel_receipt.utils.numbers import parse_number


class RepairOrder(BaseModel):
    """Repair job as handed over at intake and at delivery"""

    id: str = Field(..., description="Repair number")
    item_name: str = Field("", description="Item under repair")
    sub_product_name: Optional[str] = Field(None, description="Sub-product name")
    issue: Optional[str] = Field(None, description="Reported issue")
    amount: float = Field(0.0, description="Quoted amount (0 = advance + balance)")
    advance: float = Field(0.0, description="Advance paid")
    balance: float = Field(0.0, description="Balance due")
    status: str = Field("PENDING", description="Repair status")
    date: datetime = Field(default_factory=datetime.now)
    due_date: Optional[datetime] = Field(None, description="Promised delivery date")
    customer_name: Optional[str] = Field(None, description="Customer name")
    customer_mobile: Optional[str] = Field(None, description="Customer mobile")
    emp_id: Optional[str] = Field(None, description="Employee who booked the job")

    model_config = {
        "str_strip_whitespace": True,
    }

    @field_validator("id", "customer_mobile", "emp_id", mode="before")
    @classmethod
    def stringify(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)

    @field_validator("amount", "advance", "balance", mode="before")
    @classmethod
    def parse_numeric(cls, v: Any) -> float:
        return parse_number(v)

    @property
    def total_amount(self) -> float:
        return self.amount or (self.advance + self.balance)
