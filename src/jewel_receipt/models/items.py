"""Line-item models: merchandise, old-metal purchases, chit and advance deductions"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from jewel_receipt.utils.numbers import parse_number


class Metal(str, Enum):
    """Metal types"""
    GOLD = "GOLD"
    SILVER = "SILVER"


class WastageType(str, Enum):
    """How wastage (VA) is expressed"""
    PERCENTAGE = "percentage"
    GRAMS = "grams"

    @classmethod
    def _missing_(cls, value: object) -> Optional["WastageType"]:
        # older records stored grams-based wastage as "weight"
        if value == "weight":
            return cls.GRAMS
        return None


class MakingChargeType(str, Enum):
    """How the making charge is expressed"""
    PERCENTAGE = "percentage"
    PER_GRAM = "perGram"
    FIXED = "fixed"


class LessWeightType(str, Enum):
    """How the deduction on an old-metal purchase is expressed"""
    GRAMS = "grams"
    PERCENTAGE = "percentage"
    AMOUNT = "amount"


class EstimationItem(BaseModel):
    """Priced merchandise item on an estimation"""

    name: str = Field(..., description="Item name")
    tag_number: Optional[str] = Field(None, description="Tag identifier")
    sub_product_name: Optional[str] = Field(None, description="Sub-product name")
    pcs: int = Field(1, description="Piece count")
    gross_weight: float = Field(0.0, description="Gross weight in grams")
    stone_weight: float = Field(0.0, description="Stone weight in grams")
    metal: Metal = Field(Metal.GOLD, description="Metal")
    purity: float = Field(22.0, description="Purity (karat for gold)")
    rate: float = Field(0.0, description="Rate per gram")
    wastage: float = Field(0.0, description="Wastage (VA) value")
    wastage_type: WastageType = Field(WastageType.PERCENTAGE, description="Wastage type")
    making_charge: float = Field(0.0, description="Making charge value")
    making_charge_type: MakingChargeType = Field(
        MakingChargeType.FIXED, description="Making charge type"
    )
    hsn_code: Optional[str] = Field(None, description="HSN code")

    model_config = {
        "str_strip_whitespace": True,
    }

    @field_validator(
        "gross_weight", "stone_weight", "purity", "rate", "wastage", "making_charge",
        mode="before",
    )
    @classmethod
    def parse_numeric(cls, v: Any) -> float:
        """Unparseable numbers count as zero"""
        return parse_number(v)

    @field_validator("pcs", mode="before")
    @classmethod
    def parse_count(cls, v: Any) -> int:
        return int(parse_number(v))

    @field_validator("tag_number", "hsn_code", mode="before")
    @classmethod
    def stringify_code(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)

    @property
    def net_weight(self) -> float:
        """Gross weight less stone weight"""
        return max(0.0, self.gross_weight - self.stone_weight)


class PurchaseItem(BaseModel):
    """Old metal bought back from the customer"""

    category: str = Field(..., description="Category name")
    sub_category: Optional[str] = Field(None, description="Sub-category name")
    metal: Metal = Field(Metal.GOLD, description="Metal")
    purity: float = Field(0.0, description="Purity")
    pcs: int = Field(1, description="Piece count")
    gross_weight: float = Field(0.0, description="Gross weight in grams")
    less_weight: float = Field(0.0, description="Deduction value")
    less_weight_type: LessWeightType = Field(
        LessWeightType.GRAMS, description="Deduction type"
    )
    rate: float = Field(0.0, description="Rate per gram")

    model_config = {
        "str_strip_whitespace": True,
    }

    @field_validator("purity", "gross_weight", "less_weight", "rate", mode="before")
    @classmethod
    def parse_numeric(cls, v: Any) -> float:
        """Unparseable numbers count as zero"""
        return parse_number(v)

    @field_validator("pcs", mode="before")
    @classmethod
    def parse_count(cls, v: Any) -> int:
        return int(parse_number(v))

    @property
    def net_weight(self) -> float:
        """Gross weight after the deduction (money deductions leave weight alone)"""
        if self.less_weight_type == LessWeightType.PERCENTAGE:
            return self.gross_weight - (self.gross_weight * self.less_weight) / 100
        if self.less_weight_type == LessWeightType.AMOUNT:
            return self.gross_weight
        return max(0.0, self.gross_weight - self.less_weight)

    @property
    def less_weight_grams(self) -> float:
        """Weight removed by the deduction"""
        return self.gross_weight - self.net_weight

    @property
    def amount(self) -> float:
        """Value paid out for the old metal"""
        value = self.net_weight * self.rate
        if self.less_weight_type == LessWeightType.AMOUNT:
            return max(0.0, value - self.less_weight)
        return value


class ChitItem(BaseModel):
    """Savings-scheme deduction"""

    chit_id: str = Field(..., description="Scheme identifier")
    amount: float = Field(0.0, description="Amount")

    @field_validator("chit_id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> str:
        return str(v)

    @field_validator("amount", mode="before")
    @classmethod
    def parse_numeric(cls, v: Any) -> float:
        return parse_number(v)


class AdvanceItem(BaseModel):
    """Previously paid cash advance"""

    advance_id: str = Field(..., description="Advance identifier")
    amount: float = Field(0.0, description="Amount")

    @field_validator("advance_id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> str:
        return str(v)

    @field_validator("amount", mode="before")
    @classmethod
    def parse_numeric(cls, v: Any) -> float:
        return parse_number(v)
