"""
Receipt Configuration Types and Schema
Type-safe display policy consumed by the composer and renderers
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class WastageDisplayType(str, Enum):
    """How wastage is captioned on the receipt"""
    PERCENTAGE = "percentage"
    GRAMS = "grams"


class MakingChargeDisplayType(str, Enum):
    """How the making charge is captioned on the receipt"""
    AUTO = "auto"
    PERCENTAGE = "percentage"
    GRAMS = "grams"
    FIXED = "fixed"


SUPPORTED_PAPER_WIDTHS = ("58mm", "80mm", "112mm")


class ConfigDefaults:
    """Default configuration values"""
    PAPER_WIDTH = "58mm"
    GST_PERCENT = 3.0
    CURRENCY_SYMBOL = "Rs."
    THERMAL_ENCODING = "utf-8"
    FEED_LINES = 4


# Environment variable mapping
ENV_VAR_MAPPING = {
    "RECEIPT_SHOW_HEADER": "show_header",
    "RECEIPT_SHOW_FOOTER": "show_footer",
    "RECEIPT_SHOW_OPERATOR": "show_operator",
    "RECEIPT_SHOW_CUSTOMER": "show_customer",
    "RECEIPT_SHOW_CUSTOMER_NAME": "show_customer_name",
    "RECEIPT_SHOW_CUSTOMER_MOBILE": "show_customer_mobile",
    "RECEIPT_SHOW_CUSTOMER_ADDRESS": "show_customer_address",
    "RECEIPT_SHOW_GST": "show_gst",
    "RECEIPT_SHOW_WASTAGE": "show_wastage",
    "RECEIPT_SHOW_MAKING_CHARGE": "show_making_charge",
    "RECEIPT_SHOW_DEVICE_NAME": "show_device_name",
    "RECEIPT_WASTAGE_DISPLAY_TYPE": "wastage_display_type",
    "RECEIPT_MAKING_CHARGE_DISPLAY_TYPE": "making_charge_display_type",
    "RECEIPT_PAPER_WIDTH": "paper_width",
    "RECEIPT_MERGE_PRINT": "merge_print",
    "RECEIPT_GST_PERCENT": "gst_percent",
    "RECEIPT_CURRENCY_SYMBOL": "currency_symbol",
    "RECEIPT_THERMAL_ENCODING": "thermal_encoding",
    "RECEIPT_FEED_LINES": "feed_lines",
}

BOOLEAN_FIELDS = tuple(
    key for key in ENV_VAR_MAPPING.values()
    if key.startswith("show_") or key == "merge_print"
)


class ReceiptConfig(BaseModel):
    """
    Main receipt configuration class
    Flat set of display toggles; read-only once built

    ``paper_width`` is kept as the raw configured string. It is mapped
    to a layout tier by ``LayoutPolicy``, which reports unsupported
    values as a typed render failure.
    """

    # Section toggles
    show_header: bool = Field(default=True, description="Print the shop header")
    show_footer: bool = Field(default=True, description="Print the footer message")
    show_operator: bool = Field(default=True, description="Print the operator name")
    show_customer: bool = Field(default=True, description="Print the customer block")
    show_customer_name: bool = Field(default=True, description="Print customer name")
    show_customer_mobile: bool = Field(default=True, description="Print customer mobile")
    show_customer_address: bool = Field(default=True, description="Print customer address")
    show_gst: bool = Field(default=True, description="Print GST lines and GSTIN")
    show_wastage: bool = Field(default=True, description="Print wastage (VA) details")
    show_making_charge: bool = Field(default=True, description="Print making charge details")
    show_device_name: bool = Field(default=True, description="Print the device label")

    # Caption styles
    wastage_display_type: WastageDisplayType = Field(
        default=WastageDisplayType.PERCENTAGE,
        description="Show wastage as configured value or as grams"
    )
    making_charge_display_type: MakingChargeDisplayType = Field(
        default=MakingChargeDisplayType.AUTO,
        description="Caption style for the making charge"
    )

    # Layout
    paper_width: str = Field(
        default=ConfigDefaults.PAPER_WIDTH,
        description="Paper width: '58mm', '80mm' or '112mm'"
    )
    merge_print: bool = Field(
        default=True,
        description="Print all entries on one receipt instead of one receipt each"
    )

    # Arithmetic and encoding
    gst_percent: float = Field(
        default=ConfigDefaults.GST_PERCENT,
        description="GST rate applied to the taxable value",
        ge=0,
        le=100
    )
    currency_symbol: str = Field(
        default=ConfigDefaults.CURRENCY_SYMBOL,
        description="Currency prefix for money figures"
    )
    thermal_encoding: str = Field(
        default=ConfigDefaults.THERMAL_ENCODING,
        description="Codec used to turn the thermal stream into bytes"
    )
    feed_lines: int = Field(
        default=ConfigDefaults.FEED_LINES,
        description="Blank lines fed after a thermal receipt",
        ge=0,
        le=20
    )

    model_config = {
        "str_strip_whitespace": True,
        "frozen": True,
    }

    @field_validator("paper_width", mode="before")
    @classmethod
    def normalize_paper_width(cls, v: object) -> str:
        """Accept '80', 80 or ' 80MM ' as '80mm'"""
        text = str(v).strip().lower()
        if text.isdigit():
            text = f"{text}mm"
        return text
