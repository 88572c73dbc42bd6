"""
Jewel Receipt rendering engine for Python

Main entry point for the package
"""

from jewel_receipt.composer import (
    OutputFormat,
    PrintOutcome,
    ReceiptComposer,
    RenderedReceipt,
)
from jewel_receipt.exceptions import (
    ReceiptError,
    ReceiptErrorCategory,
    ValidationError,
    ConfigError,
    RenderError,
    UnsupportedPaperWidthError,
    TransportError,
    NetworkError,
)

# Configuration
from jewel_receipt.config import (
    ReceiptConfig,
    ReceiptLabels,
    WastageDisplayType,
    MakingChargeDisplayType,
    ConfigLoader,
    ConfigValidator,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)

# Models
from jewel_receipt.models import (
    EstimationItem,
    PurchaseItem,
    ChitItem,
    AdvanceItem,
    Metal,
    WastageType,
    MakingChargeType,
    LessWeightType,
    ShopDetails,
    CustomerDetails,
    MarketRates,
    ReceiptPayload,
    RepairOrder,
    PricedItem,
    Totals,
)

# Layout and rendering
from jewel_receipt.layout import LayoutPolicy, PaperWidth, WidthClass, ColumnScheme
from jewel_receipt.document import ReceiptDocument, SectionKind
from jewel_receipt.pricing import TotalsCalculator
from jewel_receipt.render import HtmlRenderer, ThermalRenderer, sanitize_thermal_payload

# Transport
from jewel_receipt.transport import (
    PrintTransport,
    WriteResult,
    MemoryTransport,
    FileTransport,
)

from jewel_receipt.utils import QrImageFetcher, build_qr_url

__version__ = "0.1.0"

__all__ = [
    # Composer
    "ReceiptComposer",
    "OutputFormat",
    "RenderedReceipt",
    "PrintOutcome",
    # Exceptions
    "ReceiptError",
    "ReceiptErrorCategory",
    "ValidationError",
    "ConfigError",
    "RenderError",
    "UnsupportedPaperWidthError",
    "TransportError",
    "NetworkError",
    # Configuration
    "ReceiptConfig",
    "ReceiptLabels",
    "WastageDisplayType",
    "MakingChargeDisplayType",
    "ConfigLoader",
    "ConfigValidator",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    # Models
    "EstimationItem",
    "PurchaseItem",
    "ChitItem",
    "AdvanceItem",
    "Metal",
    "WastageType",
    "MakingChargeType",
    "LessWeightType",
    "ShopDetails",
    "CustomerDetails",
    "MarketRates",
    "ReceiptPayload",
    "RepairOrder",
    "PricedItem",
    "Totals",
    # Layout and rendering
    "LayoutPolicy",
    "PaperWidth",
    "WidthClass",
    "ColumnScheme",
    "ReceiptDocument",
    "SectionKind",
    "TotalsCalculator",
    "HtmlRenderer",
    "ThermalRenderer",
    "sanitize_thermal_payload",
    # Transport
    "PrintTransport",
    "WriteResult",
    "MemoryTransport",
    "FileTransport",
    # Utilities
    "QrImageFetcher",
    "build_qr_url",
]
