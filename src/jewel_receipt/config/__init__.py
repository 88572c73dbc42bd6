"""
Configuration module
"""

from jewel_receipt.config.receipt_config import (
    ReceiptConfig,
    WastageDisplayType,
    MakingChargeDisplayType,
    SUPPORTED_PAPER_WIDTHS,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)
from jewel_receipt.config.labels import ReceiptLabels
from jewel_receipt.config.config_loader import ConfigLoader
from jewel_receipt.config.config_validator import (
    ConfigValidator,
    ValidationResult,
    ValidationErrorDetail,
)

__all__ = [
    "ReceiptConfig",
    "WastageDisplayType",
    "MakingChargeDisplayType",
    "SUPPORTED_PAPER_WIDTHS",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    "ReceiptLabels",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationResult",
    "ValidationErrorDetail",
]
