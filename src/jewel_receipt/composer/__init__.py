"""
Composer module
"""

from jewel_receipt.composer.receipt_composer import (
    OutputFormat,
    PrintOutcome,
    ReceiptComposer,
    RenderedReceipt,
)
from jewel_receipt.composer.service_receipts import (
    compose_delivery_receipt,
    compose_repair_receipt,
    compose_test_print,
)

__all__ = [
    "OutputFormat",
    "PrintOutcome",
    "ReceiptComposer",
    "RenderedReceipt",
    "compose_delivery_receipt",
    "compose_repair_receipt",
    "compose_test_print",
]
