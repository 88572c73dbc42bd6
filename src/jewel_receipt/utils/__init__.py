"""
Utilities module
"""

from jewel_receipt.utils.numbers import (
    format_currency,
    format_plain,
    format_signed_currency,
    format_weight,
    group_indian,
    parse_number,
    round_amount,
)
from jewel_receipt.utils.qrcode import QrImageFetcher, build_qr_url

__all__ = [
    "format_currency",
    "format_plain",
    "format_signed_currency",
    "format_weight",
    "group_indian",
    "parse_number",
    "round_amount",
    "QrImageFetcher",
    "build_qr_url",
]
