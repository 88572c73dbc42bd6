"""
Render module
"""

from jewel_receipt.render.escpos import EscPos, sanitize_thermal_payload
from jewel_receipt.render.html import HtmlRenderer
from jewel_receipt.render.thermal import ThermalRenderer

__all__ = [
    "EscPos",
    "sanitize_thermal_payload",
    "HtmlRenderer",
    "ThermalRenderer",
]
