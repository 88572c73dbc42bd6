"""
Transport module
"""

from jewel_receipt.transport.base import PrintTransport, WriteResult
from jewel_receipt.transport.sinks import FileTransport, MemoryTransport

__all__ = [
    "PrintTransport",
    "WriteResult",
    "FileTransport",
    "MemoryTransport",
]
