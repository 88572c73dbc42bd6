"""Print transport interface"""

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class WriteResult:
    """Outcome of handing one job to a transport"""
    success: bool
    bytes_written: int = 0
    error: Optional[str] = None

    @classmethod
    def ok(cls, bytes_written: int) -> "WriteResult":
        return cls(success=True, bytes_written=bytes_written)

    @classmethod
    def failed(cls, error: str, bytes_written: int = 0) -> "WriteResult":
        return cls(success=False, bytes_written=bytes_written, error=error)


@runtime_checkable
class PrintTransport(Protocol):
    """
    Byte sink for a rendered receipt

    Implementations own connection handling. ``write`` receives the
    complete job in a single call and reports failure through the
    returned ``WriteResult`` or by raising ``TransportError``.
    """

    def write(self, data: bytes) -> WriteResult:
        ...
