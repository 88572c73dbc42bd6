"""Exception classes for the jewel receipt engine"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class ReceiptErrorCategory(str, Enum):
    """Receipt error category codes"""
    LAYOUT = "LAYOUT"
    RENDER = "RENDER"
    VALIDATION = "VAL"
    CONFIG = "CONFIG"
    NETWORK = "NET"
    TRANSPORT = "TRANSPORT"
    UNKNOWN = "UNKNOWN"


class ReceiptError(Exception):
    """
    Base exception for receipt errors

    All errors raised by the package extend from this class.
    The category is derived from the code prefix.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.cause = cause
        self.details = details
        self.timestamp = datetime.utcnow()
        self.category = self._determine_category(code)

    def _determine_category(self, code: Optional[str]) -> ReceiptErrorCategory:
        """Determine error category from code"""
        if not code:
            return ReceiptErrorCategory.UNKNOWN

        if code.startswith("LAYOUT"):
            return ReceiptErrorCategory.LAYOUT
        if code.startswith("RENDER"):
            return ReceiptErrorCategory.RENDER
        if code.startswith("VAL"):
            return ReceiptErrorCategory.VALIDATION
        if code.startswith("CONFIG"):
            return ReceiptErrorCategory.CONFIG
        if code.startswith("NET"):
            return ReceiptErrorCategory.NETWORK
        if code.startswith("TRANSPORT"):
            return ReceiptErrorCategory.TRANSPORT

        return ReceiptErrorCategory.UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary"""
        return {
            "name": self.__class__.__name__,
            "message": str(self),
            "code": self.code,
            "category": self.category.value,
            "timestamp": self.timestamp.isoformat() + "Z",
            "details": self.details,
        }

    def has_code(self, code: str) -> bool:
        """Check if error has a specific code"""
        return self.code == code

    def is_category(self, category: ReceiptErrorCategory) -> bool:
        """Check if error belongs to a category"""
        return self.category == category

    def get_description(self) -> str:
        """Get human-readable error description"""
        parts = [str(self)]

        if self.code:
            parts.insert(0, f"[{self.code}]")

        return " ".join(parts)


class ValidationError(ReceiptError):
    """Validation error"""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code="VALIDATION_ERROR", details=details)
        self.field = field


class ConfigError(ReceiptError):
    """Configuration error"""

    def __init__(
        self,
        message: str,
        code: str = "CONFIG01",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=code, details=details)


class RenderError(ReceiptError):
    """
    Rendering failure

    Raised before any output is returned, so a caller never
    receives a partially composed stream.
    """

    def __init__(
        self,
        message: str,
        code: str = "RENDER01",
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=code, cause=cause, details=details)


class UnsupportedPaperWidthError(RenderError):
    """Requested paper-width tier has no layout"""

    def __init__(self, requested: Any) -> None:
        super().__init__(
            f"Unsupported paper width: {requested!r}",
            code="LAYOUT01",
            details={"requested": requested},
        )
        self.requested = requested


class TransportError(ReceiptError):
    """Print transport failure"""

    def __init__(
        self,
        message: str,
        code: str = "TRANSPORT01",
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, code=code, cause=cause)


class NetworkError(ReceiptError):
    """
    Network error for HTTP fetches (tracking QR images)
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        network_code: str = "NET10",
        retryable: bool = True,
    ) -> None:
        super().__init__(message, code=network_code)
        self.status_code = status_code
        self.network_code = network_code
        self.retryable = retryable

    @classmethod
    def timeout(cls, message: str = "Request timed out") -> "NetworkError":
        """Create a timeout error"""
        return cls(message, status_code=408, network_code="NET01", retryable=True)

    @classmethod
    def connection_refused(
        cls, message: str = "Connection refused"
    ) -> "NetworkError":
        """Create a connection refused error"""
        return cls(message, network_code="NET02", retryable=True)
