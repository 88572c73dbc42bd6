"""
Configuration Validator
Validates receipt configuration with clear error messages
"""

import codecs
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from jewel_receipt.config.receipt_config import (
    BOOLEAN_FIELDS,
    SUPPORTED_PAPER_WIDTHS,
    MakingChargeDisplayType,
    ReceiptConfig,
    WastageDisplayType,
)


@dataclass
class ValidationErrorDetail:
    """Validation error detail"""
    field: str
    message: str
    value: Optional[Any] = None


@dataclass
class ValidationResult:
    """Validation result"""
    valid: bool
    errors: List[ValidationErrorDetail] = field(default_factory=list)


class ConfigValidator:
    """
    ConfigValidator class
    Checks a raw configuration dictionary before it becomes a ReceiptConfig
    """

    def __init__(self) -> None:
        self._errors: List[ValidationErrorDetail] = []

    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """
        Validate the entire configuration dictionary

        Args:
            config: Configuration dictionary to validate

        Returns:
            ValidationResult with any errors
        """
        self._errors = []

        self._validate_unknown_keys(config)
        self._validate_booleans(config)
        self._validate_display_types(config)
        self._validate_paper_width(config)
        self._validate_ranges(config)
        self._validate_encoding(config)

        return ValidationResult(
            valid=len(self._errors) == 0,
            errors=self._errors.copy()
        )

    def validate_or_raise(self, config: Dict[str, Any]) -> None:
        """
        Validate and raise if invalid

        Args:
            config: Configuration dictionary to validate

        Raises:
            ValidationError: If configuration is invalid
        """
        from jewel_receipt.exceptions import ValidationError

        result = self.validate(config)
        if not result.valid:
            error_messages = "; ".join(
                f"{e.field}: {e.message}" for e in result.errors
            )
            raise ValidationError(
                f"Configuration validation failed: {error_messages}",
                field=result.errors[0].field,
                details={"errors": [e.field for e in result.errors]},
            )

    def _validate_unknown_keys(self, config: Dict[str, Any]) -> None:
        known = set(ReceiptConfig.model_fields)
        for key in config:
            if key not in known:
                self._errors.append(ValidationErrorDetail(
                    field=key,
                    message="unknown configuration key",
                    value=config[key]
                ))

    def _validate_booleans(self, config: Dict[str, Any]) -> None:
        for field_name in BOOLEAN_FIELDS:
            value = config.get(field_name)
            if value is not None and not isinstance(value, bool):
                self._errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} must be true or false",
                    value=value
                ))

    def _validate_display_types(self, config: Dict[str, Any]) -> None:
        """Validate caption style enums"""
        checks = (
            ("wastage_display_type", WastageDisplayType),
            ("making_charge_display_type", MakingChargeDisplayType),
        )
        for field_name, enum_type in checks:
            value = config.get(field_name)
            if value is None:
                continue
            valid_values = [e.value for e in enum_type]
            raw = value.value if isinstance(value, enum_type) else value
            if raw not in valid_values:
                self._errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} must be one of: {', '.join(valid_values)}",
                    value=value
                ))

    def _validate_paper_width(self, config: Dict[str, Any]) -> None:
        paper_width = config.get("paper_width")
        if paper_width is None:
            return

        normalized = str(paper_width).strip().lower()
        if normalized.isdigit():
            normalized = f"{normalized}mm"
        if normalized not in SUPPORTED_PAPER_WIDTHS:
            self._errors.append(ValidationErrorDetail(
                field="paper_width",
                message=f"paper_width must be one of: {', '.join(SUPPORTED_PAPER_WIDTHS)}",
                value=paper_width
            ))

    def _validate_ranges(self, config: Dict[str, Any]) -> None:
        """Validate numeric ranges"""
        gst_percent = config.get("gst_percent")
        if gst_percent is not None:
            if isinstance(gst_percent, bool) or not isinstance(gst_percent, (int, float)):
                self._errors.append(ValidationErrorDetail(
                    field="gst_percent",
                    message="gst_percent must be a number",
                    value=gst_percent
                ))
            elif gst_percent < 0 or gst_percent > 100:
                self._errors.append(ValidationErrorDetail(
                    field="gst_percent",
                    message="gst_percent must be between 0 and 100",
                    value=gst_percent
                ))

        feed_lines = config.get("feed_lines")
        if feed_lines is not None:
            if isinstance(feed_lines, bool) or not isinstance(feed_lines, int):
                self._errors.append(ValidationErrorDetail(
                    field="feed_lines",
                    message="feed_lines must be an integer",
                    value=feed_lines
                ))
            elif feed_lines < 0 or feed_lines > 20:
                self._errors.append(ValidationErrorDetail(
                    field="feed_lines",
                    message="feed_lines must be between 0 and 20",
                    value=feed_lines
                ))

    def _validate_encoding(self, config: Dict[str, Any]) -> None:
        encoding = config.get("thermal_encoding")
        if encoding is None:
            return
        try:
            codecs.lookup(str(encoding))
        except LookupError:
            self._errors.append(ValidationErrorDetail(
                field="thermal_encoding",
                message="thermal_encoding is not a known codec",
                value=encoding
            ))
