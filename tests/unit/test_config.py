"""
Configuration Module Unit Tests
"""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from jewel_receipt.config import (
    ConfigDefaults,
    ConfigLoader,
    ConfigValidator,
    MakingChargeDisplayType,
    ReceiptConfig,
    WastageDisplayType,
)
from jewel_receipt.exceptions import ConfigError, ReceiptError, ValidationError


class TestConfigValidator:
    """Tests for ConfigValidator"""

    @pytest.fixture
    def validator(self) -> ConfigValidator:
        return ConfigValidator()

    @pytest.fixture
    def valid_config(self) -> dict:
        return {
            "show_gst": True,
            "show_wastage": False,
            "wastage_display_type": "grams",
            "making_charge_display_type": "auto",
            "paper_width": "80mm",
            "gst_percent": 3,
            "feed_lines": 4,
        }

    def test_validate_valid_config(self, validator: ConfigValidator, valid_config: dict):
        """Should pass with valid configuration"""
        result = validator.validate(valid_config)
        assert result.valid is True
        assert len(result.errors) == 0

    def test_validate_empty_config(self, validator: ConfigValidator):
        """Should pass with no overrides at all"""
        assert validator.validate({}).valid is True

    def test_validate_unknown_key(self, validator: ConfigValidator, valid_config: dict):
        """Should fail on a key the configuration does not know"""
        valid_config["show_logo"] = True
        result = validator.validate(valid_config)
        assert result.valid is False
        assert any(e.field == "show_logo" for e in result.errors)

    def test_validate_non_boolean_toggle(self, validator: ConfigValidator, valid_config: dict):
        """Should fail when a toggle is not a boolean"""
        valid_config["show_header"] = "yes"
        result = validator.validate(valid_config)
        assert result.valid is False
        assert any(
            e.field == "show_header" and "true or false" in e.message
            for e in result.errors
        )

    def test_validate_invalid_display_type(self, validator: ConfigValidator, valid_config: dict):
        """Should fail with an unknown caption style"""
        valid_config["making_charge_display_type"] = "weight"
        result = validator.validate(valid_config)
        assert result.valid is False
        assert any(e.field == "making_charge_display_type" for e in result.errors)

    def test_validate_enum_display_type(self, validator: ConfigValidator, valid_config: dict):
        """Should accept enum members as well as their values"""
        valid_config["wastage_display_type"] = WastageDisplayType.PERCENTAGE
        assert validator.validate(valid_config).valid is True

    @pytest.mark.parametrize("width", ["58mm", "80", "112MM", 80])
    def test_validate_paper_width_variants(self, validator: ConfigValidator, width):
        """Should accept the supported widths in loose spellings"""
        assert validator.validate({"paper_width": width}).valid is True

    def test_validate_unsupported_paper_width(self, validator: ConfigValidator, valid_config: dict):
        """Should fail with a paper width that has no layout"""
        valid_config["paper_width"] = "76mm"
        result = validator.validate(valid_config)
        assert result.valid is False
        assert any(e.field == "paper_width" for e in result.errors)

    def test_validate_gst_out_of_range(self, validator: ConfigValidator, valid_config: dict):
        """Should fail with a GST rate above 100"""
        valid_config["gst_percent"] = 150
        result = validator.validate(valid_config)
        assert result.valid is False
        assert any(
            e.field == "gst_percent" and "between" in e.message
            for e in result.errors
        )

    def test_validate_gst_not_numeric(self, validator: ConfigValidator, valid_config: dict):
        """Should fail when the GST rate is not a number"""
        valid_config["gst_percent"] = "three"
        result = validator.validate(valid_config)
        assert result.valid is False
        assert any(e.field == "gst_percent" for e in result.errors)

    def test_validate_feed_lines(self, validator: ConfigValidator, valid_config: dict):
        """Should fail with a negative feed"""
        valid_config["feed_lines"] = -1
        result = validator.validate(valid_config)
        assert result.valid is False
        assert any(e.field == "feed_lines" for e in result.errors)

    def test_validate_unknown_encoding(self, validator: ConfigValidator, valid_config: dict):
        """Should fail with a codec Python does not know"""
        valid_config["thermal_encoding"] = "not-a-codec"
        result = validator.validate(valid_config)
        assert result.valid is False
        assert any(e.field == "thermal_encoding" for e in result.errors)

    def test_validate_collects_all_errors(self, validator: ConfigValidator):
        """Should report every problem, not just the first"""
        result = validator.validate({"paper_width": "76mm", "feed_lines": 99})
        assert {e.field for e in result.errors} == {"paper_width", "feed_lines"}

    def test_validate_or_raise_invalid(self, validator: ConfigValidator, valid_config: dict):
        """Should raise ValidationError with invalid configuration"""
        valid_config["paper_width"] = "76mm"
        with pytest.raises(ValidationError) as exc_info:
            validator.validate_or_raise(valid_config)

        assert exc_info.value.field == "paper_width"
        assert exc_info.value.details == {"errors": ["paper_width"]}


class TestConfigLoader:
    """Tests for ConfigLoader"""

    @pytest.fixture
    def loader(self) -> ConfigLoader:
        return ConfigLoader()

    @pytest.fixture
    def valid_config(self) -> dict:
        return {
            "paper_width": "80mm",
            "show_gst": False,
            "making_charge_display_type": "percentage",
        }

    def test_from_dict(self, loader: ConfigLoader, valid_config: dict):
        """Should return a copy of the configuration"""
        result = loader.from_dict(valid_config)
        assert result == valid_config
        assert result is not valid_config

    def test_from_environment(self, loader: ConfigLoader, monkeypatch):
        """Should load configuration from environment variables"""
        monkeypatch.setenv("RECEIPT_PAPER_WIDTH", "112mm")
        monkeypatch.setenv("RECEIPT_SHOW_GST", "false")
        monkeypatch.setenv("RECEIPT_GST_PERCENT", "5")
        monkeypatch.setenv("RECEIPT_FEED_LINES", "6")
        monkeypatch.setenv("RECEIPT_WASTAGE_DISPLAY_TYPE", "grams")

        result = loader.from_environment()

        assert result["paper_width"] == "112mm"
        assert result["show_gst"] is False
        assert result["gst_percent"] == 5.0
        assert result["feed_lines"] == 6
        assert result["wastage_display_type"] == "grams"

    def test_from_environment_boolean_parsing(self, loader: ConfigLoader, monkeypatch):
        """Should parse boolean values correctly"""
        monkeypatch.setenv("RECEIPT_MERGE_PRINT", "true")
        result = loader.from_environment()
        assert result["merge_print"] is True

        monkeypatch.setenv("RECEIPT_MERGE_PRINT", "1")
        result = loader.from_environment()
        assert result["merge_print"] is True

        monkeypatch.setenv("RECEIPT_MERGE_PRINT", "false")
        result = loader.from_environment()
        assert result["merge_print"] is False

    def test_from_environment_ignores_empty(self, loader: ConfigLoader, monkeypatch):
        """Should skip variables that are set but empty"""
        monkeypatch.setenv("RECEIPT_PAPER_WIDTH", "")
        assert "paper_width" not in loader.from_environment()

    def test_merge(self, loader: ConfigLoader):
        """Should merge multiple configurations with priority"""
        base = {"paper_width": "58mm", "show_gst": True}
        override = {"paper_width": "80mm", "feed_lines": 2}

        result = loader.merge(base, override)

        assert result["paper_width"] == "80mm"
        assert result["show_gst"] is True
        assert result["feed_lines"] == 2

    def test_merge_filters_none(self, loader: ConfigLoader):
        """Should not include None values from overrides"""
        base = {"paper_width": "80mm", "feed_lines": 3}
        override = {"paper_width": "112mm", "feed_lines": None}

        result = loader.merge(base, override)

        assert result["paper_width"] == "112mm"
        assert result["feed_lines"] == 3

    def test_resolve_applies_defaults(self, loader: ConfigLoader):
        """Should apply default values"""
        result = loader.resolve({})

        assert result.paper_width == ConfigDefaults.PAPER_WIDTH
        assert result.gst_percent == ConfigDefaults.GST_PERCENT
        assert result.currency_symbol == ConfigDefaults.CURRENCY_SYMBOL
        assert result.feed_lines == ConfigDefaults.FEED_LINES
        assert result.show_header is True
        assert result.merge_print is True
        assert result.making_charge_display_type == MakingChargeDisplayType.AUTO

    def test_resolve_invalid(self, loader: ConfigLoader):
        """Should raise ValidationError before building the config"""
        with pytest.raises(ValidationError):
            loader.resolve({"paper_width": "76mm"})

    def test_from_file(self, loader: ConfigLoader, valid_config: dict, tmp_path: Path):
        """Should load configuration from JSON file"""
        path = tmp_path / "receipt.json"
        path.write_text(json.dumps(valid_config), encoding="utf-8")

        result = loader.from_file(path)
        assert result["paper_width"] == "80mm"

    def test_from_file_not_found(self, loader: ConfigLoader):
        """Should raise error for missing file"""
        with pytest.raises(ReceiptError) as exc_info:
            loader.from_file("/nonexistent/path.json")

        assert "CONFIG_FILE_NOT_FOUND" in str(exc_info.value.code)

    def test_from_file_invalid_json(self, loader: ConfigLoader, tmp_path: Path):
        """Should raise a parse error for malformed JSON"""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            loader.from_file(path)

        assert exc_info.value.code == "CONFIG_PARSE_ERROR"

    def test_from_file_not_an_object(self, loader: ConfigLoader, tmp_path: Path):
        """Should reject a JSON document that is not an object"""
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ConfigError):
            loader.from_file(path)

    def test_load_priority(self, loader: ConfigLoader, tmp_path: Path, monkeypatch):
        """Should let environment override file and explicit config override both"""
        path = tmp_path / "receipt.json"
        path.write_text(json.dumps({"paper_width": "58mm", "feed_lines": 1, "show_gst": False}))
        monkeypatch.setenv("RECEIPT_PAPER_WIDTH", "80mm")
        monkeypatch.setenv("RECEIPT_FEED_LINES", "2")

        result = loader.load(file=path, config={"feed_lines": 3})

        assert result.paper_width == "80mm"
        assert result.feed_lines == 3
        assert result.show_gst is False

    def test_load_from_config(self, loader: ConfigLoader, valid_config: dict):
        """Should load and resolve configuration from dict"""
        result = loader.load(config=valid_config, env=False)

        assert result.paper_width == "80mm"
        assert result.show_gst is False
        assert result.making_charge_display_type == MakingChargeDisplayType.PERCENTAGE

    def test_create_template(self, loader: ConfigLoader, tmp_path: Path):
        """Should create template configuration file"""
        template_path = tmp_path / "config" / "template.json"
        loader.create_template(template_path)

        assert template_path.exists()

        with open(template_path) as f:
            template = json.load(f)

        assert template["paper_width"] == "58mm"
        assert template["wastage_display_type"] == "percentage"
        assert "show_making_charge" in template

    def test_template_round_trips(self, loader: ConfigLoader, tmp_path: Path):
        """Should resolve the generated template unchanged"""
        template_path = tmp_path / "template.json"
        loader.create_template(template_path)

        assert loader.load(file=template_path, env=False) == ReceiptConfig()


class TestReceiptConfig:
    """Tests for ReceiptConfig Pydantic model"""

    def test_defaults(self):
        """Should show every section by default"""
        config = ReceiptConfig()
        toggles = [name for name in ReceiptConfig.model_fields if name.startswith("show_")]
        assert all(getattr(config, name) is True for name in toggles)
        assert config.wastage_display_type == WastageDisplayType.PERCENTAGE

    @pytest.mark.parametrize("raw,expected", [
        ("80", "80mm"),
        (112, "112mm"),
        (" 58MM ", "58mm"),
    ])
    def test_paper_width_normalized(self, raw, expected):
        """Should normalize loose paper width spellings"""
        assert ReceiptConfig(paper_width=raw).paper_width == expected

    def test_frozen(self):
        """Should be read-only once built"""
        config = ReceiptConfig()
        with pytest.raises(PydanticValidationError):
            config.show_gst = False

    def test_invalid_display_type(self):
        """Should reject an unknown caption style"""
        with pytest.raises(ValueError):
            ReceiptConfig(wastage_display_type="ounces")

    def test_gst_bounds(self):
        """Should reject a negative GST rate"""
        with pytest.raises(ValueError):
            ReceiptConfig(gst_percent=-1)
