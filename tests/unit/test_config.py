"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from cancelling_app.config.defaults import DetectionParams, get_default_config
from cancelling_app.config.loader import ConfigLoader
from cancelling_app.config.validation import ConfigValidator
from cancelling_app.errors import ConfigurationError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.detection.check_window_ms == 60_000
        assert config.detection.cancel_ratio == 3
        assert config.detection.min_samples_exclusive == 1
        assert config.time.timezone == "UTC"
        assert config.time.timestamp_format == "%Y-%m-%d %H:%M:%S"
        assert config.data_source.encoding == "utf-8"


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)
        assert (loader.config_dir / "settings.yaml").exists()

    def test_merge_config_defaults_only(self, tmp_path) -> None:
        """Test config merging without a settings file."""
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config()

        assert config["detection"]["check_window_ms"] == 60_000
        assert config["data_source"]["path"] == "Trades.data"

    def test_settings_file_overrides_defaults(self, tmp_path) -> None:
        (tmp_path / "settings.yaml").write_text(
            "detection:\n  cancel_ratio: 4\n", encoding="utf-8"
        )
        config = ConfigLoader.create(tmp_path).merge_config()

        assert config["detection"]["cancel_ratio"] == 4
        # Other defaults should remain
        assert config["detection"]["check_window_ms"] == 60_000

    def test_explicit_overrides_win(self, tmp_path) -> None:
        (tmp_path / "settings.yaml").write_text(
            "detection:\n  cancel_ratio: 4\n", encoding="utf-8"
        )
        config = ConfigLoader.create(tmp_path).merge_config({"detection": {"cancel_ratio": 5}})
        assert config["detection"]["cancel_ratio"] == 5

    def test_empty_settings_file(self, tmp_path) -> None:
        (tmp_path / "settings.yaml").write_text("", encoding="utf-8")
        assert ConfigLoader.create(tmp_path).load_settings() == {}

    def test_settings_file_must_be_mapping(self, tmp_path) -> None:
        (tmp_path / "settings.yaml").write_text("- a\n- b\n", encoding="utf-8")
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError) as exc_info:
            loader.merge_config()
        assert exc_info.value.errors == ["top level is a list"]

    def test_malformed_settings_file(self, tmp_path) -> None:
        (tmp_path / "settings.yaml").write_text("detection: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(tmp_path).load_settings()
        assert exc_info.value.recoverable is False
        assert "not valid YAML" in str(exc_info.value)

    def test_build_config(self, tmp_path) -> None:
        loader = ConfigLoader.create(tmp_path)
        config = loader.build_config(loader.merge_config({"detection": {"check_window_ms": 5}}))

        assert config.detection == DetectionParams(check_window_ms=5)
        assert config.data_source.path == str(tmp_path / "Trades.data")

    def test_build_config_keeps_absolute_path(self, tmp_path) -> None:
        data_path = tmp_path / "elsewhere" / "Trades.data"
        loader = ConfigLoader.create(tmp_path)
        config = loader.build_config(loader.merge_config({"data_source": {"path": str(data_path)}}))
        assert config.data_source.path == str(data_path)


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_defaults_are_valid(self, tmp_path) -> None:
        config = ConfigLoader.create(tmp_path).merge_config()
        assert ConfigValidator.validate_config(config) == []

    def test_project_settings_are_valid(self) -> None:
        config = ConfigLoader.create().merge_config()
        assert ConfigValidator.validate_config(config) == []

    @pytest.mark.parametrize("field,value", [
        ("check_window_ms", 0),
        ("check_window_ms", -1),
        ("check_window_ms", 1.5),
        ("check_window_ms", True),
        ("cancel_ratio", 0),
        ("cancel_ratio", "3"),
        ("min_samples_exclusive", -1),
    ])
    def test_invalid_detection_params(self, field, value) -> None:
        errors = ConfigValidator.validate_detection_params({field: value})
        assert len(errors) == 1
        assert errors[0].field == field
        assert errors[0].value == value

    def test_valid_detection_params(self) -> None:
        params = {"check_window_ms": 1000, "cancel_ratio": 2, "min_samples_exclusive": 0}
        assert ConfigValidator.validate_detection_params(params) == []

    def test_invalid_timezone(self) -> None:
        errors = ConfigValidator.validate_time_params({"timezone": "Mars/Olympus_Mons"})
        assert len(errors) == 1
        assert errors[0].field == "timezone"

    def test_valid_timezone(self) -> None:
        assert ConfigValidator.validate_time_params({"timezone": "Europe/London"}) == []

    def test_invalid_timestamp_format(self) -> None:
        errors = ConfigValidator.validate_time_params({"timestamp_format": ""})
        assert errors[0].field == "timestamp_format"

    def test_invalid_data_source(self) -> None:
        errors = ConfigValidator.validate_data_source_params({"path": "", "encoding": 8})
        assert {error.field for error in errors} == {"path", "encoding"}

    def test_unknown_encoding(self) -> None:
        errors = ConfigValidator.validate_data_source_params({"encoding": "no-such-codec"})
        assert len(errors) == 1
        assert errors[0].field == "encoding"
        assert errors[0].value == "no-such-codec"

    def test_known_encoding(self) -> None:
        assert ConfigValidator.validate_data_source_params({"encoding": "latin-1"}) == []

    def test_unknown_parameter(self) -> None:
        errors = ConfigValidator.validate_config({"detection": {"window": 5}})
        assert len(errors) == 1
        assert errors[0].field == "detection.window"

    def test_section_must_be_mapping(self) -> None:
        errors = ConfigValidator.validate_config({"time": "UTC"})
        assert len(errors) == 1
        assert errors[0].field == "time"
