"""Configuration validation utilities."""

import codecs
from dataclasses import dataclass
from typing import Any

from ..utils.time import resolve_timezone

KNOWN_SECTIONS = {
    "detection": {"check_window_ms", "cancel_ratio", "min_samples_exclusive"},
    "time": {"timezone", "timestamp_format"},
    "data_source": {"path", "encoding"},
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_detection_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate detection parameters."""
        errors = []

        if "check_window_ms" in params:
            value = params["check_window_ms"]
            if not _is_int(value) or value <= 0:
                errors.append(ValidationError(
                    field="check_window_ms",
                    message="Must be a positive integer",
                    value=value
                ))

        if "cancel_ratio" in params:
            value = params["cancel_ratio"]
            if not _is_int(value) or value <= 0:
                errors.append(ValidationError(
                    field="cancel_ratio",
                    message="Must be a positive integer",
                    value=value
                ))

        if "min_samples_exclusive" in params:
            value = params["min_samples_exclusive"]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field="min_samples_exclusive",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_time_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate time parameters."""
        errors = []

        if "timezone" in params:
            value = params["timezone"]
            try:
                if not isinstance(value, str):
                    raise TypeError(value)
                resolve_timezone(value)
            except (TypeError, ValueError, KeyError):
                errors.append(ValidationError(
                    field="timezone",
                    message="Must be a known IANA time zone name",
                    value=value
                ))

        if "timestamp_format" in params:
            value = params["timestamp_format"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="timestamp_format",
                    message="Must be a non-empty strftime pattern",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_data_source_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate data source parameters."""
        errors = []

        for field_name in ("path", "encoding"):
            if field_name in params:
                value = params[field_name]
                if not isinstance(value, str) or not value:
                    errors.append(ValidationError(
                        field=field_name,
                        message="Must be a non-empty string",
                        value=value
                    ))

        encoding = params.get("encoding")
        if isinstance(encoding, str) and encoding:
            try:
                codecs.lookup(encoding)
            except LookupError:
                errors.append(ValidationError(
                    field="encoding",
                    message="Must be a known text encoding",
                    value=encoding
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section, known_fields in KNOWN_SECTIONS.items():
            params = config.get(section, {})
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            for unknown in sorted(set(params) - known_fields):
                errors.append(ValidationError(
                    field=f"{section}.{unknown}",
                    message="Unknown parameter",
                    value=params[unknown]
                ))

        if isinstance(config.get("detection"), dict):
            errors.extend(ConfigValidator.validate_detection_params(config["detection"]))

        if isinstance(config.get("time"), dict):
            errors.extend(ConfigValidator.validate_time_params(config["time"]))

        if isinstance(config.get("data_source"), dict):
            errors.extend(ConfigValidator.validate_data_source_params(config["data_source"]))

        return errors
