"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    DataSourceParams,
    DefaultConfig,
    DetectionParams,
    TimeParams,
    get_default_config,
)

SETTINGS_FILE = "settings.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_settings(self) -> dict[str, Any]:
        """
        Load the settings file overrides, empty if there is none.

        Raises:
            ConfigurationError: If the file is not valid YAML or not a mapping
        """
        settings_file = self.config_dir / SETTINGS_FILE

        if not settings_file.exists():
            return {}

        try:
            with open(settings_file, encoding="utf-8") as f:
                settings = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Settings file {settings_file} is not valid YAML",
                errors=[str(e)],
            ) from e

        if settings is None:
            return {}
        if not isinstance(settings, dict):
            raise ConfigurationError(
                f"Settings file {settings_file} must contain a mapping",
                errors=[f"top level is a {type(settings).__name__}"],
            )

        return settings

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. Settings file in the config directory
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)
        config = self._deep_merge(config, self.load_settings())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def build_config(self, merged: dict[str, Any]) -> DefaultConfig:
        """Turn a merged configuration dictionary back into dataclasses."""
        data_source = dict(merged.get("data_source", {}))
        path = Path(data_source.get("path", DataSourceParams.path))
        if not path.is_absolute():
            data_source["path"] = str(self.config_dir / path)

        return DefaultConfig(
            detection=DetectionParams(**merged.get("detection", {})),
            time=TimeParams(**merged.get("time", {})),
            data_source=DataSourceParams(**data_source),
        )

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
