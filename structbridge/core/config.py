"""
Configuration management for conversions.

Handles loading and merging configuration from JSON files,
providing defaults and validation for converter settings.
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class ConverterConfig:
    """Settings consumed by the conversion pipeline."""

    # Return the struct with synthesized tags instead of converting
    enable_json_tag_check: bool = True

    # Extra entries for the type mapping tables
    go_type_overrides: Dict[str, str] = field(default_factory=dict)
    ts_type_overrides: Dict[str, str] = field(default_factory=dict)

    # Emit `export interface` instead of `interface`
    ts_export: bool = False

    # Directory whose struct.go.j2 / interface.ts.j2 replace the built-in templates
    template_dir: Optional[str] = None

    custom: Dict[str, Any] = field(default_factory=dict)


DEFAULT_CONFIG: Dict[str, Any] = {
    "enable_json_tag_check": True,
    "go_type_overrides": {},
    "ts_type_overrides": {},
    "ts_export": False,
    "template_dir": None,
}


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        self._defaults: Dict[str, Any] = dict(DEFAULT_CONFIG)

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> ConverterConfig:
        """
        Get complete converter configuration.

        Args:
            custom_config: Explicit overrides, applied last
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        base_config = dict(self._defaults)

        if config_file:
            base_config.update(self._load_config_file(config_file))

        if custom_config:
            base_config.update(custom_config)

        config = self._dict_to_config(base_config)
        warnings = self.validate_config(config)
        if warnings:
            raise ConfigError("; ".join(warnings))
        return config

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> ConverterConfig:
        """Convert dictionary to ConverterConfig, collecting unknown keys in custom."""
        known_fields = {f.name for f in fields(ConverterConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        if custom_args:
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return ConverterConfig(**config_args)

    def save_config(self, config: ConverterConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = {
            "enable_json_tag_check": config.enable_json_tag_check,
            "go_type_overrides": config.go_type_overrides,
            "ts_type_overrides": config.ts_type_overrides,
            "ts_export": config.ts_export,
            "template_dir": config.template_dir,
        }
        config_dict.update(config.custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def validate_config(self, config: ConverterConfig) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List of validation errors
        """
        errors = []

        if not isinstance(config.enable_json_tag_check, bool):
            errors.append(
                f"enable_json_tag_check must be a boolean, got {config.enable_json_tag_check!r}"
            )

        if not isinstance(config.ts_export, bool):
            errors.append(f"ts_export must be a boolean, got {config.ts_export!r}")

        if config.template_dir is not None:
            if not isinstance(config.template_dir, str):
                errors.append(f"template_dir must be a string, got {config.template_dir!r}")
            elif not Path(config.template_dir).is_dir():
                errors.append(f"template_dir is not a directory: {config.template_dir}")

        for key in ("go_type_overrides", "ts_type_overrides"):
            table = getattr(config, key)
            if not isinstance(table, dict):
                errors.append(f"{key} must be an object")
                continue
            for name, target in table.items():
                if not isinstance(name, str) or not isinstance(target, str):
                    errors.append(f"{key} entries must map strings to strings: {name!r}")

        return errors


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> ConverterConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    return get_config_manager().get_config(custom_config, config_file)

