"""
Transformation configuration management.

Loads TransformConfig from YAML files, merges environment-specific overrides
and validates the result before any record is processed.
"""

import re
from pathlib import Path
from typing import Any

import yaml

from sales_ingest.core.errors import ConfigurationError
from sales_ingest.core.models import TransformConfig
from sales_ingest.core.models.transform_config import (
    DEFAULT_CUSTOM_MAPPINGS,
    DEFAULT_PRICE_MULTIPLIER,
)
from sales_ingest.core.optimizations import OPTIMIZATION_REGISTRY
from sales_ingest.core.transforms import TRANSFORMATION_REGISTRY
from sales_ingest.core.validators import VALIDATOR_REGISTRY
from sales_ingest.observability.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path("config/data_transformation.yaml")

# A usable date pattern names a year, a month and a day
_YEAR_DIRECTIVE = re.compile(r"%[Yy]")
_MONTH_DIRECTIVE = re.compile(r"%[mbB]")
_DAY_DIRECTIVE = re.compile(r"%d")

_STAGE_REGISTRIES = {
    "transformations": TRANSFORMATION_REGISTRY,
    "validators": VALIDATOR_REGISTRY,
    "optimizations": OPTIMIZATION_REGISTRY,
}


def is_valid_date_format(pattern: str) -> bool:
    return all(
        directive.search(pattern)
        for directive in (_YEAR_DIRECTIVE, _MONTH_DIRECTIVE, _DAY_DIRECTIVE)
    )


def validate_transform_config(config: TransformConfig) -> None:
    """
    Reject configurations that cannot drive a run.

    Args:
        config: Configuration to check

    Raises:
        ConfigurationError: If the multiplier is not positive, no usable date
            pattern is configured, or a stage name is unknown
    """
    if config.price_multiplier <= 0:
        raise ConfigurationError(f"price_multiplier must be positive, got {config.price_multiplier}")

    if not config.date_formats:
        raise ConfigurationError("at least one date format must be specified")

    if not any(is_valid_date_format(pattern) for pattern in config.date_formats):
        raise ConfigurationError("no valid date formats found")

    for family, registry in _STAGE_REGISTRIES.items():
        for name in getattr(config, family) or []:
            if name not in registry:
                raise ConfigurationError(f"Unknown stage '{name}' in {family}")


def merge_sections(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Merge an override section into a base section.

    Maps merge recursively, lists and scalars replace.
    """
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_sections(merged[key], value)
        else:
            merged[key] = value
    return merged


class TransformConfigLoader:
    """
    Loads transformation settings from YAML configuration files.

    Expected YAML format:
    ```yaml
    transformation:
      enable_validation: true
      enable_optimization: true
      date_formats:
        - "%Y-%m-%d"
      null_values: ["", "NULL", "N/A"]
      defaults:
        country: ""
        region: ""
        price_multiplier: 100
      custom_mappings:
        usa: United States
        region_n: North
      stages:
        validators: [RequiredFieldValidator, RangeValidator]
    ```

    A missing file yields the built-in defaults.
    """

    def __init__(self, config_path: str | Path = DEFAULT_CONFIG_PATH):
        """
        Initialize the config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)

    def load_config(self) -> TransformConfig:
        """
        Load the base configuration file.

        Returns:
            TransformConfig with defaults applied

        Raises:
            ConfigurationError: If the file is not valid YAML or has the wrong shape
        """
        section = self._read_section(self.config_path)
        return self._build_config(section)

    def load_environment_config(self, env: str) -> TransformConfig:
        """
        Load the base file merged with `<name>.<env>.yaml` beside it.

        Args:
            env: Environment name, e.g. "production"

        Returns:
            Merged TransformConfig (the base alone when no override file exists)
        """
        section = self._read_section(self.config_path)

        env_path = self.get_environment_config_path(env)
        if env_path.exists():
            logger.info(f"Applying environment overrides from {env_path}")
            section = merge_sections(section, self._read_section(env_path))

        return self._build_config(section)

    def get_environment_config_path(self, env: str) -> Path:
        return self.config_path.with_name(f"{self.config_path.stem}.{env}{self.config_path.suffix}")

    def validate_config(self, config: TransformConfig) -> None:
        """Raise ConfigurationError if the configuration is unusable."""
        validate_transform_config(config)

    def save_config(self, config: TransformConfig, path: str | Path | None = None) -> Path:
        """
        Write a configuration in the file format read by load_config.

        Args:
            config: Configuration to save
            path: Destination (defaults to the loader's config path)

        Returns:
            Path that was written
        """
        target = Path(path) if path is not None else self.config_path
        target.parent.mkdir(parents=True, exist_ok=True)

        section: dict[str, Any] = {
            "enable_validation": config.enable_validation,
            "enable_optimization": config.enable_optimization,
            "date_formats": list(config.date_formats),
            "currency_formats": list(config.currency_formats),
            "null_values": list(config.null_values),
            "defaults": {
                "country": config.default_country,
                "region": config.default_region,
                "price_multiplier": config.price_multiplier,
            },
            "custom_mappings": dict(config.custom_mappings),
            "data_types": dict(config.data_types),
        }

        stages = {
            family: list(names)
            for family in _STAGE_REGISTRIES
            if (names := getattr(config, family)) is not None
        }
        if stages:
            section["stages"] = stages

        with open(target, "w") as f:
            yaml.safe_dump({"transformation": section}, f, sort_keys=False, allow_unicode=True)

        return target

    def get_config_info(self, config: TransformConfig) -> dict[str, Any]:
        """
        Get summary of a loaded configuration.

        Returns:
            Dictionary with counts and toggles
        """
        return {
            "config_path": str(self.config_path),
            "config_exists": self.config_path.exists(),
            "validation_enabled": config.enable_validation,
            "optimization_enabled": config.enable_optimization,
            "date_formats_count": len(config.date_formats),
            "currency_formats_count": len(config.currency_formats),
            "null_values_count": len(config.null_values),
            "custom_mappings_count": len(config.custom_mappings),
            "price_multiplier": config.price_multiplier,
        }

    def _read_section(self, path: Path) -> dict[str, Any]:
        """Read the `transformation` section of a YAML file ({} if the file is absent)."""
        if not path.exists():
            logger.info(f"Configuration file not found, using defaults: {path}")
            return {}

        try:
            with open(path) as f:
                document = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse config file {path}: {e}") from e

        if document is None:
            return {}
        if not isinstance(document, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")

        section = document.get("transformation", {}) or {}
        if not isinstance(section, dict):
            raise ConfigurationError(f"'transformation' section in {path} must be a mapping")
        return section

    def _build_config(self, section: dict[str, Any]) -> TransformConfig:
        """Apply defaults to a raw section and build the config model."""
        defaults = section.get("defaults") or {}
        stages = section.get("stages") or {}

        fields: dict[str, Any] = {
            "enable_validation": section.get("enable_validation", True),
            "enable_optimization": section.get("enable_optimization", True),
            "default_country": defaults.get("country") or "",
            "default_region": defaults.get("region") or "",
            "price_multiplier": defaults.get("price_multiplier") or DEFAULT_PRICE_MULTIPLIER,
        }

        # Empty lists fall back to the defaults
        for key in ("date_formats", "currency_formats", "null_values"):
            if section.get(key):
                fields[key] = [str(item) for item in section[key]]

        # File mappings extend the built-in mappings
        custom_mappings = dict(DEFAULT_CUSTOM_MAPPINGS)
        for key, value in (section.get("custom_mappings") or {}).items():
            custom_mappings[str(key).strip().casefold()] = str(value)
        fields["custom_mappings"] = custom_mappings

        if section.get("data_types"):
            fields["data_types"] = {str(k): str(v) for k, v in section["data_types"].items()}

        for family in _STAGE_REGISTRIES:
            if stages.get(family) is not None:
                fields[family] = [str(name) for name in stages[family]]

        try:
            return TransformConfig(**fields)
        except ValueError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_transformation_config(
    config_path: str | Path | None = None,
    env: str | None = None,
) -> TransformConfig:
    """
    Load and validate a configuration.

    Args:
        config_path: YAML file (defaults to config/data_transformation.yaml)
        env: Optional environment name for `<name>.<env>.yaml` overrides

    Returns:
        Validated TransformConfig

    Raises:
        ConfigurationError: If the file is malformed or the settings are unusable
    """
    loader = TransformConfigLoader(config_path or DEFAULT_CONFIG_PATH)
    config = loader.load_environment_config(env) if env else loader.load_config()
    loader.validate_config(config)
    return config
