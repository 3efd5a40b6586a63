"""
Configuration loading for the transformation pipeline.
"""

from .config_loader import (
    DEFAULT_CONFIG_PATH,
    TransformConfigLoader,
    load_transformation_config,
    validate_transform_config,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "TransformConfigLoader",
    "load_transformation_config",
    "validate_transform_config",
]
