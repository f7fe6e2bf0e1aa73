"""
Configuration management with typed Pydantic models.

Provides YAML-based settings with environment variable interpolation.
"""

from oca_validator.config.loader import load_settings
from oca_validator.config.settings import (
    ErrorOrder,
    LoggingConfig,
    ValidationConfig,
    ValidatorSettings,
)

__all__ = [
    "ErrorOrder",
    "LoggingConfig",
    "ValidationConfig",
    "ValidatorSettings",
    "load_settings",
]
