"""
Typed configuration models using Pydantic.

All tunable validator behaviour is defined here. By default array and
object values are skipped and errors follow declaration order.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ErrorOrder(str, Enum):
    """Order in which attribute errors are reported."""

    DECLARATION = "declaration"  # Attribute table order
    NAME = "name"  # Sorted by attribute name


class ValidationConfig(BaseModel):
    """Configuration for data validation."""

    model_config = ConfigDict(frozen=True)

    error_order: ErrorOrder = Field(
        default=ErrorOrder.DECLARATION,
        description="Order of reported errors across attributes",
    )
    strict_nested: bool = Field(
        default=False,
        description=(
            "Validate array elements and nested object fields instead of "
            "skipping array and object values"
        ),
    )


class LoggingConfig(BaseModel):
    """Logging output configuration."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="WARNING", description="Log level name")
    json_output: bool = Field(default=False, description="Render logs as JSON")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Ensure level is a known logging level name."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            msg = f"Unknown log level: {v!r} (expected one of {', '.join(_LOG_LEVELS)})"
            raise ValueError(msg)
        return level


class ValidatorSettings(BaseModel):
    """Root configuration for the validator."""

    model_config = ConfigDict(frozen=True)

    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
