"""
Configuration Data Models.

Defines all configuration schemas using Pydantic for validation
and type safety.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from katas.templatemethod.transformers import DEFAULT_FAILURE_MARKER


class LogLevel(str, Enum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Attributes:
        level: Minimum level emitted
        format: Log record format string
        file: Optional file to also write logs to
    """

    level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Log level",
    )
    format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format",
    )
    file: str | None = Field(
        default=None,
        description="Log file path",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v


class ProcessingConfig(BaseModel):
    """Configuration for the data processor.

    Attributes:
        failure_marker: Substring that makes a payload untransformable
    """

    failure_marker: str = Field(
        default=DEFAULT_FAILURE_MARKER,
        description="Substring that fails transformation",
        examples=["invalid", "#error"],
    )

    @field_validator("failure_marker")
    @classmethod
    def validate_failure_marker(cls, v: str) -> str:
        """Validate that the marker is not blank."""
        if not v.strip():
            raise ValueError("Failure marker cannot be empty")
        return v


class KatasConfig(BaseModel):
    """Root configuration.

    Attributes:
        logging: Logging configuration
        processing: Data processor configuration
        debug: Enable debug mode
    """

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )
    processing: ProcessingConfig = Field(
        default_factory=ProcessingConfig,
        description="Data processor configuration",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
