"""
Configuration Management

This module provides:
- YAML configuration loading and validation
- Environment variable handling (.env files, KATAS_* overrides)
- Logging and data processor settings
"""

from katas.config.environment import (
    ensure_dotenv_loaded,
    load_environment,
    reset_environment,
)
from katas.config.loader import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_PATHS,
    ENV_VAR_OVERRIDES,
    ConfigLoader,
    ConfigurationError,
)
from katas.config.models import (
    KatasConfig,
    LoggingConfig,
    LogLevel,
    ProcessingConfig,
)

__all__ = [
    # Config models
    "KatasConfig",
    "LoggingConfig",
    "LogLevel",
    "ProcessingConfig",
    # Loader
    "ConfigLoader",
    "ConfigurationError",
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATHS",
    "ENV_VAR_OVERRIDES",
    # Environment
    "load_environment",
    "ensure_dotenv_loaded",
    "reset_environment",
]
