"""
Configuration Loader.

Reads katas settings from a YAML file, expands ${VAR} references,
applies KATAS_* environment overrides and validates the result.

Values stay strings until validation; pydantic converts them to the
type of the field they land in.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from katas.config.environment import load_environment
from katas.config.models import KatasConfig

# Searched in the working directory when no path is given
DEFAULT_CONFIG_PATHS = [
    "katas.yaml",
    "katas.yml",
    ".katas.yaml",
    ".katas.yml",
]

# Names a config file explicitly
CONFIG_ENV_VAR = "KATAS_CONFIG"

# Environment variable -> dotted field path
ENV_VAR_OVERRIDES = {
    "KATAS_LOG_LEVEL": "logging.level",
    "KATAS_LOG_FILE": "logging.file",
    "KATAS_FAILURE_MARKER": "processing.failure_marker",
    "KATAS_DEBUG": "debug",
}

# ${NAME}, ${NAME:-fallback} or ${NAME:fallback}
_REFERENCE = re.compile(r"\$\{(\w+)(?::-?([^}]*))?\}")


class ConfigurationError(Exception):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        errors: list[dict] | None = None,
        path: Path | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message
            errors: Validation errors reported by pydantic
            path: Config file that caused the error
        """
        super().__init__(message)
        self.errors = errors or []
        self.path = path

    def __str__(self) -> str:
        lines = [super().__str__()]
        if self.path:
            lines[0] += f" (file: {self.path})"
        for err in self.errors[:5]:
            field_path = ".".join(str(part) for part in err.get("loc", []))
            lines.append(f"  - {field_path}: {err.get('msg', 'Unknown error')}")
        if len(self.errors) > 5:
            lines.append(f"  ... and {len(self.errors) - 5} more errors")
        return "\n".join(lines)


class ConfigLoader:
    """Builds a KatasConfig from YAML and the environment.

    Usage:
        settings = ConfigLoader("katas.yaml").load()

        # Or find the file through KATAS_CONFIG / the default names
        settings = ConfigLoader().load_from_env()
    """

    def __init__(
        self,
        config_path: str | Path | None = None,
        env_file: str = ".env",
    ) -> None:
        """Initialize the loader.

        Args:
            config_path: YAML file to read. Without one, load() validates
                environment overrides on top of the defaults.
            env_file: .env file loaded before reading the environment
        """
        self._config_path = Path(config_path) if config_path else None
        self._env_file = env_file
        self._loaded_from_path: Path | None = None

    @property
    def loaded_from_path(self) -> Path | None:
        """File the last load() read, or None when only defaults were used."""
        return self._loaded_from_path

    def load(self) -> KatasConfig:
        """Read, expand, override and validate the configuration.

        Raises:
            FileNotFoundError: If the configured file does not exist
            ConfigurationError: If the file is not valid YAML or fails validation
        """
        load_environment(self._env_file)

        raw = self._read_yaml(self._config_path) if self._config_path else {}
        self._loaded_from_path = self._config_path

        settings = _prune_none(_expand(raw))
        for env_var, field_path in ENV_VAR_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value:
                _assign(settings, field_path.split("."), value)

        try:
            return KatasConfig(**settings)
        except ValidationError as e:
            raise ConfigurationError(
                f"Configuration validation failed: {e.error_count()} errors",
                errors=e.errors(),
                path=self._loaded_from_path,
            ) from e

    def load_from_env(self) -> KatasConfig:
        """Locate the config file, then load it.

        KATAS_CONFIG wins when set; otherwise the first of
        DEFAULT_CONFIG_PATHS found in the working directory is used.

        Raises:
            FileNotFoundError: If KATAS_CONFIG names a missing file or
                no default file exists
            ConfigurationError: If the file is invalid
        """
        load_environment(self._env_file)

        named = os.environ.get(CONFIG_ENV_VAR)
        if named:
            if not Path(named).exists():
                raise FileNotFoundError(
                    f"Config file specified by {CONFIG_ENV_VAR} not found: {named}"
                )
            self._config_path = Path(named)
            return self.load()

        found = next((Path(p) for p in DEFAULT_CONFIG_PATHS if Path(p).exists()), None)
        if found is None:
            raise FileNotFoundError(
                f"No configuration file found. Searched: {', '.join(DEFAULT_CONFIG_PATHS)}. "
                f"Set {CONFIG_ENV_VAR} environment variable or create a config file."
            )
        self._config_path = found
        return self.load()

    @staticmethod
    def _read_yaml(path: Path) -> dict[str, Any]:
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML: {e}", path=path) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration root must be a mapping", path=path)
        return data


def _expand(node: Any) -> Any:
    """Replace ${VAR} references in every string of a YAML tree.

    A reference with no value and no fallback is left untouched.
    """
    if isinstance(node, dict):
        return {key: _expand(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_expand(item) for item in node]
    if not isinstance(node, str):
        return node

    def resolve(match: re.Match[str]) -> str:
        value = os.environ.get(match.group(1))
        if value is not None:
            return value
        return match.group(2) if match.group(2) is not None else match.group(0)

    return _REFERENCE.sub(resolve, node)


def _prune_none(node: Any) -> Any:
    """Drop None mapping values so empty YAML sections fall back to defaults."""
    if isinstance(node, dict):
        return {key: _prune_none(value) for key, value in node.items() if value is not None}
    return node


def _assign(settings: dict[str, Any], keys: list[str], value: str) -> None:
    """Set settings[k1][k2]...[kn] = value, creating sections as needed."""
    for key in keys[:-1]:
        if not isinstance(settings.get(key), dict):
            settings[key] = {}
        settings = settings[key]
    settings[keys[-1]] = value
