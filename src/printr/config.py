"""Configuration loading and validation for printr."""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from printr.constants import BUFFER_SIZE, CONFIG_ENV_VAR, DOCUMENT_NAME
from printr.exceptions import ConfigError
from printr.printing.factory import BACKEND_NAMES

KNOWN_KEYS = ("backend", "document_name", "buffer_size")


@dataclass(frozen=True)
class Config:
    """Runtime settings for printr.

    backend is None when the platform default should be used.
    """

    backend: str | None = None
    document_name: str = DOCUMENT_NAME
    buffer_size: int = BUFFER_SIZE

    def merged(self, **overrides: Any) -> "Config":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        return _validated(replace(self, **changes))


def _error(message: str, field: str, suggestion: str | None = None) -> ConfigError:
    context = {"field": field}
    if suggestion:
        context["suggestion"] = suggestion
    return ConfigError(message, context=context)


def _validated(config: Config) -> Config:
    if config.backend is not None and config.backend not in BACKEND_NAMES:
        raise _error(
            f"Invalid backend '{config.backend}'",
            "backend",
            f"Valid values are: {', '.join(BACKEND_NAMES)}",
        )

    if not isinstance(config.document_name, str) or not config.document_name.strip():
        raise _error("document_name must be a non-empty string", "document_name")

    size = config.buffer_size
    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        raise _error(
            f"buffer_size must be a positive integer, got {size!r}",
            "buffer_size",
            f"The default is {BUFFER_SIZE}",
        )

    return config


def parse_config(data: Any) -> Config:
    """Build a Config from a parsed YAML document."""
    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a YAML dictionary")

    unknown = sorted(str(k) for k in data if k not in KNOWN_KEYS)
    if unknown:
        raise _error(
            f"Unknown configuration key(s): {', '.join(unknown)}",
            unknown[0],
            f"Known keys are: {', '.join(KNOWN_KEYS)}",
        )

    return _validated(
        Config(
            backend=data.get("backend"),
            document_name=data.get("document_name", DOCUMENT_NAME),
            buffer_size=data.get("buffer_size", BUFFER_SIZE),
        )
    )


def load_config(config_path: Path) -> Config:
    """Load and validate a configuration file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}", context={"file": config_path}) from e

    return parse_config(data)


def resolve_config_path(explicit: Path | None = None) -> Path | None:
    """Pick the configuration file: explicit path first, then $PRINTR_CONFIG."""
    if explicit is not None:
        return explicit
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return None
