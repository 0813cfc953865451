"""Configuration settings for the scoring CLI and HTTP API."""

import os
from dataclasses import dataclass, fields
from typing import Any, Callable, Dict

from ..errors import ConfigurationError

ENV_PREFIX = "CONTENT_SCORING_"


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"not a boolean: {value!r}")


_PARSERS: Dict[type, Callable[[str], Any]] = {
    bool: _parse_bool,
    int: int,
    float: float,
    str: str,
}


@dataclass
class ServiceConfig:
    """Configuration for the scoring services.

    Attributes:
        api_host: Interface the HTTP API binds to
        api_port: Port the HTTP API listens on
        metrics_enabled: Whether to expose Prometheus metrics
        metrics_port: Port for the Prometheus metrics server
        cache_ttl: Seconds an analysis stays cached per cache key
        cache_size: Maximum number of cached analyses
        max_content_length: Largest accepted content payload in characters
        log_level: Logging level name
        log_json: Render logs as JSON instead of console output
    """

    api_host: str = "localhost"
    api_port: int = 8000
    metrics_enabled: bool = False
    metrics_port: int = 9100
    cache_ttl: int = 300
    cache_size: int = 256
    max_content_length: int = 1_000_000
    log_level: str = "INFO"
    log_json: bool = False

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "ServiceConfig":
        """Create a ServiceConfig instance from a dictionary.

        Args:
            config_dict: Dictionary containing configuration values

        Returns:
            ServiceConfig instance with values from dictionary
        """
        return cls(**{k: v for k, v in config_dict.items() if k in cls.__dataclass_fields__})

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        """Create config from ``CONTENT_SCORING_*`` environment variables.

        Environment Variables:
            CONTENT_SCORING_API_HOST, CONTENT_SCORING_API_PORT,
            CONTENT_SCORING_METRICS_ENABLED, CONTENT_SCORING_METRICS_PORT,
            CONTENT_SCORING_CACHE_TTL, CONTENT_SCORING_CACHE_SIZE,
            CONTENT_SCORING_MAX_CONTENT_LENGTH, CONTENT_SCORING_LOG_LEVEL,
            CONTENT_SCORING_LOG_JSON

        Returns:
            ServiceConfig instance

        Raises:
            ConfigurationError: If a variable cannot be parsed
        """
        values: Dict[str, Any] = {}
        for field in fields(cls):
            raw = os.getenv(ENV_PREFIX + field.name.upper())
            if raw is None:
                continue
            parser = _PARSERS[type(field.default)]
            try:
                values[field.name] = parser(raw)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid value for {ENV_PREFIX}{field.name.upper()}: {raw!r}",
                    details={"field": field.name},
                ) from e

        config = cls(**values)
        config.validate()
        return config

    def validate(self) -> None:
        """Check value ranges.

        Raises:
            ConfigurationError: If any value is out of range
        """
        for name in ("api_port", "metrics_port"):
            port = getattr(self, name)
            if not 0 < port < 65536:
                raise ConfigurationError(f"{name} must be between 1 and 65535, got {port}")

        for name in ("cache_ttl", "cache_size", "max_content_length"):
            if getattr(self, name) <= 0:
                raise ConfigurationError(f"{name} must be positive")
