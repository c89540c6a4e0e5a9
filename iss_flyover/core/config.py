"""Flyover configuration loaded from environment variables.

Every value has a default in ``iss_flyover.core.constants``; the service
hosts are configuration rather than protocol, so each can be pointed at a
mirror or a local stub via ``ISS_FLYOVER_*`` variables.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is
    unusable, so a bad endpoint is reported before any request is made.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from urllib.parse import urlsplit

from iss_flyover.core.constants import (
    DEFAULT_GEO_SERVICE_URL,
    DEFAULT_IP_SERVICE_URL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PASS_SERVICE_URL,
    DEFAULT_USER_AGENT,
    ENV_GEO_SERVICE_URL,
    ENV_IP_SERVICE_URL,
    ENV_LOG_LEVEL,
    ENV_PASS_SERVICE_URL,
    ENV_USER_AGENT,
)
from iss_flyover.core.exceptions import FlyoverError

_VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class ConfigValidationError(FlyoverError):
    """Raised when configuration values are invalid.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_category = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}", stage="config")


@dataclass(frozen=True, slots=True)
class FlyoverConfig:
    """Immutable flyover configuration.

    Attributes:
        ip_service_url: Base URL of the public IP identification service.
        geo_service_url: Base URL of the IP geolocation service.
        pass_service_url: URL of the ISS pass prediction endpoint.
        user_agent: ``User-Agent`` header sent with every request.
        log_level: Logging level name used by the command-line interface.
    """

    ip_service_url: str = DEFAULT_IP_SERVICE_URL
    geo_service_url: str = DEFAULT_GEO_SERVICE_URL
    pass_service_url: str = DEFAULT_PASS_SERVICE_URL
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> FlyoverConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a URL is malformed or a required
                string value is empty.
        """
        config = cls(
            ip_service_url=os.getenv(ENV_IP_SERVICE_URL, DEFAULT_IP_SERVICE_URL),
            geo_service_url=os.getenv(ENV_GEO_SERVICE_URL, DEFAULT_GEO_SERVICE_URL),
            pass_service_url=os.getenv(ENV_PASS_SERVICE_URL, DEFAULT_PASS_SERVICE_URL),
            user_agent=os.getenv(ENV_USER_AGENT, DEFAULT_USER_AGENT),
            log_level=os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper(),
        )
        validate(config)
        return config

    @property
    def log_level_value(self) -> int:
        """Return ``log_level`` as a ``logging`` module constant."""
        return logging.getLevelName(self.log_level)


def validate(config: FlyoverConfig) -> None:
    """Validate configuration values.  Raises ``ConfigValidationError``."""
    _check_url(ENV_IP_SERVICE_URL, config.ip_service_url)
    _check_url(ENV_GEO_SERVICE_URL, config.geo_service_url)
    _check_url(ENV_PASS_SERVICE_URL, config.pass_service_url)

    if not config.user_agent.strip():
        raise ConfigValidationError(ENV_USER_AGENT, config.user_agent, "must not be empty")

    if config.log_level not in _VALID_LOG_LEVELS:
        allowed = ", ".join(sorted(_VALID_LOG_LEVELS))
        raise ConfigValidationError(
            ENV_LOG_LEVEL,
            config.log_level,
            f"must be one of {allowed}",
        )


def _check_url(key: str, value: str) -> None:
    if not value:
        raise ConfigValidationError(key, value, "must not be empty")

    parts = urlsplit(value)
    if parts.scheme not in ("http", "https"):
        raise ConfigValidationError(key, value, "must use the http or https scheme")
    if not parts.netloc:
        raise ConfigValidationError(key, value, "must include a host")
