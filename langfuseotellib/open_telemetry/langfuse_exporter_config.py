"""Configuration model for the Langfuse span exporter.

This module provides immutable configuration for exporting spans to Langfuse,
loaded from environment variables with validation.
"""

import logging
import os
from dataclasses import dataclass
from typing import ClassVar, Optional

from langfuseotellib.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["OPEN_TELEMETRY"])

# Environment variable names
ENV_VAR_ENABLED: str = "LANGFUSE_EXPORTER_ENABLED"
ENV_VAR_ENDPOINT: str = "LANGFUSE_OTEL_ENDPOINT"
ENV_VAR_PUBLIC_KEY: str = "LANGFUSE_PUBLIC_KEY"
ENV_VAR_SECRET_KEY: str = "LANGFUSE_SECRET_KEY"
ENV_VAR_SERVICE_NAME: str = "LANGFUSE_SERVICE_NAME"
ENV_VAR_EXPORT_TIMEOUT_MS: str = "LANGFUSE_EXPORT_TIMEOUT_MS"
ENV_VAR_EMBABEL_ONLY: str = "LANGFUSE_EMBABEL_ONLY"

# Boolean parsing
_TRUTHY_VALUES: frozenset[str] = frozenset(("true", "1", "yes", "on"))


def _parse_bool(value: str) -> bool:
    """
    Parse boolean value from string.

    Args:
        value: String value to parse

    Returns:
        True if value is in truthy set (case-insensitive), False otherwise
    """
    return value.strip().lower() in _TRUTHY_VALUES


def _parse_int(name: str, value: Optional[str], default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Invalid %s value: %s. Using default %d.", name, value, default)
        return default


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True)
class LangfuseExporterConfig:
    """
    Immutable configuration for the Langfuse exporter.

    Langfuse authenticates OTLP requests with HTTP Basic auth, using the
    public key (pk-lf-...) as username and the secret key (sk-lf-...) as
    password.
    """

    # Default values
    DEFAULT_ENABLED: ClassVar[bool] = True
    DEFAULT_ENDPOINT: ClassVar[str] = "https://cloud.langfuse.com/api/public/otel"
    DEFAULT_SERVICE_NAME: ClassVar[str] = "embabel-agent"
    DEFAULT_EXPORT_TIMEOUT_MS: ClassVar[int] = 30000
    DEFAULT_EMBABEL_ONLY: ClassVar[bool] = False

    enabled: bool = DEFAULT_ENABLED
    endpoint: str = DEFAULT_ENDPOINT
    public_key: Optional[str] = None
    secret_key: Optional[str] = None
    service_name: str = DEFAULT_SERVICE_NAME
    export_timeout_ms: int = DEFAULT_EXPORT_TIMEOUT_MS
    embabel_only: bool = DEFAULT_EMBABEL_ONLY

    @classmethod
    def from_environment(cls) -> "LangfuseExporterConfig":
        """
        Load configuration from environment variables.

        Returns:
            Immutable configuration instance

        Environment Variables:
            LANGFUSE_EXPORTER_ENABLED: Enable/disable the exporter
            LANGFUSE_OTEL_ENDPOINT: Base OTLP endpoint (/v1/traces is appended)
            LANGFUSE_PUBLIC_KEY: Langfuse public key
            LANGFUSE_SECRET_KEY: Langfuse secret key
            LANGFUSE_SERVICE_NAME: service.name for traces
            LANGFUSE_EXPORT_TIMEOUT_MS: Export timeout in milliseconds
            LANGFUSE_EMBABEL_ONLY: Only export spans with Embabel or GenAI attributes
        """
        enabled = _parse_bool(
            os.environ.get(ENV_VAR_ENABLED, str(cls.DEFAULT_ENABLED))
        )
        endpoint = os.environ.get(ENV_VAR_ENDPOINT, cls.DEFAULT_ENDPOINT).strip()
        export_timeout_ms = _parse_int(
            ENV_VAR_EXPORT_TIMEOUT_MS,
            os.environ.get(ENV_VAR_EXPORT_TIMEOUT_MS),
            cls.DEFAULT_EXPORT_TIMEOUT_MS,
        )
        embabel_only = _parse_bool(
            os.environ.get(ENV_VAR_EMBABEL_ONLY, str(cls.DEFAULT_EMBABEL_ONLY))
        )

        return cls(
            enabled=enabled,
            endpoint=endpoint,
            public_key=os.environ.get(ENV_VAR_PUBLIC_KEY),
            secret_key=os.environ.get(ENV_VAR_SECRET_KEY),
            service_name=os.environ.get(ENV_VAR_SERVICE_NAME, cls.DEFAULT_SERVICE_NAME),
            export_timeout_ms=export_timeout_ms,
            embabel_only=embabel_only,
        )

    def is_configured(self) -> bool:
        """
        Check that the credentials and endpoint are all set.

        Returns:
            True if public key, secret key and endpoint are non-blank
        """
        return not (
            _is_blank(self.public_key)
            or _is_blank(self.secret_key)
            or _is_blank(self.endpoint)
        )

    def validate(self) -> list[str]:
        """
        Validate configuration and return list of validation errors.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors: list[str] = []

        if self.export_timeout_ms <= 0:
            errors.append(
                f"{ENV_VAR_EXPORT_TIMEOUT_MS} must be positive, got {self.export_timeout_ms}"
            )

        return errors
