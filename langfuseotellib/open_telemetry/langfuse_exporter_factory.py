import base64
import logging
from typing import Optional, cast

from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.trace.export import SpanExporter

from langfuseotellib.open_telemetry.langfuse_exporter_config import (
    ENV_VAR_PUBLIC_KEY,
    ENV_VAR_SECRET_KEY,
    LangfuseExporterConfig,
)
from langfuseotellib.open_telemetry.langfuse_span_exporter import LangfuseSpanExporter
from langfuseotellib.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["OPEN_TELEMETRY"])

TRACES_PATH: str = "/v1/traces"


def create_basic_auth_header(public_key: str, secret_key: str) -> str:
    """
    Create the HTTP Basic auth header value Langfuse expects.

    Args:
        public_key: Langfuse public key (username)
        secret_key: Langfuse secret key (password)

    Returns:
        "Basic " followed by the base64 encoded "public_key:secret_key"
    """
    credentials = f"{public_key}:{secret_key}".encode("utf-8")
    return "Basic " + base64.b64encode(credentials).decode("ascii")


def get_traces_endpoint(endpoint: str) -> str:
    """Append the OTLP traces path to the Langfuse base endpoint."""
    return endpoint.rstrip("/") + TRACES_PATH


def create_langfuse_span_exporter(
        config: LangfuseExporterConfig,
) -> Optional[SpanExporter]:
    """
    Create an OTLP/HTTP span exporter for Langfuse wrapped in LangfuseSpanExporter.

    Args:
        config: Langfuse exporter configuration

    Returns:
        The configured exporter, or None if credentials are missing
    """
    if not config.is_configured():
        logger.warning(
            "Langfuse exporter is enabled but not fully configured. "
            "Please set %s and %s. Langfuse exporter will not be created.",
            ENV_VAR_PUBLIC_KEY,
            ENV_VAR_SECRET_KEY,
        )
        return None

    otlp_exporter = OTLPSpanExporter(
        endpoint=get_traces_endpoint(config.endpoint),
        headers={
            "Authorization": create_basic_auth_header(
                cast(str, config.public_key), cast(str, config.secret_key)
            )
        },
        timeout=config.export_timeout_ms / 1000.0,
    )

    logger.info(
        "Langfuse: SpanExporter configured to send traces to %s (service: %s)",
        config.endpoint,
        config.service_name,
    )

    return LangfuseSpanExporter(
        wrapped_exporter=otlp_exporter, embabel_only=config.embabel_only
    )
