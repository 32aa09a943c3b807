"""OpenTelemetry initialization with Langfuse export.

This module provides the LangfuseOtelInitializer class that attaches the
Langfuse span exporter to the global TracerProvider, creating one when
auto-instrumentation has not already installed it.
"""

import logging
from logging import Logger
from threading import Lock
from typing import Optional

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SpanExporter
from opentelemetry.semconv.attributes.service_attributes import SERVICE_NAME

from langfuseotellib.open_telemetry.langfuse_exporter_config import (
    LangfuseExporterConfig,
)
from langfuseotellib.open_telemetry.langfuse_exporter_factory import (
    create_langfuse_span_exporter,
)
from langfuseotellib.utilities.logger.log_levels import SRC_LOG_LEVELS


class LangfuseOtelInitializer:
    """
    Initializes OpenTelemetry tracing with the Langfuse span exporter.

    Integrates with opentelemetry-instrument auto-instrumentation by
    augmenting an existing SDK TracerProvider; otherwise installs a new one.

    Thread-safe singleton pattern for initialization.
    """

    _initialized: bool = False
    _lock: Lock = Lock()
    _logger: Logger = logging.getLogger(__name__)
    _logger.setLevel(SRC_LOG_LEVELS["INITIALIZATION"])

    @classmethod
    def initialize(cls, config: Optional[LangfuseExporterConfig] = None) -> bool:
        """
        Initialize OpenTelemetry with Langfuse export.

        Args:
            config: Optional configuration override. If None, loads from environment.

        Returns:
            True if a Langfuse exporter was installed by this call

        This method is idempotent and thread-safe - safe to call multiple times.

        Raises:
            No exceptions raised - failures are logged and initialization continues
        """
        with cls._lock:
            if cls._initialized:
                cls._logger.debug("LangfuseOtelInitializer already initialized")
                return False

            try:
                config = config or LangfuseExporterConfig.from_environment()

                if not config.enabled:
                    cls._logger.info("Langfuse export disabled via configuration")
                    cls._initialized = True
                    return False

                validation_errors = config.validate()
                if validation_errors:
                    cls._logger.warning(
                        "Langfuse exporter configuration has validation errors: "
                        "%s. Langfuse export disabled.",
                        validation_errors,
                    )
                    cls._initialized = True
                    return False

                exporter = create_langfuse_span_exporter(config)
                if exporter is None:
                    cls._initialized = True
                    return False

                cls._install_exporter(exporter, config)

                cls._logger.info(
                    "Langfuse export initialized successfully (embabel_only: %s)",
                    config.embabel_only,
                )
                cls._initialized = True
                return True

            except Exception:
                cls._logger.exception(
                    "Failed to initialize Langfuse export. "
                    "Continuing without Langfuse to prevent app failure."
                )
                cls._initialized = True  # Mark as initialized to prevent retries
                return False

    @classmethod
    def _install_exporter(
        cls, exporter: SpanExporter, config: LangfuseExporterConfig
    ) -> None:
        """
        Attach the exporter to the global TracerProvider through a BatchSpanProcessor.

        Args:
            exporter: The Langfuse span exporter
            config: Exporter configuration (for the service name)
        """
        processor = BatchSpanProcessor(exporter)
        tracer_provider = trace.get_tracer_provider()

        if isinstance(tracer_provider, TracerProvider):
            tracer_provider.add_span_processor(processor)
            cls._logger.debug(
                "Added Langfuse exporter to existing %s",
                type(tracer_provider).__name__,
            )
            return

        resource = Resource.create({SERVICE_NAME: config.service_name})
        new_provider = TracerProvider(resource=resource)
        new_provider.add_span_processor(processor)
        trace.set_tracer_provider(new_provider)

        cls._logger.debug(
            "Installed new TracerProvider for service %s", config.service_name
        )

    @classmethod
    def reset(cls) -> None:
        """
        Reset initialization state.

        FOR TESTING ONLY - allows re-initialization in test scenarios.
        """
        with cls._lock:
            cls._initialized = False
