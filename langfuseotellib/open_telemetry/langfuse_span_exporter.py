import logging
from typing import Sequence

from opentelemetry.sdk.trace import ReadableSpan
from opentelemetry.sdk.trace.export import SpanExporter, SpanExportResult
from typing_extensions import override

from langfuseotellib.open_telemetry.observation_type_detector import (
    enrich_span,
    is_relevant_span,
)
from langfuseotellib.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["OPEN_TELEMETRY"])

# Default timeout for force_flush in milliseconds (30 seconds)
DEFAULT_FLUSH_TIMEOUT_MS: int = 30000


class LangfuseSpanExporter(SpanExporter):
    """
    A SpanExporter that wraps another exporter and tags spans with Langfuse
    observation types at export time.

    Langfuse types: agent, generation, tool, chain, retriever, embedding,
    evaluator, guardrail, event, span

    When embabel_only is enabled, spans without Embabel or GenAI attributes
    (HTTP server spans, health checks, ...) are dropped before export.
    """

    def __init__(
            self,
            wrapped_exporter: SpanExporter,
            embabel_only: bool = False,
    ):
        """
        Initialize the Langfuse span exporter.

        Args:
            wrapped_exporter: The span exporter to delegate to after enrichment
            embabel_only: If True, only export spans with Embabel or GenAI attributes
        """
        self.wrapped_exporter = wrapped_exporter
        self.embabel_only = embabel_only

        if embabel_only:
            logger.info(
                "LangfuseSpanExporter: embabel-only mode enabled, "
                "non-Embabel spans will be filtered out"
            )

    @override
    def export(self, spans: Sequence[ReadableSpan]) -> SpanExportResult:
        """
        Export spans, tagging each with its observation type.

        Args:
            spans: The spans to export

        Returns:
            The result of the wrapped exporter, or SUCCESS when filtering
            left nothing to export
        """
        if not self.embabel_only:
            return self.wrapped_exporter.export([enrich_span(span) for span in spans])

        relevant_spans = [
            enrich_span(span) for span in spans if is_relevant_span(span.attributes)
        ]

        if len(relevant_spans) < len(spans):
            logger.debug(
                "Filtered %d out of %d spans",
                len(spans) - len(relevant_spans),
                len(spans),
            )

        if not relevant_spans:
            return SpanExportResult.SUCCESS

        return self.wrapped_exporter.export(relevant_spans)

    @override
    def shutdown(self) -> None:
        """Shutdown the wrapped exporter."""
        self.wrapped_exporter.shutdown()

    @override
    def force_flush(self, timeout_millis: int = DEFAULT_FLUSH_TIMEOUT_MS) -> bool:
        """Force flush the wrapped exporter."""
        return self.wrapped_exporter.force_flush(timeout_millis)
