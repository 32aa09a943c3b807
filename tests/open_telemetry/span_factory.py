from typing import Any, Dict, Optional

from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import ReadableSpan
from opentelemetry.trace import SpanContext, SpanKind, Status, StatusCode, TraceFlags

TRACE_ID: int = 0x12345678901234567890123456789012


def make_span(
    attributes: Optional[Dict[str, Any]] = None,
    name: str = "test_span",
    span_id: int = 0x1234567890123456,
) -> ReadableSpan:
    """Create a finished ReadableSpan with the given attributes."""
    return ReadableSpan(
        name=name,
        context=SpanContext(
            trace_id=TRACE_ID,
            span_id=span_id,
            is_remote=False,
            trace_flags=TraceFlags(TraceFlags.SAMPLED),
        ),
        parent=SpanContext(
            trace_id=TRACE_ID,
            span_id=0x0987654321098765,
            is_remote=False,
        ),
        resource=Resource.create({"service.name": "test-service"}),
        attributes=attributes,
        kind=SpanKind.CLIENT,
        status=Status(StatusCode.OK),
        start_time=1_000_000_000,
        end_time=2_000_000_000,
    )
