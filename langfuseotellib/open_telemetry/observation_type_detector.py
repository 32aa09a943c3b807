"""Attribute-based detection of Langfuse observation types.

This module provides:
- detect_observation_type: picks one ObservationType from a span's attributes
- is_relevant_span: decides whether a span carries Embabel or GenAI signal
- enrich_span: returns a copy of a span tagged with its observation type
- EnrichedReadableSpan: the copy, keeping the original dropped counts

The three functions are pure. Only string values count as a present
attribute, so any attribute mapping yields a result.
"""

from typing import Any, Dict, Mapping, Optional

from opentelemetry.sdk.trace import ReadableSpan
from typing_extensions import override

from langfuseotellib.open_telemetry.attribute_names import (
    LangfuseOpenTelemetryAttributeNames as Names,
)
from langfuseotellib.open_telemetry.observation_type import (
    EVENT_TYPE_MAPPING,
    GEN_AI_CHAT_OPERATION,
    NAMED_ENTITY_PRECEDENCE,
    ObservationType,
)


def _get_string(attributes: Optional[Mapping[str, Any]], key: str) -> Optional[str]:
    if not attributes:
        return None
    value = attributes.get(key)
    return value if isinstance(value, str) else None


def _has(attributes: Optional[Mapping[str, Any]], key: str) -> bool:
    return _get_string(attributes, key) is not None


def detect_observation_type(
    attributes: Optional[Mapping[str, Any]],
) -> ObservationType:
    """
    Determine the observation type for a span's attributes.

    Order of checks:
    1. Embabel event type code, if it maps to a type
    2. Embabel named-entity attributes, in NAMED_ENTITY_PRECEDENCE order
    3. GenAI chat operations -> generation
    4. Fallback -> span

    Args:
        attributes: The span attributes to inspect

    Returns:
        Exactly one ObservationType
    """
    event_type = _get_string(attributes, Names.EVENT_TYPE)
    if event_type is not None:
        mapped = EVENT_TYPE_MAPPING.get(event_type)
        if mapped is not None:
            return mapped

    for key, observation_type in NAMED_ENTITY_PRECEDENCE:
        if _has(attributes, key):
            return observation_type

    # Only actual chat calls are generations
    if _get_string(attributes, Names.GEN_AI_OPERATION_NAME) == GEN_AI_CHAT_OPERATION:
        return ObservationType.GENERATION

    return ObservationType.SPAN


def is_relevant_span(attributes: Optional[Mapping[str, Any]]) -> bool:
    """
    Check whether a span has Langfuse, Embabel or GenAI attributes.

    GenAI spans are relevant whatever their operation, so a span can be kept
    here and still be labeled ``span`` by detect_observation_type.
    """
    if _has(attributes, Names.OBSERVATION_TYPE):
        return True

    if _has(attributes, Names.EVENT_TYPE):
        return True

    if any(_has(attributes, key) for key, _ in NAMED_ENTITY_PRECEDENCE):
        return True

    return _has(attributes, Names.GEN_AI_OPERATION_NAME) or _has(
        attributes, Names.GEN_AI_SYSTEM
    )


class EnrichedReadableSpan(ReadableSpan):
    """
    A ReadableSpan copy that differs from the wrapped span only in its attributes.

    Dropped attribute, event and link counts are read from the wrapped span so
    exporters report the same limits the original span hit.
    """

    def __init__(self, span: ReadableSpan, attributes: Dict[str, Any]) -> None:
        super().__init__(
            name=span.name,
            context=span.context,
            parent=span.parent,
            resource=span.resource,
            attributes=attributes,
            events=span.events,
            links=span.links,
            kind=span.kind,
            status=span.status,
            start_time=span.start_time,
            end_time=span.end_time,
            instrumentation_scope=span.instrumentation_scope,
        )
        self._wrapped_span = span

    @property
    @override
    def dropped_attributes(self) -> int:
        return self._wrapped_span.dropped_attributes

    @property
    @override
    def dropped_events(self) -> int:
        return self._wrapped_span.dropped_events

    @property
    @override
    def dropped_links(self) -> int:
        return self._wrapped_span.dropped_links


def enrich_span(span: ReadableSpan) -> ReadableSpan:
    """
    Tag a span with its Langfuse observation type.

    Spans that already carry an observation type are returned as-is. Otherwise
    an EnrichedReadableSpan is built with the same identity, timing, links,
    events, status and dropped counts and a copy of the attributes plus the
    observation type. The given span is never modified.
    """
    attributes = span.attributes
    if _has(attributes, Names.OBSERVATION_TYPE):
        return span

    observation_type = detect_observation_type(attributes)
    new_attributes = dict(attributes or {})
    new_attributes[Names.OBSERVATION_TYPE] = observation_type.value

    return EnrichedReadableSpan(span, new_attributes)
