"""Langfuse observation types and the lookup tables used to assign them.

Langfuse renders each span according to its ``langfuse.observation.type``
attribute. The tables here map Embabel span attributes onto those types.
"""

from enum import Enum
from typing import Dict, Tuple

from langfuseotellib.open_telemetry.attribute_names import (
    LangfuseOpenTelemetryAttributeNames as Names,
)


class ObservationType(str, Enum):
    AGENT = "agent"
    GENERATION = "generation"
    TOOL = "tool"
    CHAIN = "chain"
    RETRIEVER = "retriever"
    EMBEDDING = "embedding"
    EVALUATOR = "evaluator"
    GUARDRAIL = "guardrail"
    EVENT = "event"
    SPAN = "span"


# Embabel event type code -> observation type. Codes missing here are unmapped.
EVENT_TYPE_MAPPING: Dict[str, ObservationType] = {
    "agent_process": ObservationType.AGENT,
    "action": ObservationType.CHAIN,
    "tool_call": ObservationType.TOOL,
    "embedding": ObservationType.EMBEDDING,
    "retriever": ObservationType.RETRIEVER,
    "evaluator": ObservationType.EVALUATOR,
    "guardrail": ObservationType.GUARDRAIL,
    "planning": ObservationType.EVENT,
    "goal_achieved": ObservationType.EVENT,
    "planning_ready": ObservationType.EVENT,
    "plan_formulated": ObservationType.EVENT,
    "replanning": ObservationType.EVENT,
    "state_transition": ObservationType.EVENT,
    "lifecycle_waiting": ObservationType.EVENT,
    "lifecycle_paused": ObservationType.EVENT,
    "lifecycle_stuck": ObservationType.EVENT,
    "object_added": ObservationType.EVENT,
    "object_bound": ObservationType.EVENT,
}

# Checked in order, first attribute present wins.
NAMED_ENTITY_PRECEDENCE: Tuple[Tuple[str, ObservationType], ...] = (
    (Names.AGENT_NAME, ObservationType.AGENT),
    (Names.TOOL_NAME, ObservationType.TOOL),
    (Names.ACTION_SHORT_NAME, ObservationType.CHAIN),
    (Names.EMBEDDING_NAME, ObservationType.EMBEDDING),
    (Names.RETRIEVER_NAME, ObservationType.RETRIEVER),
    (Names.EVALUATOR_NAME, ObservationType.EVALUATOR),
    (Names.GUARDRAIL_NAME, ObservationType.GUARDRAIL),
    (Names.GOAL_SHORT_NAME, ObservationType.EVENT),
    (Names.STATE_TO, ObservationType.EVENT),
    (Names.LIFECYCLE_STATE, ObservationType.EVENT),
)

GEN_AI_CHAT_OPERATION: str = "chat"
