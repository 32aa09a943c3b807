class LangfuseOpenTelemetryAttributeNames:
    # Langfuse attributes
    OBSERVATION_TYPE: str = "langfuse.observation.type"

    # Embabel event type
    EVENT_TYPE: str = "embabel.event.type"

    # Embabel named-entity attributes
    AGENT_NAME: str = "embabel.agent.name"
    TOOL_NAME: str = "embabel.tool.name"
    ACTION_SHORT_NAME: str = "embabel.action.short_name"
    GOAL_SHORT_NAME: str = "embabel.goal.short_name"
    STATE_TO: str = "embabel.state.to"
    LIFECYCLE_STATE: str = "embabel.lifecycle.state"
    EMBEDDING_NAME: str = "embabel.embedding.name"
    RETRIEVER_NAME: str = "embabel.retriever.name"
    EVALUATOR_NAME: str = "embabel.evaluator.name"
    GUARDRAIL_NAME: str = "embabel.guardrail.name"

    # GenAI semantic conventions
    GEN_AI_OPERATION_NAME: str = "gen_ai.operation.name"
    GEN_AI_SYSTEM: str = "gen_ai.system"
