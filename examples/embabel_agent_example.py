"""
Example: Tagging Embabel agent spans for Langfuse

This example sends a small agent trace through LangfuseSpanExporter and
prints the observation type each span was given. An in-memory exporter stands
in for Langfuse so no credentials are needed.

Note: This is a standalone example that imports from the installed package.
Run: python examples/embabel_agent_example.py
"""

from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import (
    InMemorySpanExporter,
)

from langfuseotellib.open_telemetry.langfuse_span_exporter import LangfuseSpanExporter


def main() -> None:
    sink = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(
        SimpleSpanProcessor(LangfuseSpanExporter(sink, embabel_only=True))
    )
    tracer = provider.get_tracer("embabel-example")

    with tracer.start_as_current_span(
        "agent", attributes={"embabel.agent.name": "StarNewsFinder"}
    ):
        with tracer.start_as_current_span(
            "action", attributes={"embabel.event.type": "action"}
        ):
            with tracer.start_as_current_span(
                "chat", attributes={"gen_ai.operation.name": "chat"}
            ):
                pass
        with tracer.start_as_current_span(
            "GET /actuator/health", attributes={"http.route": "/actuator/health"}
        ):
            pass

    provider.shutdown()

    for span in sink.get_finished_spans():
        print(f"{span.name}: {span.attributes['langfuse.observation.type']}")


if __name__ == "__main__":
    main()
