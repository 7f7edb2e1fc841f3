# office_terms\shared\observability.py
from opentelemetry import trace


def get_tracer(name: str):
    """
    Utility to get a tracer for manual instrumentation in Use Cases.
    Usage:
        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("my_custom_logic"):
            ...

    Without a configured TracerProvider this returns the no-op tracer,
    so spans cost nothing in library use.
    """
    return trace.get_tracer(name)
