# office_terms\shared\logging_config.py
import logging
import sys

import structlog
from opentelemetry import trace

from office_terms.shared.config import LogFormat, settings


def add_open_telemetry_spans(_, __, event_dict):
    """
    Stamp each event with the ids of the active extraction span, so the
    fallback warnings of one page can be found from its trace. Outside a
    recording span both ids are None.
    """
    span = trace.get_current_span()
    if not span.is_recording():
        event_dict["trace_id"] = None
        event_dict["span_id"] = None
        return event_dict

    ctx = span.get_span_context()
    event_dict["trace_id"] = format(ctx.trace_id, "032x")
    event_dict["span_id"] = format(ctx.span_id, "016x")
    return event_dict


def configure_logging(log_format=None, log_level=None):
    """
    Configures structlog and the standard logging library to emit
    structured JSON logs (Production) or colored text logs (Development).

    Arguments default to `settings.LOG_FORMAT` / `settings.LOG_LEVEL`.
    """
    log_format = LogFormat(log_format or settings.LOG_FORMAT)
    log_level = (log_level or settings.LOG_LEVEL).upper()

    # 1. Define the chain of processors
    processors = [
        structlog.contextvars.merge_contextvars,
        add_open_telemetry_spans,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # 2. Determine the Output Format
    if log_format == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    # 3. Configure Structlog
    # Logs go to stderr so CLI output on stdout stays machine-readable.
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(log_level)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        # Not cached: the CLI may reconfigure within one process.
        cache_logger_on_first_use=False,
    )

    # 4. Standard library logging at the same level
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )
