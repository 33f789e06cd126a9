import logging
import structlog
from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

# OpenTelemetry
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource, SERVICE_NAME
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor

from shared.config import settings

# Order log lines carry the id of the request span they were emitted under
def add_otel_ids(logger, log_method, event_dict):
    span = trace.get_current_span()
    if span.is_recording():
        ctx = span.get_span_context()
        event_dict["trace_id"] = trace.format_trace_id(ctx.trace_id)
        event_dict["span_id"] = trace.format_span_id(ctx.span_id)
    return event_dict

# One JSON object per line on stdout, filtered at LOG_LEVEL
def configure_logging(level: str = settings.LOG_LEVEL):
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            add_otel_ids,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level, logging.INFO)),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

def configure_tracing(app: FastAPI, service_name: str, otlp_endpoint: str | None = settings.OTLP_ENDPOINT):
    resource = Resource.create({SERVICE_NAME: service_name})
    provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(provider)

    # Spans are only shipped when a collector is configured
    if otlp_endpoint:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
        exporter = OTLPSpanExporter(endpoint=otlp_endpoint, insecure=True)
        provider.add_span_processor(BatchSpanProcessor(exporter))

    # Incoming requests
    FastAPIInstrumentor.instrument_app(app)

    # Outgoing product lookups
    HTTPXClientInstrumentor().instrument()

def configure_metrics(app: FastAPI):
    # Per-route request counts and latencies next to the order counters in metrics.py
    Instrumentator().instrument(app).expose(app, include_in_schema=False)

def setup_observability(app: FastAPI, service_name: str):
    """Wire logs, spans and /metrics into the order service app at import time."""
    configure_logging()
    configure_tracing(app, service_name)
    configure_metrics(app)
