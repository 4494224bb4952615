import logging
from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource, SERVICE_NAME
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor  # type: ignore

logger = logging.getLogger(__name__)

UNTRACED_ROUTES = "healthcheck"


def create_tracer_provider(service_name: str) -> TracerProvider:
    resource = Resource(attributes={SERVICE_NAME: service_name})
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter()))
    return provider


def setup_opentelemetry(service_name: str, app: FastAPI) -> None:
    trace.set_tracer_provider(create_tracer_provider(service_name))
    FastAPIInstrumentor.instrument_app(  # type: ignore
        app, excluded_urls=UNTRACED_ROUTES
    )
    logger.info(f"Tracing task routes as '{service_name}'")
