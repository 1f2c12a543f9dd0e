# text_transformation/shared/telemetry.py
from typing import Optional

import structlog
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from text_transformation.shared.config import Settings, settings as default_settings

logger = structlog.get_logger()

def setup_telemetry(settings: Optional[Settings] = None) -> TracerProvider:
    """
    Initializes the OpenTelemetry SDK.
    Should be called once at process startup (CLI or embedding application).
    Spans are only exported to the console in DEBUG mode; otherwise the
    provider exists to give log lines trace and span IDs.
    """
    settings = settings or default_settings

    # 1. Define Resource (Service Identity)
    resource = Resource.create(attributes={
        "service.name": settings.OTEL_SERVICE_NAME,
        "deployment.environment": settings.APP_ENV.value,
    })

    # 2. Configure Tracer Provider
    provider = TracerProvider(resource=resource)

    # 3. Console exporter for local debugging
    if settings.DEBUG:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    # 4. Set Global Provider
    trace.set_tracer_provider(provider)
    logger.debug("telemetry_configured", service=settings.OTEL_SERVICE_NAME, debug=settings.DEBUG)
    return provider

def get_tracer(name: str):
    """
    Utility to get a tracer for manual instrumentation in specific modules.
    Usage:
        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("my_custom_logic"):
            ...
    """
    return trace.get_tracer(name)
