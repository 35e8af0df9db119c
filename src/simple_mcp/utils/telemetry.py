"""Request tracing for the MCP server.

The dispatcher opens one ``mcp.request`` span per message through the
OpenTelemetry API, which is a no-op until :func:`configure_telemetry`
installs an SDK provider (``pip install simple-mcp[otel]``).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from opentelemetry import trace

if TYPE_CHECKING:
    from simple_mcp.config.models import TelemetrySettings

# Span attributes set by the dispatcher.
ATTR_METHOD = "mcp.method"
ATTR_REQUEST_ID = "mcp.request.id"
ATTR_NOTIFICATION = "mcp.notification"
ATTR_TOOL_NAME = "mcp.tool.name"
ATTR_ERROR_CODE = "mcp.error.code"


def get_tracer(name: str) -> trace.Tracer:
    return trace.get_tracer(name)


def configure_telemetry(settings: TelemetrySettings, service_name: str) -> None:
    """Install a tracer provider that exports request spans.

    Spans go to the OTLP collector at ``settings.otlp_endpoint`` when one
    is set, and to stderr otherwise; stdout is the protocol channel.

    Raises :class:`ImportError` naming the missing package when the
    ``otel`` extra is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import (
            BatchSpanProcessor,
            ConsoleSpanExporter,
            SimpleSpanProcessor,
        )
    except ImportError as exc:
        raise ImportError(
            "Tracing needs opentelemetry-sdk: pip install simple-mcp[otel]"
        ) from exc

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    if settings.otlp_endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
        except ImportError as exc:
            raise ImportError(
                "OTLP export needs opentelemetry-exporter-otlp: pip install simple-mcp[otel]"
            ) from exc
        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=settings.otlp_endpoint))
        )
    else:
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter(out=sys.stderr)))
    trace.set_tracer_provider(provider)
