"""OpenTelemetry Distributed Tracing Configuration.

분산 트레이싱 설정:
- FastAPI 자동 계측 (HTTP 요청/응답)
- HTTPX 자동 계측 (Places/Overpass/Nominatim/분류기 호출)
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

logger = logging.getLogger(__name__)

_tracer_provider = None


def setup_tracing(service_name: str, service_version: str, endpoint: str) -> bool:
    """OpenTelemetry 트레이싱 설정.

    Returns:
        bool: 설정 성공 여부
    """
    global _tracer_provider

    try:
        from opentelemetry import trace
        from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor
    except ImportError as e:
        logger.warning("OpenTelemetry not available", extra={"error": str(e)})
        return False

    resource = Resource.create(
        {
            "service.name": service_name,
            "service.version": service_version,
            "telemetry.sdk.language": "python",
        }
    )
    _tracer_provider = TracerProvider(resource=resource)
    _tracer_provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=f"{endpoint}/v1/traces"))
    )
    trace.set_tracer_provider(_tracer_provider)

    logger.info("OpenTelemetry tracing configured", extra={"endpoint": endpoint})
    return True


def instrument_fastapi(app: FastAPI) -> None:
    """FastAPI 자동 계측."""
    try:
        from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

        FastAPIInstrumentor.instrument_app(app, excluded_urls="health,ready")
    except ImportError:
        logger.warning("FastAPI instrumentation not available")


def instrument_httpx() -> None:
    """HTTPX 자동 계측."""
    try:
        from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor

        HTTPXClientInstrumentor().instrument()
    except ImportError:
        logger.warning("HTTPX instrumentation not available")


def shutdown_tracing() -> None:
    """트레이서 종료 (버퍼 플러시)."""
    global _tracer_provider

    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        _tracer_provider = None
