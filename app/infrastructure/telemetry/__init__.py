"""Telemetry facade: tracing and metrics.

A minimal, swappable boundary between service clients and a telemetry
backend. Clients only see `TelemetryProvider`, `Tracer`/`TraceSpan` and
`Meter`; the backend is either the no-op implementation or OpenTelemetry
(`infrastructure.telemetry.otel`).

Example:
    from infrastructure.telemetry import TelemetryProvider, make_call_with_timing

    provider = TelemetryProvider.noop()
    provider.run_init()
    meter = provider.get_meter("imagebuilder")
    result = make_call_with_timing(do_work, "work.duration", meter, {})
"""

from infrastructure.telemetry.meter import (
    AsyncMeasurement,
    GaugeHandle,
    Histogram,
    Meter,
    MeterProvider,
    MonotonicCounter,
    UpDownCounter,
)
from infrastructure.telemetry.noop import NoopMeterProvider, NoopTracerProvider
from infrastructure.telemetry.provider import TelemetryProvider
from infrastructure.telemetry.timing import (
    CLIENT_DURATION_METRIC,
    RESOLVE_ENDPOINT_DURATION_METRIC,
    make_call_with_timing,
)
from infrastructure.telemetry.tracer import (
    SpanKind,
    TraceSpan,
    TraceSpanStatus,
    Tracer,
    TracerProvider,
)

__all__ = [
    "AsyncMeasurement",
    "GaugeHandle",
    "Histogram",
    "Meter",
    "MeterProvider",
    "MonotonicCounter",
    "UpDownCounter",
    "NoopMeterProvider",
    "NoopTracerProvider",
    "TelemetryProvider",
    "CLIENT_DURATION_METRIC",
    "RESOLVE_ENDPOINT_DURATION_METRIC",
    "make_call_with_timing",
    "SpanKind",
    "TraceSpan",
    "TraceSpanStatus",
    "Tracer",
    "TracerProvider",
]
