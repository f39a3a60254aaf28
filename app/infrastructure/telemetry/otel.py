"""OpenTelemetry implementation of the telemetry facade.

Adapts `opentelemetry-api` tracers and meters to the interfaces in
`infrastructure.telemetry.tracer` and `infrastructure.telemetry.meter`.
When no SDK providers are passed, the globally registered OpenTelemetry
providers are used.
"""

import threading
from typing import Any, Callable, Dict, List, Mapping, Optional, Set, Tuple

import structlog
from opentelemetry import metrics as otel_metrics
from opentelemetry import trace as otel_trace
from opentelemetry.metrics import CallbackOptions, Observation
from opentelemetry.trace import Status, StatusCode

from infrastructure.telemetry.meter import (
    AsyncMeasurement,
    GaugeCallback,
    GaugeHandle,
    Histogram,
    Meter,
    MeterProvider,
    MonotonicCounter,
    UpDownCounter,
)
from infrastructure.telemetry.provider import TelemetryProvider
from infrastructure.telemetry.tracer import (
    SpanKind,
    TraceSpan,
    TraceSpanStatus,
    Tracer,
    TracerProvider,
)

logger = structlog.get_logger()

_SPAN_KINDS = {
    SpanKind.INTERNAL: otel_trace.SpanKind.INTERNAL,
    SpanKind.CLIENT: otel_trace.SpanKind.CLIENT,
    SpanKind.SERVER: otel_trace.SpanKind.SERVER,
}

_STATUS_CODES = {
    TraceSpanStatus.UNSET: StatusCode.UNSET,
    TraceSpanStatus.OK: StatusCode.OK,
    TraceSpanStatus.ERROR: StatusCode.ERROR,
}


class OtelTraceSpan(TraceSpan):
    def __init__(self, name: str, span: otel_trace.Span) -> None:
        super().__init__(name)
        self._span = span

    def emit_event(self, name: str, attributes: Mapping[str, str]) -> None:
        self._span.add_event(name, attributes=dict(attributes))

    def set_attribute(self, key: str, value: str) -> None:
        self._span.set_attribute(key, value)

    def set_status(self, status: TraceSpanStatus) -> None:
        self._span.set_status(Status(_STATUS_CODES[status]))

    def end(self) -> None:
        self._span.end()


class OtelTracer(Tracer):
    def __init__(self, tracer: otel_trace.Tracer) -> None:
        self._tracer = tracer

    def create_span(
        self,
        name: str,
        attributes: Optional[Mapping[str, str]] = None,
        kind: SpanKind = SpanKind.INTERNAL,
    ) -> TraceSpan:
        span = self._tracer.start_span(
            name, kind=_SPAN_KINDS[kind], attributes=dict(attributes or {})
        )
        return OtelTraceSpan(name, span)


class OtelTracerProvider(TracerProvider):
    """Tracer provider backed by an OpenTelemetry tracer provider.

    Args:
        provider: OpenTelemetry tracer provider; the global one if omitted
    """

    def __init__(self, provider: Optional[otel_trace.TracerProvider] = None) -> None:
        self._provider = provider

    @property
    def provider(self) -> otel_trace.TracerProvider:
        return self._provider or otel_trace.get_tracer_provider()

    def get_tracer(
        self, scope: str, attributes: Optional[Mapping[str, str]] = None
    ) -> Tracer:
        return OtelTracer(
            self.provider.get_tracer(scope, attributes=dict(attributes or {}))
        )


class _CollectingMeasurement(AsyncMeasurement):
    """Collects gauge observations for one OpenTelemetry callback run."""

    def __init__(self) -> None:
        self.observations: List[Observation] = []

    def record(self, value: float, attributes: Mapping[str, str]) -> None:
        self.observations.append(Observation(value, dict(attributes)))


class OtelGaugeHandle(GaugeHandle):
    def __init__(self, on_stop: Optional[Callable[["OtelGaugeHandle"], None]] = None):
        self._stopped = threading.Event()
        self._on_stop = on_stop

    @property
    def stopped(self) -> bool:
        return self._stopped.is_set()

    def stop(self) -> None:
        if self._stopped.is_set():
            return
        self._stopped.set()
        if self._on_stop is not None:
            self._on_stop(self)


class OtelMeter(Meter):
    """Meter over one OpenTelemetry meter.

    OpenTelemetry keeps one observable gauge per name for the life of the
    meter, so gauges are keyed by name here: the SDK instrument is registered
    on first use and always observes the most recently created callback for
    that name. Stopping a handle detaches its callback; creating the gauge
    again attaches the new one.
    """

    def __init__(self, meter: otel_metrics.Meter) -> None:
        self._meter = meter
        self._lock = threading.Lock()
        self._gauges: Dict[str, Tuple[OtelGaugeHandle, GaugeCallback]] = {}
        self._registered_gauges: Set[str] = set()

    def create_gauge(
        self,
        name: str,
        callback: GaugeCallback,
        units: str = "",
        description: str = "",
    ) -> GaugeHandle:
        handle = OtelGaugeHandle(on_stop=lambda stopped: self._release(name, stopped))
        with self._lock:
            previous = self._gauges.get(name)
            self._gauges[name] = (handle, callback)
            needs_registration = name not in self._registered_gauges
            self._registered_gauges.add(name)

        if previous is not None:
            logger.debug("gauge_callback_replaced", gauge=name)
            previous[0].stop()
        if needs_registration:
            self._meter.create_observable_gauge(
                name,
                callbacks=[self._gauge_observer(name)],
                unit=units,
                description=description,
            )
        return handle

    def _release(self, name: str, handle: OtelGaugeHandle) -> None:
        with self._lock:
            current = self._gauges.get(name)
            if current is not None and current[0] is handle:
                del self._gauges[name]

    def _gauge_observer(self, name: str):
        def _observe(options: CallbackOptions) -> List[Observation]:
            with self._lock:
                current = self._gauges.get(name)
            if current is None:
                return []
            measurement = _CollectingMeasurement()
            current[1](measurement)
            return measurement.observations

        return _observe

    def create_up_down_counter(
        self, name: str, units: str = "", description: str = ""
    ) -> UpDownCounter:
        return OtelUpDownCounter(
            self._meter.create_up_down_counter(
                name, unit=units, description=description
            )
        )

    def create_counter(
        self, name: str, units: str = "", description: str = ""
    ) -> MonotonicCounter:
        return OtelMonotonicCounter(
            self._meter.create_counter(name, unit=units, description=description)
        )

    def create_histogram(
        self, name: str, units: str = "", description: str = ""
    ) -> Histogram:
        return OtelHistogram(
            self._meter.create_histogram(name, unit=units, description=description)
        )


class OtelMeterProvider(MeterProvider):
    """Meter provider backed by an OpenTelemetry meter provider.

    The same scope and attributes always return the same `OtelMeter`, so gauge
    names stay unique per underlying OpenTelemetry meter.

    Args:
        provider: OpenTelemetry meter provider; the global one if omitted
    """

    def __init__(self, provider: Optional[otel_metrics.MeterProvider] = None) -> None:
        self._provider = provider
        self._lock = threading.Lock()
        self._meters: Dict[Tuple[str, Tuple[Tuple[str, str], ...]], OtelMeter] = {}

    @property
    def provider(self) -> otel_metrics.MeterProvider:
        return self._provider or otel_metrics.get_meter_provider()

    def get_meter(
        self, scope: str, attributes: Optional[Mapping[str, str]] = None
    ) -> Meter:
        key = (scope, tuple(sorted((attributes or {}).items())))
        with self._lock:
            meter = self._meters.get(key)
            if meter is None:
                meter = OtelMeter(
                    self.provider.get_meter(scope, attributes=dict(attributes or {}))
                )
                self._meters[key] = meter
        return meter


def build_opentelemetry_provider(
    tracer_provider: Optional[otel_trace.TracerProvider] = None,
    meter_provider: Optional[otel_metrics.MeterProvider] = None,
) -> TelemetryProvider:
    """Build a TelemetryProvider over OpenTelemetry providers.

    The shutdown callback flushes and shuts down the given SDK providers
    (when they support it), so exporters are torn down exactly once.

    Args:
        tracer_provider: OpenTelemetry tracer provider (global if omitted)
        meter_provider: OpenTelemetry meter provider (global if omitted)

    Returns:
        TelemetryProvider wired to OpenTelemetry
    """
    tracers = OtelTracerProvider(tracer_provider)
    meters = OtelMeterProvider(meter_provider)

    def _shutdown() -> None:
        for provider in (tracers.provider, meters.provider):
            shutdown = getattr(provider, "shutdown", None)
            if callable(shutdown):
                shutdown()
        logger.info("opentelemetry_providers_shut_down")

    return TelemetryProvider(
        tracer_provider=tracers,
        meter_provider=meters,
        shutdown=_shutdown,
    )
