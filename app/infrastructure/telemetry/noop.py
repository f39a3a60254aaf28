"""No-op telemetry implementations.

Used when telemetry is disabled. Every instrument and span accepts calls and
discards them.
"""

from typing import Mapping, Optional

from infrastructure.telemetry.meter import (
    GaugeCallback,
    GaugeHandle,
    Histogram,
    Meter,
    MeterProvider,
    MonotonicCounter,
    UpDownCounter,
)
from infrastructure.telemetry.tracer import (
    SpanKind,
    TraceSpan,
    TraceSpanStatus,
    Tracer,
    TracerProvider,
)


class NoopGaugeHandle(GaugeHandle):
    def stop(self) -> None:
        pass


class NoopUpDownCounter(UpDownCounter):
    def add(self, value: int, attributes: Mapping[str, str]) -> None:
        pass


class NoopMonotonicCounter(MonotonicCounter):
    def add(self, value: int, attributes: Mapping[str, str]) -> None:
        pass


class NoopHistogram(Histogram):
    def record(self, value: float, attributes: Mapping[str, str]) -> None:
        pass


class NoopMeter(Meter):
    def create_gauge(
        self,
        name: str,
        callback: GaugeCallback,
        units: str = "",
        description: str = "",
    ) -> GaugeHandle:
        return NoopGaugeHandle()

    def create_up_down_counter(
        self, name: str, units: str = "", description: str = ""
    ) -> UpDownCounter:
        return NoopUpDownCounter()

    def create_counter(
        self, name: str, units: str = "", description: str = ""
    ) -> MonotonicCounter:
        return NoopMonotonicCounter()

    def create_histogram(
        self, name: str, units: str = "", description: str = ""
    ) -> Histogram:
        return NoopHistogram()


class NoopMeterProvider(MeterProvider):
    def get_meter(
        self, scope: str, attributes: Optional[Mapping[str, str]] = None
    ) -> Meter:
        return NoopMeter()


class NoopTraceSpan(TraceSpan):
    def emit_event(self, name: str, attributes: Mapping[str, str]) -> None:
        pass

    def set_attribute(self, key: str, value: str) -> None:
        pass

    def set_status(self, status: TraceSpanStatus) -> None:
        pass

    def end(self) -> None:
        pass


class NoopTracer(Tracer):
    def create_span(
        self,
        name: str,
        attributes: Optional[Mapping[str, str]] = None,
        kind: SpanKind = SpanKind.INTERNAL,
    ) -> TraceSpan:
        return NoopTraceSpan(name)


class NoopTracerProvider(TracerProvider):
    def get_tracer(
        self, scope: str, attributes: Optional[Mapping[str, str]] = None
    ) -> Tracer:
        return NoopTracer()
