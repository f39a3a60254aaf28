"""Shared fixtures for infrastructure unit tests.

Provides recording implementations of the telemetry facade so tests can
assert on spans (status, attributes, end count) and histogram samples.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple

import pytest

from infrastructure.telemetry import TelemetryProvider
from infrastructure.telemetry.meter import (
    GaugeHandle,
    Histogram,
    Meter,
    MeterProvider,
    MonotonicCounter,
    UpDownCounter,
)
from infrastructure.telemetry.noop import (
    NoopGaugeHandle,
    NoopMonotonicCounter,
    NoopUpDownCounter,
)
from infrastructure.telemetry.tracer import (
    SpanKind,
    TraceSpan,
    TraceSpanStatus,
    Tracer,
    TracerProvider,
)


class RecordingSpan(TraceSpan):
    def __init__(self, name: str, attributes: Mapping[str, str], kind: SpanKind):
        super().__init__(name)
        self.attributes: Dict[str, str] = dict(attributes)
        self.kind = kind
        self.events: List[Tuple[str, Dict[str, str]]] = []
        self.statuses: List[TraceSpanStatus] = []
        self.end_count = 0

    @property
    def status(self) -> TraceSpanStatus:
        return self.statuses[-1] if self.statuses else TraceSpanStatus.UNSET

    def emit_event(self, name: str, attributes: Mapping[str, str]) -> None:
        self.events.append((name, dict(attributes)))

    def set_attribute(self, key: str, value: str) -> None:
        self.attributes[key] = value

    def set_status(self, status: TraceSpanStatus) -> None:
        self.statuses.append(status)

    def end(self) -> None:
        self.end_count += 1


class RecordingTracer(Tracer):
    def __init__(self, scope: str, spans: List[RecordingSpan]):
        self.scope = scope
        self._spans = spans

    def create_span(
        self,
        name: str,
        attributes: Optional[Mapping[str, str]] = None,
        kind: SpanKind = SpanKind.INTERNAL,
    ) -> TraceSpan:
        span = RecordingSpan(name, attributes or {}, kind)
        self._spans.append(span)
        return span


class RecordingTracerProvider(TracerProvider):
    def __init__(self):
        self.spans: List[RecordingSpan] = []
        self.scopes: List[str] = []

    def get_tracer(
        self, scope: str, attributes: Optional[Mapping[str, str]] = None
    ) -> Tracer:
        self.scopes.append(scope)
        return RecordingTracer(scope, self.spans)


class RecordingHistogram(Histogram):
    def __init__(self, name: str, units: str, samples: List[Dict[str, Any]]):
        self.name = name
        self.units = units
        self._samples = samples

    def record(self, value: float, attributes: Mapping[str, str]) -> None:
        self._samples.append(
            {
                "name": self.name,
                "units": self.units,
                "value": value,
                "attributes": dict(attributes),
            }
        )


class RecordingMeter(Meter):
    def __init__(self, samples: List[Dict[str, Any]]):
        self.samples = samples

    def create_gauge(self, name, callback, units="", description="") -> GaugeHandle:
        return NoopGaugeHandle()

    def create_up_down_counter(self, name, units="", description="") -> UpDownCounter:
        return NoopUpDownCounter()

    def create_counter(self, name, units="", description="") -> MonotonicCounter:
        return NoopMonotonicCounter()

    def create_histogram(self, name, units="", description="") -> Histogram:
        return RecordingHistogram(name, units, self.samples)


class RecordingMeterProvider(MeterProvider):
    def __init__(self):
        self.samples: List[Dict[str, Any]] = []

    def get_meter(
        self, scope: str, attributes: Optional[Mapping[str, str]] = None
    ) -> Meter:
        return RecordingMeter(self.samples)

    def metric_names(self) -> List[str]:
        return [sample["name"] for sample in self.samples]


@pytest.fixture
def recording_tracer_provider():
    return RecordingTracerProvider()


@pytest.fixture
def recording_meter_provider():
    return RecordingMeterProvider()


@pytest.fixture
def recording_telemetry(recording_tracer_provider, recording_meter_provider):
    """TelemetryProvider wired to the recording tracer and meter providers."""
    return TelemetryProvider(
        tracer_provider=recording_tracer_provider,
        meter_provider=recording_meter_provider,
    )
