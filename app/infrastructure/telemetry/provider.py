"""Telemetry provider.

Bundles a tracer provider and a meter provider with one-shot init and
shutdown callbacks, so the telemetry backend (an exporter, for example) is
started and torn down exactly once no matter how many clients share the
provider.
"""

import threading
from typing import Callable, Mapping, Optional

import structlog

from infrastructure.telemetry.meter import Meter, MeterProvider
from infrastructure.telemetry.noop import NoopMeterProvider, NoopTracerProvider
from infrastructure.telemetry.tracer import Tracer, TracerProvider

logger = structlog.get_logger()


class _RunOnce:
    """Lock-guarded flag that runs a callback at most once."""

    def __init__(self, callback: Optional[Callable[[], None]], label: str) -> None:
        self._callback = callback
        self._label = label
        self._lock = threading.Lock()
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    def __call__(self) -> bool:
        """Run the callback if it has not run yet.

        Returns:
            True if this call ran the callback, False otherwise
        """
        with self._lock:
            if self._done:
                return False
            self._done = True
            if self._callback is None:
                return True
            try:
                self._callback()
            except Exception:  # pylint: disable=broad-except
                # Telemetry is best effort and never fails the caller
                logger.exception("telemetry_callback_failed", phase=self._label)
            return True


class TelemetryProvider:
    """Composed tracing and metrics facade with lifecycle management.

    Args:
        tracer_provider: Source of tracers (defaults to no-op)
        meter_provider: Source of meters (defaults to no-op)
        init: Optional callback run once by `run_init()`
        shutdown: Optional callback run once by `run_shutdown()`

    Usage:
        provider = TelemetryProvider(
            tracer_provider=OtelTracerProvider(),
            meter_provider=OtelMeterProvider(),
            init=start_exporters,
            shutdown=flush_exporters,
        )
        client = ImagebuilderClient(..., telemetry_provider=provider)
    """

    def __init__(
        self,
        tracer_provider: Optional[TracerProvider] = None,
        meter_provider: Optional[MeterProvider] = None,
        init: Optional[Callable[[], None]] = None,
        shutdown: Optional[Callable[[], None]] = None,
    ) -> None:
        self._tracer_provider = tracer_provider or NoopTracerProvider()
        self._meter_provider = meter_provider or NoopMeterProvider()
        self._init = _RunOnce(init, "init")
        self._shutdown = _RunOnce(shutdown, "shutdown")

    @classmethod
    def noop(cls) -> "TelemetryProvider":
        """Provider that discards all spans and measurements."""
        return cls()

    @property
    def initialized(self) -> bool:
        return self._init.done

    @property
    def is_shut_down(self) -> bool:
        return self._shutdown.done

    def get_tracer(
        self, scope: str, attributes: Optional[Mapping[str, str]] = None
    ) -> Tracer:
        return self._tracer_provider.get_tracer(scope, attributes or {})

    def get_meter(
        self, scope: str, attributes: Optional[Mapping[str, str]] = None
    ) -> Meter:
        return self._meter_provider.get_meter(scope, attributes or {})

    def run_init(self) -> bool:
        """Run the init callback at most once; safe under concurrent calls."""
        ran = self._init()
        if ran:
            logger.debug("telemetry_initialized")
        return ran

    def run_shutdown(self) -> bool:
        """Run the shutdown callback at most once; safe under concurrent calls."""
        ran = self._shutdown()
        if ran:
            logger.debug("telemetry_shut_down")
        return ran
