"""Metric interfaces.

A `Meter` creates four kinds of instruments, each identified by name, unit
and description:

- asynchronous gauge, driven by a callback that receives an
  `AsyncMeasurement` to record into
- up/down counter
- monotonic counter
- histogram

Creating the same logical instrument repeatedly is allowed; every call
returns a fresh handle owned by the caller.
"""

from abc import ABC, abstractmethod
from typing import Callable, Mapping, Optional


class AsyncMeasurement(ABC):
    """Sink handed to gauge callbacks to record observed values."""

    @abstractmethod
    def record(self, value: float, attributes: Mapping[str, str]) -> None:
        """Record one observation."""


GaugeCallback = Callable[[AsyncMeasurement], None]


class GaugeHandle(ABC):
    """Handle to a registered asynchronous gauge."""

    @abstractmethod
    def stop(self) -> None:
        """Stop invoking the gauge callback."""


class UpDownCounter(ABC):
    @abstractmethod
    def add(self, value: int, attributes: Mapping[str, str]) -> None:
        """Add a positive or negative delta."""


class MonotonicCounter(ABC):
    @abstractmethod
    def add(self, value: int, attributes: Mapping[str, str]) -> None:
        """Add a non-negative delta."""


class Histogram(ABC):
    @abstractmethod
    def record(self, value: float, attributes: Mapping[str, str]) -> None:
        """Record one sample."""


class Meter(ABC):
    """Factory for metric instruments within one instrumentation scope."""

    @abstractmethod
    def create_gauge(
        self,
        name: str,
        callback: GaugeCallback,
        units: str = "",
        description: str = "",
    ) -> GaugeHandle:
        """Register an asynchronous gauge driven by `callback`."""

    @abstractmethod
    def create_up_down_counter(
        self, name: str, units: str = "", description: str = ""
    ) -> UpDownCounter:
        """Create an up/down counter."""

    @abstractmethod
    def create_counter(
        self, name: str, units: str = "", description: str = ""
    ) -> MonotonicCounter:
        """Create a monotonic counter."""

    @abstractmethod
    def create_histogram(
        self, name: str, units: str = "", description: str = ""
    ) -> Histogram:
        """Create a histogram."""


class MeterProvider(ABC):
    """Entry point to obtain meters."""

    @abstractmethod
    def get_meter(
        self, scope: str, attributes: Optional[Mapping[str, str]] = None
    ) -> Meter:
        """Return a meter for the given scope."""
