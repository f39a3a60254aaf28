"""Tracing interfaces.

A `TracerProvider` hands out `Tracer` instances per scope; a `Tracer`
creates `TraceSpan` objects. Implementations live in
`infrastructure.telemetry.noop` and `infrastructure.telemetry.otel`.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Mapping, Optional


class SpanKind(Enum):
    """Role of the span in a trace."""

    INTERNAL = "internal"
    CLIENT = "client"
    SERVER = "server"


class TraceSpanStatus(Enum):
    """Outcome recorded on a span before it ends."""

    UNSET = "unset"
    OK = "ok"
    ERROR = "error"


class TraceSpan(ABC):
    """A scoped record of one logical operation.

    Attributes may be added any time before `end()`. The status is set once
    from the outcome, and `end()` closes the span's duration. Spans can be
    used as context managers: leaving the block with an exception marks the
    span as ERROR, and the span is always ended.
    """

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def emit_event(self, name: str, attributes: Mapping[str, str]) -> None:
        """Record a named event with attributes on the span."""

    @abstractmethod
    def set_attribute(self, key: str, value: str) -> None:
        """Attach a single attribute to the span."""

    @abstractmethod
    def set_status(self, status: TraceSpanStatus) -> None:
        """Record the span's outcome."""

    @abstractmethod
    def end(self) -> None:
        """Close the span."""

    def __enter__(self) -> "TraceSpan":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.set_status(TraceSpanStatus.ERROR)
        self.end()


class Tracer(ABC):
    """Factory for spans within one instrumentation scope."""

    @abstractmethod
    def create_span(
        self,
        name: str,
        attributes: Optional[Mapping[str, str]] = None,
        kind: SpanKind = SpanKind.INTERNAL,
    ) -> TraceSpan:
        """Start a new span."""


class TracerProvider(ABC):
    """Entry point to obtain tracers."""

    @abstractmethod
    def get_tracer(
        self, scope: str, attributes: Optional[Mapping[str, str]] = None
    ) -> Tracer:
        """Return a tracer for the given scope."""
