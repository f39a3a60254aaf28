"""Timing helpers and metric names used by service clients."""

import time
from typing import Callable, Mapping, TypeVar

import structlog

from infrastructure.telemetry.meter import Meter

logger = structlog.get_logger()

T = TypeVar("T")

CLIENT_DURATION_METRIC = "smithy.client.duration"
RESOLVE_ENDPOINT_DURATION_METRIC = "smithy.client.resolve_endpoint_duration"

RPC_METHOD = "rpc.method"
RPC_SERVICE = "rpc.service"
RPC_SYSTEM = "rpc.system"
RPC_SYSTEM_AWS = "aws-api"


def make_call_with_timing(
    func: Callable[[], T],
    metric_name: str,
    meter: Meter,
    attributes: Mapping[str, str],
    description: str = "",
) -> T:
    """Call `func` and record its duration in milliseconds into a histogram.

    The duration is recorded even when `func` raises. Failures while
    recording are logged and swallowed so they never change the result.

    Args:
        func: Zero-argument callable to time
        metric_name: Histogram name (e.g., CLIENT_DURATION_METRIC)
        meter: Meter used to create the histogram
        attributes: Attributes attached to the sample
        description: Histogram description

    Returns:
        Whatever `func` returns
    """
    started = time.perf_counter()
    try:
        return func()
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        try:
            histogram = meter.create_histogram(metric_name, "ms", description)
            histogram.record(elapsed_ms, dict(attributes))
        except Exception:  # pylint: disable=broad-except
            logger.warning("metric_record_failed", metric=metric_name, exc_info=True)
