"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.telemetry import TelemetrySettings

__all__ = [
    "TelemetrySettings",
]
