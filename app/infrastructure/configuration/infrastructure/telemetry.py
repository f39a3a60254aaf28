"""Telemetry infrastructure settings."""

from typing import Literal

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class TelemetrySettings(InfrastructureSettings):
    """Telemetry configuration for service client tracing and metrics.

    Environment Variables:
        TELEMETRY_ENABLED: Emit spans and duration metrics (default: False)
        TELEMETRY_BACKEND: 'noop' or 'opentelemetry' (default: noop)

    Backends:
        - noop: Spans and instruments are created and discarded
        - opentelemetry: Spans and metrics go to the globally registered
          OpenTelemetry providers; exporters are configured by the host
          application

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.telemetry.enabled:
            backend = settings.telemetry.backend
        ```
    """

    enabled: bool = Field(
        default=False,
        alias="TELEMETRY_ENABLED",
        description="Emit spans and duration metrics for service operations",
    )
    backend: Literal["noop", "opentelemetry"] = Field(
        default="noop",
        alias="TELEMETRY_BACKEND",
        description="Telemetry backend: 'noop' or 'opentelemetry'",
    )
