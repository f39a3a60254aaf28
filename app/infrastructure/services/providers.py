"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.clients.aws import AWSClients
from infrastructure.configuration import Settings
from infrastructure.telemetry import TelemetryProvider


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process,
    even if called from multiple packages.

    Usage:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_telemetry_provider() -> TelemetryProvider:
    """
    Get application-scoped telemetry provider singleton.

    The OpenTelemetry backend is only imported when TELEMETRY_ENABLED is true
    and TELEMETRY_BACKEND is 'opentelemetry'; otherwise spans and metrics are
    discarded.

    Returns:
        TelemetryProvider: Shared by every service client.
    """
    telemetry = get_settings().telemetry
    if telemetry.enabled and telemetry.backend == "opentelemetry":
        from infrastructure.telemetry.otel import build_opentelemetry_provider

        return build_opentelemetry_provider()
    return TelemetryProvider.noop()


@lru_cache
def get_aws_clients() -> AWSClients:
    """Provider for AWS clients facade with all service operations.

    Returns a fully-configured AWSClients facade with region, endpoint and
    role settings from application configuration. The facade composes the
    Imagebuilder, Lightsail and SESv2 clients with a shared SessionProvider,
    HTTP transport and telemetry provider.

    Credentials are read from the session on every call, so caching this
    facade is safe.

    Returns:
        AWSClients: Configured facade instance for all AWS service calls

    Usage:
        aws = get_aws_clients()
        result = aws.sesv2.create_contact_list(ContactListName="newsletter")
        if result.is_success:
            return result.data
    """
    settings = get_settings()
    return AWSClients(
        aws_settings=settings.aws,
        telemetry_provider=get_telemetry_provider(),
    )
