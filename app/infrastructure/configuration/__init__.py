"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the service
clients using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    AwsSettings: AWS settings class (for testing)
    TelemetrySettings: Telemetry settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    # Access settings
    aws_region = settings.aws.AWS_REGION
    telemetry_enabled = settings.telemetry.enabled

    # Check environment
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.integrations.aws import AwsSettings
from infrastructure.configuration.infrastructure.telemetry import TelemetrySettings

__all__ = ["Settings", "settings", "AwsSettings", "TelemetrySettings"]
