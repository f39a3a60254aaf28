"""
Dependency injection services.

Provides provider functions returning application-scoped singletons.
"""

from infrastructure.services.providers import (
    get_settings,
    get_telemetry_provider,
    get_aws_clients,
)

__all__ = [
    "get_settings",
    "get_telemetry_provider",
    "get_aws_clients",
]
