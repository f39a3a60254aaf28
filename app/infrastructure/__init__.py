"""Infrastructure modules for the AWS service clients.

Centralized infrastructure components:
- clients.aws: Imagebuilder, Lightsail and SESv2 clients (AWSClients facade)
- configuration: Settings management (settings, AwsSettings, TelemetrySettings)
- logging: Structured logging (configure_logging, get_module_logger)
- operations: Operation results and error classification
- telemetry: Tracing and metrics facade (TelemetryProvider, Meter, Tracer)
- services: Dependency injection providers (get_settings, get_aws_clients)
"""

# Configuration
from infrastructure.configuration import settings

# Observability
from infrastructure.logging import get_module_logger

# Operations
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    # Configuration
    "settings",
    # Observability
    "get_module_logger",
    # Operations
    "OperationResult",
    "OperationStatus",
]
