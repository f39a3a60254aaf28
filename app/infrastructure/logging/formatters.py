"""Custom log formatters for structured logging.

This module provides formatters that can be used as structlog processors
to customize log output format.

Usage:
    from infrastructure.logging.formatters import add_app_info, mask_sensitive_data

Dependencies:
    - structlog processors
"""

from typing import Any


def add_app_info(app_name: str, app_version: str = "unknown"):
    """Create a processor that adds application info to log entries.

    Args:
        app_name: Name of the application.
        app_version: Version string for the application.

    Returns:
        A structlog processor function.

    Example:
        processors.append(add_app_info("aws-service-clients", settings.GIT_SHA))
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["app_name"] = app_name
        event_dict["app_version"] = app_version
        return event_dict

    return processor


# Sensitive field patterns that should be masked in logs
SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "authorization",
        "credential",
        "private_key",
        "access_key",
        "session_id",
        "cookie",
        "signature",
        "x-amz-security-token",
    }
)


def _mask(value: Any, patterns: frozenset[str], mask_value: str) -> Any:
    if not isinstance(value, dict):
        return value
    masked = {}
    for key, inner in value.items():
        key_lower = str(key).lower()
        if inner is not None and any(pattern in key_lower for pattern in patterns):
            masked[key] = mask_value
        else:
            masked[key] = _mask(inner, patterns, mask_value)
    return masked


def mask_sensitive_data(
    mask_value: str = "***REDACTED***",
    additional_patterns: frozenset[str] | None = None,
):
    """Create a processor that masks sensitive data in log entries.

    Automatically detects and masks values for keys that contain
    sensitive patterns (case-insensitive matching). Nested dicts, such as
    logged HTTP headers, are masked recursively.

    Args:
        mask_value: The string to replace sensitive values with.
        additional_patterns: Extra patterns to consider sensitive.

    Returns:
        A structlog processor function.

    Example:
        processors.append(mask_sensitive_data(additional_patterns={"x-api-key"}))
    """
    patterns = SENSITIVE_PATTERNS
    if additional_patterns:
        patterns = patterns | additional_patterns

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        return _mask(event_dict, patterns, mask_value)

    return processor


def truncate_large_values(max_length: int = 500):
    """Create a processor that truncates overly large string values.

    Prevents log explosion from large response bodies being logged.

    Args:
        max_length: Maximum string length before truncation.

    Returns:
        A structlog processor function.

    Example:
        processors.append(truncate_large_values(max_length=1000))
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    value[:max_length] + f"...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
